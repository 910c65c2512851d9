from decimal import Decimal

import pytest
from pydantic import ValidationError

from dcf_engine.errors import InvalidMoneyError, NumericOverflowError
from dcf_engine.models.money import MICRO_MAX, MICRO_MIN, Money


def test_from_string_parses_signed_integer():
    assert Money.from_string("-100000000").micro == -100_000_000
    assert Money.from_string("+42").micro == 42
    assert Money.from_string("0").micro == 0


@pytest.mark.parametrize(
    "raw",
    ["", "1.5", "abc", " 1", "1 ", "1_000", "0x10", "1e6", "1\n", "--1", str(MICRO_MAX + 1), str(MICRO_MIN - 1)],
)
def test_from_string_rejects_non_integers_and_overflow(raw):
    with pytest.raises(InvalidMoneyError) as exc_info:
        Money.from_string(raw)
    assert exc_info.value.raw == raw
    assert str(exc_info.value) == f"invalid money amount: {raw}"


def test_from_string_accepts_range_limits():
    assert Money.from_string(str(MICRO_MAX)).micro == MICRO_MAX
    assert Money.from_string(str(MICRO_MIN)).micro == MICRO_MIN


@pytest.mark.parametrize("micro", [0, 1, -1, 999_999, -1_000_001, 123_456_789_012, MICRO_MAX, MICRO_MIN])
def test_decimal_round_trip_is_exact(micro):
    money = Money.from_string(str(micro))
    assert Money.from_decimal(money.to_decimal()) == money


def test_to_decimal_scales_by_micro():
    assert Money.from_micros(-2_500_000).to_decimal() == Decimal("-2.5")
    assert Money.from_micros(1).to_decimal() == Decimal("0.000001")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("0.0000005", 1),
        ("-0.0000005", -1),
        ("0.0000015", 2),
        ("0.0000025", 3),
        ("-0.0000025", -3),
        ("0.00000049", 0),
        ("1.2345674", 1_234_567),
        ("1.2345675", 1_234_568),
    ],
)
def test_from_decimal_rounds_midpoints_away_from_zero(value, expected):
    assert Money.from_decimal(Decimal(value)).micro == expected


@pytest.mark.parametrize(
    "value",
    [
        Decimal(f"{MICRO_MAX + 1}E-6"),
        Decimal(f"{MICRO_MIN - 1}E-6"),
        Decimal("1E+100"),
        Decimal("Infinity"),
        Decimal("NaN"),
    ],
)
def test_from_decimal_overflow(value):
    with pytest.raises(NumericOverflowError):
        Money.from_decimal(value)


def test_wire_form_is_integer_string():
    money = Money.from_micros(5)
    assert money.model_dump() == {"micro": "5"}
    assert Money.model_validate({"micro": "12"}).micro == 12


def test_bad_micro_string_raises_invalid_money_through_validation():
    with pytest.raises(InvalidMoneyError):
        Money.model_validate({"micro": "12.5"})


def test_non_string_micro_is_a_shape_error():
    with pytest.raises(ValidationError):
        Money.model_validate({"micro": 1.5})
    with pytest.raises(ValidationError):
        Money.model_validate({"micro": True})


def test_from_number_and_to_number():
    assert Money.from_number(-100.0).micro == -100_000_000
    assert Money.from_number(12.345678).micro == 12_345_678
    assert Money.from_micros(-2_500_000).to_number() == -2.5
    assert Money.zero().micro == 0


def test_from_number_rejects_non_finite():
    with pytest.raises(InvalidMoneyError):
        Money.from_number(float("nan"))


def test_money_is_immutable():
    money = Money.from_micros(1)
    with pytest.raises(ValidationError):
        money.micro = 2
