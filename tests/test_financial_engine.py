from decimal import Decimal

import pytest

from dcf_engine.errors import IrrNotFoundError, NumericOverflowError
from dcf_engine.models import Compounding, ValuationOutput
from dcf_engine.services.financial_engine import (
    IRR_LOWER_BOUND,
    IRR_UPPER_BOUND,
    calculate_irr,
    calculate_irr_bps,
    calculate_npv,
    calculate_valuation,
    rate_to_bps,
    solve_irr_rate,
)
from tests.conftest import AS_OF, build_input


def _float_npv(flows, annual_rate, as_of, periods_per_year):
    step = 365.0 / periods_per_year
    base = 1.0 + annual_rate / periods_per_year
    return sum(amount / base ** ((day - as_of) / step) for day, amount in flows)


class TestNpv:
    def test_sample_schedule_at_800_bps(self, sample_input):
        output = calculate_valuation(sample_input)
        assert output.npv.micro == 6_995_885
        assert output.npv.micro > 0

    def test_zero_rate_is_plain_sum(self, sample_input):
        assert calculate_npv(sample_input, 0.0) == Decimal(20)

    @pytest.mark.parametrize("rate", [0.0, 0.08, 3.0, -5.0])
    def test_empty_schedule_is_zero_at_any_rate(self, empty_input, rate):
        assert calculate_npv(empty_input, rate) == Decimal(0)

    def test_flow_before_as_of_is_compounded_forward(self):
        engine_input = build_input([(AS_OF - 365, 100.0)], bps=1000)
        assert calculate_valuation(engine_input).npv.micro == 110_000_000

    def test_monthly_compounding(self):
        engine_input = build_input(
            [(AS_OF + 365, 100.0)], bps=1200, compounding=Compounding.MONTHLY,
        )
        npv = calculate_valuation(engine_input).npv.to_number()
        assert npv == pytest.approx(100.0 / 1.01 ** 12, abs=1e-6)

    def test_result_is_independent_of_schedule_order(self):
        flows = [(AS_OF, -100.0), (AS_OF + 365, 60.0), (AS_OF + 730, 60.0)]
        forward = calculate_valuation(build_input(flows))
        backward = calculate_valuation(build_input(list(reversed(flows))))
        assert forward == backward

    @pytest.mark.parametrize("rate", [-1.0, -2.5])
    def test_non_positive_discount_base_overflows(self, sample_input, rate):
        with pytest.raises(NumericOverflowError):
            calculate_npv(sample_input, rate)

    def test_non_positive_monthly_base_overflows(self):
        engine_input = build_input([(AS_OF + 30, 1.0)], compounding=Compounding.MONTHLY)
        with pytest.raises(NumericOverflowError):
            calculate_npv(engine_input, -12.0)

    def test_monthly_scenario_matches_float_reference(self):
        flows = [
            (19_000, -500.0),
            (19_031, 60.0),
            (19_061, 60.0),
            (19_092, 60.0),
            (19_122, 60.0),
            (19_153, 60.0),
            (19_184, 260.0),
        ]
        engine_input = build_input(flows, bps=400, compounding=Compounding.MONTHLY, as_of=19_000)
        output = calculate_valuation(engine_input)

        assert output.npv.to_number() == pytest.approx(_float_npv(flows, 0.04, 19_000, 12), abs=1e-5)
        assert output.irr_bps is not None and output.irr_bps > 400
        rate = solve_irr_rate(engine_input)
        assert abs(calculate_npv(engine_input, rate)) < Decimal("1E-6")


class TestIrr:
    def test_sample_schedule_irr(self, sample_input):
        assert calculate_irr(sample_input) == 1307

    def test_raw_root_zeroes_npv(self, sample_input):
        rate = solve_irr_rate(sample_input)
        assert rate is not None
        assert IRR_LOWER_BOUND < rate < IRR_UPPER_BOUND
        assert rate > 0
        assert abs(calculate_npv(sample_input, rate)) < Decimal("1E-6")

    def test_negative_irr(self):
        engine_input = build_input([(AS_OF, -100.0), (AS_OF + 365, 90.0)])
        assert calculate_irr(engine_input) == -1000

    def test_all_positive_has_no_irr(self, all_positive_input):
        assert calculate_irr(all_positive_input) is None

    def test_all_negative_has_no_irr(self):
        engine_input = build_input([(AS_OF, -10.0), (AS_OF + 365, -20.0)])
        assert calculate_irr(engine_input) is None

    def test_empty_schedule_has_no_irr(self, empty_input):
        assert solve_irr_rate(empty_input) is None
        assert calculate_irr(empty_input) is None

    def test_extreme_horizon_overflows_instead_of_returning_none(self):
        engine_input = build_input([(AS_OF, -100.0), (AS_OF + 365 * 400, 100.0)])
        with pytest.raises(NumericOverflowError):
            calculate_irr(engine_input)

    def test_irr_is_deterministic(self, sample_input):
        results = {calculate_irr(sample_input) for _ in range(5)}
        assert results == {1307}

    def test_calculate_irr_bps_raises_when_no_root(self, all_positive_input):
        with pytest.raises(IrrNotFoundError) as exc_info:
            calculate_irr_bps(all_positive_input)
        assert str(exc_info.value) == "IRR not found"

    def test_calculate_irr_bps_returns_value(self, sample_input):
        assert calculate_irr_bps(sample_input) == 1307


@pytest.mark.parametrize(
    ("rate", "expected"),
    [
        (0.130662, 1307),
        (-0.1, -1000),
        (0.00005, 1),
        (-0.00005, -1),
        (1e12, 2_147_483_647),
        (-1e12, -2_147_483_648),
        (float("nan"), 0),
    ],
)
def test_rate_to_bps(rate, expected):
    assert rate_to_bps(rate) == expected


def test_valuation_combines_npv_and_irr(sample_input):
    output = calculate_valuation(sample_input)
    assert isinstance(output, ValuationOutput)
    assert output.npv.micro == 6_995_885
    assert output.irr_bps == 1307


def test_valuation_without_irr_keeps_npv(all_positive_input):
    output = calculate_valuation(all_positive_input)
    assert output.irr_bps is None
    assert output.npv.micro > 0
