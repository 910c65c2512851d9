import io
import logging
import uuid

import pytest

from dcf_engine.config import EngineConfig, reset_config
from dcf_engine.logger import StructuredLogger
from dcf_engine.models import Cashflow, Compounding, Money, ValuationInput
from dcf_engine.services.valuation_service import ValuationService

AS_OF = 18_250  # 2019-12-20


def build_input(flows, bps=800, compounding=Compounding.ANNUAL, as_of=AS_OF):
    """flows: iterable of (epoch_day, amount_in_units)."""
    return ValuationInput(
        cashflows=tuple(
            Cashflow(date_epoch_days=day, amount=Money.from_number(units)) for day, units in flows
        ),
        discount_rate_bps=bps,
        compounding=compounding,
        as_of_epoch_days=as_of,
    )


@pytest.fixture
def make_input():
    return build_input


@pytest.fixture
def sample_input():
    # Classic project: invest 100, receive 60 after one and two years.
    return build_input([(AS_OF, -100.0), (AS_OF + 365, 60.0), (AS_OF + 730, 60.0)])


@pytest.fixture
def sample_document():
    return {
        "cashflows": [
            {"dateEpochDays": AS_OF, "amount": {"micro": "-100000000"}},
            {"dateEpochDays": AS_OF + 365, "amount": {"micro": "60000000"}},
            {"dateEpochDays": AS_OF + 730, "amount": {"micro": "60000000"}},
        ],
        "discountRateBps": 800,
        "compounding": "annual",
        "asOfEpochDays": AS_OF,
    }


@pytest.fixture
def all_positive_input():
    return build_input([(AS_OF, 10.0), (AS_OF + 365, 20.0)])


@pytest.fixture
def empty_input():
    return build_input([])


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def engine_config():
    return EngineConfig(_env_file=None)


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def structured_logger(log_stream):
    return StructuredLogger(
        name=f"dcf_engine.test.{uuid.uuid4().hex}",
        level=logging.DEBUG,
        stream=log_stream,
        log_file="",
    )


@pytest.fixture
def valuation_service(structured_logger, engine_config):
    return ValuationService(logger=structured_logger, config=engine_config)
