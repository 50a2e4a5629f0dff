"""Pytest configuration and shared fixtures."""

import pytest

from artha_app.models.investments import InstrumentId, InstrumentQuote, ProjectionRequest
from artha_app.rates.static_provider import StaticRateProvider


@pytest.fixture
def fallback_quotes() -> dict[InstrumentId, InstrumentQuote]:
    """Deterministic quotes for every instrument."""
    return StaticRateProvider().get_quotes()


@pytest.fixture
def two_instrument_quotes() -> dict[InstrumentId, InstrumentQuote]:
    """A high-risk 12% instrument and a low-risk 6% instrument."""
    return {
        InstrumentId.NIFTY50: InstrumentQuote(
            instrument_id=InstrumentId.NIFTY50,
            nominal_rate_percent=12.0,
            risk_level=8,
            liquidity_level=9,
        ),
        InstrumentId.FIXED_DEPOSIT: InstrumentQuote(
            instrument_id=InstrumentId.FIXED_DEPOSIT,
            nominal_rate_percent=6.0,
            risk_level=1,
            liquidity_level=5,
        ),
    }


@pytest.fixture
def sample_request() -> ProjectionRequest:
    """Default comparison from the web client."""
    return ProjectionRequest(
        principal=100000,
        horizon_years=10,
        risk_tolerance=5,
        selected_instrument_ids=(
            InstrumentId.NIFTY50,
            InstrumentId.EQUITY_MF,
            InstrumentId.FIXED_DEPOSIT,
        ),
    )


@pytest.fixture
def sample_payload() -> dict:
    """Raw comparison payload as posted by the web client."""
    return {
        "investmentAmount": 100000,
        "duration": 10,
        "riskTolerance": 5,
        "selectedInvestments": ["nifty50", "equityMF", "fixedDeposit"],
    }
