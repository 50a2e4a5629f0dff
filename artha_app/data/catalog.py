"""
Instrument catalog for the Indian market.

Risk, liquidity and tax characteristics are static per instrument; only
the nominal rate changes between requests and is supplied separately by
a rate provider.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from ..models.investments import InstrumentId, InstrumentQuote


@dataclass(frozen=True)
class InstrumentProfile:
    """Static characteristics of an instrument."""
    display_name: str
    risk_level: int
    liquidity_level: int
    tax_note: str


DEFAULT_CATALOG: dict[InstrumentId, InstrumentProfile] = {
    InstrumentId.NIFTY50: InstrumentProfile(
        display_name="Stocks (Nifty 50)",
        risk_level=8,
        liquidity_level=9,
        tax_note=("Long-term capital gains (>1 year) taxed at 10% above ₹1 lakh. "
                  "Short-term gains taxed as per income slab."),
    ),
    InstrumentId.SENSEX: InstrumentProfile(
        display_name="Stocks (Sensex)",
        risk_level=7,
        liquidity_level=9,
        tax_note=("Long-term capital gains (>1 year) taxed at 10% above ₹1 lakh. "
                  "Short-term gains taxed as per income slab."),
    ),
    InstrumentId.EQUITY_MF: InstrumentProfile(
        display_name="Equity Mutual Funds",
        risk_level=7,
        liquidity_level=8,
        tax_note=("Long-term capital gains (>1 year) taxed at 10% above ₹1 lakh. "
                  "Short-term gains taxed at 15%."),
    ),
    InstrumentId.DEBT_MF: InstrumentProfile(
        display_name="Debt Mutual Funds",
        risk_level=3,
        liquidity_level=7,
        tax_note=("Long-term capital gains (>3 years) taxed at 20% with indexation. "
                  "Short-term gains taxed as per income slab."),
    ),
    InstrumentId.HYBRID_MF: InstrumentProfile(
        display_name="Hybrid Mutual Funds",
        risk_level=5,
        liquidity_level=7,
        tax_note=("Taxation depends on equity-debt allocation. "
                  "Funds with more than 65% equity follow equity taxation rules."),
    ),
    InstrumentId.REAL_ESTATE: InstrumentProfile(
        display_name="Real Estate",
        risk_level=6,
        liquidity_level=3,
        tax_note=("Long-term capital gains (>2 years) taxed at 20% with indexation benefits. "
                  "Short-term gains as per income slab."),
    ),
    InstrumentId.FIXED_DEPOSIT: InstrumentProfile(
        display_name="Fixed Deposit",
        risk_level=1,
        liquidity_level=5,       # Penalties on early withdrawal
        tax_note=("Interest is fully taxable as per income slab. TDS applies when "
                  "interest exceeds ₹40,000 (₹50,000 for senior citizens)."),
    ),
    InstrumentId.GOLD: InstrumentProfile(
        display_name="Gold",
        risk_level=4,
        liquidity_level=7,
        tax_note=("Long-term capital gains (>3 years) taxed at 20% with indexation. "
                  "Gold ETFs and funds follow the same rules as physical gold."),
    ),
    InstrumentId.PPF: InstrumentProfile(
        display_name="Public Provident Fund (PPF)",
        risk_level=2,
        liquidity_level=4,       # Restricted withdrawals
        tax_note=("Interest and maturity amount are tax-free. "
                  "Contributions qualify for deduction under Section 80C."),
    ),
    InstrumentId.NPS: InstrumentProfile(
        display_name="National Pension System (NPS)",
        risk_level=4,
        liquidity_level=2,       # Locked until retirement
        tax_note=("Deduction up to ₹1.5 lakh under Sec 80C plus ₹50,000 under "
                  "Sec 80CCD(1B). Partial tax benefits on maturity."),
    ),
}


def load_catalog(config_loader: Optional[Any] = None) -> dict[InstrumentId, InstrumentProfile]:
    """
    Build the instrument catalog, applying per-instrument YAML overrides.

    Args:
        config_loader: Optional ConfigLoader providing instruments.yaml overrides

    Returns:
        Mapping of instrument to its profile
    """
    if config_loader is None:
        return dict(DEFAULT_CATALOG)

    catalog = {}
    for instrument_id, profile in DEFAULT_CATALOG.items():
        overrides = config_loader.load_instrument_config(instrument_id.value)
        known = {k: v for k, v in overrides.items() if k in profile.__dataclass_fields__}
        catalog[instrument_id] = replace(profile, **known) if known else profile
    return catalog


def build_quote(
    instrument_id: InstrumentId,
    nominal_rate_percent: float,
    catalog: Optional[dict[InstrumentId, InstrumentProfile]] = None,
) -> InstrumentQuote:
    """Combine a nominal rate with the instrument's catalog profile."""
    profile = (catalog or DEFAULT_CATALOG)[instrument_id]
    return InstrumentQuote(
        instrument_id=instrument_id,
        nominal_rate_percent=nominal_rate_percent,
        risk_level=profile.risk_level,
        liquidity_level=profile.liquidity_level,
        tax_note=profile.tax_note,
    )


def display_name(
    instrument_id: InstrumentId,
    catalog: Optional[dict[InstrumentId, InstrumentProfile]] = None,
) -> str:
    """Human-readable instrument name."""
    return (catalog or DEFAULT_CATALOG)[instrument_id].display_name
