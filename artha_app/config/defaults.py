"""Default configuration parameters for the investment comparison engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectionParams:
    """Projection and risk adjustment parameters."""
    compounding_frequency: int = 1                   # Compounding periods per year
    risk_adjustment_step: float = 0.01               # Rate scale per risk point of mismatch
    max_horizon_years: int = 50                      # Longest supported projection


@dataclass(frozen=True)
class FallbackRates:
    """Nominal annual rates (percent) used when live rates are unavailable."""
    nifty50: float = 12.5
    sensex: float = 12.0
    equity_mf: float = 11.0
    debt_mf: float = 6.5
    hybrid_mf: float = 8.0
    real_estate: float = 7.5
    fixed_deposit: float = 6.0
    gold: float = 8.0
    ppf: float = 7.1
    nps: float = 9.0


@dataclass(frozen=True)
class MarketDataParams:
    """Live market rate retrieval parameters."""
    base_url: str = "http://api.marketstack.com/v1/eod"
    api_key_env: str = "MARKETSTACK_API_KEY"
    timeout_seconds: int = 10
    lookback_points: int = 5                         # EOD closes requested per symbol
    trading_days: int = 250                          # Annualisation factor

    # Symbols and the base return added to the annualised recent move
    nifty50_symbol: str = "NSEI.INDX"
    sensex_symbol: str = "SENSEX.INDX"
    gold_symbol: str = "GOLDBEES.XNSE"
    index_base_pct: float = 11.0
    gold_base_pct: float = 8.0

    # Used per symbol when the feed returns too few closes
    nifty50_fallback_pct: float = 11.8
    sensex_fallback_pct: float = 11.5
    gold_fallback_pct: float = 8.0

    # Rates without a public feed
    fixed_deposit_pct: float = 5.75
    ppf_pct: float = 7.1
    real_estate_pct: float = 8.2

    # Derived rate relationships
    equity_mf_to_nifty: float = 0.92
    debt_mf_to_fd: float = 1.15
    hybrid_equity_weight: float = 0.65
    nps_equity_weight: float = 0.6


@dataclass(frozen=True)
class CacheParams:
    """Quote cache parameters."""
    ttl_seconds: float = 1800.0


@dataclass(frozen=True)
class SummaryParams:
    """Narrative generation parameters."""
    models: tuple = ("gemini-2.0-flash", "gemini-1.5-flash", "gemini-1.5-flash-8b")
    api_key_env: str = "GEMINI_API_KEY"
    max_words: int = 150


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    projection: ProjectionParams
    fallback_rates: FallbackRates
    market_data: MarketDataParams
    cache: CacheParams
    summary: SummaryParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        projection=ProjectionParams(),
        fallback_rates=FallbackRates(),
        market_data=MarketDataParams(),
        cache=CacheParams(),
        summary=SummaryParams(),
    )
