"""
Investment comparison service.

Coordinates a comparison request end to end:
Payload → Request → Quotes → Projection & Ranking → Chart / Summary
"""

from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.catalog import load_catalog
from .data.request_parser import parse_projection_request
from .errors import InputValidationError, SummaryGenerationError
from .logging.config import log_comparison
from .models.investments import ProjectionRequest, RankedComparison
from .narrative.summary import FALLBACK_SUMMARY, SummaryGenerator
from .presentation.serializers import comparison_to_dict
from .projection.comparator import compare
from .rates.base import Quotes, RateProvider
from .rates.fallback import CachedRateProvider, FallbackRateProvider
from .rates.market_provider import MarketRateProvider
from .rates.static_provider import StaticRateProvider

logger = structlog.get_logger(__name__)


class InvestmentComparisonService:
    """
    Entry point for investment comparisons.

    The projection engine stays pure; this façade owns everything with
    side effects: fetching rates, logging and the narrative call.
    """

    def __init__(
        self,
        rate_provider: Optional[RateProvider] = None,
        summary_generator: Optional[SummaryGenerator] = None,
        config: Optional[DefaultConfig] = None,
        config_dir: Optional[Path] = None,
    ) -> None:
        """Initialize the comparison service."""
        self.logger = logger

        loader = ConfigLoader.create(config_dir)
        self.config = config or loader.load()
        self.catalog = load_catalog(loader)

        self.rate_provider = rate_provider or self._default_rate_provider()
        self.summary_generator = summary_generator or SummaryGenerator(
            self.config.summary, catalog=self.catalog
        )

        self.logger.info(
            "Investment comparison service initialized",
            rate_provider=self.rate_provider.name,
        )

    def _default_rate_provider(self) -> RateProvider:
        """Live rates cached for the configured TTL, falling back to constants."""
        live = CachedRateProvider(
            MarketRateProvider(self.config.market_data, catalog=self.catalog),
            ttl_seconds=self.config.cache.ttl_seconds,
        )
        static = StaticRateProvider(self.config.fallback_rates, catalog=self.catalog)
        return FallbackRateProvider(live, static)

    def get_quotes(self) -> Quotes:
        return self.rate_provider.get_quotes()

    def get_rates(self) -> dict[str, float]:
        """Nominal rate per instrument id, as served to the web client."""
        return {
            instrument_id.value: quote.nominal_rate_percent
            for instrument_id, quote in self.get_quotes().items()
        }

    def compare(self, request: ProjectionRequest) -> RankedComparison:
        """Rank the request's instruments using freshly supplied quotes."""
        quotes = self.get_quotes()
        comparison = compare(
            request,
            quotes,
            risk_adjustment_step=self.config.projection.risk_adjustment_step,
        )

        log_comparison(
            self.logger,
            best_instrument=comparison.best.instrument_id.value,
            instrument_count=len(comparison.results),
            horizon_years=request.horizon_years,
            context={"risk_tolerance": request.risk_tolerance},
        )
        return comparison

    def comparison_from_payload(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Parse a raw payload, rank its instruments and serialise the result.

        Raises:
            InvalidInput: The payload is missing fields or has out-of-range values
            UnknownInstrument: A selected instrument is not known
        """
        try:
            request = parse_projection_request(
                payload,
                default_compounding=self.config.projection.compounding_frequency,
                max_horizon_years=self.config.projection.max_horizon_years,
            )
        except InputValidationError as e:
            self.logger.warning("Rejected comparison request", error=str(e), context=e.context)
            raise

        comparison = self.compare(request)
        return comparison_to_dict(request, comparison, self.catalog)

    def summarize(self, request: ProjectionRequest, comparison: RankedComparison) -> str:
        """Narrative summary of a comparison, or a fixed apology when generation fails."""
        try:
            return self.summary_generator.generate(request, comparison)
        except SummaryGenerationError as e:
            self.logger.warning(
                "Summary generation failed, using fallback text",
                error=str(e),
                models=e.models,
            )
            return FALLBACK_SUMMARY
