"""Caching and fallback wrappers around rate providers."""

import time
from typing import Callable, Optional

from ..errors import RateFetchError
from ..logging.config import get_rates_logger, log_rate_source
from .base import Quotes, RateProvider

logger = get_rates_logger(__name__)


class CachedRateProvider(RateProvider):
    """Reuses the wrapped provider's quotes until the TTL expires."""

    def __init__(
        self,
        provider: RateProvider,
        ttl_seconds: float = 1800.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.provider = provider
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.name = f"cached:{provider.name}"
        self._quotes: Optional[Quotes] = None
        self._fetched_at = 0.0

    def get_quotes(self) -> Quotes:
        now = self.clock()
        if self._quotes is not None and now - self._fetched_at < self.ttl_seconds:
            logger.debug("Serving cached quotes", age_seconds=now - self._fetched_at)
            return dict(self._quotes)

        quotes = self.provider.get_quotes()
        self._quotes = dict(quotes)
        self._fetched_at = now
        return dict(quotes)

    def invalidate(self) -> None:
        """Drop cached quotes so the next call refetches."""
        self._quotes = None


class FallbackRateProvider(RateProvider):
    """Returns the primary provider's quotes, or the fallback's when it fails."""

    def __init__(self, primary: RateProvider, fallback: RateProvider):
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}|{fallback.name}"
        self.last_source: Optional[str] = None

    def get_quotes(self) -> Quotes:
        try:
            quotes = self.primary.get_quotes()
        except RateFetchError as e:
            quotes = self.fallback.get_quotes()
            self.last_source = self.fallback.name
            log_rate_source(logger, self.fallback.name, len(quotes), fallback=True, reason=str(e))
            return quotes

        self.last_source = self.primary.name
        log_rate_source(logger, self.primary.name, len(quotes), fallback=False)
        return quotes
