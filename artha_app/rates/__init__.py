"""Investment rate supply for the comparison engine"""

from .base import RateProvider
from .fallback import CachedRateProvider, FallbackRateProvider
from .market_provider import MarketRateProvider
from .static_provider import StaticRateProvider

__all__ = [
    "RateProvider",
    "CachedRateProvider",
    "FallbackRateProvider",
    "MarketRateProvider",
    "StaticRateProvider",
]
