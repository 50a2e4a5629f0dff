"""Rate provider backed by configured fallback constants."""

from dataclasses import asdict
from typing import Optional

from ..config.defaults import FallbackRates
from ..data.catalog import InstrumentProfile, build_quote
from ..models.investments import InstrumentId
from .base import Quotes, RateProvider


class StaticRateProvider(RateProvider):
    """Deterministic quotes built from FallbackRates and the instrument catalog."""

    name = "static"

    def __init__(
        self,
        rates: Optional[FallbackRates] = None,
        catalog: Optional[dict[InstrumentId, InstrumentProfile]] = None,
    ):
        self.rates = rates or FallbackRates()
        self.catalog = catalog

    def get_quotes(self) -> Quotes:
        table = asdict(self.rates)
        return {
            instrument_id: build_quote(instrument_id, table[instrument_id.config_key], self.catalog)
            for instrument_id in InstrumentId
        }
