"""Live investment rates derived from marketstack end-of-day prices."""

import json
import os
import socket
from http.client import HTTPException
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from ..config.defaults import MarketDataParams
from ..data.catalog import InstrumentProfile, build_quote
from ..errors import RateFetchError
from ..logging.config import get_rates_logger
from ..models.investments import InstrumentId
from .base import Quotes, RateProvider

logger = get_rates_logger(__name__)


class MarketRateProvider(RateProvider):
    """
    Builds quotes from recent index and gold ETF closes.

    Nifty 50, Sensex and gold rates annualise the move across the last
    few closes and add a long-run base return. Mutual fund and NPS rates
    are derived from those, while FD, PPF and real estate rates come from
    configuration since they have no public price feed.
    """

    name = "marketstack"

    def __init__(
        self,
        params: Optional[MarketDataParams] = None,
        api_key: Optional[str] = None,
        catalog: Optional[dict[InstrumentId, InstrumentProfile]] = None,
    ):
        self.params = params or MarketDataParams()
        self.api_key = api_key if api_key is not None else os.environ.get(self.params.api_key_env, "")
        self.catalog = catalog

    def get_quotes(self) -> Quotes:
        if not self.api_key:
            raise RateFetchError(
                f"{self.params.api_key_env} is not set",
                source=self.name,
            )

        p = self.params
        failures: list[RateFetchError] = []
        nifty50 = self._symbol_rate(p.nifty50_symbol, p.index_base_pct, p.nifty50_fallback_pct, failures)
        sensex = self._symbol_rate(p.sensex_symbol, p.index_base_pct, p.sensex_fallback_pct, failures)
        gold = self._symbol_rate(p.gold_symbol, p.gold_base_pct, p.gold_fallback_pct, failures)

        # Nothing live left to report
        if len(failures) == 3:
            raise RateFetchError(
                "Every market symbol failed to fetch",
                source=self.name,
                context={"symbols": [e.symbol for e in failures]},
            ) from failures[-1]

        fixed_deposit = p.fixed_deposit_pct
        equity_mf = nifty50 * p.equity_mf_to_nifty
        debt_mf = fixed_deposit * p.debt_mf_to_fd
        hybrid_mf = equity_mf * p.hybrid_equity_weight + debt_mf * (1 - p.hybrid_equity_weight)
        nps = equity_mf * p.nps_equity_weight + debt_mf * (1 - p.nps_equity_weight)

        rates = {
            InstrumentId.NIFTY50: nifty50,
            InstrumentId.SENSEX: sensex,
            InstrumentId.EQUITY_MF: equity_mf,
            InstrumentId.DEBT_MF: debt_mf,
            InstrumentId.HYBRID_MF: hybrid_mf,
            InstrumentId.REAL_ESTATE: p.real_estate_pct,
            InstrumentId.FIXED_DEPOSIT: fixed_deposit,
            InstrumentId.GOLD: gold,
            InstrumentId.PPF: p.ppf_pct,
            InstrumentId.NPS: nps,
        }

        return {
            instrument_id: build_quote(instrument_id, round(rate, 2), self.catalog)
            for instrument_id, rate in rates.items()
        }

    def _symbol_rate(
        self,
        symbol: str,
        base_pct: float,
        fallback_pct: float,
        failures: list[RateFetchError],
    ) -> float:
        """Live rate for one symbol, or its fallback rate when the fetch fails."""
        try:
            return self._annualised_rate(symbol, base_pct, fallback_pct)
        except RateFetchError as e:
            failures.append(e)
            logger.warning(
                "Market fetch failed, using fallback rate",
                symbol=symbol,
                error=str(e),
                fallback_pct=fallback_pct
            )
            return fallback_pct

    def _annualised_rate(self, symbol: str, base_pct: float, fallback_pct: float) -> float:
        """Annualise the move between the oldest and latest close and add the base return."""
        closes = self._fetch_closes(symbol)

        if len(closes) < 2:
            logger.warning(
                "Too few closes to annualise, using fallback rate",
                symbol=symbol,
                closes=len(closes),
                fallback_pct=fallback_pct
            )
            return fallback_pct

        latest, previous = closes[0], closes[-1]
        if previous <= 0:
            raise RateFetchError(
                f"Non-positive close price for {symbol}",
                source=self.name,
                symbol=symbol,
            )

        period_return = (latest - previous) / previous
        return round(period_return * self.params.trading_days + base_pct, 2)

    def _fetch_closes(self, symbol: str) -> list[float]:
        """Fetch recent closes for a symbol, newest first."""
        query = urlencode({
            "access_key": self.api_key,
            "symbols": symbol,
            "limit": self.params.lookback_points,
        })
        req = Request(
            f"{self.params.base_url}?{query}",
            headers={"Accept": "application/json", "User-Agent": "artha-app/0.1"},
            method="GET",
        )

        try:
            with urlopen(req, timeout=self.params.timeout_seconds) as response:
                payload = json.loads(response.read().decode("utf-8"))

        except HTTPError as e:
            raise RateFetchError(
                f"HTTP {e.code} fetching {symbol}",
                source=self.name,
                symbol=symbol,
                context={"status": e.code},
            ) from e

        except (OSError, URLError, socket.timeout, HTTPException) as e:
            raise RateFetchError(
                f"Network error fetching {symbol}: {e}",
                source=self.name,
                symbol=symbol,
            ) from e

        except ValueError as e:
            raise RateFetchError(
                f"Malformed response for {symbol}",
                source=self.name,
                symbol=symbol,
            ) from e

        return self._parse_closes(payload, symbol)

    def _parse_closes(self, payload: Any, symbol: str) -> list[float]:
        rows = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(rows, list):
            raise RateFetchError(
                f"Response for {symbol} has no data list",
                source=self.name,
                symbol=symbol,
            )

        try:
            return [float(row["close"]) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            raise RateFetchError(
                f"Response for {symbol} has an invalid close price",
                source=self.name,
                symbol=symbol,
            ) from e
