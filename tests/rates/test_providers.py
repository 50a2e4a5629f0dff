"""Tests for investment rate providers"""

import io
import json
import socket
from http.client import IncompleteRead
from unittest.mock import Mock, patch
from urllib.error import HTTPError, URLError

import pytest

from artha_app.config.defaults import FallbackRates, MarketDataParams
from artha_app.data.catalog import DEFAULT_CATALOG
from artha_app.errors import RateFetchError
from artha_app.models.investments import InstrumentId
from artha_app.rates import (
    CachedRateProvider,
    FallbackRateProvider,
    MarketRateProvider,
    RateProvider,
    StaticRateProvider,
)

URLOPEN = "artha_app.rates.market_provider.urlopen"


def eod_response(closes):
    """Mock urlopen context manager returning marketstack EOD rows."""
    body = json.dumps({"data": [{"close": c} for c in closes]}).encode("utf-8")
    response = Mock()
    response.read.return_value = body
    response.__enter__ = Mock(return_value=response)
    response.__exit__ = Mock(return_value=False)
    return response


def closes_by_symbol(mapping):
    """urlopen side effect dispatching on the requested symbol."""
    def _open(req, timeout=None):
        for symbol, closes in mapping.items():
            if f"symbols={symbol}" in req.full_url:
                return eod_response(closes)
        raise AssertionError(f"unexpected request {req.full_url}")
    return _open


class TestStaticRateProvider:
    """Test fallback constant quotes"""

    def test_quotes_for_every_instrument(self):
        """Test every instrument is quoted"""
        quotes = StaticRateProvider().get_quotes()
        assert set(quotes) == set(InstrumentId)

    def test_rates_and_catalog_combined(self):
        """Test rates come from FallbackRates and traits from the catalog"""
        quotes = StaticRateProvider(FallbackRates(gold=9.25)).get_quotes()

        gold = quotes[InstrumentId.GOLD]
        assert gold.nominal_rate_percent == 9.25
        assert gold.risk_level == DEFAULT_CATALOG[InstrumentId.GOLD].risk_level
        assert gold.liquidity_level == DEFAULT_CATALOG[InstrumentId.GOLD].liquidity_level
        assert quotes[InstrumentId.NIFTY50].nominal_rate_percent == 12.5

    def test_deterministic(self):
        """Test repeated calls give equal quotes"""
        provider = StaticRateProvider()
        assert provider.get_quotes() == provider.get_quotes()


class TestMarketRateProvider:
    """Test live rate derivation"""

    def test_missing_api_key(self):
        """Test missing key fails before any request"""
        provider = MarketRateProvider(api_key="")
        with patch(URLOPEN) as mock_urlopen:
            with pytest.raises(RateFetchError) as exc_info:
                provider.get_quotes()
        mock_urlopen.assert_not_called()
        assert exc_info.value.source == "marketstack"

    def test_api_key_from_environment(self, monkeypatch):
        """Test key is read from the configured environment variable"""
        monkeypatch.setenv("MARKETSTACK_API_KEY", "env-key")
        assert MarketRateProvider().api_key == "env-key"

    def test_annualised_and_derived_rates(self):
        """Test annualisation and derived rate relationships"""
        params = MarketDataParams()
        provider = MarketRateProvider(params, api_key="key")
        side_effect = closes_by_symbol({
            params.nifty50_symbol: [101.0, 100.5, 100.2, 100.1, 100.0],
            params.sensex_symbol: [99.0, 100.0],
            params.gold_symbol: [50.0, 50.0],
        })

        with patch(URLOPEN, side_effect=side_effect):
            quotes = provider.get_quotes()

        # (101 - 100) / 100 * 250 + 11 = 13.5
        nifty = quotes[InstrumentId.NIFTY50].nominal_rate_percent
        assert nifty == 13.5
        # (99 - 100) / 100 * 250 + 11 = 8.5
        assert quotes[InstrumentId.SENSEX].nominal_rate_percent == 8.5
        assert quotes[InstrumentId.GOLD].nominal_rate_percent == 8.0

        equity = 13.5 * 0.92
        debt = 5.75 * 1.15
        assert quotes[InstrumentId.EQUITY_MF].nominal_rate_percent == round(equity, 2)
        assert quotes[InstrumentId.DEBT_MF].nominal_rate_percent == round(debt, 2)
        assert quotes[InstrumentId.HYBRID_MF].nominal_rate_percent == pytest.approx(
            equity * 0.65 + debt * 0.35, abs=0.006)
        assert quotes[InstrumentId.NPS].nominal_rate_percent == pytest.approx(
            equity * 0.6 + debt * 0.4, abs=0.006)
        assert quotes[InstrumentId.PPF].nominal_rate_percent == 7.1
        assert quotes[InstrumentId.FIXED_DEPOSIT].nominal_rate_percent == 5.75
        assert quotes[InstrumentId.REAL_ESTATE].nominal_rate_percent == 8.2

    def test_too_few_closes_uses_symbol_fallback(self):
        """Test a single close falls back to the per-symbol rate"""
        params = MarketDataParams()
        provider = MarketRateProvider(params, api_key="key")

        with patch(URLOPEN, side_effect=lambda req, timeout=None: eod_response([100.0])):
            quotes = provider.get_quotes()

        assert quotes[InstrumentId.NIFTY50].nominal_rate_percent == params.nifty50_fallback_pct
        assert quotes[InstrumentId.SENSEX].nominal_rate_percent == params.sensex_fallback_pct
        assert quotes[InstrumentId.GOLD].nominal_rate_percent == params.gold_fallback_pct

    def test_request_carries_key_and_limit(self):
        """Test query string and timeout"""
        params = MarketDataParams(timeout_seconds=3)
        provider = MarketRateProvider(params, api_key="secret")

        with patch(URLOPEN, return_value=eod_response([2.0, 1.0])) as mock_urlopen:
            provider.get_quotes()

        req = mock_urlopen.call_args_list[0].args[0]
        assert "access_key=secret" in req.full_url
        assert "limit=5" in req.full_url
        assert mock_urlopen.call_args_list[0].kwargs["timeout"] == 3

    @pytest.mark.parametrize("error", [
        HTTPError("http://x", 429, "Too Many Requests", {}, io.BytesIO(b"")),
        URLError("unreachable"),
        socket.timeout("timed out"),
        ConnectionResetError("reset"),
        BrokenPipeError("broken pipe"),
        IncompleteRead(b""),
    ])
    def test_transport_errors(self, error):
        """Test transport failures on every symbol become RateFetchError"""
        params = MarketDataParams()
        provider = MarketRateProvider(params, api_key="key")
        with patch(URLOPEN, side_effect=error):
            with pytest.raises(RateFetchError) as exc_info:
                provider.get_quotes()

        assert exc_info.value.source == "marketstack"
        assert exc_info.value.context["symbols"] == [
            params.nifty50_symbol, params.sensex_symbol, params.gold_symbol,
        ]
        assert isinstance(exc_info.value.__cause__, RateFetchError)

    def test_connection_reset_wrapped_per_symbol(self):
        """Test a socket error is wrapped with the failing symbol"""
        params = MarketDataParams()
        provider = MarketRateProvider(params, api_key="key")
        with patch(URLOPEN, side_effect=ConnectionResetError("reset")):
            with pytest.raises(RateFetchError) as exc_info:
                provider._fetch_closes(params.gold_symbol)

        assert exc_info.value.symbol == params.gold_symbol
        assert isinstance(exc_info.value.__cause__, ConnectionResetError)

    def test_failed_symbol_uses_its_fallback_rate(self):
        """Test one failing symbol keeps the other live rates"""
        params = MarketDataParams()
        provider = MarketRateProvider(params, api_key="key")
        live = closes_by_symbol({
            params.nifty50_symbol: [101.0, 100.0],
            params.sensex_symbol: [99.0, 100.0],
        })

        def _open(req, timeout=None):
            if f"symbols={params.gold_symbol}" in req.full_url:
                raise ConnectionResetError("reset")
            return live(req, timeout)

        with patch(URLOPEN, side_effect=_open):
            quotes = provider.get_quotes()

        assert quotes[InstrumentId.NIFTY50].nominal_rate_percent == 13.5
        assert quotes[InstrumentId.SENSEX].nominal_rate_percent == 8.5
        assert quotes[InstrumentId.GOLD].nominal_rate_percent == params.gold_fallback_pct

    def test_non_positive_close_uses_symbol_fallback(self):
        """Test a zero oldest close falls back for that symbol only"""
        params = MarketDataParams()
        provider = MarketRateProvider(params, api_key="key")
        side_effect = closes_by_symbol({
            params.nifty50_symbol: [101.0, 100.0],
            params.sensex_symbol: [100.0, 0.0],
            params.gold_symbol: [50.0, 50.0],
        })

        with patch(URLOPEN, side_effect=side_effect):
            quotes = provider.get_quotes()

        assert quotes[InstrumentId.NIFTY50].nominal_rate_percent == 13.5
        assert quotes[InstrumentId.SENSEX].nominal_rate_percent == params.sensex_fallback_pct
        assert quotes[InstrumentId.GOLD].nominal_rate_percent == 8.0

    def test_malformed_json(self):
        """Test undecodable body"""
        response = eod_response([])
        response.read.return_value = b"<html>"
        provider = MarketRateProvider(api_key="key")

        with patch(URLOPEN, return_value=response):
            with pytest.raises(RateFetchError):
                provider.get_quotes()

    @pytest.mark.parametrize("payload", [
        {"error": {"code": "invalid_access_key"}},
        {"data": [{"open": 1.0}]},
        {"data": [{"close": None}, {"close": 1.0}]},
    ])
    def test_unexpected_payload(self, payload):
        """Test payloads without usable closes"""
        response = eod_response([])
        response.read.return_value = json.dumps(payload).encode("utf-8")
        provider = MarketRateProvider(api_key="key")

        with patch(URLOPEN, return_value=response):
            with pytest.raises(RateFetchError):
                provider.get_quotes()


class FakeProvider(RateProvider):
    name = "fake"

    def __init__(self, quotes=None, error=None):
        self.quotes = quotes
        self.error = error
        self.calls = 0

    def get_quotes(self):
        self.calls += 1
        if self.error:
            raise self.error
        return dict(self.quotes)


class TestCachedRateProvider:
    """Test TTL caching"""

    def test_serves_cache_within_ttl(self, fallback_quotes):
        """Test a second call within TTL does not refetch"""
        now = [0.0]
        inner = FakeProvider(fallback_quotes)
        provider = CachedRateProvider(inner, ttl_seconds=1800, clock=lambda: now[0])

        first = provider.get_quotes()
        now[0] = 1799.0
        second = provider.get_quotes()

        assert inner.calls == 1
        assert first == second

    def test_refetches_after_ttl(self, fallback_quotes):
        """Test expiry triggers a new fetch"""
        now = [0.0]
        inner = FakeProvider(fallback_quotes)
        provider = CachedRateProvider(inner, ttl_seconds=1800, clock=lambda: now[0])

        provider.get_quotes()
        now[0] = 1800.0
        provider.get_quotes()

        assert inner.calls == 2

    def test_invalidate(self, fallback_quotes):
        """Test invalidate forces a refetch"""
        inner = FakeProvider(fallback_quotes)
        provider = CachedRateProvider(inner, clock=lambda: 0.0)

        provider.get_quotes()
        provider.invalidate()
        provider.get_quotes()

        assert inner.calls == 2

    def test_failures_not_cached(self):
        """Test errors propagate and nothing is cached"""
        inner = FakeProvider(error=RateFetchError("down"))
        provider = CachedRateProvider(inner, clock=lambda: 0.0)

        for _ in range(2):
            with pytest.raises(RateFetchError):
                provider.get_quotes()
        assert inner.calls == 2

    def test_name(self):
        assert CachedRateProvider(FakeProvider({})).name == "cached:fake"


class TestFallbackRateProvider:
    """Test fallback to static quotes"""

    def test_primary_used_when_healthy(self, fallback_quotes):
        """Test primary quotes are returned"""
        primary = FakeProvider(fallback_quotes)
        fallback = FakeProvider(error=AssertionError("must not be called"))
        provider = FallbackRateProvider(primary, fallback)

        assert provider.get_quotes() == fallback_quotes
        assert provider.last_source == "fake"
        assert fallback.calls == 0

    def test_fallback_on_rate_fetch_error(self):
        """Test fallback quotes replace a failing primary"""
        primary = MarketRateProvider(api_key="")
        fallback = StaticRateProvider()
        provider = FallbackRateProvider(primary, fallback)

        quotes = provider.get_quotes()

        assert quotes == fallback.get_quotes()
        assert provider.last_source == "static"

    def test_other_errors_propagate(self):
        """Test only RateFetchError triggers fallback"""
        provider = FallbackRateProvider(FakeProvider(error=KeyError("bug")), StaticRateProvider())
        with pytest.raises(KeyError):
            provider.get_quotes()

    def test_fallback_when_connection_resets(self):
        """Test a reset connection on the live feed falls back to static quotes"""
        provider = FallbackRateProvider(MarketRateProvider(api_key="k"), StaticRateProvider())

        with patch(URLOPEN, side_effect=ConnectionResetError("reset")):
            quotes = provider.get_quotes()

        assert quotes == StaticRateProvider().get_quotes()
        assert provider.last_source == "static"
