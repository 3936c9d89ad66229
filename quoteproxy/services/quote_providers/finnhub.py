"""Finnhub quote provider — REST client for /quote and /stock/symbol."""

import logging
from datetime import datetime, UTC

import httpx

from quoteproxy.errors import UpstreamMalformed, UpstreamUnavailable
from quoteproxy.services.quote_providers.base import Quote, QuoteProvider, SymbolEntry

logger = logging.getLogger(__name__)

FINNHUB_BASE_URL = "https://finnhub.io/api/v1"

# Finnhub /quote field → Quote attribute
_QUOTE_FIELDS = {
    "c": "price",
    "dp": "percent_change",
    "h": "high_price",
    "l": "low_price",
    "o": "open_price",
}


def _as_number(payload: dict, key: str, symbol: str) -> float:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UpstreamMalformed(f"Finnhub quote for {symbol!r} has non-numeric {key!r}: {value!r}")
    return float(value)


def parse_quote(symbol: str, payload: object) -> Quote:
    """Map a Finnhub /quote body onto a Quote stamped with the local clock."""
    if not isinstance(payload, dict):
        raise UpstreamMalformed(f"Finnhub quote for {symbol!r} is not an object")

    values = {attr: _as_number(payload, key, symbol) for key, attr in _QUOTE_FIELDS.items()}
    return Quote(symbol=symbol, timestamp=datetime.now(UTC), **values)


def parse_symbols(exchange: str, payload: object) -> list[SymbolEntry]:
    """Map a Finnhub /stock/symbol body onto SymbolEntry objects."""
    if not isinstance(payload, list):
        raise UpstreamMalformed(f"Finnhub symbol list for {exchange!r} is not an array")

    results: list[SymbolEntry] = []
    for item in payload:
        if not isinstance(item, dict) or not item.get("symbol"):
            raise UpstreamMalformed(f"Finnhub symbol list for {exchange!r} has an entry without a symbol")
        results.append(SymbolEntry(
            symbol=item["symbol"],
            display_symbol=item.get("displaySymbol") or "",
            description=item.get("description") or "",
            exchange=exchange,
            currency=item.get("currency") or "",
            type=item.get("type") or "",
            mic=item.get("mic") or "",
        ))
    return results


class FinnhubProvider(QuoteProvider):
    """Talks to the Finnhub REST API with a single pooled httpx client.

    Base URL, token and timeout are constructor arguments so tests and
    alternative deployments never touch process-global state.
    """

    def __init__(
        self,
        token: str,
        base_url: str = FINNHUB_BASE_URL,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._token = token
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=httpx.Timeout(timeout))

    async def _get(self, path: str, params: dict) -> object:
        try:
            resp = await self._client.get(path, params={**params, "token": self._token})
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamUnavailable(
                f"Finnhub {path} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamUnavailable(f"Finnhub {path} request failed: {type(exc).__name__}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamMalformed(f"Finnhub {path} returned a non-JSON body") from exc

    async def fetch_quote(self, symbol: str) -> Quote:
        payload = await self._get("/quote", {"symbol": symbol})
        return parse_quote(symbol, payload)

    async def fetch_symbols(self, exchange: str) -> list[SymbolEntry]:
        payload = await self._get("/stock/symbol", {"exchange": exchange})
        results = parse_symbols(exchange, payload)
        logger.info("Finnhub provider fetched %d symbols for exchange %s", len(results), exchange)
        return results

    async def aclose(self) -> None:
        await self._client.aclose()
