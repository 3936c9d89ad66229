"""Quote business logic — single lookups and concurrent multi-symbol fan-out."""

import asyncio
import logging

from quoteproxy.errors import UpstreamError
from quoteproxy.services.quote_providers import Quote, get_quote_provider

logger = logging.getLogger(__name__)


def parse_symbols(symbols: str) -> list[str]:
    """Split a comma-separated symbol list.

    Tokens are forwarded verbatim: no trimming, no case normalization, and
    empty tokens are kept so the provider decides what they resolve to.
    """
    return symbols.split(",")


async def get_quote(symbol: str) -> Quote:
    return await get_quote_provider().fetch_quote(symbol)


async def get_quotes(symbols: list[str]) -> list[Quote]:
    """Fetch one quote per symbol concurrently, sorted by symbol.

    Failures are best-effort: a symbol whose fetch raises an UpstreamError is
    logged and left out, the remaining fetches still complete.
    """
    provider = get_quote_provider()
    results = await asyncio.gather(
        *(provider.fetch_quote(sym) for sym in symbols),
        return_exceptions=True,
    )

    quotes: list[Quote] = []
    failed: list[str] = []
    for sym, result in zip(symbols, results):
        if isinstance(result, UpstreamError):
            logger.warning("Quote fetch failed for %r: %s", sym, result.detail)
            failed.append(sym)
            continue
        if isinstance(result, BaseException):
            raise result
        quotes.append(result)

    if failed:
        logger.warning("Dropped %d/%d symbols from quote fan-out", len(failed), len(symbols))

    quotes.sort(key=lambda q: q.symbol)
    return quotes
