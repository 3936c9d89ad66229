"""Quote provider registry — resolves a provider name to a singleton instance."""

from quoteproxy.config import settings
from quoteproxy.services.quote_providers.base import Quote, QuoteProvider, SymbolEntry
from quoteproxy.services.quote_providers.finnhub import FinnhubProvider

__all__ = [
    "Quote",
    "QuoteProvider",
    "SymbolEntry",
    "init_quote_provider",
    "get_quote_provider",
    "close_quote_provider",
]

_instance: QuoteProvider | None = None


def _build_finnhub() -> QuoteProvider:
    return FinnhubProvider(
        token=settings.finnhub_token,
        base_url=settings.finnhub_base_url,
        timeout=settings.upstream_timeout,
    )


_PROVIDERS = {
    "finnhub": _build_finnhub,
}


def init_quote_provider() -> QuoteProvider:
    """Instantiate the configured quote provider (called once at startup)."""
    global _instance
    name = settings.quote_provider
    factory = _PROVIDERS.get(name)
    if factory is None:
        raise ValueError(
            f"Unknown quote provider: {name!r}. Available: {list(_PROVIDERS)}"
        )
    _instance = factory()
    return _instance


def get_quote_provider() -> QuoteProvider:
    """Return the active quote provider singleton.

    Raises RuntimeError if init_quote_provider() hasn't been called yet.
    """
    if _instance is None:
        raise RuntimeError(
            "Quote provider not initialized — call init_quote_provider() first"
        )
    return _instance


async def close_quote_provider() -> None:
    global _instance
    if _instance is not None:
        await _instance.aclose()
        _instance = None
