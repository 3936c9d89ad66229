from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Quote:
    """A point-in-time price snapshot for one symbol."""

    symbol: str
    price: float
    percent_change: float
    high_price: float
    low_price: float
    open_price: float
    timestamp: datetime  # provider-local clock at response receipt, UTC


@dataclass(frozen=True)
class SymbolEntry:
    """A single symbol listed by the provider for an exchange."""

    symbol: str
    display_symbol: str
    description: str
    exchange: str
    currency: str = ""
    type: str = ""
    mic: str = ""


class QuoteProvider(ABC):
    """Provider interface for real-time quotes and exchange symbol listings.

    Implementations wrap a specific market-data API. Consumers call
    get_quote_provider() and use this interface without knowing which
    backend is active.
    """

    @abstractmethod
    async def fetch_quote(self, symbol: str) -> Quote:
        """Fetch the current quote for a single symbol.

        Raises UpstreamUnavailable on network/HTTP failure and
        UpstreamMalformed when the body cannot be mapped to a Quote.
        """

    @abstractmethod
    async def fetch_symbols(self, exchange: str) -> list[SymbolEntry]:
        """Fetch every symbol listed on an exchange (e.g. "US")."""

    async def aclose(self) -> None:
        """Release any pooled connections held by the provider."""
