"""Shared test helpers for building quotes and seeding the symbol catalog."""

from datetime import datetime, UTC

from quoteproxy.errors import UpstreamUnavailable
from quoteproxy.models import Symbol
from quoteproxy.services.quote_providers import Quote, SymbolEntry

# (symbol, description) pairs, deliberately not in ticker order
CATALOG = [
    ("MSFT", "Microsoft Corp"),
    ("AAPL", "Apple Inc"),
    ("AMZN", "Amazon.com Inc"),
    ("GOOG", "Alphabet Inc Class C"),
    ("GOOGL", "Alphabet Inc Class A"),
    ("NVDA", "NVIDIA Corp"),
    ("META", "Meta Platforms Inc"),
    ("TSLA", "Tesla Inc"),
    ("AMD", "Advanced Micro Devices Inc"),
    ("ADBE", "Adobe Inc"),
    ("PINE", "Alpine Income Property Trust"),
    ("BRK.B", "Berkshire Hathaway Inc Class B"),
]


def make_quote(symbol: str, price: float = 100.0) -> Quote:
    return Quote(
        symbol=symbol,
        price=price,
        percent_change=1.0,
        high_price=price + 1.0,
        low_price=price - 1.0,
        open_price=price - 0.5,
        timestamp=datetime.now(UTC),
    )


def quote_or_fail(failing: set[str]):
    """Side effect for provider.fetch_quote: UpstreamUnavailable for ``failing`` symbols."""

    async def fetch(symbol: str) -> Quote:
        if symbol in failing:
            raise UpstreamUnavailable(f"Finnhub /quote returned HTTP 500 for {symbol}")
        return make_quote(symbol)

    return fetch


def make_entries(pairs=CATALOG, exchange: str = "US") -> list[SymbolEntry]:
    return [
        SymbolEntry(symbol=sym, display_symbol=sym, description=desc, exchange=exchange)
        for sym, desc in pairs
    ]


async def seed_catalog(db, pairs=CATALOG) -> list[Symbol]:
    rows = [
        Symbol(symbol=sym, display_symbol=sym, description=desc, exchange="US")
        for sym, desc in pairs
    ]
    db.add_all(rows)
    await db.commit()
    return rows


def sorted_tickers(pairs=CATALOG) -> list[str]:
    return sorted(sym for sym, _ in pairs)
