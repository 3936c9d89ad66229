from quoteproxy.repositories.symbol_repo import SymbolRepository
from quoteproxy.repositories.price_repo import PriceRepository

__all__ = [
    "SymbolRepository",
    "PriceRepository",
]
