"""Symbol catalog search with page-based retrieval."""

from sqlalchemy.ext.asyncio import AsyncSession

from quoteproxy.errors import ValidationError
from quoteproxy.models import Symbol
from quoteproxy.repositories.symbol_repo import SymbolRepository


async def search_symbols(
    db: AsyncSession, term: str | None, page: int = 0, size: int = 10
) -> tuple[list[Symbol], int]:
    """Return the ``page``-th window of ``size`` matches and the total match count.

    Both come from the same predicate, ordered by ticker so repeated calls
    page deterministically.
    """
    if page < 0:
        raise ValidationError(f"page must be >= 0, got {page}")
    if size <= 0:
        raise ValidationError(f"size must be > 0, got {size}")

    repo = SymbolRepository(db)
    total = await repo.count_matching(term)
    if page * size >= total:
        return [], total
    items = await repo.list_matching(term, offset=page * size, limit=size)
    return items, total
