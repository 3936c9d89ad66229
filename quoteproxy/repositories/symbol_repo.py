from sqlalchemy import ColumnElement, func, insert, or_, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quoteproxy.errors import PersistenceFailure
from quoteproxy.models import Symbol
from quoteproxy.services.quote_providers import SymbolEntry


def _like_pattern(term: str) -> str:
    escaped = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _matching(term: str | None) -> ColumnElement[bool]:
    """Build the search predicate shared by count and page queries.

    A blank term matches the whole catalog; otherwise a case-insensitive
    literal substring match on ticker, display symbol or description.
    """
    if term is None or not term.strip():
        return true()
    pattern = _like_pattern(term)
    return or_(
        func.lower(Symbol.symbol).like(pattern, escape="\\"),
        func.lower(Symbol.display_symbol).like(pattern, escape="\\"),
        func.lower(Symbol.description).like(pattern, escape="\\"),
    )


class SymbolRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def count(self) -> int:
        try:
            result = await self.db.execute(select(func.count()).select_from(Symbol))
        except SQLAlchemyError as exc:
            raise PersistenceFailure("Failed to count symbol catalog") from exc
        return result.scalar_one()

    async def count_matching(self, term: str | None) -> int:
        try:
            result = await self.db.execute(
                select(func.count()).select_from(Symbol).where(_matching(term))
            )
        except SQLAlchemyError as exc:
            raise PersistenceFailure("Failed to count matching symbols") from exc
        return result.scalar_one()

    async def list_matching(self, term: str | None, offset: int, limit: int) -> list[Symbol]:
        try:
            result = await self.db.execute(
                select(Symbol)
                .where(_matching(term))
                .order_by(Symbol.symbol)
                .offset(offset)
                .limit(limit)
            )
        except SQLAlchemyError as exc:
            raise PersistenceFailure("Failed to list matching symbols") from exc
        return list(result.scalars().all())

    async def bulk_insert(self, entries: list[SymbolEntry]) -> int:
        """Insert a batch of catalog entries in one statement. Returns row count.

        Entries are keyed by ticker; a repeated ticker keeps its last entry.
        """
        if not entries:
            return 0

        by_symbol = {e.symbol: e for e in entries}
        rows = [
            {
                "symbol": e.symbol,
                "display_symbol": e.display_symbol,
                "description": e.description,
                "exchange": e.exchange,
                "currency": e.currency,
                "type": e.type,
                "mic": e.mic,
            }
            for e in by_symbol.values()
        ]
        try:
            await self.db.execute(insert(Symbol), rows)
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise PersistenceFailure(f"Failed to bulk insert {len(rows)} symbols") from exc
        return len(rows)
