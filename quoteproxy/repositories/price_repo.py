from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quoteproxy.errors import PersistenceFailure
from quoteproxy.models import PriceHistory
from quoteproxy.services.quote_providers import Quote


class PriceRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_quotes(self, quotes: list[Quote]) -> int:
        """Append one history row per quote and commit. Returns row count."""
        if not quotes:
            return 0

        self.db.add_all([
            PriceHistory(symbol=q.symbol, price=round(q.price, 4), timestamp=q.timestamp)
            for q in quotes
        ])
        try:
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise PersistenceFailure(f"Failed to store {len(quotes)} price rows") from exc
        return len(quotes)

    async def list_by_symbol(self, symbol: str, limit: int = 100) -> list[PriceHistory]:
        """Latest history rows for a symbol, newest first."""
        try:
            result = await self.db.execute(
                select(PriceHistory)
                .where(PriceHistory.symbol == symbol)
                .order_by(PriceHistory.timestamp.desc(), PriceHistory.id.desc())
                .limit(limit)
            )
        except SQLAlchemyError as exc:
            raise PersistenceFailure(f"Failed to read price history for {symbol}") from exc
        return list(result.scalars().all())
