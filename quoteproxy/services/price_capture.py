"""Periodic price capture — records quotes for a fixed symbol list as history rows."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from quoteproxy.config import settings
from quoteproxy.database import async_session
from quoteproxy.repositories.price_repo import PriceRepository
from quoteproxy.services.quote_service import get_quotes

logger = logging.getLogger(__name__)


def configured_symbols() -> list[str]:
    return [s.strip().upper() for s in settings.capture_symbols.split(",") if s.strip()]


async def capture_prices(db: AsyncSession, symbols: list[str]) -> int:
    """Fetch quotes for ``symbols`` and append one history row per success."""
    if not symbols:
        return 0
    quotes = await get_quotes(symbols)
    return await PriceRepository(db).add_quotes(quotes)


async def scheduled_capture():
    """Background job: capture prices for the configured symbols."""
    async with async_session() as db:
        try:
            count = await capture_prices(db, configured_symbols())
            logger.info("Captured %d price points", count)
        except Exception:
            logger.exception("Scheduled price capture failed")
