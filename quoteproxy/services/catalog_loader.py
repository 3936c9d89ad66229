"""Catalog loader — seeds the symbol catalog from the provider on first start."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from quoteproxy.config import settings
from quoteproxy.database import async_session
from quoteproxy.repositories.symbol_repo import SymbolRepository
from quoteproxy.services.quote_providers import QuoteProvider, get_quote_provider

logger = logging.getLogger(__name__)


async def load_if_empty(db: AsyncSession, provider: QuoteProvider, exchange: str) -> int:
    """Bulk-load every symbol of ``exchange`` when the catalog is empty.

    Returns the number of symbols inserted (0 when the catalog already had
    rows). A failed bulk write is not retried.
    """
    repo = SymbolRepository(db)
    existing = await repo.count()
    if existing > 0:
        logger.debug("Symbol catalog already holds %d symbols, skipping load", existing)
        return 0

    entries = await provider.fetch_symbols(exchange)
    if not entries:
        logger.warning("Provider returned 0 symbols for exchange %s", exchange)
        return 0

    inserted = await repo.bulk_insert(entries)
    logger.info("Loaded %d symbols for exchange %s into the catalog", inserted, exchange)
    return inserted


async def warm_catalog() -> None:
    """Startup job: load the catalog if empty. Failures are logged, never raised."""
    async with async_session() as db:
        try:
            await load_if_empty(db, get_quote_provider(), settings.catalog_exchange)
        except Exception:
            logger.exception("Symbol catalog load failed")
