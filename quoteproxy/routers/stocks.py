from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from quoteproxy.database import get_db
from quoteproxy.repositories.price_repo import PriceRepository
from quoteproxy.schemas.error import ErrorResponse
from quoteproxy.schemas.page import PageResponse
from quoteproxy.schemas.quote import PriceHistoryResponse, QuoteResponse
from quoteproxy.schemas.symbol import SymbolResponse
from quoteproxy.services import quote_service
from quoteproxy.services.symbol_service import search_symbols

router = APIRouter(prefix="/api/stocks", tags=["stocks"])

_UPSTREAM_ERRORS = {502: {"model": ErrorResponse, "description": "Upstream market-data failure"}}


@router.get(
    "/symbols",
    response_model=PageResponse[SymbolResponse],
    summary="Search the symbol catalog",
)
async def list_symbols(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(10, gt=0, description="Page size"),
    q: str | None = Query(None, description="Case-insensitive substring of ticker or name"),
    db: AsyncSession = Depends(get_db),
):
    """Page through the symbol catalog, optionally filtered by a search term.

    `total` is the number of matches across all pages; results are ordered by ticker.
    """
    items, total = await search_symbols(db, q, page, size)
    return PageResponse[SymbolResponse](
        data=[SymbolResponse.model_validate(s) for s in items],
        total=total,
        page=page,
        size=size,
    )


@router.get(
    "/prices",
    response_model=list[QuoteResponse],
    responses=_UPSTREAM_ERRORS,
    summary="Get quotes for several symbols",
)
async def get_prices(symbols: str = Query(..., description="Comma-separated list of symbols")):
    """Fetch quotes for every symbol concurrently.

    Results are sorted by symbol. Symbols whose fetch fails are omitted.
    """
    return await quote_service.get_quotes(quote_service.parse_symbols(symbols))


@router.get(
    "/{symbol}/price",
    response_model=QuoteResponse,
    responses=_UPSTREAM_ERRORS,
    summary="Get the quote for one symbol",
)
async def get_price(symbol: str):
    return await quote_service.get_quote(symbol)


@router.get(
    "/{symbol}/history",
    response_model=list[PriceHistoryResponse],
    summary="Get captured price history for one symbol",
)
async def get_history(
    symbol: str,
    limit: int = Query(100, gt=0, le=1000),
    db: AsyncSession = Depends(get_db),
):
    """Return the latest captured prices for a symbol, newest first."""
    return await PriceRepository(db).list_by_symbol(symbol, limit=limit)
