import asyncio
import logging
from contextlib import asynccontextmanager, suppress

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quoteproxy.config import settings as app_settings
from quoteproxy.database import engine
from quoteproxy.errors import QuoteProxyError
from quoteproxy.routers import stocks
from quoteproxy.services.catalog_loader import warm_catalog
from quoteproxy.services.price_capture import scheduled_capture
from quoteproxy.services.quote_providers import close_quote_provider, init_quote_provider

logging.basicConfig(
    level=app_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)
scheduler = AsyncIOScheduler()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_quote_provider()

    # Catalog warm-up runs alongside serving; its failure is only logged
    catalog_task = asyncio.create_task(warm_catalog(), name="catalog-warmup")

    if app_settings.capture_interval_seconds > 0:
        scheduler.add_job(
            scheduled_capture,
            IntervalTrigger(seconds=app_settings.capture_interval_seconds),
            id="price_capture",
        )
        scheduler.start()
        logger.info(
            "Scheduler started: capturing %s every %ds",
            app_settings.capture_symbols, app_settings.capture_interval_seconds,
        )

    yield

    if scheduler.running:
        scheduler.shutdown(wait=False)
    if not catalog_task.done():
        catalog_task.cancel()
        with suppress(asyncio.CancelledError):
            await catalog_task
    await close_quote_provider()
    await engine.dispose()


app = FastAPI(
    title="quoteproxy",
    summary="Reactive proxy for stock quotes and symbol metadata.",
    description=(
        "quoteproxy fetches real-time quotes and exchange symbol listings from Finnhub "
        "and re-exposes them through a small JSON API.\n\n"
        "**Key concepts:**\n"
        "- Quotes are fetched live on every request; multi-symbol requests fan out "
        "concurrently and return results sorted by symbol. Symbols that fail upstream are "
        "omitted from the list.\n"
        "- The symbol catalog is loaded once from Finnhub when the database is empty and "
        "is searchable by ticker or company name with page-based retrieval.\n"
        "- An optional interval job records prices for a fixed symbol list as history rows.\n"
    ),
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "stocks",
            "description": "Live quotes, symbol catalog search, and captured price history.",
        },
        {
            "name": "system",
            "description": "Health checks and operational endpoints.",
        },
    ],
)

app.include_router(stocks.router)


@app.exception_handler(QuoteProxyError)
async def quoteproxy_error_handler(request: Request, exc: QuoteProxyError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "detail": exc.detail},
    )


@app.get("/api/health", summary="Health check", tags=["system"])
async def health():
    """Return `{\"status\": \"ok\"}` when the service is running."""
    return {"status": "ok"}
