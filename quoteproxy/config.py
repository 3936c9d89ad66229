from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql+asyncpg://quoteproxy:quoteproxy@db:5432/quoteproxy"
    finnhub_token: str = ""
    finnhub_base_url: str = "https://finnhub.io/api/v1"
    quote_provider: str = "finnhub"
    upstream_timeout: float = 10.0
    catalog_exchange: str = "US"
    capture_symbols: str = "AAPL,GOOG,MSFT"
    capture_interval_seconds: int = 0
    log_level: str = "INFO"

    model_config = {"env_prefix": ""}


settings = Settings()
