from pydantic import BaseModel, Field


class SymbolResponse(BaseModel):
    symbol: str = Field(description="Exchange ticker (e.g. AAPL)")
    display_symbol: str = Field(description="Ticker as displayed by the exchange")
    description: str = Field(description="Company or fund name")
    exchange: str = Field(description="Exchange code (e.g. US)")
    currency: str = Field(default="", description="ISO 4217 currency code")
    type: str = Field(default="", description="Security type (e.g. Common Stock)")
    mic: str = Field(default="", description="Market identifier code")

    model_config = {"from_attributes": True}
