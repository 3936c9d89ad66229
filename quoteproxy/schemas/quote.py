from datetime import datetime

from pydantic import BaseModel, Field


class QuoteResponse(BaseModel):
    symbol: str = Field(description="Ticker symbol as requested (e.g. AAPL)")
    price: float = Field(description="Current price")
    percent_change: float = Field(description="Percentage change from previous close")
    high_price: float = Field(description="Highest price of the day")
    low_price: float = Field(description="Lowest price of the day")
    open_price: float = Field(description="Opening price of the day")
    timestamp: datetime = Field(description="When the quote was received (UTC)")

    model_config = {"from_attributes": True, "frozen": True}


class PriceHistoryResponse(BaseModel):
    symbol: str = Field(description="Ticker symbol")
    price: float = Field(description="Captured price")
    timestamp: datetime = Field(description="Capture time")

    model_config = {"from_attributes": True}
