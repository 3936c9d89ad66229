from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from quoteproxy.database import Base


class Symbol(Base):
    """Catalog entry for a tradable security, keyed by its ticker."""

    __tablename__ = "symbols"

    id: Mapped[int] = mapped_column(primary_key=True)
    symbol: Mapped[str] = mapped_column(String(30), unique=True, index=True)
    display_symbol: Mapped[str] = mapped_column(String(30), default="")
    description: Mapped[str] = mapped_column(String(300), default="")
    exchange: Mapped[str] = mapped_column(String(20), default="")
    currency: Mapped[str] = mapped_column(String(10), default="")
    type: Mapped[str] = mapped_column(String(50), default="")
    mic: Mapped[str] = mapped_column(String(10), default="")
