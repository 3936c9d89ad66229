"""Initial schema: symbol catalog and price history

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "symbols",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("symbol", sa.String(30), nullable=False),
        sa.Column("display_symbol", sa.String(30), nullable=False, server_default=""),
        sa.Column("description", sa.String(300), nullable=False, server_default=""),
        sa.Column("exchange", sa.String(20), nullable=False, server_default=""),
        sa.Column("currency", sa.String(10), nullable=False, server_default=""),
        sa.Column("type", sa.String(50), nullable=False, server_default=""),
        sa.Column("mic", sa.String(10), nullable=False, server_default=""),
    )
    op.create_index("ix_symbols_symbol", "symbols", ["symbol"], unique=True)

    op.create_table(
        "stock_prices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("symbol", sa.String(30), nullable=False),
        sa.Column("price", sa.Numeric(12, 4), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_stock_prices_symbol", "stock_prices", ["symbol"])
    op.create_index("ix_stock_prices_timestamp", "stock_prices", ["timestamp"])


def downgrade() -> None:
    op.drop_index("ix_stock_prices_timestamp", table_name="stock_prices")
    op.drop_index("ix_stock_prices_symbol", table_name="stock_prices")
    op.drop_table("stock_prices")
    op.drop_index("ix_symbols_symbol", table_name="symbols")
    op.drop_table("symbols")
