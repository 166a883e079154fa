"""SQL storage for stocks."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    MetaData,
    String,
    Table,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine

from .models import Stock

metadata = MetaData()

stocks_table = Table(
    "stocks",
    metadata,
    Column(
        "stockid",
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    ),
    Column("name", String, nullable=False),
    Column("price", BigInteger, nullable=False),
    Column("company", String, nullable=False),
)

_COLUMNS = (
    stocks_table.c.stockid,
    stocks_table.c.name,
    stocks_table.c.price,
    stocks_table.c.company,
)


class RecordNotFoundError(LookupError):
    """No row matched the requested id."""


def _row_to_stock(row) -> Stock:
    return Stock(stock_id=row.stockid, name=row.name, price=row.price, company=row.company)


class StocksRepository:
    """Reads and writes rows of the stocks table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def create(self, stock: Stock) -> Stock:
        """Insert a stock and return it with its new id."""
        statement = insert(stocks_table).values(
            name=stock.name, price=stock.price, company=stock.company
        )
        with self._engine.begin() as conn:
            result = conn.execute(statement)
            new_id = result.inserted_primary_key[0]
        return replace(stock, stock_id=new_id)

    def get_all(self) -> list[Stock]:
        """Return every stock."""
        with self._engine.connect() as conn:
            return [_row_to_stock(row) for row in conn.execute(select(*_COLUMNS))]

    def get_by_id(self, stock_id: int) -> Stock:
        """Return the stock with this id or raise RecordNotFoundError."""
        statement = select(*_COLUMNS).where(stocks_table.c.stockid == stock_id)
        with self._engine.connect() as conn:
            row = conn.execute(statement).first()
        if row is None:
            raise RecordNotFoundError(f"no stock with id {stock_id}")
        return _row_to_stock(row)

    def update(self, stock: Stock) -> Stock:
        """Write the stock's fields to the row with its id."""
        statement = (
            update(stocks_table)
            .where(stocks_table.c.stockid == stock.stock_id)
            .values(name=stock.name, price=stock.price, company=stock.company)
        )
        with self._engine.begin() as conn:
            conn.execute(statement)
        return stock

    def delete(self, stock_id: int) -> None:
        """Remove the row with this id."""
        with self._engine.begin() as conn:
            conn.execute(delete(stocks_table).where(stocks_table.c.stockid == stock_id))