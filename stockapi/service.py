"""Business rules on top of the stock repository."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.exc import SQLAlchemyError

from .models import Stock
from .repository import RecordNotFoundError, StocksRepository


class StockServiceError(Exception):
    """A service-level operation on a stock failed."""


class StocksService:
    """Creates, lists, updates and deletes stocks."""

    def __init__(self, repository: StocksRepository) -> None:
        self._repository = repository

    def create(self, stock: Stock) -> Stock:
        return self._repository.create(stock)

    def get_all(self) -> list[Stock]:
        return self._repository.get_all()

    def get_by_id(self, stock_id: int) -> Stock:
        return self._repository.get_by_id(stock_id)

    def update(self, stock_id: int, stock: Stock) -> Stock:
        """Merge the given fields into the stored stock and save it."""
        try:
            current = self._repository.get_by_id(stock_id)
        except (RecordNotFoundError, SQLAlchemyError) as err:
            raise StockServiceError("stock is not found to updated by id") from err

        changes = {}
        if stock.name != "":
            changes["name"] = stock.name
        if stock.price >= 0:
            changes["price"] = stock.price
        if current.company != "":
            changes["company"] = stock.company
        return self._repository.update(replace(current, **changes))

    def delete(self, stock_id: int) -> None:
        """Delete the stock, failing if it does not exist."""
        try:
            self._repository.get_by_id(stock_id)
        except (RecordNotFoundError, SQLAlchemyError) as err:
            raise StockServiceError("stock is not found to delete by id") from err
        self._repository.delete(stock_id)