"""HTTP layer: JSON helpers, the stock controller and its routes."""

from __future__ import annotations

import json
import re
from typing import Any

from flask import Flask, Response, request
from sqlalchemy.exc import SQLAlchemyError

from .models import INT64_MAX, INT64_MIN, Stock
from .repository import RecordNotFoundError
from .service import StockServiceError, StocksService

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_FAILURES = (RecordNotFoundError, StockServiceError, SQLAlchemyError, ValueError)


def parse_stock_body(raw: bytes | str) -> Stock:
    """Decode a request body into a Stock; anything undecodable yields an empty one."""
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return Stock()
    if not isinstance(data, dict):
        return Stock()
    try:
        return Stock.from_dict(data)
    except ValueError:
        return Stock()


def _to_json(data: Any) -> Any:
    if isinstance(data, Stock):
        return data.to_dict()
    if isinstance(data, (list, tuple)):
        return [_to_json(item) for item in data]
    return data


def json_response(data: Any, status: int) -> Response:
    """Wrap data in the success envelope as a JSON response."""
    body = json.dumps({"data": _to_json(data), "success": True}) + "\n"
    return Response(body, status=status, content_type="application/json")


def _error_response(message: str, status: int = 500) -> Response:
    return Response(message + "\n", status=status, content_type="text/plain; charset=utf-8")


def _parse_id(raw: str) -> int:
    if not _ID_PATTERN.fullmatch(raw):
        raise ValueError(f'invalid stock id "{raw}": invalid syntax')
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f'invalid stock id "{raw}": value out of range')
    return value


class StockController:
    """Request handlers for the stock endpoints."""

    def __init__(self, service: StocksService) -> None:
        self._service = service

    def create_stock(self) -> Response:
        stock = parse_stock_body(request.get_data())
        try:
            created = self._service.create(stock)
        except _FAILURES as err:
            return _error_response(str(err))
        return json_response(created, 201)

    def get_stocks(self) -> Response:
        try:
            stocks = self._service.get_all()
        except _FAILURES as err:
            return _error_response(str(err))
        return json_response(stocks, 200)

    def get_stock_by_id(self, stock_id: str) -> Response:
        try:
            stock = self._service.get_by_id(_parse_id(stock_id))
        except _FAILURES as err:
            return _error_response(str(err))
        return json_response(stock, 200)

    def update_stock(self, stock_id: str) -> Response:
        try:
            parsed_id = _parse_id(stock_id)
        except ValueError as err:
            return _error_response(str(err))
        stock = parse_stock_body(request.get_data())
        try:
            updated = self._service.update(parsed_id, stock)
        except _FAILURES as err:
            return _error_response(str(err))
        return json_response(updated, 200)

    def delete_stock(self, stock_id: str) -> Response:
        try:
            self._service.delete(_parse_id(stock_id))
        except _FAILURES as err:
            return _error_response(str(err))
        return json_response("Stock is Deleted", 200)


def register_routes(app: Flask, controller: StockController) -> None:
    """Attach the stock endpoints to the application."""
    app.add_url_rule("/api/stocks", "create_stock", controller.create_stock, methods=["POST"])
    app.add_url_rule("/api/stocks", "get_stocks", controller.get_stocks, methods=["GET"])
    app.add_url_rule(
        "/api/stocks/<stock_id>", "get_stock_by_id", controller.get_stock_by_id, methods=["GET"]
    )
    app.add_url_rule(
        "/api/stocks/<stock_id>", "update_stock", controller.update_stock, methods=["PUT"]
    )
    app.add_url_rule(
        "/api/stocks/<stock_id>", "delete_stock", controller.delete_stock, methods=["DELETE"]
    )


def create_app(service: StocksService) -> Flask:
    """Build the Flask application serving the stock API."""
    app = Flask(__name__)
    register_routes(app, StockController(service))
    return app