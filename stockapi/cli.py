"""Command that connects to the database and serves the stock API."""

from __future__ import annotations

import logging
from typing import Sequence

from .connection import ConnectionSetupError, connection
from .http import create_app
from .repository import StocksRepository
from .service import StocksService

HOST = "0.0.0.0"
PORT = 8080

logger = logging.getLogger(__name__)


def serve() -> None:
    """Connect, build the application and serve it on port 8080."""
    try:
        engine = connection()
    except ConnectionSetupError as err:
        print(err)
        return

    app = create_app(StocksService(StocksRepository(engine)))

    print(f"Server Running on Port {PORT}")
    try:
        app.run(host=HOST, port=PORT)
    except OSError as err:
        logger.critical("%s", err)
        raise SystemExit(1) from err


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; command-line arguments are not used."""
    serve()
    return 0