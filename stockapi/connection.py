"""Lazily created, shared database engine configured from a .env file."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

_engine: Engine | None = None


class ConnectionSetupError(RuntimeError):
    """The database could not be configured or reached."""


def _normalise_url(url: str) -> str:
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def _connect() -> Engine:
    env_file = Path.cwd() / ".env"
    if not env_file.is_file():
        raise ConnectionSetupError(f"failed to load .env file: {env_file} not found")
    load_dotenv(env_file)

    url = os.environ.get("POSTGRESQL_URL", "")
    if not url:
        raise ConnectionSetupError("POSTGRESQL_URL not set in environment")

    try:
        engine = create_engine(_normalise_url(url))
    except (ArgumentError, SQLAlchemyError, ImportError, ValueError) as err:
        raise ConnectionSetupError(f"failed to open connection: {err}") from err

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as err:
        engine.dispose()
        raise ConnectionSetupError(f"failed to ping database: {err}") from err

    print("Connected to Postgres successfully")
    return engine


def connection() -> Engine:
    """Return the shared engine, connecting on first use."""
    global _engine
    if _engine is None:
        _engine = _connect()
    return _engine


def reset_connection() -> None:
    """Dispose of the shared engine so the next call reconnects."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None