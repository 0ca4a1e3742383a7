"""Database infrastructure for the finance tracker.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the finance database. SQLite connections get foreign-key
enforcement switched on as soon as they are opened.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import AppSettings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on FK enforcement (cascade/restrict) for a SQLite connection."""
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: Engine with health checks enabled. For SQLite the parent
        directory of the database file is created and connections may be
        shared across the API worker threads.
    """
    url = make_url(db_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
        connect_args=connect_args,
    )
    if url.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


_engine: Optional[Engine] = None


def get_engine(settings: AppSettings | None = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the finance database.

    Args:
        settings: Optional settings; read from the environment when omitted.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _engine
    if _engine is None:
        resolved = settings or AppSettings.from_env()
        _engine = _create_engine(resolved.database_url)
    return _engine


def reset_engine() -> None:
    """Dispose of the cached engine so the next call rebuilds it."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, URL
    parsing) behind the port. Passing an engine pins the adapter to it,
    which is how tests point repositories at a temporary database.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance store.
        """
        if self._engine is not None:
            return self._engine
        return get_engine()


__all__ = [
    "get_engine",
    "reset_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
