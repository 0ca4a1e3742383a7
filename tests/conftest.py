"""Shared fixtures: a throwaway SQLite finance database per test."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import db as db_module
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.schema import create_schema


@pytest.fixture
def engine(tmp_path):
    engine = db_module._create_engine(f"sqlite:///{tmp_path / 'finance.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(engine):
    port = SqlAlchemyDatabaseEngineAdapter(engine)
    create_schema(port, logger=MagicMock())
    return port
