"""Tests for schema creation."""

from unittest.mock import MagicMock

from sqlalchemy import inspect

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.schema import create_schema


def test_create_schema_is_idempotent(engine):
    port = SqlAlchemyDatabaseEngineAdapter(engine)
    logger = MagicMock()

    create_schema(port, logger=logger)
    create_schema(port, logger=logger)

    inspector = inspect(engine)
    assert {"people", "categories", "transactions"} <= set(
        inspector.get_table_names()
    )
    index_names = {
        index["name"] for index in inspector.get_indexes("transactions")
    }
    assert {"ix_transactions_person_id", "ix_transactions_category_id"} <= (
        index_names
    )
    assert logger.info.call_count == 2
