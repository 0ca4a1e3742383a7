"""Relational schema for the finance database."""

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.logging.logger import get_app_logger

CREATE_PEOPLE_SQL = """
CREATE TABLE IF NOT EXISTS people (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name VARCHAR(200) NOT NULL,
    age INTEGER NOT NULL CHECK (age >= 0)
)
"""

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    description VARCHAR(200) NOT NULL,
    purpose INTEGER NOT NULL CHECK (purpose IN (1, 2, 3))
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    description VARCHAR(250) NOT NULL,
    amount_cents INTEGER NOT NULL CHECK (amount_cents >= 0),
    type INTEGER NOT NULL CHECK (type IN (1, 2)),
    category_id INTEGER NOT NULL
        REFERENCES categories (id) ON DELETE RESTRICT,
    person_id INTEGER NOT NULL
        REFERENCES people (id) ON DELETE CASCADE,
    created_at TEXT NOT NULL
)
"""

CREATE_TRANSACTIONS_PERSON_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS ix_transactions_person_id
ON transactions (person_id)
"""

CREATE_TRANSACTIONS_CATEGORY_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS ix_transactions_category_id
ON transactions (category_id)
"""

SCHEMA_STATEMENTS = (
    CREATE_PEOPLE_SQL,
    CREATE_CATEGORIES_SQL,
    CREATE_TRANSACTIONS_SQL,
    CREATE_TRANSACTIONS_PERSON_INDEX_SQL,
    CREATE_TRANSACTIONS_CATEGORY_INDEX_SQL,
)


def create_schema(db_port: DatabaseEnginePort, logger=None) -> None:
    """Create the finance tables and indexes if they do not exist.

    Args:
        db_port: Port providing access to the finance engine.
        logger: Optional logger compatible with logging.Logger-like API.
    """
    resolved_logger = logger or get_app_logger()
    engine = db_port.get_engine()
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)
    resolved_logger.info(f"Schema ready at {engine.url}")


__all__ = [
    "CREATE_PEOPLE_SQL",
    "CREATE_CATEGORIES_SQL",
    "CREATE_TRANSACTIONS_SQL",
    "SCHEMA_STATEMENTS",
    "create_schema",
]
