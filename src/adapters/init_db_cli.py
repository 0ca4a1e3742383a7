"""CLI adapter to create the finance database schema.

Safe to run repeatedly: tables and indexes are only created when missing.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import create_schema


def main() -> None:
    """Create the people, categories and transactions tables."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()

    create_schema(db_adapter, logger=logger)

    print(f"Schema ready at {db_adapter.get_engine().url}.")


if __name__ == "__main__":  # pragma: no cover
    main()
