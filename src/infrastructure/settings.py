"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
import os

import dotenv

from src.utils.utils import get_project_root

DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)


def _default_database_url() -> str:
    """Return the SQLite URL of the default single-file database."""
    return f"sqlite:///{get_project_root() / 'data' / 'finance.db'}"


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings for the finance tracker.

    Attributes:
        database_url: SQLAlchemy URL of the finance database.
        cors_origins: Origins allowed to call the HTTP API.
        api_host: Interface the HTTP API binds to.
        api_port: Port the HTTP API listens on.
    """

    database_url: str = field(default_factory=_default_database_url)
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables (and a .env file).

        Returns:
            AppSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If API_PORT is not an integer.
        """
        dotenv.load_dotenv()
        database_url = (
            os.getenv("DATABASE_URL", "").strip() or _default_database_url()
        )
        raw_origins = os.getenv("CORS_ORIGINS", "")
        origins = tuple(
            origin.strip()
            for origin in raw_origins.split(",")
            if origin.strip()
        )
        raw_port = os.getenv("API_PORT", "").strip()
        return cls(
            database_url=database_url,
            cors_origins=origins or DEFAULT_CORS_ORIGINS,
            api_host=os.getenv("API_HOST", "127.0.0.1").strip(),
            api_port=int(raw_port) if raw_port else 8000,
        )


__all__ = ["AppSettings", "DEFAULT_CORS_ORIGINS"]
