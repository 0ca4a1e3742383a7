"""CLI adapter that serves the finance HTTP API with uvicorn."""

import uvicorn

from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AppSettings

APP_FACTORY = "src.adapters.interface.api.app:create_app"


def main() -> None:
    """Start the API server on the configured host and port."""
    settings = AppSettings.from_env()
    get_app_logger().info(
        f"Serving API on http://{settings.api_host}:{settings.api_port}"
    )
    uvicorn.run(
        APP_FACTORY,
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
