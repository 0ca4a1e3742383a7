"""FastAPI application factory for the finance tracker API."""

from contextlib import asynccontextmanager
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.interface.api.errors import register_exception_handlers
from src.adapters.interface.api.routers import ROUTERS
from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter, get_engine
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from src.infrastructure.schema import create_schema
from src.infrastructure.settings import AppSettings


def create_app(
    settings: AppSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        settings: Optional settings; read from the environment when omitted.
        db_port: Optional database port; built from settings when omitted.

    Returns:
        FastAPI: Application with CORS, usage logging and all routers.
    """
    resolved_settings = settings or AppSettings.from_env()
    resolved_db = db_port or SqlAlchemyDatabaseEngineAdapter(
        get_engine(resolved_settings)
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        create_schema(app.state.db_port)
        get_app_logger().info("Finance API started")
        yield
        get_app_logger().info("Finance API stopped")

    app = FastAPI(title="Finance Tracker API", lifespan=lifespan)
    app.state.db_port = resolved_db
    app.state.settings = resolved_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(resolved_settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_usage(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        get_usage_logger().info(
            f"{request.method} {request.url.path} -> "
            f"{response.status_code} in {elapsed_ms:.1f} ms"
        )
        return response

    register_exception_handlers(app)
    for router in ROUTERS:
        app.include_router(router)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


__all__ = ["create_app"]
