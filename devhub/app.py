"""
FastAPI application for the DevHub dashboard.

Endpoints:
    GET  /health
    GET  /dashboard
    GET  /api/dashboard
    GET  /api/repos       (also POST)
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .github_client import close_github_client
from .logger import get_logger, setup_logging
from .routes import dashboard, health, proxy

logger = get_logger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.info(f"Starting DevHub dashboard ({settings.app_env})")

    yield

    logger.info("Shutting down DevHub dashboard...")
    await close_github_client()


def create_app() -> FastAPI:
    app = FastAPI(
        title="DevHub Dashboard",
        description="GitHub repositories and merged pull-request contributions",
        version="1.0.0",
        lifespan=app_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(dashboard.router)
    app.include_router(proxy.router)

    return app


app = create_app()
