"""
FastAPI Application Factory & Configuration.

This module builds the Colonnade HTTP application. It is responsible for:
1.  **Middleware Setup**: CORS, so the browser builder can call the API.
2.  **Exception Handling**: Global handlers so every error returns JSON.
3.  **Routing**: Mounting the layout and article-record routers.
4.  **Lifecycle**: Initializing the in-memory layout store on startup.

Design Pattern
--------------
An **Application Factory** (`create_app`) keeps tests isolated: each test can
build its own app instance.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from colonnade import __version__
from colonnade.api.layout_store import LayoutStore
from colonnade.api.routers import articles, layout
from colonnade.core.settings import get_logger, load_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    ASGI Lifespan context manager.

    - **Startup**: Initialize the layout store singleton.
    - **Shutdown**: Nothing to release; the store is in memory.
    """
    logger.info("Colonnade API starting up")
    LayoutStore.get_instance()
    yield
    logger.info("Colonnade API shutting down")


def create_app() -> FastAPI:
    """
    Construct and configure the Colonnade FastAPI application.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """
    app = FastAPI(
        title="Colonnade API",
        description="Block layout and citation numbering for magazine articles",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # -----------------------------------------------------------------------
    # Middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Global Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Return unhandled exceptions as a structured JSON 500."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Map Python ValueErrors to HTTP 400 Bad Request."""
        return JSONResponse(
            status_code=400,
            content={
                "error": "Bad Request",
                "detail": str(exc),
            },
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    app.include_router(layout.router)
    app.include_router(articles.router)

    @app.get("/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        """Simple liveness probe."""
        return {
            "status": "ok",
            "environment": load_settings().environment,
            "version": __version__,
        }

    return app


__all__ = ["create_app"]
