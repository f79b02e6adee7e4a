"""FastAPI server exposing the TODO index."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api import todos_router
from .config import Settings, settings
from .engine import TodoIndex
from .errors import InvalidIssueIdError
from .logging_config import configure_logging
from .models import HealthResponse

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application with its own TODO index.

    Args:
        app_settings: Settings to use; defaults to the environment-loaded ones

    Returns:
        Configured FastAPI application
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        logger.info(
            f"Starting Linear TODOs server v{__version__} "
            f"(patterns: {', '.join(app.state.todo_index.default_patterns) or 'none'})"
        )
        if not app_settings.debug and app_settings.cors_allowed_origins == "*":
            logger.warning(
                "CORS is configured to allow all origins ('*'). "
                "Set LINEAR_TODOS_CORS_ALLOWED_ORIGINS to specific origins in production."
            )
        yield
        logger.info(
            f"Shutting down, dropping {len(app.state.todo_index.documents())} indexed documents"
        )

    app = FastAPI(
        title="Linear TODOs",
        description="Scan TODO markers, classify them and link them to tracker issues",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.todo_index = TodoIndex.from_settings(app_settings)
    app.state.pending_links = {}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(todos_router)

    # ============ EXCEPTION HANDLERS ============

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent response format."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
        )

    @app.exception_handler(InvalidIssueIdError)
    async def invalid_issue_id_handler(request: Request, exc: InvalidIssueIdError):
        logger.warning(f"Rejected issue id '{exc.issue_id}'")
        return JSONResponse(status_code=422, content={"success": False, "error": str(exc)})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with a generic message."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "An internal server error occurred."},
        )

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Liveness check."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            documents_indexed=len(app.state.todo_index.documents()),
        )

    return app


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    configure_logging("DEBUG" if settings.debug else settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
