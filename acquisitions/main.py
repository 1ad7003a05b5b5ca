"""FastAPI application entrypoint. No business logic; only wiring, middleware and error handlers."""

import logging
import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from acquisitions.api import health
from acquisitions.api import router as api_router
from acquisitions.core.config import Settings, get_settings
from acquisitions.core.database import Database
from acquisitions.core.logging import configure_logging
from acquisitions.core.middleware import register_middleware
from acquisitions.core.security import is_insecure_jwt_secret

logger = logging.getLogger(__name__)


def format_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic errors into one comma-separated, human-readable string."""
    messages = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        msg = err.get("msg", "Invalid value")
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return ", ".join(messages)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "details": format_validation_errors(exc.errors()),
        },
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(
        "Database error while handling %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error while handling %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the Database on startup unless one was injected; dispose it on shutdown."""
    if getattr(app.state, "database", None) is None:
        app.state.database = Database.from_settings(app.state.settings)
    logger.info("Application ready (environment=%s)", app.state.settings.APP_ENV)
    try:
        yield
    finally:
        app.state.database.dispose()
        logger.info("Database connections closed")


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application. Tests pass their own settings and Database."""
    settings = settings or get_settings()
    configure_logging(settings)
    if is_insecure_jwt_secret(settings):
        logger.warning(
            "JWT_SECRET is not set; tokens will be signed with an insecure default secret. "
            "Set JWT_SECRET before deploying to production."
        )

    app = FastAPI(
        title="Acquisitions API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.started_at = time.monotonic()
    if settings is not get_settings():
        app.dependency_overrides[get_settings] = lambda: settings

    register_middleware(app, settings.APP_ENV)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV != "prod" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Hello from acquisitions!"}

    return app


app = create_app()
