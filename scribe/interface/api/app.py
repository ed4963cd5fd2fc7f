"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from scribe.application.validation import format_errors
from scribe.config import Settings
from scribe.interface.api.envelope import VALIDATION_MESSAGE, envelope, server_error
from scribe.interface.api.routes import health, posts
from scribe.util.di.container import create_container, setup_di
from scribe.util.observability import instrument_fastapi


def register_exception_handlers(app_instance: FastAPI, settings: Settings) -> None:
    """Render framework-level errors in the response envelope."""

    @app_instance.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=exc.headers,
        )

    @app_instance.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return envelope(
            VALIDATION_MESSAGE,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            errors=format_errors(exc.errors()),
        )

    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logfire.exception(
            "Unhandled error",
            path=request.url.path,
            method=request.method,
            error_type=type(exc).__name__,
        )
        return server_error(str(exc), expose=settings.debug)


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    yield
    # Disposes APP-scoped resources (database engine)
    await app_instance.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; a production container is built
            when omitted (tests pass one with in-memory collaborators)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Scribe API",
        description="Backend API for writing and managing posts",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_exception_handlers(app_instance, settings)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)

    # Public disk (post covers)
    app_instance.mount(
        "/" + settings.storage.url_prefix.strip("/"),
        StaticFiles(directory=settings.storage.root, check_dir=False),
        name="storage",
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
