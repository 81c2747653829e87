"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire
from starlette.exceptions import HTTPException as StarletteHTTPException

from tour.config import Settings
from tour.interface.api.routes import (
    auth,
    comments,
    csrf,
    health,
    invitations,
    participants,
    tags,
    tours,
    votes,
)
from tour.interface.error import error_body
from tour.util.di.container import create_container, setup_di
from tour.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the DI container on shutdown.

    Closing finalizes app-scoped components: the rate limiter stops its
    sweep thread and the database engine is disposed.
    """
    yield
    await app.state.dishka_container.close()
    logfire.info("Application shut down")


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, str(exc.detail)),
        headers=exc.headers,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = error_body(422, "Request validation failed")
    body["error"]["details"] = jsonable_errors(exc)
    return JSONResponse(status_code=422, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500, content=error_body(500, "Internal server error")
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Field errors without the raw input (may contain tokens)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (tests pass one built from mocks)
    """
    settings = Settings()

    # Instrument httpx for outbound email provider requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Tour Planner API",
        description="Backend API for Tour Planner - collaborative trip planning with email invitations",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
            settings.csrf.header_name,
        ],
        expose_headers=[
            "Content-Length",
            "Content-Type",
            "Retry-After",
            "X-RateLimit-Limit",
            "X-RateLimit-Remaining",
            "X-RateLimit-Reset",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app_instance.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )
    app_instance.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(csrf.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(tours.router)
    app_instance.include_router(invitations.router)
    app_instance.include_router(participants.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(tags.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
