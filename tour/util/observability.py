"""Logfire setup and instrumentation.

Application code logs through ``logfire`` directly. Addresses and tokens go
through ``mask_email`` and ``mask_token`` (``tour.util.logging``) before
they become attributes; the scrubbing patterns below catch what slips past.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tour.config import Settings

# Attribute names that may carry credentials of the invitation flow
SCRUB_PATTERNS = ["otp", "csrf", "auth_token", "invitation_token", "session_token"]

# Health checks are not traced
UNTRACED_URLS = ["/health"]


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit setting wins, otherwise send only when a token is configured."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Must run before ``create_app`` so that instrumentation attaches to a
    configured instance.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name="tour-planner-api",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    """Keep method, path and client address; never headers or cookies."""
    result = {**attributes}
    if hasattr(request, "method"):
        result["method"] = request.method
    if hasattr(request, "url"):
        result["path"] = request.url.path
    if getattr(request, "client", None):
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, including guard rejections (403, 401, 429).

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries of the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace calls to the email provider."""
    logfire.instrument_httpx()
