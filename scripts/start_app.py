#!/usr/bin/env python3
"""Start the Tour Planner API under uvicorn.

Logfire is configured before the app is imported so startup failures, such
as invalid settings, are reported.
"""

import sys

import logfire
import uvicorn

from tour.config import Settings
from tour.util.logging import setup_logging
from tour.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting Tour Planner API",
        environment=settings.environment,
        port=settings.port,
        frontend_url=settings.api.frontend_url,
    )
    try:
        # Proxy headers are trusted: rate limits key anonymous callers on
        # the forwarded client address
        uvicorn.run(
            "tour.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            reload=settings.is_development,
            proxy_headers=True,
            forwarded_allow_ips="*",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
