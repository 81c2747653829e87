"""Standard library logging setup and log-safe masking helpers.

Application code logs through logfire; this configures the stdlib loggers
used by uvicorn, SQLAlchemy and httpx.
"""

import logging
import sys

from tour.config import Settings

# Libraries that are chatty at INFO (connection pool, per-request lines)
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "asyncio")


def log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure root logging for the process.

    Args:
        settings: Application settings (environment and debug flag)
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("tour").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )


def mask_email(email: str) -> str:
    """Mask an email address for log attributes.

    Keeps the first character of the local part and the full domain so
    entries stay correlatable without exposing the address.

    Args:
        email: Email address

    Returns:
        Masked address, e.g. ``j***@example.com``
    """
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def mask_token(token: str) -> str:
    """Truncate a secret token for log attributes."""
    return token[:8] + "..."
