#!/usr/bin/env python3
"""Upgrade the database schema.

Usage: ``run_migrations.py [revision]`` (defaults to ``head``). Runs before
the API starts so it never serves against an outdated schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from tour.config import Settings
from tour.util.logging import setup_logging
from tour.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    url = make_url(settings.database_url)

    with logfire.span(
        "run_migrations", revision=revision, host=url.host, database=url.database
    ):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
