#!/usr/bin/env python3
"""Create or upgrade the votes schema with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from verdict.config import Settings
from verdict.util.observability import configure_logfire


def main() -> int:
    """Upgrade to the latest revision and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    with logfire.span(
        "run_migrations",
        environment=settings.environment,
        id_type=settings.database.id_type,
    ):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail loudly so the app never starts on a broken schema
            raise

        logfire.info("Database migrations completed")
        return 0


if __name__ == "__main__":
    sys.exit(main())
