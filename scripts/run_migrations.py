#!/usr/bin/env python3
"""Apply the journal schema migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from journal.config import Settings
from journal.util.logging import setup_logging
from journal.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the latest revision."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", environment=settings.environment)

        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy rather than start against a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main())
