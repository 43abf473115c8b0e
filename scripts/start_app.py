#!/usr/bin/env python3
"""Start the journal API, reporting startup errors to Logfire."""

import sys
import logfire
import uvicorn

from journal.config import Settings
from journal.util.logging import setup_logging
from journal.util.observability import check_production_secrets, configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    try:
        check_production_secrets(settings)
        logfire.info(
            "Starting journal API",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "journal.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
