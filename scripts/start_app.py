#!/usr/bin/env python3
"""Serve the voting API with uvicorn."""

import sys

import logfire
import uvicorn

from verdict.config import Settings
from verdict.util.logging import get_logger, setup_logging
from verdict.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    """Configure logging and observability, then start uvicorn."""
    settings = Settings()

    # Both must be configured before the app module is imported
    setup_logging(settings)
    configure_logfire(settings)

    logger.info("Starting verdict API (environment=%s)", settings.environment)

    try:
        uvicorn.run(
            "verdict.interface.api.app:app",
            host="0.0.0.0",
            port=8000,
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
