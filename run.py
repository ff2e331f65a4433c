#!/usr/bin/env python3
"""Dateboard launcher - serves the API with uvicorn.

Host, port and log level come from the environment or a `.env` file in the
working directory (HOST, PORT, LOG_LEVEL).

Usage:
    python run.py
"""
import sys

import structlog
import uvicorn

from dateboard.config import settings
from dateboard.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def main() -> None:
    """Configure logging and serve the app until interrupted."""
    configure_logging(settings.log_level)
    logger.info("listening", host=settings.host, port=settings.port)
    uvicorn.run(
        "dateboard.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
