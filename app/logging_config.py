"""
Logging configuration for Bookstore Service
"""
import logging
import sys

from app.config import settings


def setup_logging():
    """
    Configure the root logger once for the whole service.

    Level comes from settings.LOG_LEVEL; output goes to stdout so that
    container runtimes pick it up.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Reduce verbosity from external libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
