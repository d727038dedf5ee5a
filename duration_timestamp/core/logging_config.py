"""Logging configuration"""

import logging

from duration_timestamp.core.config import settings


def configure_logging() -> None:
    """Configure console logging for the application"""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),  # Console output
        ],
    )

    # Set specific loggers
    logging.getLogger("duration_timestamp").setLevel(settings.log_level.upper())
    logging.getLogger("uvicorn").setLevel(logging.INFO)
