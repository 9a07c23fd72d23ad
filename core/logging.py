import logging.config

from core import settings


def configure_logging() -> None:
    """Apply settings.LOGGING to the logging system."""
    logging.config.dictConfig(settings.LOGGING)
