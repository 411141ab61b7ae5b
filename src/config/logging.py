"""
Logging setup - Root logger configuration for the embedding process.

Modules log through logging.getLogger(__name__); this is the single
place that decides where records go and how they are formatted.

Nothing in this package calls configure_logging(). The process that
embeds the services must call it once at startup, before the first
service is requested from src.dependencies.
"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logger once per process."""
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_json:
        handler.setFormatter(JsonFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.log_level.upper())
