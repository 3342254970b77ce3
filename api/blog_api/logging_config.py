"""Process-wide logging setup."""

from __future__ import annotations

import logging

from blog_api.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _parse_level(value: str | None) -> int:
    """Map a string log level (e.g. 'DEBUG', 'info') to a logging constant, defaulting to INFO."""
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, force: bool = False) -> logging.Logger:
    """
    Initialize root logging from ``LOG_LEVEL`` and return the service logger.

    Called once from the application lifespan. Uvicorn installs its own
    handlers for its access log; this only affects application loggers.
    """
    logging.basicConfig(
        level=_parse_level(settings.log_level),
        format=LOG_FORMAT,
        force=force,
    )
    return logging.getLogger("blog_api")
