"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(e.g. uvicorn access logs) can be silenced without affecting the rest of
the application.

Usage:
    from video_api.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (in the lifespan)
"""

import logging
import sys

from video_api.config import Settings, get_settings


_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels from application settings."""
    settings = settings or get_settings()
    root_level = _parse_level(settings.log_level)

    root = logging.getLogger()
    root.setLevel(root_level)

    # uvicorn usually installs its own handlers; tests and scripts do not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    uvicorn_level = _parse_level(settings.log_level_uvicorn)
    for name in _UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(uvicorn_level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, uvicorn=%s",
        settings.log_level,
        settings.log_level_uvicorn,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
