"""
Logging setup driven by Settings.

Application modules log through ``logging.getLogger(__name__)``; this module
only decides where records go. uvicorn's own loggers are routed through the
same handlers so one format covers server and application lines.
"""

from __future__ import annotations

import logging
import logging.config

from equipes_api.core.config import Settings

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_logging_config(settings: Settings) -> dict:
    """dictConfig payload: console always, file when LOG_FILE is set."""
    handlers = {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "plain",
            "filename": settings.log_file,
            "encoding": "utf-8",
        }
    level = settings.log_level if isinstance(logging.getLevelName(settings.log_level), int) else "INFO"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers)},
        "loggers": {name: {"handlers": [], "propagate": True} for name in _UVICORN_LOGGERS},
    }


def setup_logging(settings: Settings) -> bool:
    """Apply the config unless the root logger is already wired (tests, reloads). Returns True if applied."""
    if logging.getLogger().handlers:
        return False
    logging.config.dictConfig(build_logging_config(settings))
    return True
