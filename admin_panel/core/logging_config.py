from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Iterable

from admin_panel.core import config

DEFAULT_EXCLUDED_ACCESS_PATHS = ("/health",)


class AccessPathExcludeFilter(logging.Filter):
    """Drop uvicorn access records whose request path is excluded."""

    def __init__(self, paths: Iterable[str] = DEFAULT_EXCLUDED_ACCESS_PATHS) -> None:
        super().__init__()
        self.paths = tuple(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        args = record.args
        if isinstance(args, tuple) and len(args) >= 3:
            path = str(args[2]).split("?", 1)[0]
            return path not in self.paths
        return True


def build_logging_config(log_dir: Path, *, debug: bool = False) -> dict:
    console_level = "DEBUG" if debug else "INFO"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            }
        },
        "filters": {
            "access_exclude": {
                "()": AccessPathExcludeFilter,
                "paths": list(DEFAULT_EXCLUDED_ACCESS_PATHS),
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": console_level,
                "formatter": "verbose",
            },
            "panel_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "verbose",
                "filename": str(log_dir / "admin_panel.log"),
                "maxBytes": 5 * 1024 * 1024,
                "backupCount": 5,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console", "panel_file"],
                "level": "DEBUG",
            },
            "uvicorn": {
                "handlers": ["console", "panel_file"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["console", "panel_file"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["console", "panel_file"],
                "filters": ["access_exclude"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }


def configure_logging(log_dir: Path | None = None) -> Path:
    """Configure application-wide logging with a rotating file handler."""

    target = log_dir or config.settings.LOG_DIR
    target.mkdir(parents=True, exist_ok=True)
    logging.captureWarnings(True)
    logging.config.dictConfig(build_logging_config(target, debug=config.settings.DEBUG))
    return target


__all__ = ["AccessPathExcludeFilter", "build_logging_config", "configure_logging"]
