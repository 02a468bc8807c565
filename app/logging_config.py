"""Logging setup shared by the API process and the setup scripts."""
from __future__ import annotations

import logging
from logging.config import dictConfig
from pathlib import Path

from app.config import get_settings

_configured = False

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _library_levels(level: str, debug: bool) -> dict[str, dict[str, str]]:
    """
    Per-library logger levels.

    Alembic stays at INFO so upgrades applied at startup are always visible;
    migrations/env.py skips its own fileConfig once these handlers exist.
    Request access lines and SQL statements only show up in debug mode.
    """
    noisy = level if debug else "WARNING"
    return {
        "alembic": {"level": "INFO"},
        "sqlalchemy.engine": {"level": noisy},
        "uvicorn.access": {"level": noisy},
    }


def _default_config(log_dir: Path, level: str, debug: bool = False) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
            "file": {
                "class": "logging.FileHandler",
                "filename": str(log_dir / "app.log"),
                "encoding": "utf-8",
                "formatter": "standard",
            },
        },
        "loggers": _library_levels(level, debug),
        "root": {"level": level, "handlers": ["console", "file"]},
    }


def configure_logging(level: str | None = None) -> None:
    """
    Configure application logging once per process.

    ``level`` overrides ``LOG_LEVEL`` for callers such as
    ``scripts/initial_setup.py --verbose``.
    """

    global _configured
    if _configured:
        return

    settings = get_settings()
    level = (level or settings.log_level).upper()
    settings.log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(_default_config(settings.log_dir, level, settings.debug))
    _configured = True
    logging.getLogger(__name__).debug("Logging configured at %s (dir=%s)", level, settings.log_dir)
