"""Logging setup shared by services and the desktop application."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from coin_catalog.config.constants import (
    LOG_BACKUPS,
    LOG_FILE,
    LOG_LEVEL,
    LOG_MAX_BYTES,
    LOG_TO_STDOUT,
)

_configured = False


def setup_logging() -> None:
    """Configure the root logger once (stdout and optional rotating file)."""
    global _configured
    if _configured:
        return

    level = getattr(logging, LOG_LEVEL, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    # Avoid duplicate handlers
    if not root.handlers:
        if LOG_TO_STDOUT:
            ch = logging.StreamHandler(sys.stdout)
            ch.setLevel(level)
            ch.setFormatter(formatter)
            root.addHandler(ch)

        if LOG_FILE:
            try:
                os.makedirs(os.path.dirname(LOG_FILE) or ".", exist_ok=True)
                fh = RotatingFileHandler(LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS)
                fh.setLevel(level)
                fh.setFormatter(formatter)
                root.addHandler(fh)
            except OSError as e:
                root.warning("Failed to initialize file logging: %s", e)

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
