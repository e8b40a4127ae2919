"""Simple logging wrapper supporting optional file logging."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(name: str, file_path: str | None = None, level: int | str | None = None) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided.

    The level defaults to ``INFO`` on first configuration and is otherwise only
    changed when ``level`` is passed explicitly.
    """

    logger = logging.getLogger(name)
    formatter = logging.Formatter(_FORMAT)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    if file_path:
        target = os.path.abspath(file_path)
        attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == target
            for h in logger.handlers
        )
        if not attached:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
