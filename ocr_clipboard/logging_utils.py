"""Colored stderr logging shared by the ocr_clipboard modules.

One handler lives on the ``ocr_clipboard`` logger; modules log through
child loggers (``ocr_clipboard.ocr`` and so on) that propagate to it.
"""

from __future__ import annotations

import logging
from typing import Optional

from colorlog import ColoredFormatter

ROOT_NAME = "ocr_clipboard"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_ROOT: Optional[logging.Logger] = None


def _root() -> logging.Logger:
    global _ROOT
    if _ROOT is None:
        logger = logging.getLogger(ROOT_NAME)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                ColoredFormatter(
                    "%(log_color)s[%(levelname)s]%(reset)s %(message)s",
                    log_colors=LOG_COLORS,
                )
            )
            logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
        _ROOT = logger
    return _ROOT


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or the child named ``name`` under it."""
    root = _root()
    if not name or name == ROOT_NAME:
        return root
    if name.startswith(ROOT_NAME + "."):
        name = name[len(ROOT_NAME) + 1:]
    return root.getChild(name)


def set_level(level: str) -> None:
    """Apply a level name such as ``"DEBUG"`` to every module logger."""
    _root().setLevel(level.upper())
