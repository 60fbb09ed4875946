"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env_str(name: str, default: Optional[str]) -> Optional[str]:
    v = os.getenv(name)
    if v is None:
        return default
    v = v.strip()
    return v or default


def _env_level(name: str, default: str) -> str:
    v = (_env_str(name, default) or default).upper()
    return v if v in _LEVELS else default


@dataclass(frozen=True)
class AppConfig:
    # path to the tesseract executable; None means look it up on PATH
    tesseract_cmd: Optional[str] = None
    # parent directory for temporary images and trained data
    temp_dir: Optional[str] = None
    log_level: str = "INFO"


def load_config() -> AppConfig:
    defaults = AppConfig()
    return AppConfig(
        tesseract_cmd=_env_str("OCR_TESSERACT_CMD", defaults.tesseract_cmd),
        temp_dir=_env_str("OCR_TEMP_DIR", defaults.temp_dir),
        log_level=_env_level("OCR_LOG_LEVEL", defaults.log_level),
    )


__all__ = ["AppConfig", "load_config"]
