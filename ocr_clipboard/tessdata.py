"""Bundled Tesseract trained data and its temporary on-disk copy.

Tesseract only reads trained data from a directory, so the payload shipped
inside the package is written to a private temporary ``tessdata`` folder for
the duration of a run.
"""

from __future__ import annotations

import shutil
import tempfile
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Optional

from . import logging_utils
from .errors import EngineInitError

_LOGGER = logging_utils.get_logger(__name__)

LANGUAGE = "eng"
TRAINEDDATA_NAME = f"{LANGUAGE}.traineddata"
TESSDATA_SUBDIR = "tessdata"
# package directory holding the shipped payload
_ASSET_DIR = "data"


def is_bundled() -> bool:
    """Whether the package was built with the trained data file."""
    return (resources.files(__package__) / _ASSET_DIR / TRAINEDDATA_NAME).is_file()


@lru_cache(maxsize=1)
def load_traineddata() -> bytes:
    """Return the embedded trained-data payload."""
    resource = resources.files(__package__) / _ASSET_DIR / TRAINEDDATA_NAME
    try:
        payload = resource.read_bytes()
    except OSError as exc:
        raise EngineInitError(f"{TRAINEDDATA_NAME} is not bundled with this build") from exc
    if not payload:
        raise EngineInitError(f"bundled {TRAINEDDATA_NAME} is empty")
    return payload


class TessDataBundle:
    """Temporary directory holding ``tessdata/<lang>.traineddata``.

    Use as a context manager; the directory is removed when the block exits,
    whether it exits normally or by an exception.
    """

    def __init__(
        self,
        payload: bytes,
        language: str = LANGUAGE,
        temp_dir: Optional[str] = None,
    ) -> None:
        self.payload = payload
        self.language = language
        self.temp_dir = temp_dir
        self.root: Optional[Path] = None

    @property
    def path(self) -> Path:
        """The ``tessdata`` directory to hand to Tesseract."""
        if self.root is None:
            raise RuntimeError("TessDataBundle is not open")
        return self.root / TESSDATA_SUBDIR

    @property
    def traineddata_path(self) -> Path:
        return self.path / f"{self.language}.traineddata"

    def open(self) -> "TessDataBundle":
        try:
            self.root = Path(tempfile.mkdtemp(prefix="ocr_tessdata_", dir=self.temp_dir))
        except OSError as exc:
            raise EngineInitError("creating temp dir") from exc

        try:
            self.path.mkdir()
            self.traineddata_path.write_bytes(self.payload)
        except OSError as exc:
            self.close()
            raise EngineInitError(f"writing {self.language}.traineddata") from exc
        _LOGGER.debug("Wrote %d bytes of trained data to %s", len(self.payload), self.path)
        return self

    def close(self) -> None:
        if self.root is None:
            return
        shutil.rmtree(self.root, ignore_errors=True)
        self.root = None

    def __enter__(self) -> "TessDataBundle":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()
