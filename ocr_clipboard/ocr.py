"""OCR helpers that wrap Tesseract (via pytesseract) for the clipboard app.

The engine is bound to a private tessdata directory that holds only the
bundled English model, so no system-wide language data is required.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Union

import pytesseract
from PIL import Image

from . import logging_utils, tessdata
from .errors import EngineInitError, ImageLoadError, RecognitionError

_LOGGER = logging_utils.get_logger(__name__)


class TesseractEngine:
    """A Tesseract session bound to one tessdata directory and language."""

    def __init__(
        self,
        tessdata_dir: Union[str, Path],
        language: str = tessdata.LANGUAGE,
        tesseract_cmd: Optional[str] = None,
    ) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.language = language
        self.config = f'--tessdata-dir "{tessdata_dir}"'
        self._image: Optional[Image.Image] = None

        try:
            available = pytesseract.get_languages(config=self.config)
        except (pytesseract.TesseractNotFoundError, pytesseract.TesseractError, OSError) as exc:
            raise EngineInitError("initializing Tesseract") from exc
        if language not in available:
            raise EngineInitError("initializing Tesseract") from LookupError(
                f"language {language!r} not found in {tessdata_dir}"
            )

    def set_image(self, path: Union[str, Path]) -> None:
        try:
            with Image.open(path) as img:
                img.load()
                self._image = img.copy()
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise ImageLoadError("loading image into Tesseract") from exc

    def get_utf8_text(self) -> str:
        if self._image is None:
            raise RecognitionError("running OCR") from RuntimeError("no image loaded")
        try:
            return pytesseract.image_to_string(
                self._image, lang=self.language, config=self.config
            )
        except (pytesseract.TesseractError, OSError, RuntimeError) as exc:
            raise RecognitionError("running OCR") from exc


def recognize_file(
    image_path: Union[str, Path],
    tesseract_cmd: Optional[str] = None,
    temp_dir: Optional[str] = None,
) -> str:
    """Run OCR on an image file with the bundled trained data.

    The returned text is exactly what Tesseract produced (no trimming).
    """
    payload = tessdata.load_traineddata()

    t0 = time.perf_counter()
    with tessdata.TessDataBundle(payload, temp_dir=temp_dir) as bundle:
        engine = TesseractEngine(bundle.path, tesseract_cmd=tesseract_cmd)
        t1 = time.perf_counter()
        engine.set_image(image_path)
        text = engine.get_utf8_text()
        t2 = time.perf_counter()

    _LOGGER.info(
        "[PERF] init=%.1fms infer=%.1fms total=%.1fms",
        (t1 - t0) * 1000.0,
        (t2 - t1) * 1000.0,
        (t2 - t0) * 1000.0,
    )
    _LOGGER.info("[OCR] chars=%d", len(text))
    return text
