"""Error types for the OCR clipboard workflow.

Each error carries the step that failed as its message; the library
exception that caused it is chained with ``raise ... from``.
"""

from __future__ import annotations


class OcrClipboardError(Exception):
    """Base class for all workflow errors."""


class InvalidBufferError(OcrClipboardError):
    """Raw pixel buffer does not match the declared raster dimensions."""


class ClipboardReadError(OcrClipboardError):
    """Clipboard could not be opened or holds no image."""


class EncodingError(OcrClipboardError):
    """Image could not be encoded or written to a temporary file."""


class EngineInitError(OcrClipboardError):
    """Tesseract could not be started with the bundled trained data."""


class ImageLoadError(OcrClipboardError):
    """Image file could not be loaded for recognition."""


class RecognitionError(OcrClipboardError):
    """Text extraction failed."""


class ClipboardWriteError(OcrClipboardError):
    """Recognized text could not be copied to the clipboard."""


class DialogError(OcrClipboardError):
    """A native dialog could not be shown."""


def describe(exc: BaseException) -> str:
    """Render ``exc`` and its explicit causes as ``"context: cause: ..."``."""
    parts = []
    seen = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        parts.append(str(current) or type(current).__name__)
        current = current.__cause__
    return ": ".join(parts)


__all__ = [
    "OcrClipboardError",
    "InvalidBufferError",
    "ClipboardReadError",
    "EncodingError",
    "EngineInitError",
    "ImageLoadError",
    "RecognitionError",
    "ClipboardWriteError",
    "DialogError",
    "describe",
]
