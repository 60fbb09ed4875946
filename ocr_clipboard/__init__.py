"""Recognize text in a clipboard or file image and copy it back to the clipboard."""

from . import acquire, clipboard, config, dialogs, disposition, errors, logging_utils, materialize, ocr, pixels, tessdata

__all__ = [
    "acquire",
    "clipboard",
    "config",
    "dialogs",
    "disposition",
    "errors",
    "logging_utils",
    "materialize",
    "ocr",
    "pixels",
    "tessdata",
]

__version__ = "0.1.0"
