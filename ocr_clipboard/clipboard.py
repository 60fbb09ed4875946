"""Clipboard helpers for the OCR app."""

from __future__ import annotations

import pyperclip
from PIL import Image, ImageGrab

from . import logging_utils, pixels
from .errors import ClipboardReadError, ClipboardWriteError

_LOGGER = logging_utils.get_logger(__name__)


def read_image() -> pixels.Raster:
    """Read the clipboard image as a BGRA raster.

    Raises ``ClipboardReadError`` when the clipboard cannot be opened or
    does not hold image data.
    """
    try:
        grabbed = ImageGrab.grabclipboard()
    except (OSError, NotImplementedError) as exc:
        raise ClipboardReadError("opening clipboard") from exc

    if grabbed is None:
        raise ClipboardReadError("clipboard does not contain an image")
    if not isinstance(grabbed, Image.Image):
        # a list of file names copied from a file manager
        raise ClipboardReadError("clipboard holds file names, not image data")
    if grabbed.width == 0 or grabbed.height == 0:
        raise ClipboardReadError("clipboard image is empty")

    rgba = grabbed.convert("RGBA")
    _LOGGER.debug("Clipboard image: %dx%d (%s)", rgba.width, rgba.height, grabbed.mode)
    # Export in the native DIB channel order (BGRA); the red/blue swap is an involution.
    return pixels.bgra_to_rgba(
        pixels.Raster(width=rgba.width, height=rgba.height, data=rgba.tobytes())
    )


def read_text() -> str:
    """Return the clipboard text."""
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        raise ClipboardReadError("opening clipboard") from exc


def write_text(text: str) -> None:
    """Copy text to the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipWindowsException as exc:
        # OpenClipboard failed, usually because another process holds it
        raise ClipboardWriteError("opening clipboard") from exc
    except pyperclip.PyperclipException as exc:
        raise ClipboardWriteError("copying text") from exc
