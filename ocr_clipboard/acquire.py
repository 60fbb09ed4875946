"""Image acquisition: command-line path, clipboard image, then file picker."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Union

from . import clipboard, dialogs, errors, logging_utils, pixels

_LOGGER = logging_utils.get_logger(__name__)

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "bmp", "tiff", "gif")
PICKER_TITLE = "Select an image for OCR"


@dataclass(frozen=True)
class CommandLinePath:
    path: Path


@dataclass(frozen=True)
class ClipboardRaster:
    """Clipboard image, already normalized to RGBA."""

    raster: pixels.Raster


@dataclass(frozen=True)
class PickedFile:
    path: Path


ImageSource = Union[CommandLinePath, ClipboardRaster, PickedFile]
Strategy = Callable[[], Optional[ImageSource]]


def from_argument(argument: Optional[str]) -> Optional[CommandLinePath]:
    if argument is None:
        return None
    return CommandLinePath(Path(argument))


def from_clipboard() -> ClipboardRaster:
    raster = clipboard.read_image()
    return ClipboardRaster(pixels.bgra_to_rgba(raster))


def from_file_picker() -> Optional[PickedFile]:
    path = dialogs.pick_file(IMAGE_EXTENSIONS, PICKER_TITLE)
    if path is None:
        return None
    return PickedFile(path)


def first_available(strategies: Sequence[Tuple[str, Strategy]]) -> Optional[ImageSource]:
    """Return the first non-None source, trying ``strategies`` in order.

    Errors from every strategy but the last are logged and skipped; the
    last strategy's errors propagate to the caller.
    """
    last = len(strategies) - 1
    for index, (name, strategy) in enumerate(strategies):
        try:
            source = strategy()
        except Exception as exc:
            if index == last:
                raise
            _LOGGER.debug("No image from %s: %s", name, errors.describe(exc))
            continue
        if source is not None:
            _LOGGER.info("Using image from %s", name)
            return source
    return None


def acquire_source(argument: Optional[str]) -> Optional[ImageSource]:
    """Pick the image for this run; None means the user selected nothing."""
    return first_available(
        [
            ("command line", partial(from_argument, argument)),
            ("clipboard", from_clipboard),
            ("file picker", from_file_picker),
        ]
    )
