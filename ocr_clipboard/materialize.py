"""Write acquired images to temporary PNG files for the OCR engine."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from . import logging_utils, pixels
from .acquire import ClipboardRaster, CommandLinePath, ImageSource, PickedFile
from .errors import EncodingError, ImageLoadError

_LOGGER = logging_utils.get_logger(__name__)

# Modes Pillow can write to PNG without conversion.
_PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}

PathLike = Union[str, "os.PathLike[str]"]


class MaterializedImage:
    """Path to an image file, deleted on close when this handle owns it."""

    def __init__(self, path: PathLike, owned: bool = True) -> None:
        self.path = Path(path)
        self.owned = owned
        self._closed = False

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if not self.owned:
            return
        try:
            self.path.unlink()
        except OSError as exc:
            _LOGGER.debug("Could not remove temporary image %s: %s", self.path, exc)

    def __enter__(self) -> "MaterializedImage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"MaterializedImage({str(self.path)!r}, owned={self.owned})"


def _save_png(image: Image.Image, prefix: str, temp_dir: Optional[str]) -> MaterializedImage:
    try:
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=".png", dir=temp_dir)
    except OSError as exc:
        raise EncodingError("creating temporary image file") from exc
    os.close(fd)

    handle = MaterializedImage(name)
    try:
        image.save(handle.path, format="PNG")
    except (OSError, ValueError) as exc:
        handle.close()
        raise EncodingError("saving image as PNG") from exc
    _LOGGER.debug("Wrote %dx%d %s image to %s", image.width, image.height, image.mode, handle.path)
    return handle


def from_raster(raster: pixels.Raster, temp_dir: Optional[str] = None) -> MaterializedImage:
    """Encode an RGBA raster to a temporary PNG."""
    try:
        image = Image.frombytes("RGBA", (raster.width, raster.height), raster.data)
    except ValueError as exc:
        raise EncodingError("building image from clipboard raster") from exc
    return _save_png(image, "ocr_clip_", temp_dir)


def from_decoded_image(image: Image.Image, temp_dir: Optional[str] = None) -> MaterializedImage:
    """Re-encode a decoded image to a temporary PNG with an ASCII-only name."""
    if image.mode not in _PNG_MODES:
        try:
            image = image.convert("RGBA")
        except ValueError as exc:
            raise EncodingError(f"converting {image.mode} image for PNG") from exc
    return _save_png(image, "ocr_file_", temp_dir)


def load_image(path: PathLike) -> Image.Image:
    """Decode an image file fully into memory."""
    with Image.open(path) as img:
        img.load()
        return img.copy()


def materialize(source: ImageSource, temp_dir: Optional[str] = None) -> MaterializedImage:
    """Turn an acquired source into an image file path for the OCR engine."""
    if isinstance(source, CommandLinePath):
        return MaterializedImage(source.path, owned=False)
    if isinstance(source, ClipboardRaster):
        return from_raster(source.raster, temp_dir)
    if isinstance(source, PickedFile):
        try:
            image = load_image(source.path)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise ImageLoadError("failed to open chosen image") from exc
        return from_decoded_image(image, temp_dir)
    raise TypeError(f"unsupported image source: {source!r}")
