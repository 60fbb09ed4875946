"""Pixel buffer helpers for clipboard rasters."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InvalidBufferError

BYTES_PER_PIXEL = 4

# B,G,R,A -> R,G,B,A (and back: the swap is its own inverse)
_SWAP_RED_BLUE = [2, 1, 0, 3]


@dataclass(frozen=True)
class Raster:
    """Flat 4-byte-per-pixel buffer with its dimensions."""

    width: int
    height: int
    data: bytes


def bgra_to_rgba(raster: Raster) -> Raster:
    """Reorder a BGRA raster into RGBA.

    Raises ``InvalidBufferError`` when the buffer length is not exactly
    ``width * height * 4``.
    """
    width, height = raster.width, raster.height
    expected = width * height * BYTES_PER_PIXEL
    if width < 0 or height < 0 or len(raster.data) != expected:
        raise InvalidBufferError(
            f"invalid image buffer from clipboard: expected {expected} bytes "
            f"for {width}x{height}, got {len(raster.data)}"
        )

    pixels = np.frombuffer(raster.data, dtype=np.uint8).reshape(
        height, width, BYTES_PER_PIXEL
    )
    return Raster(width=width, height=height, data=pixels[..., _SWAP_RED_BLUE].tobytes())
