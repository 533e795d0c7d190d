"""
RGBA pixel buffer handling.

Buffers are 8-bit, row-major, four channels per pixel, sRGB-encoded. They
arrive either as an H x W x 4 array or as a flat buffer plus explicit
width and height.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

import numpy as np

PixelInput = Union[np.ndarray, bytes, bytearray, memoryview, list, tuple]

CHANNELS = 4


class BufferShapeError(ValueError):
    """Raised when a pixel buffer does not describe a valid RGBA image."""


def _to_uint8(array: np.ndarray) -> np.ndarray:
    if array.dtype == np.uint8:
        return array

    if not (np.issubdtype(array.dtype, np.integer) or np.issubdtype(array.dtype, np.floating)):
        raise BufferShapeError(f"Unsupported pixel dtype {array.dtype}")

    if array.size and (
        not np.all(np.isfinite(array)) or array.min() < 0 or array.max() > 255 or np.any(array != np.round(array))
    ):
        raise BufferShapeError("Pixel values must be integers in [0, 255]")

    return array.astype(np.uint8)


def as_rgba_array(
    pixels: PixelInput,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Tuple[np.ndarray, Tuple[int, ...]]:
    """
    Normalise a pixel buffer to an H x W x 4 uint8 array.

    Returns
    -------
    tuple
        ``(rgba, layout)`` where ``layout`` is the shape the result should be
        handed back in (the input's shape, or flat for byte-like input).
    """

    if isinstance(pixels, (bytes, bytearray, memoryview)):
        array = np.frombuffer(pixels, dtype=np.uint8)
    else:
        array = np.asarray(pixels)

    if array.ndim == 3:
        if array.shape[2] != CHANNELS:
            raise BufferShapeError(f"Expected H×W×4 RGBA image, got shape {array.shape}")
        if width is not None and width != array.shape[1]:
            raise BufferShapeError(f"Width {width} does not match image width {array.shape[1]}")
        if height is not None and height != array.shape[0]:
            raise BufferShapeError(f"Height {height} does not match image height {array.shape[0]}")
        return _to_uint8(array), array.shape

    if array.ndim != 1:
        raise BufferShapeError(f"Expected flat RGBA buffer or H×W×4 image, got shape {array.shape}")

    length = array.shape[0]
    if length % CHANNELS != 0:
        raise BufferShapeError(f"Buffer length {length} is not a multiple of {CHANNELS}")

    if width is None or height is None:
        raise BufferShapeError("Flat pixel buffers require width and height")

    if width < 0 or height < 0 or width * height * CHANNELS != length:
        raise BufferShapeError(
            f"Buffer length {length} does not match {width}×{height}×{CHANNELS}"
        )

    rgba = _to_uint8(array).reshape(height, width, CHANNELS)
    return rgba, (length,)
