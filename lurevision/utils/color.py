"""
sRGB transfer functions and luminance helpers.
"""

from __future__ import annotations

import numpy as np

# Rec. 601 luma weights, used for the saturation stage.
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])
LUMA_WEIGHTS.setflags(write=False)


def srgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """
    Decode sRGB values in [0, 1] to linear light.

    Parameters
    ----------
    srgb : np.ndarray
        sRGB-encoded values, any shape.
    """

    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.0) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: np.ndarray) -> np.ndarray:
    """Encode linear light to sRGB and clamp to [0, 1]."""

    linear = np.asarray(linear, dtype=np.float64)
    encoded = np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(np.maximum(linear, 0.0), 1.0 / 2.4) - 0.055,
    )
    return np.clip(encoded, 0.0, 1.0)


def luminance(rgb: np.ndarray) -> np.ndarray:
    """
    Rec. 601 luminance of RGB triples.

    Parameters
    ----------
    rgb : np.ndarray
        Array with trailing dimension 3.
    """

    return np.asarray(rgb, dtype=np.float64) @ LUMA_WEIGHTS


def decode_8bit(values: np.ndarray) -> np.ndarray:
    """Normalise 8-bit channel values to [0, 1]."""

    return np.asarray(values, dtype=np.float64) / 255.0


def encode_8bit(values: np.ndarray) -> np.ndarray:
    """Scale [0, 1] values to 8 bits, rounding half up. NaN encodes as 0."""

    scaled = np.floor(np.nan_to_num(values, nan=0.0) * 255.0 + 0.5)
    return np.clip(scaled, 0, 255).astype(np.uint8)
