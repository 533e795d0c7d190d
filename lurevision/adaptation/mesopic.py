"""
Mesopic (rod and cone) combination and saturation utilities.
"""

from __future__ import annotations

import numpy as np

from lurevision.utils.color import luminance


def mesopic_blend(
    cone_rgb: np.ndarray,
    rods: np.ndarray,
    rod_blend: float,
) -> np.ndarray:
    """
    Mix reconstructed cone color with the achromatic rod signal.

    Parameters
    ----------
    cone_rgb : np.ndarray
        Linear RGB reconstructed from cone responses, shape (..., 3).
    rods : np.ndarray
        Rod response, shape (...); used as a gray (rod, rod, rod) color.
    rod_blend : float
        Rod contribution, 0 = photopic, 1 = fully scotopic.
    """

    rod_rgb = np.asarray(rods, dtype=np.float64)[..., np.newaxis]
    return cone_rgb * (1.0 - rod_blend) + rod_rgb * rod_blend


def adjust_saturation(rgb: np.ndarray, saturation: float) -> np.ndarray:
    """Scale chroma about Rec. 601 luminance; 0 yields gray."""

    lum = luminance(rgb)[..., np.newaxis]
    return lum + (rgb - lum) * saturation
