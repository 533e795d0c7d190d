"""
Veiling light (haze) and deep-sea bioluminescence effects.

Above the deep-sea threshold the water adds a bluish-gray haze that grows
with depth. Below it the scene is darkened by an ambient decay factor and
sparse blue-green flecks are added at random to mimic bioluminescence. The
decay is applied to all three channels alike.
"""

from __future__ import annotations

import math
from typing import Protocol, Sequence

import numpy as np

DEEP_SEA_THRESHOLD_FT = 100.0

HAZE_COLOR = np.array([0.4, 0.5, 0.6])
HAZE_COLOR.setflags(write=False)
HAZE_MAX_INTENSITY = 0.15
HAZE_FULL_DEPTH_FT = 30.0  # haze saturates at this depth

AMBIENT_DECAY_SCALE_FT = 200.0
AMBIENT_FLOOR = 0.01

BIOLUMINESCENCE_GREEN = 0.015
BIOLUMINESCENCE_BLUE = 0.02


class RandomSource(Protocol):
    """Anything that draws uniform samples in [0, 1), e.g. ``numpy.random.Generator``."""

    def random(self, size: Sequence[int]) -> np.ndarray:
        ...


def is_deep_sea(depth_feet: float) -> bool:
    return depth_feet > DEEP_SEA_THRESHOLD_FT


def haze_intensity(depth_feet: float) -> float:
    """Blend fraction toward the haze color, 15% at 30 ft and beyond."""

    return min(depth_feet / HAZE_FULL_DEPTH_FT, 1.0) * HAZE_MAX_INTENSITY


def ambient_decay(depth_feet: float) -> float:
    """Remaining ambient light below the deep-sea threshold, floored at 1%."""

    return max(AMBIENT_FLOOR, math.exp(-(depth_feet - DEEP_SEA_THRESHOLD_FT) / AMBIENT_DECAY_SCALE_FT))


def add_haze(rgb: np.ndarray, depth_feet: float) -> np.ndarray:
    """Mix linear RGB toward the haze color."""

    intensity = haze_intensity(depth_feet)
    return rgb * (1.0 - intensity) + HAZE_COLOR * intensity


def add_bioluminescence(
    rgb: np.ndarray,
    depth_feet: float,
    rng: RandomSource,
) -> np.ndarray:
    """
    Darken deep-sea pixels and sprinkle green/blue flecks.

    One pair of uniforms is drawn per pixel; column 0 feeds green and
    column 1 feeds blue.
    """

    result = np.asarray(rgb, dtype=np.float64) * ambient_decay(depth_feet)
    jitter = np.asarray(rng.random(result.shape[:-1] + (2,)), dtype=np.float64)
    result[..., 1] += BIOLUMINESCENCE_GREEN * jitter[..., 0]
    result[..., 2] += BIOLUMINESCENCE_BLUE * jitter[..., 1]
    return result


def add_backscatter(
    rgb: np.ndarray,
    depth_feet: float,
    rng: RandomSource,
) -> np.ndarray:
    """Apply haze or the deep-sea effect depending on depth."""

    if is_deep_sea(depth_feet):
        return add_bioluminescence(rgb, depth_feet, rng)
    return add_haze(rgb, depth_feet)
