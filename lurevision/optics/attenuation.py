"""
Underwater light attenuation (Beer-Lambert) with salinity adjustment.

Light reaching the viewer travels from the surface down to the lure and back
up again, so the optical path is twice the physical depth:

    I_c(z) = I_c * exp(-k'_c * 2z)

Dissolved ions raise attenuation slightly, most strongly for red light:

    k'_c = k_c * (1 + (salinity / 10) * s_c)
"""

from __future__ import annotations

import numpy as np

from lurevision.core.config import WaterClarity, WaterProperties

FEET_TO_METERS = 0.3048

# Fractional increase of k per 10 ppt salinity, (R, G, B).
SALINITY_SENSITIVITY = np.array([0.008, 0.005, 0.003])
SALINITY_SENSITIVITY.setflags(write=False)


def double_pass_depth(depth_feet: float) -> float:
    """Optical path length in metres for a lure at ``depth_feet``."""

    return 2.0 * depth_feet * FEET_TO_METERS


def salinity_adjusted_k(clarity: WaterClarity, salinity: float) -> np.ndarray:
    """
    Scale the base attenuation coefficients for salinity.

    Returns
    -------
    np.ndarray
        Adjusted (k_R, k_G, k_B) in m^-1.
    """

    salinity_factor = salinity / 10.0
    return clarity.coefficients * (1.0 + salinity_factor * SALINITY_SENSITIVITY)


def transmittance(depth_feet: float, water: WaterProperties) -> np.ndarray:
    """Per-channel fraction of light surviving the double pass."""

    k = salinity_adjusted_k(water.clarity, water.salinity)
    return np.exp(-k * double_pass_depth(depth_feet))


def apply_underwater_attenuation(
    rgb: np.ndarray,
    depth_feet: float,
    water: WaterProperties,
) -> np.ndarray:
    """
    Attenuate linear RGB for a lure at the given depth.

    Parameters
    ----------
    rgb : np.ndarray
        Linear RGB, trailing dimension 3.
    depth_feet : float
        Physical depth of the lure in feet.
    water : WaterProperties
        Clarity preset and salinity.
    """

    return np.asarray(rgb, dtype=np.float64) * transmittance(depth_feet, water)
