"""Water optics: attenuation and backscatter."""

from lurevision.optics.attenuation import (
    apply_underwater_attenuation,
    double_pass_depth,
    salinity_adjusted_k,
    transmittance,
)
from lurevision.optics.backscatter import (
    RandomSource,
    add_backscatter,
    add_bioluminescence,
    add_haze,
    ambient_decay,
    haze_intensity,
)

__all__ = [
    "apply_underwater_attenuation",
    "double_pass_depth",
    "salinity_adjusted_k",
    "transmittance",
    "RandomSource",
    "add_backscatter",
    "add_bioluminescence",
    "add_haze",
    "ambient_decay",
    "haze_intensity",
]
