"""
Configuration primitives for LureVision.

Defines enums for vision types and habitats, dataclasses describing the
water and light conditions of a simulation, and the presets the control
surface interpolates between.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Sequence, Tuple

import numpy as np


class VisionType(Enum):
    """Photoreceptor cardinality of a species model."""

    MONOCHROMATIC = "monochromatic"    # 1 cone
    DICHROMATIC = "dichromatic"        # 2 cones
    TRICHROMATIC = "trichromatic"      # 3 cones
    TETRACHROMATIC = "tetrachromatic"  # 4 cones
    PENTACHROMATIC = "pentachromatic"  # 5 cones

    @property
    def cone_count(self) -> int:
        return _CONE_COUNTS[self]


_CONE_COUNTS = {
    VisionType.MONOCHROMATIC: 1,
    VisionType.DICHROMATIC: 2,
    VisionType.TRICHROMATIC: 3,
    VisionType.TETRACHROMATIC: 4,
    VisionType.PENTACHROMATIC: 5,
}


class Environment(Enum):
    """Habitat a species is listed under."""

    FRESHWATER = "freshwater"
    SALTWATER = "saltwater"
    ANADROMOUS = "anadromous"
    DEEP_SEA = "deep-sea"


@dataclass(frozen=True)
class WaterClarity:
    """Base attenuation coefficients of a water body."""

    name: str
    label: str
    k_r: float  # m^-1
    k_g: float  # m^-1
    k_b: float  # m^-1

    @property
    def coefficients(self) -> np.ndarray:
        return np.array([self.k_r, self.k_g, self.k_b], dtype=np.float64)


@dataclass(frozen=True)
class WaterProperties:
    """Optical state of the water for one simulation."""

    clarity: WaterClarity
    salinity: float = 0.0  # ppt, 0 = freshwater, ~35 = ocean


@dataclass(frozen=True)
class LightCondition:
    """Ambient light regime controlling the rod/cone balance."""

    name: str
    label: str
    rod_blend: float  # rod contribution (0-1)
    saturation: float  # chroma scaling (0-1)


WATER_CLARITY_PRESETS: Tuple[WaterClarity, ...] = (
    WaterClarity(name="clear", label="Clear", k_r=0.30, k_g=0.12, k_b=0.08),
    WaterClarity(name="murky", label="Murky", k_r=0.60, k_g=0.35, k_b=0.28),
    WaterClarity(name="muddy", label="Muddy", k_r=1.10, k_g=0.70, k_b=0.60),
)

LIGHT_CONDITIONS: Tuple[LightCondition, ...] = (
    LightCondition(name="bright", label="Bright Sun", rod_blend=0.05, saturation=1.0),  # photopic
    LightCondition(name="overcast", label="Overcast", rod_blend=0.32, saturation=0.70),  # mesopic
    LightCondition(name="low-light", label="Low Light", rod_blend=0.75, saturation=0.32),  # scotopic
)

MAX_SALINITY = 40.0  # ppt


def get_water_clarity(name: str) -> WaterClarity:
    """Look up a clarity preset by name."""

    for preset in WATER_CLARITY_PRESETS:
        if preset.name == name:
            return preset
    raise ValueError(f"Unknown water clarity preset: {name}")


def get_light_condition(name: str) -> LightCondition:
    """Look up a light preset by name."""

    for preset in LIGHT_CONDITIONS:
        if preset.name == name:
            return preset
    raise ValueError(f"Unknown light condition preset: {name}")


def _preset_bracket(position: float, count: int) -> Tuple[int, int, float]:
    position = min(max(float(position), 0.0), 1.0)
    scaled = position * (count - 1)
    lower = int(math.floor(scaled))
    upper = min(lower + 1, count - 1)
    return lower, upper, scaled - lower


def interpolate_water_clarity(
    position: float,
    presets: Sequence[WaterClarity] = WATER_CLARITY_PRESETS,
) -> WaterClarity:
    """
    Blend adjacent clarity presets for a slider position in [0, 1].

    0 maps to the first preset and 1 to the last; positions in between
    interpolate the coefficients of the two neighbouring presets.
    """

    lower_idx, upper_idx, blend = _preset_bracket(position, len(presets))
    lower = presets[lower_idx]
    upper = presets[upper_idx]

    return WaterClarity(
        name=lower.name,
        label=upper.label if blend > 0.5 else lower.label,
        k_r=lower.k_r + (upper.k_r - lower.k_r) * blend,
        k_g=lower.k_g + (upper.k_g - lower.k_g) * blend,
        k_b=lower.k_b + (upper.k_b - lower.k_b) * blend,
    )


def interpolate_light_condition(
    position: float,
    presets: Sequence[LightCondition] = LIGHT_CONDITIONS,
) -> LightCondition:
    """Blend adjacent light presets for a slider position in [0, 1]."""

    lower_idx, upper_idx, blend = _preset_bracket(position, len(presets))
    lower = presets[lower_idx]
    upper = presets[upper_idx]

    return LightCondition(
        name=lower.name,
        label=upper.label if blend > 0.5 else lower.label,
        rod_blend=lower.rod_blend + (upper.rod_blend - lower.rod_blend) * blend,
        saturation=lower.saturation + (upper.saturation - lower.saturation) * blend,
    )


@dataclass(frozen=True)
class SimulationParams:
    """
    Complete parameter set for one simulation call.

    The pipeline never validates these values; callers that accept user input
    should use :meth:`validate` or :meth:`clamped` first.
    """

    species_id: str = "largemouth-bass"
    depth: float = 10.0  # feet
    water_properties: WaterProperties = field(
        default_factory=lambda: WaterProperties(clarity=WATER_CLARITY_PRESETS[0], salinity=0.0)
    )
    light_condition: LightCondition = LIGHT_CONDITIONS[0]
    backscatter: bool = False

    def validate(self) -> None:
        """Validate numeric parameters."""

        if math.isnan(self.depth) or self.depth < 0:
            raise ValueError(f"Depth {self.depth} out of range [0, inf)")

        salinity = self.water_properties.salinity
        if not (0.0 <= salinity <= MAX_SALINITY):
            raise ValueError(f"Salinity {salinity} out of range [0, {MAX_SALINITY}]")

        if not (0.0 <= self.light_condition.rod_blend <= 1.0):
            raise ValueError(f"Rod blend {self.light_condition.rod_blend} out of range [0, 1]")

        if not (0.0 <= self.light_condition.saturation <= 1.0):
            raise ValueError(f"Saturation {self.light_condition.saturation} out of range [0, 1]")

    def clamped(self) -> "SimulationParams":
        """Return a copy with every numeric parameter pulled into its range."""

        depth = 0.0 if math.isnan(self.depth) else max(self.depth, 0.0)
        salinity = self.water_properties.salinity
        salinity = 0.0 if math.isnan(salinity) else min(max(salinity, 0.0), MAX_SALINITY)
        light = self.light_condition

        return replace(
            self,
            depth=depth,
            water_properties=replace(self.water_properties, salinity=salinity),
            light_condition=replace(
                light,
                rod_blend=_clamp_unit(light.rod_blend),
                saturation=_clamp_unit(light.saturation),
            ),
        )


def _clamp_unit(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def default_params() -> SimulationParams:
    """Default simulation: largemouth bass at 10 ft in clear freshwater, bright sun."""

    return SimulationParams()
