"""LureVision.

Simulates how aquatic species see a fishing lure underwater: depth and
salinity dependent light attenuation, species photoreceptor projection,
rod/cone blending by ambient light and optional haze or deep-sea
bioluminescence.
"""

from lurevision.core.config import (
    LIGHT_CONDITIONS,
    WATER_CLARITY_PRESETS,
    Environment,
    LightCondition,
    SimulationParams,
    VisionType,
    WaterClarity,
    WaterProperties,
    default_params,
    get_light_condition,
    get_water_clarity,
    interpolate_light_condition,
    interpolate_water_clarity,
)
from lurevision.core.image import BufferShapeError
from lurevision.core.pipeline import LureVisionProcessor, simulate_lure_vision, simulate_pixel
from lurevision.photoreceptors.matrices import VISION_MATRICES, VisionMatrices, VisionMatrixError
from lurevision.species.store import DEFAULT_SPECIES_ID, SpeciesVisionStore, default_store

__all__ = [
    "LureVisionProcessor",
    "simulate_lure_vision",
    "simulate_pixel",
    "SimulationParams",
    "WaterClarity",
    "WaterProperties",
    "LightCondition",
    "VisionType",
    "Environment",
    "WATER_CLARITY_PRESETS",
    "LIGHT_CONDITIONS",
    "default_params",
    "get_water_clarity",
    "get_light_condition",
    "interpolate_water_clarity",
    "interpolate_light_condition",
    "BufferShapeError",
    "VISION_MATRICES",
    "VisionMatrices",
    "VisionMatrixError",
    "DEFAULT_SPECIES_ID",
    "SpeciesVisionStore",
    "default_store",
]

try:  # Optional PyTorch acceleration
    from lurevision.torch.pipeline import TorchLureVisionProcessor  # type: ignore

    __all__.append("TorchLureVisionProcessor")
except Exception:  # pragma: no cover - torch not installed
    TorchLureVisionProcessor = None  # type: ignore

__version__ = "1.0.0"
