"""Photoreceptor matrices and response models."""

from lurevision.photoreceptors.matrices import (
    VISION_MATRICES,
    VisionMatrices,
    VisionMatrixError,
    build_vision_matrices,
)
from lurevision.photoreceptors.response import SpeciesPhotoreceptorResponse

__all__ = [
    "VISION_MATRICES",
    "VisionMatrices",
    "VisionMatrixError",
    "build_vision_matrices",
    "SpeciesPhotoreceptorResponse",
]
