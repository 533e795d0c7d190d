"""
Vision matrices mapping linear RGB to photoreceptor responses and back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

import numpy as np

from lurevision.core.config import VisionType
from lurevision.photoreceptors.constants import CONE_LABELS, MATRIX_TABLES, ROD_WEIGHTS


class VisionMatrixError(ValueError):
    """Raised when vision configuration data is inconsistent."""


@dataclass(frozen=True, eq=False)
class VisionMatrices:
    """
    Forward/inverse photoreceptor matrices for one vision type.

    ``rgb_to_species`` is 3 x cone_count and ``species_to_rgb`` is
    cone_count x 3. Both are stored read-only.
    """

    vision_type: VisionType
    rgb_to_species: np.ndarray
    species_to_rgb: np.ndarray
    rod_weights: np.ndarray
    cone_labels: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("rgb_to_species", "species_to_rgb", "rod_weights"):
            array = np.array(getattr(self, name), dtype=np.float64)
            array.setflags(write=False)
            object.__setattr__(self, name, array)
        object.__setattr__(self, "cone_labels", tuple(self.cone_labels))
        self.validate()

    @property
    def cone_count(self) -> int:
        return self.vision_type.cone_count

    def validate(self) -> None:
        """Check matrix dimensions against the declared cone count."""

        n = self.cone_count
        kind = self.vision_type.value

        if self.rgb_to_species.shape != (3, n):
            raise VisionMatrixError(
                f"{kind}: rgb_to_species must be 3x{n}, got {self.rgb_to_species.shape}"
            )

        if self.species_to_rgb.shape != (n, 3):
            raise VisionMatrixError(
                f"{kind}: species_to_rgb must be {n}x3, got {self.species_to_rgb.shape}"
            )

        if self.rod_weights.shape != (3,):
            raise VisionMatrixError(f"{kind}: rod_weights must have 3 entries, got {self.rod_weights.shape}")

        if self.cone_labels and len(self.cone_labels) != n:
            raise VisionMatrixError(f"{kind}: expected {n} cone labels, got {len(self.cone_labels)}")


def build_vision_matrices(
    vision_type: VisionType,
    rgb_to_species: Sequence[Sequence[float]],
    species_to_rgb: Sequence[Sequence[float]],
    rod_weights: Sequence[float] = ROD_WEIGHTS,
    cone_labels: Sequence[str] = (),
) -> VisionMatrices:
    """Construct validated matrices from nested literal tables."""

    try:
        forward = np.array(rgb_to_species, dtype=np.float64)
        inverse = np.array(species_to_rgb, dtype=np.float64)
    except ValueError as exc:  # ragged rows
        raise VisionMatrixError(f"{vision_type.value}: malformed matrix table ({exc})") from exc

    return VisionMatrices(
        vision_type=vision_type,
        rgb_to_species=forward,
        species_to_rgb=inverse,
        rod_weights=np.array(rod_weights, dtype=np.float64),
        cone_labels=tuple(cone_labels),
    )


def _init_vision_matrices() -> Dict[VisionType, VisionMatrices]:
    return {
        vision_type: build_vision_matrices(
            vision_type,
            forward,
            inverse,
            rod_weights=ROD_WEIGHTS,
            cone_labels=CONE_LABELS[vision_type],
        )
        for vision_type, (forward, inverse) in MATRIX_TABLES.items()
    }


VISION_MATRICES: Dict[VisionType, VisionMatrices] = _init_vision_matrices()
