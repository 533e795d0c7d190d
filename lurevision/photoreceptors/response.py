"""
Projection of linear RGB into a species' photoreceptor space and back.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from lurevision.photoreceptors.matrices import VisionMatrices


class SpeciesPhotoreceptorResponse:
    """
    Cone and rod responses for one set of vision matrices.

    Works on arrays with a trailing RGB (or cone) dimension, so a whole image
    flattened to (N, 3) is processed in a single matrix product.
    """

    def __init__(self, matrices: VisionMatrices) -> None:
        self.matrices = matrices
        self.channel_order: Tuple[str, ...] = matrices.cone_labels

    @property
    def cone_count(self) -> int:
        return self.matrices.cone_count

    def cone_responses(self, rgb: np.ndarray) -> np.ndarray:
        """
        Forward projection: (..., 3) linear RGB -> (..., cone_count) cone catches.
        """

        return np.asarray(rgb, dtype=np.float64) @ self.matrices.rgb_to_species

    def rod_response(self, rgb: np.ndarray) -> np.ndarray:
        """Achromatic rod signal, (..., 3) -> (...)."""

        return np.asarray(rgb, dtype=np.float64) @ self.matrices.rod_weights

    def cones_to_rgb(self, cones: np.ndarray) -> np.ndarray:
        """
        Inverse projection summing every cone's RGB contribution.

        Parameters
        ----------
        cones : np.ndarray
            Cone responses, trailing dimension ``cone_count``.
        """

        cones = np.asarray(cones, dtype=np.float64)
        if cones.shape[-1] != self.cone_count:
            raise ValueError(
                f"Expected {self.cone_count} cone channels, got {cones.shape[-1]}"
            )
        return cones @ self.matrices.species_to_rgb
