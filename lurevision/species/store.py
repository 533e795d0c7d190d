"""
Species vision profile store.

Resolves a species id to the canonical vision matrices of its vision type.
Unknown ids fall back to the dichromatic baseline (largemouth bass) instead
of raising: callers always offer a valid default selection and the
simulation must still produce an image when handed a stale id.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from lurevision.core.config import Environment, VisionType
from lurevision.photoreceptors.matrices import VISION_MATRICES, VisionMatrices, VisionMatrixError
from lurevision.species.profiles import FISH_SPECIES, SpeciesProfile

logger = logging.getLogger(__name__)

DEFAULT_SPECIES_ID = "largemouth-bass"


class SpeciesVisionStore:
    """Immutable catalogue of species and their vision matrices."""

    def __init__(
        self,
        profiles: Iterable[SpeciesProfile] = FISH_SPECIES,
        matrices: Mapping[VisionType, VisionMatrices] = VISION_MATRICES,
        default_species_id: str = DEFAULT_SPECIES_ID,
    ) -> None:
        self._profiles: Tuple[SpeciesProfile, ...] = tuple(profiles)
        self._matrices: Dict[VisionType, VisionMatrices] = dict(matrices)
        self._by_id: Dict[str, SpeciesProfile] = {}

        for profile in self._profiles:
            if profile.id in self._by_id:
                raise VisionMatrixError(f"Duplicate species id: {profile.id}")
            if profile.vision_type not in self._matrices:
                raise VisionMatrixError(
                    f"No vision matrices for {profile.vision_type.value} (species {profile.id})"
                )
            self._by_id[profile.id] = profile

        for vision_type, matrices in self._matrices.items():
            if matrices.vision_type != vision_type:
                raise VisionMatrixError(
                    f"Matrices registered under {vision_type.value} describe {matrices.vision_type.value}"
                )

        if default_species_id not in self._by_id:
            raise VisionMatrixError(f"Default species {default_species_id} is not in the catalogue")

        self.default_species_id = default_species_id

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self) -> Iterator[SpeciesProfile]:
        return iter(self._profiles)

    def __contains__(self, species_id: object) -> bool:
        return species_id in self._by_id

    @property
    def default_profile(self) -> SpeciesProfile:
        return self._by_id[self.default_species_id]

    def get(self, species_id: str) -> Optional[SpeciesProfile]:
        return self._by_id.get(species_id)

    def resolve_matrix(self, species_id: str) -> VisionMatrices:
        """
        Vision matrices for a species.

        Unknown ids resolve to the default species' matrices; this is a
        deliberate fallback, not an error.
        """

        profile = self._by_id.get(species_id)
        if profile is None:
            logger.debug("Unknown species %r, using %s", species_id, self.default_species_id)
            profile = self.default_profile
        return self._matrices[profile.vision_type]

    def list_by_environment(self, environment: Union[Environment, str]) -> Tuple[SpeciesProfile, ...]:
        """Species listed under a habitat, in catalogue order."""

        environment = Environment(environment)
        return tuple(p for p in self._profiles if p.environment is environment)

    def list_by_vision_type(self, vision_type: Union[VisionType, str]) -> Tuple[SpeciesProfile, ...]:
        vision_type = VisionType(vision_type)
        return tuple(p for p in self._profiles if p.vision_type is vision_type)

    def default_salinity(self, species_id: str) -> float:
        """Typical salinity for a species; 0 when unknown."""

        profile = self._by_id.get(species_id)
        if profile is None or profile.salinity is None:
            return 0.0
        return profile.salinity.typical

    def shows_salinity_control(self, species_id: str) -> bool:
        """Whether salinity is worth exposing for this species (non-freshwater)."""

        profile = self._by_id.get(species_id)
        return profile is not None and profile.environment is not Environment.FRESHWATER


default_store = SpeciesVisionStore()


def get_species_by_id(species_id: str) -> Optional[SpeciesProfile]:
    return default_store.get(species_id)


def resolve_matrix(species_id: str) -> VisionMatrices:
    return default_store.resolve_matrix(species_id)


def list_by_environment(environment: Union[Environment, str]) -> Tuple[SpeciesProfile, ...]:
    return default_store.list_by_environment(environment)


def list_by_vision_type(vision_type: Union[VisionType, str]) -> Tuple[SpeciesProfile, ...]:
    return default_store.list_by_vision_type(vision_type)


def default_salinity_for_species(species_id: str) -> float:
    return default_store.default_salinity(species_id)


def shows_salinity_control(species_id: str) -> bool:
    return default_store.shows_salinity_control(species_id)
