"""Species catalogue and vision profile store."""

from lurevision.species.profiles import FISH_SPECIES, SalinityRange, SpeciesProfile
from lurevision.species.store import (
    DEFAULT_SPECIES_ID,
    SpeciesVisionStore,
    default_salinity_for_species,
    default_store,
    get_species_by_id,
    list_by_environment,
    list_by_vision_type,
    resolve_matrix,
    shows_salinity_control,
)

__all__ = [
    "FISH_SPECIES",
    "SalinityRange",
    "SpeciesProfile",
    "DEFAULT_SPECIES_ID",
    "SpeciesVisionStore",
    "default_salinity_for_species",
    "default_store",
    "get_species_by_id",
    "list_by_environment",
    "list_by_vision_type",
    "resolve_matrix",
    "shows_salinity_control",
]
