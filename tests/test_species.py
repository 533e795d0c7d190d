"""
Tests for the species catalogue and vision matrices.
"""

from __future__ import annotations

import numpy as np
import pytest

from lurevision import VISION_MATRICES, Environment, VisionType
from lurevision.photoreceptors import SpeciesPhotoreceptorResponse, VisionMatrixError, build_vision_matrices
from lurevision.species import (
    DEFAULT_SPECIES_ID,
    FISH_SPECIES,
    SpeciesProfile,
    SpeciesVisionStore,
    default_salinity_for_species,
    default_store,
    get_species_by_id,
    list_by_environment,
    resolve_matrix,
    shows_salinity_control,
)


def test_five_canonical_matrices() -> None:
    assert set(VISION_MATRICES) == set(VisionType)
    for vision_type, matrices in VISION_MATRICES.items():
        n = vision_type.cone_count
        assert matrices.cone_count == n
        assert matrices.rgb_to_species.shape == (3, n)
        assert matrices.species_to_rgb.shape == (n, 3)
        assert len(matrices.cone_labels) == n


def test_matrix_entries_within_unit_interval() -> None:
    for matrices in VISION_MATRICES.values():
        for array in (matrices.rgb_to_species, matrices.species_to_rgb, matrices.rod_weights):
            assert array.min() >= 0.0
            assert array.max() <= 1.0


def test_matrices_are_read_only() -> None:
    matrices = VISION_MATRICES[VisionType.DICHROMATIC]
    with pytest.raises(ValueError):
        matrices.rgb_to_species[0, 0] = 0.0


def test_dichromatic_baseline_values() -> None:
    matrices = VISION_MATRICES[VisionType.DICHROMATIC]
    np.testing.assert_allclose(matrices.rgb_to_species, [[0.85, 0.25], [0.65, 0.92], [0.15, 0.45]])
    np.testing.assert_allclose(matrices.species_to_rgb, [[0.75, 0.15, 0.05], [0.25, 0.85, 0.45]])
    np.testing.assert_allclose(matrices.rod_weights, [0.15, 0.75, 0.35])


def test_mismatched_matrix_is_configuration_error() -> None:
    with pytest.raises(VisionMatrixError):
        build_vision_matrices(
            VisionType.TRICHROMATIC,
            [[0.9, 0.1], [0.2, 0.8], [0.1, 0.3]],
            [[0.8, 0.1, 0.0], [0.1, 0.8, 0.1], [0.0, 0.1, 0.9]],
        )

    with pytest.raises(VisionMatrixError):
        build_vision_matrices(
            VisionType.MONOCHROMATIC,
            [[0.1], [0.7], [0.5]],
            [[0.3, 0.7]],
        )


def test_ragged_table_is_configuration_error() -> None:
    with pytest.raises(VisionMatrixError):
        build_vision_matrices(
            VisionType.DICHROMATIC,
            [[0.85, 0.25], [0.65], [0.15, 0.45]],
            [[0.75, 0.15, 0.05], [0.25, 0.85, 0.45]],
        )


def test_configuration_error_is_value_error() -> None:
    assert issubclass(VisionMatrixError, ValueError)


def test_resolve_matrix_by_vision_type() -> None:
    assert resolve_matrix("goldfish") is VISION_MATRICES[VisionType.TRICHROMATIC]
    assert resolve_matrix("rainbow-trout") is VISION_MATRICES[VisionType.TETRACHROMATIC]
    assert resolve_matrix("reef-damselfish") is VISION_MATRICES[VisionType.PENTACHROMATIC]
    assert resolve_matrix("pacific-hagfish") is VISION_MATRICES[VisionType.MONOCHROMATIC]
    assert resolve_matrix("walleye") is VISION_MATRICES[VisionType.DICHROMATIC]


def test_unknown_species_falls_back_to_dichromatic_default() -> None:
    # Intentional graceful degradation rather than an error.
    assert resolve_matrix("no-such-fish") is VISION_MATRICES[VisionType.DICHROMATIC]
    assert resolve_matrix("") is resolve_matrix(DEFAULT_SPECIES_ID)
    assert get_species_by_id("no-such-fish") is None


def test_species_share_one_matrix_per_vision_type() -> None:
    resolved = {id(resolve_matrix(profile.id)) for profile in FISH_SPECIES}
    assert len(resolved) == len(VisionType)


def test_list_by_environment_keeps_catalogue_order() -> None:
    saltwater = list_by_environment(Environment.SALTWATER)
    expected = tuple(p for p in FISH_SPECIES if p.environment is Environment.SALTWATER)
    assert saltwater == expected
    assert [p.id for p in saltwater][:2] == ["redfish", "tarpon"]
    assert list_by_environment("deep-sea") == list_by_environment(Environment.DEEP_SEA)


def test_list_by_environment_covers_catalogue() -> None:
    total = sum(len(list_by_environment(env)) for env in Environment)
    assert total == len(FISH_SPECIES) == len(default_store)


def test_list_by_unknown_environment_raises() -> None:
    with pytest.raises(ValueError):
        list_by_environment("swamp")


def test_list_by_vision_type() -> None:
    penta = default_store.list_by_vision_type(VisionType.PENTACHROMATIC)
    assert [p.id for p in penta] == ["reef-damselfish", "mantis-shrimp-family"]


def test_default_salinity_and_salinity_control() -> None:
    assert default_salinity_for_species("redfish") == 25.0
    assert default_salinity_for_species("largemouth-bass") == 0.0
    assert default_salinity_for_species("no-such-fish") == 0.0

    assert shows_salinity_control("tarpon")
    assert shows_salinity_control("rainbow-trout")
    assert not shows_salinity_control("goldfish")
    assert not shows_salinity_control("no-such-fish")


def test_store_rejects_duplicate_ids() -> None:
    bass = get_species_by_id("largemouth-bass")
    with pytest.raises(VisionMatrixError):
        SpeciesVisionStore(profiles=[bass, bass])


def test_store_rejects_missing_matrices() -> None:
    only_di = {VisionType.DICHROMATIC: VISION_MATRICES[VisionType.DICHROMATIC]}
    with pytest.raises(VisionMatrixError):
        SpeciesVisionStore(matrices=only_di)


def test_store_rejects_unknown_default() -> None:
    with pytest.raises(VisionMatrixError):
        SpeciesVisionStore(default_species_id="no-such-fish")


def test_custom_store_fallback_uses_its_default() -> None:
    goldfish = get_species_by_id("goldfish")
    store = SpeciesVisionStore(profiles=[goldfish], default_species_id="goldfish")
    assert store.resolve_matrix("anything") is VISION_MATRICES[VisionType.TRICHROMATIC]
    assert "goldfish" in store
    assert list(store) == [goldfish]


def test_profile_cone_count() -> None:
    profile = get_species_by_id("mantis-shrimp-family")
    assert isinstance(profile, SpeciesProfile)
    assert profile.cone_count == 5


def test_photoreceptor_response_shapes() -> None:
    rgb = np.random.default_rng(1).random((10, 3))
    for vision_type, matrices in VISION_MATRICES.items():
        response = SpeciesPhotoreceptorResponse(matrices)
        cones = response.cone_responses(rgb)
        assert cones.shape == (10, vision_type.cone_count)
        assert response.rod_response(rgb).shape == (10,)
        assert response.cones_to_rgb(cones).shape == (10, 3)
        assert response.channel_order == matrices.cone_labels


def test_photoreceptor_response_rejects_wrong_cone_count() -> None:
    response = SpeciesPhotoreceptorResponse(VISION_MATRICES[VisionType.DICHROMATIC])
    with pytest.raises(ValueError):
        response.cones_to_rgb(np.zeros((4, 3)))
