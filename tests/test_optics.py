"""
Tests for water attenuation and backscatter.
"""

from __future__ import annotations

import numpy as np
import pytest

from lurevision.core.config import WaterProperties, get_water_clarity
from lurevision.optics import (
    add_backscatter,
    add_bioluminescence,
    add_haze,
    ambient_decay,
    apply_underwater_attenuation,
    double_pass_depth,
    haze_intensity,
    salinity_adjusted_k,
    transmittance,
)


class FixedRandom:
    """Random source returning a constant value."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = []

    def random(self, size):
        self.calls.append(tuple(size))
        return np.full(size, self.value)


def test_double_pass_depth_in_meters() -> None:
    assert double_pass_depth(10.0) == pytest.approx(6.096)
    assert double_pass_depth(0.0) == 0.0


def test_salinity_adjusted_k() -> None:
    clear = get_water_clarity("clear")
    np.testing.assert_allclose(salinity_adjusted_k(clear, 0.0), [0.30, 0.12, 0.08])
    np.testing.assert_allclose(
        salinity_adjusted_k(clear, 35.0),
        [0.30 * (1 + 3.5 * 0.008), 0.12 * (1 + 3.5 * 0.005), 0.08 * (1 + 3.5 * 0.003)],
    )


def test_zero_depth_is_identity() -> None:
    water = WaterProperties(clarity=get_water_clarity("muddy"), salinity=30.0)
    rgb = np.array([[0.2, 0.5, 0.9]])
    np.testing.assert_array_equal(apply_underwater_attenuation(rgb, 0.0, water), rgb)


@pytest.mark.parametrize("clarity", ["clear", "murky", "muddy"])
@pytest.mark.parametrize("salinity", [0.0, 20.0, 40.0])
def test_attenuation_decreases_with_depth(clarity: str, salinity: float) -> None:
    water = WaterProperties(clarity=get_water_clarity(clarity), salinity=salinity)
    depths = [0.0, 1.0, 5.0, 10.0, 20.0, 40.0]
    values = np.stack([apply_underwater_attenuation(np.ones(3), d, water) for d in depths])
    assert np.all(np.diff(values, axis=0) < 0)


def test_red_attenuates_fastest_in_clear_water() -> None:
    water = WaterProperties(clarity=get_water_clarity("clear"), salinity=0.0)
    t = transmittance(20.0, water)
    assert t[0] < t[1] < t[2]


def test_salinity_increases_attenuation() -> None:
    clear = get_water_clarity("clear")
    fresh = transmittance(20.0, WaterProperties(clarity=clear, salinity=0.0))
    salt = transmittance(20.0, WaterProperties(clarity=clear, salinity=35.0))
    assert np.all(salt < fresh)


def test_haze_intensity_caps_at_30ft() -> None:
    assert haze_intensity(0.0) == 0.0
    assert haze_intensity(15.0) == pytest.approx(0.075)
    assert haze_intensity(30.0) == pytest.approx(0.15)
    assert haze_intensity(90.0) == pytest.approx(0.15)


def test_add_haze_blends_toward_haze_color() -> None:
    rgb = np.zeros((2, 3))
    hazed = add_haze(rgb, 30.0)
    np.testing.assert_allclose(hazed, np.tile([0.06, 0.075, 0.09], (2, 1)))


def test_ambient_decay_floor() -> None:
    assert ambient_decay(100.0) == pytest.approx(1.0)
    assert ambient_decay(300.0) == pytest.approx(np.exp(-1.0))
    assert ambient_decay(5000.0) == 0.01


def test_bioluminescence_uses_injected_random_source() -> None:
    rgb = np.full((4, 3), 0.5)
    source = FixedRandom(0.5)
    result = add_bioluminescence(rgb, 300.0, source)

    decay = np.exp(-1.0)
    assert source.calls == [(4, 2)]
    np.testing.assert_allclose(result[:, 0], 0.5 * decay)
    np.testing.assert_allclose(result[:, 1], 0.5 * decay + 0.015 * 0.5)
    np.testing.assert_allclose(result[:, 2], 0.5 * decay + 0.02 * 0.5)


def test_deep_sea_decay_is_uniform_across_channels() -> None:
    rgb = np.array([[0.8, 0.4, 0.2]])
    result = add_bioluminescence(rgb, 200.0, FixedRandom(0.0))
    np.testing.assert_allclose(result / rgb, np.full((1, 3), ambient_decay(200.0)))


def test_backscatter_switches_at_100ft() -> None:
    rgb = np.full((1, 3), 0.5)
    source = FixedRandom(0.0)

    shallow = add_backscatter(rgb, 100.0, source)
    np.testing.assert_allclose(shallow, add_haze(rgb, 100.0))
    assert source.calls == []

    deep = add_backscatter(rgb, 100.5, source)
    np.testing.assert_allclose(deep, rgb * ambient_decay(100.5))
    assert source.calls == [(1, 2)]


def test_backscatter_with_numpy_generator_is_bounded() -> None:
    rng = np.random.default_rng(42)
    rgb = np.zeros((1000, 3))
    result = add_backscatter(rgb, 400.0, rng)
    assert np.all(result[:, 0] == 0.0)
    assert np.all((result[:, 1] >= 0.0) & (result[:, 1] < 0.015))
    assert np.all((result[:, 2] >= 0.0) & (result[:, 2] < 0.02))


def test_module_constants_are_read_only() -> None:
    from lurevision.optics.attenuation import SALINITY_SENSITIVITY
    from lurevision.optics.backscatter import HAZE_COLOR

    for constant in (SALINITY_SENSITIVITY, HAZE_COLOR):
        with pytest.raises(ValueError):
            constant[0] = 1.0

    hazed = add_haze(np.zeros((1, 3)), 30.0)
    np.testing.assert_allclose(hazed, [[0.06, 0.075, 0.09]])
