"""
Tests for sRGB transfer functions.
"""

from __future__ import annotations

import numpy as np
import pytest

from lurevision.utils.color import (
    LUMA_WEIGHTS,
    encode_8bit,
    linear_to_srgb,
    luminance,
    srgb_to_linear,
)


def test_linear_roundtrip_within_tolerance() -> None:
    rng = np.random.default_rng(0)
    linear = rng.random((256, 3))
    linear[0] = [0.0, 0.0031308, 1.0]

    back = srgb_to_linear(linear_to_srgb(linear))
    np.testing.assert_allclose(back, linear, atol=1e-4)


def test_srgb_roundtrip_within_tolerance() -> None:
    srgb = np.linspace(0.0, 1.0, 1001)
    back = linear_to_srgb(srgb_to_linear(srgb))
    np.testing.assert_allclose(back, srgb, atol=1e-4)


def test_piecewise_segments() -> None:
    assert np.isclose(srgb_to_linear(0.04), 0.04 / 12.92)
    assert np.isclose(srgb_to_linear(0.5), ((0.5 + 0.055) / 1.055) ** 2.4)
    assert np.isclose(linear_to_srgb(0.002), 0.002 * 12.92)
    assert np.isclose(linear_to_srgb(0.5), 1.055 * 0.5 ** (1 / 2.4) - 0.055)


def test_linear_to_srgb_clamps() -> None:
    encoded = linear_to_srgb(np.array([-0.5, 1.7]))
    np.testing.assert_array_equal(encoded, [0.0, 1.0])


def test_luminance_weights() -> None:
    rgb = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0], [1.0, 1.0, 1.0]])
    np.testing.assert_allclose(luminance(rgb), [0.299, 0.587, 0.114, 1.0])


def test_encode_rounds_half_up_and_handles_nan() -> None:
    values = np.array([0.5, 0.6 / 255.0, 1.4 / 255.0, np.nan, 1.0])
    np.testing.assert_array_equal(encode_8bit(values), [128, 1, 1, 0, 255])


def test_luma_weights_are_read_only() -> None:
    with pytest.raises(ValueError):
        LUMA_WEIGHTS[0] = 1.0
