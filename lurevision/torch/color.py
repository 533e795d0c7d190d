"""
sRGB transfer functions implemented with torch tensors.
"""

from __future__ import annotations

import torch

LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def srgb_to_linear(srgb: torch.Tensor) -> torch.Tensor:
    return torch.where(
        srgb <= 0.04045,
        srgb / 12.92,
        ((srgb.clamp(min=0.0) + 0.055) / 1.055).pow(2.4),
    )


def linear_to_srgb(linear: torch.Tensor) -> torch.Tensor:
    encoded = torch.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * linear.clamp(min=0.0).pow(1.0 / 2.4) - 0.055,
    )
    return encoded.clamp(0.0, 1.0)


def luminance(rgb: torch.Tensor) -> torch.Tensor:
    """Rec. 601 luminance of (N, 3) linear RGB, returned as (N, 1)."""

    weights = torch.tensor(LUMA_WEIGHTS, dtype=rgb.dtype, device=rgb.device)
    return (rgb @ weights).unsqueeze(-1)


def encode_8bit(values: torch.Tensor) -> torch.Tensor:
    """Round half up to 8 bits; NaN encodes as 0."""

    scaled = torch.floor(torch.nan_to_num(values, nan=0.0) * 255.0 + 0.5)
    return scaled.clamp(0, 255).to(torch.uint8)
