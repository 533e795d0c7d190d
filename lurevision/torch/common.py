"""
Shared helpers for the torch-based LureVision implementation.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import torch


def resolve_device(device: Optional[torch.device] = None) -> torch.device:
    """Use the requested device, else CUDA when available, else CPU."""

    if device is not None:
        return device
    return torch.device("cuda" if torch.cuda.is_available() else "cpu")


def constant(values: Sequence, device: torch.device, dtype: torch.dtype) -> torch.Tensor:
    """Small constant vector or matrix on the pipeline device."""

    return torch.as_tensor(np.asarray(values, dtype=np.float64), dtype=dtype, device=device)
