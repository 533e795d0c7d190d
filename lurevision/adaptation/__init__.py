"""Adaptation-related modules."""

from lurevision.adaptation.mesopic import adjust_saturation, mesopic_blend

__all__ = [
    "adjust_saturation",
    "mesopic_blend",
]
