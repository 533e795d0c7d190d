"""Canonical photoreceptor matrices, one per vision type."""

from __future__ import annotations

from typing import Dict, Tuple

from lurevision.core.config import VisionType

Row = Tuple[float, ...]

# Rod response weights (R, G, B). Rhodopsin peaks near 500-530 nm in the
# modelled species, so a single weighting is shared by every vision type.
ROD_WEIGHTS: Tuple[float, float, float] = (0.15, 0.75, 0.35)

# rgb_to_species rows are the R, G, B inputs; columns are cone channels.
# species_to_rgb rows are cone channels; columns are R, G, B outputs.

MONOCHROMATIC_RGB_TO_SPECIES: Tuple[Row, ...] = (
    (0.10,),  # Red channel -> [MWS]
    (0.70,),  # Green channel -> [MWS]
    (0.55,),  # Blue channel -> [MWS]
)
MONOCHROMATIC_SPECIES_TO_RGB: Tuple[Row, ...] = (
    (0.35, 0.75, 0.70),  # MWS -> [R, G, B]
)

# Largemouth bass (Mitchem et al.): LWS peak ~614 nm, RH2 peak ~535 nm.
DICHROMATIC_RGB_TO_SPECIES: Tuple[Row, ...] = (
    (0.85, 0.25),  # Red channel -> [LWS, RH2]
    (0.65, 0.92),  # Green channel -> [LWS, RH2]
    (0.15, 0.45),  # Blue channel -> [LWS, RH2]
)
DICHROMATIC_SPECIES_TO_RGB: Tuple[Row, ...] = (
    (0.75, 0.15, 0.05),  # LWS -> [R, G, B]
    (0.25, 0.85, 0.45),  # RH2 -> [R, G, B]
)

TRICHROMATIC_RGB_TO_SPECIES: Tuple[Row, ...] = (
    (0.90, 0.20, 0.02),  # Red channel -> [LWS, MWS, SWS]
    (0.30, 0.85, 0.10),
    (0.05, 0.25, 0.90),
)
TRICHROMATIC_SPECIES_TO_RGB: Tuple[Row, ...] = (
    (0.85, 0.10, 0.02),
    (0.12, 0.80, 0.10),
    (0.03, 0.10, 0.88),
)

TETRACHROMATIC_RGB_TO_SPECIES: Tuple[Row, ...] = (
    (0.88, 0.22, 0.02, 0.01),  # Red channel -> [LWS, RH2, SWS, UVS]
    (0.35, 0.88, 0.15, 0.05),
    (0.05, 0.30, 0.85, 0.40),
)
TETRACHROMATIC_SPECIES_TO_RGB: Tuple[Row, ...] = (
    (0.80, 0.10, 0.02),
    (0.15, 0.78, 0.12),
    (0.02, 0.10, 0.70),
    (0.10, 0.05, 0.30),  # UV rendered as violet
)

PENTACHROMATIC_RGB_TO_SPECIES: Tuple[Row, ...] = (
    (0.30, 0.05, 0.02, 0.02, 0.01),  # Red channel -> [MWS, BGS, SWS, VS, UVS]
    (0.85, 0.45, 0.12, 0.03, 0.02),
    (0.15, 0.55, 0.90, 0.45, 0.25),
)
PENTACHROMATIC_SPECIES_TO_RGB: Tuple[Row, ...] = (
    (0.20, 0.70, 0.10),
    (0.05, 0.40, 0.35),
    (0.02, 0.10, 0.65),
    (0.25, 0.02, 0.35),
    (0.30, 0.02, 0.30),
)

CONE_LABELS: Dict[VisionType, Tuple[str, ...]] = {
    VisionType.MONOCHROMATIC: ("MWS",),
    VisionType.DICHROMATIC: ("LWS", "RH2"),
    VisionType.TRICHROMATIC: ("LWS", "MWS", "SWS"),
    VisionType.TETRACHROMATIC: ("LWS", "RH2", "SWS", "UVS"),
    VisionType.PENTACHROMATIC: ("MWS", "BGS", "SWS", "VS", "UVS"),
}

MATRIX_TABLES: Dict[VisionType, Tuple[Tuple[Row, ...], Tuple[Row, ...]]] = {
    VisionType.MONOCHROMATIC: (MONOCHROMATIC_RGB_TO_SPECIES, MONOCHROMATIC_SPECIES_TO_RGB),
    VisionType.DICHROMATIC: (DICHROMATIC_RGB_TO_SPECIES, DICHROMATIC_SPECIES_TO_RGB),
    VisionType.TRICHROMATIC: (TRICHROMATIC_RGB_TO_SPECIES, TRICHROMATIC_SPECIES_TO_RGB),
    VisionType.TETRACHROMATIC: (TETRACHROMATIC_RGB_TO_SPECIES, TETRACHROMATIC_SPECIES_TO_RGB),
    VisionType.PENTACHROMATIC: (PENTACHROMATIC_RGB_TO_SPECIES, PENTACHROMATIC_SPECIES_TO_RGB),
}
