"""
Aquatic species catalogue with vision characteristics.

Cone peaks are listed for reference only; the simulation uses the canonical
matrices of each species' vision type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from lurevision.core.config import Environment, VisionType


@dataclass(frozen=True)
class SalinityRange:
    """Salinity a species lives in, in ppt."""

    min: float
    max: float
    typical: float


@dataclass(frozen=True)
class SpeciesProfile:
    """Static description of one species."""

    id: str
    name: str
    scientific_name: str
    environment: Environment
    vision_type: VisionType
    cone_peaks: Dict[str, float] = field(default_factory=dict)  # nm, keyed by band
    special_features: Tuple[str, ...] = ()
    description: str = ""
    salinity: Optional[SalinityRange] = None

    @property
    def cone_count(self) -> int:
        return self.vision_type.cone_count


FRESH = SalinityRange(min=0.0, max=0.0, typical=0.0)
OCEAN = SalinityRange(min=35.0, max=35.0, typical=35.0)


FISH_SPECIES: Tuple[SpeciesProfile, ...] = (
    # Monochromatic (1 cone)
    SpeciesProfile(
        id="deep-sea-lanternfish",
        name="Deep-sea Lanternfish",
        scientific_name="Myctophidae family",
        environment=Environment.DEEP_SEA,
        vision_type=VisionType.MONOCHROMATIC,
        cone_peaks={"medium_wave": 485},
        special_features=(
            "Optimized for low-light detection",
            "Bioluminescence communication",
            "Minimal color discrimination",
        ),
        description="Single-cone vision tuned to the blue light that reaches the deep ocean; "
        "sees brightness and contrast rather than color.",
        salinity=OCEAN,
    ),
    SpeciesProfile(
        id="pacific-hagfish",
        name="Pacific Hagfish",
        scientific_name="Eptatretus stoutii",
        environment=Environment.DEEP_SEA,
        vision_type=VisionType.MONOCHROMATIC,
        cone_peaks={"medium_wave": 500},
        special_features=(
            "Primitive visual system",
            "Relies heavily on touch and smell",
        ),
        description="Ancient marine species using single-receptor light detection mostly for day/night cycles.",
        salinity=OCEAN,
    ),
    SpeciesProfile(
        id="pacific-viperfish",
        name="Pacific Viperfish",
        scientific_name="Chauliodus macouni",
        environment=Environment.DEEP_SEA,
        vision_type=VisionType.MONOCHROMATIC,
        cone_peaks={"medium_wave": 480},
        special_features=("Large light-gathering eyes", "Hunts by bioluminescent lures"),
        description="Mesopelagic ambush predator that detects the flashes of bioluminescent prey.",
        salinity=OCEAN,
    ),
    SpeciesProfile(
        id="gulper-eel",
        name="Gulper Eel",
        scientific_name="Eurypharynx pelecanoides",
        environment=Environment.DEEP_SEA,
        vision_type=VisionType.MONOCHROMATIC,
        cone_peaks={"medium_wave": 480},
        special_features=("Tiny eyes", "Light/dark detection only"),
        description="Bathypelagic filter feeder whose small eyes register only faint blue light.",
        salinity=OCEAN,
    ),
    # Dichromatic (2 cones)
    SpeciesProfile(
        id="largemouth-bass",
        name="Largemouth Bass",
        scientific_name="Micropterus salmoides",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"medium_wave": 535, "long_wave": 614},
        special_features=(
            "Red-green colorblind like humans",
            "Enhanced motion detection",
            "Excellent contrast sensitivity",
        ),
        description="The baseline species of the model. Dichromatic vision with peak sensitivities "
        "around 535 nm and 614 nm.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="smallmouth-bass",
        name="Smallmouth Bass",
        scientific_name="Micropterus dolomieu",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"medium_wave": 535, "long_wave": 610},
        special_features=("Clear-water sight feeder", "Strong contrast detection"),
        description="Close relative of the largemouth that favors clearer, rockier water.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="walleye",
        name="Walleye",
        scientific_name="Sander vitreus",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"medium_wave": 530, "long_wave": 600},
        special_features=(
            "Tapetum lucidum (reflective eye layer)",
            "Enhanced low-light vision",
            "Superior night hunting ability",
        ),
        description="A reflective tapetum gives exceptional low-light vision; most active at dawn and dusk.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="black-crappie",
        name="Black Crappie",
        scientific_name="Pomoxis nigromaculatus",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"medium_wave": 535, "long_wave": 605},
        special_features=("Feeds heavily at low light", "Large eyes for its size"),
        description="Schooling panfish that feeds on small baitfish around dusk.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="redfish",
        name="Red Drum (Redfish)",
        scientific_name="Sciaenops ocellatus",
        environment=Environment.SALTWATER,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"medium_wave": 540, "long_wave": 620},
        special_features=(
            "Saltwater-adapted dichromatic vision",
            "Enhanced red spectrum sensitivity",
            "Turbid water specialization",
        ),
        description="Coastal predator adapted to turbid inshore water; red sensitivity helps against muddy bottoms.",
        salinity=SalinityRange(min=15.0, max=35.0, typical=25.0),
    ),
    SpeciesProfile(
        id="tarpon",
        name="Atlantic Tarpon",
        scientific_name="Megalops atlanticus",
        environment=Environment.SALTWATER,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"medium_wave": 545, "long_wave": 610},
        special_features=(
            "Large eyes for enhanced light gathering",
            "Excellent low-light performance",
            "Superior motion detection",
        ),
        description="Massive eyes work on shallow flats and in deep water alike; excels at silhouettes.",
        salinity=SalinityRange(min=20.0, max=35.0, typical=35.0),
    ),
    SpeciesProfile(
        id="bonefish",
        name="Bonefish",
        scientific_name="Albula vulpes",
        environment=Environment.SALTWATER,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"medium_wave": 530, "long_wave": 600},
        special_features=("Flats specialist", "Wary of shadows and movement"),
        description="Shallow-flats forager that spots prey against bright sand.",
        salinity=SalinityRange(min=25.0, max=40.0, typical=35.0),
    ),
    SpeciesProfile(
        id="yellowfin-tuna",
        name="Yellowfin Tuna",
        scientific_name="Thunnus albacares",
        environment=Environment.SALTWATER,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"short_wave": 485, "medium_wave": 545},
        special_features=("Blue-shifted cones for open ocean", "High temporal resolution"),
        description="Pelagic hunter whose blue-green cones match the open-ocean light field.",
        salinity=OCEAN,
    ),
    SpeciesProfile(
        id="striped-bass",
        name="Striped Bass",
        scientific_name="Morone saxatilis",
        environment=Environment.ANADROMOUS,
        vision_type=VisionType.DICHROMATIC,
        cone_peaks={"medium_wave": 535, "long_wave": 605},
        special_features=("Moves between salt and fresh water", "Night feeding"),
        description="Migrates from coastal water into rivers to spawn; hunts in low light.",
        salinity=SalinityRange(min=0.0, max=35.0, typical=15.0),
    ),
    # Trichromatic (3 cones)
    SpeciesProfile(
        id="goldfish",
        name="Goldfish",
        scientific_name="Carassius auratus",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.TRICHROMATIC,
        cone_peaks={"short_wave": 450, "medium_wave": 540, "long_wave": 625},
        special_features=(
            "Human-like color vision",
            "Excellent color discrimination",
            "Visual learning capabilities",
        ),
        description="Aquarium species with human-like trichromatic vision, a classic color vision research subject.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="cichlid-haplochromis",
        name="Burton's Mouthbrooder",
        scientific_name="Haplochromis burtoni",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.TRICHROMATIC,
        cone_peaks={"short_wave": 455, "medium_wave": 535, "long_wave": 620},
        special_features=(
            "Social color recognition",
            "Territorial color displays",
        ),
        description="African cichlid using color for territory recognition and mate selection.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="bluegill",
        name="Bluegill",
        scientific_name="Lepomis macrochirus",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.TRICHROMATIC,
        cone_peaks={"short_wave": 450, "medium_wave": 535, "long_wave": 615},
        special_features=("Picks individual prey items", "Good color discrimination"),
        description="Sunfish that selects small invertebrates by sight in weedy shallows.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="northern-pike",
        name="Northern Pike",
        scientific_name="Esox lucius",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.TRICHROMATIC,
        cone_peaks={"short_wave": 460, "medium_wave": 530, "long_wave": 610},
        special_features=("Ambush predator", "Binocular forward field"),
        description="Lies in wait among vegetation and strikes at passing fish.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="common-snook",
        name="Common Snook",
        scientific_name="Centropomus undecimalis",
        environment=Environment.SALTWATER,
        vision_type=VisionType.TRICHROMATIC,
        cone_peaks={"short_wave": 460, "medium_wave": 530, "long_wave": 570},
        special_features=("Mangrove and dock ambusher", "Tolerates brackish water"),
        description="Inshore predator of mangrove edges and estuaries.",
        salinity=SalinityRange(min=5.0, max=35.0, typical=25.0),
    ),
    # Tetrachromatic (4 cones)
    SpeciesProfile(
        id="rainbow-trout",
        name="Rainbow Trout",
        scientific_name="Oncorhynchus mykiss",
        environment=Environment.ANADROMOUS,
        vision_type=VisionType.TETRACHROMATIC,
        cone_peaks={"short_wave": 355, "medium_wave": 532, "long_wave": 625, "ultra_long_wave": 505},
        special_features=(
            "UV vision capability",
            "Polarized light detection",
            "Enhanced prey detection",
        ),
        description="UV-sensitive vision reveals ultraviolet patterns on prey invisible to humans.",
        salinity=SalinityRange(min=0.0, max=35.0, typical=0.0),
    ),
    SpeciesProfile(
        id="brown-trout",
        name="Brown Trout",
        scientific_name="Salmo trutta",
        environment=Environment.ANADROMOUS,
        vision_type=VisionType.TETRACHROMATIC,
        cone_peaks={"short_wave": 355, "medium_wave": 440, "long_wave": 535, "ultra_long_wave": 600},
        special_features=("UV cones in juveniles", "Selective surface feeder"),
        description="Wary trout that inspects flies and lures closely before striking.",
        salinity=SalinityRange(min=0.0, max=35.0, typical=0.0),
    ),
    SpeciesProfile(
        id="atlantic-salmon",
        name="Atlantic Salmon",
        scientific_name="Salmo salar",
        environment=Environment.ANADROMOUS,
        vision_type=VisionType.TETRACHROMATIC,
        cone_peaks={"short_wave": 360, "medium_wave": 440, "long_wave": 530, "ultra_long_wave": 590},
        special_features=("Strikes from reflex on the spawning run", "UV sensitivity as parr"),
        description="Returns from the sea to its natal river; takes flies without feeding.",
        salinity=SalinityRange(min=0.0, max=35.0, typical=0.0),
    ),
    SpeciesProfile(
        id="common-carp",
        name="Common Carp",
        scientific_name="Cyprinus carpio",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.TETRACHROMATIC,
        cone_peaks={"short_wave": 380, "medium_wave": 460, "long_wave": 530, "ultra_long_wave": 610},
        special_features=("Bottom forager", "UV-sensitive cones"),
        description="Cyprinid with four cone classes, foraging in turbid, silty water.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="zebrafish",
        name="Zebrafish",
        scientific_name="Danio rerio",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.TETRACHROMATIC,
        cone_peaks={"short_wave": 361, "medium_wave": 415, "long_wave": 480, "ultra_long_wave": 570},
        special_features=("Model organism for vision research", "UV prey capture"),
        description="Laboratory minnow with UV, blue, green and red cones.",
        salinity=FRESH,
    ),
    SpeciesProfile(
        id="guppy",
        name="Guppy",
        scientific_name="Poecilia reticulata",
        environment=Environment.FRESHWATER,
        vision_type=VisionType.TETRACHROMATIC,
        cone_peaks={"short_wave": 359, "medium_wave": 408, "long_wave": 465, "ultra_long_wave": 572},
        special_features=("Orange-spot mate choice", "UV ornament detection"),
        description="Livebearer whose females choose mates by color pattern.",
        salinity=FRESH,
    ),
    # Pentachromatic (5 cones)
    SpeciesProfile(
        id="reef-damselfish",
        name="Reef Damselfish",
        scientific_name="Pomacentridae family",
        environment=Environment.SALTWATER,
        vision_type=VisionType.PENTACHROMATIC,
        cone_peaks={"short_wave": 350, "medium_wave": 400, "long_wave": 470, "ultra_long_wave": 540},
        special_features=(
            "UV pattern recognition",
            "Reef navigation expertise",
            "Species recognition via UV patterns",
        ),
        description="Reef specialists with the most complex color vision among fishes, reading UV face patterns.",
        salinity=OCEAN,
    ),
    SpeciesProfile(
        id="mantis-shrimp-family",
        name="Mantis Shrimp (simplified)",
        scientific_name="Stomatopoda order",
        environment=Environment.SALTWATER,
        vision_type=VisionType.PENTACHROMATIC,
        cone_peaks={"short_wave": 335, "medium_wave": 380, "long_wave": 450, "ultra_long_wave": 520},
        special_features=(
            "Polarized light detection",
            "Circular polarization vision",
            "UV communication patterns",
        ),
        description="Simplified five-channel model of an eye that actually carries 12-16 photoreceptor types.",
        salinity=OCEAN,
    ),
)
