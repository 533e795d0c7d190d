"""
Basic usage examples for LureVision.
"""

from __future__ import annotations

import numpy as np

from lurevision import (
    LureVisionProcessor,
    SimulationParams,
    WaterProperties,
    default_params,
    get_light_condition,
    get_water_clarity,
    simulate_lure_vision,
    simulate_pixel,
)


def make_lure(height: int = 128, width: int = 64) -> np.ndarray:
    """Synthetic chartreuse-over-red crankbait on a transparent background."""

    lure = np.zeros((height, width, 4), dtype=np.uint8)
    lure[: height // 2, :, :3] = (200, 230, 40)
    lure[height // 2 :, :, :3] = (210, 30, 40)
    lure[..., 3] = 255
    return lure


def example_simple() -> np.ndarray:
    """Run the pipeline with default parameters."""

    lure = make_lure()
    tmo = LureVisionProcessor()
    seen = tmo.process(lure, default_params())
    print(f"Simple example mean RGB: {seen[..., :3].reshape(-1, 3).mean(axis=0).round(1)}")
    return seen


def example_murky_evening() -> np.ndarray:
    """Walleye at 25 ft in murky water at dusk."""

    params = SimulationParams(
        species_id="walleye",
        depth=25.0,
        water_properties=WaterProperties(clarity=get_water_clarity("murky")),
        light_condition=get_light_condition("overcast"),
        backscatter=True,
    )
    seen = simulate_lure_vision(make_lure(), params)
    print(f"Murky evening example mean RGB: {seen[..., :3].reshape(-1, 3).mean(axis=0).round(1)}")
    return seen


def example_single_pixel() -> tuple:
    """Look at one red pixel through a redfish in saltwater."""

    params = SimulationParams(
        species_id="redfish",
        depth=12.0,
        water_properties=WaterProperties(clarity=get_water_clarity("clear"), salinity=25.0),
    )
    rgba = simulate_pixel((210, 30, 40, 255), params)
    print(f"Red pixel as seen by a redfish: {rgba}")
    return rgba


if __name__ == "__main__":
    print("Running LureVision basic examples...")
    example_simple()
    example_murky_evening()
    example_single_pixel()
