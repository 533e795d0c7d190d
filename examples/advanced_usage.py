"""
Advanced LureVision usage scenarios.
"""

from __future__ import annotations

import numpy as np

from lurevision import (
    Environment,
    LureVisionProcessor,
    SimulationParams,
    WaterProperties,
    default_store,
    interpolate_light_condition,
    interpolate_water_clarity,
)


def make_lure(height: int = 96, width: int = 96) -> np.ndarray:
    """Horizontal colour bands: red, orange, chartreuse, blue, white."""

    colors = [(220, 30, 30), (240, 130, 20), (200, 230, 40), (40, 80, 220), (250, 250, 250)]
    lure = np.zeros((height, width, 4), dtype=np.uint8)
    bands = np.array_split(np.arange(height), len(colors))
    for rows, color in zip(bands, colors):
        lure[rows, :, :3] = color
    lure[..., 3] = 255
    return lure


def example_with_intermediate_results() -> dict:
    """Retrieve intermediate stages for inspection."""

    tmo = LureVisionProcessor()
    results = tmo.process(make_lure(), SimulationParams(species_id="rainbow-trout"), return_intermediate=True)
    keys = ", ".join(results.keys())
    print(f"Intermediate results available: {keys}")
    print(f"Rainbow trout cone responses: {results['cones'].shape}")
    return results


def example_depth_sweep() -> dict:
    """Fade the lure from the surface into the deep sea."""

    tmo = LureVisionProcessor(rng=np.random.default_rng(0))
    lure = make_lure()
    results = {}

    for depth in (0.0, 10.0, 30.0, 60.0, 150.0, 400.0):
        params = SimulationParams(species_id="largemouth-bass", depth=depth, backscatter=True)
        results[depth] = tmo.process(lure, params)

    for depth, img in results.items():
        print(f"{depth:>6.0f} ft: mean={np.mean(img[..., :3]):0.1f}")

    return results


def example_slider_controls() -> np.ndarray:
    """Drive clarity and light from continuous slider positions."""

    params = SimulationParams(
        species_id="bluegill",
        depth=15.0,
        water_properties=WaterProperties(clarity=interpolate_water_clarity(0.35)),
        light_condition=interpolate_light_condition(0.6),
    )
    seen = LureVisionProcessor().process(make_lure(), params)
    print(
        f"Slider example ({params.water_properties.clarity.label}, "
        f"{params.light_condition.label}): mean={np.mean(seen[..., :3]):0.1f}"
    )
    return seen


def example_comparison() -> dict:
    """Compare how each saltwater species sees the same lure."""

    tmo = LureVisionProcessor()
    lure = make_lure()
    results = {}

    for profile in default_store.list_by_environment(Environment.SALTWATER):
        params = SimulationParams(
            species_id=profile.id,
            depth=20.0,
            water_properties=WaterProperties(
                clarity=interpolate_water_clarity(0.0),
                salinity=default_store.default_salinity(profile.id),
            ),
        )
        results[profile.id] = tmo.process(lure, params)

    for name, img in results.items():
        print(f"{name:>16}: mean={np.mean(img[..., :3]):0.1f}, std={np.std(img[..., :3]):0.1f}")

    return results


def example_torch_pipeline():
    """Demonstrate the PyTorch accelerated pipeline (requires torch)."""
    try:
        import torch
        from lurevision.torch import TorchLureVisionProcessor  # type: ignore
    except Exception:  # pragma: no cover - torch optional
        print("PyTorch is not available; skipping GPU example.")
        return None

    device = torch.device("cuda" if torch.cuda.is_available() else "cpu")
    tmo = TorchLureVisionProcessor(device=device)
    seen = tmo.process(torch.from_numpy(make_lure(512, 512)), SimulationParams(species_id="goldfish", depth=8.0))
    print(f"Torch pipeline output on {device}: {tuple(seen.shape)} {seen.dtype}")
    return seen


if __name__ == "__main__":
    print("Running LureVision advanced examples...")
    example_with_intermediate_results()
    example_depth_sweep()
    example_slider_controls()
    example_comparison()
    example_torch_pipeline()
