"""
Main LureVision processing pipeline.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np

from lurevision.adaptation.mesopic import adjust_saturation, mesopic_blend
from lurevision.core.config import SimulationParams, default_params
from lurevision.core.image import BufferShapeError, PixelInput, as_rgba_array
from lurevision.optics.attenuation import apply_underwater_attenuation
from lurevision.optics.backscatter import RandomSource, add_backscatter
from lurevision.photoreceptors.response import SpeciesPhotoreceptorResponse
from lurevision.species.store import SpeciesVisionStore, default_store
from lurevision.utils.color import decode_8bit, encode_8bit, linear_to_srgb, srgb_to_linear

logger = logging.getLogger(__name__)

Results = Dict[str, Union[np.ndarray, str]]


class LureVisionProcessor:
    """
    Species vision simulation for lure photographs.

    Pipeline stages (every pixel independently):
        1. Decode 8-bit sRGB to [0, 1]
        2. sRGB -> linear
        3. Underwater attenuation (double-pass Beer-Lambert, salinity adjusted)
        4. Forward projection to cone responses, plus rod response
        5. Inverse projection and rod/cone blend
        6. Saturation adjustment
        7. Haze or deep-sea bioluminescence (optional)
        8. Linear -> sRGB with clamping
        9. Encode to 8 bits, alpha copied from the input

    The processor keeps no per-call state; the species store it reads from
    is immutable.
    """

    def __init__(
        self,
        store: Optional[SpeciesVisionStore] = None,
        rng: Optional[RandomSource] = None,
        clamp_inputs: bool = False,
    ) -> None:
        self.store = store or default_store
        self.rng = rng
        self.clamp_inputs = clamp_inputs

        logger.info("Initializing LureVisionProcessor")
        logger.info("  Species: %d", len(self.store))
        logger.info("  Clamp inputs: %s", self.clamp_inputs)

    def process(
        self,
        pixels: PixelInput,
        params: Optional[SimulationParams] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        *,
        rng: Optional[RandomSource] = None,
        out: Optional[np.ndarray] = None,
        return_intermediate: bool = False,
    ) -> Union[np.ndarray, Results]:
        """
        Simulate how the selected species sees an RGBA image.

        Parameters
        ----------
        pixels : array-like or bytes
            H×W×4 uint8 image, or a flat RGBA buffer with ``width``/``height``.
        params : SimulationParams, optional
            Simulation parameters; defaults to :func:`default_params`.
        rng : RandomSource, optional
            Uniform random source for the deep-sea effect. Falls back to the
            processor's source, then to a fresh ``numpy.random.default_rng()``.
        out : np.ndarray, optional
            Caller-owned uint8 buffer with the result's shape to write into.
        return_intermediate : bool
            Return a dictionary of stage arrays instead of the image.

        Returns
        -------
        np.ndarray
            uint8 RGBA in the same layout as ``pixels``.
        """

        params = params or default_params()
        if self.clamp_inputs:
            params = params.clamped()

        rgba, layout = as_rgba_array(pixels, width, height)
        start = time.perf_counter()

        logger.debug(
            "Processing %dx%d image: species=%s depth=%.1fft",
            rgba.shape[1],
            rgba.shape[0],
            params.species_id,
            params.depth,
        )

        matrices = self.store.resolve_matrix(params.species_id)
        response = SpeciesPhotoreceptorResponse(matrices)

        flat = rgba.reshape(-1, 4)
        results: Optional[Results] = {"input": rgba} if return_intermediate else None
        if results is not None:
            results["vision_type"] = matrices.vision_type.value

        srgb = self._stage_decode(flat)
        linear = self._stage_linearize(srgb, results)
        attenuated = self._stage_attenuation(linear, params, results)
        cones, rods = self._stage_forward(attenuated, response, results)
        mixed = self._stage_reconstruct(cones, rods, response, params, results)
        saturated = self._stage_saturation(mixed, params, results)

        if params.backscatter:
            final = self._stage_backscatter(saturated, params, self._pick_rng(rng), results)
        else:
            final = saturated

        encoded = self._stage_encode(final, flat[:, 3])
        output = encoded.reshape(layout)

        if out is not None:
            if out.shape != output.shape or out.dtype != np.uint8:
                raise BufferShapeError(
                    f"Output buffer must be uint8 with shape {output.shape}, got {out.dtype} {out.shape}"
                )
            np.copyto(out, output)
            output = out

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.info("Aquatic vision processing took %.2fms (%d pixels)", elapsed_ms, flat.shape[0])

        if results is not None:
            results["output"] = output
            return results

        return output

    def _pick_rng(self, rng: Optional[RandomSource]) -> RandomSource:
        if rng is not None:
            return rng
        if self.rng is not None:
            return self.rng
        return np.random.default_rng()

    # ------------------------------------------------------------------
    # Individual pipeline stages
    # ------------------------------------------------------------------

    def _stage_decode(self, flat: np.ndarray) -> np.ndarray:
        logger.debug("Stage 1: decode 8-bit RGB")

        return decode_8bit(flat[:, :3])

    def _stage_linearize(
        self,
        srgb: np.ndarray,
        results: Optional[Results],
    ) -> np.ndarray:
        logger.debug("Stage 2: sRGB -> linear")

        linear = srgb_to_linear(srgb)

        if results is not None:
            results["linear"] = linear

        return linear

    def _stage_attenuation(
        self,
        linear: np.ndarray,
        params: SimulationParams,
        results: Optional[Results],
    ) -> np.ndarray:
        logger.debug("Stage 3: underwater attenuation")

        attenuated = apply_underwater_attenuation(linear, params.depth, params.water_properties)

        if results is not None:
            results["attenuated"] = attenuated

        return attenuated

    def _stage_forward(
        self,
        attenuated: np.ndarray,
        response: SpeciesPhotoreceptorResponse,
        results: Optional[Results],
    ) -> Tuple[np.ndarray, np.ndarray]:
        logger.debug("Stage 4: forward projection (%d cones)", response.cone_count)

        cones = response.cone_responses(attenuated)
        rods = response.rod_response(attenuated)

        if results is not None:
            results["cones"] = cones
            results["rods"] = rods

        return cones, rods

    def _stage_reconstruct(
        self,
        cones: np.ndarray,
        rods: np.ndarray,
        response: SpeciesPhotoreceptorResponse,
        params: SimulationParams,
        results: Optional[Results],
    ) -> np.ndarray:
        logger.debug("Stage 5: inverse projection and rod blend")

        cone_rgb = response.cones_to_rgb(cones)
        mixed = mesopic_blend(cone_rgb, rods, params.light_condition.rod_blend)

        if results is not None:
            results["reconstructed"] = mixed

        return mixed

    def _stage_saturation(
        self,
        mixed: np.ndarray,
        params: SimulationParams,
        results: Optional[Results],
    ) -> np.ndarray:
        logger.debug("Stage 6: saturation")

        saturated = adjust_saturation(mixed, params.light_condition.saturation)

        if results is not None:
            results["saturated"] = saturated

        return saturated

    def _stage_backscatter(
        self,
        rgb: np.ndarray,
        params: SimulationParams,
        rng: RandomSource,
        results: Optional[Results],
    ) -> np.ndarray:
        logger.debug("Stage 7: backscatter")

        scattered = add_backscatter(rgb, params.depth, rng)

        if results is not None:
            results["backscatter"] = scattered

        return scattered

    def _stage_encode(self, linear: np.ndarray, alpha: np.ndarray) -> np.ndarray:
        logger.debug("Stage 8-9: linear -> sRGB, encode")

        encoded = np.empty((linear.shape[0], 4), dtype=np.uint8)
        encoded[:, :3] = encode_8bit(linear_to_srgb(linear))
        encoded[:, 3] = alpha
        return encoded


def simulate_lure_vision(
    pixels: PixelInput,
    params: Optional[SimulationParams] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> np.ndarray:
    """
    Convenience wrapper for a one-off simulation.
    """

    processor = LureVisionProcessor()
    return processor.process(pixels, params, width, height, rng=rng)


def simulate_pixel(
    rgba: Sequence[int],
    params: Optional[SimulationParams] = None,
    rng: Optional[RandomSource] = None,
) -> Tuple[int, int, int, int]:
    """Run a single RGBA pixel through the pipeline."""

    result = simulate_lure_vision(
        np.asarray(rgba).reshape(1, 1, 4),
        params,
        rng=rng,
    )
    r, g, b, a = (int(v) for v in result.reshape(4))
    return r, g, b, a
