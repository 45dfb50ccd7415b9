# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Frame-to-recommendation pipeline over injected collaborators.

Camera capture, segmentation and light estimation live outside this
package. They are reached through the small protocols below, so the
core never owns an AR session or an inference runtime.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Protocol, Union

import numpy as np
from numpy.typing import NDArray

from huehome.schema import (
    ColorInfo,
    ColorRecommendation,
    ProcessingMode,
    RoomContext,
    StyleName,
)
from huehome.measure.material import EstimatorConfig, estimate_color
from huehome.harmony.recommend import RecommendationConfig, recommend

logger = logging.getLogger(__name__)


class FrameProvider(Protocol):
    """Supplies the current camera frame as (H, W, 3|4) uint8."""

    def current_frame(self) -> NDArray[np.uint8]: ...


class MaskProvider(Protocol):
    """Supplies the surface mask for a frame, same height and width."""

    def mask_for(self, frame: NDArray[np.uint8]) -> NDArray: ...


class LightEstimator(Protocol):
    """Supplies ambient light intensity in [0, 1]."""

    def lighting_intensity(self) -> float: ...


@dataclass(frozen=True, slots=True)
class SurfaceAnalysis:
    """
    Result of analyzing one surface in one frame.

    Attributes:
        color: Estimated material color
        recommendations: Ranked alternatives for that color
        context: Room context the recommendations were built with
    """
    color: ColorInfo
    recommendations: tuple[ColorRecommendation, ...]
    context: RoomContext

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "color": self.color.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "context": self.context.to_dict(),
        }


class SurfaceAnalyzer:
    """
    Estimate a surface's color and recommend alternatives in one call.

    Example:
        >>> analyzer = SurfaceAnalyzer(camera, segmenter, light_estimator=ar_light)
        >>> result = analyzer.analyze(style_preference="scandinavian")
        >>> len(result.recommendations)
        6
    """

    def __init__(
        self,
        frame_provider: FrameProvider,
        mask_provider: MaskProvider,
        light_estimator: Optional[LightEstimator] = None,
        *,
        base_context: Optional[RoomContext] = None,
        estimator_config: Optional[EstimatorConfig] = None,
        recommendation_config: Optional[RecommendationConfig] = None,
        mode: ProcessingMode = ProcessingMode.ON_DEVICE,
    ) -> None:
        self.frame_provider = frame_provider
        self.mask_provider = mask_provider
        self.light_estimator = light_estimator
        self.base_context = base_context or RoomContext()
        self.estimator_config = estimator_config
        self.recommendation_config = recommendation_config
        self.mode = mode

    def analyze(
        self,
        style_preference: Optional[Union[str, StyleName]] = None,
    ) -> SurfaceAnalysis:
        """
        Pull a frame and mask, estimate the color and rank alternatives.

        Raises:
            EstimationError: the providers returned unusable buffers
        """
        frame = self.frame_provider.current_frame()
        mask = self.mask_provider.mask_for(frame)

        color = estimate_color(frame, mask, self.estimator_config)
        context = self._context()

        recommendations = recommend(
            color,
            context,
            style_preference,
            mode=self.mode,
            config=self.recommendation_config,
        )
        logger.info(
            f"Surface color {color.hex} (confidence {color.confidence:.2f}), "
            f"{len(recommendations)} recommendations"
        )
        return SurfaceAnalysis(color=color, recommendations=recommendations, context=context)

    def _context(self) -> RoomContext:
        """Base context with the latest light estimate, clamped to [0, 1]."""
        if self.light_estimator is None:
            return self.base_context

        intensity = float(self.light_estimator.lighting_intensity())
        intensity = min(max(intensity, 0.0), 1.0)
        return replace(self.base_context, lighting_intensity=intensity)
