# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
HueHome -- Color science and recommendation core for AR room painting.

Estimates a surface's material color from a camera frame and mask, then
suggests harmonious alternatives adjusted for room lighting.

Quick start::

    from huehome import estimate_color, recommend, RoomContext

    info = estimate_color(frame, mask)
    recs = recommend(info, RoomContext(lighting_intensity=0.2), "warm")
    recs[0].hex
"""

from __future__ import annotations

__version__ = "1.0.0"

from huehome.schema import (
    ColorInfo,
    ColorRecommendation,
    LabColor,
    ProcessingMode,
    RecommendationCategory,
    RoomContext,
    RoomSize,
    StyleName,
)
from huehome.measure import (
    DimensionMismatchError,
    EstimationError,
    EstimatorConfig,
    estimate_color,
    lab_to_rgb,
    rgb_to_lab,
)
from huehome.harmony import (
    RecommendationConfig,
    RecommendationEngine,
    filter_by_contrast,
    recommend,
)
from huehome.pipeline import SurfaceAnalysis, SurfaceAnalyzer

__all__ = [
    # Core API
    "estimate_color",
    "recommend",
    "filter_by_contrast",
    "rgb_to_lab",
    "lab_to_rgb",
    "RecommendationEngine",
    "SurfaceAnalyzer",
    "SurfaceAnalysis",
    # Config
    "EstimatorConfig",
    "RecommendationConfig",
    # Errors
    "EstimationError",
    "DimensionMismatchError",
    # Types (commonly needed)
    "LabColor",
    "ColorInfo",
    "RoomContext",
    "RoomSize",
    "ColorRecommendation",
    "RecommendationCategory",
    "StyleName",
    "ProcessingMode",
    # Version
    "__version__",
]
