# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Measurement core for HueHome.

Color space conversion and material color estimation from a camera
frame plus a surface mask. All operations are pixel-based and
deterministic.
"""

from huehome.measure.colorspace import lab_to_rgb, rgb_to_lab
from huehome.measure.material import (
    DimensionMismatchError,
    EstimationError,
    EstimatorConfig,
    estimate_color,
)

__all__ = [
    "estimate_color",
    "EstimatorConfig",
    "EstimationError",
    "DimensionMismatchError",
    "rgb_to_lab",
    "lab_to_rgb",
]
