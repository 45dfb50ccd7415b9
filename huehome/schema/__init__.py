# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Schema definitions for the color core.

All types in this module are immutable (frozen dataclasses).
They are created per request and discarded once the caller consumes them.
"""

from huehome.schema.color_types import (
    MAX_PACKED_RGB,
    ColorInfo,
    ColorRecommendation,
    LabColor,
    ProcessingMode,
    RecommendationCategory,
    RoomContext,
    RoomSize,
    StyleName,
)

__all__ = [
    "MAX_PACKED_RGB",
    # Core types
    "LabColor",
    "ColorInfo",
    # Scene input
    "RoomSize",
    "RoomContext",
    # Recommendation output
    "RecommendationCategory",
    "ColorRecommendation",
    # Enums normalized at the API boundary
    "StyleName",
    "ProcessingMode",
]
