# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Color harmony: theory transforms, style palettes and recommendations.
"""

from huehome.harmony.theory import (
    analogous,
    complementary,
    contrast_ratio,
    darken,
    has_sufficient_contrast,
    lighten,
    monochromatic,
    rotate_hue,
    split_complementary,
    triadic,
)
from huehome.harmony.styles import (
    PALETTES,
    all_styles,
    find_closest,
    get_palette,
    normalize_style,
)
from huehome.harmony.recommend import (
    RecommendationConfig,
    RecommendationEngine,
    filter_by_contrast,
    recommend,
)

__all__ = [
    # Theory
    "complementary",
    "analogous",
    "triadic",
    "split_complementary",
    "monochromatic",
    "lighten",
    "darken",
    "rotate_hue",
    "contrast_ratio",
    "has_sufficient_contrast",
    # Styles
    "PALETTES",
    "normalize_style",
    "get_palette",
    "all_styles",
    "find_closest",
    # Recommendations
    "recommend",
    "filter_by_contrast",
    "RecommendationConfig",
    "RecommendationEngine",
]
