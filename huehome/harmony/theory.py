# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Color theory transforms in LAB space.

Hue relationships are rotations of the (a, b) chroma vector around the
neutral axis; lightness is left alone unless the transform is about
lightness. Every function is pure and total over the LAB domain.
"""

from __future__ import annotations

import math

from huehome.schema import LabColor


# Largest lightness shift used by monochromatic(), in L units
MONOCHROMATIC_RANGE = 20.0

# WCAG AA for normal text
DEFAULT_MIN_CONTRAST = 4.5


def _clamp_l(l: float) -> float:
    return min(max(l, 0.0), 100.0)


def rotate_hue(color: LabColor, degrees: float) -> LabColor:
    """
    Rotate a color around the neutral axis by ``degrees``.

    Positive angles rotate counter-clockwise in the (a, b) plane.
    """
    theta = math.radians(degrees)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    a = color.a * cos_t - color.b * sin_t
    b = color.a * sin_t + color.b * cos_t
    return LabColor(l=color.l, a=a, b=b)


def complementary(color: LabColor) -> LabColor:
    """
    Opposite hue (180°), the strongest possible chroma contrast.

    Negates a and b exactly rather than rotating, so applying it twice
    returns the original components.
    """
    return LabColor(l=color.l, a=-color.a, b=-color.b)


def analogous(color: LabColor, count: int = 2) -> list[LabColor]:
    """Neighbors at +30°, +60°, ... for ``count`` steps."""
    return [rotate_hue(color, 30.0 * i) for i in range(1, count + 1)]


def triadic(color: LabColor) -> list[LabColor]:
    """The two other corners of an equilateral triangle (120°, 240°)."""
    return [rotate_hue(color, 120.0), rotate_hue(color, 240.0)]


def split_complementary(color: LabColor) -> list[LabColor]:
    """Both sides of the complement (150°, 210°)."""
    return [rotate_hue(color, 150.0), rotate_hue(color, 210.0)]


def monochromatic(color: LabColor, count: int = 3) -> list[LabColor]:
    """
    Same a/b, lightness spread evenly across ±MONOCHROMATIC_RANGE.

    For i in 1..count the new lightness is
    ``L + 20 * (i / (count + 1) - 0.5) * 2``, clamped to [0, 100].
    """
    variations = []
    for i in range(1, count + 1):
        factor = i / (count + 1)
        l = _clamp_l(color.l + MONOCHROMATIC_RANGE * (factor - 0.5) * 2)
        variations.append(LabColor(l=l, a=color.a, b=color.b))
    return variations


def lighten(color: LabColor, amount: float = 10.0) -> LabColor:
    """Raise lightness by ``amount``, clamped to 100."""
    return LabColor(l=_clamp_l(color.l + amount), a=color.a, b=color.b)


def darken(color: LabColor, amount: float = 10.0) -> LabColor:
    """Lower lightness by ``amount``, clamped to 0."""
    return LabColor(l=_clamp_l(color.l - amount), a=color.a, b=color.b)


def contrast_ratio(color1: LabColor, color2: LabColor) -> float:
    """
    WCAG-style contrast ratio using LAB lightness as luminance.

    Returns:
        Ratio between 1 (identical lightness) and 21 (white on black)
    """
    l1 = color1.l / 100.0
    l2 = color2.l / 100.0
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def has_sufficient_contrast(
    color1: LabColor,
    color2: LabColor,
    min_ratio: float = DEFAULT_MIN_CONTRAST,
) -> bool:
    """True if the pair reaches ``min_ratio`` (default: WCAG AA, 4.5:1)."""
    return contrast_ratio(color1, color2) >= min_ratio
