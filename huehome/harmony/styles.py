# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Curated interior-design palettes and nearest-color lookup.

Style names arrive as free text from user settings. They are normalized
to StyleName here; anything unrecognized becomes MODERN.
"""

from __future__ import annotations

from typing import Optional, Union

from huehome.schema import LabColor, StyleName
from huehome.measure.colorspace import rgb_to_lab


PALETTES: dict[StyleName, tuple[int, ...]] = {
    # Clean, neutral with bold accents
    StyleName.MODERN: (
        0xFFFFFF,  # Pure White
        0x2C3E50,  # Dark Blue Gray
        0xECF0F1,  # Light Gray
        0x3498DB,  # Bright Blue
        0xE74C3C,  # Red Accent
        0x95A5A6,  # Medium Gray
    ),
    # Monochromatic, subtle variations
    StyleName.MINIMAL: (
        0xFAFAFA,  # Off White
        0xF5F5F5,  # Light Gray
        0xEEEEEE,  # Lighter Gray
        0xBDBDBD,  # Medium Gray
        0x757575,  # Dark Gray
        0x424242,  # Charcoal
    ),
    # Earthy, cozy tones
    StyleName.WARM: (
        0xFFF8E1,  # Cream
        0xFFE0B2,  # Light Peach
        0xD7CCC8,  # Warm Beige
        0xBCAAA4,  # Taupe
        0x8D6E63,  # Brown
        0xFF8A65,  # Coral
    ),
    # Rich, sophisticated colors
    StyleName.LUXURY: (
        0x1A1A2E,  # Deep Navy
        0x16213E,  # Dark Blue
        0xD4AF37,  # Gold
        0x2C3E50,  # Slate
        0x8B4513,  # Saddle Brown
        0xFFFFFF,  # Pure White
    ),
    # Light, airy with natural accents
    StyleName.SCANDINAVIAN: (
        0xFFFFFF,  # White
        0xF5F5DC,  # Beige
        0xD3D3D3,  # Light Gray
        0x8B7355,  # Natural Wood
        0x2F4F4F,  # Dark Slate Gray
        0xB0C4DE,  # Light Steel Blue
    ),
}

DEFAULT_STYLE = StyleName.MODERN


def normalize_style(style: Optional[Union[str, StyleName]]) -> StyleName:
    """
    Map a style name to StyleName, case-insensitively.

    None, empty and unknown names map to MODERN.
    """
    if isinstance(style, StyleName):
        return style
    if not style:
        return DEFAULT_STYLE
    try:
        return StyleName(style.strip().lower())
    except ValueError:
        return DEFAULT_STYLE


def get_palette(style: Optional[Union[str, StyleName]]) -> tuple[int, ...]:
    """Packed colors for a style (MODERN for unknown names)."""
    return PALETTES[normalize_style(style)]


def all_styles() -> dict[str, tuple[int, ...]]:
    """Every palette keyed by display name ("Modern", "Minimal", ...)."""
    return {style.value.capitalize(): colors for style, colors in PALETTES.items()}


def find_closest(color: LabColor, palette: tuple[int, ...]) -> int:
    """
    Palette entry nearest to ``color`` by Euclidean LAB distance.

    Linear scan; on equal distance the earlier entry wins.

    Raises:
        ValueError: if the palette is empty
    """
    if not palette:
        raise ValueError("Cannot search an empty palette")

    closest = palette[0]
    min_distance = float("inf")

    for candidate in palette:
        distance = color.distance_to(rgb_to_lab(candidate))
        if distance < min_distance:
            min_distance = distance
            closest = candidate

    return closest
