# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Canonical value types for the HueHome color core.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same input -> same value
- Serializable: JSON-ready for the rendering and persistence layers

Packed colors are plain ints in 0xRRGGBB form (24 bit, no alpha).

CIELAB Color Space (D65, 2 degree observer):
- l (Lightness): 0.0 = black, 100.0 = white
- a: green (-) to red (+), roughly -128..127
- b: blue (-) to yellow (+), roughly -128..127
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# Float slack allowed on L. sRGB white lands a hair above 100 through the
# D65 matrix.
_L_TOLERANCE = 0.01

MAX_PACKED_RGB = 0xFFFFFF


def _check_packed(value: int, name: str) -> None:
    if not 0 <= value <= MAX_PACKED_RGB:
        raise ValueError(f"{name} must be a packed 0xRRGGBB color, got {value!r}")


def _check_unit(value: float, name: str) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be 0-1, got {value}")


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class LabColor:
    """
    A single color in CIELAB space.

    LAB is perceptually uniform, which makes it the working space for
    every distance and hue rotation in HueHome.

    Attributes:
        l: Lightness (0 = black, 100 = white)
        a: Green-red axis
        b: Blue-yellow axis
        rgb: Packed sRGB color this value came from (or maps to).
            Derived from l/a/b when omitted.
    """
    l: float
    a: float
    b: float
    rgb: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate lightness and fill in the packed color."""
        if not -_L_TOLERANCE <= self.l <= 100.0 + _L_TOLERANCE:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")
        if self.rgb is None:
            from huehome.measure.colorspace import lab_to_rgb
            object.__setattr__(self, "rgb", lab_to_rgb(self.l, self.a, self.b))
        else:
            _check_packed(self.rgb, "rgb")

    @classmethod
    def from_rgb(cls, rgb: int) -> LabColor:
        """Convert a packed sRGB color to LAB."""
        from huehome.measure.colorspace import rgb_to_lab
        return rgb_to_lab(rgb)

    def to_rgb(self) -> int:
        """Recompute the packed sRGB color from l/a/b (ignores ``rgb``)."""
        from huehome.measure.colorspace import lab_to_rgb
        return lab_to_rgb(self.l, self.a, self.b)

    @property
    def hex(self) -> str:
        """Hex string like "#3941C8" for the packed color."""
        from huehome.measure.colorspace import rgb_to_hex
        return rgb_to_hex(self.rgb)

    @property
    def chroma(self) -> float:
        """Distance from the neutral axis in the a/b plane."""
        return math.hypot(self.a, self.b)

    @property
    def hue(self) -> float:
        """Hue angle in degrees [0, 360) measured in the a/b plane."""
        return math.degrees(math.atan2(self.b, self.a)) % 360.0

    def distance_to(self, other: LabColor) -> float:
        """Euclidean (CIE76) distance to another LAB color."""
        return math.sqrt(
            (self.l - other.l) ** 2
            + (self.a - other.a) ** 2
            + (self.b - other.b) ** 2
        )

    def to_dict(self, include_hex: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_hex: If True, include the "#RRGGBB" form of ``rgb``
        """
        d = {"l": self.l, "a": self.a, "b": self.b, "rgb": self.rgb}
        if include_hex:
            d["hex"] = self.hex
        return d

    @classmethod
    def from_dict(cls, data: dict) -> LabColor:
        """Deserialize from dictionary."""
        return cls(l=data["l"], a=data["a"], b=data["b"], rgb=data.get("rgb"))


@dataclass(frozen=True, slots=True)
class ColorInfo:
    """
    The detected material color of one surface region.

    Attributes:
        rgb: Packed representative color
        lab: LAB form of ``rgb``
        confidence: Estimator certainty (0.0-1.0), higher when the
            surviving pixels sit tightly around the chosen cluster
        sample_rgb: Packed color of the real masked pixel nearest the
            cluster center. The center is an average, not a real pixel.
        pixel_count: Pixels that took part in clustering
    """
    rgb: int
    lab: LabColor
    confidence: float
    sample_rgb: Optional[int] = None
    pixel_count: int = 0

    def __post_init__(self) -> None:
        _check_packed(self.rgb, "rgb")
        _check_unit(self.confidence, "Confidence")
        if self.sample_rgb is not None:
            _check_packed(self.sample_rgb, "sample_rgb")
        if self.pixel_count < 0:
            raise ValueError(f"pixel_count must be >= 0, got {self.pixel_count}")

    @classmethod
    def from_rgb(cls, rgb: int, confidence: float = 1.0) -> ColorInfo:
        """Wrap a known color (e.g. a user pick) as a ColorInfo."""
        return cls(rgb=rgb, lab=LabColor.from_rgb(rgb), confidence=confidence)

    @property
    def hex(self) -> str:
        return _hex(self.rgb)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {
            "rgb": self.rgb,
            "lab": self.lab.to_dict(),
            "confidence": self.confidence,
            "pixel_count": self.pixel_count,
        }
        if self.sample_rgb is not None:
            d["sample_rgb"] = self.sample_rgb
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ColorInfo:
        """Deserialize from dictionary."""
        return cls(
            rgb=data["rgb"],
            lab=LabColor.from_dict(data["lab"]),
            confidence=data["confidence"],
            sample_rgb=data.get("sample_rgb"),
            pixel_count=data.get("pixel_count", 0),
        )


def _hex(rgb: int) -> str:
    from huehome.measure.colorspace import rgb_to_hex
    return rgb_to_hex(rgb)


# =============================================================================
# Room Context
# =============================================================================


class RoomSize(Enum):
    """Estimated room size reported by the scene layer."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True, slots=True)
class RoomContext:
    """
    Scene facts supplied by the AR layer.

    Only ``lighting_intensity`` currently changes recommendations. The
    remaining fields are part of the contract so callers can populate
    them today.

    Attributes:
        lighting_intensity: Ambient light estimate (0.0 = dark, 1.0 = bright)
        lighting_color_tint: RGBA color correction from light estimation
        room_size: Estimated room size
        color_temperature: 0.0 = warm, 1.0 = cool
        wall_count: Number of detected walls
        existing_colors: Packed colors already present in the room
    """
    lighting_intensity: float = 0.5
    lighting_color_tint: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    room_size: RoomSize = RoomSize.MEDIUM
    color_temperature: float = 0.5
    wall_count: int = 0
    existing_colors: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate ranges and freeze sequence fields into tuples."""
        _check_unit(self.lighting_intensity, "lighting_intensity")
        _check_unit(self.color_temperature, "color_temperature")
        tint = tuple(float(c) for c in self.lighting_color_tint)
        if len(tint) != 4:
            raise ValueError(
                f"lighting_color_tint must have 4 components, got {len(tint)}"
            )
        object.__setattr__(self, "lighting_color_tint", tint)
        colors = tuple(int(c) for c in self.existing_colors)
        for c in colors:
            _check_packed(c, "existing_colors entry")
        object.__setattr__(self, "existing_colors", colors)
        if self.wall_count < 0:
            raise ValueError(f"wall_count must be >= 0, got {self.wall_count}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "lighting_intensity": self.lighting_intensity,
            "lighting_color_tint": list(self.lighting_color_tint),
            "room_size": self.room_size.value,
            "color_temperature": self.color_temperature,
            "wall_count": self.wall_count,
            "existing_colors": list(self.existing_colors),
        }

    @classmethod
    def from_dict(cls, data: dict) -> RoomContext:
        """Deserialize from dictionary. Missing keys take their defaults."""
        return cls(
            lighting_intensity=data.get("lighting_intensity", 0.5),
            lighting_color_tint=tuple(
                data.get("lighting_color_tint", (1.0, 1.0, 1.0, 1.0))
            ),
            room_size=RoomSize(data.get("room_size", RoomSize.MEDIUM.value)),
            color_temperature=data.get("color_temperature", 0.5),
            wall_count=data.get("wall_count", 0),
            existing_colors=tuple(data.get("existing_colors", ())),
        )


# =============================================================================
# Recommendations
# =============================================================================


class RecommendationCategory(Enum):
    """Why a color was suggested."""
    # Color theory based
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"
    SPLIT_COMPLEMENTARY = "split_complementary"
    CONTRAST = "contrast"

    # Style based
    MODERN = "modern"
    MINIMAL = "minimal"
    WARM = "warm"
    LUXURY = "luxury"
    SCANDINAVIAN = "scandinavian"


class StyleName(Enum):
    """Interior-design styles with a curated palette."""
    MODERN = "modern"
    MINIMAL = "minimal"
    WARM = "warm"
    LUXURY = "luxury"
    SCANDINAVIAN = "scandinavian"

    @property
    def category(self) -> RecommendationCategory:
        """Recommendation category for colors drawn from this style."""
        return RecommendationCategory(self.value)


class ProcessingMode(Enum):
    """Where recommendations are computed."""
    ON_DEVICE = "on_device"
    CLOUD = "cloud"
    HYBRID = "hybrid"  # on-device detection, cloud recommendations


@dataclass(frozen=True, slots=True)
class ColorRecommendation:
    """
    One suggested alternative color.

    Attributes:
        color: Packed suggested color
        lab_color: LAB form of the suggestion
        reason: Human-readable explanation (never empty)
        confidence: Ranking score (0.0-1.0)
        category: Which heuristic produced it
    """
    color: int
    lab_color: LabColor
    reason: str
    confidence: float
    category: RecommendationCategory

    def __post_init__(self) -> None:
        _check_packed(self.color, "color")
        _check_unit(self.confidence, "Confidence")
        if not self.reason:
            raise ValueError("reason cannot be empty")

    @classmethod
    def from_lab(
        cls,
        lab: LabColor,
        *,
        reason: str,
        confidence: float,
        category: RecommendationCategory,
    ) -> ColorRecommendation:
        """
        Build a recommendation whose packed color is ``lab.rgb``.

        Confidence is rounded to 6 decimals.
        """
        return cls(
            color=lab.rgb,
            lab_color=lab,
            reason=reason,
            confidence=round(float(confidence), 6),
            category=category,
        )

    @property
    def hex(self) -> str:
        return _hex(self.color)

    def to_dict(self, include_lab: bool = True) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_lab: If False, omit the LAB block (hex/packed only)
        """
        d = {
            "color": self.color,
            "hex": self.hex,
            "reason": self.reason,
            "confidence": self.confidence,
            "category": self.category.value,
        }
        if include_lab:
            d["lab"] = self.lab_color.to_dict()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ColorRecommendation:
        """Deserialize from dictionary (requires the LAB block)."""
        return cls(
            color=data["color"],
            lab_color=LabColor.from_dict(data["lab"]),
            reason=data["reason"],
            confidence=data["confidence"],
            category=RecommendationCategory(data["category"]),
        )
