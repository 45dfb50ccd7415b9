# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Color recommendation engine.

Builds ranked alternatives for a detected surface color from color
theory, an optional style palette and the room's lighting. Candidates
are generated in a fixed order, then stably sorted by confidence so
equal scores keep generation order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from huehome.schema import (
    ColorInfo,
    ColorRecommendation,
    LabColor,
    ProcessingMode,
    RecommendationCategory,
    RoomContext,
    StyleName,
)
from huehome.harmony import theory
from huehome.harmony.styles import find_closest, get_palette, normalize_style
from huehome.measure.colorspace import rgb_to_lab

logger = logging.getLogger(__name__)


REASONS = {
    RecommendationCategory.COMPLEMENTARY:
        "Complementary color provides maximum contrast and visual interest",
    RecommendationCategory.ANALOGOUS:
        "Analogous color creates harmonious, cohesive look",
    RecommendationCategory.MONOCHROMATIC:
        "Monochromatic variation provides subtle sophistication",
    RecommendationCategory.TRIADIC:
        "Triadic color adds vibrant yet balanced energy",
    RecommendationCategory.SPLIT_COMPLEMENTARY:
        "Split-complementary color offers contrast with less tension",
}

LIGHTER_REASON = "Lighter shade compensates for low ambient lighting"
DARKER_REASON = "Darker shade works well with bright lighting"


@dataclass(frozen=True)
class RecommendationConfig:
    """Scores and thresholds for recommend().

    The confidence constants are empirical. Changing them reorders
    results for every caller.
    """

    max_results: int = 6

    complementary_confidence: float = 0.85

    analogous_count: int = 2
    analogous_confidence: float = 0.80
    analogous_step: float = 0.05  # confidence drop per further rotation

    monochromatic_count: int = 2
    monochromatic_confidence: float = 0.75

    style_confidence: float = 0.90

    # Lighting adjustment
    low_light_threshold: float = 0.3
    bright_light_threshold: float = 0.7
    lighting_shift: float = 15.0  # L units
    lighting_confidence: float = 0.70

    # Fill candidates used only while fewer than max_results exist.
    # Kept below every other score so they never displace one.
    triadic_confidence: float = 0.65
    split_complementary_confidence: float = 0.60


def recommend(
    base_color: ColorInfo,
    context: RoomContext,
    style_preference: Optional[Union[str, StyleName]] = None,
    *,
    mode: ProcessingMode = ProcessingMode.ON_DEVICE,
    config: Optional[RecommendationConfig] = None,
) -> tuple[ColorRecommendation, ...]:
    """
    Rank alternative colors for a detected surface color.

    Generation order:
        1. Complementary (0.85)
        2. Analogous +30°, +60° (0.80, 0.75)
        3. Monochromatic, two lightness steps (0.75 each)
        4. Nearest color from the preferred style's palette (0.90),
           only when a style is given
        5. Lightened base if lighting < 0.3, darkened base if > 0.7 (0.70)
        6. Triadic then split-complementary fills while short of six

    A candidate whose packed color matches an earlier one is dropped,
    so neutral bases whose rotations collapse onto one color return
    fewer entries.

    Args:
        base_color: Detected material color
        context: Room facts; only lighting_intensity is used
        style_preference: Style name (case-insensitive) or StyleName.
            Unknown names use the modern palette.
        mode: Processing mode. No remote backend exists in this package,
            so CLOUD and HYBRID run the on-device algorithm.
        config: Scores and thresholds (uses defaults if None)

    Returns:
        Up to ``max_results`` recommendations, confidence descending.
        Exactly one is COMPLEMENTARY.
    """
    cfg = config or RecommendationConfig()

    if mode is not ProcessingMode.ON_DEVICE:
        logger.debug(f"No {mode.value} backend configured; using on-device recommendations")

    base = base_color.lab
    candidates: list[ColorRecommendation] = []
    seen: set[int] = set()

    def add(rec: Optional[ColorRecommendation]) -> None:
        # First occurrence of a packed color wins
        if rec is not None and rec.color not in seen:
            seen.add(rec.color)
            candidates.append(rec)

    # 1. Color theory
    add(_theory_rec(
        theory.complementary(base),
        RecommendationCategory.COMPLEMENTARY,
        cfg.complementary_confidence,
    ))

    for i, lab in enumerate(theory.analogous(base, cfg.analogous_count)):
        add(_theory_rec(
            lab,
            RecommendationCategory.ANALOGOUS,
            cfg.analogous_confidence - i * cfg.analogous_step,
        ))

    for lab in theory.monochromatic(base, cfg.monochromatic_count):
        add(_theory_rec(
            lab,
            RecommendationCategory.MONOCHROMATIC,
            cfg.monochromatic_confidence,
        ))

    # 2. Style
    if style_preference is not None:
        add(_style_rec(base, style_preference, cfg))

    # 3. Lighting
    add(_lighting_rec(base, context.lighting_intensity, cfg))

    # 4. Fill
    fills = (
        (theory.triadic(base)[0], RecommendationCategory.TRIADIC,
         cfg.triadic_confidence),
        (theory.split_complementary(base)[0], RecommendationCategory.SPLIT_COMPLEMENTARY,
         cfg.split_complementary_confidence),
    )
    for lab, category, confidence in fills:
        if len(candidates) >= cfg.max_results:
            break
        add(_theory_rec(lab, category, confidence))

    # sorted() is stable: equal confidences keep generation order
    ranked = sorted(candidates, key=lambda rec: rec.confidence, reverse=True)
    result = tuple(ranked[:cfg.max_results])

    logger.debug(
        f"Recommendations for {base_color.hex}: {len(candidates)} candidates, "
        f"returning {len(result)}"
    )
    return result


def filter_by_contrast(
    recommendations: Iterable[ColorRecommendation],
    background: LabColor,
    min_ratio: float = 3.0,
) -> tuple[ColorRecommendation, ...]:
    """
    Keep recommendations that contrast enough with a background.

    Relative order is preserved.
    """
    return tuple(
        rec for rec in recommendations
        if theory.contrast_ratio(rec.lab_color, background) >= min_ratio
    )


class RecommendationEngine:
    """
    recommend() and filter_by_contrast() bound to one configuration.

    Stateless apart from the config, so one instance can serve any
    number of threads.
    """

    def __init__(self, config: Optional[RecommendationConfig] = None) -> None:
        self.config = config or RecommendationConfig()

    def recommend(
        self,
        base_color: ColorInfo,
        context: RoomContext,
        style_preference: Optional[Union[str, StyleName]] = None,
        *,
        mode: ProcessingMode = ProcessingMode.ON_DEVICE,
    ) -> tuple[ColorRecommendation, ...]:
        return recommend(
            base_color,
            context,
            style_preference,
            mode=mode,
            config=self.config,
        )

    def filter_by_contrast(
        self,
        recommendations: Iterable[ColorRecommendation],
        background: LabColor,
        min_ratio: float = 3.0,
    ) -> tuple[ColorRecommendation, ...]:
        return filter_by_contrast(recommendations, background, min_ratio)


def _theory_rec(
    lab: LabColor,
    category: RecommendationCategory,
    confidence: float,
) -> ColorRecommendation:
    return ColorRecommendation.from_lab(
        lab,
        reason=REASONS[category],
        confidence=confidence,
        category=category,
    )


def _style_rec(
    base: LabColor,
    style_preference: Union[str, StyleName],
    cfg: RecommendationConfig,
) -> ColorRecommendation:
    style = normalize_style(style_preference)
    closest = find_closest(base, get_palette(style))
    return ColorRecommendation.from_lab(
        rgb_to_lab(closest),
        reason=f"Matches {style.value} style aesthetic",
        confidence=cfg.style_confidence,
        category=style.category,
    )


def _lighting_rec(
    base: LabColor,
    intensity: float,
    cfg: RecommendationConfig,
) -> Optional[ColorRecommendation]:
    """Lightness compensation for dim or bright rooms; None in between."""
    if intensity < cfg.low_light_threshold:
        lab, reason = theory.lighten(base, cfg.lighting_shift), LIGHTER_REASON
    elif intensity > cfg.bright_light_threshold:
        lab, reason = theory.darken(base, cfg.lighting_shift), DARKER_REASON
    else:
        return None

    return ColorRecommendation.from_lab(
        lab,
        reason=reason,
        confidence=cfg.lighting_confidence,
        category=RecommendationCategory.CONTRAST,
    )
