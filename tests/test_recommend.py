# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""Tests for the recommendation engine."""

import pytest

from huehome import (
    ColorInfo,
    ColorRecommendation,
    LabColor,
    ProcessingMode,
    RecommendationCategory,
    RecommendationConfig,
    RecommendationEngine,
    RoomContext,
    StyleName,
    filter_by_contrast,
    recommend,
)
from huehome.harmony.styles import PALETTES

C = RecommendationCategory

BLUE = ColorInfo.from_rgb(0x0000FF, confidence=0.9)
BEIGE = ColorInfo.from_rgb(0xD8C8A8, confidence=0.8)


def _categories(recs):
    return [r.category for r in recs]


class TestTheoryCandidates:

    def test_mid_lighting_returns_six(self):
        recs = recommend(BLUE, RoomContext(lighting_intensity=0.5))
        assert len(recs) == 6

    def test_complementary_first(self):
        recs = recommend(BLUE, RoomContext(lighting_intensity=0.5))
        assert recs[0].category is C.COMPLEMENTARY
        assert recs[0].confidence == pytest.approx(0.85)
        assert recs[0].lab_color.a < 0
        assert recs[0].lab_color.b > 0

    def test_mid_lighting_order(self):
        recs = recommend(BLUE, RoomContext(lighting_intensity=0.5))
        assert _categories(recs) == [
            C.COMPLEMENTARY,
            C.ANALOGOUS,
            C.ANALOGOUS,
            C.MONOCHROMATIC,
            C.MONOCHROMATIC,
            C.TRIADIC,
        ]

    def test_confidences(self):
        recs = recommend(BLUE, RoomContext())
        assert [r.confidence for r in recs] == pytest.approx(
            [0.85, 0.80, 0.75, 0.75, 0.75, 0.65]
        )

    def test_sorted_descending(self):
        recs = recommend(BEIGE, RoomContext(lighting_intensity=0.9), "warm")
        confidences = [r.confidence for r in recs]
        assert confidences == sorted(confidences, reverse=True)

    def test_exactly_one_complementary(self):
        for intensity in (0.1, 0.5, 0.9):
            recs = recommend(BEIGE, RoomContext(lighting_intensity=intensity), "minimal")
            assert _categories(recs).count(C.COMPLEMENTARY) == 1

    def test_monochromatic_keeps_chroma(self):
        recs = recommend(BLUE, RoomContext())
        base = BLUE.lab
        for rec in recs:
            if rec.category is C.MONOCHROMATIC:
                assert (rec.lab_color.a, rec.lab_color.b) == (base.a, base.b)
                assert rec.lab_color.l != base.l

    def test_neutral_base_deduplicated(self):
        gray = ColorInfo.from_rgb(0x808080)
        recs = recommend(gray, RoomContext())
        colors = [r.color for r in recs]
        assert len(colors) == len(set(colors))
        assert _categories(recs).count(C.COMPLEMENTARY) == 1
        assert _categories(recs) == [C.COMPLEMENTARY, C.MONOCHROMATIC, C.MONOCHROMATIC]

    def test_neutral_base_with_style_and_light(self):
        gray = ColorInfo.from_rgb(0x808080)
        recs = recommend(gray, RoomContext(lighting_intensity=0.1), "warm")
        colors = [r.color for r in recs]
        assert len(colors) == len(set(colors))
        assert recs[0].category is C.WARM
        assert C.CONTRAST in _categories(recs)

    def test_colors_unique_for_chromatic_base(self):
        for info in (BLUE, BEIGE):
            recs = recommend(info, RoomContext(lighting_intensity=0.9), "luxury")
            colors = [r.color for r in recs]
            assert len(colors) == len(set(colors))

    def test_reasons_present(self):
        for rec in recommend(BLUE, RoomContext(lighting_intensity=0.1), "luxury"):
            assert rec.reason


class TestLighting:

    def test_low_light_lightens(self):
        recs = recommend(BLUE, RoomContext(lighting_intensity=0.2))
        contrast = [r for r in recs if r.category is C.CONTRAST]
        assert len(contrast) == 1
        assert contrast[0].lab_color.l == pytest.approx(BLUE.lab.l + 15.0)
        assert contrast[0].confidence == pytest.approx(0.70)
        assert "low ambient" in contrast[0].reason

    def test_bright_light_darkens(self):
        recs = recommend(BLUE, RoomContext(lighting_intensity=0.8))
        contrast = [r for r in recs if r.category is C.CONTRAST]
        assert len(contrast) == 1
        assert contrast[0].lab_color.l == pytest.approx(BLUE.lab.l - 15.0)

    @pytest.mark.parametrize("intensity", [0.3, 0.5, 0.7])
    def test_thresholds_are_exclusive(self, intensity):
        recs = recommend(BLUE, RoomContext(lighting_intensity=intensity))
        assert C.CONTRAST not in _categories(recs)

    def test_lighting_replaces_fill(self):
        recs = recommend(BLUE, RoomContext(lighting_intensity=0.1))
        assert len(recs) == 6
        assert C.TRIADIC not in _categories(recs)
        assert recs[-1].category is C.CONTRAST


class TestStyle:

    def test_style_ranks_first(self):
        recs = recommend(BLUE, RoomContext(), "Modern")
        assert recs[0].category is C.MODERN
        assert recs[0].confidence == pytest.approx(0.90)
        assert recs[0].color in PALETTES[StyleName.MODERN]
        assert recs[1].category is C.COMPLEMENTARY

    def test_style_case_insensitive(self):
        recs = recommend(BEIGE, RoomContext(), "LUXURY")
        assert recs[0].category is C.LUXURY
        assert recs[0].color in PALETTES[StyleName.LUXURY]
        assert recs[0].reason == "Matches luxury style aesthetic"

    def test_style_enum_accepted(self):
        recs = recommend(BEIGE, RoomContext(), StyleName.SCANDINAVIAN)
        assert recs[0].category is C.SCANDINAVIAN

    def test_unknown_style_uses_modern(self):
        recs = recommend(BLUE, RoomContext(), "bauhaus")
        assert recs[0].category is C.MODERN

    def test_style_and_low_light_truncates(self):
        recs = recommend(BLUE, RoomContext(lighting_intensity=0.2), "warm")
        assert len(recs) == 6
        categories = _categories(recs)
        assert categories[0] is C.WARM
        assert C.CONTRAST not in categories
        assert C.TRIADIC not in categories

    def test_style_without_lighting_skips_fill(self):
        recs = recommend(BLUE, RoomContext(), "minimal")
        assert len(recs) == 6
        assert C.TRIADIC not in _categories(recs)


class TestConfigAndModes:

    @pytest.mark.parametrize("mode", [ProcessingMode.CLOUD, ProcessingMode.HYBRID])
    def test_remote_modes_match_on_device(self, mode):
        context = RoomContext(lighting_intensity=0.25)
        assert recommend(BLUE, context, "warm", mode=mode) == recommend(BLUE, context, "warm")

    def test_max_results(self):
        recs = recommend(BLUE, RoomContext(), config=RecommendationConfig(max_results=3))
        assert _categories(recs) == [C.COMPLEMENTARY, C.ANALOGOUS, C.ANALOGOUS]

    def test_larger_limit_takes_both_fills(self):
        recs = recommend(BLUE, RoomContext(), config=RecommendationConfig(max_results=8))
        categories = _categories(recs)
        assert len(recs) == 7
        assert categories[-2:] == [C.TRIADIC, C.SPLIT_COMPLEMENTARY]

    def test_confidence_rounded_at_every_stage(self):
        config = RecommendationConfig(
            style_confidence=0.9000000001,
            lighting_confidence=0.7000000001,
            max_results=7,
        )
        recs = recommend(BLUE, RoomContext(lighting_intensity=0.1), "modern", config=config)
        assert recs[0].confidence == 0.9
        assert 0.7 in [r.confidence for r in recs]

    def test_deterministic(self):
        context = RoomContext(lighting_intensity=0.9)
        assert recommend(BEIGE, context, "warm") == recommend(BEIGE, context, "warm")

    def test_engine_matches_function(self):
        config = RecommendationConfig(style_confidence=0.95)
        engine = RecommendationEngine(config)
        context = RoomContext(lighting_intensity=0.1)
        assert engine.recommend(BEIGE, context, "minimal") == recommend(
            BEIGE, context, "minimal", config=config
        )
        assert engine.recommend(BEIGE, context, "minimal")[0].confidence == 0.95


class TestFilterByContrast:

    def _rec(self, l):
        return ColorRecommendation.from_lab(
            LabColor(l=l, a=0.0, b=0.0),
            reason="test",
            confidence=0.5,
            category=C.MONOCHROMATIC,
        )

    def test_keeps_high_contrast_in_order(self):
        background = LabColor(l=10.0, a=0.0, b=0.0)
        recs = [self._rec(100.0), self._rec(20.0), self._rec(95.0)]
        kept = filter_by_contrast(recs, background)
        assert [r.lab_color.l for r in kept] == [100.0, 95.0]

    def test_custom_ratio(self):
        background = LabColor(l=10.0, a=0.0, b=0.0)
        recs = [self._rec(100.0), self._rec(95.0)]
        assert filter_by_contrast(recs, background, min_ratio=6.9) == (recs[0],)

    def test_engine_delegates(self):
        background = LabColor(l=90.0, a=0.0, b=0.0)
        recs = recommend(BLUE, RoomContext())
        engine = RecommendationEngine()
        assert engine.filter_by_contrast(recs, background) == filter_by_contrast(recs, background)
