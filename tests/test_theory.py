# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""Tests for LAB color theory transforms."""

import pytest

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
from huehome.schema import LabColor


BLUE = LabColor.from_rgb(0x0000FF)
TERRACOTTA = LabColor(l=55.0, a=30.0, b=35.0)


def _hue_offset(a: LabColor, b: LabColor) -> float:
    return (b.hue - a.hue) % 360.0


class TestComplementary:

    def test_negates_chroma_axes(self):
        comp = complementary(BLUE)
        assert comp.l == BLUE.l
        assert comp.a == -BLUE.a
        assert comp.b == -BLUE.b

    def test_blue_complement_is_green_yellow(self):
        comp = complementary(BLUE)
        assert comp.a < 0
        assert comp.b > 0

    def test_double_complement_is_identity(self):
        twice = complementary(complementary(TERRACOTTA))
        assert (twice.l, twice.a, twice.b) == (TERRACOTTA.l, TERRACOTTA.a, TERRACOTTA.b)

    def test_gray_stays_gray(self):
        gray = LabColor(l=50.0, a=0.0, b=0.0)
        comp = complementary(gray)
        assert comp.chroma == 0.0


class TestRotations:

    def test_analogous_offsets(self):
        first, second = analogous(TERRACOTTA)
        assert _hue_offset(TERRACOTTA, first) == pytest.approx(30.0)
        assert _hue_offset(TERRACOTTA, second) == pytest.approx(60.0)

    def test_analogous_count(self):
        assert len(analogous(TERRACOTTA, count=4)) == 4
        assert analogous(TERRACOTTA, count=0) == []

    def test_triadic_offsets(self):
        first, second = triadic(TERRACOTTA)
        assert _hue_offset(TERRACOTTA, first) == pytest.approx(120.0)
        assert _hue_offset(TERRACOTTA, second) == pytest.approx(240.0)

    def test_split_complementary_offsets(self):
        first, second = split_complementary(TERRACOTTA)
        assert _hue_offset(TERRACOTTA, first) == pytest.approx(150.0)
        assert _hue_offset(TERRACOTTA, second) == pytest.approx(210.0)

    @pytest.mark.parametrize("degrees", [30.0, 120.0, 150.0, 210.0, 240.0, -45.0])
    def test_rotation_keeps_lightness_and_chroma(self, degrees):
        rotated = rotate_hue(TERRACOTTA, degrees)
        assert rotated.l == TERRACOTTA.l
        assert rotated.chroma == pytest.approx(TERRACOTTA.chroma)

    def test_full_turn(self):
        rotated = rotate_hue(TERRACOTTA, 360.0)
        assert rotated.a == pytest.approx(TERRACOTTA.a)
        assert rotated.b == pytest.approx(TERRACOTTA.b)

    def test_results_carry_packed_color(self):
        for lab in triadic(BLUE):
            assert 0 <= lab.rgb <= 0xFFFFFF


class TestMonochromatic:

    def test_three_steps(self):
        steps = monochromatic(TERRACOTTA, count=3)
        assert [s.l for s in steps] == pytest.approx([45.0, 55.0, 65.0])
        for s in steps:
            assert (s.a, s.b) == (TERRACOTTA.a, TERRACOTTA.b)

    def test_two_steps_differ_from_base(self):
        steps = monochromatic(TERRACOTTA, count=2)
        assert len(steps) == 2
        assert steps[0].l < TERRACOTTA.l < steps[1].l
        assert steps[0].l == pytest.approx(55.0 - 20.0 / 3)

    def test_clamped_near_white(self):
        steps = monochromatic(LabColor(l=98.0, a=0.0, b=0.0), count=3)
        assert steps[-1].l == 100.0

    def test_clamped_near_black(self):
        steps = monochromatic(LabColor(l=3.0, a=0.0, b=0.0), count=3)
        assert steps[0].l == 0.0


class TestLightness:

    def test_lighten(self):
        assert lighten(TERRACOTTA, 15.0).l == pytest.approx(70.0)

    def test_darken(self):
        assert darken(TERRACOTTA, 15.0).l == pytest.approx(40.0)

    def test_default_amount(self):
        assert lighten(TERRACOTTA).l == pytest.approx(65.0)
        assert darken(TERRACOTTA).l == pytest.approx(45.0)

    def test_clamped(self):
        assert lighten(LabColor(l=95.0, a=0.0, b=0.0)).l == 100.0
        assert darken(LabColor(l=5.0, a=0.0, b=0.0)).l == 0.0

    def test_chroma_untouched(self):
        lighter = lighten(TERRACOTTA)
        assert (lighter.a, lighter.b) == (TERRACOTTA.a, TERRACOTTA.b)


class TestContrast:

    def test_white_on_black(self):
        white = LabColor(l=100.0, a=0.0, b=0.0)
        black = LabColor(l=0.0, a=0.0, b=0.0)
        assert contrast_ratio(white, black) == pytest.approx(21.0)

    def test_symmetric(self):
        a = LabColor(l=80.0, a=0.0, b=0.0)
        b = LabColor(l=20.0, a=0.0, b=0.0)
        assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_identical_lightness(self):
        assert contrast_ratio(TERRACOTTA, complementary(TERRACOTTA)) == pytest.approx(1.0)

    def test_sufficient(self):
        light = LabColor(l=100.0, a=0.0, b=0.0)
        dark = LabColor(l=10.0, a=0.0, b=0.0)
        assert has_sufficient_contrast(light, dark)

    def test_insufficient(self):
        a = LabColor(l=80.0, a=0.0, b=0.0)
        b = LabColor(l=70.0, a=0.0, b=0.0)
        assert not has_sufficient_contrast(a, b)

    def test_custom_threshold(self):
        a = LabColor(l=100.0, a=0.0, b=0.0)
        b = LabColor(l=30.0, a=0.0, b=0.0)
        assert not has_sufficient_contrast(a, b)
        assert has_sufficient_contrast(a, b, min_ratio=3.0)
