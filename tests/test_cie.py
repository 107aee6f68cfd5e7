# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for CIE conversions (RGB <-> XYZ <-> Lab <-> LCH)."""

import math

import numpy as np
import pytest

from tinct.conversions.cie import (
    lab_to_lch,
    lab_to_xyz,
    lch_to_lab,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
    xyz_to_rgb,
)


class TestRGBToXYZ:

    def test_reference_color(self):
        np.testing.assert_allclose(rgb_to_xyz([92, 191, 84]), [25, 40, 15], atol=1)

    def test_white(self):
        np.testing.assert_allclose(
            rgb_to_xyz([255, 255, 255]),
            [100 * (0.4124 + 0.3576 + 0.1805), 100.0, 100 * (0.0193 + 0.1192 + 0.9505)],
            atol=1e-9,
        )

    def test_black(self):
        assert rgb_to_xyz([0, 0, 0]) == [0, 0, 0]

    def test_gamma_threshold(self):
        """Values at or below 0.04045 use the linear segment."""
        y = rgb_to_xyz([10, 10, 10])[1]
        assert y == pytest.approx(10 / 255 / 12.92 * 100, abs=1e-9)


class TestXYZToRGB:

    def test_reference_color(self):
        np.testing.assert_allclose(xyz_to_rgb([25, 40, 15]), [97, 190, 85], atol=1)

    def test_roundtrip(self):
        rgb = [92.0, 191.0, 84.0]
        np.testing.assert_allclose(xyz_to_rgb(rgb_to_xyz(rgb)), rgb, atol=0.5)

    def test_out_of_gamut_is_clamped(self):
        r, g, _ = xyz_to_rgb([100, 0, 0])
        assert r == 255
        assert g == 0


class TestLab:

    def test_rgb_to_lab(self):
        np.testing.assert_allclose(rgb_to_lab([92, 191, 84]), [70, -50, 45], atol=1)

    def test_rgb_to_lab_matches_chain(self):
        assert rgb_to_lab([12, 34, 56]) == xyz_to_lab(rgb_to_xyz([12, 34, 56]))

    def test_white_is_l100(self):
        l, a, b = rgb_to_lab([255, 255, 255])
        assert l == pytest.approx(100, abs=0.01)
        assert a == pytest.approx(0, abs=0.1)
        assert b == pytest.approx(0, abs=0.1)

    def test_xyz_to_lab(self):
        np.testing.assert_allclose(xyz_to_lab([25, 40, 15]), [69, -48, 44], atol=1)

    def test_xyz_to_lab_dark_uses_linear_segment(self):
        l, _, _ = xyz_to_lab([0, 0.5, 0])
        assert l == pytest.approx(116 * (7.787 * 0.005 + 16 / 116) - 16)

    def test_lab_to_xyz(self):
        np.testing.assert_allclose(lab_to_xyz([69, -48, 44]), [25, 39, 15], atol=1)

    def test_lab_roundtrip(self):
        xyz = [30.0, 20.0, 10.0]
        np.testing.assert_allclose(lab_to_xyz(xyz_to_lab(xyz)), xyz, atol=1e-9)


class TestLCH:

    def test_lab_to_lch(self):
        np.testing.assert_allclose(lab_to_lch([69, -48, 44]), [69, 65, 137], atol=1)

    def test_chroma_is_norm(self):
        _, c, _ = lab_to_lch([50, 30, 40])
        assert c == pytest.approx(50)

    def test_negative_hue_wraps(self):
        _, _, h = lab_to_lch([50, 10, -10])
        assert h == pytest.approx(315)

    def test_achromatic(self):
        assert lab_to_lch([50, 0, 0]) == [50, 0, 0]

    def test_lch_to_lab(self):
        np.testing.assert_allclose(lch_to_lab([69, 65, 137]), [69, -48, 44], atol=1)

    def test_roundtrip(self):
        lab = [60.0, -20.0, 35.0]
        np.testing.assert_allclose(lch_to_lab(lab_to_lch(lab)), lab, atol=1e-9)

    def test_hue_in_degrees(self):
        _, a, b = lch_to_lab([50, 10, 90])
        assert a == pytest.approx(10 * math.cos(math.pi / 2), abs=1e-12)
        assert b == pytest.approx(10)
