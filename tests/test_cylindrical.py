# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for HSL / HSV / HWB / HCG conversions."""

import numpy as np
import pytest

from tinct.conversions.cylindrical import (
    hcg_to_hsl,
    hcg_to_hsv,
    hcg_to_hwb,
    hcg_to_rgb,
    hsl_to_hcg,
    hsl_to_hsv,
    hsl_to_rgb,
    hsv_to_hcg,
    hsv_to_hsl,
    hsv_to_rgb,
    hwb_to_hcg,
    hwb_to_rgb,
    rgb_to_hcg,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
)


def _samples():
    return np.random.RandomState(42).randint(0, 256, size=(200, 3)).tolist()


class TestRGBToHSL:

    def test_reference_color(self):
        np.testing.assert_allclose(rgb_to_hsl([140, 200, 100]), [96, 48, 59], atol=1)

    def test_achromatic_grey(self):
        h, s, l = rgb_to_hsl([128, 128, 128])
        assert h == 0
        assert s == 0
        assert l == pytest.approx(128 / 255 * 100)

    def test_negative_hue_wraps(self):
        h, _, _ = rgb_to_hsl([255, 0, 128])
        assert h == pytest.approx(360 - 128 / 255 * 60)

    def test_primaries(self):
        assert rgb_to_hsl([255, 0, 0]) == [0, 100, 50]
        np.testing.assert_allclose(rgb_to_hsl([0, 255, 0]), [120, 100, 50])
        np.testing.assert_allclose(rgb_to_hsl([0, 0, 255]), [240, 100, 50])


class TestRGBToHSV:

    def test_reference_color(self):
        np.testing.assert_allclose(rgb_to_hsv([140, 200, 100]), [96, 50, 78], atol=1)

    def test_achromatic(self):
        assert rgb_to_hsv([0, 0, 0]) == [0, 0, 0]
        h, s, v = rgb_to_hsv([200, 200, 200])
        assert (h, s) == (0, 0)
        assert v == pytest.approx(200 / 255 * 100)

    def test_hue_range(self):
        for rgb in _samples():
            h, _, _ = rgb_to_hsv(rgb)
            assert 0 <= h <= 360


class TestRGBToHWB:

    def test_reference_color(self):
        np.testing.assert_allclose(rgb_to_hwb([140, 200, 100]), [96, 39, 22], atol=1)

    def test_hue_matches_hsl(self):
        for rgb in _samples()[:20]:
            assert rgb_to_hwb(rgb)[0] == rgb_to_hsl(rgb)[0]


class TestRoundtrip:
    """RGB -> HSL/HSV -> RGB must reproduce the input."""

    def test_hsl_roundtrip(self):
        for rgb in _samples():
            np.testing.assert_allclose(hsl_to_rgb(rgb_to_hsl(rgb)), rgb, atol=1e-6)

    def test_hsv_roundtrip(self):
        for rgb in _samples():
            np.testing.assert_allclose(hsv_to_rgb(rgb_to_hsv(rgb)), rgb, atol=1e-6)

    def test_hwb_roundtrip(self):
        for rgb in _samples():
            np.testing.assert_allclose(hwb_to_rgb(rgb_to_hwb(rgb)), rgb, atol=1e-6)


class TestHSLToRGB:

    def test_reference_color(self):
        np.testing.assert_allclose(hsl_to_rgb([96, 48, 59]), [140, 201, 100], atol=1)

    def test_zero_saturation(self):
        assert hsl_to_rgb([200, 0, 50]) == [127.5, 127.5, 127.5]


class TestHSVToRGB:

    def test_reference_color(self):
        np.testing.assert_allclose(hsv_to_rgb([96, 50, 78]), [139, 199, 99], atol=1)

    @pytest.mark.parametrize(
        "hue,expected",
        [
            (0, [255, 0, 0]),
            (60, [255, 255, 0]),
            (120, [0, 255, 0]),
            (180, [0, 255, 255]),
            (240, [0, 0, 255]),
            (300, [255, 0, 255]),
            (360, [255, 0, 0]),
        ],
    )
    def test_sectors(self, hue, expected):
        np.testing.assert_allclose(hsv_to_rgb([hue, 100, 100]), expected, atol=1e-9)


class TestHWBToRGB:

    def test_reference_color(self):
        np.testing.assert_allclose(hwb_to_rgb([96, 39, 22]), [139, 199, 99], atol=1)

    def test_pure_hue(self):
        np.testing.assert_allclose(hwb_to_rgb([0, 0, 0]), [255, 0, 0])

    def test_full_circle(self):
        np.testing.assert_allclose(hwb_to_rgb([360, 0, 0]), [255, 0, 0])

    def test_whiteness_blackness_renormalized(self):
        np.testing.assert_allclose(hwb_to_rgb([0, 60, 60]), [127.5, 127.5, 127.5])

    def test_odd_sector_inverts_fraction(self):
        # sector 1 (60-120 degrees): red falls as hue rises
        r90, _, _ = hwb_to_rgb([90, 0, 0])
        r70, _, _ = hwb_to_rgb([70, 0, 0])
        assert r70 > r90
        assert r90 == pytest.approx(127.5)


class TestHSLHSV:

    def test_hsl_to_hsv(self):
        np.testing.assert_allclose(hsl_to_hsv([96, 48, 59]), [96, 50, 79], atol=1)

    def test_hsl_to_hsv_black_uses_minimum_lightness(self):
        h, s, v = hsl_to_hsv([10, 50, 0])
        assert h == 10
        assert s == pytest.approx(200 / 3)
        assert v == 0

    def test_hsv_to_hsl(self):
        np.testing.assert_allclose(hsv_to_hsl([96, 50, 78]), [96, 47, 59], atol=1)

    def test_hsv_to_hsl_black(self):
        assert hsv_to_hsl([0, 0, 0]) == [0, 0, 0]

    def test_hsv_to_hsl_white_has_no_saturation(self):
        assert hsv_to_hsl([0, 0, 100]) == [0, 0, 100]


class TestHCG:

    def test_rgb_to_hcg(self):
        np.testing.assert_allclose(rgb_to_hcg([140, 200, 100]), [96, 39, 65], atol=1)

    def test_rgb_to_hcg_achromatic(self):
        h, c, g = rgb_to_hcg([51, 51, 51])
        assert (h, c) == (0, 0)
        assert g == pytest.approx(20)

    def test_rgb_to_hcg_full_chroma_has_zero_grayscale(self):
        assert rgb_to_hcg([255, 0, 0]) == [0, 100, 0]

    def test_rgb_to_hcg_red_branch_keeps_sign(self):
        # max is red and blue > green: the truncated remainder stays negative
        h, _, _ = rgb_to_hcg([255, 0, 51])
        assert h == pytest.approx(-12)

    def test_hcg_to_rgb(self):
        np.testing.assert_allclose(hcg_to_rgb([96, 39, 64]), [139, 199, 100], atol=1)

    def test_hcg_to_rgb_zero_chroma(self):
        assert hcg_to_rgb([123, 0, 50]) == [127.5, 127.5, 127.5]

    def test_hcg_to_hsv(self):
        np.testing.assert_allclose(hcg_to_hsv([96, 39, 64]), [96, 50, 78], atol=1)

    def test_hcg_to_hsv_black(self):
        assert hcg_to_hsv([0, 0, 0]) == [0, 0, 0]

    def test_hcg_to_hsl(self):
        np.testing.assert_allclose(hcg_to_hsl([96, 39, 64]), [96, 47, 59], atol=1)

    def test_hcg_to_hsl_white(self):
        assert hcg_to_hsl([0, 0, 100]) == [0, 0, 100]

    def test_hcg_to_hwb(self):
        np.testing.assert_allclose(hcg_to_hwb([96, 39, 64]), [96, 39, 22], atol=1)

    def test_hwb_to_hcg(self):
        np.testing.assert_allclose(hwb_to_hcg([96, 39, 22]), [96, 39, 64], atol=1)

    def test_hsl_to_hcg(self):
        np.testing.assert_allclose(hsl_to_hcg([96, 48, 59]), [96, 39, 65], atol=1)

    def test_hsv_to_hcg(self):
        np.testing.assert_allclose(hsv_to_hcg([96, 50, 78]), [96, 39, 64], atol=1)

    def test_hue_passes_through(self):
        assert hsv_to_hcg([17, 50, 50])[0] == 17
        assert hsl_to_hcg([17, 50, 50])[0] == 17
        assert hwb_to_hcg([17, 10, 10])[0] == 17
