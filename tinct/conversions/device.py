# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Device-oriented models: CMYK, 16-bit "apple" RGB and single-channel gray.

Gray is a 0-100 level. Its conversions rescale that level into each
target model's canonical range.
"""

from __future__ import annotations

from typing import Sequence

from tinct.conversions.terminal import pack_hex, round_half_up


def _ink(channel: float, k: float) -> float:
    # undefined for pure black (k == 1); the ink is 0 there
    if k == 1:
        return 0.0
    return (1 - channel - k) / (1 - k)


# =============================================================================
# CMYK
# =============================================================================


def rgb_to_cmyk(rgb: Sequence[float]) -> list[float]:
    """
    Convert RGB to CMYK.

    Key (black) is the smallest complement; the remaining inks are
    normalized by the non-black share.
    """
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255
    k = min(1 - r, 1 - g, 1 - b)
    c = _ink(r, k)
    m = _ink(g, k)
    y = _ink(b, k)

    return [c * 100, m * 100, y * 100, k * 100]


def cmyk_to_rgb(cmyk: Sequence[float]) -> list[float]:
    c = cmyk[0] / 100
    m = cmyk[1] / 100
    y = cmyk[2] / 100
    k = cmyk[3] / 100

    r = 1 - min(1, c * (1 - k) + k)
    g = 1 - min(1, m * (1 - k) + k)
    b = 1 - min(1, y * (1 - k) + k)

    return [r * 255, g * 255, b * 255]


# =============================================================================
# Apple (16-bit RGB)
# =============================================================================


def apple_to_rgb(apple: Sequence[float]) -> list[float]:
    return [
        apple[0] / 65535 * 255,
        apple[1] / 65535 * 255,
        apple[2] / 65535 * 255,
    ]


def rgb_to_apple(rgb: Sequence[float]) -> list[float]:
    return [
        rgb[0] / 255 * 65535,
        rgb[1] / 255 * 65535,
        rgb[2] / 255 * 65535,
    ]


# =============================================================================
# Gray
# =============================================================================


def gray_to_rgb(gray: Sequence[float]) -> list[float]:
    val = gray[0] / 100 * 255
    return [val, val, val]


def gray_to_hsv(gray: Sequence[float]) -> list[float]:
    """Gray as HSV (or HSL): no hue, no saturation, level as the last channel."""
    return [0, 0, gray[0]]


# HSL and HSV share this conversion; one function keeps them identical.
gray_to_hsl = gray_to_hsv


def gray_to_hwb(gray: Sequence[float]) -> list[float]:
    return [0, 100, gray[0]]


def gray_to_cmyk(gray: Sequence[float]) -> list[float]:
    return [0, 0, 0, gray[0]]


def gray_to_lab(gray: Sequence[float]) -> list[float]:
    return [gray[0], 0, 0]


def gray_to_hex(gray: Sequence[float]) -> str:
    val = round_half_up(gray[0] / 100 * 255) & 0xFF
    return pack_hex(val, val, val)


def rgb_to_gray(rgb: Sequence[float]) -> list[float]:
    """Mean of the three channels, rescaled to 0-100."""
    val = (rgb[0] + rgb[1] + rgb[2]) / 3
    return [val / 255 * 100]
