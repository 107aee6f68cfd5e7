# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
CIE conversions.

Conversion chain: sRGB -> Linear RGB -> XYZ -> Lab -> LCH

- XYZ is scaled so that Y of sRGB white is 100
- Lab uses the D65 reference white (95.047, 100, 108.883)
- LCH hue is in degrees [0, 360)
"""

from __future__ import annotations

import math
from typing import Sequence

# D65 reference white, Y = 100 scale
_WHITE_X = 95.047
_WHITE_Y = 100.0
_WHITE_Z = 108.883

# Lab piecewise threshold and linear-segment slope
_LAB_EPSILON = 0.008856
_LAB_SLOPE = 7.787


# =============================================================================
# sRGB <-> XYZ
# =============================================================================


def _srgb_to_linear(c: float) -> float:
    # assume sRGB
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92


def _linear_to_srgb(c: float) -> float:
    return 1.055 * c ** (1.0 / 2.4) - 0.055 if c > 0.0031308 else c * 12.92


def rgb_to_xyz(rgb: Sequence[float]) -> list[float]:
    """
    Convert RGB [0, 255] to XYZ.

    sRGB gamma is removed first:
    - For values <= 0.04045: value / 12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    r = _srgb_to_linear(rgb[0] / 255)
    g = _srgb_to_linear(rgb[1] / 255)
    b = _srgb_to_linear(rgb[2] / 255)

    x = r * 0.4124 + g * 0.3576 + b * 0.1805
    y = r * 0.2126 + g * 0.7152 + b * 0.0722
    z = r * 0.0193 + g * 0.1192 + b * 0.9505

    return [x * 100, y * 100, z * 100]


def xyz_to_rgb(xyz: Sequence[float]) -> list[float]:
    """
    Convert XYZ to RGB [0, 255].

    Out-of-gamut results are clamped to [0, 1] before scaling.
    """
    x = xyz[0] / 100
    y = xyz[1] / 100
    z = xyz[2] / 100

    r = x * 3.2406 + y * -1.5372 + z * -0.4986
    g = x * -0.9689 + y * 1.8758 + z * 0.0415
    b = x * 0.0557 + y * -0.204 + z * 1.057

    r = min(max(0, _linear_to_srgb(r)), 1)
    g = min(max(0, _linear_to_srgb(g)), 1)
    b = min(max(0, _linear_to_srgb(b)), 1)

    return [r * 255, g * 255, b * 255]


# =============================================================================
# XYZ <-> Lab
# =============================================================================


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > _LAB_EPSILON else _LAB_SLOPE * t + 16 / 116


def _lab_f_inv(t: float) -> float:
    cubed = t ** 3
    return cubed if cubed > _LAB_EPSILON else (t - 16 / 116) / _LAB_SLOPE


def xyz_to_lab(xyz: Sequence[float]) -> list[float]:
    """Convert XYZ to CIE Lab (D65)."""
    x = _lab_f(xyz[0] / _WHITE_X)
    y = _lab_f(xyz[1] / _WHITE_Y)
    z = _lab_f(xyz[2] / _WHITE_Z)

    l = 116 * y - 16
    a = 500 * (x - y)
    b = 200 * (y - z)

    return [l, a, b]


def lab_to_xyz(lab: Sequence[float]) -> list[float]:
    """Convert CIE Lab (D65) to XYZ."""
    l, a, b = lab[0], lab[1], lab[2]

    y = (l + 16) / 116
    x = a / 500 + y
    z = y - b / 200

    return [_lab_f_inv(x) * _WHITE_X, _lab_f_inv(y) * _WHITE_Y, _lab_f_inv(z) * _WHITE_Z]


def rgb_to_lab(rgb: Sequence[float]) -> list[float]:
    """
    Convert RGB to CIE Lab.

    Full chain: RGB -> XYZ -> Lab
    """
    return xyz_to_lab(rgb_to_xyz(rgb))


# =============================================================================
# Lab <-> LCH
# =============================================================================


def lab_to_lch(lab: Sequence[float]) -> list[float]:
    """
    Convert Lab to LCH (cylindrical coordinates).

    Returns:
        [L, C, H] with H in degrees [0, 360)
    """
    l, a, b = lab[0], lab[1], lab[2]

    hr = math.atan2(b, a)
    h = hr * 360 / 2 / math.pi
    if h < 0:
        h += 360

    c = math.sqrt(a * a + b * b)

    return [l, c, h]


def lch_to_lab(lch: Sequence[float]) -> list[float]:
    """Convert LCH (H in degrees) to Lab."""
    l, c, h = lch[0], lch[1], lch[2]

    hr = h / 360 * 2 * math.pi
    a = c * math.cos(hr)
    b = c * math.sin(hr)

    return [l, a, b]
