# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Hue-based models: HSL, HSV, HWB and HCG.

All hues are in degrees [0, 360]; every other channel is a percentage
[0, 100]. RGB channels are [0, 255]. Outputs are plain lists of floats
and are never rounded here.
"""

from __future__ import annotations

import math
from typing import Sequence


def _ratio_or_zero(num: float, den: float) -> float:
    """num / den, or 0.0 where the quotient is undefined."""
    if den == 0:
        return 0.0
    result = num / den
    if math.isnan(result):
        return 0.0
    return result


# =============================================================================
# RGB -> HSL / HSV / HWB
# =============================================================================


def rgb_to_hsl(rgb: Sequence[float]) -> list[float]:
    """
    Convert RGB to HSL.

    Achromatic input (max == min) yields hue 0 and saturation 0.
    """
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255
    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo

    if hi == lo:
        h = 0.0
    elif r == hi:
        h = (g - b) / delta
    elif g == hi:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    h = min(h * 60, 360)
    if h < 0:
        h += 360

    l = (lo + hi) / 2

    if hi == lo:
        s = 0.0
    elif l <= 0.5:
        s = delta / (hi + lo)
    else:
        s = delta / (2 - hi - lo)

    return [h, s * 100, l * 100]


def rgb_to_hsv(rgb: Sequence[float]) -> list[float]:
    """
    Convert RGB to HSV.

    When all channels are equal, saturation is 0 and hue takes the same 0.
    """
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255
    v = max(r, g, b)
    diff = v - min(r, g, b)

    def diffc(c: float) -> float:
        return (v - c) / 6 / diff + 1 / 2

    if diff == 0:
        s = 0.0
        h = s
    else:
        s = diff / v
        rdif = diffc(r)
        gdif = diffc(g)
        bdif = diffc(b)

        if r == v:
            h = bdif - gdif
        elif g == v:
            h = 1 / 3 + rdif - bdif
        else:
            h = 2 / 3 + gdif - rdif

        if h < 0:
            h += 1
        elif h > 1:
            h -= 1

    return [h * 360, s * 100, v * 100]


def rgb_to_hwb(rgb: Sequence[float]) -> list[float]:
    """Convert RGB to HWB. Hue comes from the HSL conversion."""
    r, g, b = rgb[0], rgb[1], rgb[2]
    h = rgb_to_hsl(rgb)[0]
    w = 1 / 255 * min(r, min(g, b))
    bl = 1 - 1 / 255 * max(r, max(g, b))
    return [h, w * 100, bl * 100]


# =============================================================================
# HSL / HSV / HWB -> RGB
# =============================================================================


def hsl_to_rgb(hsl: Sequence[float]) -> list[float]:
    """
    Convert HSL to RGB.

    Each channel samples the same piecewise ramp between t1 and t2 at a
    hue offset of +1/3 (red), 0 (green) and -1/3 (blue).
    """
    h = hsl[0] / 360
    s = hsl[1] / 100
    l = hsl[2] / 100

    if s == 0:
        val = l * 255
        return [val, val, val]

    if l < 0.5:
        t2 = l * (1 + s)
    else:
        t2 = l + s - l * s

    t1 = 2 * l - t2

    rgb = [0.0, 0.0, 0.0]
    for i in range(3):
        t3 = h + 1 / 3 * -(i - 1)
        if t3 < 0:
            t3 += 1
        if t3 > 1:
            t3 -= 1

        if 6 * t3 < 1:
            val = t1 + (t2 - t1) * 6 * t3
        elif 2 * t3 < 1:
            val = t2
        elif 3 * t3 < 2:
            val = t1 + (t2 - t1) * (2 / 3 - t3) * 6
        else:
            val = t1

        rgb[i] = val * 255

    return rgb


def hsv_to_rgb(hsv: Sequence[float]) -> list[float]:
    """Convert HSV to RGB using the six 60-degree hue sectors."""
    h = hsv[0] / 60
    s = hsv[1] / 100
    v = hsv[2] / 100
    sector = math.floor(h) % 6

    f = h - math.floor(h)
    p = 255 * v * (1 - s)
    q = 255 * v * (1 - s * f)
    t = 255 * v * (1 - s * (1 - f))
    v *= 255

    if sector == 0:
        return [v, t, p]
    if sector == 1:
        return [q, v, p]
    if sector == 2:
        return [p, v, t]
    if sector == 3:
        return [p, q, v]
    if sector == 4:
        return [t, p, v]
    return [v, p, q]


def hwb_to_rgb(hwb: Sequence[float]) -> list[float]:
    """
    Convert HWB to RGB.

    See http://dev.w3.org/csswg/css-color/#hwb-to-rgb
    """
    h = hwb[0] / 360
    wh = hwb[1] / 100
    bl = hwb[2] / 100
    ratio = wh + bl

    # whiteness + blackness can't exceed 1
    if ratio > 1:
        wh /= ratio
        bl /= ratio

    i = math.floor(6 * h)
    v = 1 - bl
    f = 6 * h - i

    if i & 0x01:
        f = 1 - f

    n = wh + f * (v - wh)

    if i == 1:
        r, g, b = n, v, wh
    elif i == 2:
        r, g, b = wh, v, n
    elif i == 3:
        r, g, b = wh, n, v
    elif i == 4:
        r, g, b = n, wh, v
    elif i == 5:
        r, g, b = v, wh, n
    else:
        # sector 0, and 6 when hue is exactly 360
        r, g, b = v, n, wh

    return [r * 255, g * 255, b * 255]


# =============================================================================
# HSL <-> HSV
# =============================================================================


def hsl_to_hsv(hsl: Sequence[float]) -> list[float]:
    h = hsl[0]
    s = hsl[1] / 100
    l = hsl[2] / 100
    smin = s
    lmin = max(l, 0.01)

    l *= 2
    s *= l if l <= 1 else 2 - l
    smin *= lmin if lmin <= 1 else 2 - lmin
    v = (l + s) / 2
    if l == 0:
        sv = 2 * smin / (lmin + smin)
    else:
        sv = 2 * s / (l + s)

    return [h, sv * 100, v * 100]


def hsv_to_hsl(hsv: Sequence[float]) -> list[float]:
    h = hsv[0]
    s = hsv[1] / 100
    v = hsv[2] / 100
    vmin = max(v, 0.01)

    l = (2 - s) * v
    lmin = (2 - s) * vmin
    sl = _ratio_or_zero(s * vmin, lmin if lmin <= 1 else 2 - lmin)
    l /= 2

    return [h, sl * 100, l * 100]


# =============================================================================
# HCG (hue, chroma, grayscale)
# =============================================================================


def rgb_to_hcg(rgb: Sequence[float]) -> list[float]:
    """
    Convert RGB to HCG.

    Grayscale is min / (1 - chroma), or 0 when chroma reaches 1. The hue
    branches fold differently per dominant channel and use truncated
    remainders; they are kept exactly as the reference formula has them.
    """
    r = rgb[0] / 255
    g = rgb[1] / 255
    b = rgb[2] / 255
    hi = max(max(r, g), b)
    lo = min(min(r, g), b)
    chroma = hi - lo

    if chroma < 1:
        grayscale = lo / (1 - chroma)
    else:
        grayscale = 0.0

    if chroma <= 0:
        hue = 0.0
    elif hi == r:
        hue = math.fmod((g - b) / chroma, 6)
    elif hi == g:
        hue = 2 + (b - r) / chroma
    else:
        hue = 4 + (r - g) / chroma + 4

    hue /= 6
    hue = math.fmod(hue, 1)

    return [hue * 360, chroma * 100, grayscale * 100]


def hsl_to_hcg(hsl: Sequence[float]) -> list[float]:
    s = hsl[1] / 100
    l = hsl[2] / 100
    f = 0.0

    if l < 0.5:
        c = 2.0 * s * l
    else:
        c = 2.0 * s * (1.0 - l)

    if c < 1.0:
        f = (l - 0.5 * c) / (1.0 - c)

    return [hsl[0], c * 100, f * 100]


def hsv_to_hcg(hsv: Sequence[float]) -> list[float]:
    s = hsv[1] / 100
    v = hsv[2] / 100

    c = s * v
    f = 0.0

    if c < 1.0:
        f = (v - c) / (1 - c)

    return [hsv[0], c * 100, f * 100]


def hcg_to_rgb(hcg: Sequence[float]) -> list[float]:
    """Convert HCG to RGB by mixing the pure hue with the grayscale level."""
    h = hcg[0] / 360
    c = hcg[1] / 100
    g = hcg[2] / 100

    if c == 0.0:
        return [g * 255, g * 255, g * 255]

    hi = math.fmod(h, 1) * 6
    v = math.fmod(hi, 1)
    w = 1 - v

    sector = math.floor(hi)
    if sector == 0:
        pure = (1, v, 0)
    elif sector == 1:
        pure = (w, 1, 0)
    elif sector == 2:
        pure = (0, 1, v)
    elif sector == 3:
        pure = (0, w, 1)
    elif sector == 4:
        pure = (v, 0, 1)
    else:
        pure = (1, 0, w)

    mg = (1.0 - c) * g

    return [
        (c * pure[0] + mg) * 255,
        (c * pure[1] + mg) * 255,
        (c * pure[2] + mg) * 255,
    ]


def hcg_to_hsv(hcg: Sequence[float]) -> list[float]:
    c = hcg[1] / 100
    g = hcg[2] / 100

    v = c + g * (1.0 - c)
    f = 0.0

    if v > 0.0:
        f = c / v

    return [hcg[0], f * 100, v * 100]


def hcg_to_hsl(hcg: Sequence[float]) -> list[float]:
    c = hcg[1] / 100
    g = hcg[2] / 100

    l = g * (1.0 - c) + 0.5 * c
    s = 0.0

    if 0.0 < l < 0.5:
        s = c / (2 * l)
    elif 0.5 <= l < 1.0:
        s = c / (2 * (1 - l))

    return [hcg[0], s * 100, l * 100]


def hcg_to_hwb(hcg: Sequence[float]) -> list[float]:
    c = hcg[1] / 100
    g = hcg[2] / 100
    v = c + g * (1.0 - c)
    return [hcg[0], (v - c) * 100, (1 - v) * 100]


def hwb_to_hcg(hwb: Sequence[float]) -> list[float]:
    w = hwb[1] / 100
    b = hwb[2] / 100
    v = 1 - b
    c = v - w
    g = 0.0

    if c < 1:
        g = (v - c) / (1 - c)

    return [hwb[0], c * 100, g * 100]
