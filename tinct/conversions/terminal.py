# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Integer-coded models: ANSI 16, ANSI 256 and hex strings.

These are the only conversions that round. Rounding is half-up
(floor(x + 0.5)), so 0.5 always goes to 1 and 2.5 to 3.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Sequence, Union

from tinct.conversions.cylindrical import hsv_to_rgb, rgb_to_hsv

_HEX_RE = re.compile(r"[a-f0-9]{6}|[a-f0-9]{3}", re.IGNORECASE)


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return int(math.floor(x + 0.5))


# =============================================================================
# ANSI 16
# =============================================================================


def rgb_to_ansi16(rgb: Sequence[float], value: Optional[float] = None) -> int:
    """
    Convert RGB to an ANSI 16 foreground code (30-37, 90-97).

    Args:
        rgb: RGB channels [0, 255]
        value: HSV value channel [0, 100] if the caller already has it.
            Computed from ``rgb`` when omitted.

    Returns:
        30 for anything dark enough to bucket to 0, otherwise 30 plus a
        blue/green/red bitmask, plus 60 for the bright variants.
    """
    r, g, b = rgb[0], rgb[1], rgb[2]
    if value is None:
        value = rgb_to_hsv(rgb)[2]

    value = round_half_up(value / 50)

    if value == 0:
        return 30

    ansi = 30 + (
        (round_half_up(b / 255) << 2)
        | (round_half_up(g / 255) << 1)
        | round_half_up(r / 255)
    )

    if value == 2:
        ansi += 60

    return ansi


def hsv_to_ansi16(hsv: Sequence[float]) -> int:
    """Convert HSV to ANSI 16, reusing the known value channel."""
    return rgb_to_ansi16(hsv_to_rgb(hsv), hsv[2])


def ansi16_to_rgb(code: int) -> list[float]:
    """
    Convert an ANSI 16 code to RGB.

    Codes ending in 0 or 7 (black, white and their bright variants) land on
    an 11-step grey ramp; the rest decode the color bitmask at half or full
    intensity.
    """
    color = int(code) % 10

    # greyscale
    if color == 0 or color == 7:
        grey = float(color)
        if code > 50:
            grey += 3.5
        grey = grey / 10.5 * 255
        return [grey, grey, grey]

    mult = (int(code > 50) + 1) * 0.5
    r = (color & 1) * mult * 255
    g = ((color >> 1) & 1) * mult * 255
    b = ((color >> 2) & 1) * mult * 255

    return [r, g, b]


# =============================================================================
# ANSI 256
# =============================================================================


def rgb_to_ansi256(rgb: Sequence[float]) -> int:
    """
    Convert RGB to an ANSI 256 code (16-255).

    Greys use the extended 24-step ramp (232-255), except near-black and
    near-white which map to the cube corners 16 and 231. Everything else
    goes into the 6x6x6 color cube.
    """
    r, g, b = rgb[0], rgb[1], rgb[2]

    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return round_half_up((r - 8) / 247 * 24) + 232

    return (
        16
        + 36 * round_half_up(r / 255 * 5)
        + 6 * round_half_up(g / 255 * 5)
        + round_half_up(b / 255 * 5)
    )


def ansi256_to_rgb(code: int) -> list[float]:
    """Convert an ANSI 256 code to RGB."""
    # greyscale ramp
    if code >= 232:
        c = (code - 232) * 10 + 8
        return [c, c, c]

    code -= 16

    rem = math.fmod(code, 36)
    r = math.floor(code / 36) / 5 * 255
    g = math.floor(rem / 6) / 5 * 255
    b = math.fmod(rem, 6) / 5 * 255

    return [r, g, b]


# =============================================================================
# Hex
# =============================================================================


def pack_hex(r: int, g: int, b: int) -> str:
    """Pack three byte values into a 6-digit uppercase hex string."""
    integer = ((r & 0xFF) << 16) + ((g & 0xFF) << 8) + (b & 0xFF)
    return f"{integer:06X}"


def rgb_to_hex(rgb: Sequence[float]) -> str:
    """
    Convert RGB to a hex string like "FF0080" (no leading '#').

    Channels are rounded half-up and masked to one byte each.
    """
    return pack_hex(
        round_half_up(rgb[0]),
        round_half_up(rgb[1]),
        round_half_up(rgb[2]),
    )


def hex_to_rgb(value: Union[str, int]) -> list[int]:
    """
    Convert a hex color to RGB.

    Takes the first run of 6 (or else 3) hex digits anywhere in the input,
    so "#3941C8", "3941c8" and "#abc" all parse. 3-digit shorthand doubles
    each digit. Integers are rendered in base 16 first. Input without any
    hex run decodes to black.
    """
    if isinstance(value, int):
        text = format(value, "x")
    else:
        text = str(value)

    match = _HEX_RE.search(text)
    if not match:
        return [0, 0, 0]

    digits = match.group(0)
    if len(digits) == 3:
        digits = "".join(ch + ch for ch in digits)

    integer = int(digits, 16)
    return [(integer >> 16) & 0xFF, (integer >> 8) & 0xFF, integer & 0xFF]
