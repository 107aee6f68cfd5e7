# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- Color model conversion tables.

Converts colors between RGB, HSL, HSV, HWB, HCG, CMYK, XYZ, Lab, LCH,
hex, CSS keywords, ANSI 16/256, 16-bit "apple" RGB and gray, one direct
hop at a time.

Quick start::

    from tinct import convert

    convert("rgb", "hsl", [255, 0, 128])   # [329.88..., 100.0, 50.0]
    convert("rgb", "hex", [255, 0, 128])   # "FF0080"
    convert("keyword", "rgb", "teal")      # [0, 128, 128]
"""

from __future__ import annotations

__version__ = "1.0.0"

from tinct.conversions import (
    ConversionTable,
    KeywordIndex,
    convert,
    default_keywords,
    default_table,
)
from tinct.errors import (
    ArityError,
    ConfigurationError,
    ModelError,
    TinctError,
    UnknownKeywordError,
    UnsupportedPairError,
)
from tinct.schema import (
    ColorModel,
    ModelRegistry,
    ModelSpec,
    ModelSpecBuilder,
    channels_of,
    labels_of,
    registry,
)


def keyword_to_rgb(name: str) -> list[int]:
    """RGB value of a CSS color keyword."""
    return default_keywords.keyword_to_rgb(name)


def rgb_to_keyword(rgb) -> str:
    """Exact or nearest CSS color keyword for an RGB value."""
    return default_keywords.rgb_to_keyword(rgb)


__all__ = [
    # Core API
    "convert",
    "channels_of",
    "labels_of",
    "keyword_to_rgb",
    "rgb_to_keyword",
    # Tables (commonly needed)
    "ColorModel",
    "ConversionTable",
    "KeywordIndex",
    "ModelRegistry",
    "ModelSpec",
    "ModelSpecBuilder",
    "registry",
    "default_table",
    "default_keywords",
    # Errors
    "TinctError",
    "ConfigurationError",
    "ModelError",
    "ArityError",
    "UnsupportedPairError",
    "UnknownKeywordError",
    # Version
    "__version__",
]
