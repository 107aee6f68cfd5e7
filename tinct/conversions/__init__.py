# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Conversion core for Tinct.

Pure numeric conversions between color models, plus the table that maps
each direct model pair to its function. Nothing here holds mutable state.
"""

from tinct.conversions.keywords import KeywordIndex, default_keywords
from tinct.conversions.table import DEFAULT_EDGES, ConversionTable, convert, default_table

__all__ = [
    "convert",
    "default_table",
    "ConversionTable",
    "DEFAULT_EDGES",
    "KeywordIndex",
    "default_keywords",
]
