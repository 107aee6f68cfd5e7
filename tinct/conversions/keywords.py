# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Named color keywords.

Forward lookup (keyword -> RGB) and reverse lookup (RGB -> keyword) over a
fixed table of CSS color keywords. The default table is the CSS3 set from
``webcolors`` plus the CSS Color 4 addition ``rebeccapurple``, ordered
alphabetically.

Reverse lookup tries an exact match first. Where several keywords share one
RGB value (aqua/cyan, gray/grey, ...) the exact match is the last of them in
table order. Anything else falls back to the nearest keyword by squared
Euclidean distance in RGB, where ties go to the first keyword in table order.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Sequence

import numpy as np
import webcolors
from numpy.typing import NDArray

from tinct.errors import ConfigurationError, UnknownKeywordError

logger = logging.getLogger(__name__)

# CSS Color 4 keywords missing from the webcolors css3 table
_CSS4_ADDITIONS = {
    "rebeccapurple": (102, 51, 153),
}


def css_keywords(spec: str = "css3") -> dict[str, tuple[int, int, int]]:
    """
    Load the named-color table for a CSS specification from webcolors.

    The css3 table is extended with the CSS Color 4 keywords it lacks.

    Returns:
        Dict of keyword -> (r, g, b), in alphabetical keyword order
    """
    found = {}
    for name in webcolors.names(spec):
        rgb = webcolors.name_to_rgb(name, spec=spec)
        found[name] = (rgb.red, rgb.green, rgb.blue)
    if spec == "css3":
        for name, rgb in _CSS4_ADDITIONS.items():
            found.setdefault(name, rgb)
    return {name: found[name] for name in sorted(found)}


class KeywordIndex:
    """
    Bidirectional keyword <-> RGB lookup.

    The index is built once and never changes. Nearest-match queries scan
    the whole table (vectorized), which is fine for the ~150 CSS keywords.
    """

    __slots__ = ("_forward", "_reverse", "_names", "_table")

    def __init__(self, keywords: Mapping[str, Sequence[int]]) -> None:
        if not keywords:
            raise ConfigurationError("keyword table is empty")

        forward = {}
        reverse = {}
        for name, rgb in keywords.items():
            if len(rgb) != 3:
                raise ConfigurationError(f"keyword {name!r} is not an RGB triple")
            triple = tuple(int(c) for c in rgb)
            forward[name] = triple
            # later keywords win on shared values
            reverse[triple] = name

        self._forward: Mapping[str, tuple[int, int, int]] = MappingProxyType(forward)
        self._reverse: Mapping[tuple, str] = MappingProxyType(reverse)
        self._names: tuple[str, ...] = tuple(forward)

        table: NDArray[np.float64] = np.array(
            [forward[name] for name in self._names], dtype=np.float64
        )
        table.flags.writeable = False
        self._table = table

        logger.debug("Built keyword index with %d keywords", len(self._names))

    @classmethod
    def from_webcolors(cls, spec: str = "css3") -> KeywordIndex:
        """Build the index from a webcolors named-color specification."""
        return cls(css_keywords(spec))

    @property
    def keywords(self) -> tuple[str, ...]:
        """All keywords in table order."""
        return self._names

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._forward

    def __len__(self) -> int:
        return len(self._names)

    def keyword_to_rgb(self, keyword: str) -> list[int]:
        """
        Look up the RGB value of a keyword.

        Raises:
            UnknownKeywordError: If the keyword is not in the table
        """
        try:
            return list(self._forward[keyword])
        except (KeyError, TypeError):
            raise UnknownKeywordError(str(keyword)) from None

    def rgb_to_keyword(self, rgb: Sequence[float]) -> str:
        """
        Find the keyword for an RGB value.

        Exact matches are returned directly. Otherwise the keyword with the
        smallest squared distance wins; on equal distances the earliest
        keyword in table order is kept.
        """
        triple = tuple(rgb[:3])
        exact = self._reverse.get(triple)
        if exact is not None:
            return exact
        return self.nearest(triple)

    def nearest(self, rgb: Sequence[float]) -> str:
        """Keyword closest to ``rgb`` by squared Euclidean distance."""
        diff = self._table - np.asarray(rgb[:3], dtype=np.float64)
        distances = np.sum(diff ** 2, axis=-1)
        # argmin returns the first minimum, matching a strict '<' scan
        return self._names[int(np.argmin(distances))]


default_keywords = KeywordIndex.from_webcolors()


def keyword_to_rgb(keyword: str) -> list[int]:
    """Convert a CSS keyword to RGB using the default index."""
    return default_keywords.keyword_to_rgb(keyword)


def rgb_to_keyword(rgb: Sequence[float]) -> str:
    """Convert RGB to the exact or nearest CSS keyword using the default index."""
    return default_keywords.rgb_to_keyword(rgb)
