# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
The conversion table: one pure function per directly convertible
(source, destination) model pair.

The table is the edge set of the model graph. It does not chain
conversions; a routing layer composes multi-hop paths from ``edges()``.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Union

from tinct.conversions import cie, cylindrical, device, terminal
from tinct.conversions.keywords import default_keywords
from tinct.errors import ArityError, ConfigurationError, UnsupportedPairError
from tinct.schema.models import ColorModel, ModelName, ModelRegistry, model_key, registry

logger = logging.getLogger(__name__)

Converter = Callable[[Any], Any]
Edge = tuple[ModelName, ModelName, Converter]

# Models whose value is a single scalar (str or int) rather than a list
SCALAR_MODELS = frozenset({
    ColorModel.HEX.value,
    ColorModel.KEYWORD.value,
    ColorModel.ANSI16.value,
    ColorModel.ANSI256.value,
})


def _channel_count(value: Any) -> Union[int, None]:
    """Length of a channel sequence, or None for a scalar."""
    if isinstance(value, (str, bytes)) or not hasattr(value, "__len__"):
        return None
    try:
        return len(value)
    except TypeError:
        # 0-d numpy arrays
        return None


class ConversionTable:
    """
    Immutable mapping of (source, destination) -> conversion function.

    Every model named by an edge must be registered in ``models``; a bad
    edge is a ConfigurationError at construction time.
    """

    __slots__ = ("_registry", "_edges")

    def __init__(self, models: ModelRegistry, edges: Iterable[Edge]) -> None:
        table = {}
        for source, dest, fn in edges:
            src, dst = model_key(source), model_key(dest)
            for name in (src, dst):
                if name not in models:
                    raise ConfigurationError(f"edge {src}->{dst} names unknown model: {name}")
            if (src, dst) in table:
                raise ConfigurationError(f"duplicate edge: {src}->{dst}")
            table[(src, dst)] = fn

        self._registry = models
        self._edges: Mapping[tuple[str, str], Converter] = MappingProxyType(table)
        logger.debug(
            "Built conversion table with %d edges over %d models",
            len(table),
            len(models),
        )

    @property
    def registry(self) -> ModelRegistry:
        return self._registry

    def get(self, source: ModelName, dest: ModelName) -> Converter:
        """
        Return the direct conversion function for a model pair.

        Raises:
            ModelError: If either model is not registered
            UnsupportedPairError: If no direct function exists
        """
        src = self._registry.spec(source).name
        dst = self._registry.spec(dest).name
        try:
            return self._edges[(src, dst)]
        except KeyError:
            logger.debug("No direct conversion %s -> %s", src, dst)
            raise UnsupportedPairError(src, dst) from None

    def supports(self, source: ModelName, dest: ModelName) -> bool:
        return (model_key(source), model_key(dest)) in self._edges

    def edges(self) -> tuple[tuple[str, str], ...]:
        """All direct pairs, in registration order."""
        return tuple(self._edges)

    def targets(self, source: ModelName) -> tuple[str, ...]:
        """Models reachable from ``source`` in one direct conversion."""
        src = self._registry.spec(source).name
        return tuple(dst for (s, dst) in self._edges if s == src)

    def convert(
        self,
        source: ModelName,
        dest: ModelName,
        value: Any,
        *,
        rounded: bool = False,
    ) -> Any:
        """
        Convert a color value from one model to another in one hop.

        Args:
            source: Source model (ColorModel or name)
            dest: Destination model (ColorModel or name)
            value: Channel sequence of the source model's arity. Scalar
                models (hex, keyword, ansi16, ansi256) also accept the bare
                value instead of a one-element sequence.
            rounded: If True, round every numeric output channel half-up
                to an integer. Scalar outputs are returned unchanged.

        Returns:
            A list of channels, or a scalar for scalar destination models

        Raises:
            ModelError: If either model is not registered
            UnsupportedPairError: If no direct function exists
            ArityError: If the input has the wrong number of channels
        """
        fn = self.get(source, dest)
        spec = self._registry.spec(source)
        count = _channel_count(value)

        if spec.name in SCALAR_MODELS:
            if count is None:
                arg = value
            elif count == spec.channels:
                arg = value[0]
            else:
                logger.debug("Rejected %s input with %d channels", spec.name, count)
                raise ArityError(spec.name, spec.channels, count)
        else:
            if count != spec.channels:
                got = 1 if count is None else count
                logger.debug("Rejected %s input with %d channels", spec.name, got)
                raise ArityError(spec.name, spec.channels, got)
            arg = list(value)

        result = fn(arg)

        if rounded and isinstance(result, list):
            return [terminal.round_half_up(c) for c in result]
        return result


# =============================================================================
# Default table
# =============================================================================

DEFAULT_EDGES: tuple[Edge, ...] = (
    # rgb
    ("rgb", "hsl", cylindrical.rgb_to_hsl),
    ("rgb", "hsv", cylindrical.rgb_to_hsv),
    ("rgb", "hwb", cylindrical.rgb_to_hwb),
    ("rgb", "cmyk", device.rgb_to_cmyk),
    ("rgb", "keyword", default_keywords.rgb_to_keyword),
    ("rgb", "xyz", cie.rgb_to_xyz),
    ("rgb", "lab", cie.rgb_to_lab),
    ("rgb", "ansi16", terminal.rgb_to_ansi16),
    ("rgb", "ansi256", terminal.rgb_to_ansi256),
    ("rgb", "hex", terminal.rgb_to_hex),
    ("rgb", "hcg", cylindrical.rgb_to_hcg),
    ("rgb", "apple", device.rgb_to_apple),
    ("rgb", "gray", device.rgb_to_gray),
    # hsl
    ("hsl", "rgb", cylindrical.hsl_to_rgb),
    ("hsl", "hsv", cylindrical.hsl_to_hsv),
    ("hsl", "hcg", cylindrical.hsl_to_hcg),
    # hsv
    ("hsv", "rgb", cylindrical.hsv_to_rgb),
    ("hsv", "hsl", cylindrical.hsv_to_hsl),
    ("hsv", "ansi16", terminal.hsv_to_ansi16),
    ("hsv", "hcg", cylindrical.hsv_to_hcg),
    # hwb
    ("hwb", "rgb", cylindrical.hwb_to_rgb),
    ("hwb", "hcg", cylindrical.hwb_to_hcg),
    # cmyk
    ("cmyk", "rgb", device.cmyk_to_rgb),
    # xyz
    ("xyz", "rgb", cie.xyz_to_rgb),
    ("xyz", "lab", cie.xyz_to_lab),
    # lab / lch
    ("lab", "xyz", cie.lab_to_xyz),
    ("lab", "lch", cie.lab_to_lch),
    ("lch", "lab", cie.lch_to_lab),
    # scalar models
    ("keyword", "rgb", default_keywords.keyword_to_rgb),
    ("ansi16", "rgb", terminal.ansi16_to_rgb),
    ("ansi256", "rgb", terminal.ansi256_to_rgb),
    ("hex", "rgb", terminal.hex_to_rgb),
    # hcg
    ("hcg", "rgb", cylindrical.hcg_to_rgb),
    ("hcg", "hsv", cylindrical.hcg_to_hsv),
    ("hcg", "hsl", cylindrical.hcg_to_hsl),
    ("hcg", "hwb", cylindrical.hcg_to_hwb),
    # apple
    ("apple", "rgb", device.apple_to_rgb),
    # gray
    ("gray", "rgb", device.gray_to_rgb),
    ("gray", "hsv", device.gray_to_hsv),
    ("gray", "hsl", device.gray_to_hsl),
    ("gray", "hwb", device.gray_to_hwb),
    ("gray", "cmyk", device.gray_to_cmyk),
    ("gray", "lab", device.gray_to_lab),
    ("gray", "hex", device.gray_to_hex),
)

default_table = ConversionTable(registry, DEFAULT_EDGES)


def convert(source: ModelName, dest: ModelName, value: Any, *, rounded: bool = False) -> Any:
    """Convert with the default table. See ``ConversionTable.convert``."""
    return default_table.convert(source, dest, value, rounded=rounded)
