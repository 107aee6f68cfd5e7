# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color model descriptors and the model registry.

Design principles:
- Two-phase: descriptors start as mutable ModelSpecBuilder records, are
  validated once, then frozen into ModelSpec values
- Fail fast: malformed metadata raises ConfigurationError while the
  registry is being built, never on first use
- Read-only: a built registry never changes and is safe to share

Channel ranges (canonical, assumed on input and produced on output):
- rgb: 0-255 per channel
- hsl / hsv / hwb / hcg: hue 0-360, other channels 0-100
- cmyk: 0-100 per channel
- xyz: roughly 0-100
- lab: L 0-100, a/b signed (roughly +/-128)
- lch: L 0-100, C >= 0, H 0-360
- hex: 6 hex digits; keyword: CSS name; ansi16: 30-37/90-97; ansi256: 16-255
- apple: 0-65535 per channel; gray: 0-100
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Union

from tinct.errors import ConfigurationError, ModelError

logger = logging.getLogger(__name__)


class ColorModel(Enum):
    """Identifiers for the built-in color models."""

    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"
    CMYK = "cmyk"
    XYZ = "xyz"
    LAB = "lab"
    LCH = "lch"
    HEX = "hex"
    KEYWORD = "keyword"
    ANSI16 = "ansi16"
    ANSI256 = "ansi256"
    HCG = "hcg"
    APPLE = "apple"
    GRAY = "gray"


ModelName = Union[ColorModel, str]


def model_key(model: ModelName) -> str:
    """Normalize a ColorModel member or plain string to the registry key."""
    if isinstance(model, ColorModel):
        return model.value
    return model


# =============================================================================
# Descriptors
# =============================================================================


@dataclass(slots=True)
class ModelSpecBuilder:
    """
    Mutable, unvalidated model descriptor.

    Labels may be given as a string, in which case each character is one
    label ("rgb" -> ("r", "g", "b")).
    """
    name: str
    channels: Optional[int] = None
    labels: Optional[Union[str, Sequence[str]]] = None

    def freeze(self) -> ModelSpec:
        """Validate and return the immutable descriptor."""
        if self.channels is None:
            raise ConfigurationError(f"missing channels property: {self.name}")
        if self.labels is None:
            raise ConfigurationError(f"missing channel labels property: {self.name}")
        if (
            isinstance(self.channels, bool)
            or not isinstance(self.channels, int)
            or self.channels <= 0
        ):
            raise ConfigurationError(
                f"channel count must be a positive integer: {self.name}"
            )
        labels = tuple(self.labels)
        if len(labels) != self.channels:
            raise ConfigurationError(f"channel and label counts mismatch: {self.name}")
        return ModelSpec(name=self.name, channels=self.channels, labels=labels)


@dataclass(frozen=True, slots=True)
class ModelSpec:
    """
    Validated, immutable model descriptor.

    Attributes:
        name: Model name ("rgb", "hsl", ...)
        channels: Number of channels in a color value
        labels: One label per channel, in channel order
    """
    name: str
    channels: int
    labels: tuple[str, ...]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"name": self.name, "channels": self.channels, "labels": list(self.labels)}


# =============================================================================
# Registry
# =============================================================================


class ModelRegistry:
    """
    Read-only lookup of channel arity and labels per model.

    Build with ``ModelRegistry(builders)`` or ``ModelRegistry.from_mapping``.
    Every descriptor is validated before the registry becomes usable.
    """

    __slots__ = ("_specs",)

    def __init__(self, builders: Iterable[ModelSpecBuilder]) -> None:
        specs = {}
        for builder in builders:
            spec = builder.freeze()
            if spec.name in specs:
                raise ConfigurationError(f"duplicate model: {spec.name}")
            specs[spec.name] = spec
        self._specs: Mapping[str, ModelSpec] = MappingProxyType(specs)
        logger.debug("Built model registry with %d models", len(specs))

    @classmethod
    def from_mapping(
        cls,
        descriptors: Mapping[str, tuple[Optional[int], Optional[Union[str, Sequence[str]]]]],
    ) -> ModelRegistry:
        """Build from ``{name: (channels, labels)}``."""
        return cls(
            ModelSpecBuilder(name=name, channels=channels, labels=labels)
            for name, (channels, labels) in descriptors.items()
        )

    def spec(self, model: ModelName) -> ModelSpec:
        """Return the descriptor for a model, or raise ModelError."""
        key = model_key(model)
        try:
            return self._specs[key]
        except (KeyError, TypeError):
            raise ModelError(str(key)) from None

    def channels_of(self, model: ModelName) -> int:
        return self.spec(model).channels

    def labels_of(self, model: ModelName) -> tuple[str, ...]:
        return self.spec(model).labels

    def models(self) -> tuple[str, ...]:
        """Registered model names in registration order."""
        return tuple(self._specs)

    def __contains__(self, model: object) -> bool:
        if not isinstance(model, (ColorModel, str)):
            return False
        return model_key(model) in self._specs

    def __iter__(self):
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def to_dict(self) -> dict:
        """Serialize all descriptors, keyed by model name."""
        return {name: spec.to_dict() for name, spec in self._specs.items()}


# =============================================================================
# Built-in models
# =============================================================================

MODEL_SPECS: tuple[ModelSpecBuilder, ...] = (
    ModelSpecBuilder("rgb", 3, "rgb"),
    ModelSpecBuilder("hsl", 3, "hsl"),
    ModelSpecBuilder("hsv", 3, "hsv"),
    ModelSpecBuilder("hwb", 3, "hwb"),
    ModelSpecBuilder("cmyk", 4, "cmyk"),
    ModelSpecBuilder("xyz", 3, "xyz"),
    ModelSpecBuilder("lab", 3, "lab"),
    ModelSpecBuilder("lch", 3, "lch"),
    ModelSpecBuilder("hex", 1, ["hex"]),
    ModelSpecBuilder("keyword", 1, ["keyword"]),
    ModelSpecBuilder("ansi16", 1, ["ansi16"]),
    ModelSpecBuilder("ansi256", 1, ["ansi256"]),
    ModelSpecBuilder("hcg", 3, ["h", "c", "g"]),
    ModelSpecBuilder("apple", 3, ["r16", "g16", "b16"]),
    ModelSpecBuilder("gray", 1, ["gray"]),
)

registry = ModelRegistry(MODEL_SPECS)


def channels_of(model: ModelName) -> int:
    """Channel count of a built-in model."""
    return registry.channels_of(model)


def labels_of(model: ModelName) -> tuple[str, ...]:
    """Ordered channel labels of a built-in model."""
    return registry.labels_of(model)
