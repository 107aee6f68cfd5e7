# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Model descriptors for Tinct.

All descriptors are frozen once validated. The default registry is built
at import time and never changes afterwards.
"""

from tinct.schema.models import (
    MODEL_SPECS,
    ColorModel,
    ModelRegistry,
    ModelSpec,
    ModelSpecBuilder,
    channels_of,
    labels_of,
    model_key,
    registry,
)

__all__ = [
    # Identifiers
    "ColorModel",
    "model_key",
    # Descriptors
    "ModelSpecBuilder",
    "ModelSpec",
    "MODEL_SPECS",
    # Registry
    "ModelRegistry",
    "registry",
    "channels_of",
    "labels_of",
]
