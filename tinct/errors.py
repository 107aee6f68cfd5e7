# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Error taxonomy for Tinct.

Every error is local to the call that raised it. Nothing here is retried:
conversions are deterministic, so the same input always fails the same way.
"""

from __future__ import annotations


class TinctError(ValueError):
    """Base class for all Tinct errors."""


class ConfigurationError(TinctError):
    """Model metadata is malformed. Raised while building a registry."""


class ModelError(TinctError):
    """A model name is not registered."""

    def __init__(self, model: str) -> None:
        super().__init__(f"Unknown color model: {model!r}")
        self.model = model


class ArityError(TinctError):
    """Input channel count does not match the source model."""

    def __init__(self, model: str, expected: int, got: int) -> None:
        super().__init__(
            f"Model {model!r} expects {expected} channel(s), got {got}"
        )
        self.model = model
        self.expected = expected
        self.got = got


class UnsupportedPairError(TinctError):
    """No direct conversion is registered for an ordered model pair."""

    def __init__(self, source: str, dest: str) -> None:
        super().__init__(f"No direct conversion from {source!r} to {dest!r}")
        self.source = source
        self.dest = dest


class UnknownKeywordError(TinctError):
    """A color keyword is not in the named-color table."""

    def __init__(self, keyword: str) -> None:
        super().__init__(f"Unknown color keyword: {keyword!r}")
        self.keyword = keyword
