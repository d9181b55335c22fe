from __future__ import annotations

from collections.abc import Mapping

from .options import ShapeOptions


def is_object_literal(value: object) -> bool:
    """True when ``value`` is an options object rather than a positional argument."""

    return isinstance(value, Mapping | ShapeOptions)


__all__ = ["is_object_literal"]
