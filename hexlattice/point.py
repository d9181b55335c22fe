"""Pixel-space points and the conversion used to normalise point-like input."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    def add(self, other: object) -> Point:
        o = to_point(other)
        return Point(self.x + o.x, self.y + o.y)

    def subtract(self, other: object) -> Point:
        o = to_point(other)
        return Point(self.x - o.x, self.y - o.y)


def to_point(value: object = None) -> Point:
    """Return ``value`` as a :class:`Point`.

    Accepts a ``Point``, a mapping with ``x``/``y`` keys, a two item
    sequence, a single number (used for both axes) or ``None`` for the
    origin.
    """

    if value is None:
        return Point(0.0, 0.0)
    if isinstance(value, Point):
        return value
    if isinstance(value, Real) and not isinstance(value, bool):
        return Point(float(value), float(value))
    if isinstance(value, Mapping):
        try:
            return Point(float(value["x"]), float(value["y"]))
        except KeyError as exc:
            raise TypeError(f"point mapping is missing key {exc}") from None
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        if len(value) != 2:
            raise TypeError("point sequences must hold exactly two values")
        x, y = value
        return Point(float(x), float(y))
    if hasattr(value, "x") and hasattr(value, "y"):
        return Point(float(value.x), float(value.y))  # type: ignore[attr-defined]
    raise TypeError(f"cannot convert {type(value).__name__} to a point")


__all__ = ["Point", "to_point"]
