"""Direction tables consumed by the shape generators.

Each table maps a direction token to the data that orients a shape.  The
generators only look values up here, so adding or checking a direction is
a matter of editing a row.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType

Vector = tuple[int, int, int]


class ParallelogramDirection(str, Enum):
    N = "N"
    NE = "NE"
    SE = "SE"
    S = "S"
    SW = "SW"
    NW = "NW"


class TriangleDirection(str, Enum):
    DOWN = "down"
    UP = "up"


class RectangleDirection(str, Enum):
    E = "E"
    NE = "NE"
    SE = "SE"
    W = "W"
    NW = "NW"
    SW = "SW"


# (step along width, step along height) as cube vectors.
PARALLELOGRAM_STEPS: Mapping[ParallelogramDirection, tuple[Vector, Vector]] = MappingProxyType(
    {
        ParallelogramDirection.SE: ((1, 0, -1), (0, 1, -1)),
        ParallelogramDirection.N: ((0, -1, 1), (1, -1, 0)),
        ParallelogramDirection.SW: ((-1, 1, 0), (-1, 0, 1)),
        # point reflections of the three above
        ParallelogramDirection.NW: ((-1, 0, 1), (0, -1, 1)),
        ParallelogramDirection.S: ((0, 1, -1), (-1, 1, 0)),
        ParallelogramDirection.NE: ((1, -1, 0), (1, 0, -1)),
    }
)

TriangleBounds = tuple[Callable[[int, int], int], Callable[[int, int], int]]

# (first y, stop y) for column x of a triangle with the given side.
TRIANGLE_BOUNDS: Mapping[TriangleDirection, TriangleBounds] = MappingProxyType(
    {
        TriangleDirection.DOWN: (lambda side, x: 0, lambda side, x: side - x),
        TriangleDirection.UP: (lambda side, x: side - x, lambda side, x: side + 1),
    }
)

# (primary, secondary, derived) axes.  Stepping along the primary axis adds
# one to it and takes one from the derived axis.
RECTANGLE_AXES: Mapping[RectangleDirection, tuple[str, str, str]] = MappingProxyType(
    {
        RectangleDirection.E: ("x", "y", "z"),
        RectangleDirection.SE: ("y", "x", "z"),
        RectangleDirection.NE: ("x", "z", "y"),
        RectangleDirection.NW: ("z", "x", "y"),
        RectangleDirection.SW: ("y", "z", "x"),
        RectangleDirection.W: ("z", "y", "x"),
    }
)

DEFAULT_PARALLELOGRAM_DIRECTION = ParallelogramDirection.SE
DEFAULT_TRIANGLE_DIRECTION = TriangleDirection.DOWN
DEFAULT_RECTANGLE_DIRECTION = RectangleDirection.E


def resolve_direction(value: object, choices: type[Enum], default: Enum) -> Enum:
    """Return the member of ``choices`` named by ``value`` or ``default``."""

    if isinstance(value, choices):
        return value
    try:
        return choices(value)
    except ValueError:
        return default


__all__ = [
    "DEFAULT_PARALLELOGRAM_DIRECTION",
    "DEFAULT_RECTANGLE_DIRECTION",
    "DEFAULT_TRIANGLE_DIRECTION",
    "PARALLELOGRAM_STEPS",
    "ParallelogramDirection",
    "RECTANGLE_AXES",
    "RectangleDirection",
    "TRIANGLE_BOUNDS",
    "TriangleDirection",
    "resolve_direction",
]
