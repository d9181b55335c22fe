"""Hex values and the factory used to construct them.

A :class:`Hex` stores the two independent axial components ``x`` and ``y``
together with the :class:`~hexlattice.config.HexSettings` it was built with;
``z`` is always derived as ``-x - y``.  Code that generates hexes never
instantiates :class:`Hex` directly.  It receives a :class:`HexFactory`
instead, so a different size, orientation or a test double can be swapped
in without touching the generators.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

from .config import HexSettings
from .coords import Cube, Orientation
from .point import Point

SQRT3 = math.sqrt(3.0)

DEFAULT_SETTINGS = HexSettings()


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def cube_round(x: float, y: float, z: float) -> tuple[int, int, int]:
    """Snap fractional cube components onto the nearest lattice hex."""

    rx, ry, rz = _round_half_up(x), _round_half_up(y), _round_half_up(z)
    dx, dy, dz = abs(rx - x), abs(ry - y), abs(rz - z)
    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return rx, ry, rz


@dataclass(frozen=True, slots=True)
class Hex:
    x: float
    y: float
    settings: HexSettings = field(default=DEFAULT_SETTINGS, compare=False)

    @property
    def z(self) -> float:
        return -self.x - self.y

    @property
    def size(self) -> float:
        return self.settings.size

    @property
    def orientation(self) -> Orientation:
        return self.settings.orientation

    def coordinates(self) -> Cube:
        return Cube(self.x, self.y, self.z)

    def is_pointy(self) -> bool:
        return self.settings.orientation is Orientation.POINTY

    def is_flat(self) -> bool:
        return self.settings.orientation is Orientation.FLAT

    def width(self) -> float:
        if self.is_pointy():
            return SQRT3 * self.size
        return 2.0 * self.size

    def height(self) -> float:
        if self.is_pointy():
            return 2.0 * self.size
        return SQRT3 * self.size

    def to_point(self) -> Point:
        """Pixel position of the hex centre relative to the grid origin."""

        if self.is_pointy():
            px = self.size * SQRT3 * (self.x + self.y / 2)
            py = self.size * 3 / 2 * self.y
        else:
            px = self.size * 3 / 2 * self.x
            py = self.size * SQRT3 * (self.y + self.x / 2)
        return Point(px, py)

    def add(self, other: Hex | Cube) -> Hex:
        return Hex(self.x + other.x, self.y + other.y, self.settings)

    def with_coordinates(self, x: float, y: float) -> Hex:
        return Hex(x, y, self.settings)


class HexFactory:
    """Callable that builds hexes sharing one set of :class:`HexSettings`.

    Accepted call forms::

        factory()                  # origin
        factory(other_hex)         # same coordinates, this factory's settings
        factory(cube)
        factory({"x": 1, "z": 2})  # any two of x/y/z, third derived
        factory(3)                 # (3, 3)
        factory(1, 2)
        factory(1, 2, -3)
    """

    def __init__(self, settings: HexSettings | None = None, **overrides: Any) -> None:
        base = settings or DEFAULT_SETTINGS
        if overrides:
            base = HexSettings.model_validate({**base.model_dump(), **overrides})
        self.settings = base

    def __repr__(self) -> str:
        return (
            f"HexFactory(size={self.settings.size!r}, "
            f"orientation={self.settings.orientation.value!r})"
        )

    def __call__(self, x: object = None, y: float | None = None, z: float | None = None) -> Hex:
        if y is None and z is None:
            return self._from_single(x)
        if not _is_number(x):
            raise TypeError("hex coordinates must be numbers")
        if z is None:
            return Hex(x, y, self.settings)  # type: ignore[arg-type]
        if y is None:
            return Hex(x, -x - z, self.settings)  # type: ignore[operator]
        _check_cube(x, y, z)  # type: ignore[arg-type]
        return Hex(x, y, self.settings)  # type: ignore[arg-type]

    def _from_single(self, value: object) -> Hex:
        if value is None:
            return Hex(0, 0, self.settings)
        if isinstance(value, Hex | Cube):
            return Hex(value.x, value.y, self.settings)
        if _is_number(value):
            return Hex(value, value, self.settings)  # type: ignore[arg-type]
        if isinstance(value, Mapping):
            return self._from_mapping(value)
        raise TypeError(f"cannot build a hex from {type(value).__name__}")

    def _from_mapping(self, value: Mapping[str, Any]) -> Hex:
        x, y, z = value.get("x"), value.get("y"), value.get("z")
        given = sum(component is not None for component in (x, y, z))
        if given < 2:
            raise TypeError("hex mappings need at least two of x, y and z")
        if x is None:
            x = -y - z
        elif y is None:
            y = -x - z
        elif z is not None:
            _check_cube(x, y, z)
        return Hex(x, y, self.settings)

    def round(self, hex: Hex) -> Hex:
        """Return the lattice hex nearest to the (fractional) ``hex``."""

        rx, ry, _ = cube_round(hex.x, hex.y, hex.z)
        return Hex(rx, ry, self.settings)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _check_cube(x: float, y: float, z: float) -> None:
    if not math.isclose(x + y + z, 0.0, abs_tol=1e-9):
        raise ValueError("For cube coords, x + y + z must be 0")


__all__ = ["DEFAULT_SETTINGS", "Hex", "HexFactory", "cube_round"]
