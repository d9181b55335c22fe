from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import HexSettings
from .coords import Orientation
from .hex import Hex, HexFactory
from .point import Point, to_point

SQRT3_3 = math.sqrt(3.0) / 3.0


def point_to_hex(
    point: object,
    *,
    hex_factory: HexFactory,
    point_factory: Callable[[object], Point] = to_point,
) -> Hex:
    """Return the hex containing the pixel ``point``."""

    reference = hex_factory()
    size = reference.size
    p = point_factory(point)
    px, py = p.x / size, p.y / size
    if reference.is_pointy():
        qx = SQRT3_3 * px - py / 3
        qy = 2 / 3 * py
    else:
        qx = 2 / 3 * px
        qy = -px / 3 + SQRT3_3 * py
    return hex_factory.round(hex_factory(qx, qy))


def hex_to_point(hex: Hex) -> Point:
    return hex.to_point()


def points_to_cubes(points: ArrayLike, *, settings: HexSettings) -> NDArray[np.int64]:
    """Vectorised :func:`point_to_hex` returning an ``(N, 3)`` array of cube coordinates."""

    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    px = pts[:, 0] / settings.size
    py = pts[:, 1] / settings.size
    if settings.orientation is Orientation.POINTY:
        qx = SQRT3_3 * px - py / 3
        qy = 2 / 3 * py
    else:
        qx = 2 / 3 * px
        qy = -px / 3 + SQRT3_3 * py
    frac = np.stack([qx, qy, -qx - qy], axis=1)

    rounded = np.floor(frac + 0.5)
    delta = np.abs(rounded - frac)
    fix_x = (delta[:, 0] > delta[:, 1]) & (delta[:, 0] > delta[:, 2])
    fix_y = ~fix_x & (delta[:, 1] > delta[:, 2])
    fix_z = ~fix_x & ~fix_y
    rounded[fix_x, 0] = -rounded[fix_x, 1] - rounded[fix_x, 2]
    rounded[fix_y, 1] = -rounded[fix_y, 0] - rounded[fix_y, 2]
    rounded[fix_z, 2] = -rounded[fix_z, 0] - rounded[fix_z, 1]
    return rounded.astype(np.int64)


__all__ = ["hex_to_point", "point_to_hex", "points_to_cubes"]
