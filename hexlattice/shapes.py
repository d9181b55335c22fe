"""Generators for the standard grid shapes.

Every generator accepts its dimensions positionally or as one options
object (a mapping or the matching options model), normalises them into a
typed options model and only then enumerates coordinates.  Hex objects are
always produced by the injected ``hex_factory``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from .directions import PARALLELOGRAM_STEPS, RECTANGLE_AXES, TRIANGLE_BOUNDS
from .hex import Hex, HexFactory
from .options import (
    HexagonOptions,
    ParallelogramOptions,
    RectangleOptions,
    ShapeOptions,
    TriangleOptions,
)
from .utils import is_object_literal

logger = logging.getLogger(__name__)

OptionsPredicate = Callable[[object], bool]
_Options = TypeVar("_Options", bound=ShapeOptions)


def normalise_options(
    model: type[_Options],
    first: object,
    is_options: OptionsPredicate,
    **positional: Any,
) -> _Options:
    """Build ``model`` from either an options object or positional arguments."""

    if is_options(first):
        if isinstance(first, model):
            return first
        # options models iterate as (field, value) pairs, like mappings
        return model.model_validate(dict(first))  # type: ignore[call-overload]
    given = {key: value for key, value in positional.items() if value is not None}
    return model.model_validate(given)


def parallelogram(
    width: Any = None,
    height: Any = None,
    start: Any = None,
    direction: Any = None,
    *,
    hex_factory: HexFactory,
    is_options: OptionsPredicate = is_object_literal,
) -> list[Hex]:
    """Hexes of a ``width`` by ``height`` parallelogram (default direction SE)."""

    options = normalise_options(
        ParallelogramOptions,
        width,
        is_options,
        width=width,
        height=height,
        start=start,
        direction=direction,
    )
    origin = hex_factory(options.start)
    along_width, along_height = PARALLELOGRAM_STEPS[options.direction]
    logger.debug(
        "parallelogram %sx%s from (%s, %s) towards %s",
        options.width,
        options.height,
        origin.x,
        origin.y,
        options.direction.value,
    )

    hexes: list[Hex] = []
    for j in range(options.height):
        for i in range(options.width):
            dx = i * along_width[0] + j * along_height[0]
            dy = i * along_width[1] + j * along_height[1]
            hexes.append(hex_factory(origin.x + dx, origin.y + dy))
    return hexes


def triangle(
    size: Any = None,
    start: Any = None,
    direction: Any = None,
    *,
    hex_factory: HexFactory,
    is_options: OptionsPredicate = is_object_literal,
) -> list[Hex]:
    """Hexes of a triangle with ``size`` hexes per side, pointing down or up."""

    options = normalise_options(
        TriangleOptions,
        size,
        is_options,
        size=size,
        start=start,
        direction=direction,
    )
    origin = hex_factory(options.start)
    first_y, stop_y = TRIANGLE_BOUNDS[options.direction]
    side = options.size
    logger.debug(
        "triangle of side %s from (%s, %s) pointing %s",
        side,
        origin.x,
        origin.y,
        options.direction.value,
    )

    hexes: list[Hex] = []
    for x in range(side):
        for y in range(first_y(side, x), stop_y(side, x)):
            hexes.append(hex_factory(origin.x + x, origin.y + y))
    return hexes


def hexagon(
    radius: Any = None,
    start: Any = None,
    *,
    hex_factory: HexFactory,
    is_options: OptionsPredicate = is_object_literal,
) -> list[Hex]:
    """Hexes within ``radius - 1`` steps of ``start``; radius 1 is a single hex."""

    options = normalise_options(HexagonOptions, radius, is_options, radius=radius, start=start)
    center = hex_factory(options.start)
    reach = options.radius - 1
    logger.debug("hexagon of radius %s around (%s, %s)", options.radius, center.x, center.y)

    hexes: list[Hex] = []
    for y in range(-reach, reach + 1):
        for x in range(max(-reach, -y - reach), min(reach, -y + reach) + 1):
            hexes.append(hex_factory(center.x + x, center.y + y))
    return hexes


def rectangle(
    width: Any = None,
    height: Any = None,
    start: Any = None,
    direction: Any = None,
    *,
    hex_factory: HexFactory,
    is_options: OptionsPredicate = is_object_literal,
) -> list[Hex]:
    """Hexes of a ``width`` by ``height`` rectangle (default direction E).

    Pointy grids stagger every other row, flat grids every other column, so
    the result depends on the orientation of the start hex.
    """

    options = normalise_options(
        RectangleOptions,
        width,
        is_options,
        width=width,
        height=height,
        start=start,
        direction=direction,
    )
    origin = hex_factory(options.start)
    primary, secondary, derived = RECTANGLE_AXES[options.direction]
    pointy = origin.is_pointy()
    if pointy:
        outer_stop, inner_stop = options.height, options.width
    else:
        outer_stop, inner_stop = options.width, options.height
    logger.debug(
        "rectangle %sx%s from (%s, %s) towards %s (%s)",
        options.width,
        options.height,
        origin.x,
        origin.y,
        options.direction.value,
        "pointy" if pointy else "flat",
    )

    hexes: list[Hex] = []
    for second in range(outer_stop):
        shift = second // 2
        for first in range(-shift, inner_stop - shift):
            if pointy:
                offset = {primary: first, secondary: second, derived: -first - second}
            else:
                offset = {primary: second, secondary: first, derived: -first - second}
            hexes.append(hex_factory(origin.x + offset["x"], origin.y + offset["y"]))
    return hexes


__all__ = ["hexagon", "normalise_options", "parallelogram", "rectangle", "triangle"]
