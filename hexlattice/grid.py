"""Grid facade binding the coordinate helpers to one set of capabilities.

Usage:
    grid = Grid.from_settings(size=20, orientation="flat")
    cells = grid.rectangle(8, 6)
    clicked = grid.point_to_hex((112.5, 48.0))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from . import conversions, metrics, shapes
from .config import HexSettings
from .hex import Hex, HexFactory
from .point import Point, to_point
from .utils import is_object_literal


class Grid:
    """Coordinate conversion and shape generation for one kind of hex.

    The hex factory, point conversion and options predicate are injected
    once here and handed to every operation, so none of the helpers rely
    on module-level state.
    """

    def __init__(
        self,
        hex_factory: HexFactory | None = None,
        *,
        settings: HexSettings | None = None,
        point_factory: Callable[[object], Point] = to_point,
        is_options: Callable[[object], bool] = is_object_literal,
    ) -> None:
        if hex_factory is not None and settings is not None:
            raise TypeError("pass either hex_factory or settings, not both")
        self.Hex = hex_factory or HexFactory(settings)
        self._point_factory = point_factory
        self._is_options = is_options

    @classmethod
    def from_settings(cls, settings: HexSettings | None = None, **overrides: Any) -> Grid:
        return cls(HexFactory(settings, **overrides))

    @property
    def settings(self) -> HexSettings:
        return self.Hex.settings

    # ---------------------------------------------------------------------
    # Conversion

    def point_to_hex(self, point: object) -> Hex:
        return conversions.point_to_hex(
            point, hex_factory=self.Hex, point_factory=self._point_factory
        )

    def hex_to_point(self, hex: Hex) -> Point:
        return conversions.hex_to_point(hex)

    def col_size(self) -> float:
        return metrics.col_size(hex_factory=self.Hex)

    def row_size(self) -> float:
        return metrics.row_size(hex_factory=self.Hex)

    # ---------------------------------------------------------------------
    # Shapes

    def parallelogram(
        self, width: Any = None, height: Any = None, start: Any = None, direction: Any = None
    ) -> list[Hex]:
        return shapes.parallelogram(
            width, height, start, direction, hex_factory=self.Hex, is_options=self._is_options
        )

    def triangle(self, size: Any = None, start: Any = None, direction: Any = None) -> list[Hex]:
        return shapes.triangle(
            size, start, direction, hex_factory=self.Hex, is_options=self._is_options
        )

    def hexagon(self, radius: Any = None, start: Any = None) -> list[Hex]:
        return shapes.hexagon(radius, start, hex_factory=self.Hex, is_options=self._is_options)

    def rectangle(
        self, width: Any = None, height: Any = None, start: Any = None, direction: Any = None
    ) -> list[Hex]:
        return shapes.rectangle(
            width, height, start, direction, hex_factory=self.Hex, is_options=self._is_options
        )


__all__ = ["Grid"]
