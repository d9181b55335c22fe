"""Typed option models the shape generators normalise their arguments into."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .directions import (
    DEFAULT_PARALLELOGRAM_DIRECTION,
    DEFAULT_RECTANGLE_DIRECTION,
    DEFAULT_TRIANGLE_DIRECTION,
    ParallelogramDirection,
    RectangleDirection,
    TriangleDirection,
    resolve_direction,
)


def coerce_extent(value: object) -> int:
    """Turn a loose dimension into the number of steps a ``< stop`` loop takes.

    Non-integral numbers round up, anything that is not a number counts as
    zero.  Negative extents are kept; they simply produce no hexes.
    """

    if isinstance(value, bool) or not isinstance(value, Real):
        return 0
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        return 0
    return math.ceil(number)


class ShapeOptions(BaseModel):
    """Common base for shape options; ``start`` is anything a hex factory accepts."""

    model_config = ConfigDict(extra="ignore", frozen=True, arbitrary_types_allowed=True)

    start: Any = None


class ParallelogramOptions(ShapeOptions):
    width: int = 0
    height: int = 0
    direction: ParallelogramDirection = Field(default=DEFAULT_PARALLELOGRAM_DIRECTION)

    @field_validator("width", "height", mode="before")
    @classmethod
    def _extent(cls, value: object) -> int:
        return coerce_extent(value)

    @field_validator("direction", mode="before")
    @classmethod
    def _direction(cls, value: object) -> ParallelogramDirection:
        return resolve_direction(value, ParallelogramDirection, DEFAULT_PARALLELOGRAM_DIRECTION)


class TriangleOptions(ShapeOptions):
    size: int = 0
    direction: TriangleDirection = Field(default=DEFAULT_TRIANGLE_DIRECTION)

    @field_validator("size", mode="before")
    @classmethod
    def _extent(cls, value: object) -> int:
        return coerce_extent(value)

    @field_validator("direction", mode="before")
    @classmethod
    def _direction(cls, value: object) -> TriangleDirection:
        return resolve_direction(value, TriangleDirection, DEFAULT_TRIANGLE_DIRECTION)


class HexagonOptions(ShapeOptions):
    radius: int = 0

    @field_validator("radius", mode="before")
    @classmethod
    def _extent(cls, value: object) -> int:
        return coerce_extent(value)


class RectangleOptions(ShapeOptions):
    width: int = 0
    height: int = 0
    direction: RectangleDirection = Field(default=DEFAULT_RECTANGLE_DIRECTION)

    @field_validator("width", "height", mode="before")
    @classmethod
    def _extent(cls, value: object) -> int:
        return coerce_extent(value)

    @field_validator("direction", mode="before")
    @classmethod
    def _direction(cls, value: object) -> RectangleDirection:
        return resolve_direction(value, RectangleDirection, DEFAULT_RECTANGLE_DIRECTION)


__all__ = [
    "HexagonOptions",
    "ParallelogramOptions",
    "RectangleOptions",
    "ShapeOptions",
    "TriangleOptions",
    "coerce_extent",
]
