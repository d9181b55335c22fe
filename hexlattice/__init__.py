"""Hexagonal grid coordinates: pixel conversion and shape generation."""

from .config import GridConfig, HexSettings, ShapeKind
from .conversions import hex_to_point, point_to_hex, points_to_cubes
from .coords import Cube, Orientation
from .directions import ParallelogramDirection, RectangleDirection, TriangleDirection
from .grid import Grid
from .hex import Hex, HexFactory, cube_round
from .metrics import col_size, row_size
from .options import HexagonOptions, ParallelogramOptions, RectangleOptions, TriangleOptions
from .point import Point, to_point
from .shapes import hexagon, parallelogram, rectangle, triangle
from .utils import is_object_literal

__version__ = "0.3.0"

__all__ = [
    "Cube",
    "Grid",
    "GridConfig",
    "Hex",
    "HexFactory",
    "HexSettings",
    "HexagonOptions",
    "Orientation",
    "ParallelogramDirection",
    "ParallelogramOptions",
    "Point",
    "RectangleDirection",
    "RectangleOptions",
    "ShapeKind",
    "TriangleDirection",
    "TriangleOptions",
    "col_size",
    "cube_round",
    "hex_to_point",
    "hexagon",
    "is_object_literal",
    "parallelogram",
    "point_to_hex",
    "points_to_cubes",
    "rectangle",
    "row_size",
    "to_point",
    "triangle",
]
