"""Validated configuration models for hex geometry and grid generation."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import Orientation


class ShapeKind(str, Enum):
    """Shapes the grid generators know how to build."""

    PARALLELOGRAM = "parallelogram"
    TRIANGLE = "triangle"
    HEXAGON = "hexagon"
    RECTANGLE = "rectangle"


class HexSettings(BaseModel):
    """Size and orientation shared by every hex of a grid."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    size: float = Field(default=1.0, gt=0.0)
    orientation: Orientation = Field(default=Orientation.POINTY)

    @field_validator("size")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    @field_validator("orientation", mode="before")
    @classmethod
    def _coerce_orientation(cls, value: object) -> object:
        if isinstance(value, str):
            return Orientation(value)
        return value


class GridConfig(BaseModel):
    """Persisted description of a grid shape and its hex settings."""

    model_config = ConfigDict(extra="forbid")

    hex: HexSettings = Field(default_factory=HexSettings)
    shape: ShapeKind = Field(default=ShapeKind.HEXAGON)
    width: int = Field(default=4, ge=0)
    height: int = Field(default=4, ge=0)
    radius: int = Field(default=3, ge=0)
    side: int = Field(default=4, ge=0)
    direction: str | None = Field(default=None)
    start: tuple[int, int] = Field(default=(0, 0))

    @field_validator("direction", mode="before")
    @classmethod
    def _normalise_direction(cls, value: object) -> str | None:
        if value is None:
            return None
        if isinstance(value, Enum):
            value = value.value
        text = str(value).strip()
        return text or None

    def shape_arguments(self) -> dict[str, Any]:
        """Return the options mapping understood by the configured shape."""

        start = {"x": self.start[0], "y": self.start[1]}
        if self.shape is ShapeKind.HEXAGON:
            return {"radius": self.radius, "start": start}
        if self.shape is ShapeKind.TRIANGLE:
            args: dict[str, Any] = {"size": self.side, "start": start}
        else:
            args = {"width": self.width, "height": self.height, "start": start}
        if self.direction is not None:
            args["direction"] = self.direction
        return args


__all__ = ["GridConfig", "HexSettings", "ShapeKind"]
