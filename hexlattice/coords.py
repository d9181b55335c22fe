from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Cube:
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise ValueError("For cube coords, x + y + z must be 0")

    def __add__(self, other: Cube) -> Cube:
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, factor: int) -> Cube:
        return Cube(self.x * factor, self.y * factor, self.z * factor)

    def as_tuple(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z


class Orientation(str, Enum):
    POINTY = "pointy"
    FLAT = "flat"

    @classmethod
    def _missing_(cls, value: object) -> Orientation | None:
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


ORIGIN = Cube(0, 0, 0)
