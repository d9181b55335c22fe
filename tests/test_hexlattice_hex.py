from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from hexlattice import Cube, Hex, HexFactory, HexSettings, Orientation, cube_round


def test_cube_invariant():
    c = Cube(1, -2, 1)
    assert c.x + c.y + c.z == 0
    with pytest.raises(ValueError):
        Cube(1, 1, 1)


def test_cube_addition_keeps_invariant():
    total = Cube(1, -2, 1) + Cube(3, 0, -3)
    assert total == Cube(4, -2, -2)


def test_factory_defaults_to_origin():
    factory = HexFactory()
    origin = factory()
    assert origin.coordinates() == Cube(0, 0, 0)
    assert origin.is_pointy()
    assert origin.size == 1.0


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((3,), (3, 3, -6)),
        ((1, 2), (1, 2, -3)),
        ((1, 2, -3), (1, 2, -3)),
        (({"x": 1, "y": -4},), (1, -4, 3)),
        (({"x": 1, "z": 2},), (1, -3, 2)),
        (({"y": 2, "z": 2},), (-4, 2, 2)),
        ((Cube(2, -1, -1),), (2, -1, -1)),
    ],
)
def test_factory_call_forms(args: tuple, expected: tuple[int, int, int]) -> None:
    hex = HexFactory()(*args)
    assert hex.coordinates().as_tuple() == expected


def test_factory_copies_hex_into_its_own_settings():
    pointy = HexFactory()(2, 5)
    flat = HexFactory(orientation="flat")(pointy)
    assert flat.coordinates() == pointy.coordinates()
    assert flat.is_flat()


def test_factory_rejects_invalid_input():
    factory = HexFactory()
    with pytest.raises(ValueError):
        factory(1, 2, 0)
    with pytest.raises(ValueError):
        factory({"x": 1, "y": 1, "z": 1})
    with pytest.raises(TypeError):
        factory("north")
    with pytest.raises(TypeError):
        factory({"x": 1})


def test_settings_validation():
    assert HexSettings(orientation="FLAT").orientation is Orientation.FLAT
    with pytest.raises(ValidationError):
        HexSettings(size=0)
    with pytest.raises(ValidationError):
        HexSettings(orientation="round")
    with pytest.raises(ValidationError):
        HexSettings(radius=3)


def test_factory_overrides_settings():
    factory = HexFactory(HexSettings(size=3), orientation="flat")
    assert factory.settings == HexSettings(size=3, orientation=Orientation.FLAT)


@pytest.mark.parametrize(
    ("orientation", "width", "height"),
    [
        ("pointy", math.sqrt(3) * 2, 4.0),
        ("flat", 4.0, math.sqrt(3) * 2),
    ],
)
def test_hex_dimensions(orientation: str, width: float, height: float) -> None:
    hex = HexFactory(size=2, orientation=orientation)()
    assert hex.width() == pytest.approx(width)
    assert hex.height() == pytest.approx(height)


def test_to_point_pointy():
    factory = HexFactory()
    east = factory(1, 0).to_point()
    south_east = factory(0, 1).to_point()
    assert (east.x, east.y) == pytest.approx((math.sqrt(3), 0.0))
    assert (south_east.x, south_east.y) == pytest.approx((math.sqrt(3) / 2, 1.5))


def test_to_point_flat():
    factory = HexFactory(size=2, orientation="flat")
    p = factory(1, 0).to_point()
    assert (p.x, p.y) == pytest.approx((3.0, math.sqrt(3)))


def test_hex_add_is_cube_addition():
    factory = HexFactory()
    moved = factory(1, 2).add(Cube(-1, 0, 1))
    assert moved.coordinates() == Cube(0, 2, -2)
    assert moved == Hex(0, 2)


@pytest.mark.parametrize(
    ("fractional", "expected"),
    [
        ((0.2, 0.2, -0.4), (0, 0, 0)),
        ((0.4, 0.3, -0.7), (1, 0, -1)),
        ((0.244, 0.667, -0.911), (0, 1, -1)),
        ((-1.6, 0.9, 0.7), (-2, 1, 1)),
        # tie on x and y: y is recomputed
        ((0.5, -0.5, 0.0), (1, -1, 0)),
    ],
)
def test_cube_round(fractional: tuple[float, float, float], expected: tuple[int, int, int]) -> None:
    rounded = cube_round(*fractional)
    assert rounded == expected
    assert sum(rounded) == 0


def test_factory_round_returns_lattice_hex():
    factory = HexFactory(size=5)
    rounded = factory.round(factory(2.7, -1.2))
    assert rounded.coordinates() == Cube(3, -1, -2)
    assert rounded.size == 5.0
