"""Pixel spacing between adjacent columns and rows of hexes."""

from __future__ import annotations

from .hex import HexFactory


def col_size(*, hex_factory: HexFactory) -> float:
    reference = hex_factory()
    if reference.is_pointy():
        return reference.width()
    return reference.width() * 0.75


def row_size(*, hex_factory: HexFactory) -> float:
    reference = hex_factory()
    if reference.is_pointy():
        return reference.height() * 0.75
    return reference.height()


__all__ = ["col_size", "row_size"]
