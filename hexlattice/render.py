"""Text rendering of hex collections for the terminal."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .hex import Hex

FILLED = "[bold green]##[/]"
START = "[bold yellow]@@[/]"
EMPTY = "[dim]..[/]"


def _offset_cell(hex: Hex) -> tuple[int, int]:
    """Map a hex to (line, column) of an odd-offset text layout.

    Pointy grids print one row per line.  Flat grids print one column per
    line so the stagger still shows as an indent.
    """

    x, y = int(hex.x), int(hex.y)
    if hex.is_pointy():
        return y, x + (y - (y & 1)) // 2
    return x, y + (x - (x & 1)) // 2


def _render_lines(hexes: Sequence[Hex], start: Hex | None) -> list[str]:
    cells = {_offset_cell(hex): hex for hex in hexes}
    start_cell = _offset_cell(start) if start is not None else None
    lines_idx = [line for line, _ in cells]
    cols_idx = [col for _, col in cells]
    lines: list[str] = []
    for line in range(min(lines_idx), max(lines_idx) + 1):
        prefix = " " if line % 2 else ""
        row: list[str] = []
        for col in range(min(cols_idx), max(cols_idx) + 1):
            if (line, col) == start_cell and start_cell in cells:
                row.append(START)
            elif (line, col) in cells:
                row.append(FILLED)
            else:
                row.append(EMPTY)
        lines.append(prefix + " ".join(row))
    return lines


def render_hexes(
    hexes: Iterable[Hex], *, title: str = "hexes", start: Hex | None = None
) -> RenderableType:
    hexes = list(hexes)
    if not hexes:
        body = Text("(no hexes)")
    else:
        body = Text.from_markup("\n".join(_render_lines(hexes, start)))
    return Panel(body, title=title, border_style="cyan")


def hex_table(hexes: Iterable[Hex], *, title: str = "hexes") -> Table:
    table = Table(title=title)
    for column in ("x", "y", "z", "px", "py"):
        table.add_column(column, justify="right")
    for hex in hexes:
        cube = hex.coordinates()
        point = hex.to_point()
        table.add_row(
            f"{cube.x:g}", f"{cube.y:g}", f"{cube.z:g}", f"{point.x:.2f}", f"{point.y:.2f}"
        )
    return table


__all__ = ["hex_table", "render_hexes"]
