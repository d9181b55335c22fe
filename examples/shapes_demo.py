from rich.console import Console

from hexlattice import Grid
from hexlattice.render import render_hexes

grid = Grid.from_settings(size=24, orientation="pointy")
start = grid.Hex(0, 0)

shapes = {
    "parallelogram 4x3 N": grid.parallelogram(4, 3, start, "N"),
    "triangle 4 up": grid.triangle(4, start, "up"),
    "hexagon 3": grid.hexagon(3, start),
    "rectangle 5x4": grid.rectangle({"width": 5, "height": 4}),
}


if __name__ == "__main__":
    console = Console()
    for title, hexes in shapes.items():
        console.print(render_hexes(hexes, title=title, start=start))
    clicked = grid.point_to_hex((60.0, 35.0))
    print("hex under (60, 35):", clicked.coordinates())
    print("column spacing:", grid.col_size(), "row spacing:", grid.row_size())
