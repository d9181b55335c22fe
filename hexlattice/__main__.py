"""Command line entry point: generate a shape and print it."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from .config import GridConfig, HexSettings, ShapeKind
from .config_store import load_config
from .grid import Grid
from .render import hex_table, render_hexes

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hexlattice", description="Generate hex grid shapes.")
    ap.add_argument(
        "shape",
        nargs="?",
        help=(
            "Shape to generate: "
            + ", ".join(kind.value for kind in ShapeKind)
            + " (omit to use the configured shape)"
        ),
    )
    ap.add_argument(
        "dimensions",
        nargs="*",
        type=int,
        help="width height (parallelogram/rectangle), side (triangle) or radius (hexagon)",
    )
    ap.add_argument("--start", nargs=2, type=int, metavar=("X", "Y"), help="Start hex")
    ap.add_argument("--direction", help="Shape direction, e.g. SE, N, up, E")
    ap.add_argument("--orientation", choices=["pointy", "flat"], help="Hex orientation")
    ap.add_argument("--size", type=float, help="Hex size in pixels")
    ap.add_argument("--config", type=Path, help="Grid config JSON to start from")
    ap.add_argument("--table", action="store_true", help="Print coordinates instead of a map")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def resolve_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> GridConfig:
    """Merge command line overrides into the loaded configuration."""

    base = load_config(args.config) if args.config else GridConfig()
    updates: dict[str, object] = {}
    dims = list(args.dimensions)
    if args.shape:
        try:
            updates["shape"] = ShapeKind(args.shape)
        except ValueError:
            # no shape named, the first positional is already a dimension
            try:
                dims.insert(0, int(args.shape))
            except ValueError:
                names = ", ".join(kind.value for kind in ShapeKind)
                parser.error(f"invalid shape {args.shape!r} (choose from {names})")
    shape = updates.get("shape", base.shape)
    if dims:
        if shape in (ShapeKind.PARALLELOGRAM, ShapeKind.RECTANGLE):
            if len(dims) != 2:
                parser.error(f"{shape.value} takes two dimensions: width height")
            updates["width"], updates["height"] = dims
        else:
            if len(dims) != 1:
                parser.error(f"{shape.value} takes one dimension")
            updates["radius" if shape is ShapeKind.HEXAGON else "side"] = dims[0]
    if args.start:
        updates["start"] = tuple(args.start)
    if args.direction:
        updates["direction"] = args.direction

    hex_updates: dict[str, object] = {}
    if args.orientation:
        hex_updates["orientation"] = args.orientation
    if args.size is not None:
        if args.size <= 0:
            parser.error("--size must be positive")
        hex_updates["size"] = args.size
    if hex_updates:
        updates["hex"] = HexSettings.model_validate({**base.hex.model_dump(), **hex_updates})
    return base.model_copy(update=updates)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = resolve_config(args, parser)
    grid = Grid.from_settings(config.hex)
    generate = getattr(grid, config.shape.value)
    hexes = generate(config.shape_arguments())
    logger.debug("generated %d hexes", len(hexes))

    title = f"{config.shape.value} ({config.hex.orientation.value}, {len(hexes)} hexes)"
    console = Console()
    if args.table:
        console.print(hex_table(hexes, title=title))
    else:
        console.print(render_hexes(hexes, title=title, start=grid.Hex(*config.start)))
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
