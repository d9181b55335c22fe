from __future__ import annotations

from pathlib import Path

import pytest

from hexlattice import GridConfig, HexSettings, ShapeKind
from hexlattice.__main__ import build_parser, main, resolve_config
from hexlattice.config_store import save_config


def _resolve(argv: list[str]) -> GridConfig:
    parser = build_parser()
    return resolve_config(parser.parse_args(argv), parser)


def test_resolve_config_applies_overrides():
    config = _resolve(
        ["rectangle", "5", "3", "--start", "1", "-2", "--direction", "NW", "--orientation", "flat"]
    )
    assert config.shape is ShapeKind.RECTANGLE
    assert (config.width, config.height) == (5, 3)
    assert config.start == (1, -2)
    assert config.direction == "NW"
    assert config.hex == HexSettings(orientation="flat")


def test_resolve_config_reads_config_file(tmp_path: Path) -> None:
    path = save_config(
        GridConfig(shape=ShapeKind.TRIANGLE, side=6, hex=HexSettings(size=4)), tmp_path / "g.json"
    )
    config = _resolve(["--config", str(path), "--size", "9"])
    assert config.shape is ShapeKind.TRIANGLE
    assert config.side == 6
    assert config.hex.size == 9.0


def test_wrong_dimension_count_is_an_argument_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["rectangle", "3"])
    assert excinfo.value.code == 2
    assert "width height" in capsys.readouterr().err


def test_main_prints_table(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hexagon", "2", "--table"]) == 0
    out = capsys.readouterr().out
    assert "hexagon" in out
    assert "7 hexes" in out


def test_main_prints_map(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["parallelogram", "3", "2", "--direction", "N"]) == 0
    out = capsys.readouterr().out
    assert "##" in out
    assert "@@" in out


def test_render_empty_collection(capsys: pytest.CaptureFixture[str]) -> None:
    from rich.console import Console

    from hexlattice.render import render_hexes

    Console().print(render_hexes([], title="nothing"))
    assert "(no hexes)" in capsys.readouterr().out


def test_bare_dimension_keeps_configured_shape():
    config = _resolve(["3"])
    assert config.shape is ShapeKind.HEXAGON
    assert config.radius == 3


def test_bare_dimensions_apply_to_configured_shape(tmp_path: Path) -> None:
    path = save_config(GridConfig(shape=ShapeKind.RECTANGLE), tmp_path / "g.json")
    config = _resolve(["4", "2", "--config", str(path)])
    assert config.shape is ShapeKind.RECTANGLE
    assert (config.width, config.height) == (4, 2)


def test_unknown_shape_is_an_argument_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["circle"])
    assert excinfo.value.code == 2
    assert "invalid shape 'circle'" in capsys.readouterr().err
