"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexlattice

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _load_pyproject() -> dict:
    with PYPROJECT.open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    pyproject = _load_pyproject()
    poetry = pyproject["tool"]["poetry"]

    assert poetry["name"] == "hexlattice"
    assert poetry["version"] == hexlattice.__version__
    assert poetry["scripts"]["hexlattice"] == "hexlattice.__main__:main"

    dependencies = poetry["dependencies"]
    for dependency in ("pydantic", "numpy", "rich", "platformdirs"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
