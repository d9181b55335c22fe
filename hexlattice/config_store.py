"""Helpers for loading and saving a :class:`~hexlattice.config.GridConfig`.

The configuration lives in a per-user directory determined via
``platformdirs.user_config_dir``, falling back to a relative ``./config``
folder if that directory cannot be created.  Files are written atomically
(temporary file, then rename) so an interrupted save never leaves a
truncated file behind.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .config import GridConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "grid.json"


def default_config_path() -> Path:
    """Return the path used to persist the grid configuration.

    The parent directory is created if needed.
    """
    try:
        base = Path(user_config_dir("hexlattice"))
        base.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("falling back to ./config for grid settings: %s", exc)
        base = Path("config")
        base.mkdir(parents=True, exist_ok=True)
    return base / CONFIG_FILENAME


def load_config(path: Path | None = None) -> GridConfig:
    """Load the configuration, returning defaults when it is missing or invalid."""

    path = path or default_config_path()
    if not path.exists():
        logger.debug("no grid config at %s, using defaults", path)
        return GridConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GridConfig.model_validate(data)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable grid config %s: %s", path, exc)
        return GridConfig()


def save_config(config: GridConfig, path: Path | None = None) -> Path:
    """Persist ``config`` and return the path written."""

    path = path or default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(path.suffix + ".tmp")
    temp_path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    temp_path.replace(path)
    logger.debug("saved grid config to %s", path)
    return path


__all__ = ["CONFIG_FILENAME", "default_config_path", "load_config", "save_config"]
