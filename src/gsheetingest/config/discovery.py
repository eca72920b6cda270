"""Locate and parse the YAML project config file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from gsheetingest.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "scapesettings.yml"


def find_config_file(
    filename: str,
    start_dir: str | os.PathLike[str],
    max_depth: Optional[int] = None,
) -> Path:
    """
    Find `filename` in `start_dir` or the closest ancestor directory.

    The search stops at the filesystem root, after `max_depth` ancestors
    (None means no limit), or at a directory that cannot be inspected.

    Raises:
        ConfigError: if the file is not found.
    """
    directory = Path(start_dir).resolve()
    depth = 0

    while True:
        candidate = directory / filename
        try:
            if candidate.is_file():
                logger.debug("Found config file %s", candidate)
                return candidate
        except PermissionError:
            break

        if directory.parent == directory:
            break
        if max_depth is not None and depth >= max_depth:
            break

        directory = directory.parent
        depth += 1

    raise ConfigError(
        "Configuration file not found.",
        details={"filename": filename, "start_dir": str(start_dir)},
    )


def load_config(path: str | os.PathLike[str]) -> dict[str, Any]:
    """
    Parse a YAML config file into a mapping (an empty file gives {}).

    Raises:
        ConfigError: if the file is unreadable, not YAML, or not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(
            f"The `{path}` config file is not readable",
            details={"file": str(path)},
            cause=exc,
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"The `{path}` config file is not valid YAML",
            details={"file": str(path)},
            cause=exc,
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"The `{path}` config file must contain a mapping",
            details={"file": str(path)},
        )
    return data
