"""Read and write JSON credential and token files."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any

from gsheetingest.errors import ConfigError

logger = logging.getLogger(__name__)


def load_credential_json(path: str) -> Any:
    """
    Read JSON data from a credential or token file.

    Raises:
        ConfigError: if the file is missing, not a file, unreadable or not valid JSON.
    """
    details = {"file": path}

    if not os.path.exists(path):
        raise ConfigError(f"The `{path}` file doesn't exist", details=details)
    if not os.path.isfile(path):
        raise ConfigError(f"`{path}` is not a file", details=details)

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as exc:
        raise ConfigError(
            f"The `{path}` file is not readable",
            details=details,
            cause=exc,
        ) from exc

    try:
        data = json.loads(content)
    except ValueError as exc:
        raise ConfigError(
            f"The `{path}` file content is not a valid JSON",
            details=details,
            cause=exc,
        ) from exc

    if data is None:
        raise ConfigError(f"The `{path}` file content is not a valid JSON", details=details)

    return data


def save_credential_json(path: str, data: Any) -> None:
    """
    Write JSON data to a file, replacing it as a whole.

    The content goes to a temporary file in the same directory first and is
    then renamed over the target, so readers never see a partial file.

    Raises:
        ConfigError: if the file cannot be written.
    """
    content = json.dumps(data, ensure_ascii=False, indent=4)

    target_dir = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        os.makedirs(target_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=target_dir,
            prefix=".tmp-",
            suffix=".json",
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as exc:
        raise ConfigError(
            f"Failed to save the `{path}` file",
            details={"file": path},
            cause=exc,
        ) from exc
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)

    logger.debug("Saved credential JSON to %s", path)
