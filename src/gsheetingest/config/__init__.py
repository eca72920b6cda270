"""Public config exports for gsheetingest."""

from __future__ import annotations

from .discovery import DEFAULT_CONFIG_FILENAME, find_config_file, load_config
from .settings import GApiAccessSettings, select_auth_info

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "find_config_file",
    "load_config",
    "GApiAccessSettings",
    "select_auth_info",
]
