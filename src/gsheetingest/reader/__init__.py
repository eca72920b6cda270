"""Public reader exports for gsheetingest."""

from __future__ import annotations

from .dispatcher import (
    classify,
    is_folder,
    is_spreadsheet,
    parse_folder_id_from_url,
    parse_spreadsheet_id_from_url,
    spreadsheet_url,
)
from .folder_reader import GoogleDriveFolderReader
from .spreadsheet_reader import GoogleSpreadsheetReader

__all__ = [
    "classify",
    "is_folder",
    "is_spreadsheet",
    "parse_folder_id_from_url",
    "parse_spreadsheet_id_from_url",
    "spreadsheet_url",
    "GoogleDriveFolderReader",
    "GoogleSpreadsheetReader",
]
