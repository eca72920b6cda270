"""Public model exports for gsheetingest."""

from __future__ import annotations

from .file_info import FileInfo
from .resource import ResourceKind, ResourceReference
from .sheet_record import RawSheetRecord, Row

__all__ = [
    "FileInfo",
    "ResourceKind",
    "ResourceReference",
    "RawSheetRecord",
    "Row",
]
