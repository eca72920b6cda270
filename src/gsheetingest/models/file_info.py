"""Data model for Drive folder entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class FileInfo:
    """A Drive item as returned by a folder listing."""

    file_id: str
    name: str
    mime_type: str
