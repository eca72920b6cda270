"""Field definitions for Google Drive and Sheets API responses."""

from __future__ import annotations

FILE_FIELDS: str = "id,name,mimeType"

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"

SHEET_TITLE_FIELDS: str = "sheets.properties.title"
