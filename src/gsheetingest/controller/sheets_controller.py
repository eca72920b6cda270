"""Google Sheets API controller (internal use only)."""

from __future__ import annotations

import logging
from typing import Any

from gsheetingest.auth import GoogleAPIClient

from .execution import execute
from .fields import SHEET_TITLE_FIELDS

logger = logging.getLogger(__name__)


class GoogleSheetsController:
    """Read-only Sheets API controller."""

    def __init__(self, api_client: GoogleAPIClient) -> None:
        self._service = api_client.sheets_service

    @classmethod
    def from_service(cls, service: Any) -> "GoogleSheetsController":
        """Create controller from a pre-built Sheets service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._service = service
        return obj

    def get_tab_titles(self, spreadsheet_id: str) -> list[str]:
        """Return the titles of all tabs, in spreadsheet order."""
        req = self._service.spreadsheets().get(
            spreadsheetId=spreadsheet_id,
            fields=SHEET_TITLE_FIELDS,
        )
        data = execute(req.execute)
        titles: list[str] = []
        for sheet in data.get("sheets", []) or []:
            title = (sheet.get("properties") or {}).get("title")
            if isinstance(title, str):
                titles.append(title)
        return titles

    def read_range(self, spreadsheet_id: str, range_a1: str) -> list[list[Any]]:
        """Return the grid of cell values in range_a1 (trailing empty rows/cells omitted)."""
        req = self._service.spreadsheets().values().get(
            spreadsheetId=spreadsheet_id,
            range=range_a1,
        )
        data = execute(req.execute)
        values = data.get("values", []) or []
        logger.debug("Read %d rows from %s in %s", len(values), range_a1, spreadsheet_id)
        return [list(row) for row in values]
