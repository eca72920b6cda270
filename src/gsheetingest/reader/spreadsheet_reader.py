"""Read the retained tabs of a spreadsheet."""

from __future__ import annotations

import logging
from typing import Optional

from gsheetingest.controller import GoogleSheetsController
from gsheetingest.models import RawSheetRecord
from gsheetingest.policy import HandlingPolicy, find_header_row_index
from gsheetingest.util.a1 import column_range

from .dispatcher import spreadsheet_url

logger = logging.getLogger(__name__)


class GoogleSpreadsheetReader:
    """Turns a spreadsheet into one RawSheetRecord per retained tab."""

    def __init__(self, sheets: GoogleSheetsController) -> None:
        self._sheets = sheets

    def get_spreadsheet_data(
        self,
        spreadsheet_id: str,
        policy: HandlingPolicy,
        source_url: Optional[str] = None,
    ) -> list[RawSheetRecord]:
        url = source_url or spreadsheet_url(spreadsheet_id)
        records: list[RawSheetRecord] = []

        for title in self._sheets.get_tab_titles(spreadsheet_id):
            if policy.is_gsheet_tab_name_ignored(title):
                logger.debug("Ignoring tab `%s` (private by name)", title)
                continue

            rows = self._sheets.read_range(
                spreadsheet_id,
                column_range(title, policy.get_column_range_limit()),
            )
            header_row_index = find_header_row_index(rows, policy)
            if header_row_index is None:
                logger.debug("No header row found in tab `%s`", title)

            records.append(
                RawSheetRecord(
                    tab_name=title,
                    source_url=url,
                    spreadsheet_id=spreadsheet_id,
                    rows=rows,
                    header_row_index=header_row_index,
                )
            )

        logger.info("Read %d tab(s) from spreadsheet %s", len(records), spreadsheet_id)
        return records
