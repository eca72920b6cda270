"""Raw tab content handed to domain object factories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

Row = list[Any]


@dataclass(slots=True)
class RawSheetRecord:
    """
    The cell values of one retained tab.

    `header_row_index` is the index of the first row the handling policy
    accepted as a header row, or None when no row matched.
    """

    tab_name: str
    source_url: str
    spreadsheet_id: str
    rows: list[Row] = field(default_factory=list)
    header_row_index: Optional[int] = None

    @property
    def has_header(self) -> bool:
        return self.header_row_index is not None

    @property
    def headings(self) -> Optional[Row]:
        """The header row, or None when no header was found."""
        if self.header_row_index is None:
            return None
        return self.rows[self.header_row_index]

    @property
    def data_rows(self) -> list[Row]:
        """Rows after the header row (all rows when no header was found)."""
        if self.header_row_index is None:
            return list(self.rows)
        return self.rows[self.header_row_index + 1 :]
