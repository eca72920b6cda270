"""Rules deciding which files, tabs and rows are ingested."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Sequence


class HandlingPolicy(ABC):
    """Caller-supplied rules applied while traversing folders and reading tabs."""

    @abstractmethod
    def get_column_range_limit(self) -> str:
        """Last column (A1 letters) to read from each tab."""

    @abstractmethod
    def is_gsheet_file_name_ignored(self, full_name: str) -> bool:
        """True if a Drive entry with this name must be skipped."""

    @abstractmethod
    def is_gsheet_tab_name_ignored(self, title: str) -> bool:
        """True if a tab with this title must be skipped."""

    @abstractmethod
    def is_headings_row(self, row: Optional[Sequence[Any]]) -> bool:
        """True if the row looks like the header row."""


class GSuiteHandlingSpecifications(HandlingPolicy):
    """
    Default handling policy.

    - Files named `foo_` or `foo_.xlsx` are private and ignored.
    - Tabs named `foo_` are private and ignored.
    - Columns are read up to ZZ.
    - A row is the header row when every targeted heading value appears in
      it (trimmed, case-sensitive); extra columns are allowed.
    """

    DEFAULT_COLUMN_RANGE_LIMIT: str = "ZZ"

    def __init__(self, targeted_heading_values: Iterable[str] = ()) -> None:
        self._targeted_heading_values = [str(v).strip() for v in targeted_heading_values]

    @property
    def targeted_heading_values(self) -> list[str]:
        return list(self._targeted_heading_values)

    def get_column_range_limit(self) -> str:
        return self.DEFAULT_COLUMN_RANGE_LIMIT

    def is_gsheet_file_name_ignored(self, full_name: str) -> bool:
        # `report.v2_.xlsx` and `foo_.tar.gz` are both private.
        stems = (full_name, os.path.splitext(full_name)[0], full_name.split(".")[0])
        return any(stem.endswith("_") for stem in stems)

    def is_gsheet_tab_name_ignored(self, title: str) -> bool:
        return title.endswith("_")

    def is_headings_row(self, row: Optional[Sequence[Any]]) -> bool:
        if not row:
            return False

        cells = {_normalize_cell(cell) for cell in row}
        return all(value in cells for value in self._targeted_heading_values)


def _normalize_cell(cell: Any) -> Any:
    if isinstance(cell, str):
        return cell.strip()
    return cell


def find_header_row_index(
    rows: Sequence[Sequence[Any]],
    policy: HandlingPolicy,
) -> Optional[int]:
    """Return the index of the first row the policy accepts as header, else None."""
    for index, row in enumerate(rows):
        if policy.is_headings_row(row):
            return index
    return None
