from __future__ import annotations

import re

_COLUMN_RE = re.compile(r"^[A-Z]+$")


def quote_sheet_title(title: str) -> str:
    """Quote a tab title for A1 notation ('It''s' style escaping)."""
    escaped = title.replace("'", "''")
    return f"'{escaped}'"


def column_range(title: str, last_column: str) -> str:
    """
    Build an A1 range covering every row of columns A..last_column.

    Example:
        column_range("Products", "ZZ") -> "'Products'!A:ZZ"
    """
    column = last_column.strip().upper()
    if not _COLUMN_RE.match(column):
        raise ValueError(f"Invalid column letter: {last_column!r}")
    return f"{quote_sheet_title(title)}!A:{column}"
