"""Public handling-policy exports for gsheetingest."""

from __future__ import annotations

from .handling import GSuiteHandlingSpecifications, HandlingPolicy, find_header_row_index

__all__ = [
    "HandlingPolicy",
    "GSuiteHandlingSpecifications",
    "find_header_row_index",
]
