from .a1 import column_range, quote_sheet_title
from .mime import FOLDER_MIME, SPREADSHEET_MIME, is_folder, is_spreadsheet

__all__ = [
    "FOLDER_MIME",
    "SPREADSHEET_MIME",
    "is_folder",
    "is_spreadsheet",
    "quote_sheet_title",
    "column_range",
]
