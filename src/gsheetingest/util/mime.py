from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"
SPREADSHEET_MIME: str = "application/vnd.google-apps.spreadsheet"


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_spreadsheet(mime_type: str) -> bool:
    """
    Returns True if the MIME type is a native Google Sheets document.

    Uploaded .xlsx files keep their Office MIME type and are not readable
    through the Sheets values API, so they do not count.
    """
    return mime_type == SPREADSHEET_MIME
