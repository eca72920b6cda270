"""Classify Google URLs as spreadsheets or Drive folders."""

from __future__ import annotations

import re
from typing import Optional

from gsheetingest.errors import InputError
from gsheetingest.models import ResourceKind, ResourceReference

# See https://developers.google.com/sheets/api/guides/concepts
_SPREADSHEET_ID_RE = re.compile(r"/spreadsheets/d/([a-zA-Z0-9-_]+)")
_FOLDER_ID_RE = re.compile(r"/folders/([a-zA-Z0-9-_]+)/?")

SPREADSHEET_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/"


def is_spreadsheet(url: str) -> bool:
    return "/spreadsheets/" in url


def is_folder(url: str) -> bool:
    return "/folders/" in url


def parse_spreadsheet_id_from_url(url: str) -> Optional[str]:
    match = _SPREADSHEET_ID_RE.search(url)
    return match.group(1) if match else None


def parse_folder_id_from_url(url: str) -> Optional[str]:
    match = _FOLDER_ID_RE.search(url)
    return match.group(1) if match else None


def spreadsheet_url(spreadsheet_id: str) -> str:
    """Canonical URL of a spreadsheet, used as the source URL of folder entries."""
    return SPREADSHEET_URL_TEMPLATE.format(spreadsheet_id=spreadsheet_id)


def classify(url: str) -> ResourceReference:
    """
    Classify a URL and extract the resource ID.

    Spreadsheet URLs are recognised before folder URLs, so a URL containing
    both path segments is a spreadsheet.

    Raises:
        InputError: if the URL is neither kind or the ID cannot be parsed.
    """
    if is_spreadsheet(url):
        spreadsheet_id = parse_spreadsheet_id_from_url(url)
        if not spreadsheet_id:
            raise InputError(
                f"Can't parse spreadsheet ID from the URL [{url}]",
                details={"url": url},
            )
        return ResourceReference(ResourceKind.SPREADSHEET, spreadsheet_id, url)

    if is_folder(url):
        folder_id = parse_folder_id_from_url(url)
        if not folder_id:
            raise InputError(
                f"Can't parse folder ID from the URL [{url}]",
                details={"url": url},
            )
        return ResourceReference(ResourceKind.FOLDER, folder_id, url)

    raise InputError(
        "URL is not either Google Spreadsheet nor Google Drive Folder",
        details={"url": url},
    )
