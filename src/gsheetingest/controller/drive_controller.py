"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import logging
from typing import Any, Optional

from gsheetingest.auth import GoogleAPIClient
from gsheetingest.models import FileInfo

from .execution import execute
from .fields import LIST_FIELDS

logger = logging.getLogger(__name__)


class GoogleDriveController:
    """
    Read-only Drive API controller.

    Notes:
        - The Drive `service` object is NOT exposed.
        - Shared drives are always included.
    """

    def __init__(self, api_client: GoogleAPIClient) -> None:
        self._service = api_client.drive_service

    @classmethod
    def from_service(cls, service: Any) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._service = service
        return obj

    def list_children(self, parent_id: str) -> list[FileInfo]:
        """List the non-trashed direct children of a folder, all pages, in API order."""
        query = _build_parent_query(parent_id)
        entries: list[FileInfo] = []
        page_token: Optional[str] = None

        while True:
            request = self._service.files().list(
                q=query,
                fields=LIST_FIELDS,
                pageToken=page_token,
                supportsAllDrives=True,
                includeItemsFromAllDrives=True,
            )
            page = execute(request.execute)
            entries.extend(_to_file_info(item) for item in page.get("files", []))

            page_token = page.get("nextPageToken")
            if not page_token:
                logger.debug("Folder %s has %d entries", parent_id, len(entries))
                return entries


def _build_parent_query(parent_id: str) -> str:
    escaped = parent_id.replace("\\", "\\\\").replace("'", "\\'")
    return f"('{escaped}' in parents) and trashed=false"


def _str_field(item: dict[str, Any], key: str) -> str:
    value = item.get(key)
    return value if isinstance(value, str) else ""


def _to_file_info(item: dict[str, Any]) -> FileInfo:
    return FileInfo(
        file_id=_str_field(item, "id"),
        name=_str_field(item, "name"),
        mime_type=_str_field(item, "mimeType"),
    )
