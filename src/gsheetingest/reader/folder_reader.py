"""List the spreadsheets inside a Drive folder."""

from __future__ import annotations

import logging

from gsheetingest.controller import GoogleDriveController
from gsheetingest.policy import HandlingPolicy
from gsheetingest.util.mime import is_folder, is_spreadsheet

logger = logging.getLogger(__name__)


class GoogleDriveFolderReader:
    """Finds spreadsheet IDs under a folder, optionally descending into sub-folders."""

    def __init__(self, drive: GoogleDriveController) -> None:
        self._drive = drive

    def list_spreadsheets_in_folder(
        self,
        folder_id: str,
        recursive: bool,
        policy: HandlingPolicy,
    ) -> list[str]:
        """
        Return the IDs of the spreadsheets in a folder, in listing order.

        Entries whose name the policy ignores are dropped, folders included.
        Sub-folders are descended into in place when `recursive` is set and
        skipped otherwise. Drive folder trees are acyclic, so there is no
        cycle check.
        """
        spreadsheet_ids: list[str] = []

        for entry in self._drive.list_children(folder_id):
            if policy.is_gsheet_file_name_ignored(entry.name):
                logger.debug("Ignoring `%s` (private by name)", entry.name)
                continue

            if is_folder(entry.mime_type):
                if recursive:
                    logger.debug("Descending into folder `%s`", entry.name)
                    spreadsheet_ids.extend(
                        self.list_spreadsheets_in_folder(entry.file_id, recursive, policy)
                    )
                continue

            if is_spreadsheet(entry.mime_type):
                spreadsheet_ids.append(entry.file_id)

        return spreadsheet_ids
