"""GoogleDriveProcessService: turns a spreadsheet or folder URL into domain objects."""

from __future__ import annotations

import logging
from typing import Any, Protocol, Sequence

from gsheetingest.auth import GoogleAPIClient
from gsheetingest.controller import GoogleDriveController, GoogleSheetsController
from gsheetingest.errors import InputError
from gsheetingest.models import RawSheetRecord, ResourceKind, ResourceReference
from gsheetingest.policy import HandlingPolicy
from gsheetingest.reader import (
    GoogleDriveFolderReader,
    GoogleSpreadsheetReader,
    classify,
    spreadsheet_url,
)

logger = logging.getLogger(__name__)


class DomainGSheetObjectFactory(Protocol):
    """Builds caller domain objects from raw tab content."""

    def create_gsuite_handling_specifications(self) -> HandlingPolicy:
        ...

    def create_domain_gsheet_object(self, record: RawSheetRecord, source_url: str) -> Any:
        ...


class GoogleDriveProcessor(Protocol):
    """Consumes every domain object collected from one URL."""

    def process_domain_gsheet_objects(self, domain_gsheet_objects: Sequence[Any]) -> Any:
        ...


class GoogleDriveProcessService:
    """
    Read a Google spreadsheet, or every spreadsheet in a Drive folder, and
    hand the resulting domain objects to a processor.

    Reading is strictly sequential. Any failure aborts the whole run; no
    partial result is handed to the processor.
    """

    def __init__(self, api_client: GoogleAPIClient) -> None:
        self._drive = GoogleDriveController(api_client)
        self._sheets = GoogleSheetsController(api_client)

    @classmethod
    def from_controllers(
        cls,
        drive: GoogleDriveController,
        sheets: GoogleSheetsController,
    ) -> "GoogleDriveProcessService":
        """Create service with injected controllers (useful for tests)."""
        obj = cls.__new__(cls)
        obj._drive = drive
        obj._sheets = sheets
        return obj

    def process_google_url(
        self,
        processor: GoogleDriveProcessor,
        url: str,
        recursive: bool,
        factory: DomainGSheetObjectFactory,
    ) -> Any:
        """
        Classify `url` and process it.

        Raises:
            InputError: if the URL is neither a spreadsheet nor a folder URL.
        """
        return self.process_reference(processor, classify(url), recursive, factory)

    def process_reference(
        self,
        processor: GoogleDriveProcessor,
        reference: ResourceReference,
        recursive: bool,
        factory: DomainGSheetObjectFactory,
    ) -> Any:
        if reference.kind is ResourceKind.SPREADSHEET:
            objects = self._collect_spreadsheet(reference, factory)
        elif reference.kind is ResourceKind.FOLDER:
            objects = self._collect_folder(reference, recursive, factory)
        else:
            raise InputError(
                "URL is not either Google Spreadsheet nor Google Drive Folder",
                details={"url": reference.original_url},
            )

        logger.info("Processing %d domain object(s)", len(objects))
        return processor.process_domain_gsheet_objects(objects)

    # ----------------------------
    # Internals
    # ----------------------------
    def _collect_spreadsheet(
        self,
        reference: ResourceReference,
        factory: DomainGSheetObjectFactory,
    ) -> list[Any]:
        reader = GoogleSpreadsheetReader(self._sheets)
        records = reader.get_spreadsheet_data(
            reference.resource_id,
            factory.create_gsuite_handling_specifications(),
            source_url=reference.original_url,
        )
        return [
            factory.create_domain_gsheet_object(record, reference.original_url)
            for record in records
        ]

    def _collect_folder(
        self,
        reference: ResourceReference,
        recursive: bool,
        factory: DomainGSheetObjectFactory,
    ) -> list[Any]:
        folder_reader = GoogleDriveFolderReader(self._drive)
        spreadsheet_ids = folder_reader.list_spreadsheets_in_folder(
            reference.resource_id,
            recursive,
            factory.create_gsuite_handling_specifications(),
        )
        logger.info(
            "Found %d spreadsheet(s) in folder %s",
            len(spreadsheet_ids),
            reference.resource_id,
        )

        reader = GoogleSpreadsheetReader(self._sheets)
        objects: list[Any] = []
        for spreadsheet_id in spreadsheet_ids:
            sheet_url = spreadsheet_url(spreadsheet_id)
            records = reader.get_spreadsheet_data(
                spreadsheet_id,
                factory.create_gsuite_handling_specifications(),
                source_url=sheet_url,
            )
            for record in records:
                objects.append(factory.create_domain_gsheet_object(record, sheet_url))

        return objects
