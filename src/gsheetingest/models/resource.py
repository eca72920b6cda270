"""Classified Google resource reference."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResourceKind(str, Enum):
    """Kinds of resource a Google URL can name."""

    SPREADSHEET = "SPREADSHEET"
    FOLDER = "FOLDER"


@dataclass(slots=True, frozen=True)
class ResourceReference:
    """
    A spreadsheet or folder named by a URL.

    Built once by the dispatcher; `resource_id` is never empty.
    """

    kind: ResourceKind
    resource_id: str
    original_url: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ResourceKind):
            raise TypeError("ResourceReference.kind must be a ResourceKind")
        if not isinstance(self.resource_id, str) or not self.resource_id:
            raise ValueError("ResourceReference.resource_id must be a non-empty string")

    @property
    def is_spreadsheet(self) -> bool:
        return self.kind is ResourceKind.SPREADSHEET

    @property
    def is_folder(self) -> bool:
        return self.kind is ResourceKind.FOLDER
