"""gsheetingest public API."""

from __future__ import annotations

from gsheetingest.auth import (
    DEFAULT_SCOPES,
    AuthInfo,
    GoogleAPIClient,
    authenticate_interactively,
)
from gsheetingest.config import GApiAccessSettings, find_config_file, load_config
from gsheetingest.errors import (
    ApiError,
    AuthError,
    ConfigError,
    GSheetIngestError,
    HttpErrorInfo,
    InputError,
    InvalidArgumentError,
    InvalidStateError,
    NetworkError,
    NotFoundError,
    PermissionError,
    ProtocolError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)
from gsheetingest.manager import (
    DomainGSheetObjectFactory,
    GoogleDriveProcessor,
    GoogleDriveProcessService,
)
from gsheetingest.models import FileInfo, RawSheetRecord, ResourceKind, ResourceReference
from gsheetingest.policy import GSuiteHandlingSpecifications, HandlingPolicy
from gsheetingest.reader import classify

__all__ = [
    # High-level
    "GoogleDriveProcessService",
    "DomainGSheetObjectFactory",
    "GoogleDriveProcessor",
    "classify",
    # Auth
    "AuthInfo",
    "GoogleAPIClient",
    "DEFAULT_SCOPES",
    "authenticate_interactively",
    # Config
    "GApiAccessSettings",
    "find_config_file",
    "load_config",
    # Policy / Models
    "HandlingPolicy",
    "GSuiteHandlingSpecifications",
    "FileInfo",
    "RawSheetRecord",
    "ResourceKind",
    "ResourceReference",
    # Errors
    "GSheetIngestError",
    "ConfigError",
    "AuthError",
    "ProtocolError",
    "InputError",
    "InvalidStateError",
    "InvalidArgumentError",
    "PermissionError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
