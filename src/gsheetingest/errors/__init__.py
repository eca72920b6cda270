"""Public error exports for gsheetingest."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
