"""Exception hierarchy and HTTP error mapping for gsheetingest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GSheetIngestError(Exception):
    """
    Base exception for gsheetingest.

    Attributes:
        details: Optional structured information (e.g., file path, HTTP status).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigError(GSheetIngestError):
    """Raised when a credential, token or config file is missing or malformed."""


class AuthError(GSheetIngestError):
    """Raised when Google declines an auth code exchange or a token refresh."""


class ProtocolError(GSheetIngestError):
    """Raised when the auth code callback returns something other than a non-empty string."""


class InputError(GSheetIngestError):
    """Raised when a URL names neither a spreadsheet nor a folder, or has no ID."""


class InvalidStateError(GSheetIngestError):
    """Raised when the library is used in an invalid state (e.g., not authenticated)."""


class InvalidArgumentError(GSheetIngestError):
    """Raised when request arguments are invalid (HTTP 400, unknown service, etc.)."""


class PermissionError(GSheetIngestError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class NotFoundError(GSheetIngestError):
    """Raised when a Drive or Sheets resource is not found (HTTP 404)."""


class RateLimitError(GSheetIngestError):
    """Raised on HTTP 429. Requests are not retried."""


class QuotaExceededError(GSheetIngestError):
    """Raised on HTTP 403 when Google reports a quota or usage-limit reason."""


class NetworkError(GSheetIngestError):
    """Raised when the connection fails or times out."""


class ApiError(GSheetIngestError):
    """Raised for any other API failure (5xx, unlisted 4xx, service build errors)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Status, reason and message pulled out of a Google API error response."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_STATUS_ERRORS: dict[int, type[GSheetIngestError]] = {
    400: InvalidArgumentError,
    401: AuthError,
    403: PermissionError,
    404: NotFoundError,
    429: RateLimitError,
}

_QUOTA_REASONS = ("quota", "ratelimitexceeded", "dailylimitexceeded", "usagelimits")


def _is_quota_reason(reason: str | None) -> bool:
    lowered = (reason or "").lower()
    return any(marker in lowered for marker in _QUOTA_REASONS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GSheetIngestError:
    """
    Turn an HTTP error into the matching gsheetingest exception.

    400 InvalidArgumentError, 401 AuthError, 403 PermissionError (or
    QuotaExceededError for quota reasons), 404 NotFoundError,
    429 RateLimitError, anything else ApiError.
    """
    details: dict[str, Any] = {"status_code": info.status_code, "reason": info.reason}
    details.update(info.details or {})

    error_cls = _STATUS_ERRORS.get(info.status_code, ApiError)
    if error_cls is PermissionError and _is_quota_reason(info.reason):
        error_cls = QuotaExceededError

    return error_cls(
        info.message or f"HTTP error {info.status_code}",
        details=details,
        cause=cause,
    )
