"""Request execution and Google API error translation."""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

from googleapiclient.errors import HttpError

from gsheetingest.errors import (
    ApiError,
    GSheetIngestError,
    HttpErrorInfo,
    NetworkError,
    map_http_error,
)

T = TypeVar("T")


def execute(func: Callable[[], T]) -> T:
    """
    Run one API request, translating failures into gsheetingest errors.

    There are no retries: the first failure is raised.
    """
    try:
        return func()
    except GSheetIngestError:
        raise
    except Exception as exc:
        raise map_exception(exc) from exc


def map_exception(exc: Exception) -> GSheetIngestError:
    if isinstance(exc, HttpError):
        return map_http_error(http_error_to_info(exc), cause=exc)

    if isinstance(exc, (OSError, TimeoutError)):
        return NetworkError("Network error", cause=exc)

    return ApiError("Google API error", cause=exc)


def http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except ValueError:
            payload = None

        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        try:
            status_code = int(status_code)
        except (TypeError, ValueError):
            status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
