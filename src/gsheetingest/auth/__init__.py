"""Public auth exports for gsheetingest."""

from __future__ import annotations

from .auth_info import AuthInfo
from .client import DEFAULT_SCOPES, SERVICE_VERSIONS, GoogleAPIClient
from .console import authenticate_interactively, prompt_auth_code
from .credential_store import load_credential_json, save_credential_json

__all__ = [
    "AuthInfo",
    "GoogleAPIClient",
    "DEFAULT_SCOPES",
    "SERVICE_VERSIONS",
    "authenticate_interactively",
    "prompt_auth_code",
    "load_credential_json",
    "save_credential_json",
]
