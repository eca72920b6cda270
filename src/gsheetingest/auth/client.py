"""Authenticated Google API client for gsheetingest."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Sequence
from urllib.parse import parse_qs, urlparse

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2 import service_account
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from gsheetingest.errors import (
    ApiError,
    AuthError,
    ConfigError,
    InvalidArgumentError,
    InvalidStateError,
    ProtocolError,
)

from .auth_info import AuthInfo
from .credential_store import load_credential_json, save_credential_json

logger = logging.getLogger(__name__)

AuthCodeGetter = Callable[[str], str]

DRIVE_READONLY_SCOPE = "https://www.googleapis.com/auth/drive.readonly"
SPREADSHEETS_READONLY_SCOPE = "https://www.googleapis.com/auth/spreadsheets.readonly"
DEFAULT_SCOPES: tuple[str, ...] = (DRIVE_READONLY_SCOPE, SPREADSHEETS_READONLY_SCOPE)

# After consent the browser is sent here; the auth code is in the query string.
LOOPBACK_REDIRECT_URI = "http://localhost"
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"

_EXPIRY_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Services this client can build, with their API versions.
SERVICE_VERSIONS: dict[str, str] = {
    "drive": "v3",
    "sheets": "v4",
}


class GoogleAPIClient:
    """
    Owns the Google credentials and builds API service objects from them.

    One instance lives for one command invocation. Authenticate first with
    `authenticate`, `authenticate_service_account` or `authenticate_with`,
    then use `drive_service` / `sheets_service`.
    """

    def __init__(self, credentials: Any = None) -> None:
        self._credentials = credentials
        self._services: dict[str, Any] = {}

    @property
    def credentials(self) -> Any:
        """The live google-auth credentials, or None before authentication."""
        return self._credentials

    @property
    def is_authenticated(self) -> bool:
        return self._credentials is not None

    # ----------------------------
    # Authentication
    # ----------------------------
    def authenticate(
        self,
        client_secret_file: str,
        access_token_file: Optional[str],
        scopes: Sequence[str],
        get_auth_code: AuthCodeGetter,
        force_authenticate: bool = False,
    ) -> None:
        """
        Authenticate with OAuth, asking the user for an auth code when needed.

        Args:
            client_secret_file: Path to the API client secret JSON file.
            access_token_file: Path to the access token JSON file. Optional;
                the file may not exist yet.
            scopes: The required OAuth scopes.
            get_auth_code: Takes the authorization URL (the user must open it
                in a browser) and returns the auth code Google showed.
            force_authenticate: Ask for a new auth code even if the access
                token file exists.

        Raises:
            ConfigError: if the secret or token file is missing or malformed.
            ProtocolError: if get_auth_code returns a non-string or empty string.
            AuthError: if Google declines the auth code or the token refresh.
        """
        use_scopes = _validate_scopes(scopes)

        logger.debug("Getting the Google API client secret from the `%s` file", client_secret_file)
        client_config = load_credential_json(client_secret_file)
        client_fields = _client_fields(client_config, client_secret_file)

        if (
            access_token_file is not None
            and not force_authenticate
            and os.path.isfile(access_token_file)
        ):
            logger.debug(
                "Getting the last Google API access token from the `%s` file",
                access_token_file,
            )
            token = load_credential_json(access_token_file)
            creds = _credentials_from_token(token, client_fields, use_scopes, access_token_file)
        else:
            creds = self._exchange_auth_code(client_config, use_scopes, get_auth_code)
            logger.info("Authenticated successfully")

            if access_token_file is not None:
                logger.debug(
                    "Saving the access token to the `%s` file, so subsequent "
                    "executions will not prompt for authorization",
                    access_token_file,
                )
                save_credential_json(access_token_file, _credentials_to_dict(creds))

        if creds.expired:
            logger.debug("The access token is expired; refreshing the token")
            _refresh(creds)

            if access_token_file is not None:
                logger.debug(
                    "Saving the refreshed access token to the `%s` file",
                    access_token_file,
                )
                save_credential_json(access_token_file, _credentials_to_dict(creds))

        self._set_credentials(creds)
        logger.info("The Google authentication is completed")

    def authenticate_service_account(
        self,
        service_account_file: str,
        scopes: Sequence[str],
    ) -> None:
        """
        Authenticate with a service account key; no token file is involved.

        Raises:
            ConfigError: if the key file is missing or malformed.
        """
        use_scopes = _validate_scopes(scopes)

        logger.debug(
            "Getting the Google API service account key from the `%s` file",
            service_account_file,
        )
        info = load_credential_json(service_account_file)
        if not isinstance(info, dict):
            raise ConfigError(
                f"The `{service_account_file}` file is not a service account key",
                details={"file": service_account_file},
            )

        try:
            creds = service_account.Credentials.from_service_account_info(
                info,
                scopes=use_scopes,
            )
        except ValueError as exc:
            raise ConfigError(
                f"The `{service_account_file}` file is not a valid service account key",
                details={"file": service_account_file},
                cause=exc,
            ) from exc

        self._set_credentials(creds)
        logger.info("The Google service account authentication is completed")

    def authenticate_with(
        self,
        auth_info: AuthInfo,
        scopes: Sequence[str],
        get_auth_code: Optional[AuthCodeGetter] = None,
        force_authenticate: bool = False,
    ) -> None:
        """Authenticate using whichever mode `auth_info` selects."""
        if auth_info.is_service_account:
            self.authenticate_service_account(auth_info.service_account_file, scopes)
            return

        if get_auth_code is None:
            raise InvalidArgumentError("OAuth authentication requires a get_auth_code callback")

        self.authenticate(
            auth_info.client_secrets_file,
            auth_info.token_file,
            scopes,
            get_auth_code,
            force_authenticate=force_authenticate,
        )

    # ----------------------------
    # Services
    # ----------------------------
    def service(self, name: str) -> Any:
        """
        Return the API service resource for a known service name.

        Raises:
            InvalidArgumentError: if the service is not one of SERVICE_VERSIONS.
            InvalidStateError: if the client is not authenticated.
        """
        version = SERVICE_VERSIONS.get(name)
        if version is None:
            raise InvalidArgumentError(
                f"The `{name}` Google service doesn't exist",
                details={"service": name, "known_services": sorted(SERVICE_VERSIONS)},
            )

        if self._credentials is None:
            raise InvalidStateError("The client is not authenticated. Call authenticate() first.")

        if name not in self._services:
            try:
                self._services[name] = build(
                    name,
                    version,
                    credentials=self._credentials,
                    cache_discovery=False,
                )
            except Exception as exc:
                raise ApiError(
                    f"Failed to build the `{name}` Google service",
                    details={"service": name, "version": version},
                    cause=exc,
                ) from exc

        return self._services[name]

    @property
    def drive_service(self) -> Any:
        return self.service("drive")

    @property
    def sheets_service(self) -> Any:
        return self.service("sheets")

    # ----------------------------
    # Internals
    # ----------------------------
    def _set_credentials(self, creds: Any) -> None:
        self._credentials = creds
        self._services.clear()

    def _exchange_auth_code(
        self,
        client_config: dict[str, Any],
        scopes: list[str],
        get_auth_code: AuthCodeGetter,
    ) -> Credentials:
        try:
            flow = InstalledAppFlow.from_client_config(
                client_config,
                scopes=scopes,
                redirect_uri=LOOPBACK_REDIRECT_URI,
            )
        except ValueError as exc:
            raise ConfigError("The client secret is not usable for OAuth", cause=exc) from exc

        auth_url, _ = flow.authorization_url(access_type="offline", prompt="consent")
        auth_code = _auth_code_from_response(get_auth_code(auth_url))

        logger.debug("Sending the authentication code to Google")
        try:
            token = flow.fetch_token(code=auth_code)
        except OAuth2Error as exc:
            raise AuthError(
                f"Google has declined the auth code: {exc.description or exc.error}",
                details={"error": exc.error},
                cause=exc,
            ) from exc

        error = _token_error(token)
        if error is not None:
            raise AuthError(f"Google has declined the auth code: {error}", details={"error": error})

        return flow.credentials


def _auth_code_from_response(response: Any) -> str:
    """
    Accept either the bare auth code or the whole redirected loopback URL
    (`http://localhost/?code=...&scope=...`) pasted by the user.

    Raises:
        ProtocolError: for a non-string, an empty string or a URL without a code.
        AuthError: if the redirected URL carries an `error` (consent denied).
    """
    if not isinstance(response, str) or response.strip() == "":
        raise ProtocolError(
            "The get_auth_code function has returned a non-string or an empty string"
        )

    value = response.strip()
    if not value.startswith(("http://", "https://")):
        return value

    query = parse_qs(urlparse(value).query)
    if query.get("error"):
        error = query["error"][0]
        raise AuthError(f"Google has declined the authorization: {error}", details={"error": error})

    codes = query.get("code")
    if not codes or not codes[0]:
        raise ProtocolError("The redirected URL does not contain an auth code")
    return codes[0]


def _validate_scopes(scopes: Sequence[str]) -> list[str]:
    if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
        raise InvalidArgumentError("scopes must be a non-empty sequence of strings")
    return list(scopes)


def _client_fields(client_config: Any, path: str) -> dict[str, Any]:
    """Extract client_id / client_secret / token_uri from a client secret JSON."""
    section = None
    if isinstance(client_config, dict):
        section = client_config.get("installed") or client_config.get("web")

    if not isinstance(section, dict):
        raise ConfigError(
            f"The `{path}` file is not an OAuth client secret (no `installed` or `web` section)",
            details={"file": path},
        )

    fields = {
        key: section[key]
        for key in ("client_id", "client_secret", "token_uri")
        if key in section
    }
    return fields


def _normalize_token(token: dict[str, Any]) -> dict[str, Any]:
    """
    Accept raw OAuth token responses as well as google-auth's to_json() format.

    Raw responses carry `access_token`, `expires_in` and optionally `created`
    (epoch seconds) instead of `token` and `expiry`.
    """
    info = dict(token)
    if "token" not in info and "access_token" in info:
        info["token"] = info.pop("access_token")

    created = info.pop("created", None)
    expires_in = info.pop("expires_in", None)
    if "expiry" not in info and isinstance(created, (int, float)) and isinstance(expires_in, (int, float)):
        expiry = datetime.fromtimestamp(created + expires_in, tz=timezone.utc)
        info["expiry"] = expiry.strftime(_EXPIRY_FORMAT)

    return info


def _parse_expiry(value: Any, path: str) -> Optional[datetime]:
    """Parse a saved expiry into the naive UTC datetime google-auth compares against."""
    if value is None or value == "":
        return None

    try:
        return datetime.strptime(str(value).rstrip("Z").split(".")[0], _EXPIRY_FORMAT)
    except ValueError as exc:
        raise ConfigError(
            f"The `{path}` file has an unreadable token expiry: {value!r}",
            details={"file": path},
            cause=exc,
        ) from exc


def _credentials_from_token(
    token: Any,
    client_fields: dict[str, Any],
    scopes: list[str],
    path: str,
) -> Credentials:
    """
    Build OAuth credentials from a saved token.

    Only the access token is required. Without a refresh token the
    credentials work until they expire; refreshing them then fails with
    AuthError.
    """
    if not isinstance(token, dict):
        raise ConfigError(
            f"The `{path}` file is not an access token",
            details={"file": path},
        )

    info = dict(client_fields)
    info.update(_normalize_token(token))

    access_token = info.get("token")
    if not isinstance(access_token, str) or not access_token:
        raise ConfigError(
            f"The `{path}` file does not hold an access token",
            details={"file": path},
        )

    return Credentials(
        token=access_token,
        refresh_token=info.get("refresh_token") or None,
        token_uri=info.get("token_uri") or DEFAULT_TOKEN_URI,
        client_id=info.get("client_id"),
        client_secret=info.get("client_secret"),
        scopes=scopes,
        expiry=_parse_expiry(info.get("expiry"), path),
    )


def _credentials_to_dict(creds: Credentials) -> dict[str, Any]:
    return json.loads(creds.to_json())


def _token_error(token: Any) -> Optional[str]:
    if not isinstance(token, dict):
        return None
    if token.get("error_description"):
        return str(token["error_description"])
    if token.get("error"):
        return str(token["error"])
    return None


def _refresh(creds: Credentials) -> None:
    try:
        creds.refresh(Request())
    except RefreshError as exc:
        raise AuthError(
            f"Google has declined refreshing the token: {exc}",
            cause=exc,
        ) from exc
