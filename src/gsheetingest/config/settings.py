"""Google API access settings resolved from config files and options."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from gsheetingest.auth import AuthInfo
from gsheetingest.errors import ConfigError

CONFIG_NAMESPACE = "gApiAccess"

OAUTH_SECRET_FILE_KEY = "gApiOAuthSecretFile"
ACCESS_TOKEN_FILE_KEY = "gApiAccessTokenFile"
SERVICE_ACCOUNT_FILE_KEY = "gApiServiceAccountCredentialsFile"


@dataclass(slots=True, frozen=True)
class GApiAccessSettings:
    """Paths of the files used to authenticate to Google."""

    oauth_secret_file: Optional[str] = None
    access_token_file: Optional[str] = None
    service_account_credentials_file: Optional[str] = None

    @classmethod
    def from_config(
        cls,
        data: Mapping[str, Any],
        base_dir: str | os.PathLike[str],
    ) -> "GApiAccessSettings":
        """
        Read the `gApiAccess` section of a parsed config file.

        Relative paths are resolved against `base_dir` (the directory of the
        config file).
        """
        section = data.get(CONFIG_NAMESPACE) or {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"`{CONFIG_NAMESPACE}` must be a mapping in the config file")

        return cls(
            oauth_secret_file=_resolve(section.get(OAUTH_SECRET_FILE_KEY), base_dir),
            access_token_file=_resolve(section.get(ACCESS_TOKEN_FILE_KEY), base_dir),
            service_account_credentials_file=_resolve(
                section.get(SERVICE_ACCOUNT_FILE_KEY), base_dir
            ),
        )

    def merged_with(self, overrides: "GApiAccessSettings") -> "GApiAccessSettings":
        """Return settings where every value set in `overrides` wins."""
        return replace(
            self,
            oauth_secret_file=overrides.oauth_secret_file or self.oauth_secret_file,
            access_token_file=overrides.access_token_file or self.access_token_file,
            service_account_credentials_file=(
                overrides.service_account_credentials_file
                or self.service_account_credentials_file
            ),
        )

    def to_auth_info(self, prefer_service_key: bool = False) -> AuthInfo:
        return select_auth_info(self, prefer_service_key)


def select_auth_info(settings: GApiAccessSettings, prefer_service_key: bool = False) -> AuthInfo:
    """
    Choose the authentication mode.

    The service account key is used when it is configured and either
    preferred or the only option; otherwise OAuth is used.

    Raises:
        ConfigError: if neither mode is configured.
    """
    if settings.service_account_credentials_file and (
        prefer_service_key or not settings.oauth_secret_file
    ):
        return AuthInfo.service_account(settings.service_account_credentials_file)

    if settings.oauth_secret_file:
        return AuthInfo.oauth(settings.oauth_secret_file, settings.access_token_file)

    raise ConfigError(
        "Neither service key nor OAuth credentials were found in the "
        "command options or the config file."
    )


def _resolve(value: Any, base_dir: str | os.PathLike[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ConfigError(f"Config file paths must be strings, got {value!r}")

    path = os.path.expanduser(value)
    if not os.path.isabs(path):
        path = os.path.join(os.fspath(base_dir), path)
    return os.path.normpath(path)
