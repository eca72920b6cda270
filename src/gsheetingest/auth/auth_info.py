"""Authentication information for gsheetingest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

OAUTH = "oauth"
SERVICE_ACCOUNT = "service_account"

_REQUIRED_KEYS: dict[str, tuple[str, ...]] = {
    OAUTH: ("client_secrets_file",),
    SERVICE_ACCOUNT: ("service_account_file",),
}


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    kind = "oauth"
        data must include:
            - client_secrets_file
        data may include:
            - token_file (token is neither loaded nor saved without it)

    kind = "service_account"
        data must include:
            - service_account_file
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind not in _REQUIRED_KEYS:
            raise ValueError(
                f"AuthInfo.kind must be one of {sorted(_REQUIRED_KEYS)}, got {self.kind!r}"
            )

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        for key in _REQUIRED_KEYS[self.kind]:
            value = self.data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")

    @classmethod
    def oauth(cls, client_secrets_file: str, token_file: Optional[str] = None) -> "AuthInfo":
        data: dict[str, Any] = {"client_secrets_file": client_secrets_file}
        if token_file:
            data["token_file"] = token_file
        return cls(kind=OAUTH, data=data)

    @classmethod
    def service_account(cls, service_account_file: str) -> "AuthInfo":
        return cls(kind=SERVICE_ACCOUNT, data={"service_account_file": service_account_file})

    @property
    def is_service_account(self) -> bool:
        return self.kind == SERVICE_ACCOUNT

    @property
    def client_secrets_file(self) -> str:
        """Path to OAuth client secrets JSON."""
        return str(self.data["client_secrets_file"])

    @property
    def token_file(self) -> Optional[str]:
        """Path to OAuth access token JSON, if any."""
        value = self.data.get("token_file")
        return str(value) if value else None

    @property
    def service_account_file(self) -> str:
        """Path to service account key JSON."""
        return str(self.data["service_account_file"])
