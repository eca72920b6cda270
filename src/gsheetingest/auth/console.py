"""Interactive (console) OAuth authentication."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from gsheetingest.errors import AuthError, ConfigError, ProtocolError

from .client import GoogleAPIClient

logger = logging.getLogger(__name__)


def prompt_auth_code(
    auth_url: str,
    *,
    input_func: Callable[[str], str] = input,
    stream: Optional[TextIO] = None,
) -> str:
    """
    Print the authorization URL and read back what the user pastes: the
    address the browser was redirected to after consent, or just its `code`.
    """
    out = stream if stream is not None else sys.stdout
    print("Open the following URL in a browser and allow access:", file=out)
    print("", file=out)
    print(auth_url, file=out)
    print("", file=out)
    print(
        "The browser then opens an http://localhost address that fails to load.\n"
        "Copy that whole address (or its `code` parameter) and paste it below.",
        file=out,
    )
    out.flush()

    auth_code = input_func("Redirected URL or auth code: ").strip()
    if not auth_code:
        raise ProtocolError("The auth code must not be empty")
    return auth_code


def format_error_block(message: str) -> str:
    """Format a message as a console error block."""
    lines = [f"[ERROR] {line}" if i == 0 else f"        {line}"
             for i, line in enumerate(message.splitlines() or [""])]
    return "\n".join(["", *lines, ""])


def write_error(stream: TextIO, message: str) -> None:
    print(format_error_block(message), file=stream)


def authenticate_interactively(
    client: GoogleAPIClient,
    client_secret_file: str,
    access_token_file: Optional[str],
    scopes: Sequence[str],
    force_authenticate: bool = False,
    *,
    input_func: Callable[[str], str] = input,
    stream: Optional[TextIO] = None,
) -> bool:
    """
    Authenticate `client` with OAuth, prompting on the console for the code.

    Returns:
        True on success; False (after printing the error) when the secret or
        token file is unusable or Google declines the authentication.
    """
    out = stream if stream is not None else sys.stderr

    def get_auth_code(auth_url: str) -> str:
        return prompt_auth_code(auth_url, input_func=input_func, stream=out)

    try:
        client.authenticate(
            client_secret_file,
            access_token_file,
            scopes,
            get_auth_code,
            force_authenticate=force_authenticate,
        )
    except (AuthError, ConfigError) as exc:
        logger.debug("Interactive authentication failed", exc_info=True)
        write_error(out, f"Failed to authenticate to Google: {exc}")
        return False

    return True
