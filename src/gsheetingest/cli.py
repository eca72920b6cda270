"""`gsheetingest` command line: read a spreadsheet or Drive folder URL."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, TextIO

from gsheetingest.auth import DEFAULT_SCOPES, GoogleAPIClient, authenticate_interactively
from gsheetingest.auth.console import write_error
from gsheetingest.config import (
    DEFAULT_CONFIG_FILENAME,
    GApiAccessSettings,
    find_config_file,
    load_config,
)
from gsheetingest.errors import AuthError, ConfigError, GSheetIngestError
from gsheetingest.manager import (
    DomainGSheetObjectFactory,
    GoogleDriveProcessor,
    GoogleDriveProcessService,
)
from gsheetingest.models import RawSheetRecord
from gsheetingest.policy import GSuiteHandlingSpecifications, HandlingPolicy

logger = logging.getLogger(__name__)

PROG_NAME = "gsheetingest"
DESCRIPTION = "Read a Google spreadsheet, or every spreadsheet in a Drive folder."


@dataclass(frozen=True)
class _Option:
    flags: tuple[str, ...]
    kwargs: dict[str, Any] = field(default_factory=dict)


# Every option the command accepts, in help order.
OPTIONS: tuple[_Option, ...] = (
    _Option(("driveUrl",), {"help": "URL of a Google spreadsheet or Drive folder"}),
    _Option(
        ("-r", "--recursive"),
        {"action": "store_true", "help": "Also read spreadsheets in sub-folders"},
    ),
    _Option(
        ("--gApiOAuthSecretFile",),
        {"default": None, "help": "Path to the Google API OAuth client secret JSON file"},
    ),
    _Option(
        ("--gApiAccessTokenFile",),
        {"default": None, "help": "Path to the Google API access token JSON file"},
    ),
    _Option(
        ("--gApiServiceAccountCredentialsFile",),
        {"default": None, "help": "Path to a Google service account key JSON file"},
    ),
    _Option(
        ("--forceAuthenticate",),
        {"action": "store_true", "help": "Ask for a new auth code even if a token exists"},
    ),
    _Option(
        ("--preferServiceKey",),
        {"action": "store_true", "help": "Use the service account key when both are given"},
    ),
    _Option(
        ("-c", "--configFilename"),
        {"default": DEFAULT_CONFIG_FILENAME, "help": "Name of the configuration file"},
    ),
    _Option(
        ("--heading",),
        {
            "action": "append",
            "default": [],
            "metavar": "VALUE",
            "help": "A heading value the header row must contain (repeatable)",
        },
    ),
    _Option(
        ("-v", "--verbose"),
        {"action": "count", "default": 0, "help": "-v for progress, -vv for details"},
    ),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG_NAME, description=DESCRIPTION)
    for option in OPTIONS:
        parser.add_argument(*option.flags, **option.kwargs)
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def resolve_access_settings(
    args: argparse.Namespace,
    cwd: str,
) -> GApiAccessSettings:
    """
    Combine the config file (if one is found from `cwd` upwards) with the
    command options; options win. Option paths are relative to `cwd`.

    Raises:
        ConfigError: if a config file is found but cannot be parsed.
    """
    overrides = GApiAccessSettings(
        oauth_secret_file=_option_path(args.gApiOAuthSecretFile, cwd),
        access_token_file=_option_path(args.gApiAccessTokenFile, cwd),
        service_account_credentials_file=_option_path(
            args.gApiServiceAccountCredentialsFile, cwd
        ),
    )

    try:
        config_path = find_config_file(args.configFilename, cwd)
    except ConfigError:
        logger.debug("No `%s` config file found from %s", args.configFilename, cwd)
        return overrides

    logger.debug("Using config file %s", config_path)
    from_file = GApiAccessSettings.from_config(load_config(config_path), config_path.parent)
    return from_file.merged_with(overrides)


def run(
    args: argparse.Namespace,
    factory: DomainGSheetObjectFactory,
    processor: GoogleDriveProcessor,
    *,
    cwd: Optional[str] = None,
    client: Optional[GoogleAPIClient] = None,
    scopes: Sequence[str] = DEFAULT_SCOPES,
    input_func: Callable[[str], str] = input,
    stream: Optional[TextIO] = None,
) -> int:
    """
    Authenticate and process `args.driveUrl`.

    Returns:
        0 on success, 1 when credentials are missing or authentication fails.
        Errors raised while reading or processing propagate.
    """
    out = stream if stream is not None else sys.stderr
    work_dir = cwd or os.getcwd()
    api_client = client or GoogleAPIClient()

    try:
        settings = resolve_access_settings(args, work_dir)
        auth_info = settings.to_auth_info(prefer_service_key=args.preferServiceKey)
    except ConfigError as exc:
        write_error(out, str(exc))
        return 1

    logger.info("Authenticating with %s", "service key" if auth_info.is_service_account else "OAuth key")

    if auth_info.is_service_account:
        try:
            api_client.authenticate_service_account(auth_info.service_account_file, scopes)
        except (AuthError, ConfigError) as exc:
            write_error(out, f"Failed to authenticate to Google: {exc}")
            return 1
    elif not authenticate_interactively(
        api_client,
        auth_info.client_secrets_file,
        auth_info.token_file,
        scopes,
        force_authenticate=args.forceAuthenticate,
        input_func=input_func,
        stream=out,
    ):
        return 1

    service = GoogleDriveProcessService(api_client)
    service.process_google_url(processor, args.driveUrl, args.recursive, factory)
    return 0


class RowDictFactory:
    """Builds one JSON-friendly dict per tab; rows become dicts keyed by heading."""

    def __init__(self, targeted_heading_values: Sequence[str] = ()) -> None:
        self._targeted_heading_values = list(targeted_heading_values)

    def create_gsuite_handling_specifications(self) -> HandlingPolicy:
        return GSuiteHandlingSpecifications(self._targeted_heading_values)

    def create_domain_gsheet_object(self, record: RawSheetRecord, source_url: str) -> dict[str, Any]:
        headings = record.headings
        if headings is None:
            rows: list[Any] = record.data_rows
        else:
            keys = [str(h).strip() for h in headings]
            rows = [dict(zip(keys, row)) for row in record.data_rows]

        return {
            "source_url": source_url,
            "tab": record.tab_name,
            "headings": headings,
            "rows": rows,
        }


class JsonDumpProcessor:
    """Writes all collected objects as one JSON array."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def process_domain_gsheet_objects(self, domain_gsheet_objects: Sequence[Any]) -> int:
        out = self._stream if self._stream is not None else sys.stdout
        json.dump(list(domain_gsheet_objects), out, ensure_ascii=False, indent=2)
        out.write("\n")
        return len(domain_gsheet_objects)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        return run(args, RowDictFactory(args.heading), JsonDumpProcessor())
    except GSheetIngestError as exc:
        logger.debug("Processing failed", exc_info=True)
        write_error(sys.stderr, str(exc))
        return 1


def _option_path(value: Optional[str], cwd: str) -> Optional[str]:
    if not value:
        return None
    path = os.path.expanduser(value)
    if not os.path.isabs(path):
        path = os.path.join(cwd, path)
    return os.path.normpath(path)


if __name__ == "__main__":  # pragma: no cover - manual execution guard
    raise SystemExit(main())
