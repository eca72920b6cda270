import argparse
import os
import unittest

from gsheetingest import AuthInfo, GoogleAPIClient, GoogleDriveProcessService
from gsheetingest.auth import DEFAULT_SCOPES
from gsheetingest.cli import RowDictFactory


def _env(name: str) -> str:
    return os.environ.get(name, "").strip()


class CollectingProcessor:
    def __init__(self) -> None:
        self.objects = None

    def process_domain_gsheet_objects(self, domain_gsheet_objects):
        self.objects = list(domain_gsheet_objects)
        return len(self.objects)


@unittest.skipUnless(
    _env("GSHEETINGEST_TEST_URL")
    and (_env("GSHEETINGEST_SERVICE_ACCOUNT_FILE") or _env("GSHEETINGEST_TOKEN_FILE")),
    "Set GSHEETINGEST_TEST_URL and credentials env vars to run against Google",
)
class TestGoogleDriveIntegration(unittest.TestCase):
    """
    Integration test with real Google Drive and Sheets (read-only).

    Required env vars:
        - GSHEETINGEST_TEST_URL: spreadsheet or folder URL readable by the credentials
        - either GSHEETINGEST_SERVICE_ACCOUNT_FILE: path to a service account key json
        - or GSHEETINGEST_CLIENT_SECRETS + GSHEETINGEST_TOKEN_FILE: OAuth client
          secret json and an already-authorized token json (no prompt is shown)

    Optional:
        - GSHEETINGEST_HEADINGS: comma-separated heading values
    """

    @classmethod
    def setUpClass(cls) -> None:
        cls.url = _env("GSHEETINGEST_TEST_URL")
        service_account_file = _env("GSHEETINGEST_SERVICE_ACCOUNT_FILE")
        if service_account_file:
            cls.auth_info = AuthInfo.service_account(service_account_file)
        else:
            cls.auth_info = AuthInfo.oauth(
                _env("GSHEETINGEST_CLIENT_SECRETS"),
                _env("GSHEETINGEST_TOKEN_FILE"),
            )

        headings_raw = _env("GSHEETINGEST_HEADINGS")
        cls.headings = [h.strip() for h in headings_raw.split(",") if h.strip()]

    def _no_prompt(self, auth_url: str) -> str:
        self.fail(f"Token file must already be authorized; got prompt for {auth_url}")

    def test_read_url_smoke(self) -> None:
        client = GoogleAPIClient()
        client.authenticate_with(self.auth_info, DEFAULT_SCOPES, get_auth_code=self._no_prompt)

        processor = CollectingProcessor()
        service = GoogleDriveProcessService(client)
        count = service.process_google_url(processor, self.url, True, RowDictFactory(self.headings))

        self.assertEqual(count, len(processor.objects))
        for obj in processor.objects:
            self.assertTrue(obj["source_url"].startswith("https://"))
            self.assertFalse(obj["tab"].endswith("_"))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose unittest output",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    unittest.main(verbosity=2 if args.verbose else 1)
