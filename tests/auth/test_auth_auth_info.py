import unittest

from gsheetingest.auth import AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_valid_oauth(self) -> None:
        info = AuthInfo(
            kind="oauth",
            data={
                "client_secrets_file": "/tmp/client_secrets.json",
                "token_file": "/tmp/token.json",
            },
        )
        self.assertEqual(info.kind, "oauth")
        self.assertFalse(info.is_service_account)
        self.assertEqual(info.client_secrets_file, "/tmp/client_secrets.json")
        self.assertEqual(info.token_file, "/tmp/token.json")

    def test_auth_info_oauth_token_file_is_optional(self) -> None:
        info = AuthInfo.oauth("/tmp/client_secrets.json")
        self.assertIsNone(info.token_file)

    def test_auth_info_valid_service_account(self) -> None:
        info = AuthInfo.service_account("/tmp/key.json")
        self.assertTrue(info.is_service_account)
        self.assertEqual(info.service_account_file, "/tmp/key.json")

    def test_auth_info_invalid_kind(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(kind="api_key", data={})

    def test_auth_info_missing_keys(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(kind="oauth", data={"token_file": "x"})

        with self.assertRaises(ValueError):
            AuthInfo(kind="service_account", data={"service_account_file": "  "})


if __name__ == "__main__":
    unittest.main()
