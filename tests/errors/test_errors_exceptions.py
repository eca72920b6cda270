import unittest

from gsheetingest.errors.exceptions import (
    ApiError,
    AuthError,
    ConfigError,
    GSheetIngestError,
    HttpErrorInfo,
    InputError,
    InvalidArgumentError,
    NotFoundError,
    PermissionError,
    ProtocolError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = GSheetIngestError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_taxonomy_shares_base(self) -> None:
        for cls in (ConfigError, AuthError, ProtocolError, InputError):
            self.assertTrue(issubclass(cls, GSheetIngestError))
        self.assertEqual(ConfigError("x").details, {})

    def test_status_codes_map_to_typed_errors(self) -> None:
        expected = {
            400: InvalidArgumentError,
            401: AuthError,
            403: PermissionError,
            404: NotFoundError,
            429: RateLimitError,
            500: ApiError,
            503: ApiError,
        }
        for status, cls in expected.items():
            with self.subTest(status=status):
                err = map_http_error(HttpErrorInfo(status_code=status, message="boom"))
                self.assertIs(type(err), cls)
                self.assertEqual(str(err), "boom")
                self.assertEqual(err.details["status_code"], status)

    def test_quota_reasons_on_403(self) -> None:
        for reason in ("quotaExceeded", "userRateLimitExceeded", "dailyLimitExceeded"):
            with self.subTest(reason=reason):
                err = map_http_error(HttpErrorInfo(status_code=403, reason=reason))
                self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(HttpErrorInfo(status_code=403, reason="insufficientPermissions"))
        self.assertIsInstance(err, PermissionError)

    def test_quota_reason_only_matters_for_403(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=429, reason="rateLimitExceeded"))
        self.assertIsInstance(err, RateLimitError)

    def test_default_message_and_extra_details(self) -> None:
        cause = ValueError("raw")
        err = map_http_error(
            HttpErrorInfo(status_code=418, details={"url": "https://x"}),
            cause=cause,
        )
        self.assertEqual(str(err), "HTTP error 418")
        self.assertEqual(err.details, {"status_code": 418, "reason": None, "url": "https://x"})
        self.assertIs(err.cause, cause)


if __name__ == "__main__":
    unittest.main()
