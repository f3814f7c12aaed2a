import unittest

from drivetree.errors.exceptions import (
    ApiError,
    AuthError,
    DriveTreeError,
    FolderLoadError,
    HttpErrorInfo,
    InvalidArgumentError,
    MetadataUnavailableError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = DriveTreeError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_details_default_to_empty_dict(self) -> None:
        self.assertEqual(DriveTreeError("msg").details, {})

    def test_folder_load_error_is_metadata_unavailable(self) -> None:
        self.assertTrue(issubclass(FolderLoadError, MetadataUnavailableError))

    def test_map_http_error_basic(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=404, message="not found"))
        self.assertIsInstance(err, NotFoundError)

        err = map_http_error(HttpErrorInfo(status_code=400, message="bad req"))
        self.assertIsInstance(err, InvalidArgumentError)

        err = map_http_error(HttpErrorInfo(status_code=429, message="rate"))
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(HttpErrorInfo(status_code=401, message="auth"))
        self.assertIsInstance(err, AuthError)
        self.assertEqual(err.details["status_code"], 401)

    def test_map_http_error_403_variants(self) -> None:
        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="quotaExceeded", message="quota")
        )
        self.assertIsInstance(err, QuotaExceededError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="userRateLimitExceeded", message="slow")
        )
        self.assertIsInstance(err, RateLimitError)

        err = map_http_error(
            HttpErrorInfo(status_code=403, reason="insufficientPermissions", message="x")
        )
        self.assertIsInstance(err, PermissionError)

    def test_map_http_error_5xx_and_other_are_api_error(self) -> None:
        self.assertIsInstance(
            map_http_error(HttpErrorInfo(status_code=503, message="unavail")), ApiError
        )
        self.assertIsInstance(
            map_http_error(HttpErrorInfo(status_code=409, message="conflict")), ApiError
        )

    def test_message_falls_back_to_status(self) -> None:
        err = map_http_error(HttpErrorInfo(status_code=500))
        self.assertEqual(str(err), "HTTP error 500")


if __name__ == "__main__":
    unittest.main()
