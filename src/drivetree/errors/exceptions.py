"""Exception hierarchy and HTTP error mapping for drivetree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class DriveTreeError(Exception):
    """
    Base exception for drivetree.

    Attributes:
        details: Optional structured information (e.g., HTTP status, folder id).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ConfigurationMissingError(DriveTreeError):
    """Raised when service account credentials or the root folder id are absent."""


class MetadataUnavailableError(DriveTreeError):
    """Raised when folder metadata cannot be fetched or carries no usable id."""


class FolderLoadError(MetadataUnavailableError):
    """Raised by the tree builder when a metadata response has no identifier."""


class ListingFailureError(DriveTreeError):
    """Raised when listing (or draining the pages of) a folder fails."""


class FolderNotFoundError(DriveTreeError):
    """Raised when a slug path does not match any folder in the tree."""


class AuthError(DriveTreeError):
    """Raised when service account authentication fails."""


class PermissionError(DriveTreeError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(DriveTreeError):
    """Raised when arguments or configuration values are invalid (HTTP 400, etc.)."""


class NotFoundError(DriveTreeError):
    """Raised when a Drive resource is not found (HTTP 404)."""


class RateLimitError(DriveTreeError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(DriveTreeError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(DriveTreeError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(DriveTreeError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to drivetree exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
)

# Drive reports per-user throttling as 403 with these reasons.
_RATE_LIMIT_REASONS: tuple[str, ...] = (
    "rateLimitExceeded",
    "userRateLimitExceeded",
)


def _matches(reason: str | None, keywords: tuple[str, ...]) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in keywords)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> DriveTreeError:
    """
    Map an HTTP error to a drivetree exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> RateLimitError if throttled, QuotaExceededError if
          quota-related, PermissionError otherwise
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - 5xx and anything else -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if _matches(info.reason, _RATE_LIMIT_REASONS):
            return RateLimitError(message, details=details, cause=cause)
        if _matches(info.reason, _QUOTA_REASON_KEYWORDS):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
