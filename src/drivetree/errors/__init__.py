"""Public error exports for drivetree."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    ConfigurationMissingError,
    DriveTreeError,
    FolderLoadError,
    FolderNotFoundError,
    HttpErrorInfo,
    InvalidArgumentError,
    ListingFailureError,
    MetadataUnavailableError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)

__all__ = [
    "DriveTreeError",
    "ConfigurationMissingError",
    "MetadataUnavailableError",
    "FolderLoadError",
    "ListingFailureError",
    "FolderNotFoundError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
