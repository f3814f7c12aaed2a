"""drivetree public API."""

from __future__ import annotations

from drivetree.auth import AuthInfo, ServiceAccountClient
from drivetree.config import DriveTreeConfig
from drivetree.controller import GoogleDriveController, ListingClient
from drivetree.errors import (
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
from drivetree.manager import DriveTreeManager
from drivetree.models import Breadcrumb, ChildEntry, DriveImage, FolderMetadata, FolderNode
from drivetree.tree import (
    TreeBuilder,
    TreeCache,
    breadcrumbs_for,
    extract_slugs,
    flatten_routes,
    make_slug,
    resolve,
)

__all__ = [
    # High-level
    "DriveTreeManager",
    "DriveTreeConfig",
    # Tree
    "TreeBuilder",
    "TreeCache",
    "make_slug",
    "breadcrumbs_for",
    "resolve",
    "flatten_routes",
    "extract_slugs",
    # Remote
    "GoogleDriveController",
    "ListingClient",
    "AuthInfo",
    "ServiceAccountClient",
    # Models
    "Breadcrumb",
    "DriveImage",
    "FolderNode",
    "FolderMetadata",
    "ChildEntry",
    # Errors
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
