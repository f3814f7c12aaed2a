"""Read-only Google Drive API controller used by the tree builder."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from drivetree.auth import AuthInfo, ServiceAccountClient
from drivetree.errors import (
    ApiError,
    DriveTreeError,
    HttpErrorInfo,
    ListingFailureError,
    MetadataUnavailableError,
    NetworkError,
    RateLimitError,
    map_http_error,
)
from drivetree.models import ChildEntry, FolderMetadata

from .fields import FOLDER_FIELDS, LIST_FIELDS, PAGE_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _RetryPolicy:
    max_retries: int = 3
    initial_delay_sec: float = 1.0


class GoogleDriveController:
    """
    Remote listing client backed by the Drive v3 API.

    Notes:
        - Methods are blocking; the tree builder runs them in worker threads.
        - `supports_all_drives` is applied to all requests consistently.
    """

    DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive.readonly",)

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        supports_all_drives: bool = True,
    ) -> None:
        self._supports_all_drives = supports_all_drives
        self._retry_policy = _RetryPolicy()

        use_scopes = list(scopes) if scopes is not None else list(self.DEFAULT_SCOPES)
        client = ServiceAccountClient(auth_info)
        self._service = client.build_drive_service(use_scopes)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._supports_all_drives = supports_all_drives
        obj._retry_policy = _RetryPolicy()
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def get_metadata(self, folder_id: str) -> FolderMetadata:
        """
        Fetch id, name and description of a folder.

        Raises:
            MetadataUnavailableError: if Drive cannot resolve the id.
        """
        req = self._service.files().get(
            fileId=folder_id,
            fields=FOLDER_FIELDS,
            **self._common_get_kwargs(),
        )
        try:
            data = self._execute(req)
        except DriveTreeError as exc:
            raise MetadataUnavailableError(
                f"Failed to load folder metadata for id {folder_id}",
                details={"folder_id": folder_id, **exc.details},
                cause=exc,
            ) from exc
        return _dict_to_folder_metadata(data)

    def list_children(self, folder_id: str) -> list[ChildEntry]:
        """
        List every non-trashed direct child of a folder, draining all pages.

        Raises:
            ListingFailureError: if any page request fails.
        """
        q = _build_parent_query(folder_id)
        try:
            return self._list_all(q)
        except DriveTreeError as exc:
            raise ListingFailureError(
                f"Failed to list folder contents for id {folder_id}",
                details={"folder_id": folder_id, **exc.details},
                cause=exc,
            ) from exc

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _list_all(self, q: str) -> list[ChildEntry]:
        entries: list[ChildEntry] = []
        page_token: Optional[str] = None

        while True:
            req = self._service.files().list(
                q=q,
                fields=LIST_FIELDS,
                pageSize=PAGE_SIZE,
                pageToken=page_token,
                **self._common_list_kwargs(),
            )
            data = self._execute(req)
            for f in data.get("files", []) or []:
                entry = _dict_to_child_entry(f)
                if entry is not None:
                    entries.append(entry)

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        return entries

    def _execute(self, req: Any) -> dict[str, Any]:
        delay = self._retry_policy.initial_delay_sec
        for attempt in range(self._retry_policy.max_retries + 1):
            try:
                return req.execute()
            except Exception as exc:
                mapped = self._map_exception(exc)
                if self._should_retry(mapped) and attempt < self._retry_policy.max_retries:
                    logger.warning(
                        "Drive request failed (%s); retrying in %.1fs (attempt %d/%d)",
                        mapped,
                        delay,
                        attempt + 1,
                        self._retry_policy.max_retries,
                    )
                    time.sleep(delay)
                    delay *= 2
                    continue
                raise mapped from exc

        raise ApiError("Unexpected retry loop termination")

    def _should_retry(self, exc: Exception) -> bool:
        if isinstance(exc, RateLimitError):
            return True
        if isinstance(exc, NetworkError):
            return True
        if isinstance(exc, ApiError):
            status_code = getattr(exc, "details", {}).get("status_code")
            return isinstance(status_code, int) and 500 <= status_code <= 599
        return False

    def _map_exception(self, exc: Exception) -> Exception:
        from googleapiclient.errors import HttpError

        if isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def _build_parent_query(parent_id: str) -> str:
    return f"'{parent_id}' in parents and trashed=false"


def _dict_to_folder_metadata(data: dict[str, Any]) -> FolderMetadata:
    file_id = data.get("id")
    name = data.get("name")
    description = data.get("description")
    return FolderMetadata(
        id=file_id if isinstance(file_id, str) and file_id else None,
        name=name if isinstance(name, str) else None,
        description=description if isinstance(description, str) else None,
    )


def _dict_to_child_entry(data: dict[str, Any]) -> Optional[ChildEntry]:
    file_id = data.get("id")
    if not isinstance(file_id, str) or not file_id:
        return None

    name = data.get("name")
    mime_type = data.get("mimeType")
    thumbnail = data.get("thumbnailLink")

    media = data.get("imageMediaMetadata") or {}
    width = media.get("width") if isinstance(media, dict) else None
    height = media.get("height") if isinstance(media, dict) else None

    return ChildEntry(
        id=file_id,
        name=name if isinstance(name, str) else None,
        mime_type=mime_type if isinstance(mime_type, str) else None,
        thumbnail_link=thumbnail if isinstance(thumbnail, str) and thumbnail else None,
        width=width if isinstance(width, int) else None,
        height=height if isinstance(height, int) else None,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except ValueError:
            payload = {}
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
