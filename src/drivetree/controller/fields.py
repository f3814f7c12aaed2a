"""Field definitions for Google Drive API responses."""

from __future__ import annotations

FOLDER_FIELDS: str = "id,name,description"

CHILD_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "thumbnailLink,"
    "imageMediaMetadata(width,height)"
)

LIST_FIELDS: str = f"nextPageToken,files({CHILD_FIELDS})"

# Drive's maximum page size for files.list.
PAGE_SIZE: int = 1000
