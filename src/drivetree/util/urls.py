"""Display URLs for Drive images."""

from __future__ import annotations

THUMBNAIL_SIZE: str = "w2000-h2000"


def preview_url_for(file_id: str) -> str:
    """Thumbnail URL used when Drive does not report a thumbnailLink."""
    return f"https://drive.google.com/thumbnail?id={file_id}&sz={THUMBNAIL_SIZE}"


def full_size_url_for(file_id: str) -> str:
    return f"https://lh3.googleusercontent.com/d/{file_id}"
