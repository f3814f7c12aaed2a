from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"

# Any "image/..." type is published; Drive reports HEIC, RAW, etc. the same way.
IMAGE_MIME_PREFIX: str = "image/"

DEFAULT_IMAGE_MIME: str = "image/*"


def is_folder(mime_type: str | None) -> bool:
    return mime_type == FOLDER_MIME


def is_image(mime_type: str | None) -> bool:
    """Returns True for image files (prefix match on the MIME type)."""
    return bool(mime_type) and mime_type.startswith(IMAGE_MIME_PREFIX)
