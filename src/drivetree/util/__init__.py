from .mime import (
    DEFAULT_IMAGE_MIME,
    FOLDER_MIME,
    IMAGE_MIME_PREFIX,
    is_folder,
    is_image,
)
from .time import millis_to_timedelta, normalize_dt, now_utc
from .urls import full_size_url_for, preview_url_for

__all__ = [
    "FOLDER_MIME",
    "IMAGE_MIME_PREFIX",
    "DEFAULT_IMAGE_MIME",
    "is_folder",
    "is_image",
    "now_utc",
    "normalize_dt",
    "millis_to_timedelta",
    "preview_url_for",
    "full_size_url_for",
]
