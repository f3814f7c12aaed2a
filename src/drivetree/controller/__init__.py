"""Remote listing client exports for drivetree."""

from __future__ import annotations

from .drive_controller import GoogleDriveController
from .protocol import ListingClient

__all__ = ["GoogleDriveController", "ListingClient"]
