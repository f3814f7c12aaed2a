"""Interface the tree builder requires of a remote listing client."""

from __future__ import annotations

from typing import Protocol, Sequence

from drivetree.models import ChildEntry, FolderMetadata


class ListingClient(Protocol):
    """
    Blocking listing client.

    GoogleDriveController implements it; tests pass in-memory fakes.
    """

    def get_metadata(self, folder_id: str) -> FolderMetadata:
        """Return folder metadata or raise MetadataUnavailableError."""
        ...

    def list_children(self, folder_id: str) -> Sequence[ChildEntry]:
        """Return all direct children (pages drained) or raise ListingFailureError."""
        ...
