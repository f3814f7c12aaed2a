"""Records returned by the remote listing client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from drivetree.util.mime import is_folder, is_image


@dataclass(slots=True, frozen=True)
class FolderMetadata:
    """
    Metadata of a single folder.

    Notes:
        - id may be None when Drive answers without one; the tree builder
          refuses to construct a node from such a response.
    """

    id: Optional[str]
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(slots=True, frozen=True)
class ChildEntry:
    """A direct child of a folder (sub-folder or file), in listing order."""

    id: str
    name: Optional[str] = None
    mime_type: Optional[str] = None
    thumbnail_link: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def is_folder(self) -> bool:
        return is_folder(self.mime_type)

    @property
    def is_image(self) -> bool:
        return is_image(self.mime_type)
