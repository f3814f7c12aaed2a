"""Public model exports for drivetree."""

from __future__ import annotations

from .entries import ChildEntry, FolderMetadata
from .tree import Breadcrumb, DriveImage, FolderNode

__all__ = [
    "Breadcrumb",
    "DriveImage",
    "FolderNode",
    "FolderMetadata",
    "ChildEntry",
]
