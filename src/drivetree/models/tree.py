"""Immutable tree model mirrored from Drive."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(slots=True, frozen=True)
class Breadcrumb:
    """One navigation step: a folder label and the route that addresses it."""

    label: str
    route: str

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "route": self.route}


@dataclass(slots=True, frozen=True)
class DriveImage:
    """An image file contained directly in a folder."""

    id: str
    name: str
    mime_type: str
    preview_url: str
    full_size_url: str
    width: Optional[int] = None
    height: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "mimeType": self.mime_type,
            "previewUrl": self.preview_url,
            "fullSizeUrl": self.full_size_url,
            "width": self.width,
            "height": self.height,
        }


@dataclass(slots=True, frozen=True)
class FolderNode:
    """
    A folder in the mirrored hierarchy.

    Notes:
        - The root has slug "" and route "/"; every other route is "/" plus
          path_segments joined with "/".
        - children and images are tuples sorted by name; a built tree is
          never mutated, the cache swaps whole trees instead.
    """

    id: str
    name: str
    slug: str
    route: str
    path_segments: tuple[str, ...]
    breadcrumbs: tuple[Breadcrumb, ...]
    children: tuple[FolderNode, ...] = ()
    images: tuple[DriveImage, ...] = ()
    description: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return not self.path_segments

    def iter_folders(self) -> Iterator[FolderNode]:
        """Yield this folder and every descendant folder, pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_folders()

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON payload served for this folder (recursive)."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "slug": self.slug,
            "route": self.route,
            "pathSegments": list(self.path_segments),
            "breadcrumbs": [crumb.to_dict() for crumb in self.breadcrumbs],
            "children": [child.to_dict() for child in self.children],
            "images": [image.to_dict() for image in self.images],
        }
