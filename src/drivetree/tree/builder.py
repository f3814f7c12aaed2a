"""Recursive, concurrent construction of the folder tree."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Sequence, TypeVar

from drivetree.controller import ListingClient
from drivetree.errors import FolderLoadError
from drivetree.models import Breadcrumb, ChildEntry, DriveImage, FolderNode
from drivetree.util.mime import DEFAULT_IMAGE_MIME
from drivetree.util.urls import full_size_url_for, preview_url_for

from .ordering import sort_by_name
from .slugs import UNTITLED_FOLDER_LABEL, breadcrumbs_for, make_slug, route_for

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNTITLED_IMAGE_NAME: str = "Untitled image"
DEFAULT_MAX_CONCURRENCY: int = 8


class TreeBuilder:
    """
    Build a fully materialized FolderNode tree from a listing client.

    Notes:
        - Sibling folders are built concurrently in a TaskGroup; the first
          failure cancels the remaining siblings and aborts the whole build.
        - max_concurrency caps the number of remote calls in flight, not the
          number of pending sub-builds.
    """

    def __init__(
        self,
        client: ListingClient,
        *,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._client = client
        self._max_concurrency = max_concurrency

    async def build(self, root_id: str) -> FolderNode:
        """
        Build the tree rooted at root_id.

        Raises:
            MetadataUnavailableError / FolderLoadError: metadata fetch failed.
            ListingFailureError: a folder listing failed.
        """
        # Created per build so the semaphore binds to the running loop.
        limiter = asyncio.Semaphore(self._max_concurrency)
        tree = await self._build_node(
            limiter,
            root_id,
            parent_segments=(),
            ancestors=(),
            is_root=True,
        )
        logger.info(
            "Built Drive tree for root %s (%d folders)",
            root_id,
            sum(1 for _ in tree.iter_folders()),
        )
        return tree

    async def _build_node(
        self,
        limiter: asyncio.Semaphore,
        folder_id: str,
        *,
        parent_segments: tuple[str, ...],
        ancestors: tuple[Breadcrumb, ...],
        is_root: bool = False,
    ) -> FolderNode:
        meta = await self._call(limiter, self._client.get_metadata, folder_id)
        if not meta.id:
            raise FolderLoadError(
                f"Failed to load folder metadata for id {folder_id}",
                details={"folder_id": folder_id},
            )

        slug = "" if is_root else make_slug(meta.name, meta.id)
        path_segments = () if is_root else (*parent_segments, slug)
        route = route_for(path_segments)
        breadcrumbs = breadcrumbs_for(is_root, ancestors, meta.name, route)

        entries = await self._call(limiter, self._client.list_children, meta.id)
        folders = [entry for entry in entries if entry.is_folder]
        images = [_to_image(entry) for entry in entries if entry.is_image]

        children = await self._build_children(limiter, folders, path_segments, breadcrumbs)

        logger.debug(
            "Built folder %s at %s (%d folders, %d images)",
            meta.id,
            route,
            len(children),
            len(images),
        )
        return FolderNode(
            id=meta.id,
            name=meta.name or UNTITLED_FOLDER_LABEL,
            description=meta.description,
            slug=slug,
            route=route,
            path_segments=path_segments,
            breadcrumbs=breadcrumbs,
            children=sort_by_name(children),
            images=sort_by_name(images),
        )

    async def _build_children(
        self,
        limiter: asyncio.Semaphore,
        folders: Sequence[ChildEntry],
        path_segments: tuple[str, ...],
        breadcrumbs: tuple[Breadcrumb, ...],
    ) -> list[FolderNode]:
        if not folders:
            return []

        failure: BaseException | None = None
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [
                    tg.create_task(
                        self._build_node(
                            limiter,
                            folder.id,
                            parent_segments=path_segments,
                            ancestors=breadcrumbs,
                        )
                    )
                    for folder in folders
                ]
        except BaseExceptionGroup as group:
            failure = _first_leaf(group)

        # Raised outside the handler so callers see the sub-build's own error.
        if failure is not None:
            raise failure

        return [task.result() for task in tasks]

    async def _call(
        self,
        limiter: asyncio.Semaphore,
        func: Callable[[str], T],
        folder_id: str,
    ) -> T:
        async with limiter:
            return await asyncio.to_thread(func, folder_id)


def _first_leaf(group: BaseExceptionGroup) -> BaseException:
    exc: Any = group
    while isinstance(exc, BaseExceptionGroup):
        exc = exc.exceptions[0]
    return exc


def _to_image(entry: ChildEntry) -> DriveImage:
    return DriveImage(
        id=entry.id,
        name=entry.name or UNTITLED_IMAGE_NAME,
        mime_type=entry.mime_type or DEFAULT_IMAGE_MIME,
        preview_url=entry.thumbnail_link or preview_url_for(entry.id),
        full_size_url=full_size_url_for(entry.id),
        width=entry.width,
        height=entry.height,
    )
