"""Time-bounded cache holding the last successfully built tree."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from drivetree.models import FolderNode
from drivetree.util.time import normalize_dt, now_utc

from .builder import TreeBuilder

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL: timedelta = timedelta(minutes=10)


def _consume_rebuild_result(task: asyncio.Task[FolderNode]) -> None:
    # The outcome is retrieved here even when every waiter was cancelled.
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Drive tree rebuild failed: %r", exc)


@dataclass(slots=True, frozen=True)
class _CacheEntry:
    tree: FolderNode
    cached_at: datetime


class TreeCache:
    """
    Serve the cached tree within the TTL window, rebuild otherwise.

    Notes:
        - Tree and timestamp live in one immutable entry that is swapped as a
          whole; readers see either the old or the new pair.
        - A failed rebuild leaves the previous entry in place.
        - Callers that need a rebuild while one is running share that build.
    """

    def __init__(
        self,
        builder: TreeBuilder,
        root_id: str,
        *,
        ttl: timedelta = DEFAULT_CACHE_TTL,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        if ttl < timedelta(0):
            raise ValueError("ttl must not be negative")
        self._builder = builder
        self._root_id = root_id
        self._ttl = ttl
        self._clock = clock
        self._entry: Optional[_CacheEntry] = None
        self._inflight: Optional[asyncio.Task[FolderNode]] = None

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    @property
    def tree(self) -> Optional[FolderNode]:
        """The cached tree, fresh or stale, or None if nothing was built yet."""
        entry = self._entry
        return entry.tree if entry is not None else None

    @property
    def cached_at(self) -> Optional[datetime]:
        entry = self._entry
        return entry.cached_at if entry is not None else None

    async def get_tree(self, force: bool = False) -> FolderNode:
        """
        Return the current tree.

        Args:
            force: Rebuild even if the cached tree is still fresh.

        Raises:
            DriveTreeError: if a rebuild is needed and fails.
        """
        entry = self._entry
        if not force and entry is not None and self._is_fresh(entry):
            return entry.tree

        if self._inflight is None:
            self._inflight = asyncio.create_task(self._rebuild())
            self._inflight.add_done_callback(_consume_rebuild_result)
        else:
            logger.debug("Joining in-flight Drive tree rebuild for root %s", self._root_id)
        return await asyncio.shield(self._inflight)

    def invalidate(self) -> None:
        """Drop the cached entry; the next get_tree() rebuilds."""
        self._entry = None

    def _is_fresh(self, entry: _CacheEntry) -> bool:
        age = normalize_dt(self._clock()) - entry.cached_at
        return age < self._ttl

    async def _rebuild(self) -> FolderNode:
        started_at = normalize_dt(self._clock())
        try:
            tree = await self._builder.build(self._root_id)
            self._entry = _CacheEntry(tree=tree, cached_at=started_at)
        finally:
            self._inflight = None

        logger.info("Cached Drive tree for root %s (ttl %s)", self._root_id, self._ttl)
        return tree
