"""DriveTreeManager: the surface hosting layers use to read the Drive tree."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from drivetree.config import DriveTreeConfig
from drivetree.controller import GoogleDriveController, ListingClient
from drivetree.errors import FolderNotFoundError
from drivetree.models import FolderNode
from drivetree.tree import TreeBuilder, TreeCache, flatten_routes, resolve, unique_routes
from drivetree.tree.builder import DEFAULT_MAX_CONCURRENCY
from drivetree.tree.cache import DEFAULT_CACHE_TTL
from drivetree.util.time import now_utc

logger = logging.getLogger(__name__)


class DriveTreeManager:
    """
    Entry point for reading the mirrored Drive tree.

    Create one per process and share it; it owns the tree cache. The Drive
    client is only created on the first get_tree() call, so an unconfigured
    manager is cheap and never touches the network.
    """

    def __init__(
        self,
        config: DriveTreeConfig,
        *,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self._config = config
        self._clock = clock
        self._cache: Optional[TreeCache] = None

    @classmethod
    def from_env(cls) -> "DriveTreeManager":
        """Create a manager configured from environment variables."""
        return cls(DriveTreeConfig.from_env())

    @classmethod
    def from_client(
        cls,
        client: ListingClient,
        root_folder_id: str,
        *,
        cache_ttl: timedelta = DEFAULT_CACHE_TTL,
        clock: Callable[[], datetime] = now_utc,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> "DriveTreeManager":
        """Create manager with an injected listing client (useful for tests)."""
        obj = cls.__new__(cls)
        obj._config = DriveTreeConfig(
            root_folder_id=root_folder_id,
            cache_ttl=cache_ttl,
            max_concurrency=max_concurrency,
        )
        obj._clock = clock
        obj._cache = TreeCache(
            TreeBuilder(client, max_concurrency=max_concurrency),
            root_folder_id,
            ttl=cache_ttl,
            clock=clock,
        )
        return obj

    @property
    def config(self) -> DriveTreeConfig:
        return self._config

    def is_configured(self) -> bool:
        """Cheap check used to skip Drive work entirely when disabled."""
        return self._cache is not None or self._config.is_configured

    async def get_tree(self, force: bool = False) -> FolderNode:
        """
        Return the cached tree, rebuilding it when stale or when forced.

        Raises:
            ConfigurationMissingError: if credentials/root id are absent.
            MetadataUnavailableError / ListingFailureError: if the build fails.
        """
        return await self._get_cache().get_tree(force=force)

    async def get_folder(self, slugs: Sequence[str]) -> FolderNode:
        """
        Return the folder addressed by slugs.

        Raises:
            FolderNotFoundError: if no folder matches the slug path.
        """
        tree = await self.get_tree()
        node = resolve(tree, slugs)
        if node is None:
            raise FolderNotFoundError(
                "Folder not found",
                details={"status_code": 404, "slugs": list(slugs)},
            )
        return node

    async def collect_routes(self) -> list[str]:
        """
        Return every folder route for static generation.

        Never fails: returns ["/"] when the feature is disabled or the build
        fails for any reason, including errors that are not DriveTreeError.
        """
        if not self.is_configured():
            return ["/"]

        try:
            tree = await self.get_tree(force=True)
        except Exception as exc:
            logger.warning("Failed to collect Drive routes: %s", exc, exc_info=True)
            return ["/"]

        return unique_routes(flatten_routes(tree))

    def _get_cache(self) -> TreeCache:
        if self._cache is None:
            self._config.require_configured()
            controller = GoogleDriveController(self._config.auth_info())
            self._cache = TreeCache(
                TreeBuilder(controller, max_concurrency=self._config.max_concurrency),
                self._config.root_folder_id,  # type: ignore[arg-type]
                ttl=self._config.cache_ttl,
                clock=self._clock,
            )
        return self._cache
