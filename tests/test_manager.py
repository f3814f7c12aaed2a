import unittest
from datetime import datetime, timedelta, timezone
from typing import Optional
from unittest.mock import patch

from drivetree.auth import AuthInfo
from drivetree.config import DriveTreeConfig
from drivetree.errors import (
    ConfigurationMissingError,
    FolderNotFoundError,
    ListingFailureError,
    MetadataUnavailableError,
)
from drivetree.manager import DriveTreeManager
from drivetree.models import ChildEntry, FolderMetadata
from drivetree.util.mime import FOLDER_MIME


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now


class FakeListingClient:
    def __init__(self) -> None:
        self.folders: dict[str, FolderMetadata] = {}
        self.children: dict[str, list[ChildEntry]] = {}
        self.fail_listing: set[str] = set()
        self.metadata_calls = 0

    def add_folder(self, folder_id: str, name: str, parent: Optional[str] = None) -> None:
        self.folders[folder_id] = FolderMetadata(id=folder_id, name=name)
        self.children.setdefault(folder_id, [])
        if parent is not None:
            self.children[parent].append(ChildEntry(id=folder_id, name=name, mime_type=FOLDER_MIME))

    def get_metadata(self, folder_id: str) -> FolderMetadata:
        self.metadata_calls += 1
        if folder_id not in self.folders:
            raise MetadataUnavailableError("not found")
        return self.folders[folder_id]

    def list_children(self, folder_id: str) -> list[ChildEntry]:
        if folder_id in self.fail_listing:
            raise ListingFailureError("listing failed", details={"folder_id": folder_id})
        return list(self.children.get(folder_id, []))


def _portfolio() -> FakeListingClient:
    client = FakeListingClient()
    client.add_folder("root123", "Portfolio")
    client.add_folder("abcdef12", "New Tattoos!", parent="root123")
    client.add_folder("fedcba98", "Arms", parent="abcdef12")
    client.add_folder("112233aa", "Flash", parent="root123")
    return client


class TestDriveTreeManager(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.client = _portfolio()
        self.clock = FakeClock()
        self.mgr = DriveTreeManager.from_client(self.client, "root123", clock=self.clock)

    async def test_get_tree_is_cached(self) -> None:
        tree = await self.mgr.get_tree()
        calls = self.client.metadata_calls

        self.assertIs(await self.mgr.get_tree(), tree)
        self.assertEqual(self.client.metadata_calls, calls)

    async def test_get_folder(self) -> None:
        node = await self.mgr.get_folder(["new-tattoos-abcdef", "arms-fedcba"])

        self.assertEqual(node.id, "fedcba98")
        self.assertEqual(node.route, "/new-tattoos-abcdef/arms-fedcba")
        self.assertEqual(
            [crumb.label for crumb in node.breadcrumbs],
            ["Portfolio", "New Tattoos!", "Arms"],
        )

    async def test_get_folder_root(self) -> None:
        node = await self.mgr.get_folder([])
        self.assertEqual(node.id, "root123")

    async def test_get_folder_not_found(self) -> None:
        with self.assertRaises(FolderNotFoundError) as ctx:
            await self.mgr.get_folder(["new-tattoos-abcdef", "legs-000000"])

        self.assertEqual(ctx.exception.details["status_code"], 404)

    async def test_collect_routes(self) -> None:
        routes = await self.mgr.collect_routes()

        self.assertEqual(
            routes,
            ["/", "/flash-112233", "/new-tattoos-abcdef", "/new-tattoos-abcdef/arms-fedcba"],
        )

    async def test_collect_routes_forces_rebuild(self) -> None:
        await self.mgr.get_tree()
        calls = self.client.metadata_calls

        await self.mgr.collect_routes()

        self.assertGreater(self.client.metadata_calls, calls)

    async def test_collect_routes_degrades_on_failure(self) -> None:
        self.client.fail_listing.add("root123")

        with self.assertLogs("drivetree.manager", level="WARNING"):
            routes = await self.mgr.collect_routes()

        self.assertEqual(routes, ["/"])

    async def test_collect_routes_degrades_on_unexpected_error(self) -> None:
        def broken_metadata(folder_id: str) -> FolderMetadata:
            raise RuntimeError("unexpected client failure")

        self.client.get_metadata = broken_metadata  # type: ignore[method-assign]

        with self.assertLogs("drivetree.manager", level="WARNING") as logs:
            routes = await self.mgr.collect_routes()

        self.assertEqual(routes, ["/"])
        self.assertIn("unexpected client failure", logs.output[0])

    async def test_failed_forced_rebuild_keeps_previous_tree(self) -> None:
        tree = await self.mgr.get_tree()
        self.client.fail_listing.add("fedcba98")

        with self.assertRaises(ListingFailureError):
            await self.mgr.get_tree(force=True)

        self.assertIs(await self.mgr.get_tree(), tree)

    async def test_expired_tree_is_rebuilt(self) -> None:
        tree = await self.mgr.get_tree()
        self.client.add_folder("99887766", "Hands", parent="root123")
        self.clock.now += timedelta(minutes=10)

        fresh = await self.mgr.get_tree()

        self.assertIsNot(fresh, tree)
        self.assertIn("Hands", [child.name for child in fresh.children])

    def test_is_configured(self) -> None:
        self.assertTrue(self.mgr.is_configured())


class TestUnconfiguredManager(unittest.IsolatedAsyncioTestCase):
    async def test_get_tree_requires_configuration(self) -> None:
        mgr = DriveTreeManager(DriveTreeConfig())

        self.assertFalse(mgr.is_configured())
        with self.assertRaises(ConfigurationMissingError):
            await mgr.get_tree()

    async def test_collect_routes_without_configuration(self) -> None:
        mgr = DriveTreeManager(DriveTreeConfig(root_folder_id="root123"))

        with patch("drivetree.manager.GoogleDriveController") as controller_cls:
            routes = await mgr.collect_routes()

        self.assertEqual(routes, ["/"])
        controller_cls.assert_not_called()


class TestConfiguredManager(unittest.IsolatedAsyncioTestCase):
    async def test_controller_is_created_lazily_from_config(self) -> None:
        config = DriveTreeConfig(
            email="svc@example.com",
            private_key="KEY",
            root_folder_id="root123",
        )
        mgr = DriveTreeManager(config)

        with patch("drivetree.manager.GoogleDriveController") as controller_cls:
            controller = controller_cls.return_value
            controller.get_metadata.return_value = FolderMetadata(id="root123", name="Portfolio")
            controller.list_children.return_value = []

            self.assertTrue(mgr.is_configured())
            controller_cls.assert_not_called()

            tree = await mgr.get_tree()
            await mgr.get_tree()

        self.assertEqual(tree.route, "/")
        controller_cls.assert_called_once_with(AuthInfo(email="svc@example.com", private_key="KEY"))
        controller.get_metadata.assert_called_once_with("root123")


if __name__ == "__main__":
    unittest.main()
