import unittest

import drivetree


class TestPublicApi(unittest.TestCase):
    def test_top_level_exports_exist(self) -> None:
        for name in (
            "DriveTreeManager",
            "DriveTreeConfig",
            "TreeBuilder",
            "TreeCache",
            "make_slug",
            "resolve",
            "flatten_routes",
            "FolderNode",
            "DriveImage",
            "GoogleDriveController",
            "DriveTreeError",
            "ConfigurationMissingError",
            "FolderNotFoundError",
        ):
            with self.subTest(name=name):
                self.assertTrue(hasattr(drivetree, name))

    def test___all___is_defined(self) -> None:
        self.assertIn("DriveTreeManager", drivetree.__all__)
        self.assertIn("DriveTreeError", drivetree.__all__)
        for name in drivetree.__all__:
            self.assertTrue(hasattr(drivetree, name), name)


if __name__ == "__main__":
    unittest.main()
