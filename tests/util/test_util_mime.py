import unittest

from drivetree.util.mime import FOLDER_MIME, is_folder, is_image


class TestUtilMime(unittest.TestCase):
    def test_is_folder(self) -> None:
        self.assertTrue(is_folder(FOLDER_MIME))
        self.assertFalse(is_folder("image/jpeg"))
        self.assertFalse(is_folder(None))

    def test_is_image(self) -> None:
        self.assertTrue(is_image("image/jpeg"))
        self.assertTrue(is_image("image/heic"))
        self.assertFalse(is_image("application/pdf"))
        self.assertFalse(is_image(FOLDER_MIME))
        self.assertFalse(is_image(None))
        self.assertFalse(is_image(""))


if __name__ == "__main__":
    unittest.main()
