import unittest

from drivetree.models import DriveImage
from drivetree.tree.ordering import collation_key, sort_by_name


def _image(file_id: str, name: str) -> DriveImage:
    return DriveImage(
        id=file_id,
        name=name,
        mime_type="image/jpeg",
        preview_url="p",
        full_size_url="f",
    )


class TestOrdering(unittest.TestCase):
    def test_case_insensitive(self) -> None:
        names = ["Banana", "apple", "Cherry"]
        self.assertEqual(sorted(names, key=collation_key), ["apple", "Banana", "Cherry"])

    def test_accents_sort_with_base_letter(self) -> None:
        names = ["Zebra", "Éclair", "eagle"]
        self.assertEqual(sorted(names, key=collation_key), ["eagle", "Éclair", "Zebra"])

    def test_lowercase_before_uppercase_on_tie(self) -> None:
        self.assertEqual(sorted(["A", "a"], key=collation_key), ["a", "A"])

    def test_punctuation_before_digits_before_letters(self) -> None:
        names = ["2024", "_archive", "apple", "Banana", "?misc", "{wip}"]
        self.assertEqual(
            sorted(names, key=collation_key),
            ["_archive", "?misc", "{wip}", "2024", "apple", "Banana"],
        )

    def test_separator_sorts_before_letter(self) -> None:
        self.assertEqual(sorted(["ab", "a-b"], key=collation_key), ["a-b", "ab"])
        self.assertEqual(sorted(["10.jpg", "1.jpg"], key=collation_key), ["1.jpg", "10.jpg"])

    def test_sort_by_name_is_independent_of_input_order(self) -> None:
        images = [_image("3", "b.jpg"), _image("1", "a.jpg"), _image("2", "a.jpg")]
        forward = sort_by_name(images)
        backward = sort_by_name(list(reversed(images)))

        self.assertEqual(forward, backward)
        self.assertIsInstance(forward, tuple)
        self.assertEqual([i.id for i in forward], ["1", "2", "3"])


if __name__ == "__main__":
    unittest.main()
