"""Deterministic, locale-like ordering for folders and images."""

from __future__ import annotations

import unicodedata
from typing import Iterable, TypeVar, Union

from drivetree.models import DriveImage, FolderNode

T = TypeVar("T", FolderNode, DriveImage)

# Root collation order of ASCII whitespace, punctuation and symbols; all of
# them sort before digits, and digits before letters.
_ASCII_VARIABLE_ORDER: str = " _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_ASCII_RANK: dict[str, int] = {ch: i for i, ch in enumerate(_ASCII_VARIABLE_ORDER)}

_GROUP_TABLE = 0
_GROUP_PUNCTUATION = 1
_GROUP_SYMBOL = 2
_GROUP_DIGIT = 3
_GROUP_LETTER = 4


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _char_weight(ch: str) -> tuple[int, int]:
    rank = _ASCII_RANK.get(ch)
    if rank is not None:
        return (_GROUP_TABLE, rank)

    category = unicodedata.category(ch)
    if category[0] in ("P", "Z"):
        return (_GROUP_PUNCTUATION, ord(ch))
    if category[0] == "S":
        return (_GROUP_SYMBOL, ord(ch))
    if category == "Nd":
        return (_GROUP_DIGIT, unicodedata.digit(ch))
    return (_GROUP_LETTER, ord(ch))


def collation_key(name: str) -> tuple[tuple[tuple[int, int], ...], str, str]:
    """
    Collation key approximating a locale-aware compare.

    Rules:
        - Primary: accents stripped, case folded, weighed per character so
          punctuation < symbols < digits < letters
          ("_archive" < "2024" < "apple" < "Banana").
        - Secondary: accents kept, case folded ("resume" < "résumé").
        - Tertiary: lowercase before uppercase ("a" < "A").
    """
    folded = unicodedata.normalize("NFKC", name).casefold()
    primary = tuple(_char_weight(ch) for ch in _strip_accents(folded))
    return (primary, folded, name.swapcase())


def name_sort_key(item: Union[FolderNode, DriveImage]) -> tuple[tuple, str]:
    # Tie-breaker: id, so equal names order the same way on every build.
    return (collation_key(item.name), item.id)


def sort_by_name(items: Iterable[T]) -> tuple[T, ...]:
    return tuple(sorted(items, key=name_sort_key))
