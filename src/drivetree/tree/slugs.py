"""Slug, route and breadcrumb derivation for folders."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from drivetree.models import Breadcrumb

UNTITLED_NAME: str = "untitled"
EMPTY_SLUG_BASE: str = "folder"
ROOT_LABEL: str = "Home"
UNTITLED_FOLDER_LABEL: str = "Untitled folder"
ID_SUFFIX_LENGTH: int = 6

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def make_slug(name: Optional[str], file_id: str) -> str:
    """
    Derive a URL-safe slug from a folder name and its Drive id.

    The id prefix keeps same-named siblings apart, e.g.
    make_slug("New Tattoos!", "abcdef12") == "new-tattoos-abcdef".
    """
    base_name = (name or "").strip() or UNTITLED_NAME
    base = _NON_SLUG_RUN.sub("-", base_name.lower()).strip("-")
    return f"{base or EMPTY_SLUG_BASE}-{file_id[:ID_SUFFIX_LENGTH]}"


def route_for(path_segments: Sequence[str]) -> str:
    if not path_segments:
        return "/"
    return "/" + "/".join(path_segments)


def breadcrumbs_for(
    is_root: bool,
    ancestors: Sequence[Breadcrumb],
    name: Optional[str],
    route: str,
) -> tuple[Breadcrumb, ...]:
    """
    Return the breadcrumb chain for a folder.

    A new tuple is always returned; the ancestors' chain is shared by every
    sibling and is never modified.
    """
    if is_root:
        return (Breadcrumb(label=name or ROOT_LABEL, route="/"),)
    return (*ancestors, Breadcrumb(label=name or UNTITLED_FOLDER_LABEL, route=route))
