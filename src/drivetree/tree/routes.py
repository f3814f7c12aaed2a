"""Path resolution and route enumeration over a built tree."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from drivetree.models import FolderNode


def resolve(tree: FolderNode, slugs: Sequence[str]) -> Optional[FolderNode]:
    """
    Walk down from tree following slugs (exact, case-sensitive).

    Returns:
        The matching folder, or None if any slug has no matching child.
    """
    node = tree
    for slug in slugs:
        match = next((child for child in node.children if child.slug == slug), None)
        if match is None:
            return None
        node = match
    return node


def flatten_routes(node: FolderNode) -> list[str]:
    """Routes of node and all descendants, depth-first pre-order."""
    routes = [node.route]
    for child in node.children:
        routes.extend(flatten_routes(child))
    return routes


def unique_routes(routes: Iterable[str]) -> list[str]:
    """Dedupe preserving order; "/" is always present (prepended if missing)."""
    unique = list(dict.fromkeys(routes))
    if "/" not in unique:
        unique.insert(0, "/")
    return unique


def extract_slugs(param: Union[str, Sequence[str], None]) -> list[str]:
    """
    Normalize a catch-all route parameter into a slug list.

    Accepts None, a "/"-joined string ("a-1/b-2") or a sequence of segments.
    Empty segments are dropped.
    """
    if not param:
        return []
    if isinstance(param, str):
        return [part for part in param.split("/") if part]
    return [part for part in param if part]
