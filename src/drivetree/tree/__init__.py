"""Tree building, caching and traversal for drivetree."""

from __future__ import annotations

from .builder import TreeBuilder
from .cache import DEFAULT_CACHE_TTL, TreeCache
from .ordering import collation_key, sort_by_name
from .routes import extract_slugs, flatten_routes, resolve, unique_routes
from .slugs import breadcrumbs_for, make_slug, route_for

__all__ = [
    "TreeBuilder",
    "TreeCache",
    "DEFAULT_CACHE_TTL",
    "make_slug",
    "breadcrumbs_for",
    "route_for",
    "collation_key",
    "sort_by_name",
    "resolve",
    "flatten_routes",
    "unique_routes",
    "extract_slugs",
]
