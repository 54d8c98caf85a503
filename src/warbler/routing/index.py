"""Override indexing: the read-only first pass over the route tree.

Builds a flat map of normalized full path -> {locale: custom path}
from the global override table and each page's embedded config.  The
localization pass rewrites ``path`` in place, so every lookup it makes
goes through this pre-mutation index.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol, TypeAlias

from warbler.routing.overrides import CustomPaths, GlobalOverrideTable
from warbler.routing.page import PageNode
from warbler.routing.paths import join_paths

logger = logging.getLogger("warbler.routing")

LocalizedPathIndex: TypeAlias = Mapping[str, Mapping[str, str]]


class PageConfigSource(Protocol):
    """Anything that can return a page's embedded locale routes."""

    def read(self, page: PageNode) -> Mapping[str, str] | None: ...


class OverrideIndexer:
    """Builds a :data:`LocalizedPathIndex` for a route tree.

    Usage::

        indexer = OverrideIndexer(overrides, PageConfigReader(root, extractor))
        index = indexer.index(pages)
    """

    __slots__ = ("overrides", "source")

    def __init__(self, overrides: GlobalOverrideTable, source: PageConfigSource | None) -> None:
        self.overrides = overrides
        self.source = source

    def index(self, pages: list[PageNode]) -> LocalizedPathIndex:
        """Index the whole tree.  Errors from the config source propagate."""
        paths: dict[str, Mapping[str, str]] = {}
        self._walk(pages, "", paths)
        logger.debug("Indexed localized paths for %d route(s)", len(paths))
        return MappingProxyType(paths)

    def _walk(
        self,
        pages: list[PageNode],
        parent_path: str,
        paths: dict[str, Mapping[str, str]],
    ) -> None:
        for page in pages:
            full_path = join_paths(parent_path, page.path)
            locale_routes = self._locale_routes(page)
            if locale_routes is not None:
                paths[full_path] = MappingProxyType(dict(locale_routes))

            if page.children:
                self._walk(page.children, full_path, paths)

    def _locale_routes(self, page: PageNode) -> Mapping[str, str] | None:
        # Global custom paths win; the page source is not even read.
        entry = self.overrides.lookup(page.name)
        if isinstance(entry, CustomPaths):
            return entry.paths
        if self.source is None:
            return None
        return self.source.read(page)
