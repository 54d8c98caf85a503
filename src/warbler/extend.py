"""``extend_pages`` — run the full localization over a route tree.

Indexing always completes before the first page is mutated, so a page
source that fails to read or parse leaves the tree untouched.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from warbler.config import I18nConfig
from warbler.locales import LocaleRegistry
from warbler.pages.extractor import (
    PageConfigExtractor,
    PageConfigReader,
    PythonPageConfigExtractor,
)
from warbler.routing.index import OverrideIndexer
from warbler.routing.localizer import RouteLocalizer
from warbler.routing.overrides import GlobalOverrideTable
from warbler.routing.page import PageNode, count_pages

logger = logging.getLogger("warbler.routing")


def extend_pages(
    pages: list[PageNode],
    config: I18nConfig,
    *,
    extractor: PageConfigExtractor | None = None,
) -> list[PageNode]:
    """Localize *pages* in place according to *config* and return them.

    Args:
        pages: Top-level routes, as produced by page discovery.
        config: Locales, default-locale policy and global overrides.
        extractor: Reads embedded route config from page sources.
            Defaults to :class:`PythonPageConfigExtractor`.

    Returns:
        The same *pages* list, mutated and extended with localized routes.
    """
    registry = LocaleRegistry(
        config.locales,
        config.default_locale,
        config.include_default_locale_route,
    )
    overrides = GlobalOverrideTable.from_mapping(config.global_locale_routes)
    reader = PageConfigReader(config.root_dir, extractor or PythonPageConfigExtractor())

    index = OverrideIndexer(overrides, reader).index(pages)

    before = count_pages(pages)
    RouteLocalizer(registry, overrides, index).localize(pages)
    logger.info(
        "Localized %d route(s) into %d for locale(s) %s",
        before,
        count_pages(pages),
        ", ".join(registry.codes) or "-",
    )
    return pages


def extend_page_dicts(
    pages: Sequence[Mapping[str, Any]],
    config: I18nConfig,
    *,
    extractor: PageConfigExtractor | None = None,
) -> list[dict[str, Any]]:
    """Like :func:`extend_pages`, for routes given as nested mappings."""
    nodes = [PageNode.from_mapping(page) for page in pages]
    extend_pages(nodes, config, extractor=extractor)
    return [node.to_dict() for node in nodes]
