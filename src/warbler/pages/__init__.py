"""Filesystem pages and their embedded route configuration.

Usage::

    pages = discover_page_tree("pages", root_dir=".")
    extend_pages(pages, config)

A page module declares its localized paths with::

    from warbler.pages import define_i18n_route

    define_i18n_route(locale_routes={"fr": "/a-propos"})
"""

from warbler.pages.discovery import discover_page_tree
from warbler.pages.extractor import (
    PageConfigExtractor,
    PageConfigReader,
    PageRouteConfig,
    PythonPageConfigExtractor,
    define_i18n_route,
)

__all__ = [
    "PageConfigExtractor",
    "PageConfigReader",
    "PageRouteConfig",
    "PythonPageConfigExtractor",
    "define_i18n_route",
    "discover_page_tree",
]
