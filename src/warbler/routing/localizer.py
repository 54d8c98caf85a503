"""Route localization: the rewrite pass over the route tree.

For every top-level page the localizer decides, from the page's global
override entry, how the page is served in each locale:

- ``Excluded``: the page is left alone.
- ``CustomPaths``: the default locale rewrites the page in place, every
  other listed locale gets its own prefixed sibling.
- ``Absent``: one grouped sibling serves all active locales without a
  custom path, one dedicated sibling serves each locale that has one,
  and the page itself is adjusted for the default locale.

Siblings are appended to the top-level list once every page has been
visited.  All custom-path lookups go through the prebuilt
:data:`~warbler.routing.index.LocalizedPathIndex`, keyed by pre-mutation
full paths.
"""

import copy
import logging
from collections.abc import Mapping, Sequence
from typing import TypeAlias

from warbler.locales import LocaleRegistry
from warbler.routing.index import LocalizedPathIndex
from warbler.routing.overrides import Absent, CustomPaths, Excluded, GlobalOverrideTable
from warbler.routing.page import PageNode
from warbler.routing.paths import (
    build_full_path,
    build_grouped_path,
    build_route_name,
    join_paths,
    localized_name,
    normalize_path,
    remove_leading_slash,
    should_add_locale_prefix,
)

logger = logging.getLogger("warbler.routing")

_NO_PATHS: Mapping[str, str] = {}


class RouteLocalizer:
    """Expands a route tree into one route per (page x active locale).

    Usage::

        localizer = RouteLocalizer(registry, overrides, index)
        localizer.localize(pages)  # mutates and returns ``pages``
    """

    __slots__ = ("index", "overrides", "registry")

    def __init__(
        self,
        registry: LocaleRegistry,
        overrides: GlobalOverrideTable,
        index: LocalizedPathIndex,
    ) -> None:
        self.registry = registry
        self.overrides = overrides
        self.index = index

    def localize(self, pages: list[PageNode]) -> list[PageNode]:
        """Localize *pages* in place and return the same list."""
        additional: list[PageNode] = []
        for page in pages:
            match self.overrides.lookup(page.name):
                case Excluded():
                    logger.debug("Skipping %r: excluded from localization", page.name)
                case CustomPaths(paths=paths):
                    self._localize_custom(page, paths, additional)
                case Absent():
                    self._localize_default(page, additional)

        pages.extend(additional)
        return pages

    # -- Custom mode --

    def _localize_custom(
        self,
        page: PageNode,
        custom_paths: Mapping[str, str],
        additional: list[PageNode],
    ) -> None:
        logger.debug("Localizing %r with global custom paths", page.name)
        full_path = normalize_path(page.path)
        original_children = copy.deepcopy(page.children)
        default_locale = self.registry.default_locale

        for code in self.registry.codes:
            custom_path = custom_paths.get(code)
            if not custom_path:
                continue

            if self.registry.is_default(code):
                # The default locale is served by the page itself
                if should_add_locale_prefix(
                    code,
                    default_locale,
                    False,
                    self.registry.include_default_locale_route,
                ):
                    page.path = build_full_path(code, custom_path)
                else:
                    page.path = normalize_path(custom_path)
            else:
                additional.append(
                    self._custom_route(page, code, custom_path, full_path, original_children)
                )

    # -- Default mode --

    def _localize_default(self, page: PageNode, additional: list[PageNode]) -> None:
        if page.is_redirect_only:
            logger.debug("Skipping %r: redirect-only page", page.name)
            return

        original_children = copy.deepcopy(page.children)
        full_path = normalize_path(page.path)
        custom_paths = self.index.get(full_path, _NO_PATHS)

        grouped_codes = [
            code for code in self.registry.active_locale_codes if not custom_paths.get(code)
        ]
        if grouped_codes:
            logger.debug("Localizing %r for %s", page.name, ", ".join(grouped_codes))
            additional.append(
                page.copy(
                    path=build_grouped_path(grouped_codes, page.path),
                    name=build_route_name(page.name, grouped_codes[0]),
                    children=self._localize_children(
                        original_children, full_path, grouped_codes, suffix=True
                    ),
                )
            )

        for code in self.registry.codes:
            custom_path = custom_paths.get(code)
            if not custom_path or self.registry.is_in_place_default(code):
                continue
            additional.append(
                self._custom_route(page, code, custom_path, full_path, original_children)
            )

        self._adjust_for_default_locale(page, full_path, original_children)

    def _adjust_for_default_locale(
        self,
        page: PageNode,
        full_path: str,
        original_children: list[PageNode],
    ) -> None:
        default_code = self.registry.default_locale.code
        default_path = self.index.get(full_path, _NO_PATHS).get(default_code)
        if default_path:
            page.path = normalize_path(default_path)

        if not original_children:
            return

        localized = self._localize_children(
            original_children, full_path, [default_code], suffix=False
        )
        keys = [_child_key(child) for child in original_children]
        page.children = merge_children(page.children, list(zip(keys, localized, strict=True)))

    # -- Route construction --

    def _custom_route(
        self,
        page: PageNode,
        code: str,
        custom_path: str,
        full_path: str,
        original_children: list[PageNode],
    ) -> PageNode:
        """Clone *page* as a dedicated sibling serving *code* at *custom_path*.

        Dedicated siblings always carry their locale prefix; the in-place
        default locale never reaches here.
        """
        return page.copy(
            path=build_full_path(code, custom_path),
            name=build_route_name(page.name, code),
            children=self._localize_children(original_children, full_path, [code], suffix=True),
        )

    def _localize_children(
        self,
        children: list[PageNode],
        parent_path: str,
        codes: Sequence[str],
        *,
        suffix: bool,
    ) -> list[PageNode]:
        """Build one variant of every child for every code in *codes*."""
        localized: list[PageNode] = []
        for child in children:
            child_path = normalize_path(child.path)
            full_path = join_paths(parent_path, child_path)
            custom_paths = self.index.get(full_path, _NO_PATHS)

            for code in codes:
                base_path = custom_paths.get(code) or child_path
                localized.append(
                    child.copy(
                        path=remove_leading_slash(normalize_path(base_path)),
                        name=localized_name(
                            child.name,
                            code,
                            suffix=suffix,
                            is_default=self.registry.is_default(code),
                        ),
                        children=self._localize_children(
                            child.children, full_path, [code], suffix=suffix
                        ),
                    )
                )
        return localized


ChildKey: TypeAlias = tuple[str, str]


def _child_key(child: PageNode) -> ChildKey:
    """Identity used to match children: the name, or the path when unnamed."""
    if child.name is not None:
        return ("name", child.name)
    return ("path", normalize_path(child.path))


def merge_children(
    current: Sequence[PageNode],
    localized: Sequence[tuple[ChildKey, PageNode]],
) -> list[PageNode]:
    """Merge keyed localized children into *current*, returning a new list.

    A localized child replaces the current child with the same key at
    that child's position; one without a match is appended.
    """
    merged = list(current)
    positions = {_child_key(child): i for i, child in enumerate(merged)}
    for key, child in localized:
        position = positions.get(key)
        if position is None:
            positions[key] = len(merged)
            merged.append(child)
        else:
            merged[position] = child
    return merged
