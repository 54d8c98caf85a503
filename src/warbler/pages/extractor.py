"""Embedded per-page locale route configuration.

A page module may declare its own localized paths::

    from warbler.pages import define_i18n_route

    define_i18n_route(locale_routes={"fr": "/a-propos", "de": "/ueber-uns"})

The routing engine never imports page modules.  During indexing it asks
a :class:`PageConfigExtractor` to pull the ``locale_routes`` mapping out
of the page's source text.  :class:`PythonPageConfigExtractor` does this
statically with :mod:`ast`.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from warbler.errors import PageConfigError

if TYPE_CHECKING:
    from warbler.routing.page import PageNode

logger = logging.getLogger("warbler.pages")

# Call recognised as an embedded route declaration
_DEFINE_FUNC = "define_i18n_route"
_LOCALE_ROUTES_KW = "locale_routes"


@dataclass(frozen=True, slots=True)
class PageRouteConfig:
    """Route configuration declared inside a page module.

    Attributes:
        locale_routes: Locale code -> custom path, or ``None`` if the
            page declares no localized paths.
    """

    locale_routes: Mapping[str, str] | None = None


def define_i18n_route(*, locale_routes: Mapping[str, str] | None = None) -> PageRouteConfig:
    """Declare localized paths for the calling page module.

    A no-op at runtime beyond returning the config; the declaration is
    read statically from the page source during route indexing.
    """
    return PageRouteConfig(locale_routes=locale_routes)


class PageConfigExtractor(Protocol):
    """Pulls a :class:`PageRouteConfig` out of a page's source text."""

    def extract(self, file_contents: str, file_path: str) -> PageRouteConfig | None: ...


class PythonPageConfigExtractor:
    """Extract ``define_i18n_route(locale_routes=...)`` from Python source.

    Only module-level calls count.  The ``locale_routes`` value must be
    a literal ``dict`` of strings; anything else is a
    :class:`PageConfigError`.
    """

    def extract(self, file_contents: str, file_path: str) -> PageRouteConfig | None:
        try:
            tree = ast.parse(file_contents, filename=file_path)
        except SyntaxError as exc:
            raise PageConfigError(file_path, f"invalid syntax: {exc.msg}") from exc

        for statement in tree.body:
            call = _define_call(statement)
            if call is None:
                continue
            for keyword in call.keywords:
                if keyword.arg == _LOCALE_ROUTES_KW:
                    return PageRouteConfig(
                        locale_routes=_literal_locale_routes(keyword.value, file_path)
                    )
            return None
        return None


def _define_call(statement: ast.stmt) -> ast.Call | None:
    """Return the ``define_i18n_route(...)`` call in a top-level statement."""
    if isinstance(statement, ast.Expr):
        value = statement.value
    elif isinstance(statement, ast.Assign | ast.AnnAssign):
        value = statement.value
    else:
        return None

    if not isinstance(value, ast.Call):
        return None
    func = value.func
    if isinstance(func, ast.Name) and func.id == _DEFINE_FUNC:
        return value
    if isinstance(func, ast.Attribute) and func.attr == _DEFINE_FUNC:
        return value
    return None


def _literal_locale_routes(node: ast.expr, file_path: str) -> dict[str, str] | None:
    try:
        value = ast.literal_eval(node)
    except (ValueError, TypeError) as exc:
        raise PageConfigError(
            file_path, f"{_LOCALE_ROUTES_KW} must be a literal mapping"
        ) from exc

    if value is None:
        return None
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise PageConfigError(
            file_path, f"{_LOCALE_ROUTES_KW} must map locale codes to path strings"
        )
    return value


class PageConfigReader:
    """Reads page sources and hands them to a :class:`PageConfigExtractor`.

    Read and extraction errors propagate: a page whose config cannot be
    read fails the whole build.
    """

    __slots__ = ("extractor", "root_dir")

    def __init__(self, root_dir: str | Path, extractor: PageConfigExtractor) -> None:
        self.root_dir = Path(root_dir)
        self.extractor = extractor

    def read(self, page: PageNode) -> Mapping[str, str] | None:
        """Return the page's embedded ``locale_routes``, or ``None``."""
        if not page.file:
            return None

        file_path = (self.root_dir / page.file).resolve()
        logger.debug("Reading route config for %r from %s", page.name, file_path)
        contents = file_path.read_text(encoding="utf-8")
        config = self.extractor.extract(contents, str(file_path))
        if config is None:
            return None
        return config.locale_routes
