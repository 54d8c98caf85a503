"""Warbler — locale-aware route trees.

Expands one locale-agnostic route tree into one route per
(page x active locale) for client-side routers.

Basic usage::

    from warbler import I18nConfig, Locale, discover_page_tree, extend_pages

    config = I18nConfig(locales=(Locale("en"), Locale("fr")), default_locale="en")
    pages = discover_page_tree("pages")
    extend_pages(pages, config)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "I18nConfig",
    "Locale",
    "LocaleRegistry",
    "PageConfigError",
    "PageNode",
    "WarblerError",
    "define_i18n_route",
    "discover_page_tree",
    "extend_page_dicts",
    "extend_pages",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import warbler`` fast while providing a clean top-level API.
    """
    if name in ("I18nConfig", "load_config"):
        from warbler import config as _config

        return getattr(_config, name)

    if name in ("Locale", "LocaleRegistry"):
        from warbler import locales as _locales

        return getattr(_locales, name)

    if name == "PageNode":
        from warbler.routing.page import PageNode

        return PageNode

    if name in ("extend_pages", "extend_page_dicts"):
        from warbler import extend as _extend

        return getattr(_extend, name)

    if name in ("define_i18n_route", "discover_page_tree"):
        from warbler import pages as _pages

        return getattr(_pages, name)

    if name in ("WarblerError", "ConfigurationError", "PageConfigError"):
        from warbler import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
