"""Pure path and route-name builders.

Every path produced here uses a single leading ``/`` and never contains
duplicate separators.  Child routes strip the leading slash afterwards
with :func:`remove_leading_slash` so they stay relative to their parent.
"""

import re
from collections.abc import Sequence

from warbler.locales import Locale

# Runs of two or more separators
_MULTI_SLASH_RE = re.compile(r"/{2,}")

# Prefix shared by every generated route name
LOCALIZED_NAME_PREFIX = "localized"


def normalize_path(path: str) -> str:
    """Normalize a route path.

    Examples::

        ""             -> "/"
        "about"        -> "/about"
        "//blog//x/"   -> "/blog/x"
        "/"            -> "/"
    """
    collapsed = _MULTI_SLASH_RE.sub("/", "/" + path)
    if collapsed != "/":
        collapsed = collapsed.rstrip("/")
    return collapsed


def join_paths(*parts: str) -> str:
    """Join route path parts and normalize the result.

    Unlike :func:`posixpath.join`, an absolute later part does not
    discard the earlier ones: ``join_paths("/blog", "/post")`` is
    ``"/blog/post"``.
    """
    return normalize_path("/".join(parts))


def remove_leading_slash(path: str) -> str:
    return path.lstrip("/")


def should_add_locale_prefix(
    locale: str,
    default_locale: Locale,
    force_prefix: bool,
    include_default_locale_route: bool,
) -> bool:
    """Decide whether a route path for *locale* carries a locale segment.

    Non-default locales are always prefixed.  The default locale is
    prefixed only when its prefixed duplicate is enabled, or when the
    caller forces it (custom-path clones always carry their prefix).
    """
    if locale != default_locale.code:
        return True
    return include_default_locale_route or force_prefix


def build_full_path(locale: str, path: str) -> str:
    """Prefix *path* with a literal locale segment."""
    return join_paths("/", locale, path)


def build_grouped_path(locale_codes: Sequence[str], path: str) -> str:
    """Build one path whose locale segment matches any of *locale_codes*.

    Examples::

        (["fr"], "/about")        -> "/fr/about"
        (["fr", "de"], "/about")  -> "/:locale(fr|de)/about"
    """
    if not locale_codes:
        msg = "build_grouped_path() requires at least one locale code."
        raise ValueError(msg)
    if len(locale_codes) == 1:
        return build_full_path(locale_codes[0], path)
    segment = ":locale(" + "|".join(locale_codes) + ")"
    return join_paths("/", segment, path)


def build_route_name(base_name: str | None, locale: str) -> str:
    return f"{LOCALIZED_NAME_PREFIX}-{base_name or ''}-{locale}"


def localized_name(
    base_name: str | None,
    locale: str,
    *,
    suffix: bool,
    is_default: bool,
) -> str | None:
    """Derive a generated route name.

    The default locale keeps its base name when suffixing is off, so
    named navigation to the default-locale page keeps working.
    """
    if is_default and not suffix:
        return base_name
    return build_route_name(base_name, locale)
