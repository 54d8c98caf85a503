"""Global locale-route overrides as a tagged variant.

Configuration maps a page name to ``False`` (exclude the page) or to a
``{locale: path}`` mapping (custom per-locale paths).  Each entry is
loaded into one of :class:`Excluded`, :class:`CustomPaths` or
:class:`Absent` so dispatch on it can be an exhaustive ``match``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeAlias

from warbler.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Excluded:
    """The page is excluded from localization entirely."""


@dataclass(frozen=True, slots=True)
class CustomPaths:
    """The page has explicit per-locale paths."""

    paths: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class Absent:
    """No global override for the page."""


OverrideEntry: TypeAlias = Excluded | CustomPaths | Absent

EXCLUDED = Excluded()
ABSENT = Absent()


def parse_override(page_name: str, value: Any) -> OverrideEntry:
    """Load one configured override value.

    Raises ``ConfigurationError`` for anything that is not a bool,
    ``None``, or a mapping of locale code to path string.
    """
    if value is False:
        return EXCLUDED
    if value is None or value is True:
        return ABSENT
    if isinstance(value, Mapping):
        paths: dict[str, str] = {}
        for code, path in value.items():
            if not isinstance(code, str) or not isinstance(path, str):
                msg = (
                    f"Global locale route for page {page_name!r} must map locale "
                    f"codes to path strings, got {code!r}: {path!r}."
                )
                raise ConfigurationError(msg)
            if path:
                paths[code] = path
        return CustomPaths(MappingProxyType(paths))
    msg = (
        f"Global locale route for page {page_name!r} must be false or a "
        f"mapping of locale paths, got {type(value).__name__}."
    )
    raise ConfigurationError(msg)


class GlobalOverrideTable:
    """Read-only lookup of page name -> :data:`OverrideEntry`."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, OverrideEntry] | None = None) -> None:
        self._entries: Mapping[str, OverrideEntry] = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "GlobalOverrideTable":
        """Build the table from raw configuration (``{name: False | {...}}``)."""
        return cls({name: parse_override(name, value) for name, value in (data or {}).items()})

    def lookup(self, page_name: str | None) -> OverrideEntry:
        if page_name is None:
            return ABSENT
        return self._entries.get(page_name, ABSENT)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, page_name: object) -> bool:
        return page_name in self._entries
