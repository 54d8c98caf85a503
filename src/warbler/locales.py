"""Locale and LocaleRegistry.

The registry is computed once from configuration and never mutated.
It answers which locale is the default and which locales need generated
routes at every page.
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Locale:
    """A configured locale.

    Attributes:
        code: Unique locale code used in URLs (e.g. ``"fr"``).
        iso: Optional ISO tag (e.g. ``"fr-FR"``).
        dir: Optional text direction (``"ltr"`` or ``"rtl"``).
        display_name: Optional human-readable name.
    """

    code: str
    iso: str | None = None
    dir: str | None = None
    display_name: str | None = None


class LocaleRegistry:
    """Ordered locales plus the default-locale routing policy.

    Usage::

        registry = LocaleRegistry([Locale("en"), Locale("fr")], "en")
        registry.active_locale_codes  # ("fr",)
    """

    __slots__ = (
        "_active_locale_codes",
        "_codes",
        "default_locale",
        "include_default_locale_route",
        "locales",
    )

    def __init__(
        self,
        locales: Iterable[Locale],
        default_locale_code: str,
        include_default_locale_route: bool = False,
    ) -> None:
        self.locales: tuple[Locale, ...] = tuple(locales)
        self.default_locale: Locale = self._find(default_locale_code) or Locale(
            code=default_locale_code
        )
        self.include_default_locale_route = include_default_locale_route
        self._codes = tuple(locale.code for locale in self.locales)
        self._active_locale_codes = tuple(
            code
            for code in self._codes
            if code != self.default_locale.code or include_default_locale_route
        )

    def _find(self, code: str) -> Locale | None:
        for locale in self.locales:
            if locale.code == code:
                return locale
        return None

    @property
    def codes(self) -> tuple[str, ...]:
        """All configured locale codes, in configured order."""
        return self._codes

    @property
    def active_locale_codes(self) -> tuple[str, ...]:
        """Locale codes that receive a generated route at every page."""
        return self._active_locale_codes

    def is_default(self, code: str) -> bool:
        return code == self.default_locale.code

    def is_in_place_default(self, code: str) -> bool:
        """True for the default locale when it gets no prefixed duplicate.

        This locale is served by the original, mutated page node and
        never by a generated sibling.
        """
        return self.is_default(code) and not self.include_default_locale_route

    def __repr__(self) -> str:
        return (
            f"LocaleRegistry(codes={self._codes!r}, "
            f"default={self.default_locale.code!r}, "
            f"include_default_locale_route={self.include_default_locale_route!r})"
        )
