"""Warbler exception hierarchy.

Shared across config, page extraction, and the routing engine so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class WarblerError(Exception):
    """Base for all warbler-specific errors."""


class ConfigurationError(WarblerError):
    """Raised when i18n configuration is invalid.

    Typically raised while building ``I18nConfig`` or the global
    override table, before any page is touched.
    """


@dataclass(frozen=True, slots=True)
class PageConfigError(WarblerError):
    """An embedded page route config that cannot be extracted.

    Fatal for the whole build: the override index must be complete
    before localization, so extraction failures are never swallowed.
    """

    file_path: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.file_path}: {self.detail}"
        return self.file_path
