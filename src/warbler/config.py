"""Localization configuration.

I18nConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from warbler.errors import ConfigurationError
from warbler.locales import Locale
from warbler.routing.overrides import GlobalOverrideTable

# camelCase keys accepted by from_mapping(), as written in JS-style configs
_KEY_ALIASES = {
    "defaultLocale": "default_locale",
    "includeDefaultLocaleRoute": "include_default_locale_route",
    "globalLocaleRoutes": "global_locale_routes",
    "rootDir": "root_dir",
    "displayName": "display_name",
}


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Localization configuration. Immutable after creation.

    Override what you need::

        config = I18nConfig(
            locales=(Locale("en"), Locale("fr")),
            default_locale="en",
            global_locale_routes={"about": {"fr": "/a-propos"}},
        )
    """

    # Locales
    locales: tuple[Locale, ...] = ()
    default_locale: str = "en"
    include_default_locale_route: bool = False  # Also serve the default locale under /{code}/

    # Page name -> False (not localized) or {locale code: custom path}
    global_locale_routes: Mapping[str, Mapping[str, str] | bool] = field(default_factory=dict)

    # Page ``file`` references resolve against this directory
    root_dir: str | Path = "."

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for locale in self.locales:
            if locale.code in seen:
                msg = f"Duplicate locale code {locale.code!r} in locales."
                raise ConfigurationError(msg)
            seen.add(locale.code)
        # Validates value shapes; the table itself is rebuilt per run
        GlobalOverrideTable.from_mapping(self.global_locale_routes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "I18nConfig":
        """Build a config from plain data (parsed TOML or JSON).

        Keys may be snake_case or camelCase.  Locales may be given as
        bare codes (``"fr"``) or as tables (``{code = "fr", iso = "fr-FR"}``).
        """
        values = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        unknown = set(values) - {
            "locales",
            "default_locale",
            "include_default_locale_route",
            "global_locale_routes",
            "root_dir",
        }
        if unknown:
            msg = f"Unknown i18n config key(s): {', '.join(sorted(unknown))}."
            raise ConfigurationError(msg)

        if "locales" in values:
            values["locales"] = tuple(_parse_locale(item) for item in values["locales"])
        return cls(**values)


def _parse_locale(item: Any) -> Locale:
    if isinstance(item, str):
        return Locale(code=item)
    if isinstance(item, Mapping) and isinstance(item.get("code"), str):
        fields = {_KEY_ALIASES.get(key, key): value for key, value in item.items()}
        try:
            return Locale(**fields)
        except TypeError as exc:
            msg = f"Invalid locale entry {dict(item)!r}: {exc}"
            raise ConfigurationError(msg) from exc
    msg = f"Locale entries must be a code or a table with a 'code' key, got {item!r}."
    raise ConfigurationError(msg)


def load_config(path: str | Path) -> I18nConfig:
    """Load an :class:`I18nConfig` from a TOML file.

    For a ``pyproject.toml`` the ``[tool.warbler]`` table is used;
    any other file is read as a whole.  A relative ``root_dir`` is
    resolved against the file's directory.
    """
    config_path = Path(path)
    with config_path.open("rb") as fh:
        data = tomllib.load(fh)

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("warbler")
        if data is None:
            msg = f"No [tool.warbler] table in {config_path}."
            raise ConfigurationError(msg)

    config = I18nConfig.from_mapping(data)
    root_dir = Path(config.root_dir)
    if not root_dir.is_absolute():
        return replace(config, root_dir=config_path.parent / root_dir)
    return config
