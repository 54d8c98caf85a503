"""Tests for warbler.routing.overrides — the global override table."""

import pytest

from warbler.errors import ConfigurationError
from warbler.routing.overrides import (
    Absent,
    CustomPaths,
    Excluded,
    GlobalOverrideTable,
    parse_override,
)


class TestParseOverride:
    def test_false_excludes(self) -> None:
        assert parse_override("about", False) == Excluded()

    def test_true_is_absent(self) -> None:
        assert parse_override("about", True) == Absent()

    def test_none_is_absent(self) -> None:
        assert parse_override("about", None) == Absent()

    def test_mapping_is_custom(self) -> None:
        entry = parse_override("about", {"fr": "/a-propos"})
        assert isinstance(entry, CustomPaths)
        assert dict(entry.paths) == {"fr": "/a-propos"}

    def test_empty_paths_dropped(self) -> None:
        entry = parse_override("about", {"fr": "/a-propos", "de": ""})
        assert isinstance(entry, CustomPaths)
        assert dict(entry.paths) == {"fr": "/a-propos"}

    def test_paths_read_only(self) -> None:
        entry = parse_override("about", {"fr": "/a-propos"})
        assert isinstance(entry, CustomPaths)
        with pytest.raises(TypeError):
            entry.paths["de"] = "/x"  # type: ignore[index]

    def test_rejects_other_types(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_override("about", "/about")
        assert "'about'" in str(exc_info.value)
        assert "str" in str(exc_info.value)

    def test_rejects_non_string_paths(self) -> None:
        with pytest.raises(ConfigurationError, match="path strings"):
            parse_override("about", {"fr": 42})


class TestGlobalOverrideTable:
    def test_lookup(self) -> None:
        table = GlobalOverrideTable.from_mapping({"about": False, "shop": {"fr": "/boutique"}})
        assert table.lookup("about") == Excluded()
        assert isinstance(table.lookup("shop"), CustomPaths)

    def test_unknown_name_absent(self) -> None:
        table = GlobalOverrideTable.from_mapping({"about": False})
        assert table.lookup("contact") == Absent()

    def test_none_name_absent(self) -> None:
        table = GlobalOverrideTable.from_mapping({"about": False})
        assert table.lookup(None) == Absent()

    def test_from_none(self) -> None:
        table = GlobalOverrideTable.from_mapping(None)
        assert len(table) == 0

    def test_contains(self) -> None:
        table = GlobalOverrideTable.from_mapping({"about": False})
        assert "about" in table
        assert "contact" not in table
