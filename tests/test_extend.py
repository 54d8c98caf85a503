"""Tests for warbler.extend — end-to-end localization of a route tree."""

import logging
from pathlib import Path

import pytest

from warbler import I18nConfig, Locale, discover_page_tree, extend_page_dicts, extend_pages
from warbler.errors import PageConfigError
from warbler.pages.extractor import PageRouteConfig
from warbler.routing.page import PageNode

EN_FR = (Locale("en"), Locale("fr"))


def _write(root: Path, rel: str, source: str) -> None:
    file = root / rel
    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text(source, encoding="utf-8")


class TestExtendPages:
    def test_scenario_default_mode(self) -> None:
        pages = extend_pages([PageNode(path="/about", name="about")], I18nConfig(locales=EN_FR))
        assert [(p.path, p.name) for p in pages] == [
            ("/about", "about"),
            ("/fr/about", "localized-about-fr"),
        ]

    def test_global_override_beats_embedded(self, tmp_path: Path) -> None:
        _write(tmp_path, "about.py", "define_i18n_route(locale_routes={'fr': '/embarque'})\n")
        config = I18nConfig(
            locales=EN_FR,
            global_locale_routes={"about": {"fr": "/a-propos"}},
            root_dir=tmp_path,
        )
        pages = extend_pages([PageNode(path="/about", name="about", file="about.py")], config)
        assert pages[1].path == "/fr/a-propos"

    def test_embedded_config_used(self, tmp_path: Path) -> None:
        _write(tmp_path, "about.py", "define_i18n_route(locale_routes={'fr': '/a-propos'})\n")
        config = I18nConfig(locales=EN_FR, root_dir=tmp_path)
        pages = extend_pages([PageNode(path="/about", name="about", file="about.py")], config)
        assert [(p.path, p.name) for p in pages] == [
            ("/about", "about"),
            ("/fr/a-propos", "localized-about-fr"),
        ]

    def test_custom_extractor(self) -> None:
        class _Static:
            def extract(self, file_contents: str, file_path: str) -> PageRouteConfig | None:
                return PageRouteConfig({"fr": "/statique"})

        config = I18nConfig(locales=EN_FR, root_dir=Path(__file__).parent)
        page = PageNode(path="/about", name="about", file=Path(__file__).name)
        pages = extend_pages([page], config, extractor=_Static())
        assert pages[1].path == "/fr/statique"

    def test_malformed_page_leaves_tree_untouched(self, tmp_path: Path) -> None:
        _write(tmp_path, "broken.py", "define_i18n_route(locale_routes=ROUTES)\n")
        pages = [
            PageNode(path="/about", name="about"),
            PageNode(path="/broken", name="broken", file="broken.py"),
        ]
        before = [page.copy() for page in pages]

        with pytest.raises(PageConfigError, match="broken.py"):
            extend_pages(pages, I18nConfig(locales=EN_FR, root_dir=tmp_path))
        assert pages == before

    def test_missing_page_file_is_fatal(self, tmp_path: Path) -> None:
        pages = [PageNode(path="/about", name="about", file="about.py")]
        with pytest.raises(FileNotFoundError):
            extend_pages(pages, I18nConfig(locales=EN_FR, root_dir=tmp_path))
        assert len(pages) == 1

    def test_unknown_default_locale(self) -> None:
        config = I18nConfig(locales=EN_FR, default_locale="es")
        pages = extend_pages([PageNode(path="/about", name="about")], config)
        assert [(p.path, p.name) for p in pages] == [
            ("/about", "about"),
            ("/:locale(en|fr)/about", "localized-about-en"),
        ]

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="warbler.routing"):
            extend_pages([PageNode(path="/about", name="about")], I18nConfig(locales=EN_FR))
        assert "Localized 1 route(s) into 2" in caplog.text


class TestExtendPageDicts:
    def test_round_trip(self) -> None:
        result = extend_page_dicts(
            [{"path": "/about", "name": "about", "meta": {"layout": "wide"}}],
            I18nConfig(locales=EN_FR),
        )
        assert result == [
            {"path": "/about", "name": "about", "meta": {"layout": "wide"}},
            {"path": "/fr/about", "name": "localized-about-fr", "meta": {"layout": "wide"}},
        ]

    def test_exclusion_returns_input(self) -> None:
        pages = [{"path": "/about", "name": "about", "redirect": "/x", "file": None}]
        result = extend_page_dicts(
            pages,
            I18nConfig(locales=EN_FR, global_locale_routes={"about": False}),
        )
        assert result == pages

    def test_empty_fields_kept(self) -> None:
        pages = [{"path": "/about", "name": "about", "children": [], "meta": {}}]
        result = extend_page_dicts(pages, I18nConfig(locales=(Locale("en"),)))
        assert result == pages


class TestDiscoveredSite:
    def test_full_site(self, tmp_path: Path) -> None:
        _write(tmp_path, "pages/page.py", "def get():\n    return 'home'\n")
        _write(
            tmp_path,
            "pages/about.py",
            "from warbler.pages import define_i18n_route\n"
            "\n"
            "define_i18n_route(locale_routes={'fr': '/a-propos', 'de': '/ueber-uns'})\n",
        )
        _write(tmp_path, "pages/blog.py", "")
        _write(tmp_path, "pages/blog/page.py", "")
        _write(
            tmp_path,
            "pages/blog/{slug}.py",
            "define_i18n_route(locale_routes={'fr': 'article/:slug'})\n",
        )

        config = I18nConfig(
            locales=(Locale("en"), Locale("fr"), Locale("de")),
            root_dir=tmp_path,
        )
        pages = extend_pages(discover_page_tree(tmp_path / "pages", root_dir=tmp_path), config)

        assert [(p.path, p.name) for p in pages] == [
            ("/about", "about"),
            ("/blog", "blog"),
            ("/", "index"),
            ("/fr/a-propos", "localized-about-fr"),
            ("/de/ueber-uns", "localized-about-de"),
            ("/:locale(fr|de)/blog", "localized-blog-fr"),
            ("/:locale(fr|de)", "localized-index-fr"),
        ]

        grouped_blog = pages[5]
        assert [(c.path, c.name) for c in grouped_blog.children] == [
            ("", "localized-blog-index-fr"),
            ("", "localized-blog-index-de"),
            ("article/:slug", "localized-blog-slug-fr"),
            (":slug", "localized-blog-slug-de"),
        ]
        assert [(c.path, c.name) for c in pages[1].children] == [
            ("", "blog-index"),
            (":slug", "blog-slug"),
        ]

    def test_nested_parents_get_unique_generated_names(self, tmp_path: Path) -> None:
        for rel in ("pages/blog.py", "pages/blog/page.py", "pages/docs.py", "pages/docs/page.py"):
            _write(tmp_path, rel, "")

        pages = extend_pages(
            discover_page_tree(tmp_path / "pages", root_dir=tmp_path),
            I18nConfig(locales=EN_FR, root_dir=tmp_path),
        )

        assert [(p.path, p.name) for p in pages] == [
            ("/blog", "blog"),
            ("/docs", "docs"),
            ("/fr/blog", "localized-blog-fr"),
            ("/fr/docs", "localized-docs-fr"),
        ]
        names = [p.name for p in pages]
        assert len(names) == len(set(names))

    def test_discovered_parent_can_be_excluded(self, tmp_path: Path) -> None:
        for rel in ("pages/blog.py", "pages/blog/page.py", "pages/about.py"):
            _write(tmp_path, rel, "")

        pages = extend_pages(
            discover_page_tree(tmp_path / "pages", root_dir=tmp_path),
            I18nConfig(locales=EN_FR, global_locale_routes={"blog": False}, root_dir=tmp_path),
        )

        assert [(p.path, p.name) for p in pages] == [
            ("/about", "about"),
            ("/blog", "blog"),
            ("/fr/about", "localized-about-fr"),
        ]
        assert [(c.path, c.name) for c in pages[1].children] == [("", "blog-index")]
