"""Filesystem page discovery for the pages/ directory.

Walks the pages directory tree and builds the nested :class:`PageNode`
tree the localization engine consumes:

- ``.py`` files (not starting with ``_``) are pages
- ``page.py`` / ``index.py`` map to the directory URL
- ``blog.py`` next to a ``blog/`` directory is a parent route whose
  children are the pages inside ``blog/``
- A directory without a sibling page file is flattened into its parent

Directory and file names wrapped in ``{braces}`` become ``:param``
segments.  Page modules are never imported; their embedded route config
is read later by the page-config reader.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from warbler.routing.page import PageNode

logger = logging.getLogger("warbler.pages")

# Page stems that map to their directory's URL
_INDEX_STEMS = frozenset({"page", "index"})

# Regex matching {param} directory and file names
_PARAM_RE = re.compile(r"^\{(\w+)\}$")


def discover_page_tree(
    pages_dir: str | Path,
    *,
    root_dir: str | Path | None = None,
) -> list[PageNode]:
    """Walk a pages directory and build the route tree.

    Args:
        pages_dir: Path to the ``pages/`` directory.
        root_dir: Directory page ``file`` references are made relative
            to.  Absolute paths are used when omitted.

    Returns:
        Top-level :class:`PageNode` list with absolute paths; nested
        children carry paths relative to their parent.
    """
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Pages directory not found: {root}")

    base = Path(root_dir).resolve() if root_dir is not None else None
    pages = _walk_directory(root, base, url_parts=[], name_parts=[], nested=False)
    logger.debug("Discovered %d top-level page(s) in %s", len(pages), root)
    return pages


def _walk_directory(
    directory: Path,
    base: Path | None,
    *,
    url_parts: list[str],
    name_parts: list[str],
    nested: bool,
) -> list[PageNode]:
    """Recursively collect the pages of one directory level.

    Args:
        directory: Current directory being walked.
        base: Directory that ``file`` references are relative to.
        url_parts: Path segments accumulated since the nearest parent route.
        name_parts: Name segments accumulated since the pages root.
        nested: True inside a parent route (paths become relative).
    """
    pages: list[PageNode] = []
    subdirs = {
        item.name: item
        for item in sorted(directory.iterdir())
        if item.is_dir() and not item.name.startswith(("_", "."))
    }

    for item in sorted(directory.iterdir()):
        if not item.is_file() or item.suffix != ".py" or item.name.startswith("_"):
            continue

        if item.stem in _INDEX_STEMS:
            segments = url_parts
            # blog/page.py -> "blog-index", keeping "blog" for the parent route
            if not name_parts or (nested and not url_parts):
                names = [*name_parts, "index"]
            else:
                names = name_parts
        else:
            segments = [*url_parts, _segment(item.stem)]
            names = [*name_parts, _name_part(item.stem)]

        page = PageNode(
            path=_join(segments, nested),
            name="-".join(names),
            file=_file_ref(item, base),
        )

        # blog.py + blog/ -> parent route with nested children
        child_dir = subdirs.pop(item.stem, None) if item.stem not in _INDEX_STEMS else None
        if child_dir is not None:
            page.children = _walk_directory(
                child_dir,
                base,
                url_parts=[],
                name_parts=names,
                nested=True,
            )
        pages.append(page)

    for name, subdir in subdirs.items():
        pages.extend(
            _walk_directory(
                subdir,
                base,
                url_parts=[*url_parts, _segment(name)],
                name_parts=[*name_parts, _name_part(name)],
                nested=nested,
            )
        )
    return pages


def _segment(name: str) -> str:
    """Map a file or directory name to a URL segment."""
    match = _PARAM_RE.match(name)
    if match:
        return ":" + match.group(1)
    return name


def _name_part(name: str) -> str:
    match = _PARAM_RE.match(name)
    if match:
        return match.group(1)
    return name


def _join(segments: list[str], nested: bool) -> str:
    joined = "/".join(segments)
    return joined if nested else "/" + joined


def _file_ref(file: Path, base: Path | None) -> str:
    if base is None:
        return str(file)
    try:
        return str(file.relative_to(base))
    except ValueError:
        return str(file)
