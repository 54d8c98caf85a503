"""PageNode: one node of the route tree.

Unlike most warbler types, PageNode is mutable: the localization pass
rewrites ``path``, ``name`` and ``children`` in place and appends
generated siblings next to it.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

# Keys with a dedicated PageNode field; everything else lands in ``extra``
_KNOWN_KEYS = frozenset({"name", "path", "file", "children", "redirect", "meta"})


@dataclass(slots=True)
class PageNode:
    """A route definition as produced by page discovery.

    Attributes:
        path: URL segment, relative to the parent (absolute at the root).
        name: Optional route name, also the key into the global override table.
        file: Page source reference, read only by the page-config reader.
        children: Nested routes, in order.
        redirect: Redirect target, if the page redirects.
        meta: Free-form route metadata.
        extra: Any other host-framework keys, preserved as given.
        given_keys: Keys present in the mapping the node was built from;
            ``to_dict()`` keeps them even when their value is empty.
    """

    path: str
    name: str | None = None
    file: str | None = None
    children: list["PageNode"] = field(default_factory=list)
    redirect: Any = None
    meta: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)
    given_keys: frozenset[str] = field(default=frozenset(), compare=False, repr=False)

    @property
    def is_redirect_only(self) -> bool:
        """True for a page that exists only to redirect elsewhere."""
        return not self.file and not self.children and bool(self.redirect)

    def copy(self, **changes: Any) -> "PageNode":
        """Return a deep copy that shares no mutable state with this node."""
        return replace(copy.deepcopy(self), **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PageNode":
        """Build a node (and its subtree) from a host-framework mapping."""
        return cls(
            path=data.get("path", ""),
            name=data.get("name"),
            file=data.get("file"),
            children=[cls.from_mapping(child) for child in data.get("children") or ()],
            redirect=data.get("redirect"),
            meta=dict(data.get("meta") or {}),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
            given_keys=frozenset(data) & _KNOWN_KEYS,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the nested-mapping form.

        Empty fields are omitted unless the source mapping had them.
        """
        result: dict[str, Any] = {"path": self.path}
        for key, value in (("name", self.name), ("file", self.file), ("redirect", self.redirect)):
            if value is not None or key in self.given_keys:
                result[key] = value
        if self.meta or "meta" in self.given_keys:
            result["meta"] = dict(self.meta)
        result.update(self.extra)
        if self.children or "children" in self.given_keys:
            result["children"] = [child.to_dict() for child in self.children]
        return result


def count_pages(pages: list[PageNode]) -> int:
    """Count every node in a forest, children included."""
    return sum(1 + count_pages(page.children) for page in pages)
