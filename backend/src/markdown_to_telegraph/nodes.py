"""Telegraph content node types and tag tables.

A page body is a list of nodes. A node is either a text string or an element
dict ``{"tag": ..., "attrs": {...}, "children": [...]}`` where ``attrs`` and
``children`` are omitted when empty. Trees stay plain JSON so they can be sent
to the API as-is.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypedDict, Union

from .errors import ContentStructureError


class NodeElement(TypedDict, total=False):
    tag: str
    attrs: dict[str, str]
    children: list[Node]


Node = Union[str, NodeElement]

# Always self-closed, never carry children.
VOID_TAGS: frozenset[str] = frozenset({"br", "hr", "img"})

# Tags the Telegraph API accepts in page content.
ALLOWED_TAGS: frozenset[str] = frozenset(
    {
        "a", "aside", "b", "blockquote", "br", "code", "em", "figcaption",
        "figure", "h3", "h4", "hr", "i", "iframe", "img", "li", "ol", "p",
        "pre", "s", "strong", "u", "ul", "video",
    }
)

# Attributes the Telegraph API keeps on elements.
ALLOWED_ATTRS: frozenset[str] = frozenset({"href", "src"})


def make_element(tag: str, attrs: Mapping[str, str] | None = None, children: list[Node] | None = None) -> NodeElement:
    """Build an element, omitting empty ``attrs``/``children``."""
    element: NodeElement = {"tag": tag}
    if attrs:
        element["attrs"] = dict(attrs)
    if children and tag not in VOID_TAGS:
        element["children"] = children
    return element


def ensure_node_list(nodes: Any) -> list[Any]:
    """Fail fast when ``nodes`` is not a node list."""
    if not isinstance(nodes, list):
        raise ContentStructureError(f"Expected a list of content nodes, got {type(nodes).__name__}")
    return nodes


def ensure_element(node: Any) -> Mapping[str, Any]:
    if not isinstance(node, Mapping) or not isinstance(node.get("tag"), str):
        raise ContentStructureError(f"Expected a text node or an element with a 'tag', got {node!r}")
    return node


def iter_tags(nodes: Iterable[Node]) -> Iterable[str]:
    """Yield every element tag in document order."""
    for node in ensure_node_list(nodes):
        if isinstance(node, str):
            continue
        element = ensure_element(node)
        yield element["tag"]
        yield from iter_tags(element.get("children") or [])


def disallowed_tags(nodes: list[Node], allowed_tags: frozenset[str] = ALLOWED_TAGS) -> list[str]:
    """Return sorted distinct tags in ``nodes`` that are not in ``allowed_tags``."""
    return sorted({tag for tag in iter_tags(nodes) if tag not in allowed_tags})
