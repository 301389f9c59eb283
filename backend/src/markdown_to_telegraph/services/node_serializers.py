"""Content node tree → JSON value / markup / Markdown.

The three serializers are independent of each other. Markdown output is lossy
on purpose: ordered and unordered lists both come out as ``- item`` lines,
images come out as ``![image](src)`` (the alt text lives in the figcaption,
which is dropped), and unknown tags keep only their children.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from ..nodes import VOID_TAGS, Node, ensure_element, ensure_node_list


def nodes_to_json(nodes: list[Node]) -> list[Any]:
    """Copy a tree into plain lists/dicts, omitting empty attrs/children."""
    result: list[Any] = []
    for node in ensure_node_list(nodes):
        if isinstance(node, str):
            result.append(node)
            continue
        element = ensure_element(node)
        out: dict[str, Any] = {"tag": element["tag"]}
        if element.get("attrs"):
            out["attrs"] = dict(element["attrs"])
        if element.get("children"):
            out["children"] = nodes_to_json(element["children"])
        result.append(out)
    return result


def _quote(value: str) -> str:
    # Values holding a double quote can only have come from a single-quoted attribute.
    return f"'{value}'" if '"' in value else f'"{value}"'


def _render_attrs(attrs: Mapping[str, str] | None) -> str:
    if not attrs:
        return ""
    return " " + " ".join(f"{key}={_quote(value)}" for key, value in attrs.items())


def nodes_to_html(nodes: list[Node]) -> str:
    """Render a tree as markup. Text is emitted as-is (no escaping)."""
    parts: list[str] = []
    for node in ensure_node_list(nodes):
        if isinstance(node, str):
            parts.append(node)
            continue
        element = ensure_element(node)
        tag = element["tag"]
        attrs = _render_attrs(element.get("attrs"))
        if tag in VOID_TAGS:
            parts.append(f"<{tag}{attrs}/>")
        else:
            children = nodes_to_html(element.get("children") or [])
            parts.append(f"<{tag}{attrs}>{children}</{tag}>")
    return "".join(parts)


def _src(element: Mapping[str, Any]) -> str:
    return (element.get("attrs") or {}).get("src", "")


# tag -> (element, rendered children) -> markdown
_MARKDOWN_RULES: dict[str, Callable[[Mapping[str, Any], str], str]] = {
    "h3": lambda _e, c: f"\n# {c}\n",
    "h4": lambda _e, c: f"\n## {c}\n",
    "p": lambda _e, c: f"\n{c}\n",
    "b": lambda _e, c: f"**{c}**",
    "strong": lambda _e, c: f"**{c}**",
    "i": lambda _e, c: f"*{c}*",
    "em": lambda _e, c: f"*{c}*",
    "s": lambda _e, c: f"~~{c}~~",
    "u": lambda _e, c: f"__{c}__",
    "a": lambda e, c: f"[{c}]({(e.get('attrs') or {}).get('href', '')})",
    "img": lambda e, _c: f"![image]({_src(e)})",
    "ul": lambda _e, c: f"\n{c}",
    "ol": lambda _e, c: f"\n{c}",
    "li": lambda _e, c: f"- {c}\n",
    "blockquote": lambda _e, c: f"\n> {c}\n",
    "aside": lambda _e, c: f"\n> {c}\n",
    "code": lambda _e, c: f"`{c}`",
    "pre": lambda _e, c: f"\n```\n{c}\n```\n",
    "br": lambda _e, _c: "\n",
    "hr": lambda _e, _c: "\n---\n",
    "figure": lambda _e, c: c,
    "figcaption": lambda _e, _c: "",
    "video": lambda e, _c: f"\n[video]({_src(e)})\n",
    "iframe": lambda e, _c: f"\n[iframe]({_src(e)})\n",
}


def nodes_to_markdown(nodes: list[Node]) -> str:
    """Render a tree as Markdown."""
    parts: list[str] = []
    for node in ensure_node_list(nodes):
        if isinstance(node, str):
            parts.append(node)
            continue
        element = ensure_element(node)
        children = nodes_to_markdown(element.get("children") or [])
        rule = _MARKDOWN_RULES.get(element["tag"])
        parts.append(rule(element, children) if rule else children)
    return "".join(parts)
