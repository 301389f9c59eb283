"""Parse Telegraph-style markup into a content node tree.

Text policy: a text run is kept verbatim when it has any non-whitespace
character and dropped when it is whitespace only. Unmatched closing tags are
ignored and unterminated tags are closed at end of input, so parsing never
fails.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..nodes import VOID_TAGS, Node, NodeElement, make_element
from .html_tokenizer import Token, is_self_closing, parse_attrs, tokenize

logger = logging.getLogger(__name__)


def html_to_nodes(html: str) -> list[Node]:
    """Parse markup into a node list."""
    return build_tree(tokenize(html))


def build_tree(tokens: Iterable[Token]) -> list[Node]:
    """Build a node list from tokenizer events."""
    builder = _NodeTreeBuilder()
    for token in tokens:
        builder.feed(token)
    return builder.get_nodes()


class _NodeTreeBuilder:
    """Resolve nesting with an explicit stack of open elements."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self._stack: list[tuple[str, dict[str, str], list[Node]]] = []  # (tag, attrs, children)

    @property
    def _current(self) -> list[Node]:
        return self._stack[-1][2] if self._stack else self.nodes

    def get_nodes(self) -> list[Node]:
        if self._stack:
            logger.debug("Auto-closing %d unterminated tag(s): %s", len(self._stack), [f[0] for f in self._stack])
        while self._stack:
            self._close_top()
        return self.nodes

    def feed(self, token: Token) -> None:
        if token.kind == "text":
            self.handle_data(token.value)
        elif token.kind == "open":
            self.handle_starttag(token.tag, token.raw_attrs)
        else:
            self.handle_endtag(token.tag)

    def handle_data(self, data: str) -> None:
        if data.strip():
            self._current.append(data)

    def handle_starttag(self, tag: str, raw_attrs: str) -> None:
        attrs = parse_attrs(raw_attrs)
        if tag in VOID_TAGS or is_self_closing(raw_attrs):
            self._current.append(make_element(tag, attrs))
            return
        self._stack.append((tag, attrs, []))

    def handle_endtag(self, tag: str) -> None:
        # Void tags never pushed a frame; a stray close with nothing open is dropped.
        if tag in VOID_TAGS or not self._stack:
            return
        self._close_top()

    def _close_top(self) -> None:
        tag, attrs, children = self._stack.pop()
        element: NodeElement = make_element(tag, attrs, children)
        self._current.append(element)
