"""Tokenize Telegraph-style markup into open/close/text events.

This is a deliberately small scanner, not an HTML parser: a tag is ``<name ...>``
or ``</name>``, anything else (comments, stray ``<``, doctype) is text. No
entity decoding is done.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

TokenKind = Literal["open", "close", "text"]

# tag-like run | longest run of non-"<" | a "<" that starts no tag
_TOKEN_RE = re.compile(r"<(/?)([\w-]+)([^>]*)>|([^<]+)|(<)")
# Only quoted name="value" / name='value' pairs are recognised.
_ATTR_RE = re.compile(r"""([\w-]+)=(?:"([^"]*)"|'([^']*)')""")


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    tag: str = ""
    raw_attrs: str = ""
    value: str = ""


def tokenize(markup: str) -> Iterator[Token]:
    """Yield tokens left to right. Adjacent text runs are merged into one token."""
    pending: list[str] = []
    for match in _TOKEN_RE.finditer(markup):
        closing, name, raw_attrs, text, stray = match.groups()
        if name is None:
            pending.append(text if text is not None else stray)
            continue
        if pending:
            yield Token("text", value="".join(pending))
            pending = []
        if closing:
            yield Token("close", tag=name.lower())
        else:
            yield Token("open", tag=name.lower(), raw_attrs=raw_attrs)
    if pending:
        yield Token("text", value="".join(pending))


def parse_attrs(raw_attrs: str) -> dict[str, str]:
    """Parse quoted attributes in source order; unquoted or malformed ones are dropped."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(raw_attrs):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value
    return attrs


def is_self_closing(raw_attrs: str) -> bool:
    """True when the tag was written with a trailing ``/`` (``<span/>``, ``<img src="x" />``)."""
    return raw_attrs.rstrip().endswith("/")
