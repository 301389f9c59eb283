"""Turn caller content (node list, JSON text, markup or Markdown) into a node list."""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

from ..errors import ContentStructureError
from ..nodes import Node
from .html_parser import html_to_nodes
from .markdown_parser import markdown_to_html

logger = logging.getLogger(__name__)

ContentFormat = Literal["html", "markdown"]
CONTENT_FORMATS: tuple[str, ...] = ("html", "markdown")


def parse_content(content: str | list[Node], content_format: ContentFormat = "html") -> list[Any]:
    """Return a node list for ``content``.

    - A list is taken to already be a node tree and returned unchanged.
    - A string that parses as a JSON array is returned as that array (a tree
      that was serialized to text). Any other string is converted according to
      ``content_format``.
    """
    if isinstance(content, list):
        return content
    if not isinstance(content, str):
        raise ContentStructureError(f"Content must be a string or a node list, got {type(content).__name__}")
    if content_format not in CONTENT_FORMATS:
        raise ValueError(f"Unsupported content format: {content_format!r} (expected one of {CONTENT_FORMATS})")

    try:
        parsed = json.loads(content)
    except (ValueError, RecursionError):
        parsed = None
    if isinstance(parsed, list):
        logger.debug("Content parsed as a JSON node array (%d nodes)", len(parsed))
        return parsed

    markup = markdown_to_html(content) if content_format == "markdown" else content
    return html_to_nodes(markup)
