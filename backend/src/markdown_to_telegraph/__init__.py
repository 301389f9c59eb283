"""Markdown/HTML ⇄ Telegraph content node conversion and publishing."""

from .errors import ContentStructureError, TelegraphError
from .nodes import ALLOWED_ATTRS, ALLOWED_TAGS, VOID_TAGS, Node, NodeElement, disallowed_tags
from .services.content_parser import parse_content
from .services.html_parser import html_to_nodes
from .services.markdown_parser import markdown_to_html
from .services.node_serializers import nodes_to_html, nodes_to_json, nodes_to_markdown

__all__ = [
    "ALLOWED_ATTRS",
    "ALLOWED_TAGS",
    "VOID_TAGS",
    "ContentStructureError",
    "Node",
    "NodeElement",
    "TelegraphError",
    "disallowed_tags",
    "html_to_nodes",
    "markdown_to_html",
    "nodes_to_html",
    "nodes_to_json",
    "nodes_to_markdown",
    "parse_content",
]
