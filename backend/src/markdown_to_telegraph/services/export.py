"""Export Telegraph pages (single page or whole account) to Markdown or markup."""

from __future__ import annotations

import logging
from typing import Any, Literal

from ..errors import ContentStructureError, TelegraphError
from . import telegraph_client
from .node_serializers import nodes_to_html, nodes_to_markdown
from .telegraph_client import MAX_PAGE_LIST_LIMIT

logger = logging.getLogger(__name__)

ExportFormat = Literal["markdown", "html"]


def _render(content: list[Any], export_format: str) -> str:
    if export_format == "markdown":
        return nodes_to_markdown(content)
    if export_format == "html":
        return nodes_to_html(content)
    raise ValueError(f"Unsupported export format: {export_format!r}")


def export_page(path: str, export_format: ExportFormat = "markdown") -> dict[str, Any]:
    """Fetch page ``path`` with content and render it. Returns title, path, url, format, content."""
    if export_format not in ("markdown", "html"):
        raise ValueError(f"Unsupported export format: {export_format!r}")
    page = telegraph_client.get_page(path, return_content=True)
    if page.get("content") is None:
        raise TelegraphError(f"Page content not returned for {path}")
    return {
        "title": page.get("title", ""),
        "path": page.get("path", path),
        "url": page.get("url", ""),
        "format": export_format,
        "content": _render(page["content"], export_format),
    }


def backup_account(access_token: str, export_format: ExportFormat = "markdown", limit: int = MAX_PAGE_LIST_LIMIT) -> dict[str, Any]:
    """Export every page of an account (up to ``limit``). Pages that fail to fetch or render are skipped."""
    if export_format not in ("markdown", "html"):
        raise ValueError(f"Unsupported export format: {export_format!r}")
    page_list = telegraph_client.get_page_list(access_token, offset=0, limit=min(limit, MAX_PAGE_LIST_LIMIT))

    pages: list[dict[str, Any]] = []
    for info in page_list.get("pages", []):
        path = info.get("path", "")
        try:
            page = telegraph_client.get_page(path, return_content=True)
            if page.get("content") is None:
                logger.info("Skipping page %s: no content returned", path)
                continue
            content = _render(page["content"], export_format)
        except (TelegraphError, ContentStructureError):
            logger.exception("Failed to export page %s", path)
            continue
        pages.append(
            {
                "title": page.get("title", ""),
                "path": page.get("path", path),
                "url": page.get("url", ""),
                "content": content,
            }
        )

    return {
        "total_count": page_list.get("total_count", len(pages)),
        "exported_count": len(pages),
        "format": export_format,
        "pages": pages,
    }
