"""Telegraph API client: accounts, pages, page lists and views.

Every method is a form-encoded ``POST {TELEGRAPH_API_BASE}/{method}``. The API
answers ``{"ok": true, "result": ...}`` or ``{"ok": false, "error": "..."}``.
All failures surface as ``TelegraphError``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from .. import config
from ..errors import TelegraphError
from ..nodes import Node
from .content_parser import ContentFormat, parse_content

logger = logging.getLogger(__name__)

# Telegraph caps getPageList at 200 pages per call.
MAX_PAGE_LIST_LIMIT = 200


def _encode_params(params: dict[str, Any]) -> dict[str, str]:
    form: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            form[key] = "true" if value else "false"
        elif isinstance(value, (list, dict)):
            form[key] = json.dumps(value, ensure_ascii=False)
        else:
            form[key] = str(value)
    return form


def _api_request(method: str, params: dict[str, Any] | None = None, *, timeout: float | None = None) -> Any:
    url = f"{config.TELEGRAPH_API_BASE}/{method}"
    form = _encode_params(params or {})
    logger.debug("Telegraph %s (%s)", method, ", ".join(k for k in form if k != "access_token"))
    try:
        with httpx.Client(timeout=timeout or config.TELEGRAPH_TIMEOUT) as client:
            resp = client.post(url, data=form)
    except httpx.HTTPError as e:
        raise TelegraphError(f"Request to {method} failed: {e}") from e
    if resp.status_code >= 400:
        raise TelegraphError(f"HTTP error: {resp.status_code} {resp.reason_phrase}")
    try:
        data = resp.json()
    except ValueError as e:
        raise TelegraphError(f"Invalid JSON from {method}: {resp.text[:200]}") from e
    if not isinstance(data, dict) or not data.get("ok"):
        error = data.get("error") if isinstance(data, dict) else None
        raise TelegraphError(error or "Unknown Telegraph API error")
    return data.get("result")


def create_account(short_name: str, author_name: str | None = None, author_url: str | None = None) -> dict[str, Any]:
    """createAccount - returns the account including its access_token."""
    return _api_request(
        "createAccount",
        {"short_name": short_name, "author_name": author_name, "author_url": author_url},
    )


def edit_account_info(
    access_token: str,
    short_name: str | None = None,
    author_name: str | None = None,
    author_url: str | None = None,
) -> dict[str, Any]:
    return _api_request(
        "editAccountInfo",
        {
            "access_token": access_token,
            "short_name": short_name,
            "author_name": author_name,
            "author_url": author_url,
        },
    )


def get_account_info(access_token: str, fields: list[str] | None = None) -> dict[str, Any]:
    """getAccountInfo - ``fields`` picks from short_name, author_name, author_url, auth_url, page_count."""
    return _api_request("getAccountInfo", {"access_token": access_token, "fields": fields})


def revoke_access_token(access_token: str) -> dict[str, Any]:
    """revokeAccessToken - returns the account with a new access_token and auth_url."""
    return _api_request("revokeAccessToken", {"access_token": access_token})


def create_page(
    access_token: str,
    title: str,
    content: str | list[Node],
    *,
    content_format: ContentFormat = "html",
    author_name: str | None = None,
    author_url: str | None = None,
    return_content: bool = False,
) -> dict[str, Any]:
    """createPage - ``content`` may be a node list, markup or Markdown (see ``content_format``)."""
    nodes = parse_content(content, content_format)
    return _api_request(
        "createPage",
        {
            "access_token": access_token,
            "title": title,
            "content": nodes,
            "author_name": author_name,
            "author_url": author_url,
            "return_content": return_content,
        },
    )


def edit_page(
    access_token: str,
    path: str,
    title: str,
    content: str | list[Node],
    *,
    content_format: ContentFormat = "html",
    author_name: str | None = None,
    author_url: str | None = None,
    return_content: bool = False,
) -> dict[str, Any]:
    nodes = parse_content(content, content_format)
    return _api_request(
        "editPage",
        {
            "access_token": access_token,
            "path": path,
            "title": title,
            "content": nodes,
            "author_name": author_name,
            "author_url": author_url,
            "return_content": return_content,
        },
    )


def get_page(path: str, return_content: bool = False) -> dict[str, Any]:
    return _api_request("getPage", {"path": path, "return_content": return_content})


def get_page_list(access_token: str, offset: int = 0, limit: int = 50) -> dict[str, Any]:
    """getPageList - returns ``{"total_count": n, "pages": [...]}``, newest first."""
    return _api_request(
        "getPageList",
        {"access_token": access_token, "offset": offset, "limit": min(limit, MAX_PAGE_LIST_LIMIT)},
    )


def get_views(
    path: str,
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
) -> dict[str, Any]:
    return _api_request("getViews", {"path": path, "year": year, "month": month, "day": day, "hour": hour})
