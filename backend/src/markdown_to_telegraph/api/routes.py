"""API routes: content conversion, templates, publishing and export."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from .. import config
from ..errors import TelegraphError
from ..models import (
    AccountBackup,
    BackupRequest,
    ConvertRequest,
    ConvertResponse,
    CreatePageRequest,
    ExportedPage,
    TemplateListResponse,
    TemplateRenderRequest,
    TemplateRenderResponse,
)
from ..nodes import disallowed_tags
from ..services.content_parser import parse_content
from ..services.export import backup_account, export_page
from ..services.node_serializers import nodes_to_html, nodes_to_json, nodes_to_markdown
from ..services.telegraph_client import create_page
from ..services.templates import create_from_template, get_template, list_templates

router = APIRouter(prefix="/api", tags=["api"])


def _access_token(token: str | None) -> str:
    token = (token or "").strip() or config.TELEGRAPH_ACCESS_TOKEN
    if not token:
        raise HTTPException(400, "Missing access_token (set in request or TELEGRAPH_ACCESS_TOKEN)")
    return token


@router.post("/convert", response_model=ConvertResponse)
async def api_convert(body: ConvertRequest):
    """Convert content to a node tree, markup or Markdown."""
    try:
        nodes = parse_content(body.content, body.input_format)
        bad = disallowed_tags(nodes)
    except (TypeError, ValueError) as e:
        raise HTTPException(400, str(e))
    if body.strict and bad:
        raise HTTPException(400, f"Content uses tags Telegraph does not accept: {', '.join(bad)}")
    result: Any
    if body.output_format == "html":
        result = nodes_to_html(nodes)
    elif body.output_format == "markdown":
        result = nodes_to_markdown(nodes)
    else:
        result = nodes_to_json(nodes)
    return ConvertResponse(output_format=body.output_format, result=result, disallowed_tags=bad)


@router.get("/templates", response_model=TemplateListResponse)
async def api_templates_list():
    return TemplateListResponse(templates=list_templates())


@router.post("/templates/{name}", response_model=TemplateRenderResponse)
async def api_template_render(name: str, body: TemplateRenderRequest):
    """Render template ``name`` with ``data`` into a node tree."""
    if get_template(name) is None:
        raise HTTPException(404, "Template not found")
    try:
        nodes = create_from_template(name, body.data)
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(400, str(e))
    return TemplateRenderResponse(nodes=nodes)


@router.post("/pages")
async def api_create_page(body: CreatePageRequest):
    """Publish a page. Returns the Telegraph page object."""
    token = _access_token(body.access_token)
    try:
        return create_page(
            token,
            body.title,
            body.content,
            content_format=body.content_format,
            author_name=body.author_name or config.TELEGRAPH_AUTHOR_NAME,
            author_url=body.author_url or config.TELEGRAPH_AUTHOR_URL,
            return_content=body.return_content,
        )
    except TelegraphError as e:
        raise HTTPException(502, str(e))
    except (TypeError, ValueError) as e:
        raise HTTPException(400, str(e))


@router.get("/pages/{path}/export", response_model=ExportedPage)
async def api_export_page(path: str, format: str = "markdown"):
    try:
        return ExportedPage(**export_page(path, format))
    except TelegraphError as e:
        raise HTTPException(502, str(e))
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.post("/backup", response_model=AccountBackup)
async def api_backup(body: BackupRequest):
    """Export every page of an account."""
    token = _access_token(body.access_token)
    try:
        return AccountBackup(**backup_account(token, body.format, body.limit))
    except TelegraphError as e:
        raise HTTPException(502, str(e))
