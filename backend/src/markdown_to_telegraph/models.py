"""Pydantic models for API request/response."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    content: str | list[Any]
    input_format: Literal["html", "markdown"] = "html"
    output_format: Literal["nodes", "html", "markdown"] = "nodes"
    strict: bool = False


class ConvertResponse(BaseModel):
    output_format: str
    result: Any
    disallowed_tags: list[str] = Field(default_factory=list)


class TemplateFieldItem(BaseModel):
    name: str
    description: str
    required: bool
    type: str


class TemplateItem(BaseModel):
    name: str
    description: str
    fields: list[TemplateFieldItem]


class TemplateListResponse(BaseModel):
    templates: list[TemplateItem]


class TemplateRenderRequest(BaseModel):
    data: dict[str, Any] = Field(default_factory=dict)


class TemplateRenderResponse(BaseModel):
    nodes: list[Any]


class CreatePageRequest(BaseModel):
    title: str
    content: str | list[Any]
    content_format: Literal["html", "markdown"] = "html"
    access_token: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    return_content: bool = False


class ExportedPage(BaseModel):
    title: str
    path: str
    url: str
    format: str
    content: str


class BackupRequest(BaseModel):
    access_token: str | None = None
    format: Literal["markdown", "html"] = "markdown"
    limit: int = Field(default=200, ge=1, le=200)


class BackupPage(BaseModel):
    title: str
    path: str
    url: str
    content: str


class AccountBackup(BaseModel):
    total_count: int
    exported_count: int
    format: str
    pages: list[BackupPage]
