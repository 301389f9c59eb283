"""Page templates: fill a fixed markup layout from field data, then parse it to nodes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

from ..nodes import Node
from .html_parser import html_to_nodes


@dataclass(frozen=True)
class TemplateField:
    name: str
    description: str
    required: bool
    type: Literal["string", "string[]"] = "string"


@dataclass(frozen=True)
class Template:
    name: str
    description: str
    fields: tuple[TemplateField, ...]
    generate: Callable[[dict[str, Any]], str]


def _items(tag: str, items: list[str]) -> str:
    return f"<{tag}>\n" + "".join(f"<li>{item}</li>\n" for item in items) + f"</{tag}>\n"


def _blog_post(data: dict[str, Any]) -> str:
    html = f"<h3>{data['title']}</h3>\n<p>{data['intro']}</p>\n"
    for section in data["sections"]:
        html += f"<h4>{section['heading']}</h4>\n<p>{section['content']}</p>\n"
    if data.get("conclusion"):
        html += f"<h4>Conclusion</h4>\n<p>{data['conclusion']}</p>\n"
    return html


def _documentation(data: dict[str, Any]) -> str:
    html = f"<h3>{data['title']}</h3>\n<h4>Overview</h4>\n<p>{data['overview']}</p>\n"
    if data.get("installation"):
        html += f"<h4>Installation</h4>\n<pre>{data['installation']}</pre>\n"
    if data.get("usage"):
        html += f"<h4>Usage</h4>\n<p>{data['usage']}</p>\n"
    if data.get("api_reference"):
        html += "<h4>API Reference</h4>\n" + _items("ul", data["api_reference"])
    return html


def _article(data: dict[str, Any]) -> str:
    html = f"<h3>{data['title']}</h3>\n"
    if data.get("subtitle"):
        html += f"<h4>{data['subtitle']}</h4>\n"
    for paragraph in data["body"]:
        html += f"<p>{paragraph}</p>\n"
    return html


def _changelog(data: dict[str, Any]) -> str:
    html = f"<h3>{data['title']}</h3>\n<h4>Version {data['version']} - {data['date']}</h4>\n"
    for key, label in (("added", "Added"), ("changed", "Changed"), ("fixed", "Fixed")):
        if data.get(key):
            html += f"<p><strong>{label}:</strong></p>\n" + _items("ul", data[key])
    return html


def _tutorial(data: dict[str, Any]) -> str:
    html = f"<h3>{data['title']}</h3>\n<p>{data['description']}</p>\n"
    if data.get("prerequisites"):
        html += "<h4>Prerequisites</h4>\n" + _items("ul", data["prerequisites"])
    html += "<h4>Steps</h4>\n"
    for i, step in enumerate(data["steps"], start=1):
        html += f"<p><strong>Step {i}: {step['title']}</strong></p>\n<p>{step['content']}</p>\n"
    if data.get("conclusion"):
        html += f"<h4>Conclusion</h4>\n<p>{data['conclusion']}</p>\n"
    return html


_BUILTIN = (
    Template(
        name="blog_post",
        description="Create a blog post with title, introduction, sections, and optional conclusion",
        fields=(
            TemplateField("title", "Post title", True),
            TemplateField("intro", "Introduction paragraph", True),
            TemplateField("sections", "Array of {heading, content} objects", True, "string[]"),
            TemplateField("conclusion", "Conclusion paragraph", False),
        ),
        generate=_blog_post,
    ),
    Template(
        name="documentation",
        description="Create technical documentation with overview, installation, usage, and API reference",
        fields=(
            TemplateField("title", "Documentation title", True),
            TemplateField("overview", "Overview section content", True),
            TemplateField("installation", "Installation instructions", False),
            TemplateField("usage", "Usage instructions", False),
            TemplateField("api_reference", "Array of API reference items", False, "string[]"),
        ),
        generate=_documentation,
    ),
    Template(
        name="article",
        description="Create a simple article with title, optional subtitle, and body paragraphs",
        fields=(
            TemplateField("title", "Article title", True),
            TemplateField("subtitle", "Article subtitle", False),
            TemplateField("body", "Array of body paragraphs", True, "string[]"),
        ),
        generate=_article,
    ),
    Template(
        name="changelog",
        description="Create a changelog with version, date, and categorized changes (added, changed, fixed)",
        fields=(
            TemplateField("title", "Changelog title", True),
            TemplateField("version", "Version number", True),
            TemplateField("date", "Release date", True),
            TemplateField("added", "Array of added features", False, "string[]"),
            TemplateField("changed", "Array of changes", False, "string[]"),
            TemplateField("fixed", "Array of bug fixes", False, "string[]"),
        ),
        generate=_changelog,
    ),
    Template(
        name="tutorial",
        description="Create a step-by-step tutorial with description, prerequisites, steps, and conclusion",
        fields=(
            TemplateField("title", "Tutorial title", True),
            TemplateField("description", "Tutorial description", True),
            TemplateField("prerequisites", "Array of prerequisites", False, "string[]"),
            TemplateField("steps", "Array of {title, content} objects for each step", True, "string[]"),
            TemplateField("conclusion", "Conclusion paragraph", False),
        ),
        generate=_tutorial,
    ),
)

TEMPLATES: MappingProxyType[str, Template] = MappingProxyType({t.name: t for t in _BUILTIN})


def get_template(name: str) -> Template | None:
    return TEMPLATES.get(name)


def list_templates() -> list[dict[str, Any]]:
    """Template metadata (name, description, fields) for display."""
    return [
        {
            "name": t.name,
            "description": t.description,
            "fields": [
                {"name": f.name, "description": f.description, "required": f.required, "type": f.type}
                for f in t.fields
            ],
        }
        for t in TEMPLATES.values()
    ]


def create_from_template(name: str, data: dict[str, Any]) -> list[Node]:
    """Generate page content from template ``name``. Raises ValueError on unknown template or missing field."""
    template = TEMPLATES.get(name)
    if template is None:
        raise ValueError(f'Template "{name}" not found')
    for f in template.fields:
        if f.required and data.get(f.name) is None:
            raise ValueError(f'Required field "{f.name}" is missing')
    return html_to_nodes(template.generate(data))
