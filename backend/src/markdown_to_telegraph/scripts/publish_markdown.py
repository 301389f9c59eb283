"""Publish a Markdown file as a Telegraph page.

Usage:
  python -m markdown_to_telegraph.scripts.publish_markdown README.md --title "My page"

Env:
  TELEGRAPH_ACCESS_TOKEN
  TELEGRAPH_AUTHOR_NAME (optional)
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .. import config
from ..errors import TelegraphError
from ..services.telegraph_client import create_page


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Publish a Markdown file to Telegraph")
    parser.add_argument("file", type=Path, help="Markdown file to publish")
    parser.add_argument("--title", help="Page title (default: file stem)")
    parser.add_argument("--format", choices=("markdown", "html"), default="markdown", dest="content_format")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL)

    if not args.file.exists():
        raise SystemExit(f"File not found: {args.file}")
    if not config.TELEGRAPH_ACCESS_TOKEN:
        raise SystemExit("Missing TELEGRAPH_ACCESS_TOKEN in environment")

    content = args.file.read_text(encoding="utf-8")
    try:
        page = create_page(
            config.TELEGRAPH_ACCESS_TOKEN,
            args.title or args.file.stem,
            content,
            content_format=args.content_format,
            author_name=config.TELEGRAPH_AUTHOR_NAME,
            author_url=config.TELEGRAPH_AUTHOR_URL,
        )
    except TelegraphError as e:
        raise SystemExit(f"Publish failed: {e}") from e
    print("path:", page.get("path"))
    print("url:", page.get("url"))


if __name__ == "__main__":
    main()
