"""Rewrite Markdown into Telegraph-style markup.

The rewrite is an ordered tuple of text passes (``MARKDOWN_PASSES``). Order
matters: code is lifted out into placeholders before any other pass runs and
is put back only at the end, images are converted before links, bold before
italic.

Supported dialect: fenced and inline code, ``#``..``####`` headings (Telegraph
has two heading levels, so ``#`` becomes h3 and everything deeper h4), ``---``
rules, images, links, bold/italic, one-line blockquotes, flat bullet and
numbered lists, and blank-line separated paragraphs.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class CodeStash:
    """Call-local side tables holding code lifted out of the text."""

    code_blocks: list[str] = field(default_factory=list)
    inline_codes: list[str] = field(default_factory=list)


MarkdownPass = Callable[[str, CodeStash], str]

# Control characters cannot be matched by any emphasis/link pattern below.
_CODEBLOCK_TOKEN = "\x02CODEBLOCK{}\x03"
_INLINECODE_TOKEN = "\x02INLINECODE{}\x03"
_CODEBLOCK_RE = re.compile(r"\x02CODEBLOCK(\d+)\x03")
_INLINECODE_RE = re.compile(r"\x02INLINECODE(\d+)\x03")
# Token delimiters are reserved; input carrying them is stripped first.
_TOKEN_DELIMITERS = str.maketrans("", "", "\x02\x03")

_FENCE_RE = re.compile(r"```(?:[\w+#.-]*\n)?([\s\S]*?)```")
_INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
_HEADING_RE = re.compile(r"^(#{1,4})[ \t]+(.+)$", re.MULTILINE)
_RULE_RE = re.compile(r"^---+[ \t]*$", re.MULTILINE)
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_BOLD_STAR_RE = re.compile(r"\*\*(?!\s)([^*\n]+)\*\*")
_BOLD_UNDERSCORE_RE = re.compile(r"__(?!\s)([^_\n]+)__")
_ITALIC_STAR_RE = re.compile(r"(?<!\w)\*(?![\s*])([^*\n]+)\*(?!\w)")
_ITALIC_UNDERSCORE_RE = re.compile(r"(?<!\w)_(?![\s_])([^_\n]+)_(?!\w)")
_BLOCKQUOTE_RE = re.compile(r"^>[ \t]+(.+)$", re.MULTILINE)
_BULLET_ITEM_RE = re.compile(r"^[-*][ \t]+(.+)$")
_NUMBERED_ITEM_RE = re.compile(r"^\d+\.[ \t]+(.+)$")
_PRE_OR_BLANK_RE = re.compile(r"<pre>[\s\S]*?</pre>|\n{2,}")


def extract_code_blocks(text: str, stash: CodeStash) -> str:
    def _stash(m: re.Match[str]) -> str:
        stash.code_blocks.append(m.group(1).strip())
        return _CODEBLOCK_TOKEN.format(len(stash.code_blocks) - 1)

    return _FENCE_RE.sub(_stash, text)


def extract_inline_code(text: str, stash: CodeStash) -> str:
    def _stash(m: re.Match[str]) -> str:
        stash.inline_codes.append(m.group(1))
        return _INLINECODE_TOKEN.format(len(stash.inline_codes) - 1)

    return _INLINE_CODE_RE.sub(_stash, text)


def convert_headings(text: str, _stash: CodeStash) -> str:
    def _heading(m: re.Match[str]) -> str:
        tag = "h3" if len(m.group(1)) == 1 else "h4"
        return f"<{tag}>{m.group(2)}</{tag}>"

    return _HEADING_RE.sub(_heading, text)


def convert_rules(text: str, _stash: CodeStash) -> str:
    return _RULE_RE.sub("<hr/>", text)


def convert_images(text: str, _stash: CodeStash) -> str:
    return _IMAGE_RE.sub(r'<figure><img src="\2"/><figcaption>\1</figcaption></figure>', text)


def convert_links(text: str, _stash: CodeStash) -> str:
    return _LINK_RE.sub(r'<a href="\2">\1</a>', text)


def convert_bold(text: str, _stash: CodeStash) -> str:
    text = _BOLD_STAR_RE.sub(r"<b>\1</b>", text)
    return _BOLD_UNDERSCORE_RE.sub(r"<b>\1</b>", text)


def convert_italic(text: str, _stash: CodeStash) -> str:
    text = _ITALIC_STAR_RE.sub(r"<i>\1</i>", text)
    return _ITALIC_UNDERSCORE_RE.sub(r"<i>\1</i>", text)


def convert_blockquotes(text: str, _stash: CodeStash) -> str:
    return _BLOCKQUOTE_RE.sub(r"<blockquote>\1</blockquote>", text)


def _group_list_lines(text: str, item_re: re.Pattern[str], list_tag: str) -> str:
    """Collapse each run of consecutive item lines into one list element."""
    out: list[str] = []
    items: list[str] = []
    for line in text.split("\n"):
        m = item_re.match(line)
        if m:
            items.append(f"<li>{m.group(1)}</li>")
            continue
        if items:
            out.append(f"<{list_tag}>{''.join(items)}</{list_tag}>")
            items = []
        out.append(line)
    if items:
        out.append(f"<{list_tag}>{''.join(items)}</{list_tag}>")
    return "\n".join(out)


def convert_bullet_lists(text: str, _stash: CodeStash) -> str:
    return _group_list_lines(text, _BULLET_ITEM_RE, "ul")


def convert_numbered_lists(text: str, _stash: CodeStash) -> str:
    return _group_list_lines(text, _NUMBERED_ITEM_RE, "ol")


def _restorer(table: list[str], tag: str) -> Callable[[re.Match[str]], str]:
    def _restore(m: re.Match[str]) -> str:
        index = int(m.group(1))
        # A token with no stash entry was not produced by the extract passes.
        if index >= len(table):
            return m.group()
        return f"<{tag}>{table[index]}</{tag}>"

    return _restore


def restore_code(text: str, stash: CodeStash) -> str:
    text = _CODEBLOCK_RE.sub(_restorer(stash.code_blocks, "pre"), text)
    return _INLINECODE_RE.sub(_restorer(stash.inline_codes, "code"), text)


def _split_blocks(text: str) -> list[str]:
    """Split on blank-line runs, never inside a <pre> element."""
    chunks: list[str] = []
    start = 0
    for m in _PRE_OR_BLANK_RE.finditer(text):
        if m.group().startswith("\n"):
            chunks.append(text[start : m.start()])
            start = m.end()
    chunks.append(text[start:])
    return chunks


def wrap_paragraphs(text: str, _stash: CodeStash) -> str:
    out: list[str] = []
    for chunk in _split_blocks(text):
        chunk = chunk.strip()
        if not chunk:
            continue
        # Already a complete element
        if chunk.startswith("<") and chunk.endswith(">"):
            out.append(chunk)
        else:
            out.append(f"<p>{chunk}</p>")
    return "\n".join(out)


MARKDOWN_PASSES: tuple[MarkdownPass, ...] = (
    extract_code_blocks,
    extract_inline_code,
    convert_headings,
    convert_rules,
    convert_images,
    convert_links,
    convert_bold,
    convert_italic,
    convert_blockquotes,
    convert_bullet_lists,
    convert_numbered_lists,
    restore_code,
    wrap_paragraphs,
)


def markdown_to_html(markdown: str, passes: tuple[MarkdownPass, ...] = MARKDOWN_PASSES) -> str:
    """Rewrite ``markdown`` into markup understood by ``html_to_nodes``."""
    stash = CodeStash()
    text = markdown.replace("\r\n", "\n").translate(_TOKEN_DELIMITERS)
    for markdown_pass in passes:
        text = markdown_pass(text, stash)
    return text
