import pytest

from markdown_to_telegraph.services.html_parser import html_to_nodes
from markdown_to_telegraph.services.markdown_parser import (
    MARKDOWN_PASSES,
    CodeStash,
    convert_bullet_lists,
    convert_images,
    convert_links,
    convert_bold,
    convert_italic,
    extract_code_blocks,
    markdown_to_html,
    restore_code,
    wrap_paragraphs,
)


def test_title_and_bold_paragraph():
    html = markdown_to_html("# Title\n\nThis is **bold**")
    assert html == "<h3>Title</h3>\n<p>This is <b>bold</b></p>"
    assert html_to_nodes(html) == [
        {"tag": "h3", "children": ["Title"]},
        {"tag": "p", "children": ["This is ", {"tag": "b", "children": ["bold"]}]},
    ]


def test_level_one_heading_is_h3():
    assert markdown_to_html("# A") == "<h3>A</h3>"


@pytest.mark.parametrize("hashes", ["##", "###", "####"])
def test_deeper_headings_collapse_to_h4(hashes):
    assert markdown_to_html(f"{hashes} A") == "<h4>A</h4>"


def test_horizontal_rule():
    assert markdown_to_html("a\n\n---\n\nb") == "<p>a</p>\n<hr/>\n<p>b</p>"


def test_image_becomes_captioned_figure():
    assert markdown_to_html("![cat](c.jpg)") == (
        '<figure><img src="c.jpg"/><figcaption>cat</figcaption></figure>'
    )


def test_link():
    assert markdown_to_html("see [docs](http://x)") == '<p>see <a href="http://x">docs</a></p>'


def test_emphasis_and_snake_case():
    assert markdown_to_html("**b** and *i* and __u__ and _e_.") == (
        "<p><b>b</b> and <i>i</i> and <b>u</b> and <i>e</i>.</p>"
    )


def test_chunk_that_is_already_markup_is_not_wrapped():
    assert markdown_to_html("**b**") == "<b>b</b>"
    assert markdown_to_html("a *b* c snake_case_word") == "<p>a <i>b</i> c snake_case_word</p>"


def test_each_quote_line_is_its_own_blockquote():
    assert markdown_to_html("> one\n> two") == (
        "<blockquote>one</blockquote>\n<blockquote>two</blockquote>"
    )


def test_mixed_list_splits_at_boundary():
    assert markdown_to_html("- a\n* b\n1. c\n2. d") == (
        "<ul><li>a</li><li>b</li></ul>\n<ol><li>c</li><li>d</li></ol>"
    )


def test_code_block_is_not_interpreted():
    assert markdown_to_html("```\n**not bold**\n```") == "<pre>**not bold**</pre>"


def test_code_block_language_dropped_and_blank_lines_kept():
    assert markdown_to_html("```python\na = 1\n\nb = 2\n```") == "<pre>a = 1\n\nb = 2</pre>"


def test_inline_code_is_not_interpreted():
    assert markdown_to_html("use `a_b_c` and `*x*`") == (
        "<p>use <code>a_b_c</code> and <code>*x*</code></p>"
    )


def test_inline_code_inside_heading():
    assert markdown_to_html("# Run `make`") == "<h3>Run <code>make</code></h3>"


def test_empty_input():
    assert markdown_to_html("") == ""
    assert markdown_to_html("\n\n\n") == ""


def test_pass_order():
    order = list(MARKDOWN_PASSES)
    assert order[0] is extract_code_blocks
    assert order.index(convert_images) < order.index(convert_links)
    assert order.index(convert_bold) < order.index(convert_italic)
    assert order[-2] is restore_code
    assert order[-1] is wrap_paragraphs


def test_bullet_pass_in_isolation():
    assert convert_bullet_lists("x\n- a\n- b\ny", CodeStash()) == "x\n<ul><li>a</li><li>b</li></ul>\ny"


def test_code_round_trips_through_stash():
    stash = CodeStash()
    text = extract_code_blocks("before ```x``` after", stash)
    assert stash.code_blocks == ["x"]
    assert "x" not in text.replace("before", "").replace("after", "")
    assert restore_code(text, stash) == "before <pre>x</pre> after"


def test_placeholder_shaped_input_is_plain_text():
    assert markdown_to_html("text \x02CODEBLOCK0\x03 more") == "<p>text CODEBLOCK0 more</p>"
    assert markdown_to_html("`a` and \x02INLINECODE0\x03") == "<p><code>a</code> and INLINECODE0</p>"


def test_restore_leaves_unknown_tokens_alone():
    stash = CodeStash(code_blocks=["x"])
    text = "\x02CODEBLOCK0\x03 \x02CODEBLOCK7\x03 \x02INLINECODE2\x03"
    assert restore_code(text, stash) == "<pre>x</pre> \x02CODEBLOCK7\x03 \x02INLINECODE2\x03"
