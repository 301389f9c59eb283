import pytest

from markdown_to_telegraph.services.html_parser import html_to_nodes
from markdown_to_telegraph.services.node_serializers import nodes_to_html


def test_paragraph_with_inline_bold():
    assert html_to_nodes("<p>Hello <b>world</b>!</p>") == [
        {"tag": "p", "children": ["Hello ", {"tag": "b", "children": ["world"]}, "!"]}
    ]


def test_self_closed_image_has_no_children_key():
    assert html_to_nodes('<img src="x.jpg"/>') == [{"tag": "img", "attrs": {"src": "x.jpg"}}]


def test_void_tags_never_push():
    assert html_to_nodes("<br>text</br><hr>") == [{"tag": "br"}, "text", {"tag": "hr"}]


def test_explicit_self_close_marker_on_any_tag():
    assert html_to_nodes("<p><span/>x</p>") == [{"tag": "p", "children": [{"tag": "span"}, "x"]}]


def test_slash_inside_attribute_is_not_self_close():
    assert html_to_nodes('<a href="http://x.com/">x</a>') == [
        {"tag": "a", "attrs": {"href": "http://x.com/"}, "children": ["x"]}
    ]


def test_empty_element_omits_attrs_and_children():
    assert html_to_nodes("<p></p>") == [{"tag": "p"}]


def test_whitespace_only_runs_are_dropped():
    assert html_to_nodes("<h3>T</h3>\n<p> x </p>\n") == [
        {"tag": "h3", "children": ["T"]},
        {"tag": "p", "children": [" x "]},
    ]


def test_unmatched_close_is_ignored():
    assert html_to_nodes("</i>text") == ["text"]


def test_close_pops_innermost_open_element():
    assert html_to_nodes("<p><b>x</p>after") == [
        {"tag": "p", "children": [{"tag": "b", "children": ["x"]}, "after"]}
    ]


@pytest.mark.parametrize(
    "unterminated, well_formed",
    [
        ("<p>a<b>b", "<p>a<b>b</b></p>"),
        ("<ul><li>one", "<ul><li>one</li></ul>"),
        ("<blockquote>q", "<blockquote>q</blockquote>"),
    ],
)
def test_unterminated_tags_are_closed_at_end(unterminated, well_formed):
    assert html_to_nodes(unterminated) == html_to_nodes(well_formed)


@pytest.mark.parametrize(
    "html",
    [
        "<p>Hello <b>world</b>!</p>",
        '<figure><img src="c.jpg"/><figcaption>cat</figcaption></figure>',
        '<p><a href="http://x" title="t">link</a> and <i>more</i></p><hr/>',
        "<ol><li>a</li><li><code>b</code></li></ol><pre>x = 1</pre>",
        """<a title='say "hi"' href="u">x</a>""",
    ],
)
def test_markup_round_trip(html):
    tree = html_to_nodes(html)
    assert html_to_nodes(nodes_to_html(tree)) == tree
