from markdown_to_telegraph.services.html_tokenizer import Token, is_self_closing, parse_attrs, tokenize


def test_tokenize_open_text_close():
    tokens = list(tokenize("<p class='x'>Hi</p>"))
    assert tokens == [
        Token("open", tag="p", raw_attrs=" class='x'"),
        Token("text", value="Hi"),
        Token("close", tag="p"),
    ]


def test_tag_names_are_lowercased():
    assert [t.tag for t in tokenize("<B>x</B>") if t.kind != "text"] == ["b", "b"]


def test_stray_angle_bracket_stays_text():
    assert list(tokenize("a < b")) == [Token("text", value="a < b")]


def test_comment_is_text():
    assert list(tokenize("<!-- note -->")) == [Token("text", value="<!-- note -->")]


def test_parse_attrs_keeps_only_quoted_pairs_in_order():
    attrs = parse_attrs(""" title='t' href="a" data-x=1 bare""")
    assert attrs == {"title": "t", "href": "a"}
    assert list(attrs) == ["title", "href"]


def test_parse_attrs_allows_other_quote_inside_value():
    assert parse_attrs(""" alt="it's" """) == {"alt": "it's"}


def test_is_self_closing():
    assert is_self_closing(' src="x"/')
    assert is_self_closing("/ ")
    assert not is_self_closing(' href="http://a/b"')
    assert not is_self_closing("")
