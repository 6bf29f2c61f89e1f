import pytest

from vdom import Comment, Element, SourceRangeError, SourceReader, Text, TreeParser, parse_html
from vdom.utils.config import Config


def test_empty_document():
    tree = parse_html("")
    assert tree.roots == ()
    assert tree.html() == ""


def test_roots_in_document_order():
    tree = parse_html("<p>a</p>text<!--c--><br>")
    kinds = [type(root) for root in tree.roots]
    assert kinds == [Element, Text, Comment, Element]
    assert [root.index for root in tree.roots] == [(0,), (1,), (2,), (3,)]


def test_element_offsets():
    tree = parse_html("<ul><li>one</li></ul>")
    ul = tree.roots[0]
    li = ul.children[0]
    assert ul.source_range == (0, 21)
    assert ul.inner_range == (4, 16)
    assert li.source_range == (4, 16)
    assert li.inner_range == (8, 11)


def test_offsets_are_bytes():
    tree = parse_html("<p>é</p><i>x</i>")
    p, i = tree.roots
    assert p.source_range == (0, 9)
    assert i.source_range == (9, 17)
    assert tree.source.data[9:17] == b"<i>x</i>"


def test_offsets_across_lines():
    markup = "<div>\n  <p>one</p>\n  <p>two</p>\n</div>"
    div = parse_html(markup).roots[0]
    paragraphs = [child for child in div.children if isinstance(child, Element)]
    assert [p.html() for p in paragraphs] == ["<p>one</p>", "<p>two</p>"]


def test_text_values_are_decoded():
    tree = parse_html("<p>1 &lt; 2 &amp;&amp; 3 &gt; 2</p>")
    assert tree.roots[0].children[0].value == "1 < 2 && 3 > 2"


def test_attribute_values_are_decoded_and_valueless_attrs_are_empty():
    tree = parse_html('<input type="checkbox" checked title="a &amp; b">')
    element = tree.roots[0]
    assert [(a.name, a.value) for a in element.attrs] == [
        ("type", "checkbox"), ("checked", ""), ("title", "a & b"),
    ]


def test_duplicate_attributes_are_kept():
    element = parse_html('<a x="1" x="2"></a>').roots[0]
    assert [a.value for a in element.attrs] == ["1", "2"]


def test_self_closing_tag_is_auto_closed():
    tree = parse_html('<div/><span>x</span>')
    div, span = tree.roots
    assert div.auto_closed
    assert div.children == ()
    assert not span.auto_closed


def test_unclosed_element_is_closed_by_parent():
    tree = parse_html("<div><p>one</div>")
    div = tree.roots[0]
    p = div.children[0]
    assert p.html() == "<p>one"
    assert p.inner_html() == "one"
    assert div.html() == "<div><p>one</div>"


def test_unclosed_element_at_end_of_input():
    tree = parse_html("<div><p>one")
    div = tree.roots[0]
    assert div.html() == "<div><p>one"
    assert div.children[0].inner_html() == "one"


def test_stray_end_tag_is_ignored():
    tree = parse_html("<p>a</span></p>")
    p = tree.roots[0]
    assert len(tree.roots) == 1
    assert [child.value for child in p.children] == ["a"]


def test_doctype_has_no_node_but_stays_in_source():
    markup = "<!DOCTYPE html><html><body></body></html>"
    tree = parse_html(markup)
    assert [root.name for root in tree.roots] == ["html"]
    assert tree.html() == markup


def test_whitespace_text_can_be_dropped(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    config.set("parser.keep_whitespace", False)
    tree = TreeParser(config).parse("<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>")
    ul = tree.roots[0]
    assert [child.name for child in ul.children] == ["li", "li"]
    assert [child.index for child in ul.children] == [(0, 0), (0, 1)]


def test_void_elements_are_configurable(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    config.set("parser.void_elements", ["widget"])
    tree = TreeParser(config).parse("<widget a=1><img></img>")
    widget = tree.roots[0]
    assert widget.auto_closed
    assert widget.html() == '<widget a="1">'
    img = tree.roots[1]
    assert not img.auto_closed
    assert img.html() == "<img></img>"


def test_bytes_input_uses_configured_encoding(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    config.set("parser.encoding", "latin-1")
    tree = TreeParser(config).parse("<p>caf\xe9</p>".encode("latin-1"))
    assert tree.roots[0].inner_html() == "café"
    assert tree.roots[0].source_range == (0, 11)


def test_parser_can_be_reused():
    parser = TreeParser()
    first = parser.parse("<a></a>")
    second = parser.parse("<b></b><i></i>")
    assert [root.name for root in first.roots] == ["a"]
    assert [root.name for root in second.roots] == ["b", "i"]


def test_source_reader_conversions():
    reader = SourceReader("ab\nçd")
    assert reader.char_offset(2, 1) == 4
    assert reader.byte_offset(4) == 5
    assert reader.position(4) == (2, 1)
    assert reader.slice(3, 5) == "ç"
    with pytest.raises(SourceRangeError):
        reader.slice(0, 100)
    with pytest.raises(SourceRangeError):
        reader.char_offset(5, 0)
