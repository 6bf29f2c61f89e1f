import pytest

from vdom import Attr, Comment, Element, Text, Tree, parse_html

LIST_MARKUP = '<ul class="menu"><li>one</li><li>two &amp; three</li></ul><!-- end -->'


@pytest.fixture
def list_tree():
    return parse_html(LIST_MARKUP)


@pytest.fixture
def expected_list_tree():
    """The literal counterpart of LIST_MARKUP."""
    return Tree([
        Element("ul", [Attr("class", "menu")], [
            Element("li", children=[Text("one")]),
            Element("li", children=[Text("two & three")]),
        ]),
        Comment(" end "),
    ])


@pytest.fixture
def nested_tree():
    """root 0 has children [A, B] and B has children [C, D]."""
    return parse_html("<div><a></a><b><i></i><u></u></b></div>")
