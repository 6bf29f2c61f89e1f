import pytest

from vdom import Attr, Comment, Element, Text, Tree, compare_nodes, parse_html


def test_tree_compares_equal_to_itself(list_tree):
    assert list_tree.compare(list_tree) == (True, "")


def test_literal_tree_matches_parsed_tree(list_tree, expected_list_tree):
    assert expected_list_tree.compare(list_tree) == (True, "")
    assert list_tree.compare(expected_list_tree) == (True, "")


def test_parents_are_ignored():
    adopted = Text("x")
    wrapper = Element("span", children=[adopted])
    orphan = Text("x")
    assert adopted.parent is wrapper
    assert orphan.parent is None
    assert compare_nodes(adopted, orphan) == (True, "")


def test_root_count_mismatch():
    match, msg = Tree([Text("a")]).compare(Tree([Text("a"), Text("b")]))
    assert not match
    assert msg == "tree has 1 roots but other tree has 2 roots"


def test_children_count_mismatch_scenario():
    expected = parse_html("<div><p>hi</p></div>")
    actual = parse_html("<div><p>hi</p><p>bye</p></div>")
    match, msg = expected.compare(actual)
    assert not match
    assert msg == "at [0]: node has 1 children but other node has 2 children"


def test_variant_mismatch():
    match, msg = compare_nodes(Text("x"), Comment("x"))
    assert not match
    assert "Text" in msg and "Comment" in msg


def test_unknown_variant():
    class Fake:
        children = ()

    match, msg = compare_nodes(Fake(), Fake())
    assert not match
    assert msg == "don't know how to compare node of type Fake"


@pytest.mark.parametrize("other, field", [
    (Element("section", [Attr("id", "a"), Attr("class", "b")], [Text("t")]), "element name"),
    (Element("div", [Attr("id", "z"), Attr("class", "b")], [Text("t")]), "attrs[0]"),
    (Element("div", [Attr("ID", "a"), Attr("class", "b")], [Text("t")]), "attrs[0]"),
    (Element("div", [Attr("class", "b"), Attr("id", "a")], [Text("t")]), "attrs[0]"),
    (Element("div", [Attr("id", "a")], [Text("t")]), "1 attrs"),
    (Element("div", [Attr("id", "a"), Attr("class", "b")], [Text("T")]), "text value"),
    (Element("div", [Attr("id", "a"), Attr("class", "b")], [Comment("t")]), "type Comment"),
    (Element("div", [Attr("id", "a"), Attr("class", "b")], []), "0 children"),
])
def test_single_changes_are_detected(other, field):
    base = Element("div", [Attr("id", "a"), Attr("class", "b")], [Text("t")])
    match, msg = compare_nodes(base, other)
    assert not match
    assert field in msg


def test_comment_value_mismatch():
    match, msg = compare_nodes(Comment(" a "), Comment(" b "))
    assert not match
    assert msg == "comment value was ' a ' but other comment value was ' b '"


def test_message_reports_both_values_and_location():
    expected = Tree([Element("ul", children=[Element("li", children=[Text("one")]),
                                             Element("li", children=[Text("two")])])])
    actual = parse_html("<ul><li>one</li><li>deux</li></ul>")
    match, msg = expected.compare(actual)
    assert not match
    assert msg == "at [0, 1, 0]: text value was 'two' but other text value was 'deux'"


def test_first_mismatch_wins():
    expected = Tree([Element("a"), Element("b")])
    actual = Tree([Element("x"), Element("y")])
    match, msg = expected.compare(actual)
    assert not match
    assert "'a'" in msg and "'x'" in msg
    assert "'b'" not in msg
