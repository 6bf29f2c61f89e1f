"""
Assertion helpers for test suites that compare virtual trees.
"""

from typing import Union

from .dom.compare import compare_nodes
from .dom.node import Node
from .dom.tree import Tree
from .parser.html_parser import parse_html


def assert_trees_match(expected: Tree, actual: Union[Tree, str, bytes]) -> None:
    """
    Assert that ``actual`` has the same structure as ``expected``.

    Args:
        expected: Usually a literal tree
        actual: A parsed tree, or markup that is parsed first

    Raises:
        AssertionError: With the comparator message on the first mismatch
    """
    if not isinstance(actual, Tree):
        actual = parse_html(actual)
    match, msg = expected.compare(actual)
    if not match:
        raise AssertionError(f"trees do not match: {msg}\nexpected: {expected.html()}\nactual:   {actual.html()}")


def assert_nodes_match(expected: Node, actual: Node) -> None:
    """Assert that two nodes and their children have the same structure."""
    match, msg = compare_nodes(expected, actual)
    if not match:
        raise AssertionError(f"nodes do not match: {msg}")
