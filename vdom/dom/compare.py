"""
Recursive structural comparison of virtual DOM nodes.

The comparator never looks at parent references. This is what allows an
expected tree to be written as a plain literal and compared against a
parsed one.
"""

import logging
from typing import List, Sequence, Tuple

from .node import Node, NodeType

logger = logging.getLogger(__name__)

CompareResult = Tuple[bool, str]

_VARIANT_NAMES = {
    NodeType.ELEMENT: "Element",
    NodeType.TEXT: "Text",
    NodeType.COMMENT: "Comment",
}


def _variant_name(node) -> str:
    node_type = getattr(node, "node_type", None)
    return _VARIANT_NAMES.get(node_type, type(node).__name__)


def _location(path: Sequence[int]) -> str:
    return f"at [{', '.join(str(i) for i in path)}]"


def compare_nodes(node: Node, other: Node) -> CompareResult:
    """
    Recursively compare ``node`` to ``other``.

    Returns (True, "") if they are equal, otherwise False and a message
    describing the first mismatch found. Parents are never compared.
    """
    return _compare(node, other, [])


def compare_sequences(nodes: Sequence[Node], others: Sequence[Node],
                      path: List[int]) -> CompareResult:
    """Compare two sibling sequences pairwise, stopping at the first mismatch."""
    for i, (node, other) in enumerate(zip(nodes, others)):
        path.append(i)
        match, msg = _compare(node, other, path)
        path.pop()
        if not match:
            return False, msg
    return True, ""


def _compare(node, other, path: List[int]) -> CompareResult:
    node_type = getattr(node, "node_type", None)
    if node_type != getattr(other, "node_type", None):
        return _mismatch(path, f"node is of type {_variant_name(node)} "
                               f"but other node is of type {_variant_name(other)}")

    if node_type in (NodeType.ELEMENT, NodeType.TEXT, NodeType.COMMENT):
        match, msg = node.compare(other)
    else:
        return _mismatch(path, f"don't know how to compare node of type {type(node).__name__}")
    if not match:
        return _mismatch(path, msg)

    children = node.children
    other_children = other.children
    if len(children) != len(other_children):
        return _mismatch(path, f"node has {len(children)} children "
                               f"but other node has {len(other_children)} children")
    return compare_sequences(children, other_children, path)


def _mismatch(path: Sequence[int], msg: str) -> CompareResult:
    if path:
        msg = f"{_location(path)}: {msg}"
    logger.debug(f"Comparison mismatch {msg}")
    return False, msg
