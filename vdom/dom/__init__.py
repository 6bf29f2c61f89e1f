"""
Virtual DOM implementation.
This package provides the read-only node tree, html reconstruction,
positional selectors and structural comparison.
"""

from .node import Node, NodeType
from .attr import Attr
from .text import Text
from .comment import Comment
from .element import Element
from .compare import compare_nodes
from .selector_engine import SelectorEngine, SelectorError, selector_for
from .tree import Tree

__all__ = [
    'Node', 'NodeType', 'Attr', 'Element', 'Text', 'Comment', 'Tree',
    'compare_nodes', 'SelectorEngine', 'SelectorError', 'selector_for',
]
