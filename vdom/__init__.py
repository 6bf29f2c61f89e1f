"""
vdom - a read-only virtual DOM for testing and automation.

Parsed documents become immutable trees that can reconstruct their markup,
address nodes by index path, produce positional css selectors for a live
DOM, and be compared structurally against literal trees.
"""

import logging

from vdom.dom import (
    Attr, Comment, Element, Node, NodeType, SelectorEngine, SelectorError, Text, Tree,
    compare_nodes, selector_for,
)
from vdom.parser import SourceRangeError, SourceReader
from vdom.parser.html_parser import TreeParser, parse_html

# Library logging stays silent until the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__description__ = "A read-only virtual DOM with html reconstruction, selectors and structural comparison"

__all__ = [
    'Attr', 'Comment', 'Element', 'Node', 'NodeType', 'Text', 'Tree',
    'SelectorEngine', 'SelectorError', 'SourceRangeError', 'SourceReader',
    'TreeParser', 'compare_nodes', 'parse_html', 'selector_for',
]
