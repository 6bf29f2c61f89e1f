"""
Tree implementation for the virtual DOM.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..parser.source_reader import SourceReader, unescape
from .compare import CompareResult, compare_sequences
from .element import Element
from .node import Node
from .selector_engine import SelectorEngine

logger = logging.getLogger(__name__)


class Tree:
    """
    An in-memory, read-only representation of a parsed document.

    The tree owns its root nodes and the source they were parsed from.
    Elements share the tree's SourceReader instead of copying markup.
    """

    def __init__(self, roots: Iterable[Node] = (),
                 source: Union[SourceReader, bytes, str, None] = None):
        """
        Initialize a tree.

        Args:
            roots: Root nodes in document order
            source: The source the roots were parsed from, if any
        """
        self._roots: Tuple[Node, ...] = tuple(roots)
        if source is not None and not isinstance(source, SourceReader):
            source = SourceReader(source)
        self._source = source

    @property
    def roots(self) -> Tuple[Node, ...]:
        return self._roots

    @property
    def source(self) -> Optional[SourceReader]:
        return self._source

    def html(self) -> str:
        """
        Return the unescaped html of the whole document. This decodes the
        stored source, it does not re-serialize the nodes. Trees without a
        source (literals) are rendered from their roots.
        """
        if self._source is None:
            return "".join(root.html() for root in self._roots)
        return unescape(self._source.text())

    def compare(self, other: 'Tree') -> CompareResult:
        """
        Recursively compare this tree to another one.

        Returns (True, "") if they are equal, otherwise False and a message
        describing the first mismatch. Parents of nodes are never compared,
        so a literal tree can be compared to a parsed one.
        """
        if len(self._roots) != len(other._roots):
            return False, f"tree has {len(self._roots)} roots but other tree has {len(other._roots)} roots"
        return compare_sequences(self._roots, other._roots, [])

    def walk(self) -> Iterator[Node]:
        """Yield every node of the tree in document order."""
        for root in self._roots:
            yield root
            yield from root.iter_descendants()

    def elements(self) -> List[Element]:
        return [node for node in self.walk() if isinstance(node, Element)]

    def find(self, name: str) -> List[Element]:
        """Return all elements with the given tag name in document order."""
        return [element for element in self.elements() if element.name == name]

    def node_at(self, index: Iterable[int]) -> Optional[Node]:
        """Return the node at an index path, or None if there is none."""
        return SelectorEngine.node_at(self._roots, index)

    def __len__(self) -> int:
        return len(self._roots)

    def __repr__(self) -> str:
        return f"Tree(roots={list(self._roots)!r})"
