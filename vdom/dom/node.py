"""
Node implementation for the virtual DOM.
This module defines the capability set shared by every node of a Tree.
"""

from enum import IntEnum
from typing import Iterable, Iterator, Optional, Tuple
import weakref


class NodeType(IntEnum):
    """The node variants a Tree can hold. Values follow the DOM nodeType numbers."""
    ELEMENT = 1
    TEXT = 3
    COMMENT = 8


class Node:
    """
    Base Node for the virtual DOM.

    Every node can report its parent, its children, its reconstructed html
    and its index path from the root of the tree. Nodes are read-only once
    built: children are exposed as tuples and there are no setters.
    """

    node_type: NodeType

    def __init__(self, index: Iterable[int] = ()):
        """
        Initialize a new Node.

        Args:
            index: Child positions leading from a root of the tree to this node
        """
        self._parent_ref: Optional[weakref.ref] = None
        self._index: Tuple[int, ...] = tuple(index)

    @property
    def parent(self) -> Optional['Element']:
        """The owning element, or None for roots and detached nodes."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> Tuple['Node', ...]:
        """Child nodes in document order. Only elements have any."""
        return ()

    @property
    def index(self) -> Tuple[int, ...]:
        """
        The child indexes starting at a root of the tree that lead to this
        node. If this node is the second child of its parent, and its parent
        is the first root, the index is (0, 1), i.e. it can be reached via
        tree.roots[0].children[1].
        """
        return self._index

    @property
    def depth(self) -> int:
        """Distance from the root, 0 for roots."""
        return max(len(self._index) - 1, 0)

    def html(self) -> str:
        """Return the unescaped html of this node and its children."""
        raise NotImplementedError

    def iter_descendants(self) -> Iterator['Node']:
        """Yield every descendant in document order (pre-order)."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def _set_parent(self, parent: 'Element') -> None:
        # Weak so that a child never keeps its parent alive
        self._parent_ref = weakref.ref(parent)
