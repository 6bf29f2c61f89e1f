"""
Text node implementation for the virtual DOM.
"""

from typing import Iterable

from .node import Node, NodeType


class Text(Node):
    """A text node, i.e. anything in the document not surrounded by tags."""

    node_type = NodeType.TEXT

    def __init__(self, value: str, *, index: Iterable[int] = ()):
        """
        Initialize a text node.

        Args:
            value: The decoded text content
            index: Index path of the node in its tree
        """
        super().__init__(index)
        self._value = "" if value is None else value

    @property
    def value(self) -> str:
        return self._value

    def html(self) -> str:
        # Already decoded when the node was built
        return self._value

    def compare(self, other: 'Text') -> tuple:
        """
        Non-recursively compare this text node to another one. The parent
        is not checked.

        Returns:
            (True, "") on a match, otherwise (False, message)
        """
        if self._value != other._value:
            return False, f"text value was {self._value!r} but other text value was {other._value!r}"
        return True, ""

    def __repr__(self) -> str:
        return f"Text({self._value!r})"
