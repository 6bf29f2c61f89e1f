"""
Comment node implementation for the virtual DOM.
"""

from typing import Iterable

from .node import Node, NodeType


class Comment(Node):
    """
    An xml/html comment of the form ``<!--value-->``.
    The value does not include the ``<!--`` and ``-->`` markers.
    """

    node_type = NodeType.COMMENT

    def __init__(self, value: str, *, index: Iterable[int] = ()):
        super().__init__(index)
        self._value = "" if value is None else value

    @property
    def value(self) -> str:
        return self._value

    def html(self) -> str:
        # Re-add the markers, the value itself is left as is
        return f"<!--{self._value}-->"

    def compare(self, other: 'Comment') -> tuple:
        """Non-recursively compare this comment to another one."""
        if self._value != other._value:
            return False, f"comment value was {self._value!r} but other comment value was {other._value!r}"
        return True, ""

    def __repr__(self) -> str:
        return f"Comment({self._value!r})"
