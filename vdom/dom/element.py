"""
Element implementation for the virtual DOM.
"""

from typing import Iterable, Optional, Tuple

from ..parser.source_reader import SourceReader, SourceRangeError, unescape
from .attr import Attr
from .node import Node, NodeType
from .selector_engine import selector_for


class Element(Node):
    """
    An xml/html element, e.g. ``<div></div>``. The name does not include the
    ``<``, ``>`` or ``/`` symbols.

    Elements built by the parser point into the shared source of their tree
    through byte offsets: ``source_start``/``source_end`` span the whole
    element, ``inner_start``/``inner_end`` the content between its tags.
    Elements built as literals have no source and render from structure.
    """

    node_type = NodeType.ELEMENT

    def __init__(self,
                 name: str,
                 attrs: Iterable[Attr] = (),
                 children: Iterable[Node] = (),
                 *,
                 index: Iterable[int] = (),
                 source: Optional[SourceReader] = None,
                 source_start: int = 0,
                 source_end: int = 0,
                 inner_start: int = 0,
                 inner_end: int = 0,
                 auto_closed: bool = False):
        """
        Initialize a new Element.

        Args:
            name: Tag name
            attrs: Attributes in document order, duplicates kept
            children: Child nodes in document order; they are adopted by this element
            index: Index path of the element in its tree
            source: Shared source of the tree the element was parsed from
            source_start: Byte offset of the start tag
            source_end: Byte offset just past the end tag
            inner_start: Byte offset just past the start tag
            inner_end: Byte offset of the end tag
            auto_closed: True for void and self-closing elements

        Raises:
            SourceRangeError: If the offsets do not describe a valid span of source
        """
        super().__init__(index)
        self._name = name
        self._attrs: Tuple[Attr, ...] = tuple(
            a if isinstance(a, Attr) else Attr(*a) for a in attrs
        )
        self._children: Tuple[Node, ...] = tuple(children)
        self._source = source
        self._source_start = source_start
        self._source_end = source_end
        self._inner_start = inner_start
        self._inner_end = inner_end
        self._auto_closed = auto_closed

        if source is not None:
            self._check_offsets()

        for child in self._children:
            child._set_parent(self)

    def _check_offsets(self) -> None:
        self._source.check_range(self._source_start, self._source_end)
        if self._auto_closed:
            return
        if not (self._source_start <= self._inner_start <= self._inner_end <= self._source_end):
            raise SourceRangeError(
                f"inner range [{self._inner_start}, {self._inner_end}) of <{self._name}> is not "
                f"inside its source range [{self._source_start}, {self._source_end})"
            )

    @property
    def name(self) -> str:
        return self._name

    @property
    def attrs(self) -> Tuple[Attr, ...]:
        return self._attrs

    @property
    def children(self) -> Tuple[Node, ...]:
        return self._children

    @property
    def auto_closed(self) -> bool:
        return self._auto_closed

    @property
    def source_range(self) -> Tuple[int, int]:
        return self._source_start, self._source_end

    @property
    def inner_range(self) -> Tuple[int, int]:
        return self._inner_start, self._inner_end

    def get_attribute(self, name: str) -> Optional[str]:
        """Value of the first attribute called ``name``, or None."""
        for attr in self._attrs:
            if attr.name == name:
                return attr.value
        return None

    def html(self) -> str:
        if self._auto_closed:
            # An auto-closed tag has no children, build the html manually
            return self._start_tag()
        if self._source is None:
            return f"{self._start_tag()}{self._render_children()}</{self._name}>"
        return unescape(self._source.slice(self._source_start, self._source_end))

    def inner_html(self) -> str:
        """
        Return the unescaped html inside of this element. So if the
        element is ``<ul><li>one</li><li>two</li></ul>``, this returns
        ``<li>one</li><li>two</li>``. Auto-closed elements have none.
        """
        if self._auto_closed:
            return ""
        if self._source is None:
            return self._render_children()
        return unescape(self._source.slice(self._inner_start, self._inner_end))

    def selector(self) -> str:
        """
        Return a css selector which finds the corresponding element in the
        actual DOM. The selector is relative to the parent of the tree, so
        if the virtual tree was parsed from the inner html of some div, the
        live element is ``div.querySelector(element.selector())``.

        Raises:
            ValueError: If the element has no index path
        """
        if not self._index:
            raise ValueError(f"<{self._name}> has no index path, it was not placed in a tree")
        return selector_for(self._index)

    def compare(self, other: 'Element') -> tuple:
        """
        Non-recursively compare this element to another one. Neither the
        children nor the parent are checked, use compare_nodes for a
        recursive comparison.

        Returns:
            (True, "") on a match, otherwise (False, message)
        """
        if self._name != other._name:
            return False, f"element name was {self._name!r} but other element name was {other._name!r}"
        attrs = self._attrs
        other_attrs = other._attrs
        if len(attrs) != len(other_attrs):
            return False, f"element has {len(attrs)} attrs but other element has {len(other_attrs)} attrs"
        for i, (attr, other_attr) in enumerate(zip(attrs, other_attrs)):
            if attr != other_attr:
                return False, f"attrs[{i}] was {attr!r} but other attrs[{i}] was {other_attr!r}"
        return True, ""

    def _start_tag(self) -> str:
        return "<" + self._name + "".join(" " + attr.html() for attr in self._attrs) + ">"

    def _render_children(self) -> str:
        return "".join(child.html() for child in self._children)

    def __repr__(self) -> str:
        return f"Element({self._name!r}, attrs={list(self._attrs)!r}, children={len(self._children)})"
