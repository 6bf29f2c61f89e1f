"""
HTML parser implementation.
This module builds vdom Trees from markup, recording for every element the
byte offsets of its markup in the source.
"""

import logging
from html.parser import HTMLParser
from typing import List, Optional, Set, Tuple, Union

from ..dom.attr import Attr
from ..dom.comment import Comment
from ..dom.element import Element
from ..dom.node import Node
from ..dom.text import Text
from ..dom.tree import Tree
from ..utils.config import Config, DEFAULT_VOID_ELEMENTS
from ..utils.logging import PerformanceLogger
from .source_reader import SourceReader

logger = logging.getLogger(__name__)


class _Frame:
    """An element whose end tag has not been seen yet."""

    __slots__ = ('name', 'attrs', 'index', 'start', 'inner_start', 'children', 'text')

    def __init__(self, name: str, attrs: List[Attr], index: Tuple[int, ...],
                 start: int, inner_start: int):
        self.name = name
        self.attrs = attrs
        self.index = index
        self.start = start
        self.inner_start = inner_start
        self.children: List[Node] = []
        self.text: List[str] = []


class TreeParser(HTMLParser):
    """
    Parses markup into a vdom Tree.

    The parser does not validate or repair markup beyond closing elements
    whose end tag is missing, at the end tag of an enclosing element or at
    the end of input. End tags without a matching open element are ignored.
    Doctypes and processing instructions stay in the source but get no node.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the parser.

        Args:
            config: Configuration, the ``parser.*`` keys are used
        """
        self.config = config
        if config is not None:
            self.encoding = config.get("parser.encoding", "utf-8")
            self.keep_whitespace = config.get("parser.keep_whitespace", True)
            void_elements = config.get("parser.void_elements", DEFAULT_VOID_ELEMENTS)
        else:
            self.encoding = "utf-8"
            self.keep_whitespace = True
            void_elements = DEFAULT_VOID_ELEMENTS
        self.void_elements: Set[str] = {name.lower() for name in void_elements}
        self.perf = PerformanceLogger(logger, "TreeParser")

        super().__init__(convert_charrefs=True)
        logger.debug("TreeParser initialized")

    def reset(self) -> None:
        super().reset()
        self._reader: Optional[SourceReader] = None
        self._root = _Frame("#root", [], (), 0, 0)
        self._stack: List[_Frame] = [self._root]

    def parse(self, markup: Union[bytes, str]) -> Tree:
        """
        Parse markup into a Tree.

        Args:
            markup: The document, bytes are decoded with ``parser.encoding``

        Returns:
            Tree: The parsed tree, sharing a SourceReader over ``markup``
        """
        self.perf.start("parse")
        self.reset()
        reader = SourceReader(markup, self.encoding)
        self._reader = reader

        self.feed(reader.text())
        self.close()

        end = len(reader.text())
        while len(self._stack) > 1:
            self._close_top(end, end)
        self._flush_text(self._root)

        tree = Tree(self._root.children, reader)
        self.perf.end("parse")
        logger.debug(f"Parsed {len(reader)} bytes into {len(tree.roots)} roots")
        self.reset()
        return tree

    # HTMLParser callbacks

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        start, end = self._start_tag_span()
        if tag in self.void_elements:
            self._add_auto_closed(tag, attrs, start, end)
            return
        parent = self._stack[-1]
        self._flush_text(parent)
        frame = _Frame(tag, self._attrs(attrs), parent.index + (len(parent.children),), start, end)
        self._stack.append(frame)

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        start, end = self._start_tag_span()
        self._add_auto_closed(tag, attrs, start, end)

    def handle_endtag(self, tag: str) -> None:
        text = self._reader.text()
        start = self._position()
        close = text.find('>', start)
        end = len(text) if close == -1 else close + 1

        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].name == tag:
                break
        else:
            logger.debug(f"Ignoring end tag </{tag}> without an open element")
            return

        while len(self._stack) - 1 > depth:
            logger.debug(f"Closing <{self._stack[-1].name}> implicitly at </{tag}>")
            self._close_top(start, start)
        self._close_top(start, end)

    def handle_data(self, data: str) -> None:
        self._stack[-1].text.append(data)

    def handle_comment(self, data: str) -> None:
        parent = self._stack[-1]
        self._flush_text(parent)
        parent.children.append(Comment(data, index=parent.index + (len(parent.children),)))

    def handle_decl(self, decl: str) -> None:
        logger.debug(f"Skipping declaration <!{decl}>")

    def handle_pi(self, data: str) -> None:
        logger.debug(f"Skipping processing instruction <?{data}>")

    def unknown_decl(self, data: str) -> None:
        logger.debug(f"Skipping declaration <![{data}]>")

    # Helpers

    def _position(self) -> int:
        return self._reader.char_offset(*self.getpos())

    def _start_tag_span(self) -> Tuple[int, int]:
        start = self._position()
        return start, start + len(self.get_starttag_text())

    @staticmethod
    def _attrs(attrs: List[Tuple[str, Optional[str]]]) -> List[Attr]:
        return [Attr(name, value) for name, value in attrs]

    def _add_auto_closed(self, tag: str, attrs, start: int, end: int) -> None:
        parent = self._stack[-1]
        self._flush_text(parent)
        byte = self._reader.byte_offset
        parent.children.append(Element(
            tag,
            self._attrs(attrs),
            index=parent.index + (len(parent.children),),
            source=self._reader,
            source_start=byte(start),
            source_end=byte(end),
            inner_start=byte(end),
            inner_end=byte(end),
            auto_closed=True,
        ))

    def _flush_text(self, frame: _Frame) -> None:
        if not frame.text:
            return
        value = "".join(frame.text)
        frame.text = []
        if not self.keep_whitespace and not value.strip():
            return
        frame.children.append(Text(value, index=frame.index + (len(frame.children),)))

    def _close_top(self, inner_end: int, end: int) -> None:
        frame = self._stack.pop()
        self._flush_text(frame)
        byte = self._reader.byte_offset
        element = Element(
            frame.name,
            frame.attrs,
            frame.children,
            index=frame.index,
            source=self._reader,
            source_start=byte(frame.start),
            source_end=byte(end),
            inner_start=byte(frame.inner_start),
            inner_end=byte(inner_end),
        )
        self._stack[-1].children.append(element)


def parse_html(markup: Union[bytes, str], config: Optional[Config] = None) -> Tree:
    """Parse markup into a Tree with a fresh TreeParser."""
    return TreeParser(config).parse(markup)
