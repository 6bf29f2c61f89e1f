"""
Positional CSS selector engine.

Selectors produced here only use ``*:nth-child(n)`` steps joined by the
child combinator. The wildcard tag is deliberate: only the position of an
element is guaranteed to line up between the virtual tree and a live DOM.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import cssselect
from cssselect.parser import CombinedSelector, Element as CssElement, Function, Selector

logger = logging.getLogger(__name__)


class SelectorError(ValueError):
    """Raised for selectors that cannot be parsed or are not positional."""


def selector_for(index: Sequence[int]) -> str:
    """
    Build the selector for an index path, e.g. (0, 2) gives
    ``*:nth-child(1) > *:nth-child(3)``. nth-child is 1-based.
    """
    if not index:
        raise ValueError("cannot build a selector for an empty index path")
    selector = f"*:nth-child({index[0] + 1})"
    for i in index[1:]:
        selector += f" > *:nth-child({i + 1})"
    return selector


class SelectorEngine:
    """
    Builds, parses and resolves positional selectors.

    Parsing goes through cssselect so any valid css is accepted by parse(),
    while index_for() and resolve() only understand the positional chains
    that selector_for() produces.
    """

    def __init__(self):
        self.translator = cssselect.HTMLTranslator()

        # Cache for parsed selectors
        self._selector_cache: Dict[str, Selector] = {}

        logger.debug("SelectorEngine initialized")

    def selector_for(self, index: Sequence[int]) -> str:
        return selector_for(index)

    def parse(self, selector: str) -> Selector:
        """
        Parse a single css selector.

        Raises:
            SelectorError: On invalid syntax or a selector group
        """
        if selector not in self._selector_cache:
            try:
                parsed = cssselect.parse(selector)
            except cssselect.SelectorSyntaxError as e:
                raise SelectorError(f"invalid selector {selector!r}: {e}") from e
            if len(parsed) != 1:
                raise SelectorError(f"expected a single selector but {selector!r} has {len(parsed)}")
            self._selector_cache[selector] = parsed[0]
        return self._selector_cache[selector]

    def index_for(self, selector: str) -> Tuple[int, ...]:
        """
        Decode a positional selector back into an index path.

        Raises:
            SelectorError: If the selector is not a chain of ``*:nth-child(n)``
        """
        tree = self.parse(selector).parsed_tree
        steps: List[int] = []
        while isinstance(tree, CombinedSelector):
            if tree.combinator != '>':
                raise SelectorError(f"unsupported combinator {tree.combinator!r} in {selector!r}")
            steps.append(self._nth_child(tree.subselector, selector))
            tree = tree.selector
        steps.append(self._nth_child(tree, selector))
        steps.reverse()
        return tuple(steps)

    def _nth_child(self, tree, selector: str) -> int:
        if not isinstance(tree, Function) or tree.name != 'nth-child':
            raise SelectorError(f"{selector!r} is not a positional selector")
        if not isinstance(tree.selector, CssElement) or tree.selector.element is not None:
            raise SelectorError(f"{selector!r} must use the * tag in every step")
        arguments = tree.arguments
        if (len(arguments) != 1 or arguments[0].type != 'NUMBER'
                or not arguments[0].value.isdigit() or int(arguments[0].value) < 1):
            raise SelectorError(f"{selector!r} must use a positive integer in nth-child")
        return int(arguments[0].value) - 1

    def resolve(self, tree, selector: str):
        """
        Find the node of a virtual tree that a positional selector points at.

        Args:
            tree: A vdom Tree
            selector: A selector as produced by Element.selector()

        Returns:
            The node, or None if the tree has no node at that position
        """
        return self.node_at(tree.roots, self.index_for(selector))

    @staticmethod
    def node_at(roots: Sequence, index: Iterable[int]):
        """Follow an index path from a sequence of roots, None when it leaves the tree."""
        nodes = roots
        node = None
        for i in index:
            if not 0 <= i < len(nodes):
                return None
            node = nodes[i]
            nodes = node.children
        return node

    def to_xpath(self, selector: str) -> str:
        """Translate a selector to XPath for callers querying an lxml document."""
        try:
            return self.translator.css_to_xpath(selector)
        except cssselect.SelectorError as e:
            raise SelectorError(f"cannot translate {selector!r}: {e}") from e
