"""
Attr implementation for the virtual DOM.
"""


class Attr:
    """
    An xml/html attribute of an Element.

    Attributes are plain values: two attributes are equal when both name and
    value match exactly, case included.
    """

    __slots__ = ('_name', '_value')

    def __init__(self, name: str, value: str = ""):
        self._name = name
        self._value = "" if value is None else value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> str:
        return self._value

    def html(self) -> str:
        """Render as it appears inside a start tag, e.g. ``src="a.png"``."""
        return f'{self._name}="{self._value}"'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._name, self._value))

    def __iter__(self):
        # Allows `name, value = attr`
        yield self._name
        yield self._value

    def __repr__(self) -> str:
        return f"Attr({self._name!r}, {self._value!r})"
