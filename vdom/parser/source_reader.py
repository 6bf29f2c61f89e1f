"""
Byte-offset aware source buffer.

A SourceReader owns the raw bytes of a parsed document. Every Element of a
Tree keeps a reference to the same reader and addresses its markup through
byte offsets, so the document is stored exactly once.
"""

import html
import logging
from bisect import bisect_right
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class SourceRangeError(ValueError):
    """Raised when an offset or range does not fit inside the source."""


def unescape(text: str) -> str:
    """Decode HTML/XML character references, e.g. ``&amp;`` -> ``&``."""
    return html.unescape(text)


class SourceReader:
    """
    Immutable document source with offset conversion helpers.

    The parser works on decoded text while the tree stores byte offsets,
    so the reader converts character offsets and (line, column) positions
    into byte offsets.
    """

    def __init__(self, data: Union[bytes, str], encoding: str = "utf-8"):
        """
        Initialize the reader.

        Args:
            data: The raw document, bytes or already decoded text
            encoding: Encoding of ``data`` when it is bytes
        """
        if isinstance(data, str):
            self._text = data
            self._data = data.encode(encoding)
        else:
            self._data = bytes(data)
            self._text = self._data.decode(encoding)
        self.encoding = encoding

        # Lazily built lookup tables
        self._line_starts: Optional[List[int]] = None
        self._byte_offsets: Optional[List[int]] = None

    @property
    def data(self) -> bytes:
        """The raw source bytes."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SourceReader({len(self._data)} bytes, encoding={self.encoding!r})"

    def text(self) -> str:
        """Return the whole source decoded, entities left untouched."""
        return self._text

    def slice(self, start: int, end: int) -> str:
        """
        Decode the byte range ``[start, end)``.

        Raises:
            SourceRangeError: If the range is not inside the source
        """
        self.check_range(start, end)
        return self._data[start:end].decode(self.encoding)

    def check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._data):
            raise SourceRangeError(
                f"byte range [{start}, {end}) is outside the source of {len(self._data)} bytes"
            )

    def byte_offset(self, char_offset: int) -> int:
        """
        Convert a character offset in the decoded text to a byte offset.

        Raises:
            SourceRangeError: If the offset is past the end of the text
        """
        if not 0 <= char_offset <= len(self._text):
            raise SourceRangeError(
                f"character offset {char_offset} is outside the text of {len(self._text)} characters"
            )
        if len(self._text) == len(self._data):
            # Single-byte content, offsets coincide
            return char_offset
        if self._byte_offsets is None:
            self._byte_offsets = self._build_byte_offsets()
        return self._byte_offsets[char_offset]

    def char_offset(self, line: int, column: int) -> int:
        """
        Convert a 1-based line and 0-based column (as reported by
        ``html.parser.HTMLParser.getpos``) to a character offset.
        """
        if self._line_starts is None:
            self._line_starts = self._build_line_starts()
        if not 1 <= line <= len(self._line_starts):
            raise SourceRangeError(f"line {line} is outside the source of {len(self._line_starts)} lines")
        offset = self._line_starts[line - 1] + column
        if offset > len(self._text):
            raise SourceRangeError(f"column {column} is past the end of line {line}")
        return offset

    def position(self, char_offset: int) -> Tuple[int, int]:
        """Inverse of char_offset: return (line, column) for a character offset."""
        if self._line_starts is None:
            self._line_starts = self._build_line_starts()
        line_index = bisect_right(self._line_starts, char_offset) - 1
        return line_index + 1, char_offset - self._line_starts[line_index]

    def _build_line_starts(self) -> List[int]:
        starts = [0]
        for i, char in enumerate(self._text):
            if char == '\n':
                starts.append(i + 1)
        return starts

    def _build_byte_offsets(self) -> List[int]:
        offsets = [0] * (len(self._text) + 1)
        total = 0
        for i, char in enumerate(self._text):
            offsets[i] = total
            total += len(char.encode(self.encoding))
        offsets[len(self._text)] = total
        return offsets
