"""
Parsing support for vdom.

The tree builder lives in vdom.parser.html_parser; it is not imported here
because it depends on vdom.dom, which itself depends on the source reader.
"""

from .source_reader import SourceReader, SourceRangeError, unescape

__all__ = ['SourceReader', 'SourceRangeError', 'unescape']
