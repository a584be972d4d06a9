"""
Flat-file dataset format.

This module provides the reader and writer for marker-tagged dataset files:
- read_result / parse_lines: parse a file or its lines into a Result
- format_result / write_result: serialize a Result back to the same format
"""

from .reader import parse_lines, read_marker, read_result, tokenize
from .writer import format_lines, format_result, write_result

__all__ = [
    "parse_lines",
    "read_marker",
    "read_result",
    "tokenize",
    "format_lines",
    "format_result",
    "write_result",
]
