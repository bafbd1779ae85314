"""A small reader over whitespace- and line-oriented text input."""

from __future__ import annotations

import re

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class Scanner:
    """Reads characters, lines and numbers from a block of text."""

    def __init__(self, text):
        self._text = text
        self._pos = 0

    def skip_whitespace(self):
        """Advance past any whitespace, newlines included."""
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def at_end(self):
        """True when nothing but whitespace is left."""
        return self._text[self._pos:].strip() == ""

    def read_char(self):
        """Return the next non-whitespace character."""
        self.skip_whitespace()
        if self._pos >= len(self._text):
            raise EOFError("no character left to read")
        char = self._text[self._pos]
        self._pos += 1
        return char

    def _take_until_newline(self):
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        line = self._text[self._pos:end]
        self._pos = end
        return line

    def read_line(self):
        """Skip whitespace, then return the rest of the current line."""
        self.skip_whitespace()
        if self._pos >= len(self._text):
            raise EOFError("no line left to read")
        return self._take_until_newline()

    def read_rest_of_line(self):
        """Return the rest of the current line without skipping anything.

        Returns an empty string when the cursor already sits on a newline.
        """
        if self._pos >= len(self._text) or self._text[self._pos] == "\n":
            return ""
        return self._take_until_newline()

    def _read_number(self, pattern, convert, what):
        self.skip_whitespace()
        if self._pos >= len(self._text):
            raise EOFError(f"no {what} left to read")
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise ValueError(f"expected {what} at position {self._pos}")
        self._pos = match.end()
        return convert(match.group())

    def read_int(self):
        """Skip whitespace and read a decimal integer."""
        return self._read_number(_INT_RE, int, "integer")

    def read_float(self):
        """Skip whitespace and read a decimal number."""
        return self._read_number(_FLOAT_RE, float, "number")