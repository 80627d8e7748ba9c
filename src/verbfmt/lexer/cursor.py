"""Rewindable character cursor over the lexer input.

Replaces a stream "unread" primitive with an index into the source text.
"""

from __future__ import annotations


class Cursor:
    """Character cursor with one step of pushback.

    ``read()`` returns the next character or ``""`` once the input is
    exhausted. ``unread()`` steps back over the last character read.
    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    def read(self) -> str:
        """Consume and return the next character ("" at end of input)."""
        if self._pos >= self._source_len:
            return ""
        char = self._source[self._pos]
        self._pos += 1
        return char

    def unread(self) -> None:
        """Push the last character read back onto the cursor.

        Raises:
            ValueError: If nothing has been read yet
        """
        if self._pos == 0:
            msg = "unread() called before any character was read"
            raise ValueError(msg)
        self._pos -= 1

    @property
    def at_end(self) -> bool:
        """True if every character has been consumed."""
        return self._pos >= self._source_len

    @property
    def pos(self) -> int:
        return self._pos
