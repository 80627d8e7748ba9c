"""Single-pass lexer for verb format strings.

Scans a format string into literal runs and single-character verbs using
one character of lookahead. A literal run stops right before the next
prefix character, which is pushed back and re-scanned as the start of the
next token.

Thread Safety:
A Lexer holds per-call scratch state (input cursor and token list).
Use one instance per thread, and call reset() after every lex().

"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import TextIO

from verbfmt.errors import UnsupportedVerbError
from verbfmt.lexer.cursor import Cursor
from verbfmt.tokens import Token


class Lexer:
    """Lexer bound to one prefix and one allowed-verb set.

    Usage:
            >>> lexer = Lexer("%", "sd")
            >>> lexer.set_input_stream("val=%s!")
            >>> lexer.lex()
            >>> lexer.tokens
            (Token(TEXT, 'val='), Token(VERB, 's'), Token(TEXT, '!'))
            >>> lexer.reset()

    The allowed verbs are kept sorted and deduplicated for binary-search
    membership tests. The prefix is never an allowed verb.

    """

    __slots__ = ("_prefix", "_allowed_verbs", "_cursor", "_tokens")

    def __init__(self, prefix: str, allowed_verbs: Iterable[str]) -> None:
        """Initialize lexer.

        Args:
            prefix: Single character that introduces a verb
            allowed_verbs: Verb characters accepted after the prefix
        """
        self._prefix = prefix
        self._allowed_verbs: tuple[str, ...] = tuple(
            sorted({v for v in allowed_verbs if v != prefix})
        )
        self._cursor: Cursor | None = None
        self._tokens: list[Token] = []

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def allowed_verbs(self) -> tuple[str, ...]:
        return self._allowed_verbs

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Tokens produced by the last lex() call."""
        return tuple(self._tokens)

    def set_input_stream(self, source: str | TextIO) -> None:
        """Set the input to lex.

        Args:
            source: Format string, or a text stream read to the end.
                Errors raised while reading the stream propagate unchanged.
        """
        if not isinstance(source, str):
            source = source.read()
        self._cursor = Cursor(source)

    def lex(self) -> None:
        """Lex the whole input into tokens.

        Does nothing if no input has been set. Remember to call reset()
        afterwards so tokens do not leak into the next call.

        Raises:
            UnsupportedVerbError: If a prefix is followed by a character
                that is not an allowed verb
        """
        if self._cursor is None:
            return

        while True:
            token = self._lex_one(self._cursor)
            if token is None:
                break
            self._tokens.append(token)

    def reset(self) -> None:
        """Clear tokens and input so the lexer can be reused."""
        self._tokens.clear()
        self._cursor = None

    def is_allowed(self, char: str) -> bool:
        """Check verb membership with a binary search."""
        verbs = self._allowed_verbs
        idx = bisect_left(verbs, char)
        return idx < len(verbs) and verbs[idx] == char

    def _lex_one(self, cursor: Cursor) -> Token | None:
        """Scan one token, or return None at end of input."""
        char = cursor.read()
        if not char:
            return None

        prefix = self._prefix
        if char == prefix:
            next_char = cursor.read()
            if not next_char:
                # Lone trailing prefix: end of input ends the scan.
                return None
            if next_char == prefix and cursor.at_end:
                return Token.literal(prefix)
            if not self.is_allowed(next_char):
                raise UnsupportedVerbError(sequence=prefix + next_char)
            return Token.verb(next_char)

        parts = [char]
        while True:
            char = cursor.read()
            if not char:
                break
            if char == prefix:
                cursor.unread()
                break
            parts.append(char)
        return Token.literal("".join(parts))
