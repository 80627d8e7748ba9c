"""Token definition for the verbfmt lexer.

The lexer produces a sequence of Token objects that the renderer consumes.
A token is either a literal run of text or a single verb character.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        is_verb: True if the token is a verb, False for literal text
        data: The verb character, or the non-empty literal run

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    is_verb: bool
    data: str

    @classmethod
    def literal(cls, text: str) -> Token:
        """Create a literal text token."""
        return cls(is_verb=False, data=text)

    @classmethod
    def verb(cls, char: str) -> Token:
        """Create a verb token for a single character."""
        return cls(is_verb=True, data=char)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.is_verb:
            return f"Token(VERB, {self.data!r})"
        val = self.data
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token(TEXT, {val!r})"
