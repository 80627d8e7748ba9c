"""Lexer package for verbfmt format strings.

lexer/
├── __init__.py   # Re-exports Lexer, Cursor
├── core.py       # Lexer (prefix/verb scanning)
└── cursor.py     # Index-based cursor with pushback

Usage:
    >>> from verbfmt.lexer import Lexer
    >>> lexer = Lexer("%", "s")
    >>> lexer.set_input_stream("a%s")
    >>> lexer.lex()
    >>> lexer.tokens
    (Token(TEXT, 'a'), Token(VERB, 's'))

"""

from verbfmt.lexer.core import Lexer
from verbfmt.lexer.cursor import Cursor

__all__ = ["Cursor", "Lexer"]
