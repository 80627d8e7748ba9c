"""
verbfmt — Verb-based format strings for Python

Compiles a prefix character and a set of single-character verbs into a
reusable format function. Literal text is copied through; each verb is
rendered by a caller-supplied Formatter.

Quick Start:
    >>> from verbfmt import VerbFormatBuilder
    >>> class Row:
    ...     def format(self, verb):
    ...         return {"s": "X", "d": "7"}[verb]
    >>> fmt = VerbFormatBuilder().register_all("sd").build()
    >>> fmt("%d-%s", Row())
    '7-X'
    >>> fmt("100%%")
    '100%'

Errors:
    Unknown verbs raise UnsupportedVerbError; formatter failures raise
    FormatterError. Both carry ``partial``, the output built before the
    failure.
"""

from verbfmt.builder import FormatFn, VerbFormat, VerbFormatBuilder, compile_format
from verbfmt.config import DEFAULT_PREFIX, FormatConfig
from verbfmt.errors import (
    FormatterError,
    RenderError,
    SinkWriteError,
    UnsupportedVerbError,
    VerbFmtError,
)
from verbfmt.formatter import Formatter
from verbfmt.lexer import Lexer
from verbfmt.renderer import apply
from verbfmt.tokens import Token
from verbfmt.writer import FStringer, IndentWriter, new_writer

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "compile_format",
    "FormatFn",
    "VerbFormat",
    "VerbFormatBuilder",
    "Formatter",
    # Configuration
    "DEFAULT_PREFIX",
    "FormatConfig",
    # Pipeline components
    "Lexer",
    "Token",
    "apply",
    # Errors
    "VerbFmtError",
    "RenderError",
    "UnsupportedVerbError",
    "FormatterError",
    "SinkWriteError",
    # Writer
    "FStringer",
    "IndentWriter",
    "new_writer",
]
