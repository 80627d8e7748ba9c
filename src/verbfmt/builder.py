"""Format builder and compiled format function.

VerbFormatBuilder accumulates a prefix and a set of allowed verbs;
build() snapshots that configuration into a VerbFormat, the reusable
render function.

Thread Safety:
VerbFormatBuilder is a mutable, single-owner object.
VerbFormat reuses one Lexer across calls and is NOT safe for concurrent
calls. Build one VerbFormat per thread.

Usage:
    builder = VerbFormatBuilder().register("s").register("d")
    fmt = builder.build()
    fmt("val=%s!", data)  # data.format("s") fills in the verb
"""

from __future__ import annotations

from bisect import insort
from collections.abc import Callable, Iterable
from typing import TextIO

from verbfmt.config import FormatConfig
from verbfmt.formatter import Formatter
from verbfmt.lexer import Lexer
from verbfmt.renderer import apply
from verbfmt.utils.logger import get_logger

logger = get_logger(__name__)

FormatFn = Callable[[str, Formatter | None], str]
"""Signature of a compiled format: (format, data) -> rendered string."""


def _check_char(value: str, what: str, *, allow_empty: bool = False) -> None:
    if not isinstance(value, str):
        msg = f"{what} must be a str, got {type(value).__name__}"
        raise TypeError(msg)
    if len(value) == 1 or (allow_empty and value == ""):
        return
    msg = f"{what} must be a single character, got {value!r}"
    raise ValueError(msg)


class VerbFormat:
    """Compiled format function bound to one prefix and verb set.

    Call it with a format string and an optional Formatter.

    Thread Safety:
        Not safe for concurrent calls; the bound Lexer is per-call scratch
        state that is reset after every call.

    """

    __slots__ = ("_lexer",)

    def __init__(self, lexer: Lexer) -> None:
        """Initialize from a configured lexer.

        Use VerbFormatBuilder.build() to create instances.
        """
        self._lexer = lexer

    @property
    def prefix(self) -> str:
        return self._lexer.prefix

    @property
    def verbs(self) -> tuple[str, ...]:
        """Allowed verbs, sorted."""
        return self._lexer.allowed_verbs

    def __call__(self, format: str | TextIO, data: Formatter | None = None) -> str:
        """Render a format string.

        Args:
            format: Format string (or text stream) to render
            data: Formatter for verbs, or None for literal-only formats

        Returns:
            Rendered string; "" for an empty format

        Raises:
            UnsupportedVerbError: On a verb outside the allowed set, or any
                verb when data is None
            FormatterError: If the formatter raises
        """
        if isinstance(format, str) and not format:
            return ""

        lexer = self._lexer
        try:
            lexer.set_input_stream(format)
            lexer.lex()
            return apply(lexer.tokens, data)
        finally:
            lexer.reset()

    def __repr__(self) -> str:
        return f"VerbFormat(prefix={self.prefix!r}, verbs={''.join(self.verbs)!r})"


class VerbFormatBuilder:
    """Mutable builder for VerbFormat.

    Register verbs and optionally set a prefix, then call build() to create
    a compiled format. The builder can keep being used afterwards; compiled
    formats never see later changes.

    Example:
        >>> builder = VerbFormatBuilder().set_prefix("$").register_all("nv")
        >>> fmt = builder.build()
    """

    __slots__ = ("_prefix", "_verbs")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._prefix: str = ""
        self._verbs: list[str] = []

    @classmethod
    def from_config(cls, config: FormatConfig) -> VerbFormatBuilder:
        """Create a builder pre-populated from a FormatConfig.

        Raises:
            ValueError: If the prefix or a verb is not a single character
        """
        builder = cls()
        builder.set_prefix(config.prefix)
        builder.register_all(config.verbs)
        return builder

    @property
    def prefix(self) -> str:
        """Configured prefix ("" if unset)."""
        return self._prefix

    @property
    def verbs(self) -> tuple[str, ...]:
        """Registered verbs, sorted."""
        return tuple(self._verbs)

    @property
    def config(self) -> FormatConfig:
        """Snapshot of the current configuration."""
        return FormatConfig(prefix=self._prefix, verbs=tuple(self._verbs))

    def set_prefix(self, char: str) -> VerbFormatBuilder:
        """Set the prefix that introduces verbs.

        Args:
            char: Prefix character; "" restores DEFAULT_PREFIX

        Returns:
            Self for chaining

        Raises:
            ValueError: If char is longer than one character
        """
        _check_char(char, "prefix", allow_empty=True)
        self._prefix = char
        return self

    def register(self, verb: str) -> VerbFormatBuilder:
        """Register a verb. Registering a verb twice is a no-op.

        A verb equal to the prefix is dropped at build() time.

        Args:
            verb: Verb character

        Returns:
            Self for chaining

        Raises:
            ValueError: If verb is not a single character
        """
        _check_char(verb, "verb")
        verbs = self._verbs
        if verb not in verbs:
            insort(verbs, verb)
        return self

    def register_all(self, verbs: Iterable[str]) -> VerbFormatBuilder:
        """Register multiple verbs.

        Args:
            verbs: Iterable of verb characters (a str works)

        Returns:
            Self for chaining
        """
        for verb in verbs:
            self.register(verb)
        return self

    def build(self) -> VerbFormat:
        """Compile the current configuration into a VerbFormat.

        Returns:
            New VerbFormat bound to its own Lexer
        """
        prefix = self.config.effective_prefix
        verbs = [v for v in self._verbs if v != prefix]

        logger.debug("Compiling format prefix=%r verbs=%r", prefix, "".join(verbs))
        return VerbFormat(Lexer(prefix, verbs))

    def reset(self) -> VerbFormatBuilder:
        """Clear prefix and verbs so the builder can be reused."""
        self._prefix = ""
        self._verbs.clear()
        return self

    def __len__(self) -> int:
        """Number of registered verbs."""
        return len(self._verbs)


def compile_format(*verbs: str, prefix: str = "") -> VerbFormat:
    """Compile a format in one call.

    Args:
        *verbs: Verb characters; multi-character strings register each char
        prefix: Prefix character ("" for DEFAULT_PREFIX)

    Returns:
        Compiled VerbFormat

    Example:
        >>> fmt = compile_format("s", "d")
        >>> fmt("plain text")
        'plain text'
    """
    builder = VerbFormatBuilder().set_prefix(prefix)
    for group in verbs:
        builder.register_all(group)
    return builder.build()
