"""Tests for the verb lexer scanning rules."""

from __future__ import annotations

import io

import pytest

from verbfmt.errors import UnsupportedVerbError
from verbfmt.lexer import Cursor, Lexer
from verbfmt.tokens import Token


def lex(source: str, prefix: str = "%", verbs: str = "sd") -> tuple[Token, ...]:
    lexer = Lexer(prefix, verbs)
    lexer.set_input_stream(source)
    lexer.lex()
    return lexer.tokens


class TestLiteralRuns:
    """Literal text is grouped into runs that stop at the prefix."""

    def test_plain_text_is_one_token(self) -> None:
        assert lex("hello") == (Token.literal("hello"),)

    def test_run_stops_before_prefix(self) -> None:
        assert lex("val=%s!") == (
            Token.literal("val="),
            Token.verb("s"),
            Token.literal("!"),
        )

    def test_verb_chars_inside_literal_are_not_split(self) -> None:
        assert lex("sss%sddd") == (
            Token.literal("sss"),
            Token.verb("s"),
            Token.literal("ddd"),
        )

    def test_adjacent_verbs(self) -> None:
        assert lex("%d-%s") == (Token.verb("d"), Token.literal("-"), Token.verb("s"))
        assert lex("%d%s") == (Token.verb("d"), Token.verb("s"))

    def test_empty_input_produces_no_tokens(self) -> None:
        assert lex("") == ()

    def test_multiline_and_unicode_text(self) -> None:
        assert lex("naïve\n日本 %s") == (
            Token.literal("naïve\n日本 "),
            Token.verb("s"),
        )


class TestPrefixEscapes:
    """Doubled and dangling prefix behavior."""

    def test_doubled_prefix_at_end_is_literal(self) -> None:
        assert lex("100%%") == (Token.literal("100"), Token.literal("%"))

    def test_only_doubled_prefix(self) -> None:
        assert lex("%%") == (Token.literal("%"),)

    def test_doubled_prefix_before_more_text_is_unsupported(self) -> None:
        """A doubled prefix is only an escape at the very end of input."""
        with pytest.raises(UnsupportedVerbError) as exc_info:
            lex("%%x")
        assert exc_info.value.sequence == "%%"

    def test_tripled_prefix_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedVerbError):
            lex("%%%")

    def test_lone_trailing_prefix_is_dropped(self) -> None:
        assert lex("abc%") == (Token.literal("abc"),)
        assert lex("%") == ()

    def test_unknown_verb_names_the_sequence(self) -> None:
        with pytest.raises(UnsupportedVerbError) as exc_info:
            lex("ok %q")
        assert exc_info.value.sequence == "%q"
        assert "%q" in str(exc_info.value)


class TestConfiguration:
    """Prefix and verb set handling."""

    def test_custom_prefix(self) -> None:
        assert lex("cost: $n%", prefix="$", verbs="n") == (
            Token.literal("cost: "),
            Token.verb("n"),
            Token.literal("%"),
        )

    def test_verbs_sorted_and_deduplicated(self) -> None:
        lexer = Lexer("%", ["d", "s", "d", "a"])
        assert lexer.allowed_verbs == ("a", "d", "s")

    def test_prefix_excluded_from_verbs(self) -> None:
        lexer = Lexer("%", "%s")
        assert lexer.allowed_verbs == ("s",)
        assert not lexer.is_allowed("%")

    def test_is_allowed(self) -> None:
        lexer = Lexer("%", "bdfs")
        assert lexer.is_allowed("b")
        assert lexer.is_allowed("s")
        assert not lexer.is_allowed("a")
        assert not lexer.is_allowed("z")


class TestInputAndReset:
    """Input handling and reuse."""

    def test_lex_without_input_is_noop(self) -> None:
        lexer = Lexer("%", "s")
        lexer.lex()
        assert lexer.tokens == ()

    def test_text_stream_input(self) -> None:
        lexer = Lexer("%", "s")
        lexer.set_input_stream(io.StringIO("a%sb"))
        lexer.lex()
        assert lexer.tokens == (Token.literal("a"), Token.verb("s"), Token.literal("b"))

    def test_stream_failure_propagates(self) -> None:
        class BrokenStream:
            def read(self) -> str:
                raise OSError("device gone")

        lexer = Lexer("%", "s")
        with pytest.raises(OSError, match="device gone"):
            lexer.set_input_stream(BrokenStream())  # type: ignore[arg-type]

    def test_reset_clears_tokens_and_input(self) -> None:
        lexer = Lexer("%", "s")
        lexer.set_input_stream("x%s")
        lexer.lex()
        assert lexer.tokens

        lexer.reset()
        assert lexer.tokens == ()
        lexer.lex()
        assert lexer.tokens == ()

    def test_reset_after_failure_allows_reuse(self) -> None:
        lexer = Lexer("%", "s")
        lexer.set_input_stream("a%q")
        with pytest.raises(UnsupportedVerbError):
            lexer.lex()
        lexer.reset()

        lexer.set_input_stream("b%s")
        lexer.lex()
        assert lexer.tokens == (Token.literal("b"), Token.verb("s"))


class TestCursor:
    """Cursor read/unread semantics."""

    def test_read_until_end(self) -> None:
        cursor = Cursor("ab")
        assert cursor.read() == "a"
        assert cursor.read() == "b"
        assert cursor.at_end
        assert cursor.read() == ""

    def test_unread_pushes_back(self) -> None:
        cursor = Cursor("ab")
        cursor.read()
        cursor.unread()
        assert cursor.pos == 0
        assert cursor.read() == "a"

    def test_unread_at_start_raises(self) -> None:
        with pytest.raises(ValueError):
            Cursor("ab").unread()
