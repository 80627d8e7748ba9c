"""Token renderer.

Walks the lexer's token sequence left to right, copying literal runs and
substituting verbs through a Formatter. Rendering stops at the first
failure; the exception carries the output built up to that point.

"""

from __future__ import annotations

from collections.abc import Sequence

from verbfmt.errors import FormatterError, UnsupportedVerbError
from verbfmt.formatter import Formatter
from verbfmt.stringbuilder import StringBuilder
from verbfmt.tokens import Token
from verbfmt.utils.logger import get_logger

logger = get_logger(__name__)


def apply(tokens: Sequence[Token], data: Formatter | None) -> str:
    """Render tokens against a formatter.

    Args:
        tokens: Tokens from Lexer.lex()
        data: Formatter for verb tokens, or None for literal-only output

    Returns:
        Rendered string

    Raises:
        UnsupportedVerbError: If a verb token is met and data is None
        FormatterError: If data.format() raises; chained to the original
    """
    if not tokens:
        return ""

    sb = StringBuilder()

    if data is None:
        for token in tokens:
            if token.is_verb:
                raise UnsupportedVerbError(verb=token.data, partial=sb.build())
            sb.append(token.data)
        return sb.build()

    for token in tokens:
        if not token.is_verb:
            sb.append(token.data)
            continue

        try:
            text = data.format(token.data)
        except Exception as e:
            logger.debug("Formatter %r failed for verb %r", data, token.data, exc_info=True)
            raise FormatterError(token.data, partial=sb.build()) from e
        sb.append(text)

    return sb.build()
