"""Formatter protocol — the caller-supplied side of rendering.

Any object with a ``format(verb) -> str`` method can serve as the data
source for a compiled format. verbfmt ships no implementations; callers map
verbs to their own fields.

Example:
    class Point:
        def __init__(self, x, y):
            self.x, self.y = x, y

        def format(self, verb: str) -> str:
            if verb == "x":
                return str(self.x)
            if verb == "y":
                return str(self.y)
            raise KeyError(verb)

"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Formatter(Protocol):
    """Protocol for verb formatters.

    Implementations return the substitution text for a verb, or raise to
    abort rendering. The renderer wraps the exception in FormatterError.

    """

    def format(self, verb: str) -> str:
        """Render a single verb.

        Args:
            verb: The verb character (a one-character string).

        Returns:
            Substitution text for the verb.

        """
        ...
