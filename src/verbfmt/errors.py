"""Exception classes for verbfmt.

Provides standardized exceptions for error handling throughout verbfmt.
"""

from __future__ import annotations


class VerbFmtError(Exception):
    """Base exception for all verbfmt errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(VerbFmtError):
    """Error while rendering a format string.

    Carries the output accumulated before the failure. The partial output
    is context for logging or recovery and is never the complete result.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        """Initialize render error.

        Args:
            message: Error description
            partial: Output built before the failure
        """
        self.partial = partial
        super().__init__(message)


class UnsupportedVerbError(RenderError):
    """A verb is not in the allowed set, or no formatter was supplied.

    Raised by the lexer for an unknown prefix sequence (``sequence`` holds
    the prefix and the offending character) and by the renderer when a verb
    token is met without a formatter (``verb`` holds the verb).
    """

    def __init__(
        self,
        *,
        verb: str | None = None,
        sequence: str | None = None,
        partial: str = "",
    ) -> None:
        """Initialize unsupported verb error.

        Args:
            verb: Verb character that could not be rendered
            sequence: Prefix plus character rejected by the lexer
            partial: Output built before the failure
        """
        self.verb = verb
        self.sequence = sequence

        if sequence is not None:
            message = f"flag {sequence!r} is not supported"
        else:
            message = f"verb {verb!r} is not supported"
        super().__init__(message, partial)


class FormatterError(RenderError):
    """The caller-supplied formatter failed for a verb.

    The formatter's own exception is available as ``__cause__``.
    """

    def __init__(self, verb: str, partial: str = "") -> None:
        """Initialize formatter error.

        Args:
            verb: Verb the formatter was asked to render
            partial: Output built before the failure
        """
        self.verb = verb
        super().__init__(f"formatter failed for verb {verb!r}", partial)


class SinkWriteError(VerbFmtError):
    """The writer's output sink failed or wrote fewer bytes than requested.

    Each operation the error passes through appends a frame (innermost
    first); str() lists them outermost first, ending with the message.
    """

    def __init__(self, message: str, *, short_write: bool = False) -> None:
        """Initialize sink write error.

        Args:
            message: Description of the failure
            short_write: True if the sink reported fewer bytes than requested
        """
        self.message = message
        self.short_write = short_write
        self.frames: list[str] = []
        super().__init__(message)

    def add_frame(self, frame: str) -> SinkWriteError:
        """Record an operation the error propagated through.

        Args:
            frame: Operation name (e.g., "IndentWriter.write_line()")

        Returns:
            self for chaining
        """
        self.frames.append(frame)
        return self

    def __str__(self) -> str:
        if not self.frames:
            return self.message
        return ": ".join([*reversed(self.frames), self.message])
