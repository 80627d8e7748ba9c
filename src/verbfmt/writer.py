"""Line-oriented indentation writer.

Writes pre-rendered text lines to a byte sink, indenting non-empty lines
by three spaces per nesting level and terminating every line with "\\n".
This module consumes rendered output; the lexer and renderer never import it.

Example:
    >>> import io
    >>> sink = io.BytesIO()
    >>> w = IndentWriter(sink)
    >>> w.write_line("root")
    >>> w.indent_by(1).write_line("child")
    >>> sink.getvalue()
    b'root\\n   child\\n'

"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from verbfmt.errors import SinkWriteError
from verbfmt.utils.logger import get_logger

logger = get_logger(__name__)

INDENT = "   "


@runtime_checkable
class Sink(Protocol):
    """Anything with a binary ``write``: files, io.BytesIO, sockets' makefile()."""

    def write(self, data: bytes, /) -> int | None: ...


@runtime_checkable
class FStringer(Protocol):
    """Protocol for objects that write themselves through an IndentWriter."""

    def fstring(self, writer: IndentWriter) -> None:
        """Write this object's lines.

        Args:
            writer: Writer to use; indent_by() gives nested writers.

        Raises:
            SinkWriteError: If the underlying sink fails
        """
        ...


class _DiscardSink:
    """Sink that accepts and drops everything."""

    __slots__ = ()

    def write(self, data: bytes, /) -> int:
        return len(data)


class _Buffer:
    """Checked writes to a sink; short writes become SinkWriteError."""

    __slots__ = ("_sink",)

    def __init__(self, sink: Sink) -> None:
        self._sink = sink

    def write(self, data: bytes) -> None:
        self._write(data, "_Buffer.write()")

    def write_line(self, text: str) -> None:
        self._write((text + "\n").encode(), "_Buffer.write_line()")

    def write_empty_line(self) -> None:
        self._write(b"\n", "_Buffer.write_empty_line()")

    def _write(self, data: bytes, frame: str) -> None:
        try:
            n = self._sink.write(data)
        except (OSError, ValueError) as e:
            logger.debug("Sink write failed in %s", frame, exc_info=True)
            raise SinkWriteError(f"operation failed: {e}").add_frame(frame) from e

        if n is not None and n != len(data):
            logger.debug("Short write in %s: %d of %d bytes", frame, n, len(data))
            raise SinkWriteError(
                f"short write: {n} of {len(data)} bytes", short_write=True
            ).add_frame(frame)


class IndentWriter:
    """Writer that indents lines by nesting level.

    Writers returned by indent_by() share the same sink, so output from
    every level lands in order.

    """

    __slots__ = ("_buffer", "_indent_level")

    def __init__(
        self,
        sink: Sink | None = None,
        indent_level: int = 0,
        *,
        _buffer: _Buffer | None = None,
    ) -> None:
        """Initialize writer.

        Args:
            sink: Byte sink; None discards all output
            indent_level: Starting nesting level (negative clamps to 0)
            _buffer: Buffer shared with a parent writer (set by indent_by)
        """
        if _buffer is None:
            _buffer = _Buffer(sink if sink is not None else _DiscardSink())
        self._buffer = _buffer
        self._indent_level = max(indent_level, 0)

    @property
    def indent_level(self) -> int:
        return self._indent_level

    def write_line(self, text: str) -> None:
        """Write one line.

        Empty text writes only the line terminator; anything else is
        prefixed with the indentation for this writer's level.

        Raises:
            SinkWriteError: If the sink fails or writes short
        """
        try:
            if not text:
                self._buffer.write_empty_line()
            else:
                self._buffer.write_line(INDENT * self._indent_level + text)
        except SinkWriteError as e:
            e.add_frame("IndentWriter.write_line()")
            raise

    def write(self, data: bytes) -> int:
        """Write raw bytes verbatim.

        Returns:
            len(data); always the full length when no error is raised

        Raises:
            SinkWriteError: If the sink fails or writes short
        """
        if not data:
            return 0

        try:
            self._buffer.write(data)
        except SinkWriteError as e:
            e.add_frame("IndentWriter.write()")
            raise
        return len(data)

    def indent_by(self, n: int) -> IndentWriter:
        """Return a writer nested n levels deeper (n may be negative).

        The new level is clamped at 0.
        """
        return IndentWriter(indent_level=self._indent_level + n, _buffer=self._buffer)


def new_writer(sink: Sink | None = None) -> IndentWriter:
    """Create a top-level IndentWriter for sink (None discards output)."""
    return IndentWriter(sink)


__all__ = ["INDENT", "FStringer", "IndentWriter", "Sink", "new_writer"]
