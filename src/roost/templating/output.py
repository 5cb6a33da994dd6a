"""Scoped output capture.

``OutputStack`` is where rendered text goes. Writes land in the
innermost active capture buffer, or in the base stream when nothing is
capturing. Nested renders (layout -> script -> partial) each push a
buffer and always pop it, even when the template raises.
"""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from io import StringIO
from typing import TextIO


class OutputStack:
    """A base text stream plus a stack of capture buffers.

    Usage::

        out = OutputStack()
        with out.capture() as buffer:
            out.write("captured")
        buffer.getvalue()  # "captured"
        out.write("to stdout")
    """

    __slots__ = ("_buffers", "_stream")

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._buffers: list[StringIO] = []

    @property
    def stream(self) -> TextIO:
        """The base stream; ``sys.stdout`` unless one was given."""
        # Resolved per write so redirected stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    @stream.setter
    def stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    @property
    def depth(self) -> int:
        """Number of active captures."""
        return len(self._buffers)

    def write(self, text: str) -> None:
        target = self._buffers[-1] if self._buffers else self.stream
        target.write(text)

    @contextmanager
    def capture(self) -> Iterator[StringIO]:
        """Redirect writes into a fresh buffer for the duration of the block."""
        buffer = StringIO()
        self._buffers.append(buffer)
        depth = len(self._buffers)
        try:
            yield buffer
        finally:
            # Drops this buffer and anything an inner scope failed to pop.
            del self._buffers[depth - 1 :]
