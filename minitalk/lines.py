"""Reading a stream one line at a time in fixed-size chunks."""

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Return successive lines of a stream, each ending with its newline.

    The stream is read ``buffer_size`` units at a time; data read past the
    end of a line is kept for the next call. Works with both binary and
    text streams.
    """

    def __init__(self, stream, buffer_size=DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None

    def _take(self, end):
        line = self._pending[:end]
        self._pending = self._pending[end:]
        return line

    def next_line(self):
        """Return the next line, the unterminated tail at end of stream, or None."""
        while True:
            if self._pending:
                newline = b"\n" if isinstance(self._pending, bytes) else "\n"
                index = self._pending.find(newline)
                if index >= 0:
                    return self._take(index + 1)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                if self._pending:
                    return self._take(len(self._pending))
                return None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self):
        while (line := self.next_line()) is not None:
            yield line


def iter_lines(stream, buffer_size=DEFAULT_BUFFER_SIZE):
    """Yield the lines of ``stream`` as read by a :class:`LineReader`."""
    yield from LineReader(stream, buffer_size)