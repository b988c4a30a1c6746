"""Reading a file descriptor one line at a time."""

import os

DEFAULT_BUFFER_SIZE = 2


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is pulled from the descriptor in chunks of ``buffer_size`` bytes.
    Each line is returned as bytes and keeps its trailing newline. The last
    line of the input may have none.
    """

    def __init__(self, fd, buffer_size=DEFAULT_BUFFER_SIZE):
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self):
        """Read chunks until a newline is buffered or the input ends."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self):
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        newline = self._pending.find(b"\n")
        end = len(self._pending) if newline < 0 else newline + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self):
        while (line := self.read_line()) is not None:
            yield line


def read_lines(fd, buffer_size=DEFAULT_BUFFER_SIZE):
    """Yield every remaining line of a file descriptor."""
    yield from LineReader(fd, buffer_size)