"""A byte port over non-blocking read and chunked write callables."""

from __future__ import annotations

from typing import Callable, Optional

DEFAULT_CHUNK_SIZE = 64


class StreamPort:
    """Reads what is available and writes in chunks the device accepts.

    ``reader(size)`` returns up to ``size`` bytes that are available now,
    possibly none. ``writer(chunk)`` is handed at most ``chunk_size`` bytes
    and returns how many it took, or None when it took them all.
    """

    def __init__(
        self,
        reader: Callable[[int], Optional[bytes]],
        writer: Callable[[bytes], Optional[int]],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self.reader = reader
        self.writer = writer
        self.chunk_size = chunk_size

    def read(self, size: int) -> bytes:
        """Return up to ``size`` bytes that are waiting; empty if none."""
        if size <= 0:
            return b""
        data = self.reader(size)
        if not data:
            return b""
        return bytes(data[:size])

    def write(self, data: bytes) -> int:
        """Send all of ``data``, retrying until every byte is taken."""
        view = memoryview(bytes(data))
        while view:
            chunk = view[: self.chunk_size]
            taken = self.writer(bytes(chunk))
            accepted = len(chunk) if taken is None else max(0, min(taken, len(chunk)))
            view = view[accepted:]
        return len(data)