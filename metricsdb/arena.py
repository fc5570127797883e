"""A fixed-capacity bump allocator for strings."""

from __future__ import annotations


class Arena:
    """Copies strings into one buffer of fixed capacity until it is reset."""

    __slots__ = ("_capacity", "_buffer", "_offset")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"Arena capacity must not be negative: {capacity}")
        self._capacity = capacity
        self._buffer = bytearray()
        self._offset = 0

    def alloc_str(self, text: str) -> str:
        """Copy ``text`` into the arena and return the stored string.

        Raises MemoryError when the UTF-8 bytes of ``text`` do not fit.
        """
        data = text.encode("utf-8")
        start = self._offset
        end = start + len(data)
        if end > self._capacity:
            raise MemoryError("Arena out of memory")
        self._buffer[start:] = data
        self._offset = end
        return bytes(self._buffer[start:end]).decode("utf-8")

    def reset(self) -> None:
        """Make the whole capacity available again."""
        self._offset = 0

    def __len__(self) -> int:
        return self._offset