from __future__ import annotations

from typing import List, Tuple


class CircularWindow:
    """Fixed-capacity FIFO of integers backed by a preallocated ring.

    Pushing into a full window silently evicts the oldest entry.
    """

    __slots__ = ("_buffer", "_head", "_size")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Window capacity must be >= 1, got {capacity}.")
        self._buffer: List[int] = [0] * capacity
        self._head = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def full(self) -> bool:
        return self._size == len(self._buffer)

    def empty(self) -> bool:
        return self._size == 0

    def push(self, value: int) -> None:
        if self.full():
            self.pop()
        self._buffer[(self._head + self._size) % len(self._buffer)] = value
        self._size += 1

    def pop(self) -> None:
        """Drop the leftmost entry; a no-op on an empty window."""
        if self._size:
            self._head = (self._head + 1) % len(self._buffer)
            self._size -= 1

    def extract(self) -> Tuple[int, List[int]]:
        """Return the leftmost entry and the remaining entries, oldest first."""
        capacity = len(self._buffer)
        left = self._buffer[self._head]
        rest = [
            self._buffer[(self._head + idx) % capacity] for idx in range(1, self._size)
        ]
        return left, rest

    def values(self) -> List[int]:
        """Return all held entries, oldest first."""
        capacity = len(self._buffer)
        return [self._buffer[(self._head + idx) % capacity] for idx in range(self._size)]
