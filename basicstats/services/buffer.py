"""Sample buffer with an explicit doubling growth policy."""
from __future__ import annotations

import logging
from typing import Iterator

from basicstats.services.errors import AllocationFailure

__all__: list[str] = [
    "INITIAL_CAPACITY",
    "GrowableBuffer",
]

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 20


class GrowableBuffer:
    """
    Holds ingested values in a fixed-size storage block.
    When the block is full, a block twice as large is allocated, the values are
    copied over in order and the old block is dropped. Capacity never shrinks.
    Once sorted, the buffer is sealed and refuses further appends.
    """

    def __init__(self, initial_capacity: int = INITIAL_CAPACITY, max_capacity: int | None = None) -> None:
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        if max_capacity is not None and max_capacity < initial_capacity:
            raise ValueError("max_capacity must not be smaller than initial_capacity")
        self._max_capacity = max_capacity
        self._storage: list[float] = [0.0] * initial_capacity
        self._count = 0
        self._sorted = False

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def count(self) -> int:
        return self._count

    @property
    def unused_capacity(self) -> int:
        return self.capacity - self._count

    @property
    def is_sorted(self) -> bool:
        return self._sorted

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[float]:
        for i in range(self._count):
            yield self._storage[i]

    def __getitem__(self, index: int) -> float:
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("buffer index out of range")
        return self._storage[index]

    def append(self, value: float) -> None:
        if self._sorted:
            raise RuntimeError("cannot append to a sorted sample set")
        if self._count == self.capacity:
            self._grow()
        self._storage[self._count] = float(value)
        self._count += 1

    def extend(self, values) -> None:
        for value in values:
            self.append(value)

    def sort(self) -> None:
        """Sort the logical values ascending and seal the buffer."""
        if self._sorted:
            return
        head = sorted(self._storage[: self._count])
        self._storage[: self._count] = head
        self._sorted = True

    def release(self) -> None:
        """Drop the storage block. Safe to call more than once."""
        self._storage = []
        self._count = 0

    def to_list(self) -> list[float]:
        return self._storage[: self._count]

    def _grow(self) -> None:
        new_capacity = 2 * self.capacity
        if self._max_capacity is not None and new_capacity > self._max_capacity:
            raise AllocationFailure(
                f"cannot grow sample buffer to {new_capacity} values (limit {self._max_capacity})"
            )
        try:
            new_storage = [0.0] * new_capacity
        except MemoryError as exc:
            raise AllocationFailure(f"cannot grow sample buffer to {new_capacity} values") from exc
        new_storage[: self._count] = self._storage[: self._count]
        self._storage = new_storage
        logger.debug("Grew sample buffer to capacity %d", new_capacity)
