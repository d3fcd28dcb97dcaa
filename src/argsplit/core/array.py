"""Append-only string array with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from argsplit.core.errors import AllocationError, ArrayReleasedError, CapacityError

DEFAULT_CAPACITY = 5

# Upper bound of an unsigned short length counter
MAX_CAPACITY = 0xFFFF

Growth = Literal["double", "fixed"]


def _allocate_slots(count: int) -> list[str | None]:
    """Allocate `count` empty slots."""
    return [None] * count


class StringArray:
    """Ordered, append-only sequence of borrowed string references.

    Attributes:
        capacity: Number of allocated slots
        growth: "double" grows the storage when full, "fixed" refuses
        max_capacity: Hard ceiling for capacity
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        growth: Growth = "double",
        max_capacity: int = MAX_CAPACITY,
        what: str = "array",
    ) -> None:
        if capacity < 0:
            raise ValueError(f"Capacity must not be negative: {capacity}")
        if growth not in ("double", "fixed"):
            raise ValueError(f"Unknown growth policy: {growth}")

        self.growth = growth
        self.max_capacity = max(max_capacity, capacity)
        self._length = 0
        try:
            self._data: list[str | None] | None = _allocate_slots(capacity)
        except MemoryError as e:
            raise AllocationError(what) from e
        self.capacity = capacity

    @property
    def length(self) -> int:
        """Number of populated slots."""
        return len(self)

    @property
    def released(self) -> bool:
        return self._data is None

    @property
    def last(self) -> str | None:
        """Most recently appended item, or None when empty."""
        data = self._storage()
        return data[self._length - 1] if self._length else None

    def append(self, item: str) -> None:
        """Store item in the next free slot, growing storage if allowed."""
        data = self._storage()
        if self._length == self.capacity:
            data = self._grow()
        data[self._length] = item
        self._length += 1

    def release(self) -> None:
        """Drop the backing storage. The array is unusable afterwards."""
        self._data = None
        self._length = 0

    def to_list(self) -> list[str]:
        return list(self)

    def _storage(self) -> list[str | None]:
        if self._data is None:
            raise ArrayReleasedError()
        return self._data

    def _grow(self) -> list[str | None]:
        if self.growth == "fixed" or self.capacity >= self.max_capacity:
            raise CapacityError(self.capacity)

        new_capacity = min(max(1, self.capacity * 2), self.max_capacity)
        try:
            extra = _allocate_slots(new_capacity - self.capacity)
        except MemoryError as e:
            raise AllocationError("array growth") from e

        data = self._storage()
        data.extend(extra)
        self.capacity = new_capacity
        return data

    def __len__(self) -> int:
        self._storage()
        return self._length

    def __iter__(self) -> Iterator[str]:
        data = self._storage()
        for i in range(self._length):
            yield data[i]  # type: ignore[misc]

    def __getitem__(self, index: int) -> str:
        data = self._storage()
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("StringArray index out of range")
        return data[index]  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringArray):
            return self.to_list() == other.to_list()
        if isinstance(other, list):
            return self.to_list() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._data is None:
            return "StringArray(<released>)"
        return f"StringArray({self.to_list()!r}, capacity={self.capacity})"
