"""Growable vector with inline storage that spills into an arena."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar, overload

from wheelrt.arena import DEFAULT_ALIGNMENT, Arena

T = TypeVar("T")

STACK_BUFFER_BYTES = 4096


class SmallVec(Generic[T]):
    """A vector that keeps its first items in an inline buffer.

    The inline buffer holds ``4096 // item_size`` items.  Once full, the
    storage doubles, taking each new buffer from the arena.
    """

    def __init__(
        self,
        arena: Arena | None,
        item_size: int = 8,
        alignment: int = DEFAULT_ALIGNMENT,
    ) -> None:
        if item_size <= 0:
            raise ValueError(f"item_size must be positive, got {item_size}")
        self._arena = arena
        self._item_size = item_size
        self._alignment = alignment
        self.stack_capacity = STACK_BUFFER_BYTES // item_size
        self._stack_buffer: list[Any] = [None] * self.stack_capacity
        self._data = self._stack_buffer
        self._size = 0
        self._capacity = self.stack_capacity

    def _grow(self) -> None:
        if self._arena is None:
            raise ValueError("SmallVec has no arena to grow into")
        new_capacity = 1 if self._capacity == 0 else self._capacity * 2
        new_data = self._arena.allocate_array(
            new_capacity, self._item_size, self._alignment
        )
        new_data[: self._size] = self._data[: self._size]
        self._data = new_data
        self._capacity = new_capacity

    def push_back(self, value: T) -> None:
        """Append ``value``, growing the storage when it is full."""
        if self._size >= self._capacity:
            self._grow()
        self._data[self._size] = value
        self._size += 1

    def clear(self) -> None:
        """Drop every item; the current storage is kept."""
        for index in range(self._size):
            self._data[index] = None
        self._size = 0

    def capacity(self) -> int:
        return self._capacity

    def on_stack(self) -> bool:
        """True while the items still live in the inline buffer."""
        return self._data is self._stack_buffer

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return iter(self._data[: self._size])

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._data[: self._size][index]

    def __repr__(self) -> str:
        return f"SmallVec({list(self)!r})"