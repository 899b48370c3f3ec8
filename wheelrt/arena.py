"""Bump-pointer arena that accounts for object storage in growing blocks."""

from __future__ import annotations

import sys
from typing import Any, Callable, TypeVar

T = TypeVar("T")

DEFAULT_ALIGNMENT = 8


def _bit_ceil(value: int) -> int:
    """Smallest power of two not less than ``value``."""
    if value <= 1:
        return 1
    return 1 << (value - 1).bit_length()


def _check_layout(size: int, alignment: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a power of two, got {alignment}")


class _Block:
    """One contiguous region with a bump offset."""

    __slots__ = ("capacity", "offset")

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.offset = 0

    def try_reserve(self, size: int, alignment: int) -> bool:
        padding = -self.offset % alignment
        if padding + size > self.capacity - self.offset:
            return False
        self.offset += padding + size
        return True


class Arena:
    """Allocates objects into fixed-size blocks, adding larger blocks on demand.

    Each allocation reserves space in the current block.  The size and
    alignment of an object come from the ``arena_size`` and
    ``arena_alignment`` attributes of its factory when present; otherwise
    the object's ``sys.getsizeof`` and an alignment of 8 are used.

    :meth:`reset` rewinds every block without releasing it, so later
    allocations reuse the same blocks.
    """

    DEFAULT_BLOCK_CAPACITY = 4096

    def __init__(self, initial_capacity: int = DEFAULT_BLOCK_CAPACITY) -> None:
        self._blocks: list[_Block] = []
        self._current = 0
        self._total_allocated = 0
        self._append_block(max(initial_capacity, self.DEFAULT_BLOCK_CAPACITY))

    def __repr__(self) -> str:
        return (
            f"Arena(blocks={len(self._blocks)}, used={self.used_size()}, "
            f"total={self._total_allocated})"
        )

    def _append_block(self, capacity: int) -> None:
        self._blocks.append(_Block(capacity))
        self._current = len(self._blocks) - 1
        self._total_allocated += capacity

    def _reserve(self, size: int, alignment: int) -> None:
        _check_layout(size, alignment)
        current = self._blocks[self._current]
        if current.try_reserve(size, alignment):
            return

        next_index = self._current + 1
        if next_index < len(self._blocks) and self._blocks[next_index].try_reserve(
            size, alignment
        ):
            self._current = next_index
            return

        minimum_needed = size + alignment
        next_capacity = current.capacity * 2
        if next_capacity < minimum_needed:
            next_capacity = _bit_ceil(minimum_needed)
        self._append_block(next_capacity)
        if not self._blocks[self._current].try_reserve(size, alignment):
            raise MemoryError("fresh arena block cannot hold the allocation")

    def allocate(self, factory: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Construct ``factory(*args, **kwargs)`` and reserve its storage."""
        obj = factory(*args, **kwargs)
        size = getattr(factory, "arena_size", None)
        if size is None:
            size = sys.getsizeof(obj)
        alignment = getattr(factory, "arena_alignment", DEFAULT_ALIGNMENT)
        self._reserve(size, alignment)
        return obj

    def allocate_array(
        self, count: int, item_size: int, alignment: int = DEFAULT_ALIGNMENT
    ) -> list[Any]:
        """Reserve room for ``count`` items and return that many empty slots."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if item_size < 0:
            raise ValueError(f"item_size must not be negative, got {item_size}")
        self._reserve(item_size * count, alignment)
        return [None] * count

    def total_allocated(self) -> int:
        """Combined capacity of all blocks."""
        return self._total_allocated

    def used_size(self) -> int:
        """Bytes reserved across all blocks, padding included."""
        return sum(block.offset for block in self._blocks)

    def block_count(self) -> int:
        return len(self._blocks)

    def reset(self) -> None:
        """Rewind every block to empty, keeping the blocks for reuse."""
        for block in self._blocks:
            block.offset = 0
        self._current = 0