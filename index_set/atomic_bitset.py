"""A thread-safe bit set that hands out free indices."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain

from index_set.shared_bitset import SharedBitSet


def _rotated(count: int, start: int) -> Iterator[int]:
    """Yield ``range(count)`` starting at ``start`` and wrapping around."""
    return chain(range(start, count), range(start))


class AtomicBitSet(SharedBitSet):
    """A thread-safe set of 64-bit slots that can allocate the next free bit."""

    def __init__(self, slot_count: int) -> None:
        super().__init__(slot_count, 64)
        # slot where the last allocation succeeded; searches start here
        self._rotation = 0

    def set_next_free_bit(self) -> int | None:
        """Set the lowest clear bit, searching from the last used slot.

        Returns the index of the bit that was set, or None if the set is full.
        """
        with self._lock:
            for slot_idx in _rotated(len(self._slots), self._rotation):
                word = self._slots[slot_idx]
                if word == self._full:
                    continue
                bit = (~word & (word + 1)).bit_length() - 1
                self._slots[slot_idx] = word | (1 << bit)
                self._rotation = slot_idx
                return slot_idx * self._word_bits + bit
            return None