"""Fixed-capacity sets of non-negative integers stored in bit words."""

from __future__ import annotations

import operator
from collections.abc import Iterator


class BitSet:
    """A set of integers in ``range(capacity)`` backed by ``word_bits``-wide slots."""

    _WORD_SIZES: tuple[int, ...] = (32, 64, 128)

    def __init__(self, slot_count: int, word_bits: int = 64) -> None:
        slot_count = operator.index(slot_count)
        if slot_count < 0:
            raise ValueError(f"slot count must be non-negative, got {slot_count}")
        if word_bits not in self._WORD_SIZES:
            raise ValueError(
                f"word size must be one of {self._WORD_SIZES}, got {word_bits}"
            )
        self._word_bits = word_bits
        self._full = (1 << word_bits) - 1
        self._slots = [0] * slot_count

    @property
    def word_bits(self) -> int:
        """Width of one slot in bits."""
        return self._word_bits

    @property
    def slots(self) -> tuple[int, ...]:
        """A snapshot of the raw slot words."""
        return tuple(self._slots)

    def _locate(self, index: int) -> tuple[int, int] | None:
        index = operator.index(index)
        if index < 0:
            return None
        slot_idx, bit = divmod(index, self._word_bits)
        if slot_idx >= len(self._slots):
            return None
        return slot_idx, 1 << bit

    def _require(self, index: int) -> tuple[int, int]:
        location = self._locate(index)
        if location is None:
            raise IndexError(
                f"index {index} does not fit in a set of capacity {self.capacity()}"
            )
        return location

    def capacity(self) -> int:
        """Return the number of bits the set can hold."""
        return len(self._slots) * self._word_bits

    def has(self, index: int) -> bool:
        """Return whether ``index`` is in the set; out-of-range values are absent."""
        location = self._locate(index)
        if location is None:
            return False
        slot_idx, mask = location
        return bool(self._slots[slot_idx] & mask)

    def is_empty(self) -> bool:
        """Return whether no bit is set."""
        return not any(self._slots)

    def size(self) -> int:
        """Return the number of values in the set."""
        return sum(word.bit_count() for word in self._slots)

    def clear(self) -> None:
        """Remove every value."""
        self._slots = [0] * len(self._slots)

    def insert(self, index: int) -> bool:
        """Add ``index``; return whether it was already present.

        Raises IndexError if the set cannot hold the value.
        """
        slot_idx, mask = self._require(index)
        old = bool(self._slots[slot_idx] & mask)
        self._slots[slot_idx] |= mask
        return old

    def remove(self, index: int) -> bool:
        """Remove ``index``; return whether it was present.

        Raises IndexError if the set cannot hold the value.
        """
        slot_idx, mask = self._require(index)
        old = bool(self._slots[slot_idx] & mask)
        self._slots[slot_idx] &= ~mask
        return old

    def __contains__(self, index: object) -> bool:
        try:
            return self.has(index)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[int]:
        for slot_idx, word in enumerate(self.slots):
            base = slot_idx * self._word_bits
            while word:
                lowest = word & -word
                yield base + lowest.bit_length() - 1
                word ^= lowest

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self.capacity()}, "
            f"values={list(self)!r})"
        )