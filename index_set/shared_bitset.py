"""A bit set that may be updated safely from several threads."""

from __future__ import annotations

import threading

from index_set.bitset import BitSet


class SharedBitSet(BitSet):
    """A thread-safe fixed-capacity bit set with 32- or 64-bit slots."""

    _WORD_SIZES = (32, 64)

    def __init__(self, slot_count: int, word_bits: int = 64) -> None:
        super().__init__(slot_count, word_bits)
        self._lock = threading.RLock()

    @property
    def slots(self) -> tuple[int, ...]:
        """A consistent snapshot of the raw slot words."""
        with self._lock:
            return tuple(self._slots)

    def capacity(self) -> int:
        """Return the number of bits the set can hold."""
        return len(self._slots) * self._word_bits

    def has(self, index: int) -> bool:
        """Return whether ``index`` is in the set; out-of-range values are absent."""
        with self._lock:
            return super().has(index)

    def is_empty(self) -> bool:
        """Return whether no bit is set."""
        with self._lock:
            return super().is_empty()

    def size(self) -> int:
        """Return the number of values in the set."""
        with self._lock:
            return super().size()

    def clear(self) -> None:
        """Remove every value."""
        with self._lock:
            super().clear()

    def insert(self, index: int) -> bool:
        """Atomically add ``index``; return whether it was already present."""
        with self._lock:
            return super().insert(index)

    def remove(self, index: int) -> bool:
        """Atomically remove ``index``; return whether it was present."""
        with self._lock:
            return super().remove(index)

    def __contains__(self, index: object) -> bool:
        try:
            return self.has(index)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return self.size()