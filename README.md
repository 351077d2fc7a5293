# index-set

Fixed-capacity bitsets for Python, with a thread-safe variant and an
allocator that hands out free integer indices.

A bitset is made of a fixed number of *slots* (words). Each slot holds
`word_bits` bits, so the capacity is `slot_count * word_bits`. The set holds
integers in `range(capacity)`.

## Installation

```
pip install index-set
```

## Sizing

`index_set.slot_count` works out how many 64-bit slots a given amount of
storage needs. Each function rounds up and raises `ValueError` for a negative
amount.

```python
from index_set import slot_count

slot_count.from_bits(128)        # 2
slot_count.from_bytes(9)         # 2
slot_count.from_kilobytes(1)     # 128
slot_count.from_megabytes(1)     # 131072
```

The module also exposes `WORD_BITS` (64) and `WORD_BYTES` (8).

## BitSet

`index_set.bitset.BitSet(slot_count, word_bits=64)` is a plain,
single-threaded bitset. `word_bits` must be 32, 64 or 128; a negative
`slot_count` or another word size raises `ValueError`.

```python
from index_set.bitset import BitSet

bits = BitSet(slot_count=4, word_bits=32)
bits.capacity()      # 128
bits.insert(42)      # False: the value was not present before
bits.insert(42)      # True: it was already present
bits.has(42)         # True
42 in bits           # True
len(bits)            # 1  (same as bits.size())
list(bits)           # [42], in ascending order
bits.remove(42)      # True: it was present
bits.has(500)        # False: out-of-range values are never present
bits.insert(500)     # raises IndexError: beyond capacity
bits.clear()
bits.is_empty()      # True
```

`insert` and `remove` raise `IndexError` for a negative index or one at or
beyond the capacity. `has` and `in` simply answer `False` for such values.
The read-only properties `word_bits` and `slots` give the slot width and a
tuple snapshot of the raw slot words.

## SharedBitSet

`index_set.shared_bitset.SharedBitSet(slot_count, word_bits=64)` has the same
interface as `BitSet`, with `word_bits` limited to 32 or 64. Every operation
takes an internal lock, so it is safe to call from several threads at once.

```python
from index_set.shared_bitset import SharedBitSet

shared = SharedBitSet(slot_count=2, word_bits=32)
shared.remove(0)     # False
shared.insert(0)     # False
shared.insert(0)     # True
shared.remove(0)     # True
shared.insert(65)    # raises IndexError: capacity is 64
```

## AtomicBitSet

`index_set.atomic_bitset.AtomicBitSet(slot_count)` is a `SharedBitSet` of
64-bit slots. Its `set_next_free_bit()` finds a clear bit, sets it and returns
its index, or returns `None` when the set is full. This makes it a
thread-safe allocator for small integer IDs.

```python
from index_set import slot_count
from index_set.atomic_bitset import AtomicBitSet

ids = AtomicBitSet(slot_count.from_bits(128))
ids.set_next_free_bit()   # 0
ids.set_next_free_bit()   # 1
ids.remove(0)             # True
ids.has(0)                # False
```

The allocator remembers the slot where it last found space. It starts its next
search from that slot, takes the lowest clear bit there, and wraps around to
the first slot when the later ones are full. Freed bits in earlier slots are
therefore reused only once the later slots are full.

## Limits

Thread safety comes from a lock held for each whole operation, not from
lock-free atomic instructions. The sets have a fixed capacity chosen when they
are created; they do not grow.