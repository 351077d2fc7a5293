"""Fixed-capacity bitsets, a thread-safe bitset and a free-index allocator."""

__version__ = "0.1.0"
__all__ = ["atomic_bitset", "bitset", "shared_bitset", "slot_count"]