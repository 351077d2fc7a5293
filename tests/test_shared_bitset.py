import threading

import pytest

from index_set import slot_count
from index_set.shared_bitset import SharedBitSet


def test_prev_value():
    bitset = SharedBitSet(slot_count.from_bits(64), 32)

    assert bitset.remove(0) is False
    assert bitset.insert(0) is False
    assert bitset.insert(0) is True
    assert bitset.remove(0) is True
    assert bitset.remove(0) is False

    with pytest.raises(IndexError):
        bitset.insert(65)


def test_clear():
    bitset = SharedBitSet(4, 32)
    bitset.insert(0)
    assert not bitset.is_empty()
    bitset.clear()
    assert bitset.is_empty()


def test_insert_and_has():
    bitset = SharedBitSet(4, 32)
    bitset.insert(0)
    assert bitset.has(0) is True
    assert 0 in bitset


def test_remove():
    bitset = SharedBitSet(4, 32)
    bitset.insert(42)
    assert bitset.has(42) is True
    bitset.remove(42)
    assert bitset.has(42) is False


def test_capacity_and_len():
    bitset = SharedBitSet(4, 32)
    assert bitset.capacity() == 128
    for value in (1, 40, 127):
        bitset.insert(value)
    assert len(bitset) == 3
    assert list(bitset) == [1, 40, 127]


def test_u128_words_not_supported():
    with pytest.raises(ValueError):
        SharedBitSet(1, 128)


def test_concurrent_inserts_are_not_lost():
    bitset = SharedBitSet(4, 64)
    barrier = threading.Barrier(8)

    def worker(offset):
        barrier.wait()
        for value in range(offset, bitset.capacity(), 8):
            bitset.insert(value)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert bitset.size() == bitset.capacity()
    assert list(bitset) == list(range(bitset.capacity()))