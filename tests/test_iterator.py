import pytest

from chained_hash import (HashTable, HashTableIterator, ClosedTableError,
                          ConcurrentModificationError, IteratorExhaustedError)


def test_empty_table():
    it = HashTableIterator(HashTable())
    assert not it.has_next()
    assert it.bucket == -1
    with pytest.raises(IteratorExhaustedError):
        it.next()
    assert list(HashTable().items()) == []


def test_completeness():
    t = HashTable(initial_capacity=8)
    for i in range(200):
        t.insert(f"k{i}", i)

    it = t.iterator()
    seen = {}
    for _ in range(200):
        assert it.has_next()
        key, value = it.next(with_key=True)
        assert key not in seen
        seen[key] = value
    assert not it.has_next()
    assert seen == {f"k{i}": i for i in range(200)}


def test_next_without_key_returns_value():
    t = HashTable()
    t.insert("only", 42)
    it = t.iterator()
    assert it.next() == 42
    assert not it.has_next()


def test_order_is_bucket_then_chain():
    t = HashTable(initial_capacity=128)
    t.insert("a", 1)        # bucket 6
    t.insert("hello", 2)    # bucket 25
    t.insert("b", 3)        # bucket 7

    it = t.iterator()
    assert it.bucket == 6
    order = []
    while it.has_next():
        order.append(it.next(with_key=True)[0])
    assert order == ["a", "b", "hello"]


def test_chain_order_within_bucket():
    t = HashTable(initial_capacity=1, load_factor_threshold=100)
    for k in ("a", "b", "c"):
        t.insert(k, None)
    assert [k for k, _ in t.iterator()] == ["c", "b", "a"]


def test_exhausted_raises():
    t = HashTable()
    t.insert("x", 1)
    it = t.iterator()
    it.next()
    with pytest.raises(IteratorExhaustedError):
        it.next()
    with pytest.raises(LookupError):
        it.next()


def test_insert_during_iteration_fails_fast():
    t = HashTable()
    t.insert("a", 1)
    t.insert("b", 2)
    it = t.iterator()
    it.next()
    t.insert("c", 3)
    with pytest.raises(ConcurrentModificationError):
        it.has_next()
    with pytest.raises(ConcurrentModificationError):
        it.next()


def test_remove_during_iteration_fails_fast():
    t = HashTable()
    t.insert("a", 1)
    t.insert("b", 2)
    with pytest.raises(ConcurrentModificationError):
        for key in t:
            t.remove(key)


def test_value_update_during_iteration_allowed():
    t = HashTable()
    for k in ("a", "b", "c"):
        t.insert(k, 0)
    for key, _ in t.iterator():
        t.insert(key, 1)
    assert sorted(t.values()) == [1, 1, 1]


def test_destroy_iterator_leaves_table_alone():
    t = HashTable()
    t.insert("a", 1)
    with t.iterator() as it:
        assert it.has_next()
    assert not it.has_next()
    with pytest.raises(ClosedTableError):
        it.next()
    assert t.get("a") == 1


def test_table_destroyed_under_iterator():
    t = HashTable()
    t.insert("a", 1)
    it = t.iterator()
    t.destroy()
    with pytest.raises(ClosedTableError):
        it.has_next()


def test_iterator_requires_table():
    with pytest.raises(TypeError):
        HashTableIterator(None)
    t = HashTable()
    t.destroy()
    with pytest.raises(ClosedTableError):
        HashTableIterator(t)
