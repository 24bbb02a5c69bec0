# ==================================================
# chained_hash/iterator.py
# ==================================================
import numpy as np

from .const  import NIL
from .errors import ClosedTableError, ConcurrentModificationError, IteratorExhaustedError


class HashTableIterator:
    """Cursor over a HashTable's live entries.

    Buckets are visited in ascending index order and each chain from its
    head, so within a bucket the most recently inserted key comes first.
    Inserting or removing a key (or a resize) after the iterator was
    created makes every further call raise ConcurrentModificationError.
    """

    def __init__(self, table):
        if table is None:
            raise TypeError("table must not be None")
        table._check_open()
        self._table    = table
        self._expected = table._mod_count
        self._closed   = False

        # non-empty buckets can't change while the iterator is valid
        self._buckets = np.flatnonzero(table._heads != NIL)
        self._pos     = -1
        self._next    = NIL
        self._advance()

    # ------------------------------------------------------------------
    def _advance(self):
        t = self._table
        if self._next != NIL:
            self._next = int(t._next[self._next])
        if self._next == NIL:
            self._pos += 1
            if self._pos < len(self._buckets):
                self._next = int(t._heads[self._buckets[self._pos]])

    def _check(self):
        if self._closed or self._table.closed:
            raise ClosedTableError("iterator used after destroy()")
        if self._table._mod_count != self._expected:
            raise ConcurrentModificationError("hash table changed during iteration")

    @property
    def bucket(self) -> int:
        """Bucket index of the entry the next call to next() returns, or -1."""
        if self._next == NIL:
            return -1
        return int(self._buckets[self._pos])

    # ------------------------------------------------------------------
    def has_next(self) -> bool:
        if self._closed:
            return False
        self._check()
        return self._next != NIL

    def next(self, with_key: bool = False):
        """Return the next value, or a (key, value) pair if `with_key` is set."""
        self._check()
        if self._next == NIL:
            raise IteratorExhaustedError("no more entries in hash table")
        cur = self._next
        self._advance()
        t = self._table
        if with_key:
            return t._keys[cur], t._values[cur]
        return t._values[cur]

    def destroy(self) -> None:
        self._closed  = True
        self._next    = NIL
        self._buckets = None
        self._table   = None

    close = destroy

    # ------------------------------------------------------------------
    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self.next(with_key=True)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.destroy()
