# ==================================================
# chained_hash/table.py
# ==================================================
import logging
from typing import Any, Iterator, List, NamedTuple, Optional

import numpy as np

from .const  import INITIAL_CAPACITY, LOAD_FACTOR_THR, NIL, ARENA_MIN
from .djb    import djb2
from .errors import ClosedTableError
from .iterator import HashTableIterator

log = logging.getLogger(__name__)


class Lookup(NamedTuple):
    found: bool
    value: Any


class HashTable:
    """Chained hash table mapping str keys to arbitrary values.

    Bucket heads and next links are int64 handles into an entry arena
    (NIL = empty).  New entries are prepended to their bucket's chain, and
    every entry caches its djb2 hash so resizing never rehashes key text.
    """

    def __init__(self, initial_capacity: int = INITIAL_CAPACITY,
                 load_factor_threshold: float = LOAD_FACTOR_THR):
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be >= 1")
        if not load_factor_threshold > 0:
            raise ValueError("load_factor_threshold must be > 0")
        self.load_factor_threshold = float(load_factor_threshold)

        self._heads  = np.full(int(initial_capacity), NIL, dtype=np.int64)
        self._next   = np.full(ARENA_MIN, NIL, dtype=np.int64)
        self._hashes = np.zeros(ARENA_MIN, dtype=np.uint32)
        self._keys:   List[Optional[str]] = []
        self._values: List[Any] = []
        self._free:   List[int] = []

        self._size      = 0
        self._mod_count = 0     # bumped on every structural change
        self._closed    = False

    # ------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        self._check_open()
        return len(self._heads)

    @property
    def closed(self) -> bool:
        return self._closed

    def load_factor(self) -> float:
        self._check_open()
        return self._size / len(self._heads)

    def bucket_of(self, key: str) -> int:
        """Index of the bucket `key` hashes to under the current capacity."""
        self._check_open()
        self._check_key(key)
        return djb2(key) % len(self._heads)

    def chain(self, idx: int) -> List[str]:
        """Keys stored in bucket `idx`, head first."""
        self._check_open()
        if not 0 <= idx < len(self._heads):
            raise IndexError(f"bucket index {idx} out of range")
        keys = []
        cur = int(self._heads[idx])
        while cur != NIL:
            keys.append(self._keys[cur])
            cur = int(self._next[cur])
        return keys

    # ------------------------------------------------------------------
    def _check_open(self):
        if self._closed:
            raise ClosedTableError("hash table has been destroyed")

    @staticmethod
    def _check_key(key):
        if key is None:
            raise TypeError("key must not be None")
        if not isinstance(key, str):
            raise TypeError(f"key must be str, not {type(key).__name__}")

    def _find(self, key: str, h: int, idx: int):
        """Return (prev, cur) handles for `key` in bucket `idx`; cur is NIL if absent."""
        prev, cur = NIL, int(self._heads[idx])
        while cur != NIL:
            if int(self._hashes[cur]) == h and self._keys[cur] == key:
                break
            prev, cur = cur, int(self._next[cur])
        return prev, cur

    def _alloc(self, key: str, h: int, value) -> int:
        if self._free:
            handle = self._free.pop()
            self._keys[handle] = key
            self._values[handle] = value
        else:
            handle = len(self._keys)
            if handle >= len(self._next):
                grow = len(self._next)
                nxt = np.concatenate([self._next, np.full(grow, NIL, dtype=np.int64)])
                hashes = np.concatenate([self._hashes, np.zeros(grow, dtype=np.uint32)])
                self._next, self._hashes = nxt, hashes
            self._keys.append(key)
            self._values.append(value)
        self._hashes[handle] = h
        return handle

    def _resize(self):
        """Double the bucket array and relink every entry into its new bucket."""
        old_capacity = len(self._heads)
        new_capacity = old_capacity * 2

        # build both arrays before touching the table so a failed
        # allocation leaves the old layout in place
        heads = np.full(new_capacity, NIL, dtype=np.int64)
        nxt   = self._next.copy()
        for i in range(old_capacity):
            cur = int(self._heads[i])
            while cur != NIL:
                following = int(self._next[cur])
                idx = int(self._hashes[cur]) % new_capacity
                nxt[cur] = heads[idx]
                heads[idx] = cur
                cur = following

        self._heads, self._next = heads, nxt
        self._mod_count += 1
        log.debug("resized table %d -> %d buckets (%d elements)",
                  old_capacity, new_capacity, self._size)

    # ------------------------------------------------------------------
    def insert(self, key: str, value: Any) -> None:
        """Insert `key`, or overwrite its value if it is already present."""
        self._check_open()
        self._check_key(key)

        if self._size / len(self._heads) > self.load_factor_threshold:
            self._resize()

        h   = djb2(key)
        idx = h % len(self._heads)
        _, cur = self._find(key, h, idx)
        if cur != NIL:
            self._values[cur] = value
            return

        handle = self._alloc(key, h, value)
        self._next[handle] = self._heads[idx]
        self._heads[idx] = handle
        self._size += 1
        self._mod_count += 1

    def remove(self, key: str) -> None:
        """Remove `key` if present; absent keys are ignored."""
        self._check_open()
        self._check_key(key)

        h   = djb2(key)
        idx = h % len(self._heads)
        prev, cur = self._find(key, h, idx)
        if cur == NIL:
            return

        if prev != NIL:
            self._next[prev] = self._next[cur]
        else:
            self._heads[idx] = self._next[cur]
        self._next[cur] = NIL
        self._keys[cur] = None
        self._values[cur] = None
        self._free.append(cur)
        self._size -= 1
        self._mod_count += 1

    def lookup(self, key: str) -> Lookup:
        self._check_open()
        self._check_key(key)
        h = djb2(key)
        _, cur = self._find(key, h, h % len(self._heads))
        if cur == NIL:
            return Lookup(False, None)
        return Lookup(True, self._values[cur])

    def get(self, key: str, default: Any = None) -> Any:
        """Value stored under `key`, or `default` when the key is absent.

        A stored value equal to `default` looks the same as a missing key;
        use `contains()` or `lookup()` to tell them apart.
        """
        found, value = self.lookup(key)
        return value if found else default

    def contains(self, key: str) -> bool:
        return self.lookup(key).found

    def destroy(self) -> None:
        """Release every entry and the bucket array. Only valid once."""
        self._check_open()
        log.debug("destroying table (%d elements, %d buckets)",
                  self._size, len(self._heads))
        self._keys.clear()
        self._values.clear()
        self._free.clear()
        self._heads = self._next = self._hashes = None
        self._size = 0
        self._closed = True

    close = destroy

    # ------------------------------------------------------------------
    def iterator(self):
        return HashTableIterator(self)

    def items(self) -> Iterator:
        return iter(self.iterator())

    def keys(self) -> Iterator[str]:
        return (k for k, _ in self.iterator())

    def values(self) -> Iterator:
        return (v for _, v in self.iterator())

    # -- mapping protocol ----------------------------------------------
    def __len__(self):
        self._check_open()
        return self._size

    def __contains__(self, key):
        return self.contains(key)

    def __getitem__(self, key):
        found, value = self.lookup(key)
        if not found:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __delitem__(self, key):
        if not self.contains(key):
            raise KeyError(key)
        self.remove(key)

    def __iter__(self):
        return self.keys()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        if not self._closed:
            self.destroy()

    def __repr__(self):
        if self._closed:
            return "HashTable(closed)"
        return f"HashTable(size={self._size}, capacity={len(self._heads)})"
