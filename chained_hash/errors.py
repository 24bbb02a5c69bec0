# ==================================================
# chained_hash/errors.py
# ==================================================

class HashTableError(Exception):
    """Base class for every error raised by chained_hash."""


class ClosedTableError(HashTableError):
    """The table (or iterator) was already destroyed."""


class IteratorExhaustedError(HashTableError, LookupError):
    """`next()` called on an iterator with nothing left to yield."""


class ConcurrentModificationError(HashTableError, RuntimeError):
    """The table gained or lost a key while an iterator was walking it."""
