from .djb      import djb2
from .errors   import (HashTableError, ClosedTableError,
                       IteratorExhaustedError, ConcurrentModificationError)
from .iterator import HashTableIterator
from .table    import HashTable, Lookup

__all__ = ["HashTable", "HashTableIterator", "Lookup", "djb2",
           "HashTableError", "ClosedTableError",
           "IteratorExhaustedError", "ConcurrentModificationError"]
