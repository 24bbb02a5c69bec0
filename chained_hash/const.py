# ==================================================
# chained_hash/const.py
# ==================================================
import os

INITIAL_CAPACITY = int(os.getenv("CHASH_INITIAL_CAPACITY", "128"))   # buckets
LOAD_FACTOR_THR  = float(os.getenv("CHASH_LOAD_FACTOR",    "5.0"))   # elems / bucket before doubling

DJB_SEED  = 5381          # djb2 accumulator seed
DJB_MULT  = 33            # hash * 33 + c
HASH_MASK = 0xFFFFFFFF    # hashes are 32‑bit unsigned

NIL = -1                  # handle meaning "no entry" (empty bucket / end of chain)
ARENA_MIN = 16            # smallest arena allocation, in entries
