# ==================================================
# chained_hash/djb.py
# ==================================================
from .const import DJB_SEED, DJB_MULT, HASH_MASK


def djb2(key: str) -> int:
    """The DJB hash (http://www.cse.yorku.ca/~oz/hash.html) over the UTF‑8 bytes of `key`."""
    h = DJB_SEED
    for c in key.encode("utf-8", "surrogatepass"):
        h = (h * DJB_MULT + c) & HASH_MASK
    return h
