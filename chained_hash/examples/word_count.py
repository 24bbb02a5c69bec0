# ==================================================
# examples/word_count.py
# ==================================================
import argparse, logging, sys

from chained_hash import HashTable
from chained_hash.const import INITIAL_CAPACITY, LOAD_FACTOR_THR
from chained_hash.log import setup_logging

log = logging.getLogger("chained_hash.examples.word_count")


def count_words(lines, table: HashTable) -> int:
    n = 0
    for line in lines:
        for word in line.split():
            table.insert(word, table.get(word, 0) + 1)
            n += 1
    return n


def main(argv=None):
    p = argparse.ArgumentParser(description="count words with a chained hash table")
    p.add_argument("files", nargs="*", help="text files (default: stdin)")
    p.add_argument("--top", type=int, default=10, help="how many words to print")
    p.add_argument("--remove", nargs="*", default=[], metavar="WORD",
                   help="words to drop before printing")
    p.add_argument("--initial-capacity", type=int, default=INITIAL_CAPACITY)
    p.add_argument("--load-factor", type=float, default=LOAD_FACTOR_THR)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    if args.top < 0:
        p.error("--top must be >= 0")

    setup_logging(args.verbose)
    try:
        table = HashTable(args.initial_capacity, args.load_factor)
    except ValueError as e:
        p.error(str(e))

    with table:
        total = 0
        if args.files:
            for path in args.files:
                with open(path, encoding="utf-8") as f:
                    total += count_words(f, table)
                log.info("read %s", path)
        else:
            total += count_words(sys.stdin, table)

        for word in args.remove:
            table.remove(word)

        ranked = sorted(table.items(), key=lambda kv: (-kv[1], kv[0]))
        for word, count in ranked[:args.top]:
            print(f"{count:8d}  {word}")
        print(f"{total} words, {len(table)} distinct, "
              f"{table.capacity} buckets, load factor {table.load_factor():.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
