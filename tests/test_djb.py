import pytest

from chained_hash import HashTable, djb2


@pytest.mark.parametrize("key, expected", [
    ("", 5381),
    ("a", 177670),
    ("hello", 261238937),
    ("é", 5866513),          # two UTF-8 bytes: 0xc3 0xa9
    ("\ud800", 193640498),  # lone surrogate: 0xed 0xa0 0x80
])
def test_djb2_values(key, expected):
    assert djb2(key) == expected


def test_djb2_fits_in_32_bits():
    assert 0 <= djb2("x" * 1000) <= 0xFFFFFFFF


def test_bucket_placement_default_capacity():
    t = HashTable(initial_capacity=128)
    assert t.bucket_of("a") == 6
    assert t.bucket_of("hello") == 25

    t.insert("a", 1)
    t.insert("hello", 2)
    assert t.chain(6) == ["a"]
    assert t.chain(25) == ["hello"]
