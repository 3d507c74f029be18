"""
String hashes used to place dictionary words into the lookup tables.

Both hashes work on UTF-16 code units and wrap like a signed 32-bit integer,
so a word always lands in the same slot no matter how long it is or which
interpreter computes it.
"""
import numpy as np

INT32_MASK = 0xFFFFFFFF
INT32_SIGN_BIT = 0x80000000

OLD_MULTIPLIER = 37
NEW_MULTIPLIER = 31
SAMPLE_COUNT = 8


def to_int32(value: int) -> int:
    """Wraps an arbitrary integer into the signed 32-bit range"""
    value &= INT32_MASK
    if value & INT32_SIGN_BIT:
        return value - (1 << 32)
    return value


def char_codes(word: str) -> list:
    """Returns the UTF-16 code units of the word"""
    return np.frombuffer(word.encode("utf-16-le", "surrogatepass"), dtype="<u2").tolist()


def code_unit_length(word: str) -> int:
    """Length of the word in UTF-16 code units"""
    return len(char_codes(word))


def hash_old(word: str) -> int:
    """
    Sparse sampling hash
    Only every len/8-th character contributes, so long words that differ
    between the sampled positions collide on purpose.
    """
    codes = char_codes(word)
    skip = max(1, len(codes) // SAMPLE_COUNT)
    hash_value = 0
    for code in codes[::skip]:
        hash_value = to_int32(hash_value * OLD_MULTIPLIER + code)
    return hash_value


def hash_new(word: str) -> int:
    """Polynomial hash over every character"""
    hash_value = 0
    for code in char_codes(word):
        hash_value = to_int32(hash_value * NEW_MULTIPLIER + code)
    return hash_value


def table_index(hash_value: int, table_size: int) -> int:
    """
    Maps a raw hash onto a slot in [0, table_size)
    The remainder truncates toward zero and the absolute value is taken
    afterwards, which is not the same as Python's floor modulo.
    """
    remainder = abs(hash_value) % table_size
    if hash_value < 0:
        remainder = -remainder
    return abs(remainder)
