"""Word-level primitives for 32-bit bitsets.

Element ``x`` is stored at bit position ``x - 1``; every function here works
on positions, callers translate to elements.
"""
from __future__ import annotations

import sys
from collections.abc import Iterator

WORD_BITS = 32
FULL_WORD = (1 << WORD_BITS) - 1
MIN_ELEMENT = 1
MAX_ELEMENT = WORD_BITS


def test_bit(word: int, position: int) -> bool:
    return bool(word & (1 << position))


def set_bit(word: int, position: int) -> int:
    return word | (1 << position)


def clear_bit(word: int, position: int) -> int:
    return word & ~(1 << position) & FULL_WORD


# Optimize bit counting based on Python version (cached at module load time)
if sys.version_info >= (3, 10):
    def count_bits(word: int) -> int:
        """Count the number of set bits using native int.bit_count() (Python 3.10+)."""
        return word.bit_count()
else:
    def count_bits(word: int) -> int:
        """Count the number of set bits using bin().count('1') (Python 3.9)."""
        return bin(word).count('1')


def lowest_position(word: int) -> int:
    """Return the position of the lowest set bit; ``word`` must be non-zero."""
    return (word & -word).bit_length() - 1


def iter_positions(word: int) -> Iterator[int]:
    while word:
        lowest = word & -word
        yield lowest.bit_length() - 1
        word ^= lowest


def fits_word(word: int) -> bool:
    return 0 <= word <= FULL_WORD


def clear_bits(base: int, remove: int) -> int:
    return base & ~remove & FULL_WORD


def and_bits(a: int, b: int) -> int:
    return a & b


def or_bits(a: int, b: int) -> int:
    return a | b


def xor_bits(a: int, b: int) -> int:
    return a ^ b
