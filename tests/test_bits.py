"""Tests for :mod:`pybitset.engine.bits`."""

from pybitset.engine import bits


def test_word_primitives() -> None:
    word = bits.set_bit(bits.set_bit(0, 0), 31)
    assert word == 0x80000001
    assert bits.test_bit(word, 31)
    assert not bits.test_bit(word, 30)
    assert bits.count_bits(word) == 2
    assert list(bits.iter_positions(word)) == [0, 31]
    assert bits.lowest_position(word) == 0

    cleared = bits.clear_bit(word, 0)
    assert cleared == 0x80000000
    assert bits.lowest_position(cleared) == 31
    assert bits.clear_bit(cleared, 5) == cleared


def test_word_algebra() -> None:
    a = 0b1011
    b = 0b0110
    assert bits.and_bits(a, b) == 0b0010
    assert bits.or_bits(a, b) == 0b1111
    assert bits.xor_bits(a, b) == 0b1101
    assert bits.clear_bits(a, b) == 0b1001
    assert bits.clear_bits(bits.FULL_WORD, 1) == 0xFFFFFFFE
    assert bits.count_bits(bits.FULL_WORD) == bits.WORD_BITS


def test_fits_word() -> None:
    assert bits.fits_word(0)
    assert bits.fits_word(bits.FULL_WORD)
    assert not bits.fits_word(-1)
    assert not bits.fits_word(1 << 32)
