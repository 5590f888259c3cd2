"""Validation of elements and conversion of iterables to words."""
from __future__ import annotations

from collections.abc import Iterable

from . import bits
from .errors import InvalidElement


def is_element(value: object) -> bool:
    # bool is an int subclass but True/False are not meaningful members
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and bits.MIN_ELEMENT <= value <= bits.MAX_ELEMENT
    )


def element_position(value: object) -> int:
    """Return the bit position for ``value`` or raise :class:`InvalidElement`."""
    if not is_element(value):
        raise InvalidElement(value)
    return value - 1  # type: ignore[operator]


def word_from_iterable(source: Iterable[int]) -> int:
    """Fold every element yielded by ``source`` into a fresh word.

    Mappings contribute their keys. The source is consumed exactly once and
    the first invalid element aborts the whole conversion. Text and byte
    strings are rejected outright.
    """
    if isinstance(source, (str, bytes, bytearray)):
        raise InvalidElement(
            source, f"cannot build a bitset from a {type(source).__name__} value"
        )
    try:
        iterator = iter(source)
    except TypeError as exc:
        raise InvalidElement(
            source, f"'{type(source).__name__}' object is not iterable"
        ) from exc
    word = 0
    for value in iterator:
        word = bits.set_bit(word, element_position(value))
    return word
