"""Exceptions raised by the bitset engine.

Range and type violations are deliberately the same error: a value is either
a usable element or it is not. Both subclass :class:`TypeError` so code
written against the builtin ``set`` contract keeps working.
"""
from __future__ import annotations

from .bits import MAX_ELEMENT, MIN_ELEMENT


class BitsetError(Exception):
    """Base class for everything this package raises."""


class InvalidElement(BitsetError, TypeError):
    """A value cannot be used as an element, or an operand is not a Bitset."""

    def __init__(self, value: object, message: str | None = None) -> None:
        if message is None:
            message = (
                f"bitsets can only contain integers [{MIN_ELEMENT}..{MAX_ELEMENT}], "
                f"got {value!r}"
            )
        super().__init__(message)
        self.value = value


class MissingElement(BitsetError, KeyError):
    """``remove`` of an absent element or ``pop`` from an empty bitset."""


class MalformedPayload(BitsetError, ValueError):
    """A serialized payload cannot be decoded."""
