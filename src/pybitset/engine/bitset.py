"""The :class:`Bitset` container: a mutable set of integers in [1, 32]."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from . import bits
from .codec import DEFAULT_VERSION, decode_word, encode_word
from .coerce import element_position, is_element, word_from_iterable
from .errors import InvalidElement, MissingElement


def _iter_elements(word: int) -> Iterator[int]:
    for position in bits.iter_positions(word):
        yield position + 1


def _reconstruct(cls: type[Bitset], payload: bytes) -> Bitset:
    return cls.reconstruct(payload)


class Bitset:
    """Bitset(iterable) --> Bitset object

    Build an unordered set of integers in the range [1, 32], stored in a
    single 32-bit word.

    Named methods (``union``, ``issubset``...) accept any iterable of
    elements, while the operator spellings (``|``, ``&``, ``^``, ``-``, their
    in-place forms and ``<``, ``<=``, ``>``, ``>=``) only accept another
    Bitset. This asymmetry is intentional and matches the builtin ``set``.

    Mutating a Bitset while iterating over it is unsupported.
    """

    __slots__ = ("_bits",)

    # mutable, so unhashable like set
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, iterable: Iterable[int] | None = None) -> None:
        self._bits = 0
        if iterable is not None:
            self._bits = self._coerce(iterable)

    @classmethod
    def from_word(cls, word: int) -> Bitset:
        """Build a bitset whose members are the set bits of ``word``."""
        if not isinstance(word, int) or isinstance(word, bool) or not bits.fits_word(word):
            raise ValueError(f"word does not fit in {bits.WORD_BITS} bits: {word!r}")
        result = cls()
        result._bits = word
        return result

    @property
    def bits(self) -> int:
        return self._bits

    @staticmethod
    def _coerce(other: Iterable[int]) -> int:
        if isinstance(other, Bitset):
            return other._bits
        return word_from_iterable(other)

    def _require_bitset(self, other: object, op: str) -> int:
        if not isinstance(other, Bitset):
            raise InvalidElement(
                other,
                f"unsupported operand type(s) for {op}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'",
            )
        return other._bits

    def _new(self, word: int) -> Bitset:
        return type(self).from_word(word)

    # ---- container protocol ----

    def __len__(self) -> int:
        return bits.count_bits(self._bits)

    def __contains__(self, value: object) -> bool:
        return is_element(value) and bits.test_bit(self._bits, value - 1)  # type: ignore[operator]

    def __iter__(self) -> Iterator[int]:
        return _iter_elements(self._bits)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def copy(self) -> Bitset:
        """Return a copy of a bitset."""
        return self._new(self._bits)

    __copy__ = copy

    def add(self, element: int) -> None:
        """Add an element to a Bitset.

        This has no effect if the element is already present.
        """
        self._bits = bits.set_bit(self._bits, element_position(element))

    def remove(self, element: int) -> None:
        """Remove an element from a bitset; it must be a member.

        If the element is not a member, raise a KeyError.
        """
        position = element_position(element)
        if not bits.test_bit(self._bits, position):
            raise MissingElement(element)
        self._bits = bits.clear_bit(self._bits, position)

    def discard(self, element: int) -> None:
        """Remove an element from a bitset if it is a member.

        If the element is not a member, do nothing.
        """
        self._bits = bits.clear_bit(self._bits, element_position(element))

    def pop(self) -> int:
        """Remove and return the smallest element."""
        if not self._bits:
            raise MissingElement("pop from an empty bitset")
        position = bits.lowest_position(self._bits)
        self._bits = bits.clear_bit(self._bits, position)
        return position + 1

    def clear(self) -> None:
        """Remove all elements from this Bitset."""
        self._bits = 0

    # ---- set algebra ----

    def union(self, other: Iterable[int]) -> Bitset:
        """Return the union of two bitsets as a new bitset.

        (i.e. all elements that are in either bitset.)
        """
        return self._new(bits.or_bits(self._bits, self._coerce(other)))

    def intersection(self, other: Iterable[int]) -> Bitset:
        """Return the intersection of two bitsets as a new bitset.

        (i.e. all elements that are in both bitsets.)
        """
        return self._new(bits.and_bits(self._bits, self._coerce(other)))

    def difference(self, other: Iterable[int]) -> Bitset:
        """Return the difference of two bitsets as a new bitset.

        (i.e. all elements that are in this bitset but not the other.)
        """
        return self._new(bits.clear_bits(self._bits, self._coerce(other)))

    def symmetric_difference(self, other: Iterable[int]) -> Bitset:
        """Return the symmetric difference of two bitsets as a new bitset.

        (i.e. all elements that are in exactly one of the bitsets.)
        """
        return self._new(bits.xor_bits(self._bits, self._coerce(other)))

    def update(self, other: Iterable[int]) -> None:
        """Update a bitset with the union of itself and another."""
        self._bits = bits.or_bits(self._bits, self._coerce(other))

    def intersection_update(self, other: Iterable[int]) -> None:
        """Update a bitset with the intersection of itself and another."""
        self._bits = bits.and_bits(self._bits, self._coerce(other))

    def difference_update(self, other: Iterable[int]) -> None:
        """Remove all elements of another bitset from this bitset."""
        self._bits = bits.clear_bits(self._bits, self._coerce(other))

    def symmetric_difference_update(self, other: Iterable[int]) -> None:
        """Update a bitset with the symmetric difference of itself and another."""
        self._bits = bits.xor_bits(self._bits, self._coerce(other))

    def __and__(self, other: Bitset) -> Bitset:
        return self._new(bits.and_bits(self._bits, self._require_bitset(other, "&")))

    def __or__(self, other: Bitset) -> Bitset:
        return self._new(bits.or_bits(self._bits, self._require_bitset(other, "|")))

    def __xor__(self, other: Bitset) -> Bitset:
        return self._new(bits.xor_bits(self._bits, self._require_bitset(other, "^")))

    def __sub__(self, other: Bitset) -> Bitset:
        return self._new(bits.clear_bits(self._bits, self._require_bitset(other, "-")))

    def __iand__(self, other: Bitset) -> Bitset:
        self._bits = bits.and_bits(self._bits, self._require_bitset(other, "&="))
        return self

    def __ior__(self, other: Bitset) -> Bitset:
        self._bits = bits.or_bits(self._bits, self._require_bitset(other, "|="))
        return self

    def __ixor__(self, other: Bitset) -> Bitset:
        self._bits = bits.xor_bits(self._bits, self._require_bitset(other, "^="))
        return self

    def __isub__(self, other: Bitset) -> Bitset:
        self._bits = bits.clear_bits(self._bits, self._require_bitset(other, "-="))
        return self

    # ---- relations ----

    def isdisjoint(self, other: Iterable[int]) -> bool:
        """Return True if two bitsets have a null intersection."""
        return bits.and_bits(self._bits, self._coerce(other)) == 0

    def issubset(self, other: Iterable[int]) -> bool:
        """Report whether another bitset contains this bitset."""
        return bits.clear_bits(self._bits, self._coerce(other)) == 0

    def issuperset(self, other: Iterable[int]) -> bool:
        """Report whether this bitset contains another bitset."""
        return bits.clear_bits(self._coerce(other), self._bits) == 0

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Bitset) and self._bits == other._bits

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __le__(self, other: Bitset) -> bool:
        return bits.clear_bits(self._bits, self._require_bitset(other, "<=")) == 0

    def __lt__(self, other: Bitset) -> bool:
        word = self._require_bitset(other, "<")
        return word != self._bits and bits.clear_bits(self._bits, word) == 0

    def __ge__(self, other: Bitset) -> bool:
        return bits.clear_bits(self._require_bitset(other, ">="), self._bits) == 0

    def __gt__(self, other: Bitset) -> bool:
        word = self._require_bitset(other, ">")
        return word != self._bits and bits.clear_bits(word, self._bits) == 0

    # ---- persistence ----

    def reduce(self, version: int = DEFAULT_VERSION) -> bytes:
        """Return an opaque payload from which :meth:`reconstruct` rebuilds this set."""
        return encode_word(self._bits, version)

    @classmethod
    def reconstruct(cls, payload: bytes) -> Bitset:
        """Build a new bitset from a payload produced by :meth:`reduce`."""
        return cls.from_word(decode_word(payload))

    def __reduce__(self):
        return (_reconstruct, (type(self), self.reduce()))
