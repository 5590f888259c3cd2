"""Versioned byte payloads for bitset words.

Layout: ``b"BS"`` tag, one version byte, then a version-specific body.

* ``TEXT`` (0): the word as ASCII decimal digits.
* ``PACKED`` (1): the word as four big-endian bytes.
* ``SPARSE`` (2): a count byte followed by one byte per element, ascending.
"""
from __future__ import annotations

import enum
import logging
import struct

from . import bits
from .errors import MalformedPayload

logger = logging.getLogger(__name__)

TAG = b"BS"
_HEADER_SIZE = len(TAG) + 1
_PACKED = struct.Struct(">I")


class PayloadVersion(enum.IntEnum):
    TEXT = 0
    PACKED = 1
    SPARSE = 2


DEFAULT_VERSION = PayloadVersion.PACKED


def _encode_text(word: int) -> bytes:
    return str(word).encode("ascii")


def _decode_text(body: bytes) -> int:
    if not body or not body.isdigit():
        raise MalformedPayload(f"text payload body is not a decimal word: {body!r}")
    return int(body)


def _encode_packed(word: int) -> bytes:
    return _PACKED.pack(word)


def _decode_packed(body: bytes) -> int:
    if len(body) != _PACKED.size:
        raise MalformedPayload(
            f"packed payload body must be {_PACKED.size} bytes, got {len(body)}"
        )
    return _PACKED.unpack(body)[0]


def _encode_sparse(word: int) -> bytes:
    elements = [position + 1 for position in bits.iter_positions(word)]
    return bytes([len(elements), *elements])


def _decode_sparse(body: bytes) -> int:
    if not body or body[0] != len(body) - 1:
        raise MalformedPayload("sparse payload count does not match its body")
    word = 0
    previous = 0
    for element in body[1:]:
        if not previous < element <= bits.MAX_ELEMENT:
            raise MalformedPayload(f"sparse payload has bad element {element}")
        word = bits.set_bit(word, element - 1)
        previous = element
    return word


_ENCODERS = {
    PayloadVersion.TEXT: _encode_text,
    PayloadVersion.PACKED: _encode_packed,
    PayloadVersion.SPARSE: _encode_sparse,
}

_DECODERS = {
    PayloadVersion.TEXT: _decode_text,
    PayloadVersion.PACKED: _decode_packed,
    PayloadVersion.SPARSE: _decode_sparse,
}


def encode_word(word: int, version: int = DEFAULT_VERSION) -> bytes:
    """Serialize ``word`` with the given payload ``version``."""
    if not isinstance(word, int) or isinstance(word, bool) or not bits.fits_word(word):
        raise ValueError(f"word does not fit in {bits.WORD_BITS} bits: {word!r}")
    try:
        key = PayloadVersion(version)
    except ValueError:
        raise ValueError(f"unsupported payload version: {version!r}") from None
    return TAG + bytes([key]) + _ENCODERS[key](word)


def decode_word(payload: bytes) -> int:
    """Inverse of :func:`encode_word`; raises :class:`MalformedPayload`."""
    if not isinstance(payload, (bytes, bytearray)):
        raise MalformedPayload(f"payload must be bytes, got {type(payload).__name__}")
    payload = bytes(payload)
    if len(payload) < _HEADER_SIZE or not payload.startswith(TAG):
        raise MalformedPayload("payload does not start with a bitset tag")
    try:
        version = PayloadVersion(payload[len(TAG)])
    except ValueError:
        raise MalformedPayload(f"unknown payload version {payload[len(TAG)]}") from None
    word = _DECODERS[version](payload[_HEADER_SIZE:])
    if not bits.fits_word(word):
        raise MalformedPayload(f"decoded word does not fit in {bits.WORD_BITS} bits")
    logger.debug("decoded %s payload into word %#010x", version.name, word)
    return word
