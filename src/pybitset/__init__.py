"""pybitset: a mutable set of the integers 1..32 stored in one machine word."""
from __future__ import annotations

from collections.abc import Sequence

from .engine.bitset import Bitset
from .engine.codec import DEFAULT_VERSION, PayloadVersion, decode_word, encode_word
from .engine.errors import BitsetError, InvalidElement, MalformedPayload, MissingElement


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`pybitset.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "Bitset",
    "BitsetError",
    "InvalidElement",
    "MissingElement",
    "MalformedPayload",
    "PayloadVersion",
    "DEFAULT_VERSION",
    "encode_word",
    "decode_word",
    "main",
]
