"""Command line interface for inspecting and serializing bitsets."""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from . import io
from .engine.bitset import Bitset
from .engine.codec import DEFAULT_VERSION, PayloadVersion
from .engine.errors import BitsetError

logger = logging.getLogger(__name__)

_SET_OPERATIONS = ("union", "intersection", "difference", "symmetric_difference")
_RELATIONS = ("issubset", "issuperset", "isdisjoint")


@dataclass(frozen=True)
class CliOptions:
    """Output settings shared by every subcommand."""

    format: str = "text"
    out: str = "-"
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> CliOptions:
        return cls(format=args.format, out=args.out, verbose=args.verbose)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pybitset", description="Bitset inspection CLI")
    parser.add_argument("-V", "--version", action="version", version="pybitset 0.1")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--format", choices=["text", "json"], default="text")
        cmd.add_argument("--out", default="-")
        cmd.add_argument("-v", "--verbose", action="store_true", default=False)

    show = sub.add_parser("show", help="show the members and word of a bitset")
    show.add_argument("elements", nargs="*", help="element lists such as 1,2,3 or @path")
    add_common_options(show)

    evaluate = sub.add_parser("eval", help="apply a set operation to two bitsets")
    evaluate.add_argument("op", choices=_SET_OPERATIONS + _RELATIONS)
    evaluate.add_argument("left")
    evaluate.add_argument("right")
    add_common_options(evaluate)

    encode = sub.add_parser("encode", help="serialize a bitset to a hex payload")
    encode.add_argument("elements", nargs="*")
    encode.add_argument(
        "--payload-version",
        type=int,
        choices=[version.value for version in PayloadVersion],
        default=int(DEFAULT_VERSION),
    )
    add_common_options(encode)

    decode = sub.add_parser("decode", help="decode a hex payload")
    decode.add_argument("payload")
    add_common_options(decode)
    return parser


def _load_operand(token: str) -> list[object]:
    if token.startswith("@"):
        return io.read_elements(token[1:])
    return io.parse_elements(token)


def _load_bitset(tokens: Sequence[str]) -> Bitset:
    elements: list[object] = []
    for token in tokens:
        elements.extend(_load_operand(token))
    return Bitset(elements)


def _describe(bitset: Bitset) -> dict[str, object]:
    return {"elements": list(bitset), "len": len(bitset), "word": bitset.bits}


def _emit(data: dict[str, object], text: str, options: CliOptions) -> None:
    if options.format == "json":
        io.write_json(data, options.out)
    else:
        io.write_text(text + "\n", options.out)


def _emit_bitset(bitset: Bitset, options: CliOptions) -> None:
    text = f"{bitset!r}\nlen={len(bitset)} word={bitset.bits:#010x}"
    _emit(_describe(bitset), text, options)


def _command_show(args: argparse.Namespace, options: CliOptions) -> None:
    _emit_bitset(_load_bitset(args.elements), options)


def _command_eval(args: argparse.Namespace, options: CliOptions) -> None:
    left = Bitset(_load_operand(args.left))
    right = _load_operand(args.right)
    logger.debug("evaluating %s on %r and %r", args.op, left, right)
    result = getattr(left, args.op)(right)
    if isinstance(result, Bitset):
        _emit_bitset(result, options)
    else:
        _emit({"result": result}, str(result), options)


def _command_encode(args: argparse.Namespace, options: CliOptions) -> None:
    bitset = _load_bitset(args.elements)
    payload = bitset.reduce(args.payload_version)
    _emit(
        {"payload": payload.hex(), "version": args.payload_version},
        payload.hex(),
        options,
    )


def _command_decode(args: argparse.Namespace, options: CliOptions) -> None:
    try:
        payload = bytes.fromhex(args.payload)
    except ValueError as exc:
        raise ValueError(f"payload is not valid hex: {args.payload!r}") from exc
    _emit_bitset(Bitset.reconstruct(payload), options)


_COMMANDS = {
    "show": _command_show,
    "eval": _command_eval,
    "encode": _command_encode,
    "decode": _command_decode,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    options = CliOptions.from_args(args)
    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    handler = _COMMANDS[args.command]
    try:
        handler(args, options)
    except (BitsetError, ValueError, OSError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        sys.stderr.write(f"pybitset: error: {exc}\n")
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
