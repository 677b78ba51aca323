"""
Command-line interface for basen.

Usage:
    basen <action> <value> [OPTIONS]

Actions:
    encode <integer>    Encode a base-10 integer
    decode <string>     Decode a string back to base-10

Environment:
    BASEN_CHARACTERS    Default alphabet (one character per symbol)
    BASEN_BASE          Default base
    BASEN_LENGTH        Default fixed output length
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

from ..core.codec import Codec, create
from ..core.errors import BaseNError
from ..utils.logging import configure_logger, get_logger

ACTIONS = ("encode", "decode")

log = get_logger()


def _env_int(name: str) -> int | None:
    value = os.environ.get(name)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise BaseNError(f"{name} must be an integer, got {value!r}") from None


def cmd_encode(codec: Codec, value: str) -> int:
    """Parse value as base-10 and print its encoding."""
    try:
        num = int(value, 10)
    except ValueError:
        raise BaseNError(f"cannot encode {value!r}: not a base-10 integer") from None
    print(codec.encode(num))
    return 0


def cmd_decode(codec: Codec, value: str) -> int:
    print(codec.decode(value))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="basen",
        description="Encode and decode integers with a base-N alphabet",
        epilog="action: encode | decode. value: number or string to encode/decode.",
    )
    parser.add_argument("action", nargs="?", help="encode | decode")
    parser.add_argument("value", nargs="?", help="Number or string to encode/decode")
    parser.add_argument(
        "--characters",
        action="append",
        metavar="SYMBOL",
        help="Alphabet to encode with. Given once, the value is split into characters; "
             "repeated, each value is one (possibly multi-character) symbol",
    )
    parser.add_argument("--base", type=int, help="The base to encode/decode with")
    width = parser.add_mutually_exclusive_group()
    width.add_argument("--length", type=int, help="Fixed length of encoded output")
    width.add_argument("--max", type=int, dest="max_value", help="Largest value the fixed length must hold")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def build_codec(args: argparse.Namespace) -> Codec:
    """Merge flags over environment defaults and build the codec."""
    characters = args.characters
    if characters is None:
        characters = os.environ.get("BASEN_CHARACTERS") or None
    elif len(characters) == 1:
        characters = characters[0]

    base = args.base if args.base is not None else _env_int("BASEN_BASE")
    length = args.length
    if length is None and args.max_value is None:
        length = _env_int("BASEN_LENGTH")

    return create(characters=characters, base=base, length=length, max_value=args.max_value)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_intermixed_args(argv)

    configure_logger(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.action not in ACTIONS or args.value is None:
        parser.print_help(sys.stdout)
        return 0

    try:
        codec = build_codec(args)
        if args.action == "encode":
            return cmd_encode(codec, args.value)
        return cmd_decode(codec, args.value)
    except BaseNError as exc:
        log.debug("%s failed", args.action, exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
