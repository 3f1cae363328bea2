#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for the varint codec.

Usage:
    python varint_tool.py encode 0 128 0xffffffffffffffff
    python varint_tool.py encode --signed -- -1 64
    python varint_tool.py decode "81 00 7f"
    python varint_tool.py decode --signed ff808080808080808000
"""

import argparse
import logging
import sys

from varint_codec import pack_signed, pack_unsigned
from varint_codec import unpack_signed, unpack_unsigned


def describe_length(count: int) -> str:
    return f"{count} octet" if count == 1 else f"{count} octets"


def cmd_encode(values, signed: bool):
    """Print the encoding of each value as hex."""
    pack = pack_signed if signed else pack_unsigned
    for value in values:
        encoded = pack(value)
        print(f"{value}: {encoded.hex(' ')} ({describe_length(len(encoded))})")


def cmd_decode(data: bytes, signed: bool):
    """Print every value found in a run of back-to-back varints."""
    unpack = unpack_signed if signed else unpack_unsigned
    offset = 0
    while offset < len(data):
        value, end = unpack(data, offset)
        octets = data[offset:end]
        print(f"{octets.hex(' ')}: {value} ({describe_length(len(octets))})")
        offset = end


def parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")


def parse_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex string: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode and decode variable-length 64-bit integers"
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode integers")
    encode_parser.add_argument("values", type=parse_int, nargs="+",
                               help="Integers (decimal or 0x-prefixed hex)")
    encode_parser.add_argument("--signed", "-s", action="store_true",
                               help="Use the signed encoding")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode hex octets")
    decode_parser.add_argument("data", type=parse_hex,
                               help="Hex octets, spaces allowed")
    decode_parser.add_argument("--signed", "-s", action="store_true",
                               help="Use the signed encoding")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "encode":
            cmd_encode(args.values, args.signed)
        elif args.command == "decode":
            cmd_decode(args.data, args.signed)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
