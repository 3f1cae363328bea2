# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
VarInt codec - compact variable-length encoding of 64-bit integers.

Example usage:
    from varint_codec import encode_unsigned, decode_unsigned

    buffer = bytearray(10)
    written = encode_unsigned(buffer, 300)
    if written == 0:
        raise RuntimeError("buffer too small")

    read, value = decode_unsigned(buffer)
    assert (read, value) == (written, 300)

    # Raising variants working on bytes
    from varint_codec import pack_signed, unpack_signed

    data = pack_signed(-1)          # b"\\x7f"
    value, offset = unpack_signed(data)
"""

from .bits import INT64_MAX, INT64_MIN, UINT64_MAX, find_msb, find_signed_msb
from .varint import (
    MAX_OCTETS,
    VarIntError,
    InsufficientBuffer,
    TruncatedInput,
    Overlong,
    NonCanonicalMaxLength,
    unsigned_size,
    signed_size,
    encode_unsigned,
    decode_unsigned,
    encode_signed,
    decode_signed,
    pack_unsigned,
    pack_signed,
    unpack_unsigned,
    unpack_signed,
    iter_unpack_unsigned,
    iter_unpack_signed,
)

__version__ = "0.1.0"

__all__ = [
    # Ranges
    "UINT64_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "MAX_OCTETS",
    # Bit helpers
    "find_msb",
    "find_signed_msb",
    # Errors
    "VarIntError",
    "InsufficientBuffer",
    "TruncatedInput",
    "Overlong",
    "NonCanonicalMaxLength",
    # Sizes
    "unsigned_size",
    "signed_size",
    # Buffer codec
    "encode_unsigned",
    "decode_unsigned",
    "encode_signed",
    "decode_signed",
    # Bytes codec
    "pack_unsigned",
    "pack_signed",
    "unpack_unsigned",
    "unpack_signed",
    "iter_unpack_unsigned",
    "iter_unpack_signed",
]
