# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Variable-length integer encoding/decoding.

Each octet carries 7 data bits. The MSB of an octet is set when another
octet follows and clear on the final octet. Groups are written most
significant first:

    10000011 11111111 01111111
    ^        ^        ^--- 0 == final octet

Signed values use the two's-complement bit pattern, so bit 6 of the first
octet carries the sign. A 64-bit value never needs more than 10 octets.
"""

import logging
from typing import Iterator, Tuple

from .bits import (
    check_signed,
    check_unsigned,
    find_msb,
    find_signed_msb,
    to_signed,
    to_unsigned,
)

logger = logging.getLogger(__name__)

MAX_OCTETS = 10
CONTINUATION_BIT = 0x80
DATA_MASK = 0x7F
SIGN_BIT = 0x40

# Only legal first octets of a 10-octet encoding
UNSIGNED_MAX_LEADING_OCTETS = (0x81,)
SIGNED_MAX_LEADING_OCTETS = (0x80, 0xFF)


class VarIntError(ValueError):
    """Base exception for varint encoding errors."""
    pass


class InsufficientBuffer(VarIntError):
    """Destination buffer too small for the encoding."""
    pass


class TruncatedInput(VarIntError):
    """Input ended before the final octet."""
    pass


class Overlong(VarIntError):
    """Input would need more than MAX_OCTETS octets."""
    pass


class NonCanonicalMaxLength(VarIntError):
    """10-octet encoding with an invalid leading octet."""
    pass


def unsigned_size(value: int) -> int:
    """Return the number of octets needed to encode an unsigned value."""
    check_unsigned(value)
    return find_msb(value) // 7 + 1


def signed_size(value: int) -> int:
    """
    Return the number of octets needed to encode a signed value.

    One extra bit is reserved so the sign fits in the leading data bits.
    """
    check_signed(value)
    return (find_signed_msb(value) + 1) // 7 + 1


def _write_octets(buffer, value: int, count: int) -> int:
    if len(buffer) < count:
        raise InsufficientBuffer(
            f"Varint encode: need {count} octets, buffer has {len(buffer)}"
        )

    # Fill from the last octet backwards
    for i in range(count, 0, -1):
        octet = value & DATA_MASK
        value >>= 7
        if i != count:
            octet |= CONTINUATION_BIT
        buffer[i - 1] = octet

    return count


def _read_octets(buffer, value: int) -> Tuple[int, int]:
    octet = CONTINUATION_BIT
    total = 0

    while octet & CONTINUATION_BIT:
        total += 1
        if total > MAX_OCTETS:
            raise Overlong("Varint decode: value too large")
        if total > len(buffer):
            raise TruncatedInput("Varint decode: unexpected end of data")

        octet = buffer[total - 1]
        value = (value << 7) | (octet & DATA_MASK)

    return total, value


def _decode_unsigned(buffer) -> Tuple[int, int]:
    total, value = _read_octets(buffer, 0)

    if total == MAX_OCTETS and buffer[0] not in UNSIGNED_MAX_LEADING_OCTETS:
        raise NonCanonicalMaxLength(
            f"Varint decode: invalid leading octet 0x{buffer[0]:02x}"
        )

    return total, to_unsigned(value)


def _decode_signed(buffer) -> Tuple[int, int]:
    if len(buffer) == 0:
        raise TruncatedInput("Varint decode: unexpected end of data")

    # Sign-extend through the bits that are never read
    initial = -1 if buffer[0] & SIGN_BIT else 0
    total, value = _read_octets(buffer, initial)

    if total == MAX_OCTETS and buffer[0] not in SIGNED_MAX_LEADING_OCTETS:
        raise NonCanonicalMaxLength(
            f"Varint decode: invalid leading octet 0x{buffer[0]:02x}"
        )

    return total, to_signed(value)


def encode_unsigned(buffer, value: int) -> int:
    """
    Encode an unsigned 64-bit integer into buffer.

    Args:
        buffer: Writable bytes-like object; the encoding starts at index 0
        value: Integer in the range 0 to 2**64 - 1

    Returns:
        Number of octets written, or 0 if the buffer is too small (in
        which case the buffer is left untouched)

    Raises:
        ValueError: If value is outside the unsigned 64-bit range
    """
    try:
        return _write_octets(buffer, value, unsigned_size(value))
    except VarIntError as e:
        logger.debug("Unsigned varint not encoded: %s", e)
        return 0


def encode_signed(buffer, value: int) -> int:
    """
    Encode a signed 64-bit integer into buffer.

    Args:
        buffer: Writable bytes-like object; the encoding starts at index 0
        value: Integer in the range -2**63 to 2**63 - 1

    Returns:
        Number of octets written, or 0 if the buffer is too small

    Raises:
        ValueError: If value is outside the signed 64-bit range
    """
    try:
        return _write_octets(buffer, value, signed_size(value))
    except VarIntError as e:
        logger.debug("Signed varint not encoded: %s", e)
        return 0


def decode_unsigned(buffer) -> Tuple[int, int]:
    """
    Decode an unsigned varint starting at index 0 of buffer.

    Args:
        buffer: Bytes-like object holding the encoding

    Returns:
        Tuple of (octets read, decoded value). The octet count is 0 when
        the input is truncated, overlong or non-canonical; the value is
        then meaningless.
    """
    try:
        return _decode_unsigned(buffer)
    except VarIntError as e:
        logger.debug("Unsigned varint rejected: %s", e)
        return 0, 0


def decode_signed(buffer) -> Tuple[int, int]:
    """
    Decode a signed varint starting at index 0 of buffer.

    Args:
        buffer: Bytes-like object holding the encoding

    Returns:
        Tuple of (octets read, decoded value). The octet count is 0 when
        the input is empty, truncated, overlong or non-canonical.
    """
    try:
        return _decode_signed(buffer)
    except VarIntError as e:
        logger.debug("Signed varint rejected: %s", e)
        return 0, 0


def pack_unsigned(value: int) -> bytes:
    """Encode an unsigned integer and return the varint bytes."""
    result = bytearray(unsigned_size(value))
    _write_octets(result, value, len(result))
    return bytes(result)


def pack_signed(value: int) -> bytes:
    """Encode a signed integer and return the varint bytes."""
    result = bytearray(signed_size(value))
    _write_octets(result, value, len(result))
    return bytes(result)


def _window(data, offset: int):
    if offset < 0:
        raise ValueError(f"Negative offset: {offset}")
    return data[offset:offset + MAX_OCTETS]


def unpack_unsigned(data, offset: int = 0) -> Tuple[int, int]:
    """
    Decode an unsigned varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        VarIntError: If the varint is truncated, overlong or non-canonical
    """
    total, value = _decode_unsigned(_window(data, offset))
    return value, offset + total


def unpack_signed(data, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a signed varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        VarIntError: If the varint is empty, truncated, overlong or
            non-canonical
    """
    total, value = _decode_signed(_window(data, offset))
    return value, offset + total


def iter_unpack_unsigned(data) -> Iterator[int]:
    """Yield each unsigned value from back-to-back varints in data."""
    offset = 0
    while offset < len(data):
        value, offset = unpack_unsigned(data, offset)
        yield value


def iter_unpack_signed(data) -> Iterator[int]:
    """Yield each signed value from back-to-back varints in data."""
    offset = 0
    while offset < len(data):
        value, offset = unpack_signed(data, offset)
        yield value
