# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Bit-position helpers for 64-bit integers.

Python integers are unbounded, so these helpers also model the fixed
64-bit range the codec works in.
"""

UINT64_MAX = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def check_unsigned(value: int) -> None:
    """Raise ValueError unless value fits in an unsigned 64-bit integer."""
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"Value out of unsigned 64-bit range: {value}")


def check_signed(value: int) -> None:
    """Raise ValueError unless value fits in a signed 64-bit integer."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"Value out of signed 64-bit range: {value}")


def to_unsigned(value: int) -> int:
    """Reinterpret the low 64 bits of value as an unsigned integer."""
    return value & UINT64_MAX


def to_signed(value: int) -> int:
    """Reinterpret the low 64 bits of value as a two's-complement integer."""
    value &= UINT64_MAX
    if value > INT64_MAX:
        value -= 1 << 64
    return value


def find_msb(value: int) -> int:
    """
    Find the position of the most significant set bit.

    Args:
        value: Unsigned 64-bit integer

    Returns:
        Bit position in the range 0 to 63. Zero is returned for both
        0 and 1.

    Raises:
        ValueError: If value is outside the unsigned 64-bit range
    """
    check_unsigned(value)
    position = 0
    for width in (32, 16, 8, 4, 2, 1):
        if value >= 1 << width:
            position += width
            value >>= width
    return position


def find_signed_msb(value: int) -> int:
    """
    Find the most significant bit of a signed integer.

    For non-negative values this is the highest bit set to 1. For negative
    values it is the highest bit set to 0, i.e. the first bit that is not
    part of the sign extension: -1 is all ones, -2 clears bit 0, -3 clears
    bit 1, and so on.

    Args:
        value: Signed 64-bit integer

    Returns:
        Bit position in the range 0 to 62. The values -1, 0 and 1 all
        return 0.

    Raises:
        ValueError: If value is outside the signed 64-bit range
    """
    check_signed(value)
    if value >= 0:
        return find_msb(value)
    return find_msb(~value)
