# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for varint codec tests."""

import pytest

# Fill pattern marking octets the codec must not touch
FILL = 0x22


@pytest.fixture
def buffer():
    """A scratch buffer prefilled with FILL."""
    return bytearray([FILL] * 128)


@pytest.fixture
def small_buffer():
    """Factory for prefilled buffers of a given size."""
    def make(size: int) -> bytearray:
        return bytearray([FILL] * size)
    return make


@pytest.fixture
def fill():
    """The byte value prefilled into scratch buffers."""
    return FILL
