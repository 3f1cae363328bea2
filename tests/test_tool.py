# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for the varint command-line tool."""

import pytest

import varint_tool


class TestEncodeCommand:
    """Tests for the encode subcommand."""

    def test_unsigned(self, capsys):
        """Unsigned values print their octets in hex."""
        varint_tool.main(["encode", "0", "128", "0xffffffffffffffff"])
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "0: 00 (1 octet)",
            "128: 81 00 (2 octets)",
            "18446744073709551615: 81 ff ff ff ff ff ff ff ff 7f (10 octets)",
        ]

    def test_signed(self, capsys):
        """Negative values are accepted with --signed."""
        varint_tool.main(["encode", "--signed", "-1", "64"])
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["-1: 7f (1 octet)", "64: 80 40 (2 octets)"]

    def test_negative_unsigned_fails(self, capsys):
        """Out-of-range values exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["encode", "-5"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_invalid_integer(self):
        """Non-numeric input is an argparse error."""
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["encode", "twelve"])
        assert exc_info.value.code == 2


class TestDecodeCommand:
    """Tests for the decode subcommand."""

    def test_unsigned_sequence(self, capsys):
        """Back-to-back varints are decoded in order."""
        varint_tool.main(["decode", "81 00 7f"])
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["81 00: 128 (2 octets)", "7f: 127 (1 octet)"]

    def test_signed(self, capsys):
        """The signed minimum decodes with --signed."""
        varint_tool.main(["decode", "--signed", "ff808080808080808000"])
        out = capsys.readouterr().out
        assert ": -9223372036854775808 (10 octets)" in out

    def test_overlong_fails(self, capsys):
        """An 11-octet input exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["decode", "--signed", "ff80808080808080808000"])
        assert exc_info.value.code == 1
        assert "value too large" in capsys.readouterr().out

    def test_truncated_fails(self, capsys):
        """Truncated input exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["decode", "80"])
        assert exc_info.value.code == 1
        assert "unexpected end of data" in capsys.readouterr().out

    def test_invalid_hex(self):
        """Malformed hex is an argparse error."""
        with pytest.raises(SystemExit) as exc_info:
            varint_tool.main(["decode", "zz"])
        assert exc_info.value.code == 2
