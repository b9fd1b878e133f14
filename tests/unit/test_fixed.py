"""Unit tests for fixed-width little-endian encoding."""

from __future__ import annotations

import pytest

from s2coding import (
    ByteReader,
    ByteWriter,
    EndOfStreamError,
    PreconditionViolationError,
    decode_uint,
    decode_uint_with_length,
    encode_uint,
    encode_uint_with_length,
)


class TestEncodeUintWithLength:
    """Tests for encode_uint_with_length."""

    def test_byte_order(self, writer: ByteWriter) -> None:
        """Least significant byte first."""
        encode_uint_with_length(writer, 0x0102, 2)
        assert writer.to_bytes() == b"\x02\x01"

    def test_zero_padded(self) -> None:
        """Small values are padded to the full width."""
        assert encode_uint(1, 4) == b"\x01\x00\x00\x00"
        assert encode_uint(0, 8) == b"\x00" * 8

    def test_full_width(self) -> None:
        """Largest value for each width."""
        for width in range(1, 9):
            assert encode_uint((1 << (8 * width)) - 1, width) == b"\xff" * width

    def test_zero_width(self) -> None:
        """Zero width writes nothing for zero."""
        assert encode_uint(0, 0) == b""

    def test_overflow_raises(self, writer: ByteWriter) -> None:
        """Values that do not fit are rejected, not truncated."""
        with pytest.raises(PreconditionViolationError, match="more than 1 bytes"):
            encode_uint_with_length(writer, 0x100, 1)
        with pytest.raises(PreconditionViolationError):
            encode_uint_with_length(writer, 1, 0)
        assert writer.byte_length() == 0

    def test_negative_raises(self) -> None:
        """Negative values are rejected."""
        with pytest.raises(PreconditionViolationError):
            encode_uint(-1, 8)

    @pytest.mark.parametrize("width", [-1, 9, 16])
    def test_bad_width_raises(self, width: int) -> None:
        """Widths outside 0-8 are rejected."""
        with pytest.raises(PreconditionViolationError, match="bytes_per_word"):
            encode_uint(0, width)

    def test_sink_error_propagates(self, failing_sink) -> None:
        """Transport errors are passed through."""
        with pytest.raises(OSError):
            encode_uint_with_length(failing_sink, 5, 2)


class TestDecodeUintWithLength:
    """Tests for decode_uint_with_length."""

    def test_byte_order(self) -> None:
        """Least significant byte first."""
        assert decode_uint_with_length(ByteReader(b"\x02\x01"), 2) == 0x0102

    def test_max_uint64(self) -> None:
        """Eight 0xFF bytes."""
        assert decode_uint_with_length(ByteReader(b"\xff" * 8), 8) == (1 << 64) - 1

    def test_leaves_trailing_bytes(self) -> None:
        """Exactly bytes_per_word bytes are consumed."""
        reader = ByteReader(b"\x01\x00\x00\x09")
        assert decode_uint_with_length(reader, 3) == 1
        assert reader.read_byte() == 9

    def test_zero_width(self) -> None:
        """Zero width consumes nothing."""
        reader = ByteReader(b"\x05")
        assert decode_uint_with_length(reader, 0) == 0
        assert reader.position() == 0

    def test_truncated_raises(self) -> None:
        """Fewer bytes than the width is end of stream."""
        with pytest.raises(EndOfStreamError):
            decode_uint_with_length(ByteReader(b"\x01\x02\x03"), 4)
        with pytest.raises(EndOfStreamError):
            decode_uint_with_length(ByteReader(b""), 1)

    def test_bad_width_raises(self) -> None:
        """Widths above 8 would overflow the 64-bit result."""
        with pytest.raises(PreconditionViolationError):
            decode_uint_with_length(ByteReader(b"\x00" * 9), 9)

    def test_source_error_propagates(self, failing_source) -> None:
        """Transport errors are passed through."""
        with pytest.raises(OSError, match="connection reset"):
            decode_uint_with_length(failing_source, 2)


class TestFixedBytes:
    """Tests for the bytes conveniences."""

    def test_decode_with_offset(self) -> None:
        """Decoding from an offset returns the new offset."""
        assert decode_uint(b"\xaa\x34\x12", 2, offset=1) == (0x1234, 3)

    @pytest.mark.parametrize("width", range(1, 9))
    def test_roundtrip(self, width: int) -> None:
        """Encode then decode for each width."""
        for value in (0, 1, 0x5A, (1 << (8 * width)) - 1, (1 << (8 * width - 1)) + 3):
            encoded = encode_uint(value, width)
            assert len(encoded) == width
            assert decode_uint(encoded, width) == (value, width)
