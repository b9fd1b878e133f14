"""Unit tests for uint vector encoding."""

from __future__ import annotations

import pytest

from s2coding import (
    ByteReader,
    ByteWriter,
    DecodeError,
    DecoderLimits,
    EndOfStreamError,
    MalformedVarintError,
    PreconditionViolationError,
    decode_uint_vector,
    encode_uint_vector,
)


def _encode(values: list[int]) -> bytes:
    writer = ByteWriter()
    encode_uint_vector(writer, values)
    return writer.to_bytes()


class TestEncodeUintVector:
    """Tests for encode_uint_vector."""

    def test_empty(self) -> None:
        """Empty vector is a header with width 1."""
        assert _encode([]) == b"\x00"

    def test_header_layout(self) -> None:
        """Header is (size << 3) | (width - 1)."""
        data = _encode([1, 2, 3])
        assert data == b"\x18\x01\x02\x03"

    def test_width_from_largest(self) -> None:
        """Width is chosen by the largest element."""
        data = _encode([1, 0x1234])
        assert data[0] == (2 << 3) | 1
        assert data[1:] == b"\x01\x00\x34\x12"

    def test_full_width(self) -> None:
        """64-bit values use eight bytes."""
        data = _encode([(1 << 64) - 1])
        assert data[0] == (1 << 3) | 7
        assert len(data) == 9

    def test_accepts_iterables(self) -> None:
        """Any iterable of ints is accepted."""
        assert _encode(iter([5, 6])) == _encode([5, 6])

    def test_negative_raises(self, writer: ByteWriter) -> None:
        """Negative elements are rejected before writing."""
        with pytest.raises(PreconditionViolationError):
            encode_uint_vector(writer, [1, -1])
        assert writer.byte_length() == 0


class TestDecodeUintVector:
    """Tests for decode_uint_vector."""

    @pytest.mark.parametrize(
        "values",
        [[], [0], [1, 2, 3], [0x1234, 7], [1 << 40, 0, 3], [(1 << 64) - 1, 1]],
    )
    def test_roundtrip(self, values: list[int]) -> None:
        """Decode inverts encode and consumes the whole vector."""
        data = _encode(values) + b"\xee"
        reader = ByteReader(data)
        assert decode_uint_vector(reader) == values
        assert reader.bytes_remaining() == 1

    def test_truncated_raises(self) -> None:
        """Missing elements are end of stream."""
        with pytest.raises(EndOfStreamError):
            decode_uint_vector(ByteReader(_encode([1, 2, 3])[:-1]))

    def test_empty_source_raises(self) -> None:
        """No header at all."""
        with pytest.raises(EndOfStreamError):
            decode_uint_vector(ByteReader(b""))

    def test_malformed_header_raises(self) -> None:
        """Malformed varint header."""
        with pytest.raises(MalformedVarintError):
            decode_uint_vector(ByteReader(b"\xff" * 10))

    def test_limit_enforced(self) -> None:
        """Headers above the configured limit are rejected."""
        data = _encode([1, 2, 3])
        with pytest.raises(DecodeError, match="exceeds limit of 2"):
            decode_uint_vector(ByteReader(data), DecoderLimits(max_vector_length=2))

    def test_limit_checked_before_reading(self) -> None:
        """A huge header fails without reading elements."""
        reader = ByteReader(b"\xf8\xff\xff\xff\x0f")
        with pytest.raises(DecodeError, match="exceeds limit"):
            decode_uint_vector(reader)
        assert reader.bytes_remaining() == 0


class TestDecoderLimits:
    """Tests for DecoderLimits."""

    def test_default(self) -> None:
        """Default limit."""
        assert DecoderLimits().max_vector_length == 1 << 24

    def test_negative_rejected(self) -> None:
        """Negative limit is invalid."""
        with pytest.raises(ValueError, match="non-negative"):
            DecoderLimits(max_vector_length=-1)

    def test_frozen(self) -> None:
        """Limits are immutable."""
        limits = DecoderLimits()
        with pytest.raises(AttributeError):
            limits.max_vector_length = 5  # type: ignore[misc]
