"""Fixed-width little-endian encoding of unsigned integers.

A value is written as exactly ``bytes_per_word`` bytes, least significant byte
first, with no terminator and no sign handling. This format is not compatible
with varints: a field must use one or the other.

>>> encode_uint(0x0102, 2).hex()
'0201'
>>> decode_uint(bytes.fromhex('0201'), 2)
(258, 2)
"""

from __future__ import annotations

import logging

from ..exceptions import EndOfStreamError, PreconditionViolationError
from ..models.types import BYTES_PER_WORD_ADAPTER, UINT64_ADAPTER, check_value
from .stream import ByteReader, ByteSink, ByteSource, ByteWriter

logger = logging.getLogger(__name__)


def encode_uint_with_length(sink: ByteSink, value: int, bytes_per_word: int) -> None:
    """Write ``value`` as ``bytes_per_word`` little-endian bytes.

    Nothing is written when the arguments are rejected.

    Args:
        sink: Byte sink to append to
        value: Unsigned integer that fits in ``bytes_per_word`` bytes
        bytes_per_word: Word width in bytes (0-8)

    Raises:
        PreconditionViolationError: If bytes_per_word is outside 0-8, or value
            is negative or needs more than bytes_per_word bytes
    """
    bytes_per_word = check_value(BYTES_PER_WORD_ADAPTER, bytes_per_word, "bytes_per_word")
    value = check_value(UINT64_ADAPTER, value)
    if value >> (8 * bytes_per_word):
        raise PreconditionViolationError(
            f"Value {value} requires more than {bytes_per_word} bytes "
            f"(max: {(1 << (8 * bytes_per_word)) - 1})"
        )

    for _ in range(bytes_per_word):
        sink.write_byte(value & 0xFF)
        value >>= 8


def decode_uint_with_length(source: ByteSource, bytes_per_word: int) -> int:
    """Read an unsigned integer stored as ``bytes_per_word`` little-endian bytes.

    Args:
        source: Byte source to consume from
        bytes_per_word: Word width in bytes (0-8)

    Returns:
        Decoded unsigned integer

    Raises:
        PreconditionViolationError: If bytes_per_word is outside 0-8
        EndOfStreamError: If fewer than bytes_per_word bytes are available
    """
    bytes_per_word = check_value(BYTES_PER_WORD_ADAPTER, bytes_per_word, "bytes_per_word")

    value = 0
    for i in range(bytes_per_word):
        try:
            byte = source.read_byte()
        except EndOfStreamError:
            logger.debug("Fixed-width word truncated after %d of %d bytes", i, bytes_per_word)
            raise
        value |= byte << (8 * i)
    return value


def encode_uint(value: int, bytes_per_word: int) -> bytes:
    """Encode an unsigned integer as fixed-width little-endian bytes."""
    writer = ByteWriter()
    encode_uint_with_length(writer, value, bytes_per_word)
    return writer.to_bytes()


def decode_uint(
    data: bytes | bytearray | memoryview, bytes_per_word: int, offset: int = 0
) -> tuple[int, int]:
    """Decode a fixed-width little-endian unsigned integer from bytes.

    Returns:
        Tuple of (decoded value, offset just past the word)
    """
    reader = ByteReader(data, offset)
    value = decode_uint_with_length(reader, bytes_per_word)
    return value, reader.position()
