"""Variable-length encoding of unsigned 64-bit integers.

Each byte carries 7 value bits, least significant group first. The high bit
(0x80) is set on every byte except the last. Zero encodes as a single ``00``
byte and no 64-bit value needs more than ten bytes.

>>> encode_varint64(300).hex()
'ac02'
>>> decode_varint64(bytes.fromhex('ac02'))
(300, 2)

Signed values should go through zigzag mapping first (see ``zigzag``);
otherwise every negative number costs the full ten bytes.
"""

from __future__ import annotations

import logging

from ..exceptions import MalformedVarintError
from ..models.types import UINT64_ADAPTER, UINT64_MAX, check_value
from .stream import ByteReader, ByteSink, ByteSource, ByteWriter

logger = logging.getLogger(__name__)

# ceil(64 / 7): the last group holds bit 63 and six bits of slack.
MAX_VARINT_BYTES = 10


def write_varint64(sink: ByteSink, value: int) -> None:
    """Write an unsigned 64-bit integer as a varint.

    Args:
        sink: Byte sink to append to
        value: Integer in 0 to 2**64 - 1

    Raises:
        PreconditionViolationError: If value is not an unsigned 64-bit integer
    """
    value = check_value(UINT64_ADAPTER, value)

    while value & ~0x7F:
        sink.write_byte((value & 0x7F) | 0x80)
        value >>= 7
    sink.write_byte(value)


def read_varint64(source: ByteSource) -> int:
    """Read a varint-encoded unsigned 64-bit integer.

    Args:
        source: Byte source to consume from

    Returns:
        Decoded value (bits past position 63 are discarded)

    Raises:
        EndOfStreamError: If the source runs out before the terminating byte
        MalformedVarintError: If ten bytes are read without a terminating byte
    """
    result = 0
    for shift in range(0, 7 * MAX_VARINT_BYTES, 7):
        byte = source.read_byte()
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result & UINT64_MAX

    logger.debug("Varint exceeded %d bytes without terminator", MAX_VARINT_BYTES)
    raise MalformedVarintError(f"Malformed varint: no terminating byte within {MAX_VARINT_BYTES} bytes")


def encode_varint64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as varint bytes.

    Args:
        value: Integer in 0 to 2**64 - 1

    Returns:
        Varint-encoded bytes
    """
    writer = ByteWriter()
    write_varint64(writer, value)
    return writer.to_bytes()


def decode_varint64(data: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int]:
    """Decode a varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, offset just past the varint)

    Raises:
        EndOfStreamError: If the varint is truncated
        MalformedVarintError: If the varint is longer than ten bytes
    """
    reader = ByteReader(data, offset)
    value = read_varint64(reader)
    return value, reader.position()
