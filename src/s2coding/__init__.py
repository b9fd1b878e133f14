"""s2coding: Integer codecs for compact geometry persistence

Low-level building blocks for writing point identifiers, cell indices and counts
to compact binary form:

- Varints: unsigned 64-bit integers in 1-10 bytes
- ZigZag: signed <-> unsigned mapping so small negatives stay small
- Fixed width: unsigned integers in an exact number of little-endian bytes
- Uint vectors: length-prefixed arrays of fixed-width integers

All codecs are plain functions reading from a ``ByteSource`` or writing to a
``ByteSink``; they keep no state between calls.

Quick Start:
    >>> from s2coding import ByteReader, ByteWriter, encode_zigzag64, write_varint64
    >>> from s2coding import decode_zigzag64, read_varint64
    >>>
    >>> writer = ByteWriter()
    >>> write_varint64(writer, encode_zigzag64(-3))
    >>> data = writer.to_bytes()
    >>> decode_zigzag64(read_varint64(ByteReader(data)))
    -3
"""

from __future__ import annotations

from .codec import (
    MAX_VARINT_BYTES,
    ByteReader,
    ByteSink,
    ByteSource,
    ByteWriter,
    decode_uint,
    decode_uint_vector,
    decode_uint_with_length,
    decode_varint64,
    decode_zigzag32,
    decode_zigzag64,
    encode_uint,
    encode_uint_vector,
    encode_uint_with_length,
    encode_varint64,
    encode_zigzag32,
    encode_zigzag64,
    read_varint64,
    write_varint64,
)
from .config import DEFAULT_LIMITS, DecoderLimits
from .exceptions import (
    DecodeError,
    EncodeError,
    EndOfStreamError,
    MalformedVarintError,
    PreconditionViolationError,
    S2CodingError,
)
from .utils import uint_width, varint_size, zigzag_varint_size

__version__ = "0.1.0"

__all__ = [
    # Streams
    "ByteSource",
    "ByteSink",
    "ByteReader",
    "ByteWriter",
    # Varint
    "MAX_VARINT_BYTES",
    "write_varint64",
    "read_varint64",
    "encode_varint64",
    "decode_varint64",
    # ZigZag
    "encode_zigzag32",
    "decode_zigzag32",
    "encode_zigzag64",
    "decode_zigzag64",
    # Fixed width
    "encode_uint_with_length",
    "decode_uint_with_length",
    "encode_uint",
    "decode_uint",
    # Uint vector
    "encode_uint_vector",
    "decode_uint_vector",
    # Configuration
    "DecoderLimits",
    "DEFAULT_LIMITS",
    # Exceptions
    "S2CodingError",
    "EncodeError",
    "DecodeError",
    "EndOfStreamError",
    "MalformedVarintError",
    "PreconditionViolationError",
    # Sizing
    "varint_size",
    "uint_width",
    "zigzag_varint_size",
    # Version
    "__version__",
]
