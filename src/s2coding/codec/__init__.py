"""Integer codecs for s2coding.

This module provides varint, zigzag and fixed-width integer encoding over
caller-supplied byte streams, plus the uint vector format built on top of them.
"""

from __future__ import annotations

from .fixed import decode_uint, decode_uint_with_length, encode_uint, encode_uint_with_length
from .stream import ByteReader, ByteSink, ByteSource, ByteWriter
from .uint_vector import decode_uint_vector, encode_uint_vector
from .varint import MAX_VARINT_BYTES, decode_varint64, encode_varint64, read_varint64, write_varint64
from .zigzag import decode_zigzag32, decode_zigzag64, encode_zigzag32, encode_zigzag64

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
]
