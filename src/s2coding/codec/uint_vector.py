"""Length-prefixed vectors of fixed-width unsigned integers.

Layout::

    varint((len(values) << 3) | (bytes_per_word - 1))
    values[0] .. values[n-1], each bytes_per_word bytes little-endian

``bytes_per_word`` is the smallest width (1-8) that holds the largest element,
so the low three bits of the header always carry it.
"""

from __future__ import annotations

import logging
from typing import Iterable

from ..config import DEFAULT_LIMITS, DecoderLimits
from ..exceptions import DecodeError
from ..utils.sizing import uint_width
from .fixed import decode_uint_with_length, encode_uint_with_length
from .stream import ByteSink, ByteSource
from .varint import read_varint64, write_varint64

logger = logging.getLogger(__name__)


def encode_uint_vector(sink: ByteSink, values: Iterable[int]) -> None:
    """Write a vector of unsigned 64-bit integers.

    Args:
        sink: Byte sink to append to
        values: Unsigned integers (each 0 to 2**64 - 1)

    Raises:
        PreconditionViolationError: If any value is not an unsigned 64-bit integer
    """
    values = list(values)
    bytes_per_word = max((uint_width(v) for v in values), default=1)
    logger.debug("Encoding uint vector of %d values, %d bytes each", len(values), bytes_per_word)

    write_varint64(sink, (len(values) << 3) | (bytes_per_word - 1))
    for value in values:
        encode_uint_with_length(sink, value, bytes_per_word)


def decode_uint_vector(source: ByteSource, limits: DecoderLimits | None = None) -> list[int]:
    """Read a vector written by ``encode_uint_vector``.

    Args:
        source: Byte source to consume from
        limits: Decoder limits (defaults to ``DEFAULT_LIMITS``)

    Returns:
        Decoded values in order

    Raises:
        DecodeError: If the header announces more than limits.max_vector_length values
        EndOfStreamError: If the source runs out mid-vector
        MalformedVarintError: If the header is not a valid varint
    """
    if limits is None:
        limits = DEFAULT_LIMITS

    header = read_varint64(source)
    size = header >> 3
    bytes_per_word = (header & 7) + 1
    if size > limits.max_vector_length:
        logger.debug("Rejecting uint vector header announcing %d values", size)
        raise DecodeError(
            f"Vector length {size} exceeds limit of {limits.max_vector_length}"
        )

    logger.debug("Decoding uint vector of %d values, %d bytes each", size, bytes_per_word)
    return [decode_uint_with_length(source, bytes_per_word) for _ in range(size)]
