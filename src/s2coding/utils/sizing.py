"""Encoded size calculation utilities.

These functions compute how many bytes a value occupies on the wire without
encoding it.
"""

from __future__ import annotations

from ..codec.zigzag import encode_zigzag32, encode_zigzag64
from ..models.types import UINT64_ADAPTER, check_value


def varint_size(value: int) -> int:
    """Return the number of bytes ``write_varint64`` emits for ``value``.

    Args:
        value: Unsigned 64-bit integer

    Returns:
        Size in bytes (1-10)

    Raises:
        PreconditionViolationError: If value is not an unsigned 64-bit integer

    Example:
        >>> varint_size(0), varint_size(127), varint_size(128)
        (1, 1, 2)
    """
    value = check_value(UINT64_ADAPTER, value)
    # bit_length() of 0 is 0, but zero still takes one byte
    return max(1, (value.bit_length() + 6) // 7)


def uint_width(value: int) -> int:
    """Return the smallest fixed width (1-8 bytes) that can hold ``value``.

    Example:
        >>> uint_width(0), uint_width(0xFF), uint_width(0x100)
        (1, 1, 2)
    """
    value = check_value(UINT64_ADAPTER, value)
    return max(1, (value.bit_length() + 7) // 8)


def zigzag_varint_size(n: int, bits: int = 64) -> int:
    """Return the varint size of a signed integer after zigzag mapping.

    Args:
        n: Signed integer
        bits: Zigzag width, 32 or 64

    Raises:
        ValueError: If bits is not 32 or 64
        PreconditionViolationError: If n is outside the given width
    """
    if bits == 32:
        return varint_size(encode_zigzag32(n))
    if bits == 64:
        return varint_size(encode_zigzag64(n))
    raise ValueError(f"bits must be 32 or 64, got {bits}")
