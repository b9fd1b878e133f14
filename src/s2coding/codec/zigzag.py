"""ZigZag mapping between signed and unsigned integers.

Interleaves non-negative and negative values by magnitude so that small
negative numbers stay small after varint encoding::

    0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, ...

Python integers have no fixed width, so both directions work on the two's
complement bit pattern of the requested width. Encoder inputs may be given signed
(``-0x40000000``) or as the unsigned pattern of the same width (``0xC0000000``).
"""

from __future__ import annotations

from ..models.types import (
    INT32_ADAPTER,
    INT64_ADAPTER,
    UINT32_ADAPTER,
    UINT64_ADAPTER,
    check_value,
)

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        return value - (1 << bits)
    return value


def encode_zigzag32(n: int) -> int:
    """Map a signed 32-bit integer to an unsigned 32-bit integer.

    Raises:
        PreconditionViolationError: If n is outside the 32-bit range
    """
    n = _to_signed(check_value(INT32_ADAPTER, n, "n"), 32)
    # >> on a negative Python int is arithmetic
    return ((n << 1) ^ (n >> 31)) & _MASK32


def decode_zigzag32(u: int) -> int:
    """Map an unsigned 32-bit zigzag value back to a signed 32-bit integer.

    Raises:
        PreconditionViolationError: If u is not an unsigned 32-bit integer
    """
    u = check_value(UINT32_ADAPTER, u, "u")
    # u is non-negative here, so >> is logical
    return _to_signed((u >> 1) ^ -(u & 1), 32)


def encode_zigzag64(n: int) -> int:
    """Map a signed 64-bit integer to an unsigned 64-bit integer.

    Raises:
        PreconditionViolationError: If n is outside the 64-bit range
    """
    n = _to_signed(check_value(INT64_ADAPTER, n, "n"), 64)
    return ((n << 1) ^ (n >> 63)) & _MASK64


def decode_zigzag64(u: int) -> int:
    """Map an unsigned 64-bit zigzag value back to a signed 64-bit integer.

    Raises:
        PreconditionViolationError: If u is not an unsigned 64-bit integer
    """
    u = check_value(UINT64_ADAPTER, u, "u")
    return _to_signed((u >> 1) ^ -(u & 1), 64)
