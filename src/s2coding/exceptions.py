"""Exception hierarchy for s2coding.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from S2CodingError for easy catching of any s2coding-specific error.

Transport failures raised by a byte source or sink (``OSError`` and friends) are
not wrapped: they reach the caller exactly as the stream raised them.
"""

from __future__ import annotations


class S2CodingError(Exception):
    """Base exception for all s2coding errors."""

    pass


class EncodeError(S2CodingError):
    """Raised when encoding a value fails."""

    pass


class DecodeError(S2CodingError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Varint without a terminating byte
        - Vector header announcing more elements than allowed
    """

    pass


class EndOfStreamError(DecodeError):
    """Raised when a byte source is exhausted before a decode completes."""

    pass


class MalformedVarintError(DecodeError):
    """Raised when ten varint groups are read without a terminating byte.

    No value produced by the varint encoder is longer than ten bytes, so such
    input is corrupt rather than truncated.
    """

    pass


class PreconditionViolationError(EncodeError, ValueError):
    """Raised when an argument is outside the domain of a codec operation.

    Examples:
        - Negative value passed to an unsigned encoder
        - Value that does not fit in the requested fixed width
        - Fixed width outside 0-8 bytes
        - Signed value outside the 32/64-bit range for zigzag mapping
    """

    pass
