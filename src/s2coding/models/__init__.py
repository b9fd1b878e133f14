"""Integer domain definitions for s2coding."""

from __future__ import annotations

from .types import (
    BYTES_PER_WORD_ADAPTER,
    INT32_ADAPTER,
    INT32_MIN,
    INT64_ADAPTER,
    INT64_MIN,
    MAX_BYTES_PER_WORD,
    UINT32_ADAPTER,
    UINT32_MAX,
    UINT64_ADAPTER,
    UINT64_MAX,
    BoundedInt,
    BytesPerWord,
    Int32,
    Int64,
    UInt32,
    UInt64,
    check_value,
)

__all__ = [
    # Domains
    "BoundedInt",
    "BytesPerWord",
    "Int32",
    "Int64",
    "UInt32",
    "UInt64",
    # Validation
    "check_value",
    "BYTES_PER_WORD_ADAPTER",
    "INT32_ADAPTER",
    "INT64_ADAPTER",
    "UINT32_ADAPTER",
    "UINT64_ADAPTER",
    # Limits
    "INT32_MIN",
    "INT64_MIN",
    "UINT32_MAX",
    "UINT64_MAX",
    "MAX_BYTES_PER_WORD",
]
