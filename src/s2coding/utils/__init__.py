"""Utility functions for s2coding.

This module provides encoded size calculation.
"""

from __future__ import annotations

from .sizing import uint_width, varint_size, zigzag_varint_size

__all__ = [
    "uint_width",
    "varint_size",
    "zigzag_varint_size",
]
