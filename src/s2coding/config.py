"""Configuration for s2coding decoders.

The wire formats themselves have no tunables; the limits here only bound how
much work a decoder accepts from untrusted input.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecoderLimits:
    """Resource limits applied while decoding.

    Attributes:
        max_vector_length: Largest element count a uint vector header may
            announce (default 2**24). Headers above it are rejected before any
            element is read.
    """

    max_vector_length: int = 1 << 24

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_vector_length < 0:
            raise ValueError(
                f"max_vector_length must be non-negative, got {self.max_vector_length}"
            )


DEFAULT_LIMITS = DecoderLimits()
