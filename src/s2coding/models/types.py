"""Constrained integer domains used at codec boundaries.

Each alias is a pydantic-annotated ``int`` carrying inclusive bounds. The codecs
validate their arguments against these aliases through ``check_value`` so that a
bad argument is rejected before any byte reaches the sink.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo

from ..exceptions import PreconditionViolationError

UINT32_MAX = (1 << 32) - 1
UINT64_MAX = (1 << 64) - 1
INT32_MIN = -(1 << 31)
INT64_MIN = -(1 << 63)

# Widest fixed-width word that still fits a 64-bit accumulator.
MAX_BYTES_PER_WORD = 8


def BoundedInt(*, ge: int, le: int, **kwargs: Any) -> FieldInfo:
    """Create integer bounds metadata.

    Args:
        ge: Minimum value (inclusive)
        le: Maximum value (inclusive)
        **kwargs: Additional Field() arguments (description, etc.)

    Returns:
        Pydantic FieldInfo suitable for use in ``Annotated[int, ...]``.
    """
    return cast(FieldInfo, Field(ge=ge, le=le, **kwargs))


UInt64 = Annotated[int, BoundedInt(ge=0, le=UINT64_MAX, description="unsigned 64-bit")]
UInt32 = Annotated[int, BoundedInt(ge=0, le=UINT32_MAX, description="unsigned 32-bit")]

# Signed inputs also accept the unsigned bit pattern of the same width,
# e.g. 0xC0000000 is the 32-bit pattern of -0x40000000.
Int32 = Annotated[int, BoundedInt(ge=INT32_MIN, le=UINT32_MAX, description="32-bit pattern")]
Int64 = Annotated[int, BoundedInt(ge=INT64_MIN, le=UINT64_MAX, description="64-bit pattern")]

BytesPerWord = Annotated[
    int, BoundedInt(ge=0, le=MAX_BYTES_PER_WORD, description="fixed word width in bytes")
]

# Strict: bool, float and numeric strings are not integers here.
_STRICT = ConfigDict(strict=True)

UINT64_ADAPTER: TypeAdapter[int] = TypeAdapter(UInt64, config=_STRICT)
UINT32_ADAPTER: TypeAdapter[int] = TypeAdapter(UInt32, config=_STRICT)
INT64_ADAPTER: TypeAdapter[int] = TypeAdapter(Int64, config=_STRICT)
INT32_ADAPTER: TypeAdapter[int] = TypeAdapter(Int32, config=_STRICT)
BYTES_PER_WORD_ADAPTER: TypeAdapter[int] = TypeAdapter(BytesPerWord, config=_STRICT)


def check_value(adapter: TypeAdapter[int], value: Any, name: str = "value") -> int:
    """Validate ``value`` against one of the integer domains of this module.

    Args:
        adapter: One of the ``*_ADAPTER`` objects of this module
        value: Argument to validate
        name: Argument name used in the error message

    Returns:
        The validated integer

    Raises:
        PreconditionViolationError: If ``value`` is not an int inside the domain
    """
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        raise PreconditionViolationError(f"Invalid {name} {value!r}: {reason}") from e
