"""
Domain value objects.

Immutable fixed-width integer types implementing checked addition.
"""

from src.checked_sum.domain.fixed_width import (
    FIXED_WIDTH_TYPES,
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    FixedWidthInt,
    fixed_width_type,
)

__all__ = [
    # Base model
    "FixedWidthInt",
    # Unsigned
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    # Signed
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISIZE",
    # Lookup
    "FIXED_WIDTH_TYPES",
    "fixed_width_type",
]
