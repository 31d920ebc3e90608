"""
Math modules для checked-sum

Целочисленные kinds, сложение и суммирование с контролем переполнения.
"""

# Integer Kinds
from src.checked_sum.math.integer_kinds import (
    ALL_KINDS,
    I8_KIND,
    I16_KIND,
    I32_KIND,
    I64_KIND,
    I128_KIND,
    ISIZE_KIND,
    KINDS_BY_NAME,
    POINTER_BITS,
    SIGNED_KINDS,
    STANDARD_WIDTHS,
    U8_KIND,
    U16_KIND,
    U32_KIND,
    U64_KIND,
    U128_KIND,
    UNSIGNED_KINDS,
    USIZE_KIND,
    IntegerKind,
    kind_by_name,
    validate_in_kind,
)

# Checked Add
from src.checked_sum.math.checked_add import (
    Addable,
    CheckedAdd,
    checked_add,
    checked_add_int,
)

# Checked Sum
from src.checked_sum.math.checked_sum import checked_sum, checked_sum_int

__all__ = [
    # Integer Kinds — Constants
    "POINTER_BITS",
    "STANDARD_WIDTHS",
    "U8_KIND",
    "U16_KIND",
    "U32_KIND",
    "U64_KIND",
    "U128_KIND",
    "USIZE_KIND",
    "I8_KIND",
    "I16_KIND",
    "I32_KIND",
    "I64_KIND",
    "I128_KIND",
    "ISIZE_KIND",
    "UNSIGNED_KINDS",
    "SIGNED_KINDS",
    "ALL_KINDS",
    "KINDS_BY_NAME",
    # Integer Kinds — Types
    "IntegerKind",
    # Integer Kinds — Functions
    "kind_by_name",
    "validate_in_kind",
    # Checked Add — Protocols
    "CheckedAdd",
    "Addable",
    # Checked Add — Functions
    "checked_add",
    "checked_add_int",
    # Checked Sum
    "checked_sum",
    "checked_sum_int",
]
