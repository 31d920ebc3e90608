"""
Fixed Width — Immutable value types для целых фиксированной ширины

Immutable Pydantic модели U8 ... U128, USIZE, I8 ... I128, ISIZE.
Каждая модель хранит одно значение, проверенное на диапазон своего kind,
и реализует протокол Addable (checked_add + zero).

Все классы генерируются одной фабрикой из констант integer_kinds.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_validator

from src.checked_sum.math.checked_add import checked_add_int
from src.checked_sum.math.integer_kinds import (
    IntegerKind,
    I8_KIND,
    I16_KIND,
    I32_KIND,
    I64_KIND,
    I128_KIND,
    ISIZE_KIND,
    U8_KIND,
    U16_KIND,
    U32_KIND,
    U64_KIND,
    U128_KIND,
    USIZE_KIND,
    kind_by_name,
    validate_in_kind,
)


# =============================================================================
# BASE MODEL
# =============================================================================


class FixedWidthInt(BaseModel):
    """
    Базовая модель целого фиксированной ширины.

    Immutable модель (frozen=True). Равенство и hash учитывают тип:
    U8(1) != U16(1).
    """

    KIND: ClassVar[IntegerKind]

    value: int = Field(..., strict=True, description="Целое значение в диапазоне KIND")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: int, **data: Any) -> None:
        super().__init__(value=value, **data)

    @model_validator(mode="after")
    def validate_range(self) -> "FixedWidthInt":
        """Проверка, что value лежит в [KIND.min_value, KIND.max_value]."""
        kind = getattr(type(self), "KIND", None)
        if kind is None:
            raise TypeError(f"{type(self).__name__} has no KIND, use a concrete width")
        validate_in_kind(self.value, kind)
        return self

    @classmethod
    def zero(cls) -> "FixedWidthInt":
        """Аддитивная единица."""
        return cls(0)

    def checked_add(self, other: "FixedWidthInt") -> "FixedWidthInt | None":
        """
        Сложение с проверкой переполнения.

        Args:
            other: Значение той же ширины

        Returns:
            Новое значение или None при переполнении

        Raises:
            TypeError: Если other другой ширины
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot add {type(other).__name__} to {type(self).__name__}"
            )

        total = checked_add_int(self.value, other.value, self.KIND)
        if total is None:
            return None
        return type(self)(total)

    def __int__(self) -> int:
        return self.value


# =============================================================================
# КОНКРЕТНЫЕ ШИРИНЫ
# =============================================================================


def _define_fixed_width(kind: IntegerKind) -> type[FixedWidthInt]:
    name = kind.name.upper()
    namespace = {
        "__module__": __name__,
        "__qualname__": name,
        "__doc__": f"Целое {kind.name}: [{kind.min_value}, {kind.max_value}].",
        "KIND": kind,
    }
    return type(name, (FixedWidthInt,), namespace)


U8 = _define_fixed_width(U8_KIND)
U16 = _define_fixed_width(U16_KIND)
U32 = _define_fixed_width(U32_KIND)
U64 = _define_fixed_width(U64_KIND)
U128 = _define_fixed_width(U128_KIND)
USIZE = _define_fixed_width(USIZE_KIND)

I8 = _define_fixed_width(I8_KIND)
I16 = _define_fixed_width(I16_KIND)
I32 = _define_fixed_width(I32_KIND)
I64 = _define_fixed_width(I64_KIND)
I128 = _define_fixed_width(I128_KIND)
ISIZE = _define_fixed_width(ISIZE_KIND)

FIXED_WIDTH_TYPES: dict[str, type[FixedWidthInt]] = {
    cls.KIND.name: cls
    for cls in (U8, U16, U32, U64, U128, USIZE, I8, I16, I32, I64, I128, ISIZE)
}


def fixed_width_type(kind: IntegerKind | str) -> type[FixedWidthInt]:
    """
    Поиск value type по kind или имени kind.

    Raises:
        KeyError: Если kind неизвестен
    """
    if isinstance(kind, str):
        kind = kind_by_name(kind)
    return FIXED_WIDTH_TYPES[kind.name]
