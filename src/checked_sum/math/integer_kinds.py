"""
Integer Kinds — Fixed-width целочисленные типы

Python int не ограничен по размеру, поэтому ширина (8/16/32/64/128 бит,
pointer-sized) задаётся явно через IntegerKind.

Модуль определяет:
- IntegerKind: ширина + знаковость + допустимый диапазон [MIN, MAX]
- Константы для всех стандартных ширин (signed/unsigned)
- Поиск kind по имени
- Валидацию операндов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. unsigned: [0, 2**bits - 1]
2. signed: [-2**(bits-1), 2**(bits-1) - 1]
3. bool не является валидным операндом
"""

import struct
from dataclasses import dataclass
from typing import Final, Mapping

# =============================================================================
# ПАРАМЕТРЫ ПЛАТФОРМЫ
# =============================================================================

# Ширина указателя на текущей платформе (usize/isize)
POINTER_BITS: Final[int] = struct.calcsize("P") * 8

# Стандартные ширины фиксированных целых
STANDARD_WIDTHS: Final[tuple[int, ...]] = (8, 16, 32, 64, 128)


# =============================================================================
# INTEGER KIND
# =============================================================================


@dataclass(frozen=True)
class IntegerKind:
    """
    Описание fixed-width целочисленного типа.

    Immutable (frozen=True): kinds используются как ключи и константы модуля.
    """

    name: str
    bits: int
    signed: bool

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bits must be positive, got {self.bits}")

    @property
    def min_value(self) -> int:
        """Минимальное представимое значение (0 для unsigned)."""
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        """
        Проверка, что значение лежит в [min_value, max_value].

        Граница включается: ровно MAX или ровно MIN не является переполнением.
        """
        return self.min_value <= value <= self.max_value

    def __str__(self) -> str:
        return self.name


def _define_kind(bits: int, signed: bool, name: str | None = None) -> IntegerKind:
    prefix = "i" if signed else "u"
    return IntegerKind(name=name or f"{prefix}{bits}", bits=bits, signed=signed)


# =============================================================================
# СТАНДАРТНЫЕ KINDS
# =============================================================================

U8_KIND: Final[IntegerKind] = _define_kind(8, signed=False)
U16_KIND: Final[IntegerKind] = _define_kind(16, signed=False)
U32_KIND: Final[IntegerKind] = _define_kind(32, signed=False)
U64_KIND: Final[IntegerKind] = _define_kind(64, signed=False)
U128_KIND: Final[IntegerKind] = _define_kind(128, signed=False)
USIZE_KIND: Final[IntegerKind] = _define_kind(POINTER_BITS, signed=False, name="usize")

I8_KIND: Final[IntegerKind] = _define_kind(8, signed=True)
I16_KIND: Final[IntegerKind] = _define_kind(16, signed=True)
I32_KIND: Final[IntegerKind] = _define_kind(32, signed=True)
I64_KIND: Final[IntegerKind] = _define_kind(64, signed=True)
I128_KIND: Final[IntegerKind] = _define_kind(128, signed=True)
ISIZE_KIND: Final[IntegerKind] = _define_kind(POINTER_BITS, signed=True, name="isize")

UNSIGNED_KINDS: Final[tuple[IntegerKind, ...]] = (
    U8_KIND,
    U16_KIND,
    U32_KIND,
    U64_KIND,
    U128_KIND,
    USIZE_KIND,
)

SIGNED_KINDS: Final[tuple[IntegerKind, ...]] = (
    I8_KIND,
    I16_KIND,
    I32_KIND,
    I64_KIND,
    I128_KIND,
    ISIZE_KIND,
)

ALL_KINDS: Final[tuple[IntegerKind, ...]] = UNSIGNED_KINDS + SIGNED_KINDS

KINDS_BY_NAME: Final[Mapping[str, IntegerKind]] = {kind.name: kind for kind in ALL_KINDS}


def kind_by_name(name: str) -> IntegerKind:
    """
    Поиск kind по имени (регистр не важен).

    Args:
        name: Имя kind, например 'u8', 'I64', 'usize'

    Returns:
        Соответствующий IntegerKind

    Raises:
        KeyError: Если имя неизвестно

    Examples:
        >>> kind_by_name("U8").max_value
        255
    """
    try:
        return KINDS_BY_NAME[name.lower()]
    except KeyError:
        known = ", ".join(KINDS_BY_NAME)
        raise KeyError(f"Unknown integer kind {name!r}, expected one of: {known}") from None


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_kind(value: int, kind: IntegerKind, name: str = "value") -> None:
    """
    Валидация операнда для fixed-width арифметики.

    Args:
        value: Проверяемое значение
        kind: Целевой kind
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value вне диапазона kind
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if not kind.contains(value):
        raise ValueError(
            f"{name} {value} out of range for {kind} "
            f"[{kind.min_value}, {kind.max_value}]"
        )
