"""
Checked Add — Сложение с контролем переполнения

Модуль определяет capability "checked addition":
- CheckedAdd: протокол для типов, умеющих складываться с проверкой
- Addable: CheckedAdd + аддитивная единица (zero)
- checked_add_int: встроенная реализация для всех fixed-width kinds
- checked_add: generic точка входа для любого типа с capability

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не оборачивается (wrap) и не вызывает exception
2. Переполнение/underflow всегда даёт None
3. Ровно MIN или ровно MAX не является переполнением
4. Функции чистые, без side effects

Пользовательские newtypes реализуют протокол делегированием:

    class Satoshis(BaseModel):
        amount: U64

        def checked_add(self, other: "Satoshis") -> "Satoshis | None":
            total = self.amount.checked_add(other.amount)
            return None if total is None else Satoshis(amount=total)

        @classmethod
        def zero(cls) -> "Satoshis":
            return cls(amount=U64.zero())
"""

from typing import Protocol, TypeVar, runtime_checkable

from src.checked_sum.math.integer_kinds import IntegerKind, validate_in_kind

T = TypeVar("T", bound="CheckedAdd")


# =============================================================================
# ПРОТОКОЛЫ
# =============================================================================


@runtime_checkable
class CheckedAdd(Protocol):
    """Тип с операцией сложения, сигнализирующей переполнение через None."""

    def checked_add(self: T, other: T) -> T | None:
        ...


@runtime_checkable
class Addable(CheckedAdd, Protocol):
    """CheckedAdd с аддитивной единицей: zero() + x == x."""

    @classmethod
    def zero(cls: type[T]) -> T:
        ...


# =============================================================================
# ВСТРОЕННАЯ РЕАЛИЗАЦИЯ ДЛЯ FIXED-WIDTH INT
# =============================================================================


def checked_add_int(a: int, b: int, kind: IntegerKind) -> int | None:
    """
    Сложение двух целых заданной ширины с проверкой переполнения.

    Python int не переполняется, поэтому сумма вычисляется точно и затем
    сравнивается с диапазоном kind.

    Args:
        a: Первый операнд (должен лежать в диапазоне kind)
        b: Второй операнд (должен лежать в диапазоне kind)
        kind: Ширина и знаковость

    Returns:
        Точная сумма, если она в [MIN, MAX], иначе None

    Raises:
        TypeError: Если операнд не int
        ValueError: Если операнд вне диапазона kind

    Examples:
        >>> checked_add_int(200, 55, U8_KIND)
        255
        >>> checked_add_int(200, 56, U8_KIND) is None
        True
        >>> checked_add_int(-128, -1, I8_KIND) is None
        True
    """
    validate_in_kind(a, kind, "a")
    validate_in_kind(b, kind, "b")

    total = a + b
    if kind.contains(total):
        return total
    return None


# =============================================================================
# GENERIC ТОЧКА ВХОДА
# =============================================================================


def checked_add(a: T, b: T) -> T | None:
    """
    Generic checked addition для любого типа, реализующего CheckedAdd.

    Args:
        a: Первый операнд
        b: Второй операнд того же типа

    Returns:
        Сумма или None при переполнении

    Raises:
        TypeError: Если a не реализует CheckedAdd
    """
    if not isinstance(a, CheckedAdd):
        raise TypeError(f"{type(a).__name__} does not support checked addition")
    return a.checked_add(b)
