"""
Checked Sum — Суммирование последовательности с контролем переполнения

Short-circuit fold поверх checked_add:
    acc = zero
    for x in values:
        acc = checked_add(acc, x)
        if acc is None: return None   # остаток последовательности не читается
    return acc

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая последовательность → zero (никогда не None)
2. Первое переполнение → None, дальнейшие элементы не потребляются
3. Частичный результат не возвращается
4. Последовательность читается лениво, один раз, слева направо
"""

import logging
from typing import Iterable, TypeVar

from src.checked_sum.math.checked_add import Addable, checked_add_int
from src.checked_sum.math.integer_kinds import IntegerKind

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Addable)


def checked_sum(values: Iterable[A], item_type: type[A]) -> A | None:
    """
    Сумма последовательности значений с проверкой переполнения.

    Args:
        values: Любой iterable (включая генераторы и бесконечные итераторы)
        item_type: Тип элементов; item_type.zero() задаёт начальное значение

    Returns:
        Сумма всех элементов или None при первом переполнении

    Raises:
        TypeError: Если item_type не предоставляет zero(), или элемент
            несовместим с аккумулятором

    Examples:
        >>> checked_sum([U8(1), U8(2), U8(3)], U8)
        U8(value=6)
        >>> checked_sum([U8(255), U8(1)], U8) is None
        True
        >>> checked_sum([], U8)
        U8(value=0)
    """
    if not callable(getattr(item_type, "zero", None)):
        raise TypeError(f"{item_type.__name__} does not provide an additive identity zero()")

    acc = item_type.zero()
    for value in values:
        acc = acc.checked_add(value)
        if acc is None:
            logger.debug("Overflow while summing %s values", item_type.__name__)
            return None

    return acc


def checked_sum_int(values: Iterable[int], kind: IntegerKind) -> int | None:
    """
    Сумма последовательности raw int, интерпретируемых как kind.

    Args:
        values: Iterable целых (каждое должно лежать в диапазоне kind)
        kind: Ширина и знаковость

    Returns:
        Точная сумма или None при первом переполнении

    Raises:
        TypeError: Если элемент не int
        ValueError: Если элемент вне диапазона kind
    """
    acc = 0
    for value in values:
        total = checked_add_int(acc, value, kind)
        if total is None:
            logger.debug("Overflow while summing %s values", kind)
            return None
        acc = total

    return acc
