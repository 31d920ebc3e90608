"""
Тесты для модуля Checked Sum

Проверяет:
1. Сценарии u8 (пусто, обычная сумма, переполнение, граница)
2. Short-circuit: элементы после переполнения не потребляются
3. Signed underflow
4. Пользовательские newtypes, делегирующие checked_add
5. checked_sum_int над raw int
"""

import itertools
import logging
from typing import Iterator

import pytest
from pydantic import BaseModel

from src.checked_sum.domain import I8, I64, U8, U32, U64
from src.checked_sum.math.checked_sum import checked_sum, checked_sum_int
from src.checked_sum.math.integer_kinds import I8_KIND, U8_KIND, U64_KIND


# =============================================================================
# FIXTURES
# =============================================================================


class Satoshis(BaseModel):
    """Newtype над U64, реализующий Addable делегированием."""

    amount: U64

    model_config = {"frozen": True}

    def checked_add(self, other: "Satoshis") -> "Satoshis | None":
        total = self.amount.checked_add(other.amount)
        if total is None:
            return None
        return Satoshis(amount=total)

    @classmethod
    def zero(cls) -> "Satoshis":
        return cls(amount=U64.zero())


def counting(values: list, consumed: list) -> Iterator:
    """Генератор, записывающий каждый выданный элемент."""
    for value in values:
        consumed.append(value)
        yield value


# =============================================================================
# СЦЕНАРИИ U8
# =============================================================================


class TestU8Scenarios:
    """Сценарии для u8 (диапазон 0–255)"""

    def test_empty_gives_zero(self) -> None:
        """[] → Some(0)"""
        assert checked_sum([], U8) == U8(0)

    def test_small_sum(self) -> None:
        """[1, 2, 3, 4, 5] → Some(15)"""
        assert checked_sum([U8(v) for v in (1, 2, 3, 4, 5)], U8) == U8(15)

    def test_max_plus_one_overflows(self) -> None:
        """[255, 1] → None"""
        assert checked_sum([U8(255), U8(1)], U8) is None

    def test_256_ones_overflow(self) -> None:
        """256 × 1 → None"""
        assert checked_sum([U8(1)] * 256, U8) is None

    def test_255_ones_fit(self) -> None:
        """255 × 1 → Some(255)"""
        assert checked_sum([U8(1)] * 255, U8) == U8(255)

    def test_three_max_overflow(self) -> None:
        """[255, 255, 255] → None"""
        assert checked_sum([U8(255)] * 3, U8) is None

    def test_single_max_is_not_overflow(self) -> None:
        """[255] → Some(255): zero + MAX не переполнение"""
        assert checked_sum([U8(255)], U8) == U8(255)


# =============================================================================
# SHORT-CIRCUIT
# =============================================================================


class TestShortCircuit:
    """Тесты раннего выхода при переполнении"""

    def test_stops_at_failing_element(self) -> None:
        """Элементы после переполнения не читаются"""
        consumed: list = []
        values = [U8(200), U8(100), U8(1), U8(2)]

        assert checked_sum(counting(values, consumed), U8) is None
        assert consumed == [U8(200), U8(100)]

    def test_infinite_iterator_terminates_on_overflow(self) -> None:
        """Бесконечный итератор завершается на переполнении"""
        ones = itertools.repeat(U8(1))
        assert checked_sum(ones, U8) is None
        # 256-я единица вызвала переполнение, дальше не читали
        assert next(ones) == U8(1)

    def test_generator_consumed_fully_on_success(self) -> None:
        consumed: list = []
        values = [U8(1), U8(2), U8(3)]

        assert checked_sum(counting(values, consumed), U8) == U8(6)
        assert consumed == values

    def test_raw_int_stops_at_failing_element(self) -> None:
        consumed: list = []
        assert checked_sum_int(counting([255, 1, 7], consumed), U8_KIND) is None
        assert consumed == [255, 1]


# =============================================================================
# SIGNED
# =============================================================================


class TestSigned:
    """Тесты signed сумм"""

    def test_mixed_signs(self) -> None:
        assert checked_sum([I8(100), I8(-50), I8(27)], I8) == I8(77)

    def test_underflow(self) -> None:
        assert checked_sum([I8(-100), I8(-29)], I8) is None

    def test_exact_min(self) -> None:
        assert checked_sum([I8(-100), I8(-28)], I8) == I8(-128)

    def test_intermediate_overflow_is_reported(self) -> None:
        """Fold слева направо: промежуточное переполнение даёт None"""
        assert checked_sum([I8(127), I8(1), I8(-1)], I8) is None
        assert checked_sum([I8(127), I8(-1), I8(1)], I8) == I8(127)

    def test_i64_boundary(self) -> None:
        max_i64 = 9_223_372_036_854_775_807
        assert checked_sum([I64(max_i64 - 1), I64(1)], I64) == I64(max_i64)
        assert checked_sum([I64(max_i64), I64(1)], I64) is None


# =============================================================================
# NEWTYPES
# =============================================================================


class TestNewtype:
    """Тесты пользовательских типов"""

    def test_newtype_sum(self) -> None:
        values = [Satoshis(amount=U64(v)) for v in (1, 2, 3)]
        assert checked_sum(values, Satoshis) == Satoshis(amount=U64(6))

    def test_newtype_empty(self) -> None:
        assert checked_sum([], Satoshis) == Satoshis.zero()

    def test_newtype_overflow(self) -> None:
        values = [Satoshis(amount=U64(U64_KIND.max_value)), Satoshis(amount=U64(1))]
        assert checked_sum(values, Satoshis) is None

    def test_item_type_without_zero_raises(self) -> None:
        with pytest.raises(TypeError, match="additive identity"):
            checked_sum([1, 2], int)

    def test_mixed_widths_raise(self) -> None:
        with pytest.raises(TypeError, match="Cannot add U32 to U8"):
            checked_sum([U8(1), U32(1)], U8)


# =============================================================================
# RAW INT
# =============================================================================


class TestCheckedSumInt:
    """Тесты checked_sum_int"""

    def test_scenarios(self) -> None:
        assert checked_sum_int([], U8_KIND) == 0
        assert checked_sum_int([1, 2, 3, 4, 5], U8_KIND) == 15
        assert checked_sum_int([255, 1], U8_KIND) is None
        assert checked_sum_int([1] * 256, U8_KIND) is None
        assert checked_sum_int([255, 255, 255], U8_KIND) is None
        assert checked_sum_int([255], U8_KIND) == 255

    def test_signed(self) -> None:
        assert checked_sum_int([-128], I8_KIND) == -128
        assert checked_sum_int([-128, -1], I8_KIND) is None

    def test_out_of_range_element_raises(self) -> None:
        with pytest.raises(ValueError, match="out of range for u8"):
            checked_sum_int([1, 300], U8_KIND)

    def test_non_int_element_raises(self) -> None:
        with pytest.raises(TypeError):
            checked_sum_int([1, 2.0], U8_KIND)  # type: ignore[list-item]


# =============================================================================
# LOGGING
# =============================================================================


class TestLogging:
    """Overflow логируется на DEBUG, успех не логируется"""

    def test_overflow_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.checked_sum.math.checked_sum"):
            checked_sum([U8(255), U8(1)], U8)

        assert "Overflow while summing U8 values" in caplog.text

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.checked_sum.math.checked_sum"):
            checked_sum([U8(1)], U8)
            checked_sum_int([1], U8_KIND)

        assert caplog.records == []
