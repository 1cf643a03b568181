"""
Тесты для модуля Digits (magnitude arithmetic)

Проверяет:
1. Нормализацию и сравнение последовательностей цифр
2. Сложение с переносом и вычитание с заёмом
3. Schoolbook и Karatsuba умножение
4. Деление "в столбик"
5. Неизменность входных последовательностей
"""

import random

import pytest

from src.core.math.digits import (
    KARATSUBA_THRESHOLD_DEFAULT,
    add_digits,
    compare_digits,
    divide_digits,
    karatsuba_multiply,
    multiply_by_digit,
    multiply_digits,
    schoolbook_multiply,
    shift_digits,
    strip_leading_zeros,
    subtract_digits,
)


def to_digits(n: int) -> list[int]:
    """int → цифры, младшая первой."""
    return [int(c) for c in reversed(str(n))]


def from_digits(digits: list[int]) -> int:
    return int("".join(str(d) for d in reversed(digits)))


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ И СРАВНЕНИЯ
# =============================================================================


class TestStripLeadingZeros:
    """Тесты для strip_leading_zeros"""

    def test_strips_most_significant_zeros(self) -> None:
        assert strip_leading_zeros([3, 2, 1, 0, 0]) == [3, 2, 1]

    def test_keeps_least_significant_zeros(self) -> None:
        assert strip_leading_zeros([0, 0, 1]) == [0, 0, 1]

    def test_all_zeros_become_canonical_zero(self) -> None:
        assert strip_leading_zeros([0, 0, 0]) == [0]

    def test_empty_becomes_canonical_zero(self) -> None:
        assert strip_leading_zeros([]) == [0]


class TestCompareDigits:
    """Тесты для compare_digits"""

    def test_more_digits_is_larger(self) -> None:
        assert compare_digits(to_digits(10), to_digits(9)) == 1
        assert compare_digits(to_digits(9), to_digits(10)) == -1

    def test_same_length_compared_from_most_significant(self) -> None:
        assert compare_digits(to_digits(251), to_digits(249)) == 1
        assert compare_digits(to_digits(249), to_digits(251)) == -1

    def test_equal(self) -> None:
        assert compare_digits(to_digits(12345), to_digits(12345)) == 0
        assert compare_digits([0], [0]) == 0


# =============================================================================
# ТЕСТЫ СЛОЖЕНИЯ И ВЫЧИТАНИЯ
# =============================================================================


class TestAddDigits:
    """Тесты для add_digits"""

    def test_carry_propagates_to_new_digit(self) -> None:
        assert add_digits([9, 9], [1]) == [0, 0, 1]

    def test_different_lengths(self) -> None:
        assert from_digits(add_digits(to_digits(12345), to_digits(678))) == 13023

    def test_zero_is_identity(self) -> None:
        assert add_digits(to_digits(4096), [0]) == to_digits(4096)

    def test_inputs_not_mutated(self) -> None:
        a = [9, 9]
        b = [1]
        add_digits(a, b)
        assert a == [9, 9]
        assert b == [1]


class TestSubtractDigits:
    """Тесты для subtract_digits"""

    def test_borrow_across_zeros(self) -> None:
        assert subtract_digits([0, 0, 1], [1]) == [9, 9]

    def test_equal_values_give_zero(self) -> None:
        assert subtract_digits(to_digits(777), to_digits(777)) == [0]

    def test_result_is_normalized(self) -> None:
        assert subtract_digits(to_digits(1000), to_digits(999)) == [1]

    def test_smaller_minus_larger_raises(self) -> None:
        with pytest.raises(ValueError, match="larger >= smaller"):
            subtract_digits(to_digits(5), to_digits(6))


class TestShiftDigits:
    """Тесты для shift_digits"""

    def test_shift_prepends_least_significant_zeros(self) -> None:
        assert shift_digits([1], 3) == [0, 0, 0, 1]

    def test_zero_is_not_shifted(self) -> None:
        assert shift_digits([0], 5) == [0]

    def test_negative_places_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            shift_digits([1], -1)


# =============================================================================
# ТЕСТЫ УМНОЖЕНИЯ
# =============================================================================


class TestMultiplyByDigit:
    """Тесты для multiply_by_digit"""

    def test_carry(self) -> None:
        assert from_digits(multiply_by_digit(to_digits(99), 9)) == 891

    def test_by_zero(self) -> None:
        assert multiply_by_digit(to_digits(123), 0) == [0]


class TestSchoolbookMultiply:
    """Тесты для schoolbook_multiply"""

    def test_small_product(self) -> None:
        assert schoolbook_multiply([2, 1], [3, 2]) == [6, 7, 2]

    def test_zero_operand(self) -> None:
        assert schoolbook_multiply([0], to_digits(123)) == [0]
        assert schoolbook_multiply(to_digits(123), [0]) == [0]

    def test_operand_with_inner_zeros(self) -> None:
        assert from_digits(schoolbook_multiply(to_digits(1001), to_digits(1010))) == 1011010


class TestKaratsubaMultiply:
    """Тесты для karatsuba_multiply"""

    @pytest.mark.parametrize("threshold", [1, 2, 3, 7])
    def test_small_threshold_matches_int(self, threshold: int) -> None:
        """Низкий порог форсирует глубокую рекурсию"""
        a, b = 1234567890123, 98765432109876
        result = karatsuba_multiply(to_digits(a), to_digits(b), threshold)
        assert from_digits(result) == a * b

    def test_unbalanced_operands(self) -> None:
        a = int("7" * 120)
        b = 321
        result = karatsuba_multiply(to_digits(a), to_digits(b), threshold=10)
        assert from_digits(result) == a * b

    def test_powers_of_ten(self) -> None:
        """Младшие половины из одних нулей"""
        a = 10**60
        b = 10**55
        result = karatsuba_multiply(to_digits(a), to_digits(b), threshold=4)
        assert from_digits(result) == 10**115

    def test_invalid_threshold_raises(self) -> None:
        with pytest.raises(ValueError, match="threshold must be >= 1"):
            karatsuba_multiply([1], [1], threshold=0)

    def test_matches_schoolbook_on_random_operands(self) -> None:
        rng = random.Random(1337)
        for _ in range(10):
            a = rng.randrange(10**70, 10**90)
            b = rng.randrange(10**5, 10**80)
            expected = schoolbook_multiply(to_digits(a), to_digits(b))
            assert karatsuba_multiply(to_digits(a), to_digits(b), threshold=8) == expected


class TestMultiplyDigits:
    """Тесты для multiply_digits (выбор алгоритма)"""

    def test_default_threshold(self) -> None:
        assert KARATSUBA_THRESHOLD_DEFAULT == 50

    def test_none_threshold_uses_schoolbook(self) -> None:
        a = int("9" * 80)
        assert from_digits(multiply_digits(to_digits(a), to_digits(a), None)) == a * a

    def test_above_threshold_uses_karatsuba(self) -> None:
        a = int("12345" * 20)
        b = int("67890" * 20)
        assert from_digits(multiply_digits(to_digits(a), to_digits(b))) == a * b


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDivideDigits:
    """Тесты для divide_digits"""

    def test_quotient_and_remainder(self) -> None:
        assert divide_digits([9, 9, 9], [7]) == ([2, 4, 1], [5])

    def test_exact_division(self) -> None:
        quotient, remainder = divide_digits(to_digits(1024), to_digits(32))
        assert from_digits(quotient) == 32
        assert remainder == [0]

    def test_dividend_smaller_than_divisor(self) -> None:
        assert divide_digits(to_digits(3), to_digits(7)) == ([0], [3])

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divide_digits(to_digits(5), [0])

    def test_matches_int_divmod_on_random_operands(self) -> None:
        rng = random.Random(42)
        for _ in range(20):
            a = rng.randrange(1, 10**40)
            b = rng.randrange(1, 10**15)
            quotient, remainder = divide_digits(to_digits(a), to_digits(b))
            assert (from_digits(quotient), from_digits(remainder)) == divmod(a, b)
