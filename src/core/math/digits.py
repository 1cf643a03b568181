"""
Digits — примитивы над модулями чисел (magnitude arithmetic)

Модуль работает с "голыми" последовательностями цифр без знака и без
десятичной точки. Все последовательности хранятся least-significant first:
[3, 2, 1] означает 123. Это делает перенос (carry) и заём (borrow)
естественным проходом слева направо по списку.

Операции:
- Нормализация (удаление ведущих нулей)
- Сравнение модулей
- Сложение / вычитание с переносом и заёмом
- Умножение: schoolbook и Karatsuba (divide-and-conquer)
- Деление "в столбик" через повторное вычитание

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра ∈ [0, 9]
2. Результат любой операции нормализован: нет ведущих нулей, ноль = [0]
3. Входные последовательности никогда не модифицируются
4. Глубина рекурсии Karatsuba — O(log n) по числу цифр
"""

from typing import Final, Optional, Sequence

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Порог переключения schoolbook → Karatsuba (число цифр операнда).
# Если хотя бы один операнд длиннее порога → Karatsuba.
KARATSUBA_THRESHOLD_DEFAULT: Final[int] = 50

BASE: Final[int] = 10

ZERO: Final[tuple[int, ...]] = (0,)


# =============================================================================
# НОРМАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def strip_leading_zeros(digits: Sequence[int]) -> list[int]:
    """
    Удаление ведущих (most-significant) нулей.

    Пустая последовательность и последовательность из одних нулей
    превращаются в каноничный ноль [0].

    Examples:
        >>> strip_leading_zeros([3, 2, 1, 0, 0])
        [3, 2, 1]
        >>> strip_leading_zeros([0, 0])
        [0]
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return [0]
    return list(digits[:end])


def is_zero_digits(digits: Sequence[int]) -> bool:
    """True если последовательность представляет ноль."""
    return all(d == 0 for d in digits)


def compare_digits(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение модулей двух нормализованных последовательностей.

    Сначала сравнивается число цифр (больше цифр → больше модуль),
    затем цифры от старшей к младшей.

    Args:
        a: Первая последовательность (без ведущих нулей)
        b: Вторая последовательность (без ведущих нулей)

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare_digits([1, 2], [9])
        1
        >>> compare_digits([5, 2], [5, 2])
        0
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for da, db in zip(reversed(a), reversed(b)):
        if da != db:
            return 1 if da > db else -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение модулей с переносом.

    Examples:
        >>> add_digits([9, 9], [1])
        [0, 0, 1]
    """
    result: list[int] = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, digit = divmod(total, BASE)
        result.append(digit)

    if carry:
        result.append(carry)

    return strip_leading_zeros(result)


def subtract_digits(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Вычитание модулей с заёмом: larger - smaller.

    Args:
        larger: Уменьшаемое (модуль должен быть >= smaller)
        smaller: Вычитаемое

    Returns:
        Нормализованная разность

    Raises:
        ValueError: Если larger < smaller
    """
    if compare_digits(strip_leading_zeros(larger), strip_leading_zeros(smaller)) < 0:
        raise ValueError("subtract_digits requires larger >= smaller")

    result: list[int] = []
    borrow = 0
    for i, digit in enumerate(larger):
        diff = digit - borrow
        if i < len(smaller):
            diff -= smaller[i]
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return strip_leading_zeros(result)


def shift_digits(digits: Sequence[int], places: int) -> list[int]:
    """
    Сдвиг влево на places десятичных разрядов (умножение на 10^places).

    Младшие нули добавляются в начало списка. Ноль не сдвигается.
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    if is_zero_digits(digits):
        return [0]
    return [0] * places + list(digits)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_by_digit(digits: Sequence[int], factor: int) -> list[int]:
    """Умножение модуля на одну цифру с переносом (partial product)."""
    result: list[int] = []
    carry = 0
    for digit in digits:
        carry, low = divmod(digit * factor + carry, BASE)
        result.append(low)

    while carry:
        carry, low = divmod(carry, BASE)
        result.append(low)

    return strip_leading_zeros(result)


def schoolbook_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение "в столбик".

    Для каждой цифры правого операнда (от младшей, позиция i) строится
    partial product по всем цифрам левого операнда, сдвигается на i
    разрядов и накапливается сложением.

    Examples:
        >>> schoolbook_multiply([2, 1], [3, 2])   # 12 * 23
        [6, 7, 2]
    """
    if is_zero_digits(a) or is_zero_digits(b):
        return [0]

    result: list[int] = [0]
    for position, digit in enumerate(b):
        if digit == 0:
            continue
        partial = shift_digits(multiply_by_digit(a, digit), position)
        result = add_digits(result, partial)

    return result


def _split(digits: Sequence[int], k: int) -> tuple[list[int], list[int]]:
    """Разбиение на (high, low) по k младшим разрядам."""
    low = strip_leading_zeros(digits[:k])
    high = strip_leading_zeros(digits[k:])
    return high, low


def karatsuba_multiply(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = KARATSUBA_THRESHOLD_DEFAULT,
) -> list[int]:
    """
    Умножение Karatsuba (divide-and-conquer).

    Алгоритм:
        k = max(len(a), len(b)) // 2
        a = a_high * 10^k + a_low,  b = b_high * 10^k + b_low
        p1 = a_high * b_high
        p2 = a_low * b_low
        p3 = (a_high + a_low) * (b_high + b_low)
        mid = p3 - p1 - p2
        a * b = p1 * 10^(2k) + mid * 10^k + p2

    Подзадачи умножаются через multiply_digits, поэтому рекурсия
    возвращается к schoolbook, как только оба операнда укладываются
    в threshold.

    Args:
        a: Первый модуль
        b: Второй модуль
        threshold: Порог длины операнда для schoolbook (>= 1)

    Returns:
        Нормализованное произведение
    """
    if threshold < 1:
        raise ValueError(f"threshold must be >= 1, got {threshold}")

    if is_zero_digits(a) or is_zero_digits(b):
        return [0]

    length = max(len(a), len(b))
    if length <= threshold:
        return schoolbook_multiply(a, b)

    k = length // 2
    a_high, a_low = _split(a, k)
    b_high, b_low = _split(b, k)

    p1 = multiply_digits(a_high, b_high, threshold)
    p2 = multiply_digits(a_low, b_low, threshold)
    p3 = multiply_digits(add_digits(a_high, a_low), add_digits(b_high, b_low), threshold)
    mid = subtract_digits(subtract_digits(p3, p1), p2)

    return add_digits(add_digits(shift_digits(p1, 2 * k), shift_digits(mid, k)), p2)


def multiply_digits(
    a: Sequence[int],
    b: Sequence[int],
    threshold: Optional[int] = KARATSUBA_THRESHOLD_DEFAULT,
) -> list[int]:
    """
    Умножение модулей с выбором алгоритма.

    Args:
        a: Первый модуль
        b: Второй модуль
        threshold: Порог Karatsuba. None → всегда schoolbook.

    Returns:
        Нормализованное произведение
    """
    if threshold is None or (len(a) <= threshold and len(b) <= threshold):
        return schoolbook_multiply(a, b)
    return karatsuba_multiply(a, b, threshold)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide_digits(
    dividend: Sequence[int], divisor: Sequence[int]
) -> tuple[list[int], list[int]]:
    """
    Деление "в столбик" модулей: (quotient, remainder).

    Цифры делимого обрабатываются от старшей к младшей:
        remainder = remainder * 10 + digit
        q = max d ∈ [0, 9]: d * divisor <= remainder  (повторное вычитание)

    Дополнительные дробные цифры не синтезируются: частное имеет
    не больше цифр, чем делимое.

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)

    Returns:
        (частное, остаток), оба нормализованы

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> divide_digits([9, 9, 9], [7])   # 999 / 7
        ([2, 4, 1], [5])
    """
    dividend = strip_leading_zeros(dividend)
    divisor = strip_leading_zeros(divisor)

    if is_zero_digits(divisor):
        raise ZeroDivisionError("divide_digits: divisor is zero")

    if compare_digits(dividend, divisor) < 0:
        return [0], dividend

    quotient_msd_first: list[int] = []
    remainder: list[int] = [0]
    for digit in reversed(dividend):
        remainder = strip_leading_zeros([digit] + remainder)
        q = 0
        while compare_digits(remainder, divisor) >= 0:
            remainder = subtract_digits(remainder, divisor)
            q += 1
        quotient_msd_first.append(q)

    return strip_leading_zeros(quotient_msd_first[::-1]), remainder
