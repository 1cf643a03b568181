"""
BigDecimal — точное десятичное число произвольной длины

Неизменяемый value object: последовательность цифр, знак и количество
дробных цифр (decimal_pos). Значение:

    value = int(digits) × 10^(−decimal_pos),  со знаком минус если negative

Операции:
- Построение из строки-литерала, int или другого BigDecimal
- Сравнение модулей и знаковое сравнение
- Выравнивание дробной части (align) на копиях
- Сложение, вычитание, умножение (schoolbook / Karatsuba)
- Деление "в столбик" с усечением и остаток
- Возведение в неотрицательную целую степень (exponentiation by squaring)
- Форматирование в строку

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра ∈ [0, 9], цифры хранятся least-significant first
2. Нет ведущих нулей; каноничный ноль = (0,), negative=False, decimal_pos=0
3. decimal_pos >= 0 (отрицательный масштаб после деления раскрывается нулями)
4. Операции никогда не изменяют операнды, результат всегда новый объект
5. Равенство и hash — по числовому значению ("7.50" == "7.5")

ОГРАНИЧЕНИЕ:
    Деление не синтезирует дробных цифр сверх цифр делимого, поэтому
    периодические дроби не представимы: "1/3" → 0, "10.00/3" → 3.33.
"""

from typing import Final, Optional, Sequence, Union

from src.core.errors import DivisionByZero, InvalidExponent
from src.core.math.digits import (
    KARATSUBA_THRESHOLD_DEFAULT,
    ZERO as ZERO_DIGITS,
    add_digits,
    compare_digits,
    divide_digits,
    is_zero_digits,
    multiply_digits,
    strip_leading_zeros,
    subtract_digits,
)

DIGIT_CHARS: Final[str] = "0123456789"

Operand = Union["BigDecimal", int]


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _parse_literal(text: str) -> tuple[list[int], bool, int]:
    """
    Разбор литерала слева направо.

    '-' в любой позиции выставляет знак, '.' открывает дробную часть,
    прочие нецифровые символы игнорируются. Литерал без цифр → 0.

    Returns:
        (digits least-significant first, negative, decimal_pos)
    """
    negative = False
    seen_point = False
    decimal_pos = 0
    msd_first: list[int] = []

    for ch in text:
        if ch == "-":
            negative = True
        elif ch == ".":
            seen_point = True
        elif ch in DIGIT_CHARS:
            msd_first.append(ord(ch) - ord("0"))
            if seen_point:
                decimal_pos += 1

    if not msd_first:
        return [0], False, 0

    return msd_first[::-1], negative, decimal_pos


def _aligned_digits(
    a: "BigDecimal", b: "BigDecimal"
) -> tuple[list[int], list[int], int]:
    """
    Выравнивание дробных частей двух чисел.

    Операнд с меньшим decimal_pos дополняется младшими нулями.
    Возвращаются новые списки, исходные числа не меняются.
    """
    scale = max(a.decimal_pos, b.decimal_pos)
    a_digits = [0] * (scale - a.decimal_pos) + list(a.digits)
    b_digits = [0] * (scale - b.decimal_pos) + list(b.digits)
    return a_digits, b_digits, scale


# =============================================================================
# BIG DECIMAL
# =============================================================================


class BigDecimal:
    """
    Точное десятичное число произвольной точности.

    Examples:
        >>> str(BigDecimal("007.50"))
        '7.5'
        >>> str(BigDecimal("-0.0"))
        '0'
        >>> str(BigDecimal("123.45") + BigDecimal("67.89"))
        '191.34'
        >>> str(BigDecimal("10.00") / BigDecimal("3"))
        '3.33'
    """

    __slots__ = ("_digits", "_negative", "_decimal_pos")

    def __init__(self, value: Union["BigDecimal", int, str] = "0"):
        if isinstance(value, BigDecimal):
            # Tuple неизменяем, поэтому копия не разделяет изменяемого состояния
            self._digits = value._digits
            self._negative = value._negative
            self._decimal_pos = value._decimal_pos
            return

        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        elif not isinstance(value, str):
            raise TypeError(
                f"BigDecimal can be built from str, int or BigDecimal, "
                f"got {type(value).__name__}"
            )

        digits, negative, decimal_pos = _parse_literal(value)
        self._assign(digits, negative, decimal_pos)

    def _assign(self, digits: Sequence[int], negative: bool, decimal_pos: int) -> None:
        """Канонизация и сохранение частей числа."""
        if decimal_pos < 0:
            # value = int(digits) × 10^(−decimal_pos): раскрываем масштаб нулями
            digits = [0] * (-decimal_pos) + list(digits)
            decimal_pos = 0

        stripped = strip_leading_zeros(digits)
        if is_zero_digits(stripped):
            self._digits = ZERO_DIGITS
            self._negative = False
            self._decimal_pos = 0
            return

        self._digits = tuple(stripped)
        self._negative = bool(negative)
        self._decimal_pos = decimal_pos

    @classmethod
    def from_parts(
        cls, digits: Sequence[int], negative: bool = False, decimal_pos: int = 0
    ) -> "BigDecimal":
        """
        Построение из сырых частей (digits least-significant first).

        Args:
            digits: Цифры в диапазоне [0, 9], младшая первой
            negative: Знак
            decimal_pos: Количество дробных цифр (может быть < 0)

        Returns:
            Канонизированное число

        Raises:
            ValueError: Если какая-либо цифра вне [0, 9]
        """
        for digit in digits:
            if not 0 <= digit <= 9:
                raise ValueError(f"digit must be in [0, 9], got {digit}")

        obj = cls.__new__(cls)
        obj._assign(digits, negative, decimal_pos)
        return obj

    @staticmethod
    def _coerce(value: object) -> Optional["BigDecimal"]:
        if isinstance(value, BigDecimal):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigDecimal(value)
        return None

    @classmethod
    def _require(cls, value: object) -> "BigDecimal":
        coerced = cls._coerce(value)
        if coerced is None:
            raise TypeError(
                f"unsupported operand type for BigDecimal: {type(value).__name__}"
            )
        return coerced

    # -------------------------------------------------------------------------
    # Доступ к частям
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры, младшая первой."""
        return self._digits

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def decimal_pos(self) -> int:
        """Количество цифр (от младшего конца), стоящих после точки."""
        return self._decimal_pos

    def digit_count(self) -> int:
        return len(self._digits)

    def is_zero(self) -> bool:
        return self._digits == ZERO_DIGITS

    def is_integral(self) -> bool:
        """True если дробная часть равна нулю."""
        return all(d == 0 for d in self._digits[: self._decimal_pos])

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def align(self, other: Operand) -> tuple["BigDecimal", "BigDecimal"]:
        """
        Выравнивание decimal_pos двух чисел.

        Возвращает новые числа с одинаковым decimal_pos (ноль остаётся
        каноничным). Ни self, ни other не изменяются.

        Examples:
            >>> a, b = BigDecimal("1.5").align(BigDecimal("2.25"))
            >>> a.digits, a.decimal_pos
            ((0, 5, 1), 2)
        """
        other = self._require(other)
        a_digits, b_digits, scale = _aligned_digits(self, other)
        return (
            BigDecimal.from_parts(a_digits, self._negative, scale),
            BigDecimal.from_parts(b_digits, other._negative, scale),
        )

    def compare_magnitude(self, other: Operand) -> int:
        """
        Сравнение модулей (знак игнорируется).

        Returns:
            -1, 0 или 1
        """
        other = self._require(other)
        a_digits, b_digits, _ = _aligned_digits(self, other)
        return compare_digits(a_digits, b_digits)

    def compare(self, other: Operand) -> int:
        """Знаковое сравнение: -1, 0 или 1."""
        other = self._require(other)
        if self._negative != other._negative:
            return -1 if self._negative else 1
        result = self.compare_magnitude(other)
        return -result if self._negative else result

    def __eq__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) == 0

    def __lt__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) < 0

    def __le__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) <= 0

    def __gt__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) > 0

    def __ge__(self, other: object) -> bool:
        coerced = self._coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) >= 0

    def __hash__(self) -> int:
        # Целые значения хэшируются как int, т.к. BigDecimal("7.00") == 7
        if self.is_integral():
            return hash(int(self))
        # Дробные: младшие нули не влияют
        digits, decimal_pos = self._digits, self._decimal_pos
        while decimal_pos > 0 and digits[0] == 0:
            digits = digits[1:]
            decimal_pos -= 1
        return hash((self._negative, digits, decimal_pos))

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Сложение и вычитание
    # -------------------------------------------------------------------------

    @staticmethod
    def _subtract_magnitudes(
        a: list[int], b: list[int], negative: bool, scale: int
    ) -> "BigDecimal":
        """
        |a| - |b| для выровненных модулей с общим знаком negative.

        Результат отрицателен ровно когда (|a| < |b|) XOR negative.
        """
        if compare_digits(a, b) < 0:
            return BigDecimal.from_parts(subtract_digits(b, a), not negative, scale)
        return BigDecimal.from_parts(subtract_digits(a, b), negative, scale)

    def add(self, other: Operand) -> "BigDecimal":
        other = self._require(other)
        a_digits, b_digits, scale = _aligned_digits(self, other)

        if self._negative == other._negative:
            return BigDecimal.from_parts(
                add_digits(a_digits, b_digits), self._negative, scale
            )

        # Знаки различны: a + b = a - (-b)
        return self._subtract_magnitudes(a_digits, b_digits, self._negative, scale)

    def subtract(self, other: Operand) -> "BigDecimal":
        other = self._require(other)
        a_digits, b_digits, scale = _aligned_digits(self, other)

        if self._negative != other._negative:
            # Знаки различны: a - b = a + (-b)
            return BigDecimal.from_parts(
                add_digits(a_digits, b_digits), self._negative, scale
            )

        return self._subtract_magnitudes(a_digits, b_digits, self._negative, scale)

    # -------------------------------------------------------------------------
    # Умножение, деление, степень
    # -------------------------------------------------------------------------

    def multiply(
        self,
        other: Operand,
        karatsuba_threshold: Optional[int] = KARATSUBA_THRESHOLD_DEFAULT,
    ) -> "BigDecimal":
        """
        Умножение.

        Знак = XOR знаков, decimal_pos = сумма decimal_pos операндов.
        Операнды длиной <= karatsuba_threshold цифр умножаются "в столбик",
        более длинные — методом Karatsuba.

        Args:
            other: Второй множитель
            karatsuba_threshold: Порог Karatsuba; None → только schoolbook

        Returns:
            Произведение
        """
        other = self._require(other)
        if karatsuba_threshold is not None and karatsuba_threshold < 1:
            raise ValueError(
                f"karatsuba_threshold must be >= 1, got {karatsuba_threshold}"
            )

        if self.is_zero() or other.is_zero():
            return ZERO

        digits = multiply_digits(self._digits, other._digits, karatsuba_threshold)
        return BigDecimal.from_parts(
            digits,
            self._negative != other._negative,
            self._decimal_pos + other._decimal_pos,
        )

    def divide(self, other: Operand) -> "BigDecimal":
        """
        Деление "в столбик" с усечением.

        Знак = XOR знаков, decimal_pos = decimal_pos делимого минус
        decimal_pos делителя. Цифры частного не выходят за пределы цифр
        делимого: "7/2" → 3, "7.0/2" → 3.5.

        Raises:
            DivisionByZero: Если модуль делителя равен нулю
        """
        other = self._require(other)
        if other.is_zero():
            raise DivisionByZero()

        quotient, _ = divide_digits(self._digits, other._digits)
        return BigDecimal.from_parts(
            quotient,
            self._negative != other._negative,
            self._decimal_pos - other._decimal_pos,
        )

    def mod(self, other: Operand) -> "BigDecimal":
        """
        Остаток: a - (a / b) * b.

        Наследует усечение деления, знак остатка совпадает со знаком делимого.

        Raises:
            DivisionByZero: Если модуль делителя равен нулю
        """
        other = self._require(other)
        quotient = self.divide(other)
        return self.subtract(quotient.multiply(other))

    def power(
        self,
        exponent: Union["BigDecimal", int],
        karatsuba_threshold: Optional[int] = KARATSUBA_THRESHOLD_DEFAULT,
    ) -> "BigDecimal":
        """
        Возведение в неотрицательную целую степень (exponentiation by squaring).

        Args:
            exponent: Показатель степени (int или целый BigDecimal)
            karatsuba_threshold: Порог Karatsuba для промежуточных умножений

        Returns:
            self ** exponent (x ** 0 == 1 для любого x)

        Raises:
            InvalidExponent: Если показатель отрицательный или нецелый
        """
        if isinstance(exponent, BigDecimal):
            if not exponent.is_integral():
                raise InvalidExponent("Exponent must be an integer")
            n = int(exponent)
        elif isinstance(exponent, int):
            n = exponent
        else:
            raise TypeError(
                f"exponent must be int or BigDecimal, got {type(exponent).__name__}"
            )

        if n < 0:
            raise InvalidExponent()

        result = ONE
        base = self
        while n > 0:
            if n % 2 == 1:
                result = result.multiply(base, karatsuba_threshold)
            n //= 2
            if n:
                base = base.multiply(base, karatsuba_threshold)

        return result

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigDecimal":
        return BigDecimal.from_parts(self._digits, not self._negative, self._decimal_pos)

    def __pos__(self) -> "BigDecimal":
        return self

    def __abs__(self) -> "BigDecimal":
        return BigDecimal.from_parts(self._digits, False, self._decimal_pos)

    def __add__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else self.add(coerced)

    def __radd__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else coerced.add(self)

    def __sub__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else self.subtract(coerced)

    def __rsub__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else coerced.subtract(self)

    def __mul__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else self.multiply(coerced)

    def __rmul__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else coerced.multiply(self)

    def __truediv__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else self.divide(coerced)

    def __rtruediv__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else coerced.divide(self)

    def __mod__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else self.mod(coerced)

    def __rmod__(self, other: object) -> "BigDecimal":
        coerced = self._coerce(other)
        return NotImplemented if coerced is None else coerced.mod(self)

    def __pow__(self, exponent: object) -> "BigDecimal":
        if not isinstance(exponent, (BigDecimal, int)):
            return NotImplemented
        return self.power(exponent)

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        """Целая часть с усечением к нулю."""
        integer_digits = self._digits[self._decimal_pos :]
        if not integer_digits:
            return 0
        value = int("".join(str(d) for d in reversed(integer_digits)))
        return -value if self._negative else value

    def __str__(self) -> str:
        """
        Строковое представление.

        Ноль → "0". Дробная часть печатается без младших нулей.

        Значение меньше единицы дополняется нулями и получает ведущий "0"
        ("0.05", "-0.5"). Точка в начале строки намеренно не опускается:
        иначе 0.05 печаталось бы как "5".
        """
        if self.is_zero():
            return "0"

        text = "".join(str(d) for d in reversed(self._digits))
        scale = self._decimal_pos
        if scale > 0:
            if len(text) <= scale:
                text = "0" * (scale - len(text) + 1) + text
            integer, fraction = text[:-scale], text[-scale:].rstrip("0")
            text = f"{integer}.{fraction}" if fraction else integer

        return f"-{text}" if self._negative else text

    def __repr__(self) -> str:
        return f"BigDecimal('{self}')"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[BigDecimal] = BigDecimal("0")
ONE: Final[BigDecimal] = BigDecimal("1")


def align(a: BigDecimal, b: BigDecimal) -> tuple[BigDecimal, BigDecimal]:
    """Выравнивание decimal_pos двух чисел (см. BigDecimal.align)."""
    return a.align(b)
