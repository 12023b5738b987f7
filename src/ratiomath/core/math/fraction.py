"""
Fraction — Точная рациональная арифметика

Неизменяемая дробь numerator/denominator из целых произвольной точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (выполняются после КАЖДОГО построения):
1. denominator != 0 (иначе DivisionByZero, без NaN/Inf)
2. denominator > 0 (знак живёт в числителе)
3. gcd(numerator, denominator) == 1 (дробь всегда сокращена)

Благодаря каноничной форме равенство структурное: (n1, d1) == (n2, d2).
Упорядочивание — через приведение к общему знаменателю, без float.

ФОРМУЛЫ:
    a/b + c/d = (a*(d/g) + c*(b/g)) / lcm(b, d),  g = gcd(b, d)
    a/b * c/d = (a*c) / (b*d)
    a/b / c/d = a/b * d/c                         (c == 0 → DivisionByZero)
    (a/b)**n  = a**n / b**n,   n >= 0
    (a/b)**-n = b**n / a**n                       (a == 0 → DivisionByZero)
"""

from decimal import Decimal
from typing import Final

from ratiomath.core.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from ratiomath.core.errors import DivisionByZero
from ratiomath.core.math.decimal_text import decompose_decimal, decompose_float, parse_decimal
from ratiomath.core.math.numerical_safeguards import (
    common_denominator,
    gcd,
    ieee_float,
    ieee_ratio,
    validate_integer,
)


def _normalize(numerator: int, denominator: int) -> tuple[int, int]:
    if denominator == 0:
        raise DivisionByZero("Denominator of a fraction must not be equal to zero")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    divisor = gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor


class Fraction:
    """
    Рациональное число в нормализованной форме.

    Построение:
        Fraction(5, 10)      → 1/2
        Fraction(7)          → 7   (знаменатель 1)
        Fraction(1.25)       → 5/4 (десятичное разложение float)
        Fraction(1.25, 5)    → 1/4 (разложение, затем деление на знаменатель)

    Examples:
        >>> str(Fraction(5, 10))
        '1/2'
        >>> Fraction(2, 3) ** -2
        Fraction(9, 4)
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int | float | Decimal = 0, denominator: int = 1) -> None:
        denominator = validate_integer(denominator, "denominator")

        if isinstance(numerator, float):
            numerator, scale = decompose_float(numerator)
            denominator *= scale
        elif isinstance(numerator, Decimal):
            numerator, scale = decompose_decimal(numerator)
            denominator *= scale
        else:
            numerator = validate_integer(numerator, "numerator")

        numerator, denominator = _normalize(numerator, denominator)
        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_float(cls, value: float, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> "Fraction":
        """
        Точное разложение float по десятичной записи.

        Raises:
            InvalidFormat: Для NaN/Inf
        """
        numerator, denominator = decompose_float(value, config)
        return cls(numerator, denominator)

    @classmethod
    def from_string(cls, text: str, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> "Fraction":
        """
        Разбор "N/D", "N" или десятичной записи ("1.25", "1,25" при локали с ',').

        Raises:
            InvalidFormat: Если запись не разбирается
            DivisionByZero: Если знаменатель равен нулю

        Examples:
            >>> Fraction.from_string("6/8")
            Fraction(3, 4)
            >>> Fraction.from_string("0.5")
            Fraction(1, 2)
        """
        if "/" in text:
            left, right = text.split("/", 1)
            return cls(*parse_decimal(left, config)) / cls(*parse_decimal(right, config))
        return cls(*parse_decimal(text, config))

    @classmethod
    def coerce(cls, value: "Fraction | int | float | Decimal") -> "Fraction":
        """Fraction возвращается как есть, числа конвертируются."""
        if isinstance(value, Fraction):
            return value
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return cls(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Fraction")

    # -------------------------------------------------------------------------
    # Доступ
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        """Всегда > 0."""
        return self._denominator

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Fraction is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Fraction is immutable")

    def __reduce__(self):
        return (type(self), (self._numerator, self._denominator))

    def is_integer(self) -> bool:
        return self._denominator == 1

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_double(self) -> float:
        """
        Конверсия в float.

        При знаменателе 1 конвертируется только числитель (без лишнего деления).
        Иначе корректно округлённое деление int / int. Значения вне диапазона
        float насыщаются до ±inf (знак числителя), как при приведении IEEE-754.

        Examples:
            >>> Fraction(10**400, 3).to_double()
            inf
        """
        if self._denominator == 1:
            return ieee_float(self._numerator)
        return ieee_ratio(self._numerator, self._denominator)

    def to_string(self, force_fraction_form: bool = False) -> str:
        """
        "N/D", либо "N" если знаменатель 1 и форма дроби не требуется.

        Examples:
            >>> Fraction(4, 2).to_string()
            '2'
            >>> Fraction(4, 2).to_string(True)
            '2/1'
        """
        if self._denominator != 1 or force_fraction_form:
            return f"{self._numerator}/{self._denominator}"
        return str(self._numerator)

    def __float__(self) -> float:
        return self.to_double()

    def __int__(self) -> int:
        # Усечение к нулю
        if self._numerator < 0:
            return -(-self._numerator // self._denominator)
        return self._numerator // self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    @staticmethod
    def _operand(value: object) -> "Fraction | None":
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Fraction(value)
        return None

    def _rescaled(self, other: "Fraction") -> tuple[int, int]:
        numer_a, numer_b, _ = common_denominator(
            self._numerator, self._denominator, other._numerator, other._denominator
        )
        return numer_a, numer_b

    def __eq__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return (self._numerator, self._denominator) == (operand._numerator, operand._denominator)

    def __hash__(self) -> int:
        # Совместимо с hash(int) для целых значений
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __lt__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        numer_a, numer_b = self._rescaled(operand)
        return numer_a < numer_b

    def __gt__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        numer_a, numer_b = self._rescaled(operand)
        return numer_a > numer_b

    def __le__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        numer_a, numer_b = self._rescaled(operand)
        return numer_a <= numer_b

    def __ge__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        numer_a, numer_b = self._rescaled(operand)
        return numer_a >= numer_b

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def __neg__(self) -> "Fraction":
        return Fraction(-self._numerator, self._denominator)

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        return Fraction(abs(self._numerator), self._denominator)

    def reciprocal(self) -> "Fraction":
        """
        Обратная дробь d/n.

        Raises:
            DivisionByZero: Если числитель равен нулю
        """
        return Fraction(self._denominator, self._numerator)

    def __invert__(self) -> "Fraction":
        return self.reciprocal()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Fraction":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        numer_a, numer_b, common = common_denominator(
            self._numerator, self._denominator, operand._numerator, operand._denominator
        )
        return Fraction(numer_a + numer_b, common)

    def __radd__(self, other: object) -> "Fraction":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Fraction":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        numer_a, numer_b, common = common_denominator(
            self._numerator, self._denominator, operand._numerator, operand._denominator
        )
        return Fraction(numer_a - numer_b, common)

    def __rsub__(self, other: object) -> "Fraction":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return operand.__sub__(self)

    def __mul__(self, other: object) -> "Fraction":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return Fraction(
            self._numerator * operand._numerator, self._denominator * operand._denominator
        )

    def __rmul__(self, other: object) -> "Fraction":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "Fraction":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return self * operand.reciprocal()

    def __rtruediv__(self, other: object) -> "Fraction":
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return operand * self.reciprocal()

    def __pow__(self, exponent: object) -> "Fraction":
        """
        Целая степень.

        n >= 0: числитель и знаменатель возводятся независимо (x**0 == 1).
        n < 0:  возводятся части обратной дроби в степень |n|.

        Raises:
            DivisionByZero: Для нулевой дроби в отрицательной степени
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        if exponent >= 0:
            return Fraction(self._numerator**exponent, self._denominator**exponent)
        return Fraction(self._denominator**-exponent, self._numerator**-exponent)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Fraction] = Fraction(0)
ONE: Final[Fraction] = Fraction(1)
HALF: Final[Fraction] = Fraction(1, 2)
