"""
Numerical Safeguards — Integer & IEEE-754 Primitives

Модуль содержит два класса примитивов:
- Целочисленные (произвольная точность): gcd, общий знаменатель, проверка типов.
  Используются Fraction для нормализации и арифметики без потери точности.
- Float (IEEE-754): деление и возведение в степень, которые НЕ поднимают
  исключения, а возвращают ±inf/NaN, как это делает аппаратная арифметика.
  Используются слоем выражений, где точность уже потеряна сознательно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленные операции никогда не переполняются (Python int)
2. Общий знаменатель всегда положительный при положительных входах
3. Float-хелперы никогда не поднимают ZeroDivisionError/ValueError/OverflowError
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание для знаменателя десятичной записи (1.25 → 125 / 10**2)
DECIMAL_BASE: Final[int] = 10


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def validate_integer(value: object, name: str) -> int:
    """
    Валидация, что значение — целое произвольной точности.

    bool формально является int, но как компонент дроби не допускается.

    Raises:
        TypeError: Если value не int (или является bool)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (всегда >= 0).

    gcd(0, d) == abs(d), поэтому нулевой числитель нормализуется в 0/1.

    Examples:
        >>> gcd(10, 5)
        5
        >>> gcd(0, 7)
        7
        >>> gcd(-4, 6)
        2
    """
    return math.gcd(a, b)


def common_denominator(
    numerator_a: int,
    denominator_a: int,
    numerator_b: int,
    denominator_b: int,
) -> tuple[int, int, int]:
    """
    Приведение двух дробей к наименьшему общему знаменателю.

    g = gcd(den_a, den_b)
    common = (den_a / g) * den_b  (= lcm(den_a, den_b))
    num_a' = num_a * (den_b / g)
    num_b' = num_b * (den_a / g)

    Args:
        numerator_a, denominator_a: Первая дробь (denominator_a > 0)
        numerator_b, denominator_b: Вторая дробь (denominator_b > 0)

    Returns:
        (rescaled_numerator_a, rescaled_numerator_b, common_denominator)

    Examples:
        >>> common_denominator(1, 4, 1, 6)
        (3, 2, 12)
        >>> common_denominator(1, 2, 1, 2)
        (1, 1, 2)
    """
    denom_gcd = gcd(denominator_a, denominator_b)
    mult_a = denominator_b // denom_gcd
    mult_b = denominator_a // denom_gcd
    return numerator_a * mult_a, numerator_b * mult_b, mult_b * denominator_b


def decimal_denominator(fractional_digits: int) -> int:
    """Знаменатель 10**k для десятичной записи с k знаками после разделителя."""
    if fractional_digits < 0:
        raise ValueError(f"fractional_digits must be non-negative, got {fractional_digits}")
    return DECIMAL_BASE**fractional_digits


# =============================================================================
# IEEE-754 FLOAT ПРИМИТИВЫ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def _is_odd_integer(value: float) -> bool:
    return is_valid_float(value) and value == math.floor(value) and math.fmod(value, 2.0) != 0.0


def _signed_inf(sign_source: int) -> float:
    # math.copysign сам конвертирует аргумент во float и переполняется
    return math.inf if sign_source > 0 else -math.inf


def ieee_float(value: int) -> float:
    """
    Конверсия int во float с насыщением до ±inf.

    float(int) в Python поднимает OverflowError за пределами диапазона
    float; здесь, как при приведении в IEEE-754, результат равен ±inf.

    Examples:
        >>> ieee_float(3)
        3.0
        >>> ieee_float(10**400)
        inf
        >>> ieee_float(-(10**400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return _signed_inf(value)


def ieee_ratio(numerator: int, denominator: int) -> float:
    """
    Корректно округлённое int / int с насыщением до ±inf.

    Знаменатель ненулевой (ноль отсекается раньше, при построении дроби).

    Examples:
        >>> ieee_ratio(1, 4)
        0.25
        >>> ieee_ratio(-(10**400), 3)
        -inf
        >>> ieee_ratio(1, 10**400)
        0.0
    """
    try:
        return numerator / denominator
    except OverflowError:
        return _signed_inf(numerator) if denominator > 0 else -_signed_inf(numerator)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление float с семантикой IEEE-754.

    В отличие от оператора `/` в Python, деление на ноль не поднимает
    ZeroDivisionError:
    - x / ±0 → ±inf (знак = sign(x) * sign(0))
    - 0 / 0 → NaN
    - NaN / 0 → NaN

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def ieee_pow(base: float, exponent: float) -> float:
    """
    Возведение float в степень с семантикой C pow().

    math.pow поднимает исключения там, где IEEE-754 возвращает значение:
    - отрицательное основание и дробная степень → NaN (ValueError в math.pow)
    - 0 в отрицательной степени → +inf (или -0 ** нечётная → -inf)
    - переполнение → ±inf (OverflowError в math.pow)

    Examples:
        >>> ieee_pow(9.0, 0.5)
        3.0
        >>> ieee_pow(-8.0, 0.5)
        nan
        >>> ieee_pow(0.0, -1.0)
        inf
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
