"""
Decimal Text — Разложение десятичной записи в числитель/знаменатель

Алгоритм (пример: 1.25):
    текст          = "1.25"
    числитель      = 125        (цифры без разделителя)
    знаменатель    = 10**2      (число знаков после разделителя)
    после Fraction = 5/4        (сокращение по GCD)

Разделитель активной локали (например, ',' в de_DE) нормализуется к '.'
перед разбором, поэтому "1,25" и "1.25" эквивалентны при такой локали.

Float раскладывается через кратчайшую round-trip запись (repr), развёрнутую
в позиционную форму: 1e-05 → "0.00001" → 1/100000.
"""

import logging
import re
from decimal import Decimal

from ratiomath.core.config import DEFAULT_DECIMAL_SEPARATOR, DEFAULT_FORMAT_CONFIG, FormatConfig
from ratiomath.core.errors import InvalidFormat
from ratiomath.core.math.numerical_safeguards import decimal_denominator, is_valid_float

LOG = logging.getLogger(__name__)

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# ТЕКСТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def float_to_text(value: float) -> str:
    """
    Позиционная десятичная запись float без экспоненты.

    Raises:
        InvalidFormat: Для NaN/Inf (нет конечной десятичной записи)

    Examples:
        >>> float_to_text(1.25)
        '1.25'
        >>> float_to_text(1e-05)
        '0.00001'
        >>> float_to_text(1e22)
        '10000000000000000000000'
    """
    if not is_valid_float(value):
        raise InvalidFormat(repr(value), "not a finite number")
    return format(Decimal(repr(value)), "f")


def decimal_to_text(value: Decimal) -> str:
    """Позиционная запись Decimal (без потери знаков)."""
    if not value.is_finite():
        raise InvalidFormat(str(value), "not a finite number")
    return format(value, "f")


def normalize_separator(text: str, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    """
    Замена разделителя локали/конфигурации на '.'.

    Examples:
        >>> normalize_separator("1,25", FormatConfig(decimal_separator=","))
        '1.25'
    """
    separator = config.effective_separator()
    if separator == DEFAULT_DECIMAL_SEPARATOR:
        return text
    return text.replace(separator, DEFAULT_DECIMAL_SEPARATOR)


# =============================================================================
# РАЗБОР
# =============================================================================


def split_decimal_text(text: str) -> tuple[int, int]:
    """
    Разбор нормализованной десятичной записи ('.' как разделитель).

    Returns:
        (numerator, denominator) — НЕ сокращённые: "1.50" → (150, 100)

    Raises:
        InvalidFormat: Если после удаления разделителя остаётся не целое
    """
    stripped = text.strip()
    separator_idx = stripped.find(DEFAULT_DECIMAL_SEPARATOR)

    fractional_digits = 0
    digits = stripped
    if separator_idx >= 0:
        fractional_digits = len(stripped) - 1 - separator_idx
        digits = stripped.replace(DEFAULT_DECIMAL_SEPARATOR, "", 1)

    if not _INTEGER_TEXT.fullmatch(digits):
        raise InvalidFormat(text)

    return int(digits), decimal_denominator(fractional_digits)


def parse_decimal(text: str, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> tuple[int, int]:
    """
    Разбор десятичной записи с разделителем локали или '.'.

    Examples:
        >>> parse_decimal("1.25")
        (125, 100)
        >>> parse_decimal("-3")
        (-3, 1)
    """
    return split_decimal_text(normalize_separator(text, config))


def decompose_float(value: float, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> tuple[int, int]:
    """
    Точное разложение конечного float по его десятичной записи.

    Raises:
        InvalidFormat: Для NaN/Inf
    """
    numerator, denominator = parse_decimal(float_to_text(value), config)
    LOG.debug("decomposed float %r into %d/%d", value, numerator, denominator)
    return numerator, denominator


def decompose_decimal(value: Decimal) -> tuple[int, int]:
    """Точное разложение Decimal (все значащие знаки сохраняются)."""
    return split_decimal_text(decimal_to_text(value))
