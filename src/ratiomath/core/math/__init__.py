"""
Core math modules для ratiomath

Точная рациональная арифметика и численные примитивы.
"""

# Numerical Safeguards
from ratiomath.core.math.numerical_safeguards import (
    DECIMAL_BASE,
    # Integer primitives
    common_denominator,
    decimal_denominator,
    gcd,
    validate_integer,
    # IEEE-754 float primitives
    ieee_divide,
    ieee_float,
    ieee_pow,
    ieee_ratio,
    is_valid_float,
)

# Decimal Text
from ratiomath.core.math.decimal_text import (
    decompose_decimal,
    decompose_float,
    float_to_text,
    normalize_separator,
    parse_decimal,
    split_decimal_text,
)

# Fraction
from ratiomath.core.math.fraction import HALF, ONE, ZERO, Fraction

__all__ = [
    # Numerical Safeguards: Constants
    "DECIMAL_BASE",
    # Numerical Safeguards: Integer primitives
    "common_denominator",
    "decimal_denominator",
    "gcd",
    "validate_integer",
    # Numerical Safeguards: IEEE-754 float primitives
    "ieee_divide",
    "ieee_float",
    "ieee_pow",
    "ieee_ratio",
    "is_valid_float",
    # Decimal Text
    "decompose_decimal",
    "decompose_float",
    "float_to_text",
    "normalize_separator",
    "parse_decimal",
    "split_decimal_text",
    # Fraction
    "Fraction",
    "ZERO",
    "ONE",
    "HALF",
]
