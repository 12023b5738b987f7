"""
ratiomath — точная рациональная арифметика, геометрия и деревья выражений.

Слои (снизу вверх):
- core: Fraction, ошибки, конфигурация, JSON Schema контракты
- geometry: Vector, Point
- expression: Literal, Sum, Product, Exponent, FractionOf, SquareRoot, Negation
"""

from ratiomath.core.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from ratiomath.core.errors import (
    DimensionMismatch,
    DivisionByZero,
    InvalidFormat,
    RatioMathError,
    UnsupportedLiteralType,
)
from ratiomath.core.math.fraction import Fraction
from ratiomath.expression import (
    Exponent,
    Expression,
    FractionOf,
    Literal,
    Negation,
    Product,
    SquareRoot,
    Sum,
)
from ratiomath.geometry import Point, Vector

__version__ = "0.1.0"

__all__ = [
    # Config
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    # Errors
    "RatioMathError",
    "DivisionByZero",
    "InvalidFormat",
    "DimensionMismatch",
    "UnsupportedLiteralType",
    # Core
    "Fraction",
    # Geometry
    "Vector",
    "Point",
    # Expression
    "Expression",
    "Literal",
    "Sum",
    "Product",
    "Exponent",
    "FractionOf",
    "SquareRoot",
    "Negation",
]
