"""
Expression Nodes — Дерево отложенных вычислений

Замкнутый набор узлов:
    Literal | Sum | Product | Exponent | FractionOf | SquareRoot | Negation

Каждый узел — immutable Pydantic модель (frozen=True), которая умеет:
- to_double(): вычисление в float (семантика IEEE-754: inf/NaN пропагируют)
- to_string(): читаемая запись

Формат записи:
    Sum        → "(a) + (b) + ..."
    Product    → "(a) * (b) * ..."
    Exponent   → "(base)^(exponent)"
    FractionOf → "(numerator)/(denominator)"
    SquareRoot → "sqrt(base)"
    Negation   → "-(inner)"

Упрощения (символьные) не выполняются: -(-x) остаётся Negation(Negation(x)).
"""

import logging
from typing import Any, ClassVar, Union

from pydantic import BaseModel, Field

from ratiomath.core.errors import UnsupportedLiteralType
from ratiomath.core.math.fraction import HALF, Fraction
from ratiomath.core.math.numerical_safeguards import ieee_divide, ieee_float, ieee_pow

LOG = logging.getLogger(__name__)

# Допустимые типы значения Literal (bool исключается отдельно)
LITERAL_TYPES: tuple[type, ...] = (int, float, Fraction)


def _is_literal_value(value: object) -> bool:
    return isinstance(value, LITERAL_TYPES) and not isinstance(value, bool)


def as_expression(value: "Expression | int | float | Fraction") -> "ExpressionNode":
    """
    Узел как есть; число оборачивается в Literal.

    Raises:
        UnsupportedLiteralType: Если value не узел и не допустимое число
    """
    if isinstance(value, Expression):
        return value
    return Literal(value)


def _is_operand(value: object) -> bool:
    return isinstance(value, Expression) or _is_literal_value(value)


# =============================================================================
# БАЗОВЫЙ УЗЕЛ
# =============================================================================


class Expression(BaseModel):
    """
    Базовый класс узла выражения.

    Операторы строят новые узлы, не вычисляя их:
        -e → Negation(e),  e + f → Sum(e, f),  e * f → Product(e, f),
        e / f → FractionOf(e, f),  e ** f → Exponent(e, f)
    """

    kind: ClassVar[str] = "expression"

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def to_double(self) -> float:
        raise NotImplementedError

    def to_string(self) -> str:
        raise NotImplementedError

    def __float__(self) -> float:
        return self.to_double()

    def __str__(self) -> str:
        return self.to_string()

    def __neg__(self) -> "Negation":
        return Negation(self)

    def __add__(self, other: object) -> "Sum":
        if not _is_operand(other):
            return NotImplemented
        return Sum(self, other)

    def __radd__(self, other: object) -> "Sum":
        if not _is_operand(other):
            return NotImplemented
        return Sum(other, self)

    def __mul__(self, other: object) -> "Product":
        if not _is_operand(other):
            return NotImplemented
        return Product(self, other)

    def __rmul__(self, other: object) -> "Product":
        if not _is_operand(other):
            return NotImplemented
        return Product(other, self)

    def __truediv__(self, other: object) -> "FractionOf":
        if not _is_operand(other):
            return NotImplemented
        return FractionOf(self, other)

    def __rtruediv__(self, other: object) -> "FractionOf":
        if not _is_operand(other):
            return NotImplemented
        return FractionOf(other, self)

    def __pow__(self, other: object) -> "Exponent":
        if not _is_operand(other):
            return NotImplemented
        return Exponent(self, other)

    def __rpow__(self, other: object) -> "Exponent":
        if not _is_operand(other):
            return NotImplemented
        return Exponent(other, self)


# =============================================================================
# УЗЛЫ
# =============================================================================


class Literal(Expression):
    """
    Лист дерева: int (произвольной точности), float или Fraction.

    Тип значения проверяется при построении, а не при вычислении.
    """

    kind: ClassVar[str] = "literal"

    value: Any = Field(..., description="int, float или Fraction")

    def __init__(self, value: int | float | Fraction) -> None:
        if not _is_literal_value(value):
            LOG.debug("literal rejected: %s", type(value).__name__)
            raise UnsupportedLiteralType(type(value))
        super().__init__(value=value)

    def to_double(self) -> float:
        if isinstance(self.value, Fraction):
            return self.value.to_double()
        if isinstance(self.value, float):
            return float(self.value)
        if _is_literal_value(self.value):
            # int вне диапазона float насыщается до ±inf
            return ieee_float(self.value)
        raise UnsupportedLiteralType(type(self.value))

    def to_string(self) -> str:
        if isinstance(self.value, float):
            return repr(self.value)
        return str(self.value)


class Sum(Expression):
    """Сумма членов; пустая сумма равна 0.0."""

    kind: ClassVar[str] = "sum"

    members: tuple[Expression, ...] = Field(..., description="Слагаемые")

    def __init__(self, *members: Expression | int | float | Fraction) -> None:
        super().__init__(members=tuple(as_expression(m) for m in members))

    def to_double(self) -> float:
        total = 0.0
        for member in self.members:
            total += member.to_double()
        return total

    def to_string(self) -> str:
        return " + ".join(f"({member})" for member in self.members)


class Product(Expression):
    """Произведение членов; пустое произведение равно 1.0."""

    kind: ClassVar[str] = "product"

    members: tuple[Expression, ...] = Field(..., description="Множители")

    def __init__(self, *members: Expression | int | float | Fraction) -> None:
        super().__init__(members=tuple(as_expression(m) for m in members))

    def to_double(self) -> float:
        product = 1.0
        for member in self.members:
            product *= member.to_double()
        return product

    def to_string(self) -> str:
        return " * ".join(f"({member})" for member in self.members)


class Exponent(Expression):
    """
    base ** exponent в float.

    Ошибки области определения не обрабатываются особо:
    (-8) ** 0.5 → NaN, 0 ** -1 → inf.
    """

    kind: ClassVar[str] = "exponent"

    base: Expression
    exponent: Expression

    def __init__(
        self,
        base: Expression | int | float | Fraction,
        exponent: Expression | int | float | Fraction,
    ) -> None:
        super().__init__(base=as_expression(base), exponent=as_expression(exponent))

    def to_double(self) -> float:
        return ieee_pow(self.base.to_double(), self.exponent.to_double())

    def to_string(self) -> str:
        return f"({self.base})^({self.exponent})"


class FractionOf(Expression):
    """Структурная дробь двух подвыражений; деление на 0 даёт ±inf/NaN."""

    kind: ClassVar[str] = "fraction"

    numerator: Expression
    denominator: Expression

    def __init__(
        self,
        numerator: Expression | int | float | Fraction,
        denominator: Expression | int | float | Fraction,
    ) -> None:
        super().__init__(numerator=as_expression(numerator), denominator=as_expression(denominator))

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> "FractionOf":
        return cls(Literal(fraction.numerator), Literal(fraction.denominator))

    def to_double(self) -> float:
        return ieee_divide(self.numerator.to_double(), self.denominator.to_double())

    def to_string(self) -> str:
        return f"({self.numerator})/({self.denominator})"


class SquareRoot(Expression):
    """sqrt(base), по определению равный Exponent(base, Literal(1/2))."""

    kind: ClassVar[str] = "sqrt"

    base: Expression

    def __init__(self, base: Expression | int | float | Fraction) -> None:
        super().__init__(base=as_expression(base))

    def as_exponent(self) -> Exponent:
        return Exponent(self.base, Literal(HALF))

    def to_double(self) -> float:
        return self.as_exponent().to_double()

    def to_string(self) -> str:
        return f"sqrt({self.base})"


class Negation(Expression):
    """Смена знака значения и записи; обёрнутый узел не изменяется."""

    kind: ClassVar[str] = "negation"

    inner: Expression

    def __init__(self, inner: Expression | int | float | Fraction) -> None:
        super().__init__(inner=as_expression(inner))

    def to_double(self) -> float:
        return -self.inner.to_double()

    def to_string(self) -> str:
        return f"-({self.inner})"


# Замкнутое множество конкретных узлов (см. NODE_TYPES)
ExpressionNode = Union[Literal, Sum, Product, Exponent, FractionOf, SquareRoot, Negation]

NODE_TYPES: dict[str, type[Expression]] = {
    node.kind: node for node in (Literal, Sum, Product, Exponent, FractionOf, SquareRoot, Negation)
}
