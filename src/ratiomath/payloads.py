"""
Payloads — Конверсия значений в JSON-совместимые словари и обратно

*_to_payload: значение → dict (соответствует схеме контракта)
*_from_payload: dict → значение; payload валидируется против схемы ДО построения

Целые числа хранятся как JSON integer (произвольной длины для Python json).
"""

from typing import Any, Dict

from ratiomath.core.contracts.validators import (
    validate_expression_payload,
    validate_fraction_payload,
    validate_point_payload,
    validate_vector_payload,
)
from ratiomath.core.math.fraction import Fraction
from ratiomath.expression.nodes import (
    Exponent,
    Expression,
    ExpressionNode,
    FractionOf,
    Literal,
    Negation,
    Product,
    SquareRoot,
    Sum,
)
from ratiomath.geometry.point import Point
from ratiomath.geometry.vector import Vector


# =============================================================================
# FRACTION
# =============================================================================


def fraction_to_payload(fraction: Fraction) -> Dict[str, Any]:
    return {"numerator": fraction.numerator, "denominator": fraction.denominator}


def _fraction(data: Dict[str, Any]) -> Fraction:
    # jsonschema считает 2.0 целым, Fraction нет
    return Fraction(int(data["numerator"]), int(data["denominator"]))


def fraction_from_payload(data: Dict[str, Any]) -> Fraction:
    """
    Raises:
        ValidationError: Если payload не соответствует схеме fraction
    """
    validate_fraction_payload(data)
    return _fraction(data)


# =============================================================================
# GEOMETRY
# =============================================================================


def vector_to_payload(vector: Vector) -> Dict[str, Any]:
    return {"dimensions": [fraction_to_payload(x) for x in vector.dimensions]}


def vector_from_payload(data: Dict[str, Any]) -> Vector:
    validate_vector_payload(data)
    return Vector.from_iterable(_fraction(x) for x in data["dimensions"])


def point_to_payload(point: Point) -> Dict[str, Any]:
    return {"coordinates": [fraction_to_payload(x) for x in point.coordinates]}


def point_from_payload(data: Dict[str, Any]) -> Point:
    validate_point_payload(data)
    return Point.from_iterable(_fraction(x) for x in data["coordinates"])


# =============================================================================
# EXPRESSION
# =============================================================================


def expression_to_payload(node: Expression) -> Dict[str, Any]:
    """
    Рекурсивная сериализация дерева выражения.

    Raises:
        TypeError: Для узла вне замкнутого набора
    """
    if isinstance(node, Literal):
        value = node.value
        if isinstance(value, Fraction):
            value = fraction_to_payload(value)
        return {"kind": node.kind, "value": value}
    if isinstance(node, (Sum, Product)):
        return {"kind": node.kind, "members": [expression_to_payload(m) for m in node.members]}
    if isinstance(node, Exponent):
        return {
            "kind": node.kind,
            "base": expression_to_payload(node.base),
            "exponent": expression_to_payload(node.exponent),
        }
    if isinstance(node, FractionOf):
        return {
            "kind": node.kind,
            "numerator": expression_to_payload(node.numerator),
            "denominator": expression_to_payload(node.denominator),
        }
    if isinstance(node, SquareRoot):
        return {"kind": node.kind, "base": expression_to_payload(node.base)}
    if isinstance(node, Negation):
        return {"kind": node.kind, "inner": expression_to_payload(node.inner)}
    raise TypeError(f"Unsupported expression node {type(node).__name__}")


def _expression(data: Dict[str, Any]) -> ExpressionNode:
    kind = data["kind"]
    if kind == Literal.kind:
        value = data["value"]
        if isinstance(value, dict):
            value = _fraction(value)
        return Literal(value)
    if kind == Sum.kind:
        return Sum(*(_expression(m) for m in data["members"]))
    if kind == Product.kind:
        return Product(*(_expression(m) for m in data["members"]))
    if kind == Exponent.kind:
        return Exponent(_expression(data["base"]), _expression(data["exponent"]))
    if kind == FractionOf.kind:
        return FractionOf(_expression(data["numerator"]), _expression(data["denominator"]))
    if kind == SquareRoot.kind:
        return SquareRoot(_expression(data["base"]))
    return Negation(_expression(data["inner"]))


def expression_from_payload(data: Dict[str, Any]) -> ExpressionNode:
    """
    Raises:
        ValidationError: Если payload не соответствует схеме expression
    """
    validate_expression_payload(data)
    return _expression(data)
