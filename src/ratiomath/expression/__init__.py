"""
Expression: дерево отложенных вычислений над числами и Fraction.
"""

from ratiomath.expression.nodes import (
    LITERAL_TYPES,
    NODE_TYPES,
    Exponent,
    Expression,
    ExpressionNode,
    FractionOf,
    Literal,
    Negation,
    Product,
    SquareRoot,
    Sum,
    as_expression,
)

__all__ = [
    # Base
    "Expression",
    "ExpressionNode",
    "as_expression",
    # Nodes
    "Literal",
    "Sum",
    "Product",
    "Exponent",
    "FractionOf",
    "SquareRoot",
    "Negation",
    # Registry
    "LITERAL_TYPES",
    "NODE_TYPES",
]
