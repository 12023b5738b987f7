"""
Contract Validation Module

JSON Schema контракты для обмена Fraction/Vector/Point/Expression
в виде JSON-совместимых словарей.
"""

from .validators import (
    SCHEMA_NAMES,
    SchemaLoader,
    get_validator,
    validate_expression_payload,
    validate_fraction_payload,
    validate_payload,
    validate_point_payload,
    validate_vector_payload,
)

__all__ = [
    # Constants
    "SCHEMA_NAMES",
    # Classes
    "SchemaLoader",
    # Functions
    "get_validator",
    "validate_payload",
    "validate_fraction_payload",
    "validate_vector_payload",
    "validate_point_payload",
    "validate_expression_payload",
]
