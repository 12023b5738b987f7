"""
Tests for JSON Schema Contract Validators and payload conversion

Комплексное тестирование JSON Schema контрактов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Построение значений из payload (с предварительной валидацией)
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from ratiomath.core.contracts import (
    SCHEMA_NAMES,
    SchemaLoader,
    get_validator,
    validate_payload,
    validate_expression_payload,
    validate_fraction_payload,
    validate_point_payload,
    validate_vector_payload,
)
from ratiomath.core.math.fraction import Fraction
from ratiomath.expression import Exponent, FractionOf, Literal, Negation, Product, SquareRoot, Sum
from ratiomath.geometry import Point, Vector
from ratiomath.payloads import (
    expression_from_payload,
    expression_to_payload,
    fraction_from_payload,
    fraction_to_payload,
    point_from_payload,
    point_to_payload,
    vector_from_payload,
    vector_to_payload,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_expression() -> dict:
    """Валидный expression payload с узлами всех видов."""
    return {
        "kind": "sum",
        "members": [
            {"kind": "literal", "value": 1},
            {"kind": "literal", "value": 2.5},
            {"kind": "literal", "value": {"numerator": 1, "denominator": 3}},
            {
                "kind": "product",
                "members": [
                    {
                        "kind": "exponent",
                        "base": {"kind": "literal", "value": 2},
                        "exponent": {"kind": "literal", "value": 3},
                    },
                    {"kind": "sqrt", "base": {"kind": "literal", "value": 9}},
                ],
            },
            {
                "kind": "negation",
                "inner": {
                    "kind": "fraction",
                    "numerator": {"kind": "literal", "value": 1},
                    "denominator": {"kind": "literal", "value": 4},
                },
            },
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("name", SCHEMA_NAMES)
    def test_schemas_are_valid(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        Draft202012Validator.check_schema(schema)

    def test_cache(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("fraction") is loader.load_schema("fraction")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


class TestValidatorRegistry:
    """Кэш validator-ов по имени схемы"""

    @pytest.mark.parametrize("name", SCHEMA_NAMES)
    def test_built_once_per_schema(self, name: str) -> None:
        validator = get_validator(name)
        assert isinstance(validator, Draft202012Validator)
        assert get_validator(name) is validator

    def test_validators_are_distinct(self) -> None:
        assert get_validator("vector") is not get_validator("point")

    def test_unknown_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            get_validator("does_not_exist")
        with pytest.raises(FileNotFoundError):
            validate_payload("does_not_exist", {})

    def test_repeated_tree_validation_reuses_validator(self, valid_expression: dict) -> None:
        validator = get_validator("expression")
        for _ in range(3):
            expression_from_payload(valid_expression)
        assert get_validator("expression") is validator


# =============================================================================
# VALIDATORS
# =============================================================================


class TestFractionContract:
    """fraction контракт"""

    def test_valid(self) -> None:
        validate_fraction_payload({"numerator": -3, "denominator": 4})
        validate_fraction_payload({"numerator": 10**40, "denominator": 1})

    @pytest.mark.parametrize(
        "payload",
        [
            {"numerator": 1},
            {"numerator": 1, "denominator": 0},
            {"numerator": "1", "denominator": 2},
            {"numerator": 1.5, "denominator": 2},
            {"numerator": True, "denominator": 2},
            {"numerator": 1, "denominator": 2, "extra": 0},
        ],
    )
    def test_invalid(self, payload: dict) -> None:
        with pytest.raises(ValidationError):
            validate_fraction_payload(payload)

    def test_is_valid_and_iter_errors(self) -> None:
        validator = get_validator("fraction")
        assert validator.is_valid({"numerator": 1, "denominator": 2})
        assert not validator.is_valid({"numerator": 1, "denominator": 0})
        errors = list(validator.iter_errors({"denominator": 0}))
        assert len(errors) == 2


class TestGeometryContracts:
    """vector / point контракты"""

    def test_valid(self) -> None:
        validate_vector_payload({"dimensions": [{"numerator": 1, "denominator": 2}]})
        validate_point_payload({"coordinates": []})
        validate_payload("vector", {"dimensions": []})

    def test_invalid_component(self) -> None:
        with pytest.raises(ValidationError):
            validate_vector_payload({"dimensions": [1, 2]})

    def test_wrong_field_name(self) -> None:
        with pytest.raises(ValidationError):
            validate_point_payload({"dimensions": []})


class TestExpressionContract:
    """expression контракт (рекурсивный)"""

    def test_valid(self, valid_expression: dict) -> None:
        validate_expression_payload(valid_expression)
        assert get_validator("expression").is_valid(valid_expression)

    @pytest.mark.parametrize(
        "payload",
        [
            {"kind": "unknown"},
            {"kind": "literal", "value": "3"},
            {"kind": "literal", "value": True},
            {"kind": "literal"},
            {"kind": "sum", "members": {"kind": "literal", "value": 1}},
            {"kind": "exponent", "base": {"kind": "literal", "value": 1}},
            {"kind": "sqrt", "base": {"kind": "literal", "value": 1}, "extra": 1},
            {"kind": "negation", "inner": {"kind": "literal", "value": {"numerator": 1, "denominator": 0}}},
        ],
    )
    def test_invalid(self, payload: dict) -> None:
        with pytest.raises(ValidationError):
            validate_expression_payload(payload)

    def test_invalid_nested_node(self, valid_expression: dict) -> None:
        valid_expression["members"][3]["members"][1]["base"] = {"kind": "sqrt"}
        with pytest.raises(ValidationError):
            validate_expression_payload(valid_expression)


# =============================================================================
# PAYLOADS
# =============================================================================


class TestPayloads:
    """Конверсия значений в payload и обратно"""

    def test_fraction(self) -> None:
        assert fraction_to_payload(Fraction(-6, 8)) == {"numerator": -3, "denominator": 4}
        assert fraction_from_payload({"numerator": 2, "denominator": 4}) == Fraction(1, 2)

    def test_fraction_integral_float_accepted(self) -> None:
        """JSON Schema считает 2.0 целым; payload приводится к int"""
        assert fraction_from_payload({"numerator": 2.0, "denominator": 4}) == Fraction(1, 2)

    def test_fraction_invalid_payload_rejected_before_construction(self) -> None:
        with pytest.raises(ValidationError):
            fraction_from_payload({"numerator": 1, "denominator": 0})

    def test_vector_and_point(self) -> None:
        v = Vector(Fraction(1, 3), -2)
        assert vector_to_payload(v) == {
            "dimensions": [
                {"numerator": 1, "denominator": 3},
                {"numerator": -2, "denominator": 1},
            ]
        }
        assert vector_from_payload(vector_to_payload(v)) == v
        p = Point(5, Fraction(7, 2))
        assert point_from_payload(point_to_payload(p)) == p

    def test_expression_from_payload(self, valid_expression: dict) -> None:
        expr = expression_from_payload(valid_expression)
        assert expr == Sum(
            Literal(1),
            Literal(2.5),
            Literal(Fraction(1, 3)),
            Product(Exponent(2, 3), SquareRoot(9)),
            Negation(FractionOf(1, 4)),
        )
        assert expression_to_payload(expr) == valid_expression

    def test_expression_payload_is_json_serializable(self, valid_expression: dict) -> None:
        expr = expression_from_payload(valid_expression)
        text = json.dumps(expression_to_payload(expr))
        assert expression_from_payload(json.loads(text)) == expr

    def test_big_integers_survive_json(self) -> None:
        f = Fraction(10**40 + 1, 3)
        payload = json.loads(json.dumps(fraction_to_payload(f)))
        assert fraction_from_payload(payload) == f
