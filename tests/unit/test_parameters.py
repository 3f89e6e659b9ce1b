"""Unit tests for bind parameters and value-only coercion."""

import datetime
from decimal import Decimal
from typing import Any

import pytest

from sqlcall.exceptions import ImproperConfigurationError
from sqlcall.parameters import BindParameter, coerce_parameters, infer_type_code, is_inline_literal, occupies_slot
from sqlcall.typing import Direction, TypeCode


def test_bind_parameter_defaults_missing_direction_to_in() -> None:
    parameter = BindParameter(None, TypeCode.VARCHAR, "x")
    assert parameter.direction is Direction.IN
    assert parameter.type_code is TypeCode.VARCHAR
    assert parameter.value == "x"


def test_bind_parameter_normalizes_raw_codes() -> None:
    parameter = BindParameter("inout", 2, 5)  # type: ignore[arg-type]
    assert parameter.direction is Direction.INOUT
    assert parameter.type_code is TypeCode.NUMERIC


def test_bind_parameter_is_immutable() -> None:
    parameter = BindParameter(Direction.IN, TypeCode.VARCHAR, "x")
    with pytest.raises(AttributeError):
        parameter.value = "y"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        del parameter.value  # type: ignore[misc]
    assert parameter.value == "x"


def test_bind_parameter_equality_and_hash() -> None:
    first = BindParameter(Direction.OUT, TypeCode.NUMERIC)
    second = BindParameter.out(TypeCode.NUMERIC)
    assert first == second
    assert hash(first) == hash(second)
    assert first != BindParameter.inout(TypeCode.NUMERIC, None)
    assert hash(BindParameter.in_(TypeCode.OTHER, [1, 2])) == hash(BindParameter.in_(TypeCode.OTHER, [1, 2]))


def test_bind_parameter_repr() -> None:
    assert repr(BindParameter.in_(TypeCode.VARCHAR, "x")) == (
        "BindParameter(direction=<Direction.IN: 'in'>, type_code=<TypeCode.VARCHAR: 12>, value='x')"
    )


def test_slot_predicates() -> None:
    assert occupies_slot(BindParameter.in_(TypeCode.VARCHAR, "x"))
    assert occupies_slot(BindParameter.out(TypeCode.NUMERIC))
    assert not occupies_slot(BindParameter.in_(TypeCode.BOOLEAN, True))
    assert is_inline_literal(BindParameter.in_(TypeCode.BOOLEAN, None))
    assert not is_inline_literal(BindParameter.in_(TypeCode.VARCHAR, "x"))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("text", TypeCode.VARCHAR),
        ("", TypeCode.VARCHAR),
        (1, TypeCode.NUMERIC),
        (1.5, TypeCode.NUMERIC),
        (Decimal("3.14"), TypeCode.NUMERIC),
        (True, TypeCode.BOOLEAN),
        (False, TypeCode.BOOLEAN),
        (datetime.date(2024, 1, 31), TypeCode.DATE),
        (datetime.datetime(2024, 1, 31, 12, 30), TypeCode.TIMESTAMP),
        (b"bytes", TypeCode.OTHER),
        ([1, 2], TypeCode.OTHER),
        (object(), TypeCode.OTHER),
    ],
)
def test_infer_type_code(value: Any, expected: TypeCode) -> None:
    assert infer_type_code(value) is expected


def test_coerce_parameters_builds_in_parameters_in_order() -> None:
    coerced = coerce_parameters({"NAME": "x", "COUNT": 3, "FLAG": True, "DAY": datetime.date(2024, 1, 1)})

    assert list(coerced) == ["NAME", "COUNT", "FLAG", "DAY"]
    assert all(parameter.direction is Direction.IN for parameter in coerced.values())
    assert coerced["NAME"] == BindParameter.in_(TypeCode.VARCHAR, "x")
    assert coerced["COUNT"] == BindParameter.in_(TypeCode.NUMERIC, 3)
    assert coerced["FLAG"] == BindParameter.in_(TypeCode.BOOLEAN, True)
    assert coerced["DAY"] == BindParameter.in_(TypeCode.DATE, datetime.date(2024, 1, 1))


def test_coerce_parameters_absent_value_becomes_empty_other() -> None:
    coerced = coerce_parameters({"MISSING": None})
    assert coerced["MISSING"] == BindParameter.in_(TypeCode.OTHER, "")


@pytest.mark.parametrize("values", [None, {}])
def test_coerce_parameters_empty(values: Any) -> None:
    assert coerce_parameters(values) == {}


@pytest.mark.parametrize(("direction", "type_code"), [("IN", TypeCode.VARCHAR), (Direction.IN, 3), ("in", "VARCHAR")])
def test_bind_parameter_rejects_unknown_codes(direction: Any, type_code: Any) -> None:
    with pytest.raises(ImproperConfigurationError, match="Unknown"):
        BindParameter(direction, type_code, "x")
