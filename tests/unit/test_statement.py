"""Unit tests for call specifications and call text generation."""

from typing import Any

import pytest

from sqlcall.exceptions import ImproperConfigurationError, UnsupportedParameterError
from sqlcall.parameters import BindParameter
from sqlcall.statement import CallSpec, build_call_text, render_boolean_literal
from sqlcall.typing import Direction, TypeCode


def test_function_call_text() -> None:
    spec = CallSpec("PKG.FUNC", {"P1": BindParameter.in_(TypeCode.VARCHAR, "x")}, TypeCode.NUMERIC)
    assert build_call_text(spec) == "begin ? := PKG.FUNC(P1 => ?); end;"
    assert spec.is_function
    assert spec.slot_count == 2


def test_procedure_call_text_with_out_parameter() -> None:
    spec = CallSpec("PROC", {"RESULT": BindParameter.out(TypeCode.NUMERIC)})
    assert build_call_text(spec) == "begin PROC(RESULT => ?); end;"
    assert not spec.is_function
    assert spec.slot_count == 1


def test_empty_parameter_set() -> None:
    assert build_call_text(CallSpec("PROC")) == "begin PROC(); end;"
    assert build_call_text(CallSpec("PKG.FUNC", {}, TypeCode.VARCHAR)) == "begin ? := PKG.FUNC(); end;"


@pytest.mark.parametrize(("value", "literal"), [(True, "TRUE"), (False, "FALSE"), (None, "NULL")])
def test_in_boolean_is_inlined(value: Any, literal: str) -> None:
    spec = CallSpec("PROC", {"FLAG": BindParameter.in_(TypeCode.BOOLEAN, value)})
    assert build_call_text(spec) == f"begin PROC(FLAG => {literal}); end;"
    assert spec.slot_count == 0


def test_render_boolean_literal_only_true_is_true() -> None:
    assert render_boolean_literal(True) == "TRUE"
    assert render_boolean_literal(1) == "FALSE"
    assert render_boolean_literal("TRUE") == "FALSE"
    assert render_boolean_literal(None) == "NULL"


def test_fragments_follow_insertion_order() -> None:
    spec = CallSpec(
        "SCHEMA.PKG.PROC",
        {
            "B": BindParameter.in_(TypeCode.NUMERIC, 1),
            "A": BindParameter.in_(TypeCode.BOOLEAN, False),
            "C": BindParameter.inout(TypeCode.VARCHAR, "c"),
        },
    )
    assert [name for name, _ in spec.parameters] == ["B", "A", "C"]
    assert build_call_text(spec) == "begin SCHEMA.PKG.PROC(B => ?,A => FALSE,C => ?); end;"


@pytest.mark.parametrize(
    "parameters",
    [
        {},
        {"A": BindParameter.in_(TypeCode.VARCHAR, "a")},
        {"A": BindParameter.in_(TypeCode.VARCHAR, "a"), "B": BindParameter.out(TypeCode.NUMERIC)},
        {
            "A": BindParameter.inout(TypeCode.DATE, None),
            "B": BindParameter.out(TypeCode.CLOB),
            "C": BindParameter.in_(TypeCode.OTHER, object()),
        },
    ],
)
@pytest.mark.parametrize("return_type", [TypeCode.NULL, TypeCode.NUMERIC])
def test_placeholder_count_matches_parameters_without_booleans(
    parameters: "dict[str, BindParameter]", return_type: TypeCode
) -> None:
    spec = CallSpec("PROC", parameters, return_type)
    expected = len(parameters) + (1 if return_type is not TypeCode.NULL else 0)
    assert build_call_text(spec).count("?") == expected
    assert spec.slot_count == expected


@pytest.mark.parametrize("direction", [Direction.OUT, Direction.INOUT])
def test_output_boolean_is_rejected(direction: Direction) -> None:
    with pytest.raises(UnsupportedParameterError) as exc_info:
        CallSpec("PROC", {"FLAG": BindParameter(direction, TypeCode.BOOLEAN, True)})
    assert exc_info.value.parameter_name == "FLAG"
    assert isinstance(exc_info.value, ImproperConfigurationError)


@pytest.mark.parametrize("procedure_name", ["", None])
def test_empty_procedure_name_is_rejected(procedure_name: Any) -> None:
    with pytest.raises(ImproperConfigurationError, match="procedure_name is None or empty"):
        CallSpec(procedure_name)


@pytest.mark.parametrize(
    "procedure_name",
    ["PROC", "pkg.func", "SCHEMA.PKG.FUNC", "PKG.FUNC@REMOTE", "PKG.FUNC@REMOTE.EXAMPLE.COM", '"My Pkg".F$1#'],
)
def test_valid_procedure_names(procedure_name: str) -> None:
    assert CallSpec(procedure_name).procedure_name == procedure_name


@pytest.mark.parametrize(
    "procedure_name",
    ["PROC; DROP TABLE T", "PROC()", "1PROC", "A.B.C.D", "PKG.", "P?", "PROC --"],
)
def test_invalid_procedure_names(procedure_name: str) -> None:
    with pytest.raises(ImproperConfigurationError, match="Invalid procedure_name"):
        CallSpec(procedure_name)


def test_identifier_validation_can_be_disabled() -> None:
    spec = CallSpec("my-proc", {"bad name": BindParameter.in_(TypeCode.VARCHAR, "x")}, validate_identifiers=False)
    assert build_call_text(spec) == "begin my-proc(bad name => ?); end;"


@pytest.mark.parametrize("name", ["#RETURN#", "P 1", "1P", "P=>1", ""])
def test_invalid_parameter_names(name: str) -> None:
    with pytest.raises(ImproperConfigurationError, match="Invalid parameter name"):
        CallSpec("PROC", {name: BindParameter.in_(TypeCode.VARCHAR, "x")})


def test_parameters_must_be_bind_parameters() -> None:
    with pytest.raises(ImproperConfigurationError, match="must be a BindParameter"):
        CallSpec("PROC", {"P1": "x"})  # type: ignore[dict-item]


def test_parameters_must_be_a_mapping() -> None:
    with pytest.raises(ImproperConfigurationError, match="must be a mapping"):
        CallSpec("PROC", [("P1", BindParameter.in_(TypeCode.VARCHAR, "x"))])  # type: ignore[arg-type]


def test_call_spec_is_read_only() -> None:
    spec = CallSpec("PROC")
    with pytest.raises(AttributeError):
        spec.procedure_name = "OTHER"  # type: ignore[misc]
    assert "procedure_name='PROC'" in repr(spec)


def test_unknown_return_type_is_rejected() -> None:
    with pytest.raises(ImproperConfigurationError, match="Unknown type code 3"):
        CallSpec("F", None, 3)  # type: ignore[arg-type]
