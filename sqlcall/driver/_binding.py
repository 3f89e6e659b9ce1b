"""Positional binding and read-back for prepared calls.

Both functions walk the same ordered parameters as
:func:`sqlcall.statement.build_call_text`. A function's return value always occupies
slot 1 and parameters start at slot 2; procedures start at slot 1.
"""

from typing import TYPE_CHECKING, Any

from sqlcall.parameters import occupies_slot
from sqlcall.typing import RETURN_KEY, TypeCode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlcall.parameters import BindParameter
    from sqlcall.protocols import CallableStatementProtocol

__all__ = ("bind_parameters", "extract_results", "first_parameter_index")


def first_parameter_index(return_type: TypeCode) -> int:
    """Index of the first parameter slot for a call with ``return_type``."""
    return 1 if return_type is TypeCode.NULL else 2


def bind_parameters(
    statement: "CallableStatementProtocol",
    parameters: "Sequence[tuple[str, BindParameter]]",
    return_type: TypeCode,
) -> int:
    """Bind inputs and register outputs on a prepared call.

    Args:
        statement: The prepared call object.
        parameters: Parameters in their fixed traversal order.
        return_type: Function return type, or ``TypeCode.NULL`` for a procedure.

    Returns:
        Number of positional slots used, including the return slot.
    """
    if return_type is not TypeCode.NULL:
        statement.register_out_parameter(1, return_type)
    index = first_parameter_index(return_type)
    for _, parameter in parameters:
        if not occupies_slot(parameter):
            continue
        if parameter.direction.is_input:
            statement.set_object(index, parameter.value, parameter.type_code)
        if parameter.direction.is_output:
            statement.register_out_parameter(index, parameter.type_code)
        index += 1
    return index - 1


def extract_results(
    statement: "CallableStatementProtocol",
    parameters: "Sequence[tuple[str, BindParameter]]",
    return_type: TypeCode,
    return_key: str = RETURN_KEY,
) -> "dict[str, Any]":
    """Collect the return value and OUT/INOUT values of an executed call.

    Every parameter that occupies a slot advances the read index, so reads line up
    with the slots assigned by :func:`bind_parameters`. IN parameters produce nothing.

    Args:
        statement: The executed call object.
        parameters: Parameters in their fixed traversal order.
        return_type: Function return type, or ``TypeCode.NULL`` for a procedure.
        return_key: Result key for the function return value.

    Returns:
        Mapping of ``return_key`` and output parameter names to their values.
    """
    result: dict[str, Any] = {}
    if return_type is not TypeCode.NULL:
        result[return_key] = statement.get_object(1)
    index = first_parameter_index(return_type)
    for name, parameter in parameters:
        if not occupies_slot(parameter):
            continue
        if parameter.direction.is_output:
            result[name] = statement.get_object(index)
        index += 1
    return result
