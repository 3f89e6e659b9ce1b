"""Functional entry points for one-off calls.

Each function builds a :class:`~sqlcall.driver.SyncCallDriver` around the given
connection for the duration of a single call.

Example:
    >>> from sqlcall import RETURN_KEY, BindParameter, Direction, TypeCode
    >>> from sqlcall.procedures import call_stored_function
    >>> result = call_stored_function(
    ...     conn,
    ...     "HR_PKG.GET_SALARY",
    ...     {"P_EMP_ID": BindParameter(Direction.IN, TypeCode.NUMERIC, 100)},
    ...     TypeCode.NUMERIC,
    ... )
    >>> result[RETURN_KEY]
"""

from typing import TYPE_CHECKING, Any, Optional

from sqlcall.driver import SyncCallDriver
from sqlcall.typing import TypeCode

if TYPE_CHECKING:
    from sqlcall.config import CallConfig
    from sqlcall.protocols import CallConnectionProtocol
    from sqlcall.typing import CallResult, ParameterSet, ParameterValues

__all__ = (
    "call_stored_function",
    "call_stored_function_only_in",
    "call_stored_procedure",
    "call_stored_procedure_only_in",
    "invoke",
)


def invoke(
    connection: "Optional[CallConnectionProtocol]",
    procedure_name: str,
    parameters: "Optional[ParameterSet]" = None,
    return_type: TypeCode = TypeCode.NULL,
    *,
    call_config: "Optional[CallConfig]" = None,
) -> "CallResult":
    """Invoke a procedure, or a function when ``return_type`` is not ``TypeCode.NULL``."""
    return SyncCallDriver(connection, call_config).call_stored_function(procedure_name, parameters, return_type)


def call_stored_function(
    connection: "Optional[CallConnectionProtocol]",
    procedure_name: str,
    bind_params: "Optional[ParameterSet]",
    return_type: TypeCode,
    *,
    call_config: "Optional[CallConfig]" = None,
) -> "CallResult":
    """Call a stored function that returns a value.

    Args:
        connection: Connection able to prepare calls.
        procedure_name: Name of procedure or function (ex. ``"AAA_PKG.BBB_FUNC"``).
        bind_params: Mapping of parameter name to :class:`~sqlcall.parameters.BindParameter`.
        return_type: Type of the return value.
        call_config: Optional driver configuration.

    Returns:
        Mapping of return value and OUT parameter values.
    """
    return SyncCallDriver(connection, call_config).call_stored_function(procedure_name, bind_params, return_type)


def call_stored_procedure(
    connection: "Optional[CallConnectionProtocol]",
    procedure_name: str,
    bind_params: "Optional[ParameterSet]",
    *,
    call_config: "Optional[CallConfig]" = None,
) -> "CallResult":
    """Call a stored procedure (without return value).

    Returns:
        Mapping of OUT parameter values.
    """
    return SyncCallDriver(connection, call_config).call_stored_procedure(procedure_name, bind_params)


def call_stored_function_only_in(
    connection: "Optional[CallConnectionProtocol]",
    procedure_name: str,
    param_values: "Optional[ParameterValues]",
    return_type: TypeCode,
    *,
    call_config: "Optional[CallConfig]" = None,
) -> Any:
    """Call a stored function with IN parameters given as plain values.

    Returns:
        The function's return value.
    """
    return SyncCallDriver(connection, call_config).call_stored_function_only_in(
        procedure_name, param_values, return_type
    )


def call_stored_procedure_only_in(
    connection: "Optional[CallConnectionProtocol]",
    procedure_name: str,
    param_values: "Optional[ParameterValues]",
    *,
    call_config: "Optional[CallConfig]" = None,
) -> None:
    """Call a stored procedure with IN parameters given as plain values."""
    SyncCallDriver(connection, call_config).call_stored_procedure_only_in(procedure_name, param_values)
