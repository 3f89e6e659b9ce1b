"""sqlcall: Call stored procedures and functions with named, typed parameters."""

from sqlcall import driver, exceptions, parameters, procedures, statement, typing, utils
from sqlcall.__metadata__ import __version__
from sqlcall.config import CallConfig
from sqlcall.driver import SyncCallDriver
from sqlcall.exceptions import (
    DatabaseExecutionError,
    ImproperConfigurationError,
    SQLCallError,
    UnsupportedParameterError,
)
from sqlcall.parameters import BindParameter, coerce_parameters, infer_type_code
from sqlcall.procedures import (
    call_stored_function,
    call_stored_function_only_in,
    call_stored_procedure,
    call_stored_procedure_only_in,
    invoke,
)
from sqlcall.statement import CallSpec, build_call_text
from sqlcall.typing import RETURN_KEY, Direction, TypeCode

__all__ = (
    "RETURN_KEY",
    "BindParameter",
    "CallConfig",
    "CallSpec",
    "DatabaseExecutionError",
    "Direction",
    "ImproperConfigurationError",
    "SQLCallError",
    "SyncCallDriver",
    "TypeCode",
    "UnsupportedParameterError",
    "__version__",
    "build_call_text",
    "call_stored_function",
    "call_stored_function_only_in",
    "call_stored_procedure",
    "call_stored_procedure_only_in",
    "coerce_parameters",
    "driver",
    "exceptions",
    "infer_type_code",
    "invoke",
    "parameters",
    "procedures",
    "statement",
    "typing",
    "utils",
)
