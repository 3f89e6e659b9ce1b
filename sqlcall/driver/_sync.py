"""Synchronous call driver."""

import logging
from typing import TYPE_CHECKING, Any, Optional

from sqlcall.config import CallConfig
from sqlcall.driver._binding import bind_parameters, extract_results
from sqlcall.exceptions import ImproperConfigurationError, wrap_exceptions
from sqlcall.parameters import coerce_parameters
from sqlcall.statement import CallSpec, build_call_text
from sqlcall.typing import TypeCode
from sqlcall.utils.logging import correlation_context, get_logger, log_with_context
from sqlcall.utils.type_guards import is_call_connection

if TYPE_CHECKING:
    from types import TracebackType

    from sqlcall.protocols import CallableStatementProtocol, CallConnectionProtocol
    from sqlcall.typing import CallResult, ParameterSet, ParameterValues

logger = get_logger("driver")

__all__ = ("CallStatementContext", "SyncCallDriver")


class CallStatementContext:
    """Context manager owning one prepared call object.

    The call object is closed exactly once on exit. A failure while closing is
    logged and never replaces the outcome of the block.
    """

    __slots__ = ("call_text", "connection", "statement")

    def __init__(self, connection: "CallConnectionProtocol", call_text: str) -> None:
        self.connection = connection
        self.call_text = call_text
        self.statement: Optional[CallableStatementProtocol] = None

    def __enter__(self) -> "CallableStatementProtocol":
        self.statement = self.connection.prepare_call(self.call_text)
        return self.statement

    def __exit__(
        self,
        exc_type: "Optional[type[BaseException]]",
        exc_val: "Optional[BaseException]",
        exc_tb: "Optional[TracebackType]",
    ) -> None:
        if self.statement is None:
            return
        statement, self.statement = self.statement, None
        try:
            statement.close()
        except Exception as e:
            logger.warning("Error when closing call statement: %s", e)


class SyncCallDriver:
    """Invokes stored procedures and functions on one connection.

    Args:
        connection: A connection that can prepare call objects.
        call_config: Driver behaviour. Defaults to :class:`~sqlcall.config.CallConfig`.
    """

    __slots__ = ("call_config", "connection")

    def __init__(
        self, connection: "Optional[CallConnectionProtocol]", call_config: "Optional[CallConfig]" = None
    ) -> None:
        self.connection = connection
        self.call_config = call_config or CallConfig()

    def with_statement(self, connection: "CallConnectionProtocol", call_text: str) -> CallStatementContext:
        return CallStatementContext(connection, call_text)

    def _require_connection(self) -> "CallConnectionProtocol":
        if self.connection is None:
            msg = "connection is None."
            raise ImproperConfigurationError(msg)
        if not is_call_connection(self.connection):
            msg = (
                f"{type(self.connection).__name__} cannot prepare calls. "
                "Wrap DB-API connections in an adapter such as sqlcall.adapters.oracledb.OracleCallConnection."
            )
            raise ImproperConfigurationError(msg)
        return self.connection

    def build_spec(
        self, procedure_name: str, parameters: "Optional[ParameterSet]" = None, return_type: TypeCode = TypeCode.NULL
    ) -> CallSpec:
        return CallSpec(
            procedure_name, parameters, return_type, validate_identifiers=self.call_config.validate_identifiers
        )

    def invoke(self, spec: CallSpec) -> "CallResult":
        """Prepare, bind, execute and read back one call.

        Args:
            spec: The call to run.

        Raises:
            ImproperConfigurationError: If the driver has no usable connection.
            DatabaseExecutionError: If preparing, binding, executing or reading back fails.

        Returns:
            Mapping of the return key and OUT/INOUT parameter names to their values.
        """
        connection = self._require_connection()
        call_text = build_call_text(spec)
        with correlation_context():
            log_with_context(
                logger,
                self.call_config.statement_log_level,
                f"make statement --> {call_text}",
                procedure_name=spec.procedure_name,
                call_text=call_text,
                slot_count=spec.slot_count,
            )
            with wrap_exceptions(call_text=call_text), self.with_statement(connection, call_text) as statement:
                slots = bind_parameters(statement, spec.parameters, spec.return_type)
                log_with_context(
                    logger, logging.DEBUG, "bound call slots", procedure_name=spec.procedure_name, slots=slots
                )
                statement.execute()
                return extract_results(statement, spec.parameters, spec.return_type, self.call_config.return_key)

    def call_stored_function(
        self, procedure_name: str, bind_params: "Optional[ParameterSet]", return_type: TypeCode
    ) -> "CallResult":
        """Call a stored function that returns a value.

        Args:
            procedure_name: Name of procedure or function (ex. ``"AAA_PKG.BBB_FUNC"``).
            bind_params: Mapping of parameter name to :class:`~sqlcall.parameters.BindParameter`.
            return_type: Type of the return value.

        Returns:
            Mapping of return value and OUT parameter values. The return value is stored
            under ``call_config.return_key``.
        """
        self._require_connection()
        return self.invoke(self.build_spec(procedure_name, bind_params, return_type))

    def call_stored_procedure(self, procedure_name: str, bind_params: "Optional[ParameterSet]") -> "CallResult":
        """Call a stored procedure (without return value)."""
        return self.call_stored_function(procedure_name, bind_params, TypeCode.NULL)

    def call_stored_function_only_in(
        self, procedure_name: str, param_values: "Optional[ParameterValues]", return_type: TypeCode
    ) -> Any:
        """Call a stored function that has only IN parameters.

        Parameter types are inferred from the values.

        Returns:
            The function's return value.
        """
        result = self.call_stored_function(procedure_name, coerce_parameters(param_values), return_type)
        return result.get(self.call_config.return_key)

    def call_stored_procedure_only_in(self, procedure_name: str, param_values: "Optional[ParameterValues]") -> None:
        """Call a stored procedure that has only IN parameters."""
        self.call_stored_procedure(procedure_name, coerce_parameters(param_values))
