"""python-oracledb implementation of the positional call protocol."""

import itertools
import re
from typing import TYPE_CHECKING, Any, Final, Optional, Union

from sqlcall.adapters.oracledb._typing import ORACLE_DB_TYPES, OracleSyncConnection, OracleSyncCursor
from sqlcall.config import CallConfig
from sqlcall.driver import SyncCallDriver
from sqlcall.exceptions import UnsupportedParameterError
from sqlcall.statement import PLACEHOLDER
from sqlcall.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlcall.typing import TypeCode

__all__ = ("OracleCallConnection", "OracleCallableStatement", "OracleSyncCallDriver", "convert_placeholders")

logger = get_logger("adapters.oracledb")

_QMARK_RE: Final = re.compile(re.escape(PLACEHOLDER))


def convert_placeholders(call_text: str) -> str:
    """Rewrite ``?`` placeholders to Oracle positional binds ``:1``, ``:2``, ...

    Call text produced by :func:`sqlcall.statement.build_call_text` contains no string
    literals and no ``?`` inside identifiers, so every ``?`` is a placeholder.
    """
    counter = itertools.count(1)
    return _QMARK_RE.sub(lambda _: f":{next(counter)}", call_text)


class OracleCallableStatement:
    """A prepared call on one python-oracledb cursor.

    Inputs are collected per slot and output slots become cursor variables. The
    positional bind list is only assembled on :meth:`execute`, so an INOUT slot can be
    bound and registered in either order.
    """

    __slots__ = ("_cursor", "_executed", "_input_types", "_inputs", "_outputs", "call_text", "slot_count", "sql")

    def __init__(self, cursor: OracleSyncCursor, call_text: str) -> None:
        self._cursor = cursor
        self.call_text = call_text
        self.sql = convert_placeholders(call_text)
        self.slot_count = call_text.count(PLACEHOLDER)
        self._inputs: dict[int, Any] = {}
        self._input_types: "dict[int, TypeCode]" = {}
        self._outputs: dict[int, Any] = {}
        self._executed = False

    def _check_index(self, index: int) -> None:
        if not 1 <= index <= self.slot_count:
            msg = f"Slot index {index} out of range 1..{self.slot_count}"
            raise IndexError(msg)

    def set_object(self, index: int, value: Any, type_code: "TypeCode") -> None:
        self._check_index(index)
        self._inputs[index] = value
        self._input_types[index] = type_code

    def register_out_parameter(self, index: int, type_code: "TypeCode") -> None:
        self._check_index(index)
        db_type = ORACLE_DB_TYPES.get(type_code)
        if db_type is None:
            msg = f"Cannot register an output of type {type_code}"
            raise UnsupportedParameterError(msg)
        self._outputs[index] = self._cursor.var(db_type)

    def _bind_value(self, index: int) -> Any:
        if index in self._outputs:
            var = self._outputs[index]
            value = self._inputs.get(index)
            if value is not None:
                var.setvalue(0, value)
            return var
        if index not in self._inputs:
            msg = f"Slot {index} has neither an input value nor an output registration"
            raise IndexError(msg)
        value = self._inputs[index]
        db_type = ORACLE_DB_TYPES.get(self._input_types[index])
        if value is None and db_type is not None:
            return self._cursor.var(db_type)
        return value

    def execute(self) -> None:
        binds = [self._bind_value(index) for index in range(1, self.slot_count + 1)]
        logger.debug("Executing %s with %d positional bind(s)", self.sql, len(binds))
        self._cursor.execute(self.sql, binds)
        self._executed = True

    def get_object(self, index: int) -> Any:
        if not self._executed:
            msg = "Call has not been executed"
            raise RuntimeError(msg)
        if index not in self._outputs:
            msg = f"Slot {index} is not an output slot"
            raise IndexError(msg)
        return self._outputs[index].getvalue()

    def close(self) -> None:
        self._cursor.close()


class OracleCallConnection:
    """Adapts a python-oracledb connection to :class:`~sqlcall.protocols.CallConnectionProtocol`."""

    __slots__ = ("connection",)

    def __init__(self, connection: OracleSyncConnection) -> None:
        self.connection = connection

    def prepare_call(self, call_text: str) -> OracleCallableStatement:
        return OracleCallableStatement(self.connection.cursor(), call_text)

    def close(self) -> None:
        self.connection.close()


class OracleSyncCallDriver(SyncCallDriver):
    """Call driver for python-oracledb connections.

    Accepts either a raw ``oracledb.Connection`` or an :class:`OracleCallConnection`.
    """

    __slots__ = ()

    def __init__(
        self,
        connection: "Optional[Union[OracleSyncConnection, OracleCallConnection]]",
        call_config: "Optional[CallConfig]" = None,
    ) -> None:
        if connection is not None and not isinstance(connection, OracleCallConnection):
            connection = OracleCallConnection(connection)
        super().__init__(connection=connection, call_config=call_config)
