"""Recording doubles for the positional call protocol."""

from typing import Any, Optional

from sqlcall.typing import TypeCode

__all__ = ("RecordingCallableStatement", "RecordingConnection")


class RecordingCallableStatement:
    """Call object double that records every index operation."""

    def __init__(
        self,
        call_text: str,
        outputs: "Optional[dict[int, Any]]" = None,
        fail_on: Optional[str] = None,
        close_error: Optional[Exception] = None,
    ) -> None:
        self.call_text = call_text
        self.outputs = outputs or {}
        self.fail_on = fail_on
        self.close_error = close_error
        self.operations: list[tuple[Any, ...]] = []
        self.close_calls = 0

    def _maybe_fail(self, operation: str) -> None:
        if self.fail_on == operation:
            msg = f"{operation} failed"
            raise RuntimeError(msg)

    def set_object(self, index: int, value: Any, type_code: TypeCode) -> None:
        self._maybe_fail("set_object")
        self.operations.append(("set", index, value, type_code))

    def register_out_parameter(self, index: int, type_code: TypeCode) -> None:
        self._maybe_fail("register_out_parameter")
        self.operations.append(("out", index, type_code))

    def execute(self) -> None:
        self._maybe_fail("execute")
        self.operations.append(("execute",))

    def get_object(self, index: int) -> Any:
        self._maybe_fail("get_object")
        self.operations.append(("get", index))
        return self.outputs.get(index)

    def close(self) -> None:
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error

    @property
    def bound_indices(self) -> "list[int]":
        return sorted({op[1] for op in self.operations if op[0] in {"set", "out"}})

    @property
    def read_indices(self) -> "list[int]":
        return [op[1] for op in self.operations if op[0] == "get"]


class RecordingConnection:
    """Connection double handing out :class:`RecordingCallableStatement` objects."""

    def __init__(
        self,
        outputs: "Optional[dict[int, Any]]" = None,
        fail_on: Optional[str] = None,
        close_error: Optional[Exception] = None,
        prepare_error: Optional[Exception] = None,
    ) -> None:
        self.outputs = outputs
        self.fail_on = fail_on
        self.close_error = close_error
        self.prepare_error = prepare_error
        self.statements: list[RecordingCallableStatement] = []

    def prepare_call(self, call_text: str) -> RecordingCallableStatement:
        if self.prepare_error is not None:
            raise self.prepare_error
        statement = RecordingCallableStatement(call_text, self.outputs, self.fail_on, self.close_error)
        self.statements.append(statement)
        return statement

    @property
    def statement(self) -> RecordingCallableStatement:
        assert len(self.statements) == 1
        return self.statements[0]
