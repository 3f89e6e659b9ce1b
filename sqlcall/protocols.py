"""Runtime-checkable protocols for the objects sqlcall consumes.

The core never talks to a DB-API cursor directly. It prepares a call object from a
connection and drives it through the positional protocol below, which adapters
implement on top of a concrete driver.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlcall.typing import TypeCode

__all__ = ("CallConnectionProtocol", "CallableStatementProtocol")


@runtime_checkable
class CallableStatementProtocol(Protocol):
    """A prepared call with 1-based positional slots."""

    def set_object(self, index: int, value: Any, type_code: "TypeCode") -> None:
        """Bind an input value at ``index``."""
        ...

    def register_out_parameter(self, index: int, type_code: "TypeCode") -> None:
        """Reserve ``index`` as an output slot of ``type_code``."""
        ...

    def execute(self) -> None:
        """Execute the call."""
        ...

    def get_object(self, index: int) -> Any:
        """Read the post-execution value of an output slot."""
        ...

    def close(self) -> None:
        """Release the call object."""
        ...


@runtime_checkable
class CallConnectionProtocol(Protocol):
    """A connection able to prepare call objects from call text."""

    def prepare_call(self, call_text: str) -> CallableStatementProtocol:
        """Prepare ``call_text`` and return the call object."""
        ...
