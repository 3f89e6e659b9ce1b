"""Type vocabulary shared by every layer of sqlcall."""

from collections.abc import Mapping
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Final, Optional

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from sqlcall.parameters import BindParameter

__all__ = (
    "RETURN_KEY",
    "CallResult",
    "Direction",
    "ParameterSet",
    "ParameterValues",
    "TypeCode",
)

RETURN_KEY: Final[str] = "#RETURN#"
"""Result key holding a stored function's return value.

Parameter names must be identifiers, which cannot start with ``#``, so this key never
collides with an OUT parameter name.
"""


class Direction(str, Enum):
    """Parameter direction."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"

    def __str__(self) -> str:
        return self.value

    @property
    def is_input(self) -> bool:
        return self is not Direction.OUT

    @property
    def is_output(self) -> bool:
        return self is not Direction.IN


class TypeCode(IntEnum):
    """SQL type codes, numbered after ``java.sql.Types``.

    ``NULL`` as a return type marks a procedure call (no return value).
    """

    NULL = 0
    CHAR = 1
    NUMERIC = 2
    INTEGER = 4
    DOUBLE = 8
    VARCHAR = 12
    BOOLEAN = 16
    DATE = 91
    TIMESTAMP = 93
    OTHER = 1111
    BLOB = 2004
    CLOB = 2005
    REF_CURSOR = 2012

    def __str__(self) -> str:
        return self.name


ParameterSet: TypeAlias = "Mapping[str, BindParameter]"
ParameterValues: TypeAlias = "Mapping[str, Optional[Any]]"
CallResult: TypeAlias = "dict[str, Any]"
