"""Bind parameters and value-only coercion.

A :class:`BindParameter` pairs a value with a :class:`~sqlcall.typing.Direction` and a
:class:`~sqlcall.typing.TypeCode`. Callers that only have plain values can use
:func:`coerce_parameters` to build IN parameters with inferred type codes.
"""

from typing import TYPE_CHECKING, Any, Optional

from sqlcall.exceptions import ImproperConfigurationError
from sqlcall.typing import Direction, TypeCode
from sqlcall.utils.type_guards import is_boolean, is_date_only, is_numeric, is_string_like, is_timestamp

if TYPE_CHECKING:
    from sqlcall.typing import ParameterValues

__all__ = (
    "BindParameter",
    "coerce_parameters",
    "infer_type_code",
    "is_inline_literal",
    "occupies_slot",
    "to_direction",
    "to_type_code",
)


def to_direction(direction: Any) -> Direction:
    """Normalize a direction, treating ``None`` as ``Direction.IN``.

    Raises:
        ImproperConfigurationError: If ``direction`` is not a known direction.
    """
    if direction is None:
        return Direction.IN
    try:
        return Direction(direction)
    except ValueError as e:
        msg = f"Unknown parameter direction {direction!r}; expected one of {[d.value for d in Direction]}"
        raise ImproperConfigurationError(msg) from e


def to_type_code(type_code: Any) -> TypeCode:
    """Normalize a type code.

    Raises:
        ImproperConfigurationError: If ``type_code`` is not a known type code.
    """
    try:
        return TypeCode(type_code)
    except ValueError as e:
        msg = f"Unknown type code {type_code!r}"
        raise ImproperConfigurationError(msg) from e


class BindParameter:
    """Immutable bind parameter.

    Args:
        direction: Parameter direction. ``None`` means ``Direction.IN``.
        type_code: SQL type code of the parameter.
        value: Input value. Ignored for ``Direction.OUT`` parameters.
    """

    __slots__ = ("_direction", "_type_code", "_value")

    def __init__(self, direction: Optional[Direction], type_code: TypeCode, value: Any = None) -> None:
        object.__setattr__(self, "_direction", to_direction(direction))
        object.__setattr__(self, "_type_code", to_type_code(type_code))
        object.__setattr__(self, "_value", value)

    @classmethod
    def in_(cls, type_code: TypeCode, value: Any) -> "BindParameter":
        return cls(Direction.IN, type_code, value)

    @classmethod
    def out(cls, type_code: TypeCode) -> "BindParameter":
        return cls(Direction.OUT, type_code)

    @classmethod
    def inout(cls, type_code: TypeCode, value: Any) -> "BindParameter":
        return cls(Direction.INOUT, type_code, value)

    @property
    def direction(self) -> Direction:
        return self._direction  # type: ignore[no-any-return]

    @property
    def type_code(self) -> TypeCode:
        return self._type_code  # type: ignore[no-any-return]

    @property
    def value(self) -> Any:
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        """Equality comparison compatible with dataclass.__eq__."""
        if not isinstance(other, type(self)):
            return False
        return self.direction == other.direction and self.type_code == other.type_code and self.value == other.value

    def __hash__(self) -> int:
        try:
            value_hash = hash(self.value)
        except TypeError:
            value_hash = hash(repr(self.value))
        return hash((self.direction, self.type_code, value_hash))

    def __repr__(self) -> str:
        """String representation compatible with dataclass.__repr__."""
        return (
            f"{type(self).__name__}(direction={self.direction!r}, type_code={self.type_code!r}, value={self.value!r})"
        )


def occupies_slot(parameter: BindParameter) -> bool:
    """Whether a parameter takes a ``?`` placeholder and a positional slot.

    Boolean values cannot be bound on the target platform, so BOOLEAN parameters
    never occupy a slot. Text building and binding both rely on this predicate.
    """
    return parameter.type_code is not TypeCode.BOOLEAN


def is_inline_literal(parameter: BindParameter) -> bool:
    """Whether a parameter is written into the call text as a literal."""
    return parameter.type_code is TypeCode.BOOLEAN and parameter.direction is Direction.IN


def infer_type_code(value: Any) -> TypeCode:
    """Infer a type code from the runtime category of ``value``.

    Unknown types fall through to ``TypeCode.OTHER``.

    Args:
        value: A bind value.

    Returns:
        The inferred type code.
    """
    if is_string_like(value):
        return TypeCode.VARCHAR
    if is_boolean(value):
        return TypeCode.BOOLEAN
    if is_numeric(value):
        return TypeCode.NUMERIC
    if is_timestamp(value):
        return TypeCode.TIMESTAMP
    if is_date_only(value):
        return TypeCode.DATE
    return TypeCode.OTHER


def coerce_parameters(values: "Optional[ParameterValues]") -> "dict[str, BindParameter]":
    """Build IN bind parameters from a value-only mapping.

    An absent (``None``) value is bound as an empty string typed ``TypeCode.OTHER``.

    Args:
        values: Mapping of parameter name to value, or ``None`` for no parameters.

    Returns:
        Mapping of parameter name to :class:`BindParameter`, in the input order.
    """
    if not values:
        return {}
    coerced: dict[str, BindParameter] = {}
    for name, value in values.items():
        if value is None:
            coerced[name] = BindParameter(Direction.IN, TypeCode.OTHER, "")
        else:
            coerced[name] = BindParameter(Direction.IN, infer_type_code(value), value)
    return coerced
