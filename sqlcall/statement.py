"""Call specifications and call text generation.

A :class:`CallSpec` is built once per invocation. It fixes the traversal order of the
parameters, and that single ordered tuple is what the text builder, the binder and
the result extractor all walk, so placeholder positions and slot indices agree.
"""

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, Optional

from sqlcall.exceptions import ImproperConfigurationError, UnsupportedParameterError
from sqlcall.parameters import BindParameter, is_inline_literal, occupies_slot, to_type_code
from sqlcall.typing import TypeCode

if TYPE_CHECKING:
    from sqlcall.typing import ParameterSet

__all__ = (
    "PLACEHOLDER",
    "CallSpec",
    "build_call_text",
    "render_boolean_literal",
    "validate_identifier",
    "validate_routine_name",
)

_IDENTIFIER: Final = r'(?:[A-Za-z][A-Za-z0-9_$#]*|"[^"\x00?]+")'
_IDENTIFIER_RE: Final = re.compile(rf"^{_IDENTIFIER}$")
_ROUTINE_NAME_RE: Final = re.compile(
    rf"^{_IDENTIFIER}(?:\.{_IDENTIFIER}){{0,2}}(?:@{_IDENTIFIER}(?:\.{_IDENTIFIER})*)?$"
)

PLACEHOLDER: Final[str] = "?"


def validate_identifier(name: Any) -> str:
    """Validate a parameter name before it is written into call text.

    Args:
        name: The parameter name.

    Raises:
        ImproperConfigurationError: If the name is not a plain or quoted identifier.

    Returns:
        The name, unchanged.
    """
    if not isinstance(name, str) or not _IDENTIFIER_RE.match(name):
        msg = f"Invalid parameter name: {name!r}"
        raise ImproperConfigurationError(msg)
    return name


def validate_routine_name(procedure_name: Optional[str], check_syntax: bool = True) -> str:
    """Validate a procedure or function name such as ``"PKG.FUNC"``.

    Args:
        procedure_name: Routine name, optionally qualified by schema, package and db link.
        check_syntax: Check the name is an identifier path, not just non-empty.

    Raises:
        ImproperConfigurationError: If the name is empty or malformed.

    Returns:
        The name, unchanged.
    """
    if not procedure_name:
        msg = "procedure_name is None or empty."
        raise ImproperConfigurationError(msg)
    if not isinstance(procedure_name, str):
        msg = f"procedure_name must be a string, got {type(procedure_name).__name__}"
        raise ImproperConfigurationError(msg)
    if check_syntax and not _ROUTINE_NAME_RE.match(procedure_name):
        msg = f"Invalid procedure_name: {procedure_name!r}"
        raise ImproperConfigurationError(msg)
    return procedure_name


class CallSpec:
    """Immutable description of one stored procedure or function call.

    Args:
        procedure_name: Name of the routine, e.g. ``"AAA_PKG.BBB_FUNC"``.
        parameters: Mapping of parameter name to :class:`BindParameter`. ``None`` means no parameters.
        return_type: Type of the function return value. ``TypeCode.NULL`` for a procedure.
        validate_identifiers: Check that routine and parameter names are identifiers.

    Raises:
        ImproperConfigurationError: If the name or a parameter is invalid.
        UnsupportedParameterError: If a BOOLEAN parameter is OUT or INOUT.
    """

    __slots__ = ("_parameters", "_procedure_name", "_return_type")

    def __init__(
        self,
        procedure_name: str,
        parameters: "Optional[ParameterSet]" = None,
        return_type: TypeCode = TypeCode.NULL,
        validate_identifiers: bool = True,
    ) -> None:
        self._procedure_name = validate_routine_name(procedure_name, check_syntax=validate_identifiers)
        self._return_type = to_type_code(return_type)
        self._parameters = self._materialize(parameters, validate_identifiers)

    @staticmethod
    def _materialize(
        parameters: "Optional[ParameterSet]", validate_identifiers: bool
    ) -> "tuple[tuple[str, BindParameter], ...]":
        if parameters is None:
            return ()
        if not isinstance(parameters, Mapping):
            msg = f"parameters must be a mapping of name to BindParameter, got {type(parameters).__name__}"
            raise ImproperConfigurationError(msg)

        ordered: list[tuple[str, BindParameter]] = []
        for name, parameter in parameters.items():
            if validate_identifiers:
                validate_identifier(name)
            if not isinstance(parameter, BindParameter):
                msg = f"Parameter {name!r} must be a BindParameter, got {type(parameter).__name__}"
                raise ImproperConfigurationError(msg)
            if parameter.type_code is TypeCode.BOOLEAN and parameter.direction.is_output:
                msg = f"BOOLEAN parameters cannot be {parameter.direction.name}; only IN booleans are supported"
                raise UnsupportedParameterError(msg, parameter_name=name)
            ordered.append((name, parameter))
        return tuple(ordered)

    @property
    def procedure_name(self) -> str:
        return self._procedure_name

    @property
    def parameters(self) -> "tuple[tuple[str, BindParameter], ...]":
        """Parameters in their fixed traversal order."""
        return self._parameters

    @property
    def return_type(self) -> TypeCode:
        return self._return_type

    @property
    def is_function(self) -> bool:
        return self._return_type is not TypeCode.NULL

    @property
    def slot_count(self) -> int:
        """Number of positional slots, including the return slot of a function."""
        return int(self.is_function) + sum(1 for _, parameter in self._parameters if occupies_slot(parameter))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(procedure_name={self._procedure_name!r}, "
            f"parameters={dict(self._parameters)!r}, return_type={self._return_type!r})"
        )


def render_boolean_literal(value: Any) -> str:
    """Render an IN BOOLEAN value as a PL/SQL literal."""
    if value is None:
        return "NULL"
    return "TRUE" if value is True else "FALSE"


def build_call_text(spec: CallSpec) -> str:
    """Build the anonymous block that invokes ``spec``.

    Every slot-occupying parameter becomes ``name => ?``. IN BOOLEAN parameters are
    written as ``name => TRUE``, ``FALSE`` or ``NULL`` because the driver cannot bind them.

    Args:
        spec: The call to render.

    Returns:
        Call text such as ``"begin ? := PKG.FUNC(P1 => ?); end;"``.
    """
    fragments: list[str] = []
    for name, parameter in spec.parameters:
        if occupies_slot(parameter):
            fragments.append(f"{name} => {PLACEHOLDER}")
        elif is_inline_literal(parameter):
            fragments.append(f"{name} => {render_boolean_literal(parameter.value)}")
    assignment = f"{PLACEHOLDER} := " if spec.is_function else ""
    return f"begin {assignment}{spec.procedure_name}({','.join(fragments)}); end;"
