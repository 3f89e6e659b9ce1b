from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Optional

__all__ = (
    "DatabaseExecutionError",
    "ImproperConfigurationError",
    "MissingDependencyError",
    "SQLCallError",
    "UnsupportedParameterError",
    "wrap_exceptions",
)


class SQLCallError(Exception):
    """Base exception class from which all sqlcall exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLCallError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class MissingDependencyError(SQLCallError, ImportError):
    """Missing optional dependency.

    This exception is raised only when a module depends on a dependency that has not been installed.
    """

    def __init__(self, package: str, install_package: Optional[str] = None) -> None:
        super().__init__(
            f"Package {package!r} is not installed but required. You can install it by running "
            f"'pip install sqlcall[{install_package or package}]' to install sqlcall with the required extra "
            f"or 'pip install {install_package or package}' to install the package separately",
        )


class ImproperConfigurationError(SQLCallError):
    """Improper Configuration error.

    Raised before any database interaction when a call is set up incorrectly,
    e.g. a missing connection or an empty procedure name.
    """


class UnsupportedParameterError(ImproperConfigurationError):
    """A parameter combination the call protocol cannot express.

    Boolean OUT and INOUT parameters are the main case: boolean values can only be
    written into the call text as literals, so there is no slot to read them back from.
    """

    parameter_name: Optional[str]

    def __init__(self, message: str, parameter_name: Optional[str] = None) -> None:
        detail_message = message
        if parameter_name:
            detail_message = f"{message} (Parameter: {parameter_name})"
        super().__init__(detail=detail_message)
        self.parameter_name = parameter_name


class DatabaseExecutionError(SQLCallError):
    """Preparing, binding, executing or reading back a call failed.

    The driver-level exception is always available as ``__cause__``.
    """

    call_text: Optional[str]

    def __init__(self, message: Optional[str] = None, call_text: Optional[str] = None) -> None:
        if message is None:
            message = "An error occurred while executing the database call."
        detail_message = message
        if call_text:
            detail_message = f"{message}\nSQL: {call_text}"
        super().__init__(detail=detail_message)
        self.call_text = call_text


@contextmanager
def wrap_exceptions(wrap_exceptions: bool = True, call_text: Optional[str] = None) -> Generator[None, None, None]:
    try:
        yield

    except Exception as exc:
        if wrap_exceptions is False:
            raise
        msg = f"Database call failed: {exc}"
        raise DatabaseExecutionError(msg, call_text=call_text) from exc
