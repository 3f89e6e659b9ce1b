import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Optional, TypeVar

from sqlcall.typing import RETURN_KEY

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from sqlcall.driver import SyncCallDriver


__all__ = ("CallConfig", "ConnectionT", "DriverT", "NoPoolSyncConfig")

ConnectionT = TypeVar("ConnectionT")
DriverT = TypeVar("DriverT", bound="SyncCallDriver")


class CallConfig:
    """Behaviour of a call driver.

    Args:
        return_key: Result key for a function's return value.
        statement_log_level: Level the generated call text is logged at.
        validate_identifiers: Reject routine and parameter names that are not identifiers.
    """

    __slots__ = ("return_key", "statement_log_level", "validate_identifiers")

    def __init__(
        self,
        return_key: str = RETURN_KEY,
        statement_log_level: int = logging.DEBUG,
        validate_identifiers: bool = True,
    ) -> None:
        self.return_key = return_key
        self.statement_log_level = statement_log_level
        self.validate_identifiers = validate_identifiers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return (
            self.return_key == other.return_key
            and self.statement_log_level == other.statement_log_level
            and self.validate_identifiers == other.validate_identifiers
        )

    def __hash__(self) -> int:
        return hash((self.return_key, self.statement_log_level, self.validate_identifiers))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(return_key={self.return_key!r}, "
            f"statement_log_level={self.statement_log_level!r}, validate_identifiers={self.validate_identifiers!r})"
        )


class NoPoolSyncConfig(ABC, Generic[ConnectionT, DriverT]):
    """Base class for sync database configurations that hand out single connections."""

    __slots__ = ("call_config", "connection_config")
    driver_type: "ClassVar[type[Any]]"
    connection_type: "ClassVar[type[Any]]"
    is_async: "ClassVar[bool]" = False
    supports_connection_pooling: "ClassVar[bool]" = False

    def __init__(
        self, *, connection_config: "Optional[dict[str, Any]]" = None, call_config: "Optional[CallConfig]" = None
    ) -> None:
        self.connection_config: dict[str, Any] = dict(connection_config) if connection_config else {}
        self.call_config = call_config or CallConfig()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(call_config={self.call_config!r})"

    @abstractmethod
    def create_connection(self) -> ConnectionT:
        """Create and return a new database connection."""
        raise NotImplementedError

    @abstractmethod
    def provide_connection(self, *args: Any, **kwargs: Any) -> "AbstractContextManager[ConnectionT]":
        """Provide a database connection context manager."""
        raise NotImplementedError

    @abstractmethod
    def provide_session(
        self, *args: Any, call_config: "Optional[CallConfig]" = None, **kwargs: Any
    ) -> "AbstractContextManager[DriverT]":
        """Provide a call driver context manager."""
        raise NotImplementedError
