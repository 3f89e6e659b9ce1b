"""OracleDB call configuration with direct field-based configuration."""

import contextlib
from typing import TYPE_CHECKING, Any, ClassVar, Optional, TypedDict, Union

import oracledb
from typing_extensions import NotRequired

from sqlcall.adapters.oracledb.driver import OracleCallConnection, OracleSyncCallDriver
from sqlcall.config import NoPoolSyncConfig
from sqlcall.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Generator

    from oracledb import AuthMode

    from sqlcall.config import CallConfig


__all__ = ("OracleConnectionParams", "OracleSyncCallConfig")

logger = get_logger("adapters.oracledb.config")


class OracleConnectionParams(TypedDict, total=False):
    """OracleDB connection parameters."""

    dsn: NotRequired[str]
    user: NotRequired[str]
    password: NotRequired[str]
    host: NotRequired[str]
    port: NotRequired[int]
    service_name: NotRequired[str]
    sid: NotRequired[str]
    wallet_location: NotRequired[str]
    wallet_password: NotRequired[str]
    config_dir: NotRequired[str]
    tcp_connect_timeout: NotRequired[float]
    retry_count: NotRequired[int]
    retry_delay: NotRequired[int]
    mode: NotRequired["AuthMode"]
    events: NotRequired[bool]
    edition: NotRequired[str]
    extra: NotRequired[dict[str, Any]]


class OracleSyncCallConfig(NoPoolSyncConfig[OracleCallConnection, OracleSyncCallDriver]):
    """Configuration for synchronous Oracle stored procedure calls."""

    __slots__ = ()

    driver_type: ClassVar[type[OracleSyncCallDriver]] = OracleSyncCallDriver
    connection_type: "ClassVar[type[OracleCallConnection]]" = OracleCallConnection

    def __init__(
        self,
        *,
        connection_config: "Optional[Union[OracleConnectionParams, dict[str, Any]]]" = None,
        call_config: "Optional[CallConfig]" = None,
    ) -> None:
        """Initialize Oracle call configuration.

        Args:
            connection_config: Connection parameters passed to ``oracledb.connect``
            call_config: Call driver configuration
        """
        processed_connection_config: dict[str, Any] = dict(connection_config) if connection_config else {}
        if "extra" in processed_connection_config:
            extras = processed_connection_config.pop("extra")
            processed_connection_config.update(extras)
        super().__init__(connection_config=processed_connection_config, call_config=call_config)

    def create_connection(self) -> OracleCallConnection:
        """Create a single connection.

        Returns:
            An Oracle connection wrapped for call preparation.
        """
        return OracleCallConnection(oracledb.connect(**self.connection_config))

    @contextlib.contextmanager
    def provide_connection(self, *args: Any, **kwargs: Any) -> "Generator[OracleCallConnection, None, None]":
        """Provide a connection context manager.

        Yields:
            An Oracle connection wrapped for call preparation.
        """
        connection = self.create_connection()
        try:
            yield connection
        finally:
            try:
                connection.close()
            except oracledb.Error as e:
                logger.warning("Error when closing Oracle connection: %s", e)

    @contextlib.contextmanager
    def provide_session(
        self, *args: Any, call_config: "Optional[CallConfig]" = None, **kwargs: Any
    ) -> "Generator[OracleSyncCallDriver, None, None]":
        """Provide a call driver context manager.

        Args:
            *args: Positional arguments (unused).
            call_config: Optional call configuration override.
            **kwargs: Keyword arguments (unused).

        Yields:
            An OracleSyncCallDriver instance.
        """
        _ = (args, kwargs)
        with self.provide_connection() as connection:
            yield self.driver_type(connection, call_config or self.call_config)
