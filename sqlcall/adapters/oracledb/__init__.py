from sqlcall.adapters.oracledb._typing import ORACLE_DB_TYPES, OracleSyncConnection
from sqlcall.adapters.oracledb.config import OracleConnectionParams, OracleSyncCallConfig
from sqlcall.adapters.oracledb.driver import (
    OracleCallableStatement,
    OracleCallConnection,
    OracleSyncCallDriver,
    convert_placeholders,
)

__all__ = (
    "ORACLE_DB_TYPES",
    "OracleCallConnection",
    "OracleCallableStatement",
    "OracleConnectionParams",
    "OracleSyncCallConfig",
    "OracleSyncCallDriver",
    "OracleSyncConnection",
    "convert_placeholders",
)
