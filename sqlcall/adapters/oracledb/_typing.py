from typing import TYPE_CHECKING, Any

from sqlcall.exceptions import MissingDependencyError

try:
    import oracledb
except ImportError as e:
    raise MissingDependencyError(package="oracledb") from e

from sqlcall.typing import TypeCode

if TYPE_CHECKING:
    from typing import TypeAlias

    from oracledb import Connection, Cursor

    OracleSyncConnection: TypeAlias = Connection
    OracleSyncCursor: TypeAlias = Cursor
else:
    OracleSyncConnection = oracledb.Connection
    OracleSyncCursor = oracledb.Cursor

ORACLE_DB_TYPES: "dict[TypeCode, Any]" = {
    TypeCode.CHAR: oracledb.DB_TYPE_CHAR,
    TypeCode.NUMERIC: oracledb.DB_TYPE_NUMBER,
    TypeCode.INTEGER: oracledb.DB_TYPE_NUMBER,
    TypeCode.DOUBLE: oracledb.DB_TYPE_BINARY_DOUBLE,
    TypeCode.VARCHAR: oracledb.DB_TYPE_VARCHAR,
    TypeCode.BOOLEAN: oracledb.DB_TYPE_BOOLEAN,
    TypeCode.DATE: oracledb.DB_TYPE_DATE,
    TypeCode.TIMESTAMP: oracledb.DB_TYPE_TIMESTAMP,
    TypeCode.BLOB: oracledb.DB_TYPE_BLOB,
    TypeCode.CLOB: oracledb.DB_TYPE_CLOB,
    TypeCode.REF_CURSOR: oracledb.DB_TYPE_CURSOR,
}
"""python-oracledb bind types for the type codes that can be registered as outputs."""

__all__ = ("ORACLE_DB_TYPES", "OracleSyncConnection", "OracleSyncCursor")
