"""Metadata for the Project."""

from importlib.metadata import PackageNotFoundError, metadata, version

__all__ = ("__project__", "__version__")

try:
    __version__ = version("sqlcall")
    __project__ = metadata("sqlcall")["Name"]
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.1"
    __project__ = "sqlcall"
finally:
    del version, PackageNotFoundError, metadata
