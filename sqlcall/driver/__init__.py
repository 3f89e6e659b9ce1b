"""Call drivers and the binding helpers they share."""

from sqlcall.driver._binding import bind_parameters, extract_results, first_parameter_index
from sqlcall.driver._sync import CallStatementContext, SyncCallDriver

__all__ = (
    "CallStatementContext",
    "SyncCallDriver",
    "bind_parameters",
    "extract_results",
    "first_parameter_index",
)
