"""Client for the KING OF TIME attendance API."""

from kingtime.api import BASE_URL, daily_workings, employees, timerecord
from kingtime.envelope import ErrorData
from kingtime.errors import (
    ApiError,
    DecodeError,
    KingtimeError,
    TransportError,
    UnexpectedShapeError,
    UnknownCodeError,
)
from kingtime.wire import Code

__all__ = [
    "BASE_URL",
    "ApiError",
    "Code",
    "DecodeError",
    "ErrorData",
    "KingtimeError",
    "TransportError",
    "UnexpectedShapeError",
    "UnknownCodeError",
    "daily_workings",
    "employees",
    "timerecord",
]
