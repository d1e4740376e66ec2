"""Wire formats shared by the endpoint modules."""

from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from kingtime.errors import UnknownCodeError

# The time record endpoint misreads any other offset, so punches are always sent in JST.
JST = timezone(timedelta(hours=9), "JST")


class Code(Enum):
    """Kind of punch."""

    IN = "in"
    OUT = "out"
    BREAK_START = "break_start"
    BREAK_END = "break_end"

    @classmethod
    def decode(cls, value: str) -> "Code":
        """Decode the literal used on the wire."""
        try:
            return _DECODE[value]
        except (KeyError, TypeError):
            raise UnknownCodeError(value) from None

    def encode(self) -> str:
        """Encode as the literal used on the wire."""
        return _ENCODE[self]

    @property
    def at_work(self) -> bool:
        """Whether the employee is working after this punch."""
        return self in (Code.IN, Code.BREAK_END)


_ENCODE: dict[Code, str] = {
    Code.IN: "1",
    Code.OUT: "2",
    Code.BREAK_START: "3",
    Code.BREAK_END: "4",
}
_DECODE: dict[str, Code] = {literal: code for code, literal in _ENCODE.items()}


def _validate_code(value: Any) -> Code:
    if isinstance(value, Code):
        return value
    return Code.decode(value)


WireCode = Annotated[
    Code,
    BeforeValidator(_validate_code),
    PlainSerializer(Code.encode, return_type=str),
]
"""`Code` field that reads and writes the "1".."4" literals."""


def format_punch_time(value: datetime) -> str:
    """
    Format a punch time for the time record endpoint.

    The instant is truncated to whole seconds and expressed in JST,
    e.g. ``2016-05-01T09:00:00+09:00``.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        msg = f"Punch time must be timezone aware: {value!r}"
        raise ValueError(msg)
    return value.replace(microsecond=0).astimezone(JST).isoformat()


def format_date(value: date) -> str:
    """Format a calendar date as YYYY-MM-DD."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()
