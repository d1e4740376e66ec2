"""Daily workings listing."""

import datetime as dt

from kingtime import transport
from kingtime.api.base import endpoint
from kingtime.envelope import WireList, WireModel


class DailyWorking(WireModel):
    """One employee's attendance summary for one day (minutes for the durations)."""

    date: dt.date
    employee_key: str
    is_closing: bool | None = None
    is_help: bool | None = None
    is_error: bool | None = None
    workday_type_name: str | None = None
    assigned: int | None = None
    unassigned: int | None = None
    overtime: int | None = None
    late_night: int | None = None
    break_time: int | None = None
    late: int | None = None
    early_leave: int | None = None
    total_work: int | None = None


class DailyWorkings(WireModel):
    """Daily workings of every visible employee for one date."""

    date: dt.date
    daily_workings: tuple[DailyWorking, ...]


class DailyWorkingsResponse(WireList[DailyWorkings]):
    """Body of the daily workings listing, ordered by date."""


def get(access_token: str, *, base_url: str | None = None) -> DailyWorkingsResponse:
    """List the daily workings the token can see."""
    url = endpoint("/daily-workings", base_url=base_url)
    return transport.get(access_token, url, DailyWorkingsResponse)
