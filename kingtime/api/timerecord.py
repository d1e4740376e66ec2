"""Time record listing and submission."""

import datetime as dt
import logging
from collections.abc import Sequence

from pydantic import AwareDatetime, field_serializer

from kingtime import transport
from kingtime.api.base import endpoint
from kingtime.envelope import WireList, WireModel
from kingtime.errors import UnexpectedShapeError
from kingtime.wire import WireCode, format_date, format_punch_time

logger = logging.getLogger(__name__)


class TimeRecord(WireModel):
    """A single punch."""

    time: AwareDatetime
    code: WireCode
    name: str | None = None


class TimeRecordDailyWorking(WireModel):
    """Punches of one employee for one day, in no particular order."""

    date: dt.date
    employee_key: str
    time_record: tuple[TimeRecord, ...] = ()


class TimeRecordDailyWorkings(WireModel):
    """Punches of the queried employees for one date."""

    date: dt.date
    daily_workings: tuple[TimeRecordDailyWorking, ...]


class TimeRecordResponse(WireList[TimeRecordDailyWorkings]):
    """Body of the time record listing, ordered by date."""


class Request(WireModel):
    """Punch submission."""

    date: dt.date
    time: AwareDatetime
    code: WireCode

    @field_serializer("date")
    def serialize_date(self, value: dt.date) -> str:
        return format_date(value)

    @field_serializer("time")
    def serialize_time(self, value: dt.datetime) -> str:
        return format_punch_time(value)


class PostResponse(WireModel):
    """Empty body returned when a punch is accepted."""


def get(
    access_token: str,
    employee_keys: Sequence[str],
    start: dt.date,
    end: dt.date,
    *,
    base_url: str | None = None,
) -> TimeRecordResponse:
    """
    List the punches of one or more employees.

    Args:
        access_token: Bearer token.
        employee_keys: Employee keys, not employee codes.
        start: First date, inclusive.
        end: Last date, inclusive.
        base_url: Override for the API root.
    """
    if isinstance(employee_keys, str):
        employee_keys = [employee_keys]
    if not employee_keys:
        msg = "At least one employee key is required"
        raise ValueError(msg)
    params = {
        "employeeKeys": ",".join(employee_keys),
        "start": format_date(start),
        "end": format_date(end),
    }
    url = endpoint("/daily-workings/timerecord", base_url=base_url)
    return transport.get_with_query(access_token, url, params, TimeRecordResponse)


def post(access_token: str, key: str, request: Request, *, base_url: str | None = None) -> None:
    """Submit a punch for the employee identified by `key`."""
    url = endpoint("/daily-workings/timerecord", key, base_url=base_url)
    transport.post(access_token, url, request, PostResponse)
    logger.info("Recorded %s at %s", request.code.name, format_punch_time(request.time))


def single_daily_working(
    response: TimeRecordResponse, employee_key: str, day: dt.date
) -> TimeRecordDailyWorking:
    """
    Extract the only entry of a single-employee, single-date listing.

    Raises:
        UnexpectedShapeError: the response holds anything other than exactly
            one date with exactly one entry for `employee_key` on `day`.
    """
    if len(response) != 1:
        msg = f"Expected 1 date in time records, got {len(response)}"
        raise UnexpectedShapeError(msg)
    daily_workings = response[0].daily_workings
    if len(daily_workings) != 1:
        msg = f"Expected 1 daily working for {day}, got {len(daily_workings)}"
        raise UnexpectedShapeError(msg)
    daily_working = daily_workings[0]
    if daily_working.date != day or daily_working.employee_key != employee_key:
        msg = (
            f"Expected time records of {employee_key} on {day}, "
            f"got {daily_working.employee_key} on {daily_working.date}"
        )
        raise UnexpectedShapeError(msg)
    return daily_working


def get_for_employee(
    access_token: str, employee_key: str, day: dt.date, *, base_url: str | None = None
) -> list[TimeRecord]:
    """Punches of one employee on one day, sorted by time."""
    response = get(access_token, [employee_key], day, day, base_url=base_url)
    daily_working = single_daily_working(response, employee_key, day)
    return sorted(daily_working.time_record, key=lambda record: record.time)
