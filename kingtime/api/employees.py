"""Employee lookup."""

from kingtime import transport
from kingtime.api.base import endpoint
from kingtime.envelope import WireModel


class Employee(WireModel):
    """Employee as returned by the lookup endpoint."""

    last_name: str
    first_name: str
    key: str
    code: str | None = None


def get(access_token: str, code: str, *, base_url: str | None = None) -> Employee:
    """Resolve an employee code into the employee, including the key other endpoints use."""
    url = endpoint("/employees", code, base_url=base_url)
    return transport.get(access_token, url, Employee)
