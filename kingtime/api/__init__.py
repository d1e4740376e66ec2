"""KING OF TIME API endpoints."""

from kingtime.api import daily_workings, employees, timerecord
from kingtime.api.base import BASE_URL

__all__ = ["BASE_URL", "daily_workings", "employees", "timerecord"]
