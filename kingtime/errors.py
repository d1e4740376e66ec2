"""Custom exceptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kingtime.envelope import ErrorData


class KingtimeError(Exception):
    """Base exception for kingtime."""


class TransportError(KingtimeError):
    """Raised when the HTTP exchange itself fails."""


class ApiError(KingtimeError):
    """Raised when the API answers with an error envelope."""

    def __init__(self, errors: "list[ErrorData]") -> None:
        self.errors = errors
        super().__init__("; ".join(f"{error.message} ({error.code})" for error in errors))


class DecodeError(KingtimeError, ValueError):
    """Raised when a response body matches neither the error nor the expected shape."""


class UnknownCodeError(DecodeError):
    """Raised when a time record code is not one of the known literals."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown time record code: {value!r}")


class UnexpectedShapeError(KingtimeError):
    """Raised when a response does not have the shape the query implies."""


class ConfigNotFoundError(KingtimeError):
    """Raised when configuration is not found."""
