"""Decoding of response bodies into a success payload or an API error."""

import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, ValidationError
from pydantic.alias_generators import to_camel

from kingtime.errors import ApiError, DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D", bound=BaseModel)


class WireModel(BaseModel):
    """Immutable model with camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class WireList(RootModel[tuple[T, ...]], Generic[T]):
    """Immutable sequence body, decoded from a JSON array."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> T:
        return self.root[index]


class ErrorData(WireModel):
    """One error reported by the API."""

    message: str
    code: int


class ErrorEnvelope(WireModel):
    """Body returned instead of the payload when a call fails."""

    errors: list[ErrorData]


def decode(body: Any, response_type: type[D]) -> D:
    """
    Decode a parsed JSON body.

    The error shape is tried first; anything else must match `response_type`.

    Raises:
        ApiError: the body is an error envelope.
        DecodeError: the body matches neither shape.
    """
    try:
        envelope = ErrorEnvelope.model_validate(body)
    except ValidationError:
        pass
    else:
        logger.warning("API returned %d error(s): %s", len(envelope.errors), envelope.errors)
        raise ApiError(envelope.errors)

    try:
        return response_type.model_validate(body)
    except ValidationError as e:
        msg = f"Unexpected {response_type.__name__} body: {e}"
        raise DecodeError(msg) from e
