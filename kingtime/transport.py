"""Authenticated HTTP calls against the KING OF TIME API."""

import logging
from typing import Any, TypeVar

import requests
from pydantic import BaseModel

from kingtime.envelope import decode
from kingtime.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=BaseModel)

CONTENT_TYPE = "application/json; charset=utf-8"


def _headers(access_token: str) -> dict[str, str]:
    return {
        "Content-Type": CONTENT_TYPE,
        "Authorization": f"Bearer {access_token}",
    }


def json_body(payload: BaseModel) -> dict[str, Any]:
    """JSON object sent for `payload`."""
    return payload.model_dump(mode="json", by_alias=True)


def _request(
    method: str,
    access_token: str,
    url: str,
    response_type: type[D],
    *,
    params: dict[str, str] | None = None,
    payload: BaseModel | None = None,
) -> D:
    """Send one request and decode its body."""
    body = None if payload is None else json_body(payload)
    logger.debug("%s %s params=%s", method, url, params)
    try:
        response = requests.request(
            method,
            url,
            headers=_headers(access_token),
            params=params,
            json=body,
        )
    except requests.RequestException as e:
        msg = f"{method} {url} failed: {e}"
        raise TransportError(msg) from e

    logger.debug("%s %s -> %s", method, url, response.status_code)
    try:
        data = response.json()
    except ValueError as e:
        msg = f"{method} {url} returned a non-JSON body (HTTP {response.status_code})"
        raise DecodeError(msg) from e
    return decode(data, response_type)


def get(access_token: str, url: str, response_type: type[D]) -> D:
    """GET `url` and decode the body as `response_type`."""
    return _request("GET", access_token, url, response_type)


def get_with_query(
    access_token: str, url: str, params: dict[str, str], response_type: type[D]
) -> D:
    """GET `url` with URL-encoded query parameters."""
    return _request("GET", access_token, url, response_type, params=params)


def post(
    access_token: str, url: str, payload: BaseModel, response_type: type[D]
) -> D:
    """POST `payload` as JSON to `url`."""
    return _request("POST", access_token, url, response_type, payload=payload)
