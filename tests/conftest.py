"""Shared fixtures faking the KING OF TIME API."""

import json
from dataclasses import dataclass, field
from typing import Any

import pytest
import requests


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def json(self) -> Any:
        return json.loads(self.text)


@dataclass
class FakeApi:
    """Records outgoing requests and answers with queued bodies."""

    responses: list[FakeResponse | Exception] = field(default_factory=list)
    calls: list[dict[str, Any]] = field(default_factory=list)

    def reply(self, body: Any, status_code: int = 200) -> None:
        """Queue a JSON body."""
        self.responses.append(FakeResponse(json.dumps(body), status_code))

    def reply_text(self, text: str, status_code: int = 200) -> None:
        """Queue a raw body."""
        self.responses.append(FakeResponse(text, status_code))

    def fail(self, error: Exception) -> None:
        """Queue a transport failure."""
        self.responses.append(error)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_api(monkeypatch):
    """Replace requests.request with a FakeApi."""
    api = FakeApi()
    monkeypatch.setattr(requests, "request", api.request)
    return api
