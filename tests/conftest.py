"""
Root conftest for pytest configuration and shared fixtures.

Provides a requests.Session stand-in that records outgoing requests and
replays queued responses, so the client can be exercised end to end without
network access.
"""

import io
import json
import logging
from collections.abc import Callable
from typing import Any

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from contextforge.core.client import Client
from contextforge.core.context import RequestContext

logger = logging.getLogger(__name__)


TEST_ADDRESS = "https://gateway.example.com/api/"
TEST_TOKEN = "test-token-1234567890"


def build_response(
    request: requests.PreparedRequest,
    status: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
    raw: Any = None,
) -> requests.Response:
    """Build a requests.Response as the transport would return it."""
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status
    response.headers = CaseInsensitiveDict(headers or {})
    if content and "Content-Type" not in response.headers:
        response.headers["Content-Type"] = "application/json"
    response.raw = raw if raw is not None else io.BytesIO(content)
    response.url = request.url
    response.request = request
    return response


class StubSession(requests.Session):
    """Session that records sent requests and replays queued responses."""

    def __init__(self):
        super().__init__()
        self.trust_env = False
        self.sent: list[requests.PreparedRequest] = []
        self.send_kwargs: list[dict[str, Any]] = []
        self._queue: list[Callable[[requests.PreparedRequest], requests.Response]] = []
        self.closed = False

    def queue(
        self,
        status: int = 200,
        body: Any = None,
        headers: dict[str, str] | None = None,
        raw: Any = None,
    ) -> None:
        """Queue a response for the next send()."""
        self._queue.append(
            lambda request: build_response(request, status, body, headers, raw)
        )

    def queue_callable(
        self,
        handler: Callable[[requests.PreparedRequest], requests.Response],
    ) -> None:
        """Queue a handler that produces the response (or raises)."""
        self._queue.append(handler)

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.send_kwargs.append(kwargs)
        if not self._queue:
            return build_response(request, 200, None)
        return self._queue.pop(0)(request)

    def close(self):
        self.closed = True
        super().close()

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.sent[-1]

    def last_json(self) -> Any:
        """JSON body of the last request, or None without one."""
        body = self.last_request.body
        if body is None:
            return None
        return json.loads(body)


@pytest.fixture
def session() -> StubSession:
    """Recording session with no queued responses."""
    return StubSession()


@pytest.fixture
def client(session) -> Client:
    """Client bound to the recording session."""
    return Client(
        session=session,
        address=TEST_ADDRESS,
        bearer_token=TEST_TOKEN,
    )


@pytest.fixture
def ctx() -> RequestContext:
    """Live context with no deadline."""
    return RequestContext.background()
