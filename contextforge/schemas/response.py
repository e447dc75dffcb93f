"""
Response envelope returned alongside every decoded result.
"""

from datetime import datetime
from typing import Any

import requests
from pydantic import BaseModel


class Rate(BaseModel):
    """Rate-limit counters reported by the API.

    Missing or unparseable headers leave the corresponding field at zero
    (or None for reset).
    """

    limit: int = 0
    remaining: int = 0
    reset: datetime | None = None


class Response:
    """Wraps a requests.Response with pagination and rate-limit metadata.

    Attribute access not defined here falls through to the wrapped response,
    so response.json(), response.url and friends keep working.

    Attributes:
        http_response: The underlying requests.Response
        next_cursor: Continuation cursor from X-Next-Cursor or the body envelope
        rate: Rate-limit counters from the X-Ratelimit-* headers
    """

    def __init__(
        self,
        http_response: requests.Response,
        next_cursor: str = "",
        rate: Rate | None = None,
    ):
        self.http_response = http_response
        self.next_cursor = next_cursor
        self.rate = rate if rate is not None else Rate()

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> Any:
        return self.http_response.headers

    def __getattr__(
        self,
        name: str,
    ) -> Any:
        if name == "http_response":
            raise AttributeError(name)
        return getattr(self.http_response, name)

    def __repr__(self) -> str:
        return (
            f"<Response [{self.status_code}] next_cursor={self.next_cursor!r} "
            f"rate={self.rate.remaining}/{self.rate.limit}>"
        )
