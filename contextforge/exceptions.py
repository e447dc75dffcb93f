"""
Domain-specific exceptions for the ContextForge client.

This module contains the exception classes raised while building requests,
dispatching them, classifying error responses and decoding response bodies.
"""

from datetime import datetime

import requests
from pydantic import BaseModel

from .utils.url_utils import sanitize_url


_ZERO_RESET = "0001-01-01 00:00:00 +0000 UTC"


def _format_reset(
    reset: datetime | None,
) -> str:
    """Render a reset time with its numeric offset and zone abbreviation.

    Zero offsets are labelled UTC; any other offset repeats its numeric form.
    """
    if reset is None:
        return _ZERO_RESET
    offset = reset.strftime("%z")
    zone = "UTC" if offset in ("", "+0000") else offset
    return f"{reset.strftime('%Y-%m-%d %H:%M:%S')} {offset or '+0000'} {zone}"


class ContextForgeError(Exception):
    """Base exception for all ContextForge client operations."""

    pass


# API error responses


class ErrorDetail(BaseModel):
    """A single structured sub-error reported by the API."""

    resource: str = ""
    field: str = ""
    code: str = ""
    message: str = ""

    def __str__(self) -> str:
        return (
            f"{{Resource:{self.resource} Field:{self.field} "
            f"Code:{self.code} Message:{self.message}}}"
        )


class ErrorResponse(ContextForgeError):
    """The API answered with a non-2xx status.

    Attributes:
        response: The underlying requests.Response
        message: Message decoded from the body, or the trimmed raw body
        errors: Structured sub-errors decoded from the body
    """

    def __init__(
        self,
        response: requests.Response,
        message: str = "",
        errors: list[ErrorDetail] | None = None,
    ):
        self.response = response
        self.message = message
        self.errors = errors or []
        super().__init__(self._format())

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def _detail(self) -> str:
        if self.message:
            return self.message
        if self.errors:
            return "[" + " ".join(str(e) for e in self.errors) + "]"
        return ""

    def _format(self) -> str:
        request = self.response.request
        method = request.method if request is not None else ""
        url = request.url if request is not None else self.response.url
        text = f"{method} {sanitize_url(url)}; {self.response.status_code}"
        detail = self._detail()
        if detail:
            text = f"{text} {detail}"
        return text

    def __str__(self) -> str:
        return self._format()


class RateLimitError(ErrorResponse):
    """The API answered 429 Too Many Requests.

    Attributes:
        rate: Rate-limit counters parsed from the response headers
    """

    def __init__(
        self,
        response: requests.Response,
        rate,
        message: str = "",
        errors: list[ErrorDetail] | None = None,
    ):
        self.rate = rate
        super().__init__(response, message, errors)

    def _format(self) -> str:
        return (
            f"{super()._format()} (rate limit; "
            f"{self.rate.remaining}/{self.rate.limit}, reset at {_format_reset(self.rate.reset)})"
        )


# Context errors


class ContextError(ContextForgeError):
    """The request context ended before the call completed."""

    pass


class ContextCancelledError(ContextError):
    """The request context was cancelled."""

    def __init__(self):
        super().__init__("context canceled")


class DeadlineExceededError(ContextError, TimeoutError):
    """The request context's deadline passed."""

    def __init__(self):
        super().__init__("context deadline exceeded")


# Decode errors


class ListDecodeError(ContextForgeError, ValueError):
    """A list response matched neither the bare-array nor the envelope shape."""

    pass


class ResponseDecodeError(ContextForgeError, ValueError):
    """A success body could not be decoded into the requested type."""

    pass
