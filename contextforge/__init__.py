"""
ContextForge MCP Gateway API client.

Typed access to the ContextForge management API (tools, resources, gateways,
servers, prompts, A2A agents, teams and cancellation) over requests, with
pydantic models normalizing the upstream API's mixed wire conventions.

Usage:
    from contextforge import Client, RequestContext

    client = Client(bearer_token="your-jwt-token")
    tools, response = client.tools.list(RequestContext.background())
"""

__version__ = "0.1.0"

from .core.client import Client
from .core.context import RequestContext
from .exceptions import (
    ContextCancelledError,
    ContextError,
    ContextForgeError,
    DeadlineExceededError,
    ErrorResponse,
    ListDecodeError,
    RateLimitError,
    ResponseDecodeError,
)
from .schemas.partial import UNSET, is_set
from .schemas.response import Rate, Response
from .schemas.scalars import FlexibleID, Tag, Timestamp, new_tags, tag_names

__all__ = [
    "__version__",
    "Client",
    "RequestContext",
    "ContextForgeError",
    "ContextError",
    "ContextCancelledError",
    "DeadlineExceededError",
    "ErrorResponse",
    "RateLimitError",
    "ListDecodeError",
    "ResponseDecodeError",
    "UNSET",
    "is_set",
    "Rate",
    "Response",
    "FlexibleID",
    "Tag",
    "Timestamp",
    "new_tags",
    "tag_names",
]
