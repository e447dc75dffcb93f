"""
ContextForge API client: request builder and response dispatcher.

Every resource service goes through two steps:

1. new_request() resolves a relative path against the configured address,
   serializes the body to JSON and attaches the standard headers.
2. do() sends the request under a RequestContext, always reads and closes the
   body, classifies the status code and decodes a success body into the
   requested type.

The client's mutable configuration (address, token, user agent, session) is
guarded by one lock that is never held across network I/O.
"""

import json
import logging
import threading
from functools import lru_cache
from typing import Any
from urllib.parse import urlsplit

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError
from requests.auth import AuthBase
from requests.structures import CaseInsensitiveDict

from ..exceptions import (
    ContextError,
    ErrorDetail,
    ErrorResponse,
    RateLimitError,
    ResponseDecodeError,
)
from ..schemas.partial import PartialModel
from ..schemas.response import Rate, Response
from ..schemas.scalars import parse_rfc3339
from ..services import (
    AgentsService,
    CancellationService,
    GatewaysService,
    PromptsService,
    ResourcesService,
    ServersService,
    TeamsService,
    ToolsService,
)
from ..utils.url_utils import resolve_reference, sanitize_url
from .config import DEFAULT_ADDRESS, DEFAULT_USER_AGENT, Settings
from .context import RequestContext

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s,p%(process)s,{%(filename)s:%(lineno)d},%(levelname)s,%(message)s",
)
logger = logging.getLogger(__name__)


HEADER_RATE_LIMIT = "X-Ratelimit-Limit"
HEADER_RATE_REMAINING = "X-Ratelimit-Remaining"
HEADER_RATE_RESET = "X-Ratelimit-Reset"
HEADER_NEXT_CURSOR = "X-Next-Cursor"

MEDIA_TYPE_JSON = "application/json"

# Pass as dest to do() to get the parsed JSON value back undecoded
RAW = Any

_CHUNK_SIZE = 8192


def _redact_token(
    token: str,
) -> str:
    return f"{token[:8]}..." if len(token) > 8 else "***"


class BearerAuth(AuthBase):
    """Attach a bearer token, taking precedence over userinfo in the URL."""

    def __init__(
        self,
        token: str,
    ):
        self.token = token

    def __call__(
        self,
        request: requests.PreparedRequest,
    ) -> requests.PreparedRequest:
        request.headers["Authorization"] = f"Bearer {self.token}"
        return request


def _normalize_address(
    address: str,
) -> str:
    """Validate a base address and make sure it ends with '/'."""
    parts = urlsplit(address)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"invalid address {address!r}: scheme and host are required")
    if not address.endswith("/"):
        address += "/"
    return address


def _to_jsonable(
    value: Any,
) -> Any:
    """Convert a request body into plain JSON values.

    Partial-update models keep only their assigned fields; other models drop
    None fields so optional values are omitted rather than sent as null.
    """
    if isinstance(value, PartialModel):
        return value.to_payload()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, dict):
        return {key: _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


@lru_cache(maxsize=None)
def _adapter(
    dest: Any,
) -> TypeAdapter:
    return TypeAdapter(dest)


def _parse_int(
    value: str | None,
) -> int:
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


def parse_rate(
    headers: Any,
) -> Rate:
    """Extract rate-limit counters from response headers.

    Missing or malformed headers leave the corresponding field at its zero
    value.

    Args:
        headers: Response headers (any mapping; lookups are case-insensitive)

    Returns:
        Rate with limit, remaining and reset
    """
    headers = CaseInsensitiveDict(headers or {})
    reset = None
    reset_text = headers.get(HEADER_RATE_RESET)
    if reset_text:
        try:
            reset = parse_rfc3339(reset_text.strip())
        except ValueError:
            logger.debug(f"Ignoring unparseable {HEADER_RATE_RESET} header: {reset_text!r}")

    return Rate(
        limit=_parse_int(headers.get(HEADER_RATE_LIMIT)),
        remaining=_parse_int(headers.get(HEADER_RATE_REMAINING)),
        reset=reset,
    )


def parse_cursor(
    headers: Any,
) -> str:
    """Extract the pagination cursor from the X-Next-Cursor header."""
    headers = CaseInsensitiveDict(headers or {})
    return headers.get(HEADER_NEXT_CURSOR) or ""


def _decode_error_body(
    body: bytes,
) -> tuple[str, list[ErrorDetail]]:
    """Best-effort decode of an error body into (message, errors).

    Bodies that are not a JSON object fall back to the trimmed raw text.
    """
    text = body.decode("utf-8", errors="replace").strip()
    if not text:
        return "", []

    try:
        payload = json.loads(text)
    except ValueError:
        return text, []
    if not isinstance(payload, dict):
        return text, []

    message = payload.get("message")
    if not isinstance(message, str) or not message:
        detail = payload.get("detail")
        if isinstance(detail, str):
            message = detail
        elif detail is not None:
            message = json.dumps(detail, sort_keys=True)
        else:
            message = ""

    errors = []
    raw_errors = payload.get("errors")
    if isinstance(raw_errors, list):
        for item in raw_errors:
            try:
                errors.append(ErrorDetail.model_validate(item))
            except ValidationError:
                logger.debug(f"Skipping malformed error entry: {item!r}")

    if not message and not errors:
        return text, []
    return message, errors


def check_response(
    response: requests.Response,
    body: bytes | None = None,
) -> None:
    """Classify a response by status code.

    Args:
        response: Response to check
        body: Already-read body; defaults to response.content

    Raises:
        RateLimitError: For 429 Too Many Requests
        ErrorResponse: For any other non-2xx status
    """
    if 200 <= response.status_code <= 299:
        return

    if body is None:
        body = response.content or b""
    message, errors = _decode_error_body(body)

    if response.status_code == 429:
        raise RateLimitError(
            response,
            rate=parse_rate(response.headers),
            message=message,
            errors=errors,
        )
    raise ErrorResponse(response, message=message, errors=errors)


class Client:
    """
    ContextForge MCP Gateway API client.

    Provides typed services for the management API:
    - tools, resources, gateways, servers, prompts
    - agents (A2A), teams, cancellation

    Example:
        client = Client(address="https://gateway.example.com/", bearer_token=token)
        with RequestContext.with_timeout(10) as ctx:
            tool, response = client.tools.get(ctx, "tool-id")
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        address: str = DEFAULT_ADDRESS,
        bearer_token: str = "",
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ):
        """
        Initialize the client.

        Args:
            session: Transport to send requests with; a private
                requests.Session is created (and closed by close()) if omitted
            address: Base URL of the API; a missing trailing slash is added
            bearer_token: Token sent as Authorization: Bearer, or "" for none
            user_agent: Value of the User-Agent header
            timeout: Per-request transport timeout in seconds, or None

        Raises:
            ValueError: If the address has no scheme or host
        """
        self._config_lock = threading.Lock()
        self._rate_lock = threading.Lock()

        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._address = _normalize_address(address)
        self._bearer_token = bearer_token
        self._user_agent = user_agent
        self.timeout = timeout
        self._rate = Rate()

        self.tools = ToolsService(self)
        self.resources = ResourcesService(self)
        self.gateways = GatewaysService(self)
        self.servers = ServersService(self)
        self.prompts = PromptsService(self)
        self.agents = AgentsService(self)
        self.teams = TeamsService(self)
        self.cancel = CancellationService(self)

        token_info = _redact_token(bearer_token) if bearer_token else "none"
        logger.info(f"Initialized ContextForge client for {sanitize_url(self._address)} (token: {token_info})")

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ) -> "Client":
        """Build a client from CONTEXTFORGE_* environment settings."""
        if settings is None:
            settings = Settings()
        return cls(
            session=session,
            address=settings.addr,
            bearer_token=settings.token,
            user_agent=settings.user_agent,
            timeout=settings.timeout_seconds,
        )

    # Configuration, guarded by the config lock. Setters store the value as
    # given; new_request() rejects an address without a trailing slash.

    @property
    def address(self) -> str:
        with self._config_lock:
            return self._address

    @address.setter
    def address(self, value: str) -> None:
        with self._config_lock:
            self._address = value

    @property
    def bearer_token(self) -> str:
        with self._config_lock:
            return self._bearer_token

    @bearer_token.setter
    def bearer_token(self, value: str) -> None:
        with self._config_lock:
            self._bearer_token = value

    @property
    def user_agent(self) -> str:
        with self._config_lock:
            return self._user_agent

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        with self._config_lock:
            self._user_agent = value

    @property
    def session(self) -> requests.Session:
        with self._config_lock:
            return self._session

    @session.setter
    def session(self, value: requests.Session) -> None:
        with self._config_lock:
            self._session = value
            self._owns_session = False

    def rate_limits(self) -> Rate:
        """Rate-limit counters from the most recent response that carried them."""
        with self._rate_lock:
            return self._rate.model_copy()

    def close(self) -> None:
        with self._config_lock:
            if self._owns_session:
                self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
    ) -> requests.PreparedRequest:
        """
        Build a request for a path relative to the client address.

        Args:
            method: HTTP method
            path: Path relative to the address, optionally with a query
            body: Value to send as JSON, or None for no body

        Returns:
            Prepared request ready for do()

        Raises:
            ValueError: If the address lacks its trailing slash, the path does
                not parse, or the body cannot be serialized
        """
        with self._config_lock:
            address = self._address
            token = self._bearer_token
            user_agent = self._user_agent
            session = self._session

        if not address.endswith("/"):
            raise ValueError(f"Address must have a trailing slash, but {address!r} does not")

        url = resolve_reference(address, path)

        headers = {"Accept": MEDIA_TYPE_JSON}
        data = None
        if body is not None:
            try:
                data = json.dumps(_to_jsonable(body)).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise ValueError(f"encode request body: {e}") from e
            headers["Content-Type"] = MEDIA_TYPE_JSON
        if user_agent:
            headers["User-Agent"] = user_agent
        auth = BearerAuth(token) if token else None

        request = requests.Request(method=method, url=url, headers=headers, data=data, auth=auth)
        return session.prepare_request(request)

    def do(
        self,
        ctx: RequestContext | None,
        request: requests.PreparedRequest,
        dest: Any = None,
    ) -> tuple[Any, Response]:
        """
        Send a request and decode the response.

        The body is always read in full and the connection released, whatever
        the outcome. Cancelling ctx aborts the call before it is sent or while
        the body is being read; its deadline also bounds the transport timeout.

        Args:
            ctx: Cancellation context for this call (required)
            request: Request built by new_request()
            dest: Type to decode a success body into; None discards the body
                and RAW returns the parsed JSON value

        Returns:
            Tuple of (decoded value or None, response envelope)

        Raises:
            ValueError: If ctx is None
            ContextCancelledError: If ctx was cancelled
            DeadlineExceededError: If ctx's deadline passed
            RateLimitError: For a 429 response
            ErrorResponse: For any other non-2xx response
            ResponseDecodeError: If a success body does not decode into dest
            requests.RequestException: For transport failures
        """
        if ctx is None:
            raise ValueError("context must be non-nil")
        ctx.raise_if_done()

        session = self.session
        timeout = self._effective_timeout(ctx)

        logger.debug(f"{request.method} {sanitize_url(request.url)}")

        send_kwargs = session.merge_environment_settings(request.url, {}, True, None, None)
        try:
            http_response = session.send(request, timeout=timeout, **send_kwargs)
        except requests.RequestException as e:
            error = ctx.error()
            if error is not None:
                raise error from e
            raise

        body = self._read_body(ctx, http_response)

        response = Response(
            http_response,
            next_cursor=parse_cursor(http_response.headers),
            rate=parse_rate(http_response.headers),
        )
        if HEADER_RATE_LIMIT in http_response.headers:
            with self._rate_lock:
                self._rate = response.rate

        check_response(http_response, body)

        if dest is None:
            return None, response
        return self._decode(body, dest), response

    def _effective_timeout(
        self,
        ctx: RequestContext,
    ) -> float | None:
        remaining = ctx.remaining()
        if remaining is None:
            return self.timeout
        if self.timeout is None:
            return remaining
        return min(remaining, self.timeout)

    def _read_body(
        self,
        ctx: RequestContext,
        http_response: requests.Response,
    ) -> bytes:
        """Read the whole body, closing the response on every exit path."""
        unregister = ctx.on_cancel(http_response.close)
        try:
            chunks = []
            for chunk in http_response.iter_content(chunk_size=_CHUNK_SIZE):
                ctx.raise_if_done()
                chunks.append(chunk)
            body = b"".join(chunks)
        except Exception as e:
            error = ctx.error()
            if error is None or isinstance(e, ContextError):
                raise
            raise error from e
        finally:
            unregister()
            http_response.close()

        # Keep the body available through response.content and .json()
        http_response._content = body
        http_response._content_consumed = True
        return body

    def _decode(
        self,
        body: bytes,
        dest: Any,
    ) -> Any:
        if not body.strip():
            return None
        try:
            parsed = json.loads(body)
        except ValueError as e:
            raise ResponseDecodeError(f"decode response body: {e}") from e
        if parsed is None or dest is RAW:
            return parsed
        try:
            return _adapter(dest).validate_python(parsed)
        except ValidationError as e:
            raise ResponseDecodeError(f"decode response body: {e}") from e
