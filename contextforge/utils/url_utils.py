"""
URL utilities for building ContextForge API request URLs.

Provides path-segment escaping, query-string encoding of list options,
relative reference resolution against the client address, and credential
redaction for URLs that end up in error messages.
"""

import logging
from typing import Any
from urllib.parse import (
    parse_qsl,
    quote,
    urlencode,
    urljoin,
    urlsplit,
    urlunsplit,
)

from pydantic import BaseModel

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s,p%(process)s,{%(filename)s:%(lineno)d},%(levelname)s,%(message)s",
)
logger = logging.getLogger(__name__)


REDACTED = "REDACTED"

# Characters a single path segment may carry unescaped ('/' is always escaped)
_PATH_SEGMENT_SAFE = "$&+:=@"


def escape_path_segment(
    value: Any,
) -> str:
    """Escape a value so it can be placed inside a single URL path segment.

    Args:
        value: Identifier, name, email or token to embed in a path

    Returns:
        Percent-encoded segment
    """
    return quote(str(value), safe=_PATH_SEGMENT_SAFE)


def _query_value(
    value: Any,
) -> str:
    """Render a query parameter value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def add_options(
    path: str,
    options: BaseModel | None,
) -> str:
    """Append list options to a relative path as a query string.

    Zero values (0, "", False, None) are omitted, matching the API's
    "unset means default" convention. Keys are emitted in sorted order.

    Args:
        path: Relative API path, optionally with an existing query
        options: Options model, or None for no options

    Returns:
        Path with the encoded query string
    """
    if options is None:
        return path

    params = {
        key: _query_value(value)
        for key, value in options.model_dump().items()
        if value
    }
    if not params:
        return path

    parts = urlsplit(path)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query.update(params)
    encoded = urlencode(sorted(query.items()))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, encoded, parts.fragment))


def resolve_reference(
    base: str,
    reference: str,
) -> str:
    """Resolve a relative API path against the client address.

    Standard relative-URL semantics apply, so a reference starting with '/'
    or containing '..' escapes the base path exactly as urljoin does.

    Args:
        base: Client address (must end with '/')
        reference: Relative path to resolve

    Returns:
        Absolute request URL

    Raises:
        ValueError: If the reference cannot be parsed as a URL
    """
    if reference.startswith(":"):
        raise ValueError(f'parse "{reference}": missing protocol scheme')
    first_segment = reference.split("/", 1)[0]
    parts = urlsplit(reference)
    if not parts.scheme and ":" in first_segment:
        raise ValueError(
            f'parse "{reference}": first path segment in URL cannot contain colon'
        )
    return urljoin(base, reference)


def sanitize_url(
    url: str | None,
) -> str | None:
    """Redact embedded credentials from a URL.

    Both the username and password are replaced, even when only a username
    is present; the rest of the URL is left intact.

    Args:
        url: URL that may contain userinfo

    Returns:
        URL safe to include in logs and error messages, or None for None
    """
    if url is None:
        return None

    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url

    host = parts.netloc.rsplit("@", 1)[1]
    netloc = f"{REDACTED}:{REDACTED}@{host}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
