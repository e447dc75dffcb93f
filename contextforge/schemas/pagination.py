"""
List options and the dual-shape list response decoder.

Collection endpoints answer either with a bare JSON array or, when
include_pagination is requested, with an envelope object:

    {"tools": [...], "nextCursor": "abc"}

decode_list_response() normalizes both shapes into (items, cursor).
"""

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..exceptions import ListDecodeError


logger = logging.getLogger(__name__)

T = TypeVar("T")

NEXT_CURSOR_FIELD = "nextCursor"


class ListOptions(BaseModel):
    """Cursor pagination options shared by list endpoints."""

    limit: int = 0
    cursor: str = ""
    include_pagination: bool = False


class _FilteredListOptions(ListOptions):
    include_inactive: bool = False
    tags: str = ""
    team_id: str = ""
    visibility: str = ""


class ToolListOptions(_FilteredListOptions):
    """Filters for listing tools."""


class ResourceListOptions(_FilteredListOptions):
    """Filters for listing resources."""


class ServerListOptions(_FilteredListOptions):
    """Filters for listing servers."""


class PromptListOptions(_FilteredListOptions):
    """Filters for listing prompts."""


class GatewayListOptions(ListOptions):
    """Filters for listing gateways."""

    include_inactive: bool = False


class AgentListOptions(BaseModel):
    """Filters for listing A2A agents.

    Agents accept the legacy offset parameter skip alongside cursor
    pagination.
    """

    skip: int = 0
    limit: int = 0
    cursor: str = ""
    include_pagination: bool = False
    include_inactive: bool = False
    tags: str = ""
    team_id: str = ""
    visibility: str = ""


class TeamListOptions(BaseModel):
    skip: int = 0
    limit: int = 0


class TeamDiscoverOptions(BaseModel):
    skip: int = 0
    limit: int = 0


class ServerAssociationOptions(BaseModel):
    """Options for listing the tools, resources or prompts of a server."""

    include_inactive: bool = False


class ResourceInfoOptions(BaseModel):
    include_inactive: bool = False


class GatewayRefreshOptions(BaseModel):
    """Which capability kinds to refresh alongside a gateway's tools."""

    include_resources: bool = False
    include_prompts: bool = False


@lru_cache(maxsize=None)
def _list_adapter(
    item_type: type,
) -> TypeAdapter:
    return TypeAdapter(list[item_type])


def decode_list_response(
    raw: Any,
    key: str,
    item_type: type[T],
) -> tuple[list[T], str]:
    """Decode a list response that may be a bare array or an envelope.

    The bare-array shape is tried first. Otherwise the payload must be an
    object carrying the items under key; nextCursor is read when it is a
    string and ignored otherwise.

    Args:
        raw: Parsed JSON value, or the raw body as bytes/str
        key: Name of the items field in the envelope shape
        item_type: Model type of each item

    Returns:
        Tuple of (items, next cursor); the cursor is "" when absent

    Raises:
        ListDecodeError: If neither shape matches, the key is missing, or the
            items field does not decode
    """
    if isinstance(raw, (bytes, bytearray, str)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ListDecodeError(f"decode list response: {e}") from e

    if raw is None:
        return [], ""

    adapter = _list_adapter(item_type)
    try:
        return adapter.validate_python(raw), ""
    except ValidationError as e:
        array_error = e

    if not isinstance(raw, dict):
        raise ListDecodeError(f"decode list response: {array_error}")

    if key not in raw:
        raise ListDecodeError(f'decode list response: missing "{key}" field')

    items_raw = raw[key]
    if items_raw is None:
        items = []
    else:
        try:
            items = adapter.validate_python(items_raw)
        except ValidationError as e:
            raise ListDecodeError(f"decode list response items: {e}") from e

    next_cursor = raw.get(NEXT_CURSOR_FIELD)
    if not isinstance(next_cursor, str):
        next_cursor = ""

    logger.debug(f"Decoded {len(items)} {key} from envelope (cursor={next_cursor!r})")
    return items, next_cursor
