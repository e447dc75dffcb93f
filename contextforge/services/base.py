"""
Shared plumbing for the resource services.
"""

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from ..core.context import RequestContext
from ..exceptions import ResponseDecodeError
from ..schemas.common import CreateOptions
from ..schemas.pagination import decode_list_response
from ..schemas.response import Response
from ..utils.url_utils import add_options, escape_path_segment

if TYPE_CHECKING:
    from ..core.client import Client


logger = logging.getLogger(__name__)


def state_path(
    collection: str,
    resource_id: Any,
    endpoint: str,
    activate: bool,
) -> str:
    """Path for a state change, e.g. tools/abc/toggle?activate=true."""
    flag = "true" if activate else "false"
    return f"{collection}/{escape_path_segment(resource_id)}/{endpoint}?activate={flag}"


class BaseService:
    """Base class holding the client a service dispatches through."""

    def __init__(
        self,
        client: "Client",
    ):
        self._client = client

    def _send(
        self,
        ctx: RequestContext | None,
        method: str,
        path: str,
        body: Any = None,
        dest: Any = None,
    ) -> tuple[Any, Response]:
        request = self._client.new_request(method, path, body)
        return self._client.do(ctx, request, dest)

    def _list(
        self,
        ctx: RequestContext | None,
        path: str,
        options: BaseModel | None,
        key: str,
        item_type: type,
    ) -> tuple[list, Response]:
        """GET a collection that may come back bare or in an envelope."""
        raw, response = self._send(ctx, "GET", add_options(path, options), dest=Any)
        items, next_cursor = decode_list_response(raw, key, item_type)
        if next_cursor:
            response.next_cursor = next_cursor
        return items, response

    def _get_array(
        self,
        ctx: RequestContext | None,
        path: str,
        item_type: type,
    ) -> tuple[list, Response]:
        """GET a collection that always comes back as a bare array."""
        items, response = self._send(ctx, "GET", path, dest=list[item_type])
        return items or [], response

    @staticmethod
    def _create_body(
        key: str,
        payload: Any,
        opts: CreateOptions | None,
    ) -> dict[str, Any]:
        """Wrap a create payload under key, adding team and visibility."""
        body = {key: payload}
        if opts is not None:
            body.update(opts.fields())
        return body

    @staticmethod
    def _decode_nested(
        data: Any,
        model: type[BaseModel],
    ) -> BaseModel:
        """Validate an object nested inside a decoded reply."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ResponseDecodeError(f"decode response body: {e}") from e
