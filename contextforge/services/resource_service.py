"""
Resources API service.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.context import RequestContext
from ..schemas.common import CreateOptions
from ..schemas.pagination import ResourceInfoOptions, ResourceListOptions
from ..schemas.resource_models import (
    ListResourceTemplatesResult,
    Resource,
    ResourceContent,
    ResourceCreate,
    ResourceUpdate,
)
from ..schemas.response import Response
from ..utils.url_utils import add_options, escape_path_segment
from .base import BaseService, state_path


logger = logging.getLogger(__name__)


class ResourcesService(BaseService):
    """CRUD, content reads and state changes for resources."""

    def list(
        self,
        ctx: RequestContext | None,
        opts: ResourceListOptions | None = None,
    ) -> tuple[list[Resource], Response]:
        """
        List resources.

        Pagination is always requested; the next cursor is exposed as
        response.next_cursor.
        """
        opts = (opts or ResourceListOptions()).model_copy(update={"include_pagination": True})
        return self._list(ctx, "resources", opts, "resources", Resource)

    def get(
        self,
        ctx: RequestContext | None,
        resource_id: str,
    ) -> tuple[ResourceContent | None, Response]:
        """
        Read a resource's content.

        Use get_info() for the resource's metadata.
        """
        return self._send(
            ctx,
            "GET",
            f"resources/{escape_path_segment(resource_id)}",
            dest=ResourceContent,
        )

    def get_info(
        self,
        ctx: RequestContext | None,
        resource_id: str,
        opts: ResourceInfoOptions | None = None,
    ) -> tuple[Resource | None, Response]:
        path = add_options(f"resources/{escape_path_segment(resource_id)}/info", opts)
        return self._send(ctx, "GET", path, dest=Resource)

    def create(
        self,
        ctx: RequestContext | None,
        resource: ResourceCreate,
        opts: CreateOptions | None = None,
    ) -> tuple[Resource | None, Response]:
        logger.info(f"Creating resource: {resource.uri}")
        body = self._create_body("resource", resource, opts)
        return self._send(ctx, "POST", "resources", body=body, dest=Resource)

    def update(
        self,
        ctx: RequestContext | None,
        resource_id: str,
        resource: ResourceUpdate,
    ) -> tuple[Resource | None, Response]:
        """
        Update a resource.

        Only fields assigned on the ResourceUpdate are sent; assigning an
        empty value clears the field.
        """
        logger.info(f"Updating resource: {resource_id}")
        return self._send(
            ctx,
            "PUT",
            f"resources/{escape_path_segment(resource_id)}",
            body=resource,
            dest=Resource,
        )

    def delete(
        self,
        ctx: RequestContext | None,
        resource_id: str,
    ) -> Response:
        logger.info(f"Deleting resource: {resource_id}")
        _, response = self._send(ctx, "DELETE", f"resources/{escape_path_segment(resource_id)}")
        return response

    def set_state(
        self,
        ctx: RequestContext | None,
        resource_id: str,
        activate: bool,
    ) -> tuple[Resource, Response]:
        return self._set_state(ctx, resource_id, activate, "state")

    def toggle(
        self,
        ctx: RequestContext | None,
        resource_id: str,
        activate: bool,
    ) -> tuple[Resource, Response]:
        return self._set_state(ctx, resource_id, activate, "toggle")

    def _set_state(
        self,
        ctx: RequestContext | None,
        resource_id: str,
        activate: bool,
        endpoint: str,
    ) -> tuple[Resource, Response]:
        """
        Change a resource's state.

        The endpoint answers {"status", "message", "resource"} with the
        resource in snake_case.

        Raises:
            ValueError: If the response has no resource
            ResponseDecodeError: If the resource in the reply is malformed
        """
        logger.info(f"Setting resource {resource_id} active={activate}")
        result, response = self._send(
            ctx,
            "POST",
            state_path("resources", resource_id, endpoint, activate),
            dest=dict[str, Any],
        )
        resource_data = (result or {}).get("resource")
        if resource_data is None:
            raise ValueError("toggle response missing 'resource' field")
        return self._decode_nested(resource_data, Resource), response

    def list_templates(
        self,
        ctx: RequestContext | None,
    ) -> tuple[ListResourceTemplatesResult | None, Response]:
        return self._send(ctx, "GET", "resources/templates/list", dest=ListResourceTemplatesResult)
