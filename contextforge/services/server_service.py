"""
Virtual servers API service.
"""

from __future__ import annotations

import logging

from ..core.context import RequestContext
from ..schemas.common import CreateOptions
from ..schemas.pagination import ServerAssociationOptions, ServerListOptions
from ..schemas.prompt_models import Prompt
from ..schemas.resource_models import Resource
from ..schemas.response import Response
from ..schemas.server_models import Server, ServerCreate, ServerUpdate
from ..schemas.tool_models import Tool
from ..utils.url_utils import add_options, escape_path_segment
from .base import BaseService, state_path


logger = logging.getLogger(__name__)


class ServersService(BaseService):
    """CRUD, state changes and association listing for virtual servers."""

    def list(
        self,
        ctx: RequestContext | None,
        opts: ServerListOptions | None = None,
    ) -> tuple[list[Server], Response]:
        opts = (opts or ServerListOptions()).model_copy(update={"include_pagination": True})
        return self._list(ctx, "servers", opts, "servers", Server)

    def get(
        self,
        ctx: RequestContext | None,
        server_id: str,
    ) -> tuple[Server | None, Response]:
        return self._send(ctx, "GET", f"servers/{escape_path_segment(server_id)}", dest=Server)

    def create(
        self,
        ctx: RequestContext | None,
        server: ServerCreate,
        opts: CreateOptions | None = None,
    ) -> tuple[Server | None, Response]:
        logger.info(f"Creating server: {server.name}")
        body = self._create_body("server", server, opts)
        return self._send(ctx, "POST", "servers", body=body, dest=Server)

    def update(
        self,
        ctx: RequestContext | None,
        server_id: str,
        server: ServerUpdate,
    ) -> tuple[Server | None, Response]:
        logger.info(f"Updating server: {server_id}")
        return self._send(
            ctx,
            "PUT",
            f"servers/{escape_path_segment(server_id)}",
            body=server,
            dest=Server,
        )

    def delete(
        self,
        ctx: RequestContext | None,
        server_id: str,
    ) -> Response:
        logger.info(f"Deleting server: {server_id}")
        _, response = self._send(ctx, "DELETE", f"servers/{escape_path_segment(server_id)}")
        return response

    def set_state(
        self,
        ctx: RequestContext | None,
        server_id: str,
        activate: bool,
    ) -> tuple[Server | None, Response]:
        return self._set_state(ctx, server_id, activate, "state")

    def toggle(
        self,
        ctx: RequestContext | None,
        server_id: str,
        activate: bool,
    ) -> tuple[Server | None, Response]:
        return self._set_state(ctx, server_id, activate, "toggle")

    def _set_state(
        self,
        ctx: RequestContext | None,
        server_id: str,
        activate: bool,
        endpoint: str,
    ) -> tuple[Server | None, Response]:
        # Servers answer with the server itself, not a wrapper
        logger.info(f"Setting server {server_id} active={activate}")
        return self._send(
            ctx,
            "POST",
            state_path("servers", server_id, endpoint, activate),
            dest=Server,
        )

    def list_tools(
        self,
        ctx: RequestContext | None,
        server_id: str,
        opts: ServerAssociationOptions | None = None,
    ) -> tuple[list[Tool], Response]:
        """List the tools associated with a server."""
        path = add_options(f"servers/{escape_path_segment(server_id)}/tools", opts)
        return self._get_array(ctx, path, Tool)

    def list_resources(
        self,
        ctx: RequestContext | None,
        server_id: str,
        opts: ServerAssociationOptions | None = None,
    ) -> tuple[list[Resource], Response]:
        """List the resources associated with a server."""
        path = add_options(f"servers/{escape_path_segment(server_id)}/resources", opts)
        return self._get_array(ctx, path, Resource)

    def list_prompts(
        self,
        ctx: RequestContext | None,
        server_id: str,
        opts: ServerAssociationOptions | None = None,
    ) -> tuple[list[Prompt], Response]:
        """List the prompts associated with a server."""
        path = add_options(f"servers/{escape_path_segment(server_id)}/prompts", opts)
        return self._get_array(ctx, path, Prompt)
