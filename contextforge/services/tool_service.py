"""
Tools API service.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.context import RequestContext
from ..schemas.common import CreateOptions
from ..schemas.pagination import ToolListOptions
from ..schemas.response import Response
from ..schemas.tool_models import Tool
from ..utils.url_utils import escape_path_segment
from .base import BaseService, state_path


logger = logging.getLogger(__name__)


class ToolsService(BaseService):
    """CRUD and state changes for tools."""

    def list(
        self,
        ctx: RequestContext | None,
        opts: ToolListOptions | None = None,
    ) -> tuple[list[Tool], Response]:
        """
        List tools.

        Pagination is always requested, so the cursor for the next page is
        available as response.next_cursor.

        Args:
            ctx: Request context
            opts: Filters and pagination

        Returns:
            Tuple of (tools, response)
        """
        opts = (opts or ToolListOptions()).model_copy(update={"include_pagination": True})
        return self._list(ctx, "tools", opts, "tools", Tool)

    def get(
        self,
        ctx: RequestContext | None,
        tool_id: str,
    ) -> tuple[Tool | None, Response]:
        return self._send(ctx, "GET", f"tools/{escape_path_segment(tool_id)}", dest=Tool)

    def create(
        self,
        ctx: RequestContext | None,
        tool: Tool,
        opts: CreateOptions | None = None,
    ) -> tuple[Tool | None, Response]:
        """
        Create a tool.

        The tool is sent wrapped as {"tool": ...}; team_id and visibility
        from opts go alongside it at the top level.
        """
        logger.info(f"Creating tool: {tool.name}")
        body = self._create_body("tool", tool, opts)
        return self._send(ctx, "POST", "tools", body=body, dest=Tool)

    def update(
        self,
        ctx: RequestContext | None,
        tool_id: str,
        tool: Tool,
    ) -> tuple[Tool | None, Response]:
        logger.info(f"Updating tool: {tool_id}")
        return self._send(
            ctx,
            "PUT",
            f"tools/{escape_path_segment(tool_id)}",
            body=tool,
            dest=Tool,
        )

    def delete(
        self,
        ctx: RequestContext | None,
        tool_id: str,
    ) -> Response:
        logger.info(f"Deleting tool: {tool_id}")
        _, response = self._send(ctx, "DELETE", f"tools/{escape_path_segment(tool_id)}")
        return response

    def set_state(
        self,
        ctx: RequestContext | None,
        tool_id: str,
        activate: bool,
    ) -> tuple[Tool | None, Response]:
        """Activate or deactivate a tool through the state endpoint."""
        return self._set_state(ctx, tool_id, activate, "state")

    def toggle(
        self,
        ctx: RequestContext | None,
        tool_id: str,
        activate: bool,
    ) -> tuple[Tool | None, Response]:
        """Activate or deactivate a tool through the legacy toggle endpoint."""
        return self._set_state(ctx, tool_id, activate, "toggle")

    def _set_state(
        self,
        ctx: RequestContext | None,
        tool_id: str,
        activate: bool,
        endpoint: str,
    ) -> tuple[Tool | None, Response]:
        logger.info(f"Setting tool {tool_id} active={activate}")
        result, response = self._send(
            ctx,
            "POST",
            state_path("tools", tool_id, endpoint, activate),
            dest=dict[str, Any],
        )
        tool_data = (result or {}).get("tool")
        if tool_data is None:
            return None, response
        return self._decode_nested(tool_data, Tool), response
