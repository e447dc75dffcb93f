"""
Gateways API service.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.context import RequestContext
from ..schemas.common import CreateOptions
from ..schemas.gateway_models import Gateway, GatewayRefreshResponse
from ..schemas.pagination import GatewayListOptions, GatewayRefreshOptions
from ..schemas.response import Response
from ..utils.url_utils import add_options, escape_path_segment
from .base import BaseService, state_path


logger = logging.getLogger(__name__)


class GatewaysService(BaseService):
    """CRUD, toggling and capability refresh for federated gateways."""

    def list(
        self,
        ctx: RequestContext | None,
        opts: GatewayListOptions | None = None,
    ) -> tuple[list[Gateway], Response]:
        """List gateways. The endpoint returns a bare array."""
        return self._get_array(ctx, add_options("gateways", opts), Gateway)

    def get(
        self,
        ctx: RequestContext | None,
        gateway_id: str,
    ) -> tuple[Gateway | None, Response]:
        return self._send(ctx, "GET", f"gateways/{escape_path_segment(gateway_id)}", dest=Gateway)

    def create(
        self,
        ctx: RequestContext | None,
        gateway: Gateway,
        opts: CreateOptions | None = None,
    ) -> tuple[Gateway | None, Response]:
        """
        Register a gateway.

        Unlike the other resources the gateway is not wrapped: team_id and
        visibility are merged into the gateway object itself.
        """
        logger.info(f"Creating gateway: {gateway.name} ({gateway.url})")
        body = gateway.model_dump(mode="json", by_alias=True, exclude_none=True)
        if opts is not None:
            body.update(opts.fields())
        return self._send(ctx, "POST", "gateways", body=body, dest=Gateway)

    def update(
        self,
        ctx: RequestContext | None,
        gateway_id: str,
        gateway: Gateway,
    ) -> tuple[Gateway | None, Response]:
        logger.info(f"Updating gateway: {gateway_id}")
        return self._send(
            ctx,
            "PUT",
            f"gateways/{escape_path_segment(gateway_id)}",
            body=gateway,
            dest=Gateway,
        )

    def delete(
        self,
        ctx: RequestContext | None,
        gateway_id: str,
    ) -> Response:
        logger.info(f"Deleting gateway: {gateway_id}")
        _, response = self._send(ctx, "DELETE", f"gateways/{escape_path_segment(gateway_id)}")
        return response

    def toggle(
        self,
        ctx: RequestContext | None,
        gateway_id: str,
        activate: bool,
    ) -> tuple[Gateway | None, Response]:
        """Activate or deactivate a gateway; None if the reply omits it."""
        logger.info(f"Setting gateway {gateway_id} active={activate}")
        result, response = self._send(
            ctx,
            "POST",
            state_path("gateways", gateway_id, "toggle", activate),
            dest=dict[str, Any],
        )
        gateway_data = (result or {}).get("gateway")
        if gateway_data is None:
            return None, response
        return self._decode_nested(gateway_data, Gateway), response

    def refresh_tools(
        self,
        ctx: RequestContext | None,
        gateway_id: str,
        opts: GatewayRefreshOptions | None = None,
    ) -> tuple[GatewayRefreshResponse | None, Response]:
        """
        Re-discover a gateway's tools, and optionally its resources and prompts.

        Args:
            ctx: Request context
            gateway_id: Gateway to refresh
            opts: Which additional capability kinds to refresh

        Returns:
            Tuple of (refresh summary, response)
        """
        logger.info(f"Refreshing gateway capabilities: {gateway_id}")
        path = add_options(f"gateways/{escape_path_segment(gateway_id)}/tools/refresh", opts)
        return self._send(ctx, "POST", path, dest=GatewayRefreshResponse)
