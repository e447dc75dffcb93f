"""
A2A agents API service.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.context import RequestContext
from ..schemas.agent_models import Agent, AgentCreate, AgentInvokeRequest, AgentUpdate
from ..schemas.common import CreateOptions
from ..schemas.pagination import AgentListOptions
from ..schemas.response import Response
from ..utils.url_utils import escape_path_segment
from .base import BaseService, state_path


logger = logging.getLogger(__name__)


class AgentsService(BaseService):
    """CRUD, state changes and invocation for A2A agents (under a2a/)."""

    def list(
        self,
        ctx: RequestContext | None,
        opts: AgentListOptions | None = None,
    ) -> tuple[list[Agent], Response]:
        opts = (opts or AgentListOptions()).model_copy(update={"include_pagination": True})
        return self._list(ctx, "a2a", opts, "agents", Agent)

    def get(
        self,
        ctx: RequestContext | None,
        agent_id: str,
    ) -> tuple[Agent | None, Response]:
        return self._send(ctx, "GET", f"a2a/{escape_path_segment(agent_id)}", dest=Agent)

    def create(
        self,
        ctx: RequestContext | None,
        agent: AgentCreate,
        opts: CreateOptions | None = None,
    ) -> tuple[Agent | None, Response]:
        logger.info(f"Registering agent: {agent.name} ({agent.endpoint_url})")
        body = self._create_body("agent", agent, opts)
        return self._send(ctx, "POST", "a2a", body=body, dest=Agent)

    def update(
        self,
        ctx: RequestContext | None,
        agent_id: str,
        agent: AgentUpdate,
    ) -> tuple[Agent | None, Response]:
        logger.info(f"Updating agent: {agent_id}")
        return self._send(
            ctx,
            "PUT",
            f"a2a/{escape_path_segment(agent_id)}",
            body=agent,
            dest=Agent,
        )

    def delete(
        self,
        ctx: RequestContext | None,
        agent_id: str,
    ) -> Response:
        logger.info(f"Deleting agent: {agent_id}")
        _, response = self._send(ctx, "DELETE", f"a2a/{escape_path_segment(agent_id)}")
        return response

    def set_state(
        self,
        ctx: RequestContext | None,
        agent_id: str,
        activate: bool,
    ) -> tuple[Agent | None, Response]:
        return self._set_state(ctx, agent_id, activate, "state")

    def toggle(
        self,
        ctx: RequestContext | None,
        agent_id: str,
        activate: bool,
    ) -> tuple[Agent | None, Response]:
        return self._set_state(ctx, agent_id, activate, "toggle")

    def _set_state(
        self,
        ctx: RequestContext | None,
        agent_id: str,
        activate: bool,
        endpoint: str,
    ) -> tuple[Agent | None, Response]:
        logger.info(f"Setting agent {agent_id} active={activate}")
        return self._send(
            ctx,
            "POST",
            state_path("a2a", agent_id, endpoint, activate),
            dest=Agent,
        )

    def invoke(
        self,
        ctx: RequestContext | None,
        agent_name: str,
        request: AgentInvokeRequest | None = None,
    ) -> tuple[dict[str, Any] | None, Response]:
        """
        Invoke an agent by name.

        Args:
            ctx: Request context
            agent_name: Agent name (not ID)
            request: Parameters and interaction type

        Returns:
            Tuple of (agent's JSON reply, response)
        """
        logger.info(f"Invoking agent: {agent_name}")
        return self._send(
            ctx,
            "POST",
            f"a2a/{escape_path_segment(agent_name)}/invoke",
            body=request,
            dest=dict[str, Any],
        )
