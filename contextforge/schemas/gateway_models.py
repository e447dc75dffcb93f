"""
Gateway data models.

A gateway is a federated upstream MCP server. The Gateway model doubles as
the create/update payload, so optional fields default to None and are left
out of request bodies.
"""

from typing import Any

from pydantic import Field

from .common import AuditMetadata, SnakeModel
from .scalars import Tag, Timestamp


class Gateway(AuditMetadata):
    """A federated MCP gateway."""

    id: str | None = None
    name: str = Field(
        "",
        description="Gateway name",
    )
    url: str = Field(
        "",
        description="Upstream MCP endpoint URL",
    )
    description: str | None = None
    transport: str | None = Field(
        None,
        description="Transport: SSE or STREAMABLEHTTP",
    )
    enabled: bool | None = None
    reachable: bool | None = None
    capabilities: dict[str, Any] | None = None

    # Authentication toward the upstream server
    passthrough_headers: list[str] | None = None
    auth_type: str | None = None
    auth_username: str | None = None
    auth_password: str | None = None
    auth_token: str | None = None
    auth_header_key: str | None = None
    auth_header_value: str | None = None
    auth_headers: list[dict[str, str]] | None = None
    auth_value: str | None = None
    oauth_config: dict[str, Any] | None = None
    auth_query_param_key: str | None = None
    auth_query_param_value: str | None = None
    auth_query_param_value_masked: str | None = None

    tags: list[Tag] | None = None
    team_id: str | None = None
    team: str | None = None
    owner_email: str | None = None
    visibility: str | None = None

    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    last_seen: Timestamp | None = None

    slug: str | None = None
    refresh_interval_seconds: int | None = None
    last_refresh_at: Timestamp | None = None


class GatewayRefreshResponse(SnakeModel):
    """Outcome of a manual capability refresh of a gateway."""

    gateway_id: str = ""
    success: bool = False
    error: str | None = None
    tools_added: int = 0
    tools_updated: int = 0
    tools_removed: int = 0
    resources_added: int = 0
    resources_updated: int = 0
    resources_removed: int = 0
    prompts_added: int = 0
    prompts_updated: int = 0
    prompts_removed: int = 0
    validation_errors: list[str] | None = None
    duration_ms: float = 0.0
    refreshed_at: Timestamp | None = None
