"""
A2A (agent-to-agent) agent data models.
"""

from typing import Any

from pydantic import Field

from .common import AuditMetadata, CamelPartialModel, Metrics, SnakeModel
from .partial import UNSET, Unsettable
from .scalars import Tag, Timestamp


class Agent(AuditMetadata):
    """An A2A agent registered with the gateway."""

    id: str = ""
    name: str = ""
    slug: str = ""
    description: str | None = None
    endpoint_url: str = ""
    agent_type: str = ""
    protocol_version: str = ""
    capabilities: dict[str, Any] | None = None
    config: dict[str, Any] | None = None
    auth_type: str | None = None
    oauth_config: dict[str, Any] | None = None
    auth_query_param_key: str | None = None
    auth_query_param_value_masked: str | None = None
    enabled: bool = False
    reachable: bool = False

    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    last_interaction: Timestamp | None = None

    tags: list[Tag] | None = None
    metrics: Metrics | None = None
    team_id: str | None = None
    owner_email: str | None = None
    visibility: str | None = None


class AgentCreate(SnakeModel):
    """Payload for registering an A2A agent."""

    name: str = Field(
        ...,
        description="Agent name",
    )
    endpoint_url: str = Field(
        ...,
        description="Agent's A2A endpoint URL",
    )
    slug: str | None = None
    description: str | None = None
    agent_type: str | None = Field(
        None,
        description="Agent type; the server defaults to 'generic'",
    )
    protocol_version: str | None = Field(
        None,
        description="A2A protocol version; the server defaults to '1.0'",
    )
    capabilities: dict[str, Any] | None = None
    config: dict[str, Any] | None = None

    # Stored encrypted server-side
    auth_type: str | None = None
    auth_value: str | None = None
    oauth_config: dict[str, Any] | None = None
    auth_query_param_key: str | None = None
    auth_query_param_value: str | None = None

    tags: list[str] | None = None
    team_id: str | None = None
    owner_email: str | None = None
    visibility: str | None = None


class AgentUpdate(CamelPartialModel):
    """Partial update for an A2A agent."""

    name: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET
    endpoint_url: Unsettable[str] = UNSET
    agent_type: Unsettable[str] = UNSET
    protocol_version: Unsettable[str] = UNSET
    capabilities: Unsettable[dict[str, Any]] = UNSET
    config: Unsettable[dict[str, Any]] = UNSET
    auth_type: Unsettable[str] = UNSET
    auth_value: Unsettable[str] = UNSET
    oauth_config: Unsettable[dict[str, Any]] = UNSET
    auth_query_param_key: Unsettable[str] = UNSET
    auth_query_param_value: Unsettable[str] = UNSET
    tags: Unsettable[list[str]] = UNSET
    team_id: Unsettable[str] = UNSET
    owner_email: Unsettable[str] = UNSET
    visibility: Unsettable[str] = UNSET


class AgentInvokeRequest(SnakeModel):
    """Arguments for invoking an agent."""

    parameters: dict[str, Any] | None = None
    interaction_type: str | None = Field(
        None,
        description="Interaction type; the server defaults to 'query'",
    )
