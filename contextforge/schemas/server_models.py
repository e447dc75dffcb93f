"""
Virtual server data models.

A server bundles tools, resources, prompts and A2A agents behind one MCP
endpoint. Reads are camelCase; creates are snake_case; updates are camelCase
partial payloads.
"""

from typing import Any

from pydantic import Field, model_validator

from .common import (
    AuditMetadata,
    CamelPartialModel,
    Metrics,
    SnakeModel,
    normalize_active,
)
from .partial import UNSET, Unsettable
from .scalars import Tag, Timestamp


class Server(AuditMetadata):
    """A virtual MCP server.

    is_active and enabled are treated as one flag: after decoding both are
    true if either was true.
    """

    id: str = ""
    name: str = ""
    description: str | None = None
    icon: str | None = None
    is_active: bool = False
    enabled: bool = False
    metrics: Metrics | None = None

    associated_tools: list[str] | None = None
    associated_resources: list[str] | None = None
    associated_prompts: list[str] | None = None
    associated_a2a_agents: list[str] | None = Field(
        None,
        alias="associatedA2aAgents",
    )

    tags: list[Tag] | None = None
    team_id: str | None = None
    team: str | None = None
    owner_email: str | None = None
    visibility: str | None = None

    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None

    oauth_enabled: bool = False
    oauth_config: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _normalize_active(self) -> "Server":
        active = normalize_active(self.is_active, self.enabled)
        self.is_active = active
        self.enabled = active
        return self


class ServerCreate(SnakeModel):
    """Payload for creating a virtual server."""

    name: str = Field(
        ...,
        description="Server name",
    )
    description: str | None = None
    icon: str | None = None
    tags: list[str] | None = None

    associated_tools: list[str] | None = Field(
        None,
        description="IDs of tools exposed by this server",
    )
    associated_resources: list[str] | None = None
    associated_prompts: list[str] | None = None
    associated_a2a_agents: list[str] | None = None

    team_id: str | None = None
    owner_email: str | None = None
    visibility: str | None = None


class ServerUpdate(CamelPartialModel):
    """Partial update for a server; an empty list clears an association."""

    name: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET
    icon: Unsettable[str] = UNSET
    tags: Unsettable[list[str]] = UNSET

    associated_tools: Unsettable[list[str]] = UNSET
    associated_resources: Unsettable[list[str]] = UNSET
    associated_prompts: Unsettable[list[str]] = UNSET
    associated_a2a_agents: Unsettable[list[str]] = Field(
        UNSET,
        alias="associatedA2aAgents",
    )

    team_id: Unsettable[str] = UNSET
    owner_email: Unsettable[str] = UNSET
    visibility: Unsettable[str] = UNSET
