"""
Tool data models.

The same Tool model is read from and written to the API; unset optional
fields are omitted from request bodies.
"""

from typing import Any

from pydantic import Field

from .common import AuditMetadata
from .scalars import Tag, Timestamp


class Tool(AuditMetadata):
    """An MCP tool registered with the gateway."""

    id: str | None = Field(
        None,
        description="Tool ID, assigned by the server",
    )
    name: str = Field(
        "",
        description="Tool name",
    )
    description: str | None = None
    input_schema: dict[str, Any] | None = Field(
        None,
        description="JSON Schema describing the tool's arguments",
    )
    enabled: bool | None = None
    team_id: str | None = None
    visibility: str | None = Field(
        None,
        description="Visibility: private, team or public",
    )
    tags: list[Tag] | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None

    # Team ownership, read-only
    team: str | None = None
    owner_email: str | None = None
