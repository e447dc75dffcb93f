"""
Resource data models.

Resources are read in camelCase, except for the state/toggle endpoints which
answer in snake_case; both spellings populate the same Resource model.
Creates are sent in snake_case and updates in camelCase.
"""

from typing import Any

from pydantic import Field, model_validator

from .common import (
    APIModel,
    AuditMetadata,
    CamelPartialModel,
    Metrics,
    SnakeModel,
    normalize_active,
)
from .partial import UNSET, Unsettable
from .scalars import FlexibleID, Tag, Timestamp


class Resource(AuditMetadata):
    """A resource registered with the gateway.

    is_active and enabled are reported inconsistently across API versions;
    after decoding both hold the same value, true if either was true.
    """

    id: FlexibleID | None = Field(
        None,
        description="Resource ID (string or integer on the wire)",
    )
    uri: str = ""
    name: str = ""
    description: str | None = None
    mime_type: str | None = None
    size: int | None = None
    is_active: bool = False
    enabled: bool = False
    metrics: Metrics | None = None

    tags: list[Tag] | None = None
    team_id: str | None = None
    team: str | None = None
    owner_email: str | None = None
    visibility: str | None = None

    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None

    @model_validator(mode="after")
    def _normalize_active(self) -> "Resource":
        active = normalize_active(self.is_active, self.enabled)
        self.is_active = active
        self.enabled = active
        return self


class ResourceCreate(SnakeModel):
    """Payload for creating a resource."""

    uri: str = Field(
        ...,
        description="Unique resource URI, e.g. file:///docs/readme.md",
    )
    name: str = Field(
        ...,
        description="Resource name",
    )
    content: Any = Field(
        ...,
        description="Text or binary content",
    )
    description: str | None = None
    mime_type: str | None = None
    template: str | None = None
    tags: list[str] | None = None


class ResourceUpdate(CamelPartialModel):
    """Partial update for a resource; only assigned fields are sent."""

    uri: Unsettable[str] = UNSET
    name: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET
    mime_type: Unsettable[str] = UNSET
    template: Unsettable[str] = UNSET
    content: Unsettable[Any] = UNSET
    tags: Unsettable[list[str]] = UNSET


class ResourceContent(APIModel):
    """Content returned when reading a resource; one of text or blob is set."""

    type: str = "resource"
    uri: str = ""
    mime_type: str | None = None
    text: str | None = None
    blob: str | None = None


class ResourceTemplate(SnakeModel):
    name: str = ""
    description: str = ""
    uri: str = ""
    mime_type: str = ""


class ListResourceTemplatesResult(SnakeModel):
    templates: list[ResourceTemplate] = []
