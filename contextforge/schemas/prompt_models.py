"""
Prompt data models.
"""

from typing import Any

from pydantic import Field

from .common import APIModel, AuditMetadata, CamelPartialModel, Metrics, SnakeModel
from .partial import UNSET, Unsettable
from .scalars import FlexibleID, Tag, Timestamp


class PromptArgument(APIModel):
    """A named template argument."""

    name: str
    description: str | None = None
    required: bool = False


class Prompt(AuditMetadata):
    """A prompt template registered with the gateway."""

    id: FlexibleID = Field(
        FlexibleID(""),
        description="Prompt ID (string or integer on the wire)",
    )
    name: str = ""
    original_name: str | None = None
    custom_name: str | None = None
    custom_name_slug: str | None = None
    display_name: str | None = None
    gateway_slug: str | None = None
    description: str | None = None
    template: str = ""
    arguments: list[PromptArgument] | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    is_active: bool = False
    # Newer API versions report enabled alongside isActive
    enabled: bool = False
    tags: list[Tag] | None = None
    metrics: Metrics | None = None

    team_id: str | None = None
    team: str | None = None
    owner_email: str | None = None
    visibility: str | None = None


class PromptCreate(SnakeModel):
    """Payload for creating a prompt."""

    name: str = Field(
        ...,
        description="Prompt name",
    )
    custom_name: str | None = None
    display_name: str | None = None
    description: str | None = None
    template: str = Field(
        ...,
        description="Template text with {{ argument }} placeholders",
    )
    arguments: list[PromptArgument] | None = None
    tags: list[str] | None = None

    team_id: str | None = None
    owner_email: str | None = None
    visibility: str | None = None


class PromptUpdate(CamelPartialModel):
    """Partial update for a prompt."""

    name: Unsettable[str] = UNSET
    custom_name: Unsettable[str] = UNSET
    display_name: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET
    template: Unsettable[str] = UNSET
    arguments: Unsettable[list[PromptArgument]] = UNSET
    tags: Unsettable[list[str]] = UNSET

    team_id: Unsettable[str] = UNSET
    owner_email: Unsettable[str] = UNSET
    visibility: Unsettable[str] = UNSET


class PromptGetArgs(SnakeModel):
    """Template arguments used to render a prompt."""

    args: dict[str, str] | None = None


class PromptMessageContent(APIModel):
    """Content of a rendered message: text, resource, json or image."""

    type: str = "text"
    text: str | None = None
    uri: str | None = None
    mime_type: str | None = None
    blob: str | None = None
    data: Any = None


class PromptMessage(APIModel):
    role: str = ""
    content: PromptMessageContent | None = None


class PromptResult(APIModel):
    """A prompt rendered with its arguments."""

    description: str | None = None
    messages: list[PromptMessage] = []
