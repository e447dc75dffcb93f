"""
Shared model bases and fragments used by the resource schemas.

The ContextForge API mixes camelCase and snake_case per endpoint. Models for
camelCase payloads derive from APIModel; snake_case payloads use SnakeModel.
Both accept either spelling on input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .partial import PartialModel
from .scalars import Timestamp


class APIModel(BaseModel):
    """Base for camelCase wire models."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
    )


class SnakeModel(BaseModel):
    """Base for snake_case wire models."""

    model_config = ConfigDict(populate_by_name=True)


class CamelPartialModel(PartialModel):
    """Partial-update payload sent in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel)


class AuditMetadata(APIModel):
    """Read-only provenance fields returned on most resources."""

    created_by: str | None = None
    created_from_ip: str | None = None
    created_via: str | None = None
    created_user_agent: str | None = None
    modified_by: str | None = None
    modified_from_ip: str | None = None
    modified_via: str | None = None
    modified_user_agent: str | None = None
    import_batch_id: str | None = None
    federation_source: str | None = None
    version: int | None = None


class Metrics(APIModel):
    """Execution metrics reported for servers, resources, prompts and agents."""

    total_executions: int = 0
    successful_executions: int = 0
    failed_executions: int = 0
    failure_rate: float = 0.0
    min_response_time: float | None = None
    max_response_time: float | None = None
    avg_response_time: float | None = None
    last_execution_time: Timestamp | None = None


class CreateOptions(BaseModel):
    """Team and visibility settings sent alongside a create payload."""

    team_id: str = ""
    visibility: str = ""

    def fields(self) -> dict[str, Any]:
        """Non-empty options as a dict for merging into a request body."""
        return {k: v for k, v in self.model_dump().items() if v}


def normalize_active(
    is_active: bool,
    enabled: bool,
) -> bool:
    """Treat is_active and enabled as one flag, true if either is true."""
    return is_active or enabled


__all__ = [
    "APIModel",
    "SnakeModel",
    "CamelPartialModel",
    "AuditMetadata",
    "Metrics",
    "CreateOptions",
    "normalize_active",
]
