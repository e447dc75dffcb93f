"""
Request cancellation models.
"""

from pydantic import Field

from .common import APIModel, SnakeModel


class CancellationRequest(APIModel):
    """Ask the gateway to cancel an in-flight request."""

    request_id: str = Field(
        ...,
        description="ID of the request to cancel",
    )
    reason: str | None = None


class CancellationResponse(APIModel):
    status: str = ""
    request_id: str = ""
    reason: str | None = None


class CancellationStatus(SnakeModel):
    """Status of a tracked request; times are Unix seconds."""

    name: str | None = None
    registered_at: float | None = None
    cancelled: bool = False
    cancelled_at: float | None = None
    cancel_reason: str | None = None
