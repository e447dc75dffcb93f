"""
Team data models. The teams API is snake_case throughout.
"""

from pydantic import Field

from .common import SnakeModel
from .partial import UNSET, PartialModel, Unsettable
from .scalars import Timestamp


class Team(SnakeModel):
    """A team that owns and shares gateway entities."""

    id: str = ""
    name: str = ""
    slug: str = ""
    description: str | None = None
    is_personal: bool = False
    visibility: str | None = None
    max_members: int | None = None
    member_count: int = 0
    is_active: bool = False
    created_by: str = ""
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None


class TeamCreate(SnakeModel):
    name: str = Field(
        ...,
        description="Team name",
    )
    slug: str | None = None
    description: str | None = None
    visibility: str | None = None
    max_members: int | None = None


class TeamUpdate(PartialModel):
    """Partial update for a team."""

    name: Unsettable[str] = UNSET
    description: Unsettable[str] = UNSET
    visibility: Unsettable[str] = UNSET
    max_members: Unsettable[int] = UNSET


class TeamListResponse(SnakeModel):
    teams: list[Team] = []
    total: int = 0


class TeamMember(SnakeModel):
    id: str = ""
    team_id: str = ""
    user_email: str = ""
    role: str = ""
    joined_at: Timestamp | None = None
    invited_by: str | None = None
    is_active: bool = False


class TeamMemberUpdate(SnakeModel):
    role: str


class TeamInvitation(SnakeModel):
    """A pending invitation to join a team."""

    id: str = ""
    team_id: str = ""
    team_name: str = ""
    email: str = ""
    role: str = ""
    invited_by: str = ""
    invited_at: Timestamp | None = None
    expires_at: Timestamp | None = None
    token: str = ""
    is_active: bool = False
    is_expired: bool = False


class TeamInvite(SnakeModel):
    email: str
    role: str | None = None


class TeamDiscovery(SnakeModel):
    """A public team the caller may join."""

    id: str = ""
    name: str = ""
    description: str | None = None
    member_count: int = 0
    created_at: Timestamp | None = None
    is_joinable: bool = False


class TeamJoinRequest(SnakeModel):
    message: str | None = None


class TeamJoinRequestResponse(SnakeModel):
    id: str = ""
    team_id: str = ""
    team_name: str = ""
    user_email: str = ""
    message: str | None = None
    status: str = ""
    requested_at: Timestamp | None = None
    expires_at: Timestamp | None = None
