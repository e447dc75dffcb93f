"""
Teams API service.

Team endpoints are served with trailing slashes (teams/{id}/, .../members/)
except the collection root and teams/discover.
"""

from __future__ import annotations

import logging

from ..core.context import RequestContext
from ..schemas.pagination import TeamDiscoverOptions, TeamListOptions
from ..schemas.response import Response
from ..schemas.team_models import (
    Team,
    TeamCreate,
    TeamDiscovery,
    TeamInvitation,
    TeamInvite,
    TeamJoinRequest,
    TeamJoinRequestResponse,
    TeamListResponse,
    TeamMember,
    TeamMemberUpdate,
    TeamUpdate,
)
from ..utils.url_utils import add_options, escape_path_segment
from .base import BaseService


logger = logging.getLogger(__name__)


def _team_path(
    team_id: str,
    *segments: str,
) -> str:
    parts = ["teams", escape_path_segment(team_id)]
    parts.extend(escape_path_segment(s) for s in segments)
    return "/".join(parts) + "/"


class TeamsService(BaseService):
    """Teams, membership, invitations and join requests."""

    def list(
        self,
        ctx: RequestContext | None,
        opts: TeamListOptions | None = None,
    ) -> tuple[list[Team], Response]:
        """
        List the caller's teams.

        The endpoint answers {"teams": [...], "total": n}; only the teams are
        returned.
        """
        result, response = self._send(ctx, "GET", add_options("teams", opts), dest=TeamListResponse)
        return (result.teams if result is not None else []), response

    def get(
        self,
        ctx: RequestContext | None,
        team_id: str,
    ) -> tuple[Team | None, Response]:
        return self._send(ctx, "GET", _team_path(team_id), dest=Team)

    def create(
        self,
        ctx: RequestContext | None,
        team: TeamCreate,
    ) -> tuple[Team | None, Response]:
        logger.info(f"Creating team: {team.name}")
        return self._send(ctx, "POST", "teams", body=team, dest=Team)

    def update(
        self,
        ctx: RequestContext | None,
        team_id: str,
        team: TeamUpdate,
    ) -> tuple[Team | None, Response]:
        logger.info(f"Updating team: {team_id}")
        return self._send(ctx, "PUT", _team_path(team_id), body=team, dest=Team)

    def delete(
        self,
        ctx: RequestContext | None,
        team_id: str,
    ) -> Response:
        logger.info(f"Deleting team: {team_id}")
        _, response = self._send(ctx, "DELETE", _team_path(team_id))
        return response

    # Members

    def list_members(
        self,
        ctx: RequestContext | None,
        team_id: str,
    ) -> tuple[list[TeamMember], Response]:
        return self._get_array(ctx, _team_path(team_id, "members"), TeamMember)

    def update_member(
        self,
        ctx: RequestContext | None,
        team_id: str,
        user_email: str,
        update: TeamMemberUpdate,
    ) -> tuple[TeamMember | None, Response]:
        logger.info(f"Updating member {user_email} of team {team_id} to role {update.role}")
        return self._send(
            ctx,
            "PUT",
            _team_path(team_id, "members", user_email),
            body=update,
            dest=TeamMember,
        )

    def remove_member(
        self,
        ctx: RequestContext | None,
        team_id: str,
        user_email: str,
    ) -> Response:
        logger.info(f"Removing member {user_email} from team {team_id}")
        _, response = self._send(ctx, "DELETE", _team_path(team_id, "members", user_email))
        return response

    # Invitations

    def invite_member(
        self,
        ctx: RequestContext | None,
        team_id: str,
        invite: TeamInvite,
    ) -> tuple[TeamInvitation | None, Response]:
        logger.info(f"Inviting {invite.email} to team {team_id}")
        return self._send(
            ctx,
            "POST",
            _team_path(team_id, "invitations"),
            body=invite,
            dest=TeamInvitation,
        )

    def list_invitations(
        self,
        ctx: RequestContext | None,
        team_id: str,
    ) -> tuple[list[TeamInvitation], Response]:
        return self._get_array(ctx, _team_path(team_id, "invitations"), TeamInvitation)

    def accept_invitation(
        self,
        ctx: RequestContext | None,
        token: str,
    ) -> tuple[TeamMember | None, Response]:
        """Accept an invitation by its token; returns the new membership."""
        path = f"teams/invitations/{escape_path_segment(token)}/accept/"
        return self._send(ctx, "POST", path, dest=TeamMember)

    def cancel_invitation(
        self,
        ctx: RequestContext | None,
        invitation_id: str,
    ) -> Response:
        logger.info(f"Cancelling invitation: {invitation_id}")
        path = f"teams/invitations/{escape_path_segment(invitation_id)}/"
        _, response = self._send(ctx, "DELETE", path)
        return response

    # Discovery and join requests

    def discover(
        self,
        ctx: RequestContext | None,
        opts: TeamDiscoverOptions | None = None,
    ) -> tuple[list[TeamDiscovery], Response]:
        """List public teams the caller can join."""
        return self._get_array(ctx, add_options("teams/discover", opts), TeamDiscovery)

    def join(
        self,
        ctx: RequestContext | None,
        team_id: str,
        request: TeamJoinRequest | None = None,
    ) -> tuple[TeamJoinRequestResponse | None, Response]:
        logger.info(f"Requesting to join team: {team_id}")
        return self._send(
            ctx,
            "POST",
            _team_path(team_id, "join"),
            body=request,
            dest=TeamJoinRequestResponse,
        )

    def leave(
        self,
        ctx: RequestContext | None,
        team_id: str,
    ) -> Response:
        logger.info(f"Leaving team: {team_id}")
        _, response = self._send(ctx, "DELETE", _team_path(team_id, "leave"))
        return response

    def list_join_requests(
        self,
        ctx: RequestContext | None,
        team_id: str,
    ) -> tuple[list[TeamJoinRequestResponse], Response]:
        return self._get_array(ctx, _team_path(team_id, "join-requests"), TeamJoinRequestResponse)

    def approve_join_request(
        self,
        ctx: RequestContext | None,
        team_id: str,
        request_id: str,
    ) -> tuple[TeamMember | None, Response]:
        logger.info(f"Approving join request {request_id} for team {team_id}")
        return self._send(
            ctx,
            "POST",
            _team_path(team_id, "join-requests", request_id, "approve"),
            dest=TeamMember,
        )

    def reject_join_request(
        self,
        ctx: RequestContext | None,
        team_id: str,
        request_id: str,
    ) -> Response:
        logger.info(f"Rejecting join request {request_id} for team {team_id}")
        _, response = self._send(ctx, "DELETE", _team_path(team_id, "join-requests", request_id))
        return response
