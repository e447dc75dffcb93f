"""
Unit tests for the virtual servers service.
"""

from typing import get_type_hints

import pytest

from contextforge.schemas.pagination import ServerAssociationOptions, ServerListOptions
from contextforge.schemas.response import Response
from contextforge.schemas.server_models import ServerCreate, ServerUpdate
from contextforge.schemas.tool_models import Tool
from contextforge.services.server_service import ServersService


BASE = "https://gateway.example.com/api/"


@pytest.mark.unit
class TestServersService:
    """Tests for ServersService."""

    def test_list(self, client, session, ctx):
        session.queue(body={"servers": [{"id": "s1", "name": "core", "isActive": True}], "nextCursor": "n"})
        servers, response = client.servers.list(ctx, ServerListOptions(team_id="team-1"))
        assert session.last_request.url == BASE + "servers?include_pagination=true&team_id=team-1"
        assert servers[0].enabled is True
        assert response.next_cursor == "n"

    def test_get(self, client, session, ctx):
        session.queue(body={"id": "s1", "name": "core", "associatedTools": ["t1"]})
        server, _ = client.servers.get(ctx, "s1")
        assert session.last_request.url == BASE + "servers/s1"
        assert server.associated_tools == ["t1"]

    def test_create(self, client, session, ctx):
        session.queue(body={"id": "s1", "name": "core"})
        client.servers.create(ctx, ServerCreate(name="core", associated_tools=["t1"]))
        assert session.last_json() == {"server": {"name": "core", "associated_tools": ["t1"]}}

    def test_update_clears_association(self, client, session, ctx):
        session.queue(body={"id": "s1"})
        client.servers.update(ctx, "s1", ServerUpdate(associated_tools=[]))
        assert session.last_request.method == "PUT"
        assert session.last_json() == {"associatedTools": []}

    def test_delete(self, client, session, ctx):
        client.servers.delete(ctx, "s1")
        assert session.last_request.method == "DELETE"
        assert session.last_request.url == BASE + "servers/s1"

    def test_set_state_decodes_server(self, client, session, ctx):
        session.queue(body={"id": "s1", "name": "core", "isActive": False})
        server, _ = client.servers.set_state(ctx, "s1", False)
        assert session.last_request.url == BASE + "servers/s1/state?activate=false"
        assert server.is_active is False

    def test_toggle(self, client, session, ctx):
        session.queue(body={"id": "s1", "enabled": True})
        server, _ = client.servers.toggle(ctx, "s1", True)
        assert session.last_request.url == BASE + "servers/s1/toggle?activate=true"
        assert server.is_active is True

    def test_list_tools(self, client, session, ctx):
        session.queue(body=[{"id": "t1", "name": "search"}])
        tools, _ = client.servers.list_tools(ctx, "s1", ServerAssociationOptions(include_inactive=True))
        assert session.last_request.url == BASE + "servers/s1/tools?include_inactive=true"
        assert tools[0].name == "search"

    def test_list_resources(self, client, session, ctx):
        session.queue(body=[{"id": 7, "uri": "file:///a"}])
        resources, _ = client.servers.list_resources(ctx, "s1")
        assert session.last_request.url == BASE + "servers/s1/resources"
        assert resources[0].id == "7"

    def test_list_prompts(self, client, session, ctx):
        session.queue(body=[{"id": 1, "name": "greet"}])
        prompts, _ = client.servers.list_prompts(ctx, "s1")
        assert session.last_request.url == BASE + "servers/s1/prompts"
        assert prompts[0].name == "greet"

    def test_association_annotations_resolve(self):
        hints = get_type_hints(ServersService.list_tools)
        assert hints["return"] == tuple[list[Tool], Response]
