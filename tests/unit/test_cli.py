"""
Unit tests for contextforge.cli.

Commands run against a recording session by patching Client.from_settings.
"""

import json
import logging

import pytest

from contextforge import cli
from contextforge.core.client import Client


@pytest.fixture
def cli_session(session, monkeypatch):
    """Route every CLI-created client through the recording session."""
    original = Client.from_settings.__func__
    created = []

    def from_settings(cls, settings=None, session_arg=None):
        client = original(cls, settings, session)
        created.append(client)
        return client

    monkeypatch.setattr(Client, "from_settings", classmethod(from_settings))
    session.created = created
    return session


@pytest.mark.unit
class TestParser:
    """Tests for argument parsing."""

    def test_every_command_has_a_handler(self):
        parser = cli.build_parser()
        subparsers = next(a for a in parser._actions if a.dest == "command")
        assert set(subparsers.choices) == set(cli.COMMAND_HANDLERS)

    def test_toggle_requires_direction(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["tool-toggle", "--id", "t1"])

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 1
        assert "ContextForge Management CLI" in capsys.readouterr().out


@pytest.mark.unit
class TestCommands:
    """Tests for command execution."""

    def test_tool_list_json(self, cli_session, capsys):
        cli_session.queue(body={"tools": [{"id": "t1", "name": "search"}]})
        assert cli.main(["tool-list", "--json", "--limit", "5"]) == 0
        assert cli_session.last_request.url.endswith("tools?include_pagination=true&limit=5")
        assert json.loads(capsys.readouterr().out) == [{"id": "t1", "name": "search"}]

    def test_global_options_applied(self, cli_session, capsys):
        cli_session.queue(body={"id": "s1", "name": "core"})
        code = cli.main(["--addr", "https://cf.example.com/v1", "--token", "abc", "server-get", "--id", "s1"])
        assert code == 0
        request = cli_session.last_request
        assert request.url == "https://cf.example.com/v1/servers/s1"
        assert request.headers["Authorization"] == "Bearer abc"
        assert "name: core" in capsys.readouterr().out

    def test_token_file_json(self, cli_session, tmp_path):
        token_file = tmp_path / "token.json"
        token_file.write_text(json.dumps({"access_token": "from-file"}))
        cli_session.queue(body=[])
        assert cli.main(["--token-file", str(token_file), "gateway-list"]) == 0
        assert cli_session.last_request.headers["Authorization"] == "Bearer from-file"

    def test_token_file_plain(self, cli_session, tmp_path):
        token_file = tmp_path / "token.txt"
        token_file.write_text("plain-token\n")
        cli_session.queue(body=[])
        assert cli.main(["--token-file", str(token_file), "prompt-list"]) == 0
        assert cli_session.last_request.headers["Authorization"] == "Bearer plain-token"

    def test_missing_token_file(self, cli_session, caplog):
        with caplog.at_level(logging.ERROR):
            assert cli.main(["--token-file", "/nonexistent/token", "tool-list"]) == 1
        assert "Token file not found" in caplog.text

    def test_toggle(self, cli_session):
        cli_session.queue(body={"id": "s1", "isActive": False})
        assert cli.main(["server-toggle", "--id", "s1", "--disable"]) == 0
        assert cli_session.last_request.url.endswith("servers/s1/state?activate=false")

    def test_prompt_get_arguments(self, cli_session, capsys):
        cli_session.queue(body={"messages": [{"role": "user", "content": {"type": "text", "text": "Hi Ada"}}]})
        assert cli.main(["prompt-get", "--id", "greet", "--arg", "name=Ada"]) == 0
        assert cli_session.last_json() == {"args": {"name": "Ada"}}
        assert "[user] Hi Ada" in capsys.readouterr().out

    def test_bad_prompt_argument(self, cli_session):
        assert cli.main(["prompt-get", "--id", "greet", "--arg", "name"]) == 1
        assert cli_session.sent == []

    def test_agent_invoke(self, cli_session, capsys):
        cli_session.queue(body={"ok": True})
        assert cli.main(["agent-invoke", "--name", "helper", "--params", '{"q": 1}']) == 0
        assert cli_session.last_json() == {"parameters": {"q": 1}}
        assert json.loads(capsys.readouterr().out) == {"ok": True}

    def test_cancel(self, cli_session):
        cli_session.queue(body={"status": "cancelled", "requestId": "req-1"})
        assert cli.main(["cancel", "--request-id", "req-1", "--reason", "stop"]) == 0
        assert cli_session.last_json() == {"requestId": "req-1", "reason": "stop"}

    def test_api_error_returns_failure(self, cli_session, caplog):
        cli_session.queue(status=404, body={"detail": "Tool not found"})
        with caplog.at_level(logging.ERROR):
            assert cli.main(["tool-get", "--id", "missing"]) == 1
        assert "Tool not found" in caplog.text

    def test_rate_limit_returns_failure(self, cli_session, caplog):
        cli_session.queue(status=429, headers={"X-Ratelimit-Limit": "10", "X-Ratelimit-Remaining": "0"})
        with caplog.at_level(logging.ERROR):
            assert cli.main(["team-list"]) == 1
        assert "Rate limited" in caplog.text
