#!/usr/bin/env python3
"""
ContextForge Management CLI.

Command-line wrapper around the ContextForge client for inspecting and
managing tools, resources, gateways, servers, prompts, A2A agents, teams and
request cancellation.

Examples:
    # List tools (address and token from CONTEXTFORGE_ADDR / CONTEXTFORGE_TOKEN)
    contextforge tool-list

    # Same, as raw JSON
    contextforge tool-list --json

    # Disable a server
    contextforge server-toggle --id 4f1c... --disable

    # Render a prompt with arguments
    contextforge prompt-get --id code-review --arg language=python

    # Cancel an in-flight request
    contextforge cancel --request-id req-123 --reason "user aborted"
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .core.client import Client
from .core.config import Settings
from .core.context import RequestContext
from .exceptions import ContextForgeError, RateLimitError
from .schemas.agent_models import AgentInvokeRequest
from .schemas.cancellation_models import CancellationRequest
from .schemas.pagination import (
    AgentListOptions,
    GatewayListOptions,
    GatewayRefreshOptions,
    PromptListOptions,
    ResourceListOptions,
    ServerAssociationOptions,
    ServerListOptions,
    TeamDiscoverOptions,
    TeamListOptions,
    ToolListOptions,
)
from .schemas.prompt_models import PromptGetArgs

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s,p%(process)s,{%(filename)s:%(lineno)d},%(levelname)s,%(message)s",
)
logger = logging.getLogger(__name__)


def _load_token_file(
    token_file: str,
) -> str:
    """
    Read a bearer token from a file.

    The file may hold the bare token or JSON with an access_token field.

    Raises:
        FileNotFoundError: If the file does not exist
        RuntimeError: If no token could be read
    """
    token_path = Path(token_file)
    if not token_path.exists():
        raise FileNotFoundError(f"Token file not found: {token_file}")

    text = token_path.read_text().strip()
    try:
        token_data = json.loads(text)
    except json.JSONDecodeError:
        token = text
    else:
        token = token_data.get("access_token", "") if isinstance(token_data, dict) else ""
        if not token:
            raise RuntimeError(f"No 'access_token' field found in token file: {token_file}")

    if not token:
        raise RuntimeError(f"Empty token in file: {token_file}")
    return token


def _create_client(
    args: argparse.Namespace,
) -> Client:
    """
    Create a client from CONTEXTFORGE_* settings overridden by CLI options.

    Args:
        args: Parsed arguments

    Returns:
        Configured Client
    """
    settings = Settings()
    overrides: dict[str, Any] = {}
    if args.addr:
        overrides["addr"] = args.addr
    if args.token_file:
        overrides["token"] = _load_token_file(args.token_file)
    elif args.token:
        overrides["token"] = args.token
    if args.timeout:
        overrides["timeout_seconds"] = args.timeout
    if overrides:
        settings = settings.model_copy(update=overrides)
    return Client.from_settings(settings)


def _context(
    args: argparse.Namespace,
) -> RequestContext:
    if args.timeout:
        return RequestContext.with_timeout(args.timeout)
    return RequestContext.background()


def _dump(
    value: Any,
) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


def _print_json(
    value: Any,
) -> None:
    print(json.dumps(_dump(value), indent=2, default=str))


def _print_items(
    items: list,
    args: argparse.Namespace,
    label: str,
    columns: list[str],
    next_cursor: str = "",
) -> None:
    """Print a collection as JSON or as one line per item."""
    if args.json:
        _print_json(items)
        return

    if not items:
        logger.info(f"No {label} found")
        return

    logger.info(f"Found {len(items)} {label}:\n")
    for item in items:
        values = [str(getattr(item, column, "") or "") for column in columns]
        print("  ".join(values))
    if next_cursor:
        print(f"\nNext cursor: {next_cursor}")


def _print_item(
    item: Any,
    args: argparse.Namespace,
    label: str,
) -> None:
    if item is None:
        logger.info(f"No {label} returned")
        return
    if args.json:
        _print_json(item)
        return
    for key, value in _dump(item).items():
        print(f"  {key}: {value}")


def _parse_key_values(
    pairs: list[str] | None,
) -> dict[str, str]:
    """Parse repeated key=value arguments."""
    result = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got {pair!r}")
        result[key] = value
    return result


# Tools


def cmd_tool_list(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = ToolListOptions(
        limit=args.limit or 0,
        cursor=args.cursor or "",
        include_inactive=args.include_inactive,
        tags=args.tags or "",
        team_id=args.team_id or "",
    )
    tools, response = client.tools.list(_context(args), opts)
    _print_items(tools, args, "tools", ["id", "name", "enabled"], response.next_cursor)
    return 0


def cmd_tool_get(args: argparse.Namespace) -> int:
    client = _create_client(args)
    tool, _ = client.tools.get(_context(args), args.id)
    _print_item(tool, args, "tool")
    return 0


def cmd_tool_delete(args: argparse.Namespace) -> int:
    client = _create_client(args)
    client.tools.delete(_context(args), args.id)
    logger.info(f"Tool deleted: {args.id}")
    return 0


def cmd_tool_toggle(args: argparse.Namespace) -> int:
    client = _create_client(args)
    tool, _ = client.tools.set_state(_context(args), args.id, args.activate)
    logger.info(f"Tool {args.id} is now {'enabled' if args.activate else 'disabled'}")
    _print_item(tool, args, "tool")
    return 0


# Resources


def cmd_resource_list(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = ResourceListOptions(
        limit=args.limit or 0,
        cursor=args.cursor or "",
        include_inactive=args.include_inactive,
        tags=args.tags or "",
        team_id=args.team_id or "",
    )
    resources, response = client.resources.list(_context(args), opts)
    _print_items(resources, args, "resources", ["id", "uri", "name", "is_active"], response.next_cursor)
    return 0


def cmd_resource_get(args: argparse.Namespace) -> int:
    client = _create_client(args)
    content, _ = client.resources.get(_context(args), args.id)
    if content is not None and not args.json and content.text is not None:
        print(content.text)
        return 0
    _print_item(content, args, "resource content")
    return 0


def cmd_resource_info(args: argparse.Namespace) -> int:
    client = _create_client(args)
    resource, _ = client.resources.get_info(_context(args), args.id)
    _print_item(resource, args, "resource")
    return 0


def cmd_resource_delete(args: argparse.Namespace) -> int:
    client = _create_client(args)
    client.resources.delete(_context(args), args.id)
    logger.info(f"Resource deleted: {args.id}")
    return 0


def cmd_resource_toggle(args: argparse.Namespace) -> int:
    client = _create_client(args)
    resource, _ = client.resources.set_state(_context(args), args.id, args.activate)
    logger.info(f"Resource {args.id} is now {'active' if resource.is_active else 'inactive'}")
    _print_item(resource, args, "resource")
    return 0


def cmd_resource_templates(args: argparse.Namespace) -> int:
    client = _create_client(args)
    result, _ = client.resources.list_templates(_context(args))
    templates = result.templates if result is not None else []
    _print_items(templates, args, "resource templates", ["name", "uri", "mime_type"])
    return 0


# Gateways


def cmd_gateway_list(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = GatewayListOptions(include_inactive=args.include_inactive)
    gateways, _ = client.gateways.list(_context(args), opts)
    _print_items(gateways, args, "gateways", ["id", "name", "url", "enabled", "reachable"])
    return 0


def cmd_gateway_get(args: argparse.Namespace) -> int:
    client = _create_client(args)
    gateway, _ = client.gateways.get(_context(args), args.id)
    _print_item(gateway, args, "gateway")
    return 0


def cmd_gateway_delete(args: argparse.Namespace) -> int:
    client = _create_client(args)
    client.gateways.delete(_context(args), args.id)
    logger.info(f"Gateway deleted: {args.id}")
    return 0


def cmd_gateway_toggle(args: argparse.Namespace) -> int:
    client = _create_client(args)
    gateway, _ = client.gateways.toggle(_context(args), args.id, args.activate)
    logger.info(f"Gateway {args.id} is now {'enabled' if args.activate else 'disabled'}")
    _print_item(gateway, args, "gateway")
    return 0


def cmd_gateway_refresh(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = GatewayRefreshOptions(
        include_resources=args.include_resources,
        include_prompts=args.include_prompts,
    )
    result, _ = client.gateways.refresh_tools(_context(args), args.id, opts)
    if args.json or result is None:
        _print_item(result, args, "refresh result")
        return 0

    logger.info(
        f"Refreshed gateway {args.id}: tools +{result.tools_added}/~{result.tools_updated}"
        f"/-{result.tools_removed} in {result.duration_ms:.0f} ms"
    )
    if not result.success:
        logger.error(f"Refresh reported failure: {result.error}")
        return 1
    return 0


# Servers


def cmd_server_list(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = ServerListOptions(
        limit=args.limit or 0,
        cursor=args.cursor or "",
        include_inactive=args.include_inactive,
        tags=args.tags or "",
        team_id=args.team_id or "",
    )
    servers, response = client.servers.list(_context(args), opts)
    _print_items(servers, args, "servers", ["id", "name", "is_active"], response.next_cursor)
    return 0


def cmd_server_get(args: argparse.Namespace) -> int:
    client = _create_client(args)
    server, _ = client.servers.get(_context(args), args.id)
    _print_item(server, args, "server")
    return 0


def cmd_server_delete(args: argparse.Namespace) -> int:
    client = _create_client(args)
    client.servers.delete(_context(args), args.id)
    logger.info(f"Server deleted: {args.id}")
    return 0


def cmd_server_toggle(args: argparse.Namespace) -> int:
    client = _create_client(args)
    server, _ = client.servers.set_state(_context(args), args.id, args.activate)
    logger.info(f"Server {args.id} is now {'active' if args.activate else 'inactive'}")
    _print_item(server, args, "server")
    return 0


def cmd_server_tools(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = ServerAssociationOptions(include_inactive=args.include_inactive)
    tools, _ = client.servers.list_tools(_context(args), args.id, opts)
    _print_items(tools, args, "tools", ["id", "name", "enabled"])
    return 0


# Prompts


def cmd_prompt_list(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = PromptListOptions(
        include_inactive=args.include_inactive,
        tags=args.tags or "",
        team_id=args.team_id or "",
    )
    prompts, _ = client.prompts.list(_context(args), opts)
    _print_items(prompts, args, "prompts", ["id", "name", "is_active"])
    return 0


def cmd_prompt_get(args: argparse.Namespace) -> int:
    client = _create_client(args)
    prompt_args = PromptGetArgs(args=_parse_key_values(args.arg) or None)
    result, _ = client.prompts.get(_context(args), args.id, prompt_args)
    if args.json or result is None:
        _print_item(result, args, "prompt")
        return 0
    for message in result.messages:
        text = message.content.text if message.content is not None else ""
        print(f"[{message.role}] {text or ''}")
    return 0


def cmd_prompt_delete(args: argparse.Namespace) -> int:
    client = _create_client(args)
    client.prompts.delete(_context(args), args.id)
    logger.info(f"Prompt deleted: {args.id}")
    return 0


def cmd_prompt_toggle(args: argparse.Namespace) -> int:
    client = _create_client(args)
    prompt, _ = client.prompts.toggle(_context(args), args.id, args.activate)
    logger.info(f"Prompt {args.id} is now {'active' if args.activate else 'inactive'}")
    _print_item(prompt, args, "prompt")
    return 0


# Agents


def cmd_agent_list(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = AgentListOptions(
        limit=args.limit or 0,
        cursor=args.cursor or "",
        include_inactive=args.include_inactive,
        tags=args.tags or "",
        team_id=args.team_id or "",
    )
    agents, response = client.agents.list(_context(args), opts)
    _print_items(agents, args, "agents", ["id", "name", "endpoint_url", "enabled"], response.next_cursor)
    return 0


def cmd_agent_get(args: argparse.Namespace) -> int:
    client = _create_client(args)
    agent, _ = client.agents.get(_context(args), args.id)
    _print_item(agent, args, "agent")
    return 0


def cmd_agent_delete(args: argparse.Namespace) -> int:
    client = _create_client(args)
    client.agents.delete(_context(args), args.id)
    logger.info(f"Agent deleted: {args.id}")
    return 0


def cmd_agent_toggle(args: argparse.Namespace) -> int:
    client = _create_client(args)
    agent, _ = client.agents.set_state(_context(args), args.id, args.activate)
    logger.info(f"Agent {args.id} is now {'enabled' if args.activate else 'disabled'}")
    _print_item(agent, args, "agent")
    return 0


def cmd_agent_invoke(args: argparse.Namespace) -> int:
    client = _create_client(args)
    parameters = json.loads(args.params) if args.params else None
    request = AgentInvokeRequest(
        parameters=parameters,
        interaction_type=args.interaction_type,
    )
    result, _ = client.agents.invoke(_context(args), args.name, request)
    _print_json(result)
    return 0


# Teams


def cmd_team_list(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = TeamListOptions(skip=args.skip or 0, limit=args.limit or 0)
    teams, _ = client.teams.list(_context(args), opts)
    _print_items(teams, args, "teams", ["id", "name", "member_count", "visibility"])
    return 0


def cmd_team_get(args: argparse.Namespace) -> int:
    client = _create_client(args)
    team, _ = client.teams.get(_context(args), args.id)
    _print_item(team, args, "team")
    return 0


def cmd_team_delete(args: argparse.Namespace) -> int:
    client = _create_client(args)
    client.teams.delete(_context(args), args.id)
    logger.info(f"Team deleted: {args.id}")
    return 0


def cmd_team_members(args: argparse.Namespace) -> int:
    client = _create_client(args)
    members, _ = client.teams.list_members(_context(args), args.id)
    _print_items(members, args, "members", ["user_email", "role", "is_active"])
    return 0


def cmd_team_discover(args: argparse.Namespace) -> int:
    client = _create_client(args)
    opts = TeamDiscoverOptions(skip=args.skip or 0, limit=args.limit or 0)
    teams, _ = client.teams.discover(_context(args), opts)
    _print_items(teams, args, "joinable teams", ["id", "name", "member_count", "is_joinable"])
    return 0


# Cancellation


def cmd_cancel(args: argparse.Namespace) -> int:
    client = _create_client(args)
    request = CancellationRequest(request_id=args.request_id, reason=args.reason)
    result, _ = client.cancel.cancel(_context(args), request)
    _print_item(result, args, "cancellation")
    return 0


def cmd_cancel_status(args: argparse.Namespace) -> int:
    client = _create_client(args)
    status, _ = client.cancel.status(_context(args), args.request_id)
    _print_item(status, args, "status")
    return 0


def _add_id_command(
    subparsers: Any,
    name: str,
    help_text: str,
    parents: list[argparse.ArgumentParser],
    id_help: str = "Resource ID",
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help_text, parents=parents)
    parser.add_argument(
        "--id",
        required=True,
        help=id_help,
    )
    return parser


def _add_toggle_flags(
    parser: argparse.ArgumentParser,
) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--enable",
        dest="activate",
        action="store_true",
        help="Activate",
    )
    group.add_argument(
        "--disable",
        dest="activate",
        action="store_false",
        help="Deactivate",
    )


COMMAND_HANDLERS = {
    "tool-list": cmd_tool_list,
    "tool-get": cmd_tool_get,
    "tool-delete": cmd_tool_delete,
    "tool-toggle": cmd_tool_toggle,
    "resource-list": cmd_resource_list,
    "resource-get": cmd_resource_get,
    "resource-info": cmd_resource_info,
    "resource-delete": cmd_resource_delete,
    "resource-toggle": cmd_resource_toggle,
    "resource-templates": cmd_resource_templates,
    "gateway-list": cmd_gateway_list,
    "gateway-get": cmd_gateway_get,
    "gateway-delete": cmd_gateway_delete,
    "gateway-toggle": cmd_gateway_toggle,
    "gateway-refresh": cmd_gateway_refresh,
    "server-list": cmd_server_list,
    "server-get": cmd_server_get,
    "server-delete": cmd_server_delete,
    "server-toggle": cmd_server_toggle,
    "server-tools": cmd_server_tools,
    "prompt-list": cmd_prompt_list,
    "prompt-get": cmd_prompt_get,
    "prompt-delete": cmd_prompt_delete,
    "prompt-toggle": cmd_prompt_toggle,
    "agent-list": cmd_agent_list,
    "agent-get": cmd_agent_get,
    "agent-delete": cmd_agent_delete,
    "agent-toggle": cmd_agent_toggle,
    "agent-invoke": cmd_agent_invoke,
    "team-list": cmd_team_list,
    "team-get": cmd_team_get,
    "team-delete": cmd_team_delete,
    "team-members": cmd_team_members,
    "team-discover": cmd_team_discover,
    "cancel": cmd_cancel,
    "cancel-status": cmd_cancel_status,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with every subcommand."""
    parser = argparse.ArgumentParser(
        description="ContextForge Management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (used if command-line options not provided):
  CONTEXTFORGE_ADDR             API base URL (default: http://localhost:8000/)
  CONTEXTFORGE_TOKEN            Bearer token
  CONTEXTFORGE_TIMEOUT_SECONDS  Per-request timeout
""",
    )
    parser.add_argument(
        "--addr",
        help="API base URL (overrides CONTEXTFORGE_ADDR)",
    )
    parser.add_argument(
        "--token",
        help="Bearer token (overrides CONTEXTFORGE_TOKEN)",
    )
    parser.add_argument(
        "--token-file",
        help="File holding the bearer token, plain or JSON with access_token",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--json",
        action="store_true",
        help="Print raw JSON",
    )

    paging = argparse.ArgumentParser(add_help=False)
    paging.add_argument("--limit", type=int, help="Maximum number of items")
    paging.add_argument("--cursor", help="Cursor from a previous page")

    filters = argparse.ArgumentParser(add_help=False)
    filters.add_argument("--include-inactive", action="store_true", help="Include inactive items")
    filters.add_argument("--tags", help="Comma-separated tags to filter by")
    filters.add_argument("--team-id", help="Only items owned by this team")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Tools
    subparsers.add_parser("tool-list", help="List tools", parents=[output, paging, filters])
    _add_id_command(subparsers, "tool-get", "Show a tool", [output])
    _add_id_command(subparsers, "tool-delete", "Delete a tool", [output])
    _add_toggle_flags(_add_id_command(subparsers, "tool-toggle", "Enable or disable a tool", [output]))

    # Resources
    subparsers.add_parser("resource-list", help="List resources", parents=[output, paging, filters])
    _add_id_command(subparsers, "resource-get", "Print a resource's content", [output])
    _add_id_command(subparsers, "resource-info", "Show a resource's metadata", [output])
    _add_id_command(subparsers, "resource-delete", "Delete a resource", [output])
    _add_toggle_flags(
        _add_id_command(subparsers, "resource-toggle", "Activate or deactivate a resource", [output])
    )
    subparsers.add_parser("resource-templates", help="List resource templates", parents=[output])

    # Gateways
    gateway_list = subparsers.add_parser("gateway-list", help="List gateways", parents=[output])
    gateway_list.add_argument("--include-inactive", action="store_true", help="Include inactive gateways")
    _add_id_command(subparsers, "gateway-get", "Show a gateway", [output])
    _add_id_command(subparsers, "gateway-delete", "Delete a gateway", [output])
    _add_toggle_flags(_add_id_command(subparsers, "gateway-toggle", "Enable or disable a gateway", [output]))
    gateway_refresh = _add_id_command(subparsers, "gateway-refresh", "Refresh a gateway's tools", [output])
    gateway_refresh.add_argument("--include-resources", action="store_true", help="Also refresh resources")
    gateway_refresh.add_argument("--include-prompts", action="store_true", help="Also refresh prompts")

    # Servers
    subparsers.add_parser("server-list", help="List servers", parents=[output, paging, filters])
    _add_id_command(subparsers, "server-get", "Show a server", [output])
    _add_id_command(subparsers, "server-delete", "Delete a server", [output])
    _add_toggle_flags(
        _add_id_command(subparsers, "server-toggle", "Activate or deactivate a server", [output])
    )
    server_tools = _add_id_command(subparsers, "server-tools", "List a server's tools", [output])
    server_tools.add_argument("--include-inactive", action="store_true", help="Include inactive tools")

    # Prompts
    subparsers.add_parser("prompt-list", help="List prompts", parents=[output, filters])
    prompt_get = _add_id_command(subparsers, "prompt-get", "Render a prompt", [output], "Prompt ID or name")
    prompt_get.add_argument(
        "--arg",
        action="append",
        help="Template argument as key=value (repeatable)",
    )
    _add_id_command(subparsers, "prompt-delete", "Delete a prompt", [output])
    _add_toggle_flags(
        _add_id_command(subparsers, "prompt-toggle", "Activate or deactivate a prompt", [output])
    )

    # Agents
    subparsers.add_parser("agent-list", help="List A2A agents", parents=[output, paging, filters])
    _add_id_command(subparsers, "agent-get", "Show an agent", [output])
    _add_id_command(subparsers, "agent-delete", "Delete an agent", [output])
    _add_toggle_flags(_add_id_command(subparsers, "agent-toggle", "Enable or disable an agent", [output]))
    agent_invoke = subparsers.add_parser("agent-invoke", help="Invoke an agent by name", parents=[output])
    agent_invoke.add_argument("--name", required=True, help="Agent name")
    agent_invoke.add_argument("--params", help="Parameters as a JSON object")
    agent_invoke.add_argument("--interaction-type", help="Interaction type (server default: query)")

    # Teams
    team_list = subparsers.add_parser("team-list", help="List teams", parents=[output])
    team_list.add_argument("--skip", type=int, help="Number of teams to skip")
    team_list.add_argument("--limit", type=int, help="Maximum number of teams")
    _add_id_command(subparsers, "team-get", "Show a team", [output])
    _add_id_command(subparsers, "team-delete", "Delete a team", [output])
    _add_id_command(subparsers, "team-members", "List a team's members", [output])
    team_discover = subparsers.add_parser("team-discover", help="List joinable public teams", parents=[output])
    team_discover.add_argument("--skip", type=int, help="Number of teams to skip")
    team_discover.add_argument("--limit", type=int, help="Maximum number of teams")

    # Cancellation
    cancel = subparsers.add_parser("cancel", help="Cancel an in-flight request", parents=[output])
    cancel.add_argument("--request-id", required=True, help="Request ID")
    cancel.add_argument("--reason", help="Reason for cancelling")
    cancel_status = subparsers.add_parser("cancel-status", help="Show a request's status", parents=[output])
    cancel_status.add_argument("--request-id", required=True, help="Request ID")

    return parser


def main(
    argv: list[str] | None = None,
) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.command:
        parser.print_help()
        return 1

    handler = COMMAND_HANDLERS.get(args.command)
    if not handler:
        logger.error(f"Unknown command: {args.command}")
        return 1

    try:
        return handler(args)
    except RateLimitError as e:
        logger.error(f"Rate limited: {e}")
        return 1
    except (ContextForgeError, ValueError, RuntimeError, FileNotFoundError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
