from .agent_service import AgentsService
from .cancellation_service import CancellationService
from .gateway_service import GatewaysService
from .prompt_service import PromptsService
from .resource_service import ResourcesService
from .server_service import ServersService
from .team_service import TeamsService
from .tool_service import ToolsService

__all__ = [
    "AgentsService",
    "CancellationService",
    "GatewaysService",
    "PromptsService",
    "ResourcesService",
    "ServersService",
    "TeamsService",
    "ToolsService",
]
