"""Tool catalog grouped by area of the WebCenter Content REST API."""

from wcc_mcp.gateway.registry import ToolDefinition, ToolRegistry
from wcc_mcp.gateway.tools.connection_tools import CONNECTION_TOOLS
from wcc_mcp.gateway.tools.document_tools import DOCUMENT_TOOLS
from wcc_mcp.gateway.tools.folder_tools import FOLDER_TOOLS
from wcc_mcp.gateway.tools.metadata_tools import METADATA_TOOLS
from wcc_mcp.gateway.tools.revision_tools import ATTACHMENT_TOOLS, REVISION_TOOLS
from wcc_mcp.gateway.tools.sharing_tools import SHARING_TOOLS
from wcc_mcp.gateway.tools.workflow_tools import WORKFLOW_TOOLS

ALL_TOOLS: tuple[ToolDefinition, ...] = (
    *CONNECTION_TOOLS,
    *DOCUMENT_TOOLS,
    *REVISION_TOOLS,
    *ATTACHMENT_TOOLS,
    *SHARING_TOOLS,
    *FOLDER_TOOLS,
    *WORKFLOW_TOOLS,
    *METADATA_TOOLS,
)


def build_registry() -> ToolRegistry:
    """Fresh registry holding the full catalog in publication order."""
    return ToolRegistry(ALL_TOOLS)


__all__ = [
    "ALL_TOOLS",
    "ATTACHMENT_TOOLS",
    "CONNECTION_TOOLS",
    "DOCUMENT_TOOLS",
    "FOLDER_TOOLS",
    "METADATA_TOOLS",
    "REVISION_TOOLS",
    "SHARING_TOOLS",
    "WORKFLOW_TOOLS",
    "build_registry",
]
