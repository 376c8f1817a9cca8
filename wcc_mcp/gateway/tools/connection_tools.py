"""Connectivity and identity tools."""

from typing import Any

from wcc_mcp.client.webcenter import WebCenterContentClient
from wcc_mcp.gateway.registry import ToolDefinition
from wcc_mcp.gateway.tools.helpers import string


def _test_connection(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.test_connection()


def _get_server_info(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.get_server_info()


def _get_current_user(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.get_current_user()


def _get_user_info(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_user_info(args["dName"])


CONNECTION_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="test-connection",
        title="Test Connection",
        description="Test connectivity and credentials against the WebCenter Content server",
        handler=_test_connection,
    ),
    ToolDefinition(
        name="get-server-info",
        title="Get Server Info",
        description="Get version and configuration information about the WebCenter Content server",
        handler=_get_server_info,
    ),
    ToolDefinition(
        name="get-current-user",
        title="Get Current User",
        description="Get the profile of the user the server is authenticated as",
        handler=_get_current_user,
    ),
    ToolDefinition(
        name="get-user-info",
        title="Get User Info",
        description="Get profile information for a WebCenter Content user",
        handler=_get_user_info,
        parameters=(string("dName", "User login name (dName)", required=True),),
    ),
)
