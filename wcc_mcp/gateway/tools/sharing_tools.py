"""Public link and subscription tools."""

from typing import Any

from wcc_mcp.client.webcenter import WebCenterContentClient
from wcc_mcp.gateway.registry import ToolDefinition
from wcc_mcp.gateway.tools.helpers import DOC_NAME, limit, number, string


def _list_public_links(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_public_links(args["dDocName"])


def _create_public_link(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.create_public_link(
        args["dDocName"], role=args["role"], expires_in_days=args["expiresInDays"]
    )


def _subscribe_document(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.subscribe_document(args["dDocName"])


def _unsubscribe_document(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.unsubscribe_document(args["dDocName"])


def _list_subscriptions(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_subscriptions(limit=args["limit"])


SHARING_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list-public-links",
        title="List Public Links",
        description="List the public links created for a document",
        handler=_list_public_links,
        parameters=(DOC_NAME,),
    ),
    ToolDefinition(
        name="create-public-link",
        title="Create Public Link",
        description="Create a public link to a document",
        handler=_create_public_link,
        parameters=(
            DOC_NAME,
            string(
                "role",
                "Access granted by the link (viewer, downloader, contributor)",
                default="viewer",
            ),
            number("expiresInDays", "Number of days until the link expires (optional)"),
        ),
        read_only=False,
        idempotent=False,
    ),
    ToolDefinition(
        name="subscribe-document",
        title="Subscribe To Document",
        description="Subscribe the current user to change notifications for a document",
        handler=_subscribe_document,
        parameters=(DOC_NAME,),
        read_only=False,
    ),
    ToolDefinition(
        name="unsubscribe-document",
        title="Unsubscribe From Document",
        description="Remove the current user's subscription to a document",
        handler=_unsubscribe_document,
        parameters=(DOC_NAME,),
        read_only=False,
    ),
    ToolDefinition(
        name="list-subscriptions",
        title="List Subscriptions",
        description="List the current user's document subscriptions",
        handler=_list_subscriptions,
        parameters=(limit(),),
    ),
)
