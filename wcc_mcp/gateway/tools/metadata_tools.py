"""Metadata model and security tools."""

from typing import Any

from wcc_mcp.client.webcenter import WebCenterContentClient
from wcc_mcp.gateway.registry import ToolDefinition


def _list_metadata_fields(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.list_metadata_fields()


def _list_document_types(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.list_document_types()


def _list_security_groups(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.list_security_groups()


def _list_security_accounts(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.list_security_accounts()


METADATA_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list-metadata-fields",
        title="List Metadata Fields",
        description="List the metadata fields defined on the server",
        handler=_list_metadata_fields,
    ),
    ToolDefinition(
        name="list-document-types",
        title="List Document Types",
        description="List the document types (dDocType values)",
        handler=_list_document_types,
    ),
    ToolDefinition(
        name="list-security-groups",
        title="List Security Groups",
        description="List the security groups available to the current user",
        handler=_list_security_groups,
    ),
    ToolDefinition(
        name="list-security-accounts",
        title="List Security Accounts",
        description="List the security accounts available to the current user",
        handler=_list_security_accounts,
    ),
)
