"""Revision, rendition and attachment tools."""

from functools import partial
from typing import Any

from wcc_mcp.client.webcenter import WebCenterContentClient
from wcc_mcp.gateway.registry import ToolDefinition
from wcc_mcp.gateway.results import FileDownload
from wcc_mcp.gateway.tools.helpers import DOC_NAME, LOCAL_FILE, OUTPUT_PATH, string

_VERSION = string("version", "Revision identifier (dRevLabel or dID)", required=True)
_ATTACHMENT_NAME = string("attachmentName", "Attachment name", required=True)


def _list_document_versions(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_document_versions(args["dDocName"])


def _get_version_metadata(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_version_metadata(args["dDocName"], args["version"])


def _delete_document_version(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.delete_document_version(args["dDocName"], args["version"])


def _list_renditions(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_renditions(args["dDocName"])


def _list_attachments(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_attachments(args["dDocName"])


def _add_attachment(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.add_attachment(args["dDocName"], args["filePath"], args["attachmentName"])


def _download_attachment(client: WebCenterContentClient, args: dict[str, Any]) -> FileDownload:
    return FileDownload(
        output_path=args["outputPath"],
        write=partial(client.download_attachment, args["dDocName"], args["attachmentName"]),
        label="Attachment",
    )


def _delete_attachment(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.delete_attachment(args["dDocName"], args["attachmentName"])


REVISION_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list-document-versions",
        title="List Document Versions",
        description="List all revisions of a document",
        handler=_list_document_versions,
        parameters=(DOC_NAME,),
    ),
    ToolDefinition(
        name="get-version-metadata",
        title="Get Version Metadata",
        description="Get metadata for a specific revision of a document",
        handler=_get_version_metadata,
        parameters=(DOC_NAME, _VERSION),
    ),
    ToolDefinition(
        name="delete-document-version",
        title="Delete Document Version",
        description="Delete a single revision of a document",
        handler=_delete_document_version,
        parameters=(DOC_NAME, _VERSION),
        read_only=False,
        destructive=True,
    ),
    ToolDefinition(
        name="list-renditions",
        title="List Renditions",
        description="List the available renditions of a document",
        handler=_list_renditions,
        parameters=(DOC_NAME,),
    ),
)

ATTACHMENT_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list-attachments",
        title="List Attachments",
        description="List the attachments of a document",
        handler=_list_attachments,
        parameters=(DOC_NAME,),
    ),
    ToolDefinition(
        name="add-attachment",
        title="Add Attachment",
        description="Attach a local file to a document",
        handler=_add_attachment,
        parameters=(
            DOC_NAME,
            LOCAL_FILE,
            string("attachmentName", "Name for the attachment", required=True),
        ),
        read_only=False,
        idempotent=False,
    ),
    ToolDefinition(
        name="download-attachment",
        title="Download Attachment",
        description="Download an attachment of a document",
        handler=_download_attachment,
        parameters=(DOC_NAME, _ATTACHMENT_NAME, OUTPUT_PATH),
        idempotent=False,
    ),
    ToolDefinition(
        name="delete-attachment",
        title="Delete Attachment",
        description="Remove an attachment from a document",
        handler=_delete_attachment,
        parameters=(DOC_NAME, _ATTACHMENT_NAME),
        read_only=False,
        destructive=True,
    ),
)
