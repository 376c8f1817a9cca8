"""Document tools: search, metadata, content transfer, checkout and placement."""

from functools import partial
from typing import Any

from wcc_mcp.client.webcenter import WebCenterContentClient
from wcc_mcp.gateway.constants import DEFAULT_SEARCH_LIMIT
from wcc_mcp.gateway.registry import ToolDefinition
from wcc_mcp.gateway.results import FileDownload
from wcc_mcp.gateway.tools.helpers import (
    DESTINATION_FOLDER,
    DOC_NAME,
    LOCAL_FILE,
    OUTPUT_PATH,
    limit,
    mapping,
    string,
)


def _search_documents(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.search_documents(
        args["query"] or "*",
        limit=args["limit"] or DEFAULT_SEARCH_LIMIT,
        order_by=args["orderBy"] or None,
    )


def _get_document_metadata(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_document_metadata(args["dDocName"])


def _download_document(client: WebCenterContentClient, args: dict[str, Any]) -> FileDownload:
    return FileDownload(
        output_path=args["outputPath"],
        write=partial(
            client.download_document,
            args["dDocName"],
            version=args["version"],
            rendition=args["rendition"],
        ),
    )


def _update_document_metadata(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.update_document_metadata(args["dDocName"], args["metadata"])


def _upload_document(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.upload_document(args["filePath"], args["metadata"])


def _checkin_new_revision(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.checkin_new_revision(args["dDocName"], args["filePath"], args["metadata"])


def _delete_document(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.delete_document(args["dDocName"])


def _checkout_document(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.checkout_document(args["dDocName"])


def _reverse_checkout(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.reverse_checkout(args["dDocName"])


def _get_document_capabilities(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_document_capabilities(args["dDocName"])


def _get_document_history(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_document_history(args["dDocName"])


def _get_document_folders(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_document_folders(args["dDocName"])


def _move_document(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.move_document(args["dDocName"], args["destinationFolderGUID"])


def _copy_document(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.copy_document(
        args["dDocName"], args["destinationFolderGUID"], new_doc_name=args["newDocName"]
    )


def _list_work_in_progress(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_work_in_progress(limit=args["limit"])


def _list_checked_out_documents(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_checked_out_documents(limit=args["limit"])


def _list_expired_documents(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_expired_documents(limit=args["limit"])


def _list_recent_documents(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_recent_documents(limit=args["limit"])


_METADATA_VALUES = mapping(
    "metadata", "Metadata values (e.g. dDocTitle, dDocType, dSecurityGroup)", default={}
)

DOCUMENT_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="search-documents",
        title="Search Documents",
        description="Search for documents in WebCenter Content",
        handler=_search_documents,
        parameters=(
            string("query", "Search query string", required=True),
            limit(DEFAULT_SEARCH_LIMIT),
            string("orderBy", 'Sort order (e.g., "dInDate desc")'),
        ),
    ),
    ToolDefinition(
        name="get-document-metadata",
        title="Get Document Metadata",
        description="Get metadata for a specific document",
        handler=_get_document_metadata,
        parameters=(DOC_NAME,),
    ),
    ToolDefinition(
        name="download-document",
        title="Download Document",
        description="Download a document from WebCenter Content",
        handler=_download_document,
        parameters=(
            DOC_NAME,
            string("version", "Document version (optional)"),
            string("rendition", "Rendition type (optional)"),
            OUTPUT_PATH,
        ),
        idempotent=False,
    ),
    ToolDefinition(
        name="update-document-metadata",
        title="Update Document Metadata",
        description="Update metadata for a document",
        handler=_update_document_metadata,
        parameters=(DOC_NAME, mapping("metadata", "Metadata values to update", required=True)),
        read_only=False,
    ),
    ToolDefinition(
        name="upload-document",
        title="Upload Document",
        description="Upload (check in) a new document to WebCenter Content",
        handler=_upload_document,
        parameters=(LOCAL_FILE, _METADATA_VALUES),
        read_only=False,
        idempotent=False,
    ),
    ToolDefinition(
        name="checkin-new-revision",
        title="Check In New Revision",
        description="Check in a new revision of an existing document",
        handler=_checkin_new_revision,
        parameters=(DOC_NAME, LOCAL_FILE, _METADATA_VALUES),
        read_only=False,
        idempotent=False,
    ),
    ToolDefinition(
        name="delete-document",
        title="Delete Document",
        description="Delete a document and all of its revisions",
        handler=_delete_document,
        parameters=(DOC_NAME,),
        read_only=False,
        destructive=True,
    ),
    ToolDefinition(
        name="checkout-document",
        title="Checkout Document",
        description="Checkout a document for editing",
        handler=_checkout_document,
        parameters=(DOC_NAME,),
        read_only=False,
    ),
    ToolDefinition(
        name="reverse-checkout",
        title="Reverse Checkout",
        description="Reverse checkout (undo checkout) of a document",
        handler=_reverse_checkout,
        parameters=(DOC_NAME,),
        read_only=False,
    ),
    ToolDefinition(
        name="get-document-capabilities",
        title="Get Document Capabilities",
        description="Get capabilities/permissions for a document",
        handler=_get_document_capabilities,
        parameters=(DOC_NAME,),
    ),
    ToolDefinition(
        name="get-document-history",
        title="Get Document History",
        description="Get the audit history of a document",
        handler=_get_document_history,
        parameters=(DOC_NAME,),
    ),
    ToolDefinition(
        name="get-document-folders",
        title="Get Document Folders",
        description="List the folders a document is filed in",
        handler=_get_document_folders,
        parameters=(DOC_NAME,),
    ),
    ToolDefinition(
        name="move-document",
        title="Move Document",
        description="Move a document to another folder",
        handler=_move_document,
        parameters=(DOC_NAME, DESTINATION_FOLDER),
        read_only=False,
    ),
    ToolDefinition(
        name="copy-document",
        title="Copy Document",
        description="Copy a document into another folder",
        handler=_copy_document,
        parameters=(
            DOC_NAME,
            DESTINATION_FOLDER,
            string("newDocName", "Document name for the copy (optional)"),
        ),
        read_only=False,
        idempotent=False,
    ),
    ToolDefinition(
        name="list-work-in-progress",
        title="List Work In Progress",
        description="List documents currently in progress (not yet released)",
        handler=_list_work_in_progress,
        parameters=(limit(),),
    ),
    ToolDefinition(
        name="list-checked-out-documents",
        title="List Checked Out Documents",
        description="List documents that are currently checked out",
        handler=_list_checked_out_documents,
        parameters=(limit(),),
    ),
    ToolDefinition(
        name="list-expired-documents",
        title="List Expired Documents",
        description="List documents whose expiration date has passed",
        handler=_list_expired_documents,
        parameters=(limit(),),
    ),
    ToolDefinition(
        name="list-recent-documents",
        title="List Recent Documents",
        description="List recently checked in documents",
        handler=_list_recent_documents,
        parameters=(limit(),),
    ),
)
