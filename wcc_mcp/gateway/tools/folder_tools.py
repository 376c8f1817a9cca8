"""Folder tools."""

from typing import Any

from wcc_mcp.client.webcenter import WebCenterContentClient
from wcc_mcp.errors import InvalidArgumentError
from wcc_mcp.gateway.constants import DEFAULT_FOLDER_PAGE_SIZE, DEFAULT_SEARCH_LIMIT
from wcc_mcp.gateway.registry import ToolDefinition
from wcc_mcp.gateway.tools.helpers import (
    DESTINATION_FOLDER,
    FOLDER_GUID,
    limit,
    mapping,
    number,
    string,
)


def _create_folder(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.create_folder(
        args["folderName"],
        parent_folder_guid=args["parentFolderGUID"],
        description=args["description"],
    )


def _get_folder_info(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_folder_info(args["fFolderGUID"])


def _search_in_folder(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.search_in_folder(
        args["fFolderGUID"],
        query=args["query"] or None,
        limit=args["limit"] or DEFAULT_SEARCH_LIMIT,
    )


def _update_folder(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.update_folder(args["fFolderGUID"], args["metadata"])


def _delete_folder(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.delete_folder(args["fFolderGUID"])


def _list_folder_contents(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_folder_contents(
        args["fFolderGUID"], limit=args["limit"], offset=args["offset"]
    )


def _list_root_folders(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.list_root_folders()


def _get_folder_by_path(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_folder_by_path(args["path"])


def _move_folder(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.move_folder(args["fFolderGUID"], args["destinationFolderGUID"])


def _copy_folder(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.copy_folder(
        args["fFolderGUID"],
        args["destinationFolderGUID"],
        new_folder_name=args["newFolderName"],
    )


def _create_shortcut(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    target_doc = args["targetDocName"]
    target_folder = args["targetFolderGUID"]
    if bool(target_doc) == bool(target_folder):
        raise InvalidArgumentError(
            "targetDocName", "exactly one of targetDocName or targetFolderGUID is required"
        )
    return client.create_shortcut(
        args["fFolderGUID"], target_doc_name=target_doc, target_folder_guid=target_folder
    )


FOLDER_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="create-folder",
        title="Create Folder",
        description="Create a new folder in WebCenter Content",
        handler=_create_folder,
        parameters=(
            string("folderName", "Name of the folder to create", required=True),
            string("parentFolderGUID", "Parent folder GUID (optional)"),
            string("description", "Folder description (optional)"),
        ),
        read_only=False,
        idempotent=False,
    ),
    ToolDefinition(
        name="get-folder-info",
        title="Get Folder Info",
        description="Get information about a specific folder",
        handler=_get_folder_info,
        parameters=(FOLDER_GUID,),
    ),
    ToolDefinition(
        name="search-in-folder",
        title="Search In Folder",
        description="Search for items within a specific folder",
        handler=_search_in_folder,
        parameters=(
            string("fFolderGUID", "Folder GUID to search within", required=True),
            string("query", "Search query (optional)"),
            limit(DEFAULT_SEARCH_LIMIT, "Maximum number of results"),
        ),
    ),
    ToolDefinition(
        name="update-folder",
        title="Update Folder",
        description="Update the metadata of a folder",
        handler=_update_folder,
        parameters=(
            FOLDER_GUID,
            mapping(
                "metadata",
                "Folder fields to update (e.g. fFolderName, fDescription)",
                required=True,
            ),
        ),
        read_only=False,
    ),
    ToolDefinition(
        name="delete-folder",
        title="Delete Folder",
        description="Delete a folder",
        handler=_delete_folder,
        parameters=(FOLDER_GUID,),
        read_only=False,
        destructive=True,
    ),
    ToolDefinition(
        name="list-folder-contents",
        title="List Folder Contents",
        description="List the documents and subfolders of a folder",
        handler=_list_folder_contents,
        parameters=(
            FOLDER_GUID,
            limit(DEFAULT_FOLDER_PAGE_SIZE),
            number("offset", "Number of items to skip", default=0),
        ),
    ),
    ToolDefinition(
        name="list-root-folders",
        title="List Root Folders",
        description="List the top-level folders",
        handler=_list_root_folders,
    ),
    ToolDefinition(
        name="get-folder-by-path",
        title="Get Folder By Path",
        description="Resolve a folder from its path (e.g. /Contribution Folders/Projects)",
        handler=_get_folder_by_path,
        parameters=(string("path", "Folder path", required=True),),
    ),
    ToolDefinition(
        name="move-folder",
        title="Move Folder",
        description="Move a folder under another folder",
        handler=_move_folder,
        parameters=(FOLDER_GUID, DESTINATION_FOLDER),
        read_only=False,
    ),
    ToolDefinition(
        name="copy-folder",
        title="Copy Folder",
        description="Copy a folder under another folder",
        handler=_copy_folder,
        parameters=(
            FOLDER_GUID,
            DESTINATION_FOLDER,
            string("newFolderName", "Folder name for the copy (optional)"),
        ),
        read_only=False,
        idempotent=False,
    ),
    ToolDefinition(
        name="create-shortcut",
        title="Create Shortcut",
        description="Create a shortcut in a folder pointing at a document or another folder",
        handler=_create_shortcut,
        parameters=(
            string("fFolderGUID", "GUID of the folder that will hold the shortcut", required=True),
            string("targetDocName", "Document the shortcut points to"),
            string("targetFolderGUID", "Folder the shortcut points to"),
        ),
        read_only=False,
        idempotent=False,
    ),
)
