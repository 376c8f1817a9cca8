"""Shared parameter specs and builders for the tool catalog."""

from typing import Any

from wcc_mcp.gateway.constants import DEFAULT_LISTING_LIMIT
from wcc_mcp.gateway.registry import NO_DEFAULT, ParameterSpec


def string(
    name: str, description: str, *, required: bool = False, default: Any = NO_DEFAULT
) -> ParameterSpec:
    return ParameterSpec(name, "string", description, required, default)


def number(
    name: str, description: str, *, required: bool = False, default: Any = NO_DEFAULT
) -> ParameterSpec:
    return ParameterSpec(name, "number", description, required, default)


def mapping(
    name: str, description: str, *, required: bool = False, default: Any = NO_DEFAULT
) -> ParameterSpec:
    return ParameterSpec(name, "object", description, required, default)


def limit(
    default: int = DEFAULT_LISTING_LIMIT,
    description: str = "Maximum number of results to return",
) -> ParameterSpec:
    return number("limit", description, default=default)


DOC_NAME = string("dDocName", "Document name (dDocName)", required=True)
FOLDER_GUID = string("fFolderGUID", "Folder GUID", required=True)
DESTINATION_FOLDER = string(
    "destinationFolderGUID", "GUID of the destination folder", required=True
)
OUTPUT_PATH = string("outputPath", "Local path to save the downloaded file", required=True)
LOCAL_FILE = string("filePath", "Local path of the file to upload", required=True)
