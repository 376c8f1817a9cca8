"""Read-only resources: URI-addressed JSON views over common listings."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from wcc_mcp.errors import ResourceError
from wcc_mcp.gateway.constants import DOCUMENTS_RESOURCE_LIMIT

if TYPE_CHECKING:
    from wcc_mcp.client.webcenter import WebCenterContentClient

_resource_log = logging.getLogger("wcc_mcp.gateway.resources")

RESOURCE_MIME_TYPE = "application/json"


@dataclass(frozen=True)
class ResourceDefinition:
    uri: str
    name: str
    description: str
    reader: Callable[["WebCenterContentClient"], Any] = field(compare=False, repr=False)
    mime_type: str = RESOURCE_MIME_TYPE

    def to_wire(self) -> dict[str, Any]:
        return {
            "uri": self.uri,
            "name": self.name,
            "description": self.description,
            "mimeType": self.mime_type,
        }


def _read_documents(client: "WebCenterContentClient") -> Any:
    return client.search_documents("*", limit=DOCUMENTS_RESOURCE_LIMIT)


def _read_folders(client: "WebCenterContentClient") -> Any:
    return client.list_root_folders()


def _read_work_in_progress(client: "WebCenterContentClient") -> Any:
    return client.list_work_in_progress()


RESOURCES: tuple[ResourceDefinition, ...] = (
    ResourceDefinition(
        uri="webcenter://documents",
        name="WebCenter Documents",
        description="Access to WebCenter Content documents",
        reader=_read_documents,
    ),
    ResourceDefinition(
        uri="webcenter://folders",
        name="WebCenter Folders",
        description="Access to WebCenter Content folders",
        reader=_read_folders,
    ),
    ResourceDefinition(
        uri="webcenter://work-in-progress",
        name="Work in Progress",
        description="Documents currently being worked on",
        reader=_read_work_in_progress,
    ),
)


class ResourceCatalog:
    """Static resource list backed by the shared client."""

    def __init__(
        self,
        client: "WebCenterContentClient",
        definitions: tuple[ResourceDefinition, ...] = RESOURCES,
    ) -> None:
        self.client = client
        self._resources = {definition.uri: definition for definition in definitions}

    def list_resources(self) -> list[ResourceDefinition]:
        return list(self._resources.values())

    def read_resource(self, uri: str) -> str:
        """Return the pretty-printed JSON text for ``uri``.

        Raises ``ResourceError`` for unknown URIs and for backend failures.
        """
        definition = self._resources.get(uri)
        if definition is None:
            raise ResourceError(uri, f"Unknown resource: {uri}")
        _resource_log.info("resource_read uri=%s", uri, extra={"uri": uri})
        try:
            payload = definition.reader(self.client)
        except Exception as e:
            _resource_log.warning(
                "resource_error uri=%s error=%s", uri, e, extra={"uri": uri}
            )
            raise ResourceError(uri, str(e)) from e
        return json.dumps(payload, indent=2, ensure_ascii=False)
