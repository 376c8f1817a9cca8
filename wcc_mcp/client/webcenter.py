"""HTTP client for the Oracle WebCenter Content REST API.

One method per remote operation. Every method performs a single authenticated
request (HTTP Basic) against the configured base URL and returns the decoded JSON
payload; binary downloads are copied into a caller-supplied writable sink instead.
Non-2xx answers and transport failures are raised as ``BackendError``.
"""

from __future__ import annotations

import json
import logging
import os
from contextlib import closing
from typing import IO, TYPE_CHECKING, Any
from urllib.parse import quote

import requests
from requests.auth import HTTPBasicAuth

from wcc_mcp.errors import BackendError, ConfigurationError
from wcc_mcp.gateway.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    DOWNLOAD_CHUNK_BYTES,
    MAX_ERROR_DETAIL_CHARS,
)

if TYPE_CHECKING:
    from wcc_mcp.gateway.config import WebCenterConfig

_client_log = logging.getLogger("wcc_mcp.client")

_ERROR_DETAIL_KEYS = ("detail", "title", "errorMessage", "message", "error")


def _segment(value: str) -> str:
    """Percent-encode one path identifier (dDocName, GUID, attachment name...)."""
    return quote(str(value), safe="")


def _error_detail(body: Any) -> str:
    if isinstance(body, dict):
        for key in _ERROR_DETAIL_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return ""
    if isinstance(body, str):
        return body.strip()[:MAX_ERROR_DETAIL_CHARS]
    return ""


def _backend_error(response: requests.Response) -> BackendError:
    body: Any
    try:
        body = response.json()
    except ValueError:
        body = response.text
    message = f"HTTP {response.status_code} {response.reason or ''}".rstrip()
    detail = _error_detail(body)
    if detail:
        message = f"{message}: {detail}"
    return BackendError(message, status_code=response.status_code, body=body)


class WebCenterContentClient:
    """Authenticated client for a single WebCenter Content server."""

    def __init__(
        self,
        base_url: str | None,
        username: str | None,
        password: str | None,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        verify: bool = True,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url:
            raise ConfigurationError("WebCenter Content base URL is required")
        if not username:
            raise ConfigurationError("WebCenter Content username is required")
        if not password:
            raise ConfigurationError("WebCenter Content password is required")

        self.base_url = base_url.rstrip("/")
        self.username = username
        self.timeout = timeout
        self.verify = verify

        self.session = session if session is not None else requests.Session()
        self.session.auth = HTTPBasicAuth(username, password)
        self.session.headers.update({"Accept": "application/json"})

    @classmethod
    def from_config(cls, config: "WebCenterConfig") -> "WebCenterContentClient":
        return cls(
            base_url=config.base_url,
            username=config.username,
            password=config.password,
            timeout=config.timeout,
            verify=config.verify_ssl,
        )

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------
    # Transport helpers
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        files: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        stream: bool = False,
    ) -> requests.Response:
        query = {k: v for k, v in (params or {}).items() if v is not None} or None
        _client_log.debug("wcc_request method=%s path=%s", method, path)
        try:
            response = self.session.request(
                method,
                self._url(path),
                params=query,
                json=json_body,
                files=files,
                data=data,
                timeout=self.timeout,
                verify=self.verify,
                stream=stream,
            )
        except requests.RequestException as e:
            raise BackendError(f"Request to {path} failed: {e}") from e

        if not response.ok:
            try:
                raise _backend_error(response)
            finally:
                response.close()
        return response

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = self._send(method, path, **kwargs)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {"raw": response.text}

    def _stream_to(self, path: str, sink: IO[bytes], params: dict[str, Any] | None = None) -> int:
        """Copy a binary response body into ``sink``; returns the byte count."""
        response = self._send("GET", path, params=params, stream=True)
        written = 0
        with closing(response):
            try:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_BYTES):
                    if chunk:
                        sink.write(chunk)
                        written += len(chunk)
            except requests.RequestException as e:
                raise BackendError(f"Download from {path} interrupted: {e}") from e
        return written

    def _upload(
        self,
        path: str,
        file_field: str,
        file_path: str,
        fields: dict[str, str],
    ) -> Any:
        with open(file_path, "rb") as handle:
            files = {file_field: (os.path.basename(file_path), handle)}
            return self._request("POST", path, files=files, data=fields)

    # ------------------------------------------------------------------
    # Connection and identity
    # ------------------------------------------------------------------

    def test_connection(self) -> dict[str, Any]:
        """Probe the server; never raises."""
        try:
            server_info = self._request("GET", "/about")
            return {"success": True, "message": "Connection successful", "serverInfo": server_info}
        except BackendError as e:
            first_error = e
        try:
            self._request("GET", "/files/search/items", params={"query": "*", "limit": 1})
            return {
                "success": True,
                "message": "Connection successful (via search endpoint)",
                "serverInfo": {"status": "Connected"},
            }
        except BackendError:
            return {
                "success": False,
                "message": f"Connection failed: {first_error.message}",
                "error": first_error.body if first_error.body is not None else first_error.message,
            }

    def get_server_info(self) -> Any:
        return self._request("GET", "/about")

    def get_current_user(self) -> Any:
        return self._request("GET", "/users/current")

    def get_user_info(self, d_name: str) -> Any:
        return self._request("GET", f"/users/{_segment(d_name)}")

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def search_documents(
        self, query: str, limit: int | None = None, order_by: str | None = None
    ) -> Any:
        params = {"query": query, "limit": limit, "orderBy": order_by}
        return self._request("GET", "/files/search/items", params=params)

    def get_document_metadata(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}")

    def download_document(
        self,
        d_doc_name: str,
        sink: IO[bytes],
        version: str | None = None,
        rendition: str | None = None,
    ) -> int:
        params = {"version": version or None, "rendition": rendition or None}
        return self._stream_to(f"/files/{_segment(d_doc_name)}/data", sink, params=params)

    def update_document_metadata(self, d_doc_name: str, metadata: dict[str, Any]) -> Any:
        return self._request(
            "PATCH", f"/files/{_segment(d_doc_name)}", json_body={"metadataValues": metadata}
        )

    def upload_document(self, file_path: str, metadata: dict[str, Any]) -> Any:
        return self._upload(
            "/files/data", "primaryFile", file_path, {"metadataValues": json.dumps(metadata)}
        )

    def checkin_new_revision(
        self, d_doc_name: str, file_path: str, metadata: dict[str, Any]
    ) -> Any:
        return self._upload(
            f"/files/{_segment(d_doc_name)}/data",
            "primaryFile",
            file_path,
            {"metadataValues": json.dumps(metadata)},
        )

    def delete_document(self, d_doc_name: str) -> Any:
        return self._request("DELETE", f"/files/{_segment(d_doc_name)}")

    def checkout_document(self, d_doc_name: str) -> Any:
        return self._request("POST", f"/files/{_segment(d_doc_name)}/checkout")

    def reverse_checkout(self, d_doc_name: str) -> Any:
        return self._request("POST", f"/files/{_segment(d_doc_name)}/reverseCheckout")

    def get_document_capabilities(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}/capabilities")

    def get_document_history(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}/history")

    def get_document_folders(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}/folders")

    def move_document(self, d_doc_name: str, destination_folder_guid: str) -> Any:
        return self._request(
            "POST",
            f"/files/{_segment(d_doc_name)}/move",
            json_body={"destinationFolderGUID": destination_folder_guid},
        )

    def copy_document(
        self, d_doc_name: str, destination_folder_guid: str, new_doc_name: str | None = None
    ) -> Any:
        body: dict[str, Any] = {"destinationFolderGUID": destination_folder_guid}
        if new_doc_name:
            body["dDocName"] = new_doc_name
        return self._request("POST", f"/files/{_segment(d_doc_name)}/copy", json_body=body)

    def list_work_in_progress(self, limit: int | None = None) -> Any:
        return self._request("GET", "/files/workInProgress/items", params={"limit": limit})

    def list_checked_out_documents(self, limit: int | None = None) -> Any:
        return self._request("GET", "/files/checkedOut/items", params={"limit": limit})

    def list_expired_documents(self, limit: int | None = None) -> Any:
        return self._request("GET", "/files/expired/items", params={"limit": limit})

    def list_recent_documents(self, limit: int | None = None) -> Any:
        return self._request("GET", "/files/recent/items", params={"limit": limit})

    # ------------------------------------------------------------------
    # Revisions and renditions
    # ------------------------------------------------------------------

    def list_document_versions(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}/versions")

    def get_version_metadata(self, d_doc_name: str, version: str) -> Any:
        return self._request(
            "GET", f"/files/{_segment(d_doc_name)}/versions/{_segment(version)}"
        )

    def delete_document_version(self, d_doc_name: str, version: str) -> Any:
        return self._request(
            "DELETE", f"/files/{_segment(d_doc_name)}/versions/{_segment(version)}"
        )

    def list_renditions(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}/renditions")

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    def list_attachments(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}/attachments")

    def add_attachment(self, d_doc_name: str, file_path: str, attachment_name: str) -> Any:
        return self._upload(
            f"/files/{_segment(d_doc_name)}/attachments",
            "attachmentFile",
            file_path,
            {"attachmentName": attachment_name},
        )

    def download_attachment(self, d_doc_name: str, attachment_name: str, sink: IO[bytes]) -> int:
        return self._stream_to(
            f"/files/{_segment(d_doc_name)}/attachments/{_segment(attachment_name)}/data", sink
        )

    def delete_attachment(self, d_doc_name: str, attachment_name: str) -> Any:
        return self._request(
            "DELETE", f"/files/{_segment(d_doc_name)}/attachments/{_segment(attachment_name)}"
        )

    # ------------------------------------------------------------------
    # Sharing and subscriptions
    # ------------------------------------------------------------------

    def list_public_links(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}/links")

    def create_public_link(
        self, d_doc_name: str, role: str = "viewer", expires_in_days: int | None = None
    ) -> Any:
        body: dict[str, Any] = {"role": role}
        if expires_in_days is not None:
            body["expiresInDays"] = expires_in_days
        return self._request("POST", f"/files/{_segment(d_doc_name)}/links", json_body=body)

    def subscribe_document(self, d_doc_name: str) -> Any:
        return self._request("POST", f"/files/{_segment(d_doc_name)}/subscription")

    def unsubscribe_document(self, d_doc_name: str) -> Any:
        return self._request("DELETE", f"/files/{_segment(d_doc_name)}/subscription")

    def list_subscriptions(self, limit: int | None = None) -> Any:
        return self._request("GET", "/files/subscriptions/items", params={"limit": limit})

    # ------------------------------------------------------------------
    # Folders
    # ------------------------------------------------------------------

    def create_folder(
        self,
        folder_name: str,
        parent_folder_guid: str | None = None,
        description: str | None = None,
    ) -> Any:
        folder_data: dict[str, Any] = {
            "fFolderName": folder_name,
            "fDescription": description or "",
        }
        if parent_folder_guid:
            folder_data["fParentGUID"] = parent_folder_guid
        return self._request("POST", "/folders", json_body=folder_data)

    def get_folder_info(self, f_folder_guid: str) -> Any:
        return self._request("GET", f"/folders/{_segment(f_folder_guid)}")

    def search_in_folder(
        self, f_folder_guid: str, query: str | None = None, limit: int | None = None
    ) -> Any:
        params = {"fFolderGUID": f_folder_guid, "query": query, "limit": limit}
        return self._request("GET", "/folders/search/items", params=params)

    def update_folder(self, f_folder_guid: str, metadata: dict[str, Any]) -> Any:
        return self._request("PATCH", f"/folders/{_segment(f_folder_guid)}", json_body=metadata)

    def delete_folder(self, f_folder_guid: str) -> Any:
        return self._request("DELETE", f"/folders/{_segment(f_folder_guid)}")

    def list_folder_contents(
        self, f_folder_guid: str, limit: int | None = None, offset: int | None = None
    ) -> Any:
        return self._request(
            "GET",
            f"/folders/{_segment(f_folder_guid)}/items",
            params={"limit": limit, "offset": offset},
        )

    def list_root_folders(self) -> Any:
        return self._request("GET", "/folders/root/items")

    def get_folder_by_path(self, path: str) -> Any:
        return self._request("GET", "/folders/path", params={"path": path})

    def move_folder(self, f_folder_guid: str, destination_folder_guid: str) -> Any:
        return self._request(
            "POST",
            f"/folders/{_segment(f_folder_guid)}/move",
            json_body={"destinationFolderGUID": destination_folder_guid},
        )

    def copy_folder(
        self,
        f_folder_guid: str,
        destination_folder_guid: str,
        new_folder_name: str | None = None,
    ) -> Any:
        body: dict[str, Any] = {"destinationFolderGUID": destination_folder_guid}
        if new_folder_name:
            body["fFolderName"] = new_folder_name
        return self._request("POST", f"/folders/{_segment(f_folder_guid)}/copy", json_body=body)

    def create_shortcut(
        self,
        f_folder_guid: str,
        target_doc_name: str | None = None,
        target_folder_guid: str | None = None,
    ) -> Any:
        body: dict[str, Any] = {}
        if target_doc_name:
            body["dDocName"] = target_doc_name
        if target_folder_guid:
            body["fTargetGUID"] = target_folder_guid
        return self._request(
            "POST", f"/folders/{_segment(f_folder_guid)}/shortcuts", json_body=body
        )

    # ------------------------------------------------------------------
    # Workflow
    # ------------------------------------------------------------------

    def list_workflows(self) -> Any:
        return self._request("GET", "/workflows")

    def get_workflow(self, workflow_name: str) -> Any:
        return self._request("GET", f"/workflows/{_segment(workflow_name)}")

    def list_workflow_assignments(self, limit: int | None = None) -> Any:
        return self._request("GET", "/workflows/assignments/items", params={"limit": limit})

    def get_document_workflow(self, d_doc_name: str) -> Any:
        return self._request("GET", f"/files/{_segment(d_doc_name)}/workflow")

    def approve_workflow_step(self, d_doc_name: str, comment: str | None = None) -> Any:
        body = {"comment": comment} if comment else None
        return self._request(
            "POST", f"/files/{_segment(d_doc_name)}/workflow/approve", json_body=body
        )

    def reject_workflow_step(self, d_doc_name: str, reason: str) -> Any:
        return self._request(
            "POST",
            f"/files/{_segment(d_doc_name)}/workflow/reject",
            json_body={"reason": reason},
        )

    # ------------------------------------------------------------------
    # Metadata and security
    # ------------------------------------------------------------------

    def list_metadata_fields(self) -> Any:
        return self._request("GET", "/metadata/fields")

    def list_document_types(self) -> Any:
        return self._request("GET", "/metadata/doctypes")

    def list_security_groups(self) -> Any:
        return self._request("GET", "/security/groups")

    def list_security_accounts(self) -> Any:
        return self._request("GET", "/security/accounts")
