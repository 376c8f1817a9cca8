"""Backend gateway: HTTP access to the WebCenter Content REST API."""

from wcc_mcp.client.webcenter import WebCenterContentClient

__all__ = ["WebCenterContentClient"]
