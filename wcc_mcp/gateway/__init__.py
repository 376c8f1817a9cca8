"""WebCenter Content MCP Gateway - tool catalog, dispatcher and transports.

The facade lives in ``wcc_mcp.gateway.server``; this package stays import-light
because ``wcc_mcp.client`` reads its constants.
"""
