#!/usr/bin/env python3
"""
WebCenter Content MCP Gateway Server - Entry Point

This script is a thin wrapper around the gateway server so it can be launched
from a checkout without installing the package.
The actual implementation is in wcc_mcp.gateway.server.

Usage:
    # stdio mode (default, spawned by an MCP client)
    python scripts/wcc_mcp_gateway.py

    # HTTP mode
    python scripts/wcc_mcp_gateway.py --mode http --port 3999
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from wcc_mcp.gateway.server import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
