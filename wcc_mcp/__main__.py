"""Allow ``python -m wcc_mcp``."""

from wcc_mcp.gateway.server import main

if __name__ == "__main__":
    raise SystemExit(main())
