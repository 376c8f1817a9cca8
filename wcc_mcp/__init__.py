"""MCP adapter exposing the Oracle WebCenter Content REST API as tools."""

__version__ = "1.0.0"

__all__ = ["__version__"]
