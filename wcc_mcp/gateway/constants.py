"""Constants and limits for the WebCenter Content MCP gateway."""

SERVER_NAME = "webcenter-content-mcp-server"
SERVER_TITLE = "WebCenter Content MCP Server"

DEFAULT_HTTP_HOST = "0.0.0.0"
DEFAULT_HTTP_PORT = 3999
DEFAULT_TIMEOUT_SECONDS = 30.0

DEFAULT_SEARCH_LIMIT = 10
DEFAULT_LISTING_LIMIT = 20
DEFAULT_FOLDER_PAGE_SIZE = 50
DOCUMENTS_RESOURCE_LIMIT = 20

DOWNLOAD_CHUNK_BYTES = 64 * 1024
MAX_ERROR_DETAIL_CHARS = 500

# JSON-RPC error codes used by the network front end
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
