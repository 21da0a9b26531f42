"""HeyGen MCP Server — raw stdio protocol implementation."""

from heygen_mcp.server.server import MCPServer
from heygen_mcp.server.router import Router
from heygen_mcp.server.transport import StdioTransport

__all__ = ["MCPServer", "Router", "StdioTransport"]
