"""
HeyGen MCP Tools

Modules:
  assets   — upload_asset, list_assets, delete_asset
  folders  — list_folders, create_folder, update_folder, trash_folder, restore_folder
"""

from typing import Any, Awaitable, Callable, Dict

from heygen_mcp.client import HeyGenClient
from heygen_mcp.server.logger import get_logger
from heygen_mcp.server.protocol import error_result, json_result
from heygen_mcp.tools import assets
from heygen_mcp.tools import folders

log = get_logger("tools")

ALL_TOOLS = assets.TOOLS + folders.TOOLS

DISPATCH = {}
DISPATCH.update(assets.HANDLERS)
DISPATCH.update(folders.HANDLERS)


def make_tool_handler(client: HeyGenClient) -> Callable[[str, Dict[str, Any]], Awaitable[Dict[str, Any]]]:
    """
    Bind the dispatcher to a client; the result plugs into Router.register_tools.
    The router only forwards names from ALL_TOOLS, so lookup is strict here.
    """

    async def handle_tool(name: str, args: Dict[str, Any]) -> Dict[str, Any]:
        handler = DISPATCH[name]

        try:
            result = await handler(client, args or {})
        except Exception as exc:
            log.error(f"Tool {name} failed: {exc}", exc_info=True)
            return error_result(f"Error: {exc}")

        return json_result(result)

    return handle_tool
