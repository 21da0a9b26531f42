"""
Folder Tools — folder listing, creation, rename, trash and restore

Tools:
  list_folders    — Paginated folder listing with parent/name/trash filters
  create_folder   — Create a top-level folder or subfolder
  update_folder   — Rename a folder
  trash_folder    — Move a folder to trash
  restore_folder  — Restore a trashed folder
"""

from typing import Any, Dict, List

from heygen_mcp.client import HeyGenClient, Json
from heygen_mcp.tools.args import build_url, non_empty, optional, path_segment, required

PROJECT_TYPES = ["video_translate", "instant_avatar", "video", "asset", "brand_kit", "mixed"]
DEFAULT_PROJECT_TYPE = "mixed"


def _folder_id_schema(action: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "folder_id": {
                "type": "string",
                "description": f"The unique ID of the folder to {action}",
            },
        },
        "required": ["folder_id"],
    }


TOOLS: List[Dict[str, Any]] = [
    {
        "name": "list_folders",
        "description": "Retrieve a paginated list of all folders created under your HeyGen account. Supports filtering by parent folder, name search, trash status, and pagination.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "limit": {
                    "type": "number",
                    "description": "Maximum number of folders to return in a single response. Accepts values from 0 to 100.",
                    "minimum": 0,
                    "maximum": 100,
                },
                "parent_id": {
                    "type": "string",
                    "description": "Filter folders by their parent folder ID.",
                },
                "name_filter": {
                    "type": "string",
                    "description": "Search for folders by full or partial name.",
                },
                "is_trash": {
                    "type": "boolean",
                    "description": "Whether to retrieve folders that are in the trash. Returns only the deleted folders if set to true.",
                },
                "token": {
                    "type": "string",
                    "description": "Pagination token used to retrieve the next set of results. This token is returned in the response and can be included in the next request to continue listing remaining folders.",
                },
            },
            "required": [],
        },
    },
    {
        "name": "create_folder",
        "description": "Create a new folder in your HeyGen account. Can create top-level folders or subfolders by specifying a parent_id.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Name of the folder.",
                },
                "project_type": {
                    "type": "string",
                    "description": "Type of project associated with the folder. The instant_avatar and asset project types are Enterprise-Only. Defaults to 'mixed'.",
                    "enum": PROJECT_TYPES,
                    "default": DEFAULT_PROJECT_TYPE,
                },
                "parent_id": {
                    "type": "string",
                    "description": "Unique identifier of the parent folder. Leave empty to create a top-level folder, or provide an existing folder's ID to create a subfolder under it.",
                },
            },
            "required": [],
        },
    },
    {
        "name": "update_folder",
        "description": "Update (rename) an existing folder by its folder ID.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "folder_id": {
                    "type": "string",
                    "description": "The unique ID of the folder to update",
                },
                "name": {
                    "type": "string",
                    "description": "The new name for the folder",
                },
            },
            "required": ["folder_id", "name"],
        },
    },
    {
        "name": "trash_folder",
        "description": "Move a folder to trash (delete) by its unique folder ID. The folder can be restored later.",
        "inputSchema": _folder_id_schema("trash"),
    },
    {
        "name": "restore_folder",
        "description": "Restore a previously trashed folder by its unique folder ID, returning it to its original location.",
        "inputSchema": _folder_id_schema("restore"),
    },
]


async def _list_folders(client: HeyGenClient, args: Dict) -> Any:
    url = build_url(client.api_url("/folders"), [
        ("limit", optional(args, "limit", "number")),
        ("parent_id", non_empty(optional(args, "parent_id"))),
        ("name_filter", non_empty(optional(args, "name_filter"))),
        ("is_trash", optional(args, "is_trash", "boolean")),
        ("token", non_empty(optional(args, "token"))),
    ])
    return await client.request("GET", url)


async def _create_folder(client: HeyGenClient, args: Dict) -> Any:
    body = {"project_type": optional(args, "project_type", default=DEFAULT_PROJECT_TYPE)}

    name = optional(args, "name")
    parent_id = optional(args, "parent_id")
    if name:
        body["name"] = name
    if parent_id:
        body["parent_id"] = parent_id

    return await client.request("POST", client.api_url("/folders/create"), Json(body))


async def _update_folder(client: HeyGenClient, args: Dict) -> Any:
    folder_id = required(args, "folder_id")
    name = required(args, "name")
    return await client.request(
        "POST",
        client.api_url(f"/folders/{path_segment(folder_id)}"),
        Json({"name": name}),
        content_type="application/json",
    )


async def _trash_folder(client: HeyGenClient, args: Dict) -> Any:
    folder_id = required(args, "folder_id")
    return await client.request("POST", client.api_url(f"/folders/{path_segment(folder_id)}/trash"))


async def _restore_folder(client: HeyGenClient, args: Dict) -> Any:
    folder_id = required(args, "folder_id")
    return await client.request("POST", client.api_url(f"/folders/{path_segment(folder_id)}/restore"))


HANDLERS = {
    "list_folders": _list_folders,
    "create_folder": _create_folder,
    "update_folder": _update_folder,
    "trash_folder": _trash_folder,
    "restore_folder": _restore_folder,
}
