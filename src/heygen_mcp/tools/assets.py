"""
Asset Tools — media uploads and asset listing

Tools:
  upload_asset  — Upload an image, audio or video file
  list_assets   — Paginated asset listing with folder/type filters
  delete_asset  — Delete an asset by ID
"""

import asyncio
from pathlib import Path
from typing import Any, Dict, List

from heygen_mcp.client import HeyGenClient, RawBytes
from heygen_mcp.server.logger import get_logger
from heygen_mcp.tools.args import build_url, non_empty, optional, path_segment, required

log = get_logger("tools.assets")

UPLOAD_MIME_TYPES = ["image/png", "image/jpeg", "audio/mpeg", "video/mp4", "video/webm"]
ASSET_FILE_TYPES = ["audio", "video", "image"]

TOOLS: List[Dict[str, Any]] = [
    {
        "name": "upload_asset",
        "description": "Upload a media file (image, video, or audio) to HeyGen. Provide the file path and the file will be uploaded and return an asset ID for future use.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "file_path": {
                    "type": "string",
                    "description": "Path to the file to upload",
                },
                "mime_type": {
                    "type": "string",
                    "description": "MIME type of the file (e.g., image/png, image/jpeg, audio/mpeg, video/mp4, video/webm)",
                    "enum": UPLOAD_MIME_TYPES,
                },
            },
            "required": ["file_path", "mime_type"],
        },
    },
    {
        "name": "list_assets",
        "description": "Retrieve a paginated list of all assets (images, audios, videos) created under your HeyGen account. Supports filtering by folder, file type, and pagination.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "folder_id": {
                    "type": "string",
                    "description": "Unique identifier of the folder to retrieve the assets from. Can be retrieved from the List Folders endpoint.",
                },
                "file_type": {
                    "type": "string",
                    "description": "Type of the asset to retrieve (audio, video, or image)",
                    "enum": ASSET_FILE_TYPES,
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of assets to return in a single response. Accepts values from 0 to 100.",
                    "minimum": 0,
                    "maximum": 100,
                },
                "token": {
                    "type": "string",
                    "description": "Pagination token used to retrieve the next set of results. This token is returned in the response and can be included in the next request to continue listing remaining assets.",
                },
            },
            "required": [],
        },
    },
    {
        "name": "delete_asset",
        "description": "Delete a specific asset by its unique asset ID from HeyGen.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "asset_id": {
                    "type": "string",
                    "description": "The unique ID of the asset to delete",
                },
            },
            "required": ["asset_id"],
        },
    },
]


async def _upload_asset(client: HeyGenClient, args: Dict) -> Any:
    file_path = required(args, "file_path")
    mime_type = required(args, "mime_type")

    data = await asyncio.to_thread(Path(file_path).expanduser().read_bytes)
    log.info(f"Uploading {file_path} ({len(data)} bytes, {mime_type})")

    return await client.request(
        "POST",
        client.upload_url("/asset"),
        RawBytes(data),
        content_type=mime_type,
    )


async def _list_assets(client: HeyGenClient, args: Dict) -> Any:
    url = build_url(client.api_url("/asset/list"), [
        ("folder_id", non_empty(optional(args, "folder_id"))),
        ("file_type", non_empty(optional(args, "file_type"))),
        ("limit", optional(args, "limit", "number")),
        ("token", non_empty(optional(args, "token"))),
    ])
    return await client.request("GET", url)


async def _delete_asset(client: HeyGenClient, args: Dict) -> Any:
    asset_id = required(args, "asset_id")
    return await client.request("POST", client.api_url(f"/asset/{path_segment(asset_id)}/delete"))


HANDLERS = {
    "upload_asset": _upload_asset,
    "list_assets": _list_assets,
    "delete_asset": _delete_asset,
}
