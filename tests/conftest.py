"""Shared fixtures for HeyGen MCP tests."""

import os
import tempfile

# Keep log files out of the real home directory; must run before any
# heygen_mcp import creates its file handlers.
os.environ.setdefault("HEYGEN_MCP_DATA_DIR", tempfile.mkdtemp(prefix="heygen-mcp-tests-"))

import httpx
import pytest
from pathlib import Path

from heygen_mcp.client import HeyGenClient
from heygen_mcp.config import Settings

API_BASE = "https://api.heygen.test/v1"
UPLOAD_BASE = "https://upload.heygen.test/v1"


class RecordingAPI:
    """httpx.MockTransport that records requests and replays a canned reply."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.reply = {"code": 100, "data": {}}

    def respond(self, status_code, reply):
        self.status_code = status_code
        self.reply = reply

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.reply, (bytes, str)):
            return httpx.Response(self.status_code, content=self.reply)
        return httpx.Response(self.status_code, json=self.reply)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    return Settings(api_key="test-key", api_base_url=API_BASE, upload_base_url=UPLOAD_BASE)


@pytest.fixture
def api():
    return RecordingAPI()


@pytest.fixture
def client(settings, api):
    return HeyGenClient(settings, transport=api.transport)


@pytest.fixture
def tmp_data_dir(tmp_path):
    """Point Config at a temp data directory for isolated tests."""
    data_dir = tmp_path / ".heygen-mcp"

    from heygen_mcp import config
    saved = (config.Config.DATA_DIR, config.Config.LOG_DIR)
    config.Config.DATA_DIR = data_dir
    config.Config.LOG_DIR = data_dir / "logs"

    yield data_dir

    config.Config.DATA_DIR, config.Config.LOG_DIR = saved
