"""
HeyGen HTTP Client — one request per call, API key on every request

Payloads are tagged:
  RawBytes  -> sent as-is, Content-Type from the payload (media uploads)
  Text      -> sent as-is, no Content-Type override
  Json      -> serialized, Content-Type: application/json

An explicit content_type argument always wins.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from heygen_mcp.config import Config, Settings
from heygen_mcp.server.logger import get_logger

log = get_logger("client")


@dataclass(frozen=True)
class RawBytes:
    data: bytes
    content_type: Optional[str] = None


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Json:
    value: Any


Payload = Union[RawBytes, Text, Json]


class HeyGenAPIError(Exception):
    """Non-2xx response from the HeyGen API."""

    def __init__(self, status_code: int, body: Any, raw_text: bool = False):
        self.status_code = status_code
        self.body = body
        if raw_text:
            detail = body
        else:
            detail = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        super().__init__(f"API request failed: {status_code} - {detail}")


def _encode(payload: Optional[Payload], content_type: Optional[str]):
    """Return (headers, content) for a payload per the content-type table."""
    headers: Dict[str, str] = {}

    if payload is None:
        content = None
    elif isinstance(payload, RawBytes):
        content = payload.data
        content_type = content_type or payload.content_type
    elif isinstance(payload, Text):
        content = payload.text.encode("utf-8")
    elif isinstance(payload, Json):
        content = json.dumps(payload.value).encode("utf-8")
        content_type = content_type or "application/json"
    else:
        raise TypeError(f"Unsupported payload type: {type(payload).__name__}")

    if content_type:
        headers["Content-Type"] = content_type
    return headers, content


class HeyGenClient:
    """
    Thin async wrapper over httpx.

    Usage:
        client = HeyGenClient(load_settings())
        data = await client.request("GET", client.api_url("/folders"))
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._settings = settings
        self._transport = transport

    @property
    def settings(self) -> Settings:
        return self._settings

    def api_url(self, path: str) -> str:
        return f"{self._settings.api_base_url}{path}"

    def upload_url(self, path: str) -> str:
        return f"{self._settings.upload_base_url}{path}"

    def _client_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        if self._settings.timeout is not None:
            kwargs["timeout"] = self._settings.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def request(
        self,
        method: str,
        url: str,
        payload: Optional[Payload] = None,
        content_type: Optional[str] = None,
    ) -> Any:
        """
        Perform one HTTP call and return the decoded JSON body.
        Raises HeyGenAPIError on a non-2xx status; httpx errors and JSON
        decode errors on a 2xx body propagate unchanged.
        """
        headers, content = _encode(payload, content_type)
        headers[Config.API_KEY_HEADER] = self._settings.api_key

        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            resp = await client.request(method, url, headers=headers, content=content)

        log.debug(f"{method} {url} -> {resp.status_code}")

        if not resp.is_success:
            try:
                body = resp.json()
            except ValueError:
                raise HeyGenAPIError(resp.status_code, resp.text, raw_text=True) from None
            raise HeyGenAPIError(resp.status_code, body)

        return resp.json()
