"""Tests for the HeyGen HTTP client."""

import json

import httpx
import pytest

from heygen_mcp.client import HeyGenAPIError, HeyGenClient, Json, RawBytes, Text, _encode


class TestEncode:
    def test_no_payload(self):
        headers, content = _encode(None, None)
        assert headers == {}
        assert content is None

    def test_json_sets_content_type(self):
        headers, content = _encode(Json({"a": 1}), None)
        assert headers == {"Content-Type": "application/json"}
        assert json.loads(content) == {"a": 1}

    def test_text_has_no_content_type(self):
        headers, content = _encode(Text("hello"), None)
        assert headers == {}
        assert content == b"hello"

    def test_raw_bytes_without_type(self):
        headers, content = _encode(RawBytes(b"\x00\x01"), None)
        assert headers == {}
        assert content == b"\x00\x01"

    def test_raw_bytes_with_payload_type(self):
        headers, _ = _encode(RawBytes(b"x", content_type="image/png"), None)
        assert headers == {"Content-Type": "image/png"}

    def test_explicit_type_wins(self):
        headers, _ = _encode(Json({"name": "x"}), "application/vnd.custom+json")
        assert headers == {"Content-Type": "application/vnd.custom+json"}

    def test_unknown_payload(self):
        with pytest.raises(TypeError):
            _encode({"plain": "dict"}, None)


class TestRequest:
    @pytest.mark.asyncio
    async def test_api_key_header(self, client, api):
        await client.request("GET", client.api_url("/folders"))
        assert api.last.headers["X-Api-Key"] == "test-key"
        assert api.last.method == "GET"
        assert str(api.last.url) == "https://api.heygen.test/v1/folders"

    @pytest.mark.asyncio
    async def test_returns_parsed_json(self, client, api):
        api.respond(200, {"data": {"id": "a1"}})
        result = await client.request("POST", client.api_url("/asset/a1/delete"))
        assert result == {"data": {"id": "a1"}}

    @pytest.mark.asyncio
    async def test_no_body_on_bare_post(self, client, api):
        await client.request("POST", client.api_url("/folders/f1/trash"))
        assert api.last.content == b""
        assert "content-type" not in api.last.headers

    @pytest.mark.asyncio
    async def test_error_status(self, client, api):
        api.respond(404, {"error": "not found"})
        with pytest.raises(HeyGenAPIError) as info:
            await client.request("GET", client.api_url("/folders"))
        assert info.value.status_code == 404
        assert info.value.body == {"error": "not found"}
        assert str(info.value) == 'API request failed: 404 - {"error":"not found"}'

    @pytest.mark.asyncio
    async def test_error_status_with_json_string_body(self, client, api):
        api.respond(404, b'"not found"')
        with pytest.raises(HeyGenAPIError) as info:
            await client.request("GET", client.api_url("/folders"))
        assert info.value.body == "not found"
        assert str(info.value) == 'API request failed: 404 - "not found"'

    @pytest.mark.asyncio
    async def test_error_status_with_text_body(self, client, api):
        api.respond(502, "Bad Gateway")
        with pytest.raises(HeyGenAPIError) as info:
            await client.request("GET", client.api_url("/folders"))
        assert info.value.status_code == 502
        assert "Bad Gateway" in str(info.value)
        assert str(info.value) == "API request failed: 502 - Bad Gateway"

    @pytest.mark.asyncio
    async def test_non_json_success_propagates(self, client, api):
        api.respond(200, "<html>")
        with pytest.raises(ValueError):
            await client.request("GET", client.api_url("/folders"))

    @pytest.mark.asyncio
    async def test_network_error_propagates(self, settings):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = HeyGenClient(settings, transport=httpx.MockTransport(refuse))
        with pytest.raises(httpx.ConnectError):
            await client.request("GET", client.api_url("/folders"))

    @pytest.mark.asyncio
    async def test_one_call_per_request(self, client, api):
        api.respond(500, {"error": "boom"})
        with pytest.raises(HeyGenAPIError):
            await client.request("GET", client.api_url("/folders"))
        assert len(api.requests) == 1


class TestUrls:
    def test_api_and_upload_urls(self, client):
        assert client.api_url("/folders") == "https://api.heygen.test/v1/folders"
        assert client.upload_url("/asset") == "https://upload.heygen.test/v1/asset"
