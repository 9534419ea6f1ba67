"""Unit tests for the ImgBB client."""

import base64
from urllib.parse import parse_qs

import httpx
import pytest

from linkup.adapter.error import ImageHostError
from linkup.adapter.imgbb.client import MockImgBBClient, RealImgBBClient


def _client(handler) -> RealImgBBClient:
    return RealImgBBClient(
        api_key="test-key",
        upload_url="https://api.imgbb.test/1/upload",
        transport=httpx.MockTransport(handler),
    )


class TestRealImgBBClient:
    """Tests for RealImgBBClient.upload."""

    @pytest.mark.asyncio
    async def test_upload_sends_base64_and_returns_url(self):
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={"data": {"url": "https://i.ibb.co/abc/cat.png"}, "success": True},
            )

        client = _client(handler)

        # Act
        url = await client.upload(b"\x89PNG", "cat.png")

        # Assert
        assert url == "https://i.ibb.co/abc/cat.png"
        [request] = seen
        assert request.method == "POST"
        assert request.url.params["key"] == "test-key"
        form = parse_qs(request.content.decode())
        assert form["image"] == [base64.b64encode(b"\x89PNG").decode()]
        assert form["name"] == ["cat.png"]

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = _client(lambda request: httpx.Response(400, json={"error": "bad"}))

        with pytest.raises(ImageHostError, match="400"):
            await client.upload(b"data")

    @pytest.mark.asyncio
    async def test_malformed_body_raises(self):
        client = _client(lambda request: httpx.Response(200, json={"data": {}}))

        with pytest.raises(ImageHostError, match="Malformed"):
            await client.upload(b"data")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler)

        with pytest.raises(ImageHostError, match="HTTP error"):
            await client.upload(b"data")


class TestMockImgBBClient:
    """Tests for MockImgBBClient."""

    @pytest.mark.asyncio
    async def test_same_bytes_same_url(self):
        client = MockImgBBClient()

        first = await client.upload(b"data", "a.png")
        second = await client.upload(b"data", "a.png")

        assert first == second
        assert client.uploads == [b"data", b"data"]
