"""ImgBB image hosting client.

Uploads are sent as base64 form data to the ImgBB v1 upload API; the
hosted URL comes back in ``data.url``.
"""

import base64
import hashlib

import httpx
import logfire

from linkup.adapter.error import ImageHostError
from linkup.domain.service.image_service import ImageHostClient


class ImgBBClient(ImageHostClient):
    """Base class for ImgBB clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealImgBBClient(ImgBBClient):
    """ImgBB client making real HTTP calls."""

    def __init__(
        self,
        api_key: str,
        upload_url: str = "https://api.imgbb.com/1/upload",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize ImgBB client.

        Args:
            api_key: ImgBB API key
            upload_url: Upload endpoint
            timeout: Request timeout in seconds (no retries)
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.api_key = api_key
        self.upload_url = upload_url
        self.timeout = timeout
        self.transport = transport

    async def upload(self, data: bytes, filename: str | None = None) -> str:
        """Upload an image to ImgBB.

        Args:
            data: Raw image bytes
            filename: Original file name, if known

        Returns:
            Hosted image URL

        Raises:
            ImageHostError: On transport errors, non-2xx responses or a
                response without a URL
        """
        form = {"image": base64.b64encode(data).decode("ascii")}
        if filename:
            form["name"] = filename

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.upload_url,
                    params={"key": self.api_key},
                    data=form,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("ImgBB upload HTTP error", error=str(e))
            raise ImageHostError(f"HTTP error during upload: {e}")

        if not response.is_success:
            logfire.error(
                "ImgBB upload failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ImageHostError(f"Upload failed: {response.status_code}")

        try:
            url = response.json()["data"]["url"]
        except (ValueError, KeyError, TypeError):
            logfire.error("ImgBB returned malformed response", body=response.text)
            raise ImageHostError("Malformed upload response")

        if not isinstance(url, str) or not url:
            raise ImageHostError("Malformed upload response")

        logfire.info("ImgBB upload completed", url=url, size=len(data))
        return url


class MockImgBBClient(ImgBBClient):
    """Mock ImgBB client for testing.

    Returns a deterministic URL derived from the image bytes without
    making real API calls.
    """

    def __init__(self) -> None:
        self.uploads: list[bytes] = []

    async def upload(self, data: bytes, filename: str | None = None) -> str:
        self.uploads.append(data)
        digest = hashlib.sha256(data).hexdigest()[:16]
        return f"https://i.ibb.co/mock/{digest}/{filename or 'image'}"
