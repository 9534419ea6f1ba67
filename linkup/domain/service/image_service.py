"""Image relay domain service."""

import logfire

from linkup.domain.error import ExternalServiceError, UploadFailedError

from .base import Service


class ImageHostClient:
    """Interface for the external image host."""

    async def upload(self, data: bytes, filename: str | None = None) -> str:
        """Upload an image and return its public URL.

        Args:
            data: Raw image bytes
            filename: Original file name, if known

        Returns:
            Durable URL of the hosted image

        Raises:
            ExternalServiceError: If the host rejects the upload or is
                unreachable
        """
        raise NotImplementedError


class ImageService(Service):
    """Forwards uploaded images to the image host.

    Nothing is stored locally; callers keep only the returned URL.
    """

    def __init__(self, image_host: ImageHostClient) -> None:
        self.image_host = image_host

    async def relay(self, data: bytes, filename: str | None = None) -> str:
        """Upload an image and return the hosted URL.

        Raises:
            UploadFailedError: If the payload is empty or the host fails
        """
        with logfire.span("image_service.relay", size=len(data), filename=filename):
            if not data:
                raise UploadFailedError("Image payload is empty")

            try:
                url = await self.image_host.upload(data, filename)
            except ExternalServiceError as e:
                logfire.error("Image upload failed", error=str(e))
                raise UploadFailedError(str(e)) from e

            logfire.info("Image uploaded", url=url)
            return url
