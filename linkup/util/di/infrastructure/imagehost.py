"""Image host infrastructure providers."""

from dishka import Scope, provide

from linkup.adapter.imgbb.client import RealImgBBClient
from linkup.config import ImageHostSettings
from linkup.domain.service.image_service import ImageHostClient
from linkup.util.di.base import ProviderBase


class ImageHostProvider(ProviderBase):
    """Image host component base."""

    __mock_component__ = "imagehost"


class ProdImageHostProvider(ImageHostProvider):
    """Production image host provider (ImgBB)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_host_client(self, settings: ImageHostSettings) -> ImageHostClient:
        """Provide ImgBB client.

        Raises:
            ValueError: If the ImgBB API key is not configured
        """
        if not settings.api_key:
            raise ValueError("ImgBB API key must be configured")

        return RealImgBBClient(
            api_key=settings.api_key,
            upload_url=settings.upload_url,
            timeout=settings.timeout_seconds,
        )
