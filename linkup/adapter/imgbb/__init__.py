"""ImgBB image hosting adapter."""

from .client import ImgBBClient, MockImgBBClient, RealImgBBClient

__all__ = ["ImgBBClient", "RealImgBBClient", "MockImgBBClient"]
