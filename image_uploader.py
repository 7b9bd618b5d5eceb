# image_uploader.py
import logging
from typing import Optional
from urllib.parse import urlparse

import requests

logger = logging.getLogger("product-importer.images")


def filename_from_url(url: str) -> str:
    return urlparse(url).path.rstrip("/").rsplit("/", 1)[-1]


class ImageUploader:
    def __init__(self, storage):
        self.storage = storage

    def upload_from_url(self, url: str) -> Optional[str]:
        """
        Download the image at `url` and push it to the asset store.
        Returns the asset id, or None when either step fails so the caller
        can carry on without an image.
        """
        try:
            logger.info("Uploading image: %s", url)
            resp = requests.get(url)
            resp.raise_for_status()
            asset = self.storage.upload_asset(
                "image",
                resp.content,
                filename=filename_from_url(url),
                content_type=resp.headers.get("Content-Type"),
            )
            logger.info("Image uploaded successfully: %s", asset["_id"])
            return asset["_id"]
        except Exception as e:
            logger.error("Failed to upload image %s: %s: %s", url, type(e).__name__, str(e)[:300])
            return None
