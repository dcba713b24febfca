# storefront/services/image_urls.py
import re
from typing import Any
from urllib.parse import urlencode

from storefront.utils.settings import SANITY_PROJECT_ID, SANITY_DATASET

IMAGE_CDN = "https://cdn.sanity.io/images"

# image-<assetId>-<width>x<height>-<format>
_ASSET_REF = re.compile(r"^image-(?P<asset>[A-Za-z0-9]+)-(?P<dims>\d+x\d+)-(?P<fmt>[a-z0-9]+)$")


class ImageUrlBuilder:
    """Resolves CMS image references to CDN URLs with fixed transform parameters."""

    def __init__(
        self,
        project_id: str = SANITY_PROJECT_ID,
        dataset: str = SANITY_DATASET,
        width: int = 300,
        height: int = 300,
        quality: int = 80,
    ):
        self.project_id = project_id
        self.dataset = dataset
        self.width = width
        self.height = height
        self.quality = quality

    def url(self, image: Any) -> str | None:
        source = self._source_url(image)
        if source is None:
            return None

        query = urlencode({"w": self.width, "h": self.height, "q": self.quality})
        separator = "&" if "?" in source else "?"
        return f"{source}{separator}{query}"

    def _source_url(self, image: Any) -> str | None:
        if not image:
            return None

        if isinstance(image, str):
            if image.startswith(("http://", "https://")):
                return image
            ref = image
        elif isinstance(image, dict):
            asset = image.get("asset") or {}
            if asset.get("url"):
                return asset["url"]
            ref = asset.get("_ref") or asset.get("_id")
        else:
            return None

        match = _ASSET_REF.match(ref or "")
        if not match:
            return None

        return (
            f"{IMAGE_CDN}/{self.project_id}/{self.dataset}/"
            f"{match['asset']}-{match['dims']}.{match['fmt']}"
        )
