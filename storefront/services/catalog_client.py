# storefront/services/catalog_client.py
import json
from typing import Any, Protocol

import requests

from storefront.data.seed import SEED_COURSES
from storefront.domain.catalog_query import CatalogQuery
from storefront.utils.retry import http_retry
from storefront.utils.settings import (
    CATALOG_SOURCE,
    CATALOG_TIMEOUT_SECONDS,
    SANITY_API_VERSION,
    SANITY_DATASET,
    SANITY_PROJECT_ID,
    SANITY_TOKEN,
    SANITY_USE_CDN,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogClient(Protocol):
    def fetch(self, query: CatalogQuery) -> list[dict[str, Any]]: ...


class SanityCatalogClient:
    def __init__(
        self,
        project_id: str | None = None,
        dataset: str | None = None,
        api_version: str | None = None,
        use_cdn: bool = SANITY_USE_CDN,
        token: str | None = SANITY_TOKEN,
        timeout: float = CATALOG_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.project_id = project_id or SANITY_PROJECT_ID
        self.dataset = dataset or SANITY_DATASET
        self.api_version = (api_version or SANITY_API_VERSION).lstrip("v")
        self.use_cdn = use_cdn
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def query_url(self) -> str:
        host = "apicdn" if self.use_cdn else "api"
        return (
            f"https://{self.project_id}.{host}.sanity.io"
            f"/v{self.api_version}/data/query/{self.dataset}"
        )

    @http_retry()
    def fetch(self, query: CatalogQuery) -> list[dict[str, Any]]:
        # GROQ parameters go as $name=<json value>
        params = {"query": query.to_groq()}
        for name, value in query.params().items():
            params[f"${name}"] = json.dumps(value)

        headers = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        logger.info(f"SanityCatalogClient GET {self.query_url} query={params['query']!r}")

        resp = self.session.get(self.query_url, params=params, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json().get("result") or []


class StaticCatalogClient:
    """Serves an in-process document list, filtered and sorted like the CMS would."""

    def __init__(self, documents: list[dict[str, Any]] | None = None):
        self.documents = list(SEED_COURSES if documents is None else documents)

    def fetch(self, query: CatalogQuery) -> list[dict[str, Any]]:
        return query.apply(self.documents)


def get_catalog_client() -> CatalogClient:
    if CATALOG_SOURCE == "static":
        return StaticCatalogClient()
    return SanityCatalogClient()
