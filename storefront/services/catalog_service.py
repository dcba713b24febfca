# storefront/services/catalog_service.py
from pydantic import ValidationError
from requests import RequestException

from storefront.domain.catalog_query import build_query
from storefront.domain.schemas import Course
from storefront.services.catalog_client import CatalogClient
from storefront.services.image_urls import ImageUrlBuilder
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Loads one catalog page: query, validate documents, resolve image URLs."""

    def __init__(self, client: CatalogClient, image_urls: ImageUrlBuilder | None = None):
        self.client = client
        self.image_urls = image_urls or ImageUrlBuilder()

    def list_courses(self, search: str | None = None, order: str | None = None) -> list[Course]:
        query = build_query(search=search, order=order)

        try:
            documents = self.client.fetch(query)
        except RequestException as e:
            # the storefront still renders, just without courses
            logger.error(f"Catalog fetch failed: {e}")
            return []

        courses = []
        for document in documents:
            try:
                course = Course.model_validate(document)
            except ValidationError as e:
                logger.warning(f"Skipping malformed catalog document {document.get('_id')}: {e}")
                continue
            course.image_url = self.image_urls.url(course.image)
            courses.append(course)

        logger.info(f"Loaded {len(courses)} courses (search={query.search!r}, sort={query.sort})")
        return courses
