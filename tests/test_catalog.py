"""
Tests for the catalog read path: CMS client, image URLs and the page routes.
"""
import json
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from storefront.domain.catalog_query import build_query
from storefront.services.catalog_client import SanityCatalogClient, StaticCatalogClient
from storefront.services.catalog_service import CatalogService
from storefront.services.image_urls import ImageUrlBuilder


def sanity_session(result=None, error: Exception | None = None) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
        return session

    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"result": result or [], "ms": 3}
    session.get.return_value = response
    return session


class TestSanityCatalogClient:
    def test_query_url_uses_cdn(self):
        client = SanityCatalogClient(project_id="abc123", dataset="production", api_version="2023-01-01",
                                     use_cdn=True, session=MagicMock())
        assert client.query_url == "https://abc123.apicdn.sanity.io/v2023-01-01/data/query/production"

    def test_query_url_without_cdn(self):
        client = SanityCatalogClient(project_id="abc123", dataset="staging", api_version="v2021-10-21",
                                     use_cdn=False, session=MagicMock())
        assert client.query_url == "https://abc123.api.sanity.io/v2021-10-21/data/query/staging"

    def test_fetch_sends_query_and_json_encoded_params(self):
        session = sanity_session(result=[{"_id": "x"}])
        client = SanityCatalogClient(project_id="abc123", session=session, token=None)

        documents = client.fetch(build_query(search="nap", order="price desc"))

        assert documents == [{"_id": "x"}]
        _, kwargs = session.get.call_args
        assert kwargs["params"]["query"] == (
            "*[_type == 'course' && (title match $search || description match $search)]"
            " | order(price desc)"
        )
        assert json.loads(kwargs["params"]["$search"]) == "nap*"
        assert "Authorization" not in kwargs["headers"]

    def test_token_is_sent_as_bearer(self):
        session = sanity_session()
        client = SanityCatalogClient(project_id="abc123", session=session, token="secret")

        client.fetch(build_query())

        _, kwargs = session.get.call_args
        assert kwargs["headers"]["Authorization"] == "Bearer secret"
        assert "$search" not in kwargs["params"]

    def test_transport_errors_are_retried_then_raised(self):
        session = sanity_session(error=requests.ConnectionError("cms down"))
        client = SanityCatalogClient(project_id="abc123", session=session)

        with pytest.raises(requests.ConnectionError):
            client.fetch(build_query())

        assert session.get.call_count == 3

    @pytest.mark.parametrize("status, calls", [(503, 3), (429, 3), (404, 1), (400, 1)])
    def test_http_errors_retry_only_when_transient(self, status, calls):
        # Arrange
        response = requests.Response()
        response.status_code = status
        session = sanity_session(error=requests.HTTPError(f"{status} error", response=response))
        client = SanityCatalogClient(project_id="abc123", session=session)

        # Act / Assert
        with pytest.raises(requests.HTTPError):
            client.fetch(build_query())

        assert session.get.call_count == calls


class TestImageUrlBuilder:
    def test_asset_reference(self):
        builder = ImageUrlBuilder(project_id="abc123", dataset="production")
        image = {"_type": "image", "asset": {"_ref": "image-Tb9Ew8CXIwaY6R1kjMvI0uRR-2000x3000-jpg"}}

        assert builder.url(image) == (
            "https://cdn.sanity.io/images/abc123/production/"
            "Tb9Ew8CXIwaY6R1kjMvI0uRR-2000x3000.jpg?w=300&h=300&q=80"
        )

    def test_plain_url_gets_transform_params(self):
        builder = ImageUrlBuilder()
        assert builder.url("https://example.com/cat.png?v=2") == "https://example.com/cat.png?v=2&w=300&h=300&q=80"

    @pytest.mark.parametrize("image", [None, {}, {"asset": {"_ref": "file-abc-pdf"}}, 42])
    def test_unresolvable_references(self, image):
        assert ImageUrlBuilder().url(image) is None


class TestCatalogService:
    def test_resolves_images_and_skips_malformed_documents(self):
        documents = [
            {"_id": "ok", "title": "Ok", "description": "fine", "price": 10, "stockQuantity": 2,
             "image": {"asset": {"_ref": "image-abc-10x10-png"}}},
            {"_id": "bad", "title": "Bad", "price": -5},
        ]
        service = CatalogService(StaticCatalogClient(documents), ImageUrlBuilder(project_id="p", dataset="d"))

        courses = service.list_courses()

        assert [c.id for c in courses] == ["ok"]
        assert courses[0].image_url == "https://cdn.sanity.io/images/p/d/abc-10x10.png?w=300&h=300&q=80"

    def test_fetch_failure_gives_empty_page(self):
        client = MagicMock()
        client.fetch.side_effect = requests.ConnectionError("cms down")

        assert CatalogService(client).list_courses(search="nap") == []


class TestCatalogRoutes:
    def test_courses_json(self, test_client: TestClient):
        response = test_client.get("/courses", params={"order": "price asc"})

        assert response.status_code == 200
        data = response.json()
        assert [c["_id"] for c in data] == [
            "course-zen-nap",
            "course-stealth-101",
            "course-wall-running",
            "course-shadow-pounce",
        ]
        assert data[0]["stockQuantity"] == 1
        assert data[0]["imageUrl"].endswith("?w=300&h=300&q=80")

    def test_courses_search(self, test_client: TestClient):
        response = test_client.get("/courses", params={"search": "FRIDGE"})
        assert [c["_id"] for c in response.json()] == ["course-wall-running"]

    def test_injected_order_is_ignored(self, test_client: TestClient):
        plain = test_client.get("/courses").json()
        injected = test_client.get("/courses", params={"order": "title); drop table x;--"}).json()
        assert injected == plain

    def test_index_page(self, test_client: TestClient):
        response = test_client.get("/", params={"search": "pounce"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        html = response.text
        assert "<title>Ninja Training for Cats</title>" in html
        assert "Shadow Pounce" in html
        assert "Out of stock" in html
        assert "Stealth 101" not in html
        assert 'value="pounce"' in html

    def test_health(self, test_client: TestClient):
        assert test_client.get("/health").json() == {"status": "ok"}
