"""
Pytest configuration and fixtures for the storefront tests.
"""
import json
import os

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment before importing app modules
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CATALOG_SOURCE"] = "static"
os.environ["ORDER_SNAPSHOT_ITEMS"] = "false"

from storefront.api.routers.catalog import get_catalog_service  # noqa: E402
from storefront.client.api import StorefrontApi  # noqa: E402
from storefront.data.database import Base, get_db  # noqa: E402
from storefront.main import app  # noqa: E402
from storefront.services.catalog_client import StaticCatalogClient  # noqa: E402
from storefront.services.catalog_service import CatalogService  # noqa: E402


@pytest.fixture
def session_factory():
    """Isolated in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def catalog_service():
    return CatalogService(StaticCatalogClient())


@pytest.fixture
def test_app(session_factory, catalog_service):
    """The FastAPI app wired to the test database and the seed catalog."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog_service] = lambda: catalog_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app) -> TestClient:
    return TestClient(test_app)


@pytest.fixture
async def asgi_api(test_app):
    """Client-side API talking to the real app in-process."""
    api = StorefrontApi(base_url="http://testserver", transport=httpx.ASGITransport(app=test_app))
    yield api
    await api.aclose()


CREATED = {"status": 201, "statusText": "Created", "error": None}


class ScriptedBackend:
    """
    httpx.MockTransport handler that records requests and answers per path.

    ``responses`` maps a path to a (status, json body) pair, an exception
    instance to raise, or a callable taking the request.
    """

    def __init__(self, responses: dict | None = None):
        self.requests: list[httpx.Request] = []
        self.responses = {
            "/create-cart-session": (201, CREATED),
            "/get-cart-items": (200, {"cartItems": []}),
            "/add-cart-item": (201, CREATED),
            "/remove-cart-item": (204, None),
            "/create-order": (201, CREATED),
        }
        self.responses.update(responses or {})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self.responses.get(request.url.path, (404, None))
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(request)
        status, body = answer
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def calls(self, path: str) -> list[dict]:
        return [json.loads(r.content or b"{}") for r in self.requests if r.url.path == path]


@pytest.fixture
def backend() -> ScriptedBackend:
    return ScriptedBackend()


@pytest.fixture
async def mock_api(backend):
    api = StorefrontApi(base_url="http://storefront.test", transport=httpx.MockTransport(backend))
    yield api
    await api.aclose()


@pytest.fixture
async def make_api():
    """Factory for client APIs backed by a given ScriptedBackend."""
    apis = []

    def factory(scripted: ScriptedBackend) -> StorefrontApi:
        api = StorefrontApi(base_url="http://storefront.test", transport=httpx.MockTransport(scripted))
        apis.append(api)
        return api

    yield factory
    for api in apis:
        await api.aclose()
