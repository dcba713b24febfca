# storefront/client/api.py
import logging
from dataclasses import dataclass

import httpx

from storefront.domain.schemas import Course
from storefront.utils.settings import STOREFRONT_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MutationResult:
    status: int | None
    status_text: str
    error: str | None = None

    @classmethod
    def failed(cls, error: str) -> "MutationResult":
        return cls(status=None, status_text="Request failed", error=error)


def log_result(result: MutationResult, expected_status: int, success: str, action: str,
               log: logging.Logger = logger) -> bool:
    """Only logs; the caller never acts on the outcome."""
    if result.error:
        log.error(result.error)

    if result.status == expected_status:
        log.info(success)
        return True

    log.warning(f"{action} returned the following status: {result.status_text} ({result.status})")
    return False


class StorefrontApi:
    """HTTP access to the storefront backend."""

    def __init__(self, base_url: str = STOREFRONT_URL, transport: httpx.AsyncBaseTransport | None = None,
                 timeout: float = 10.0):
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def _post(self, path: str, body: dict) -> MutationResult:
        resp = await self._client.post(path, json=body)

        payload = {}
        if resp.content:
            try:
                payload = resp.json()
            except ValueError:
                payload = {}
        if not isinstance(payload, dict):
            payload = {}

        return MutationResult(
            status=resp.status_code,
            status_text=payload.get("statusText") or resp.reason_phrase,
            error=payload.get("error"),
        )

    async def create_cart_session(self, session_id: str) -> MutationResult:
        return await self._post("/create-cart-session", {"id": session_id})

    async def get_cart_items(self, session_id: str) -> list[str]:
        resp = await self._client.post("/get-cart-items", json={"id": session_id})
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected cart items payload: {payload!r}")
        return payload.get("cartItems") or []

    async def add_cart_item(self, product_id: str, session_id: str) -> MutationResult:
        return await self._post(
            "/add-cart-item", {"product_id": product_id, "cart_session_id": session_id}
        )

    async def remove_cart_item(self, product_id: str, session_id: str) -> MutationResult:
        return await self._post(
            "/remove-cart-item", {"product_id": product_id, "cart_session_id": session_id}
        )

    async def create_order(self, session_id: str) -> MutationResult:
        return await self._post("/create-order", {"cart_session_id": session_id})

    async def fetch_courses(self, order: str | None = None, search: str | None = None) -> list[Course]:
        params = {k: v for k, v in (("order", order), ("search", search)) if v}
        resp = await self._client.get("/courses", params=params)
        resp.raise_for_status()
        return [Course.model_validate(doc) for doc in resp.json()]

    async def aclose(self):
        await self._client.aclose()
