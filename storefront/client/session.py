# storefront/client/session.py
import asyncio
import uuid
from dataclasses import dataclass

import httpx

from storefront.client.api import MutationResult, StorefrontApi, log_result
from storefront.client.cart import Cart
from storefront.client.storage import KeyValueStore
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CART_SESSION_KEY = "cartSessionId"


@dataclass(frozen=True)
class SessionContext:
    session_id: str
    created: bool
    # registration (new session) or cart restoration (stored session)
    ready: asyncio.Task


class SessionManager:
    """
    Owns the anonymous cart session id.

    The id is written to local storage before the backend has confirmed it,
    and initialisation runs once per manager: later calls get the same
    context back without touching the network again.
    """

    def __init__(self, storage: KeyValueStore, api: StorefrontApi, cart: Cart,
                 storage_key: str = CART_SESSION_KEY):
        self.storage = storage
        self.api = api
        self.cart = cart
        self.storage_key = storage_key
        self._context: SessionContext | None = None

    @property
    def context(self) -> SessionContext | None:
        return self._context

    def get_or_create_session(self) -> SessionContext:
        """Must be called from a running event loop."""
        if self._context is not None:
            return self._context

        loop = asyncio.get_running_loop()
        stored = self.storage.get(self.storage_key)

        if stored:
            logger.info(f"Restoring cart session {stored}")
            ready = loop.create_task(self._restore(stored))
            self._context = SessionContext(session_id=stored, created=False, ready=ready)
        else:
            session_id = str(uuid.uuid4())
            self.storage.set(self.storage_key, session_id)
            ready = loop.create_task(self._register(session_id))
            self._context = SessionContext(session_id=session_id, created=True, ready=ready)

        return self._context

    async def _register(self, session_id: str) -> MutationResult:
        try:
            result = await self.api.create_cart_session(session_id)
        except httpx.HTTPError as e:
            result = MutationResult.failed(f"Creating cart session failed: {e}")

        log_result(result, 201, "Cart session successfully saved", "Creating cart session", logger)
        return result

    async def _restore(self, session_id: str) -> list[str]:
        try:
            product_ids = await self.api.get_cart_items(session_id)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Fetching cart items for session {session_id} failed: {e}")
            return []

        self.cart.restore(product_ids)
        return product_ids
