# storefront/client/view.py
import asyncio

import httpx

from storefront.client.api import StorefrontApi
from storefront.client.cart import Cart, CartSynchronizer, CHECKOUT_CONFIRMATION_SECONDS
from storefront.client.session import SessionManager
from storefront.client.storage import KeyValueStore, MemoryStore
from storefront.domain.schemas import Course
from storefront.rendering import ProductAction, UiState, product_action, render_storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class StorefrontView:
    """Turns user actions on the rendered page into cart operations."""

    def __init__(self, synchronizer: CartSynchronizer, courses: list[Course],
                 order: str | None = None, search: str | None = None):
        self.synchronizer = synchronizer
        self.courses = courses
        self.order = order
        self.search = search

    @property
    def cart(self) -> Cart:
        return self.synchronizer.cart

    @property
    def state(self) -> UiState:
        return self.synchronizer.ui_state

    def action_for(self, product_id: str) -> ProductAction | None:
        course = next((c for c in self.courses if c.id == product_id), None)
        if course is None:
            return None
        return product_action(course, self.cart)

    def click_product(self, product_id: str) -> asyncio.Task | None:
        action = self.action_for(product_id)
        if action == ProductAction.VIEW_CART:
            self.state.cart_visible = True
            return None
        if action == ProductAction.ADD_TO_CART:
            return self.synchronizer.add_item(product_id)
        return None

    def toggle_cart(self):
        self.state.cart_visible = not self.state.cart_visible

    def click_remove(self, product_id: str) -> asyncio.Task:
        return self.synchronizer.remove_item(product_id)

    def click_checkout(self) -> asyncio.Task:
        return self.synchronizer.checkout()

    def render(self) -> str:
        return render_storefront(
            self.courses,
            cart=self.cart.product_ids,
            state=self.state,
            order=self.order,
            search=self.search,
        )


class Storefront:
    """
    Headless storefront: loads a catalog page, establishes the cart session
    and wires the view to the cart synchronizer.
    """

    def __init__(self, api: StorefrontApi | None = None, storage: KeyValueStore | None = None,
                 confirmation_seconds: float = CHECKOUT_CONFIRMATION_SECONDS):
        self.api = api or StorefrontApi()
        self.storage = storage if storage is not None else MemoryStore()
        self.cart = Cart()
        self.ui_state = UiState()
        self.confirmation_seconds = confirmation_seconds
        self.sessions = SessionManager(self.storage, self.api, self.cart)
        self.synchronizer: CartSynchronizer | None = None
        self.view: StorefrontView | None = None

    async def load_courses(self, order: str | None = None, search: str | None = None) -> list[Course]:
        try:
            return await self.api.fetch_courses(order=order, search=search)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Loading catalog page failed: {e}")
            return []

    async def mount(self, order: str | None = None, search: str | None = None) -> StorefrontView:
        courses = await self.load_courses(order=order, search=search)
        context = self.sessions.get_or_create_session()

        if self.synchronizer is None:
            self.synchronizer = CartSynchronizer(
                context,
                self.api,
                self.cart,
                courses,
                self.ui_state,
                confirmation_seconds=self.confirmation_seconds,
            )
        else:
            self.synchronizer.catalog = list(courses)

        self.view = StorefrontView(self.synchronizer, courses, order=order, search=search)
        return self.view

    async def close(self):
        # requests still in flight finish before the HTTP client goes away
        context = self.sessions.context
        if context is not None:
            await asyncio.gather(context.ready, return_exceptions=True)
        if self.synchronizer is not None:
            await self.synchronizer.drain()
            self.synchronizer.close()
        await self.api.aclose()
