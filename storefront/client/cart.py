# storefront/client/cart.py
from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Awaitable, Iterable, Iterator, Sequence

import httpx

from storefront.client.api import MutationResult, StorefrontApi, log_result
from storefront.domain.schemas import Course
from storefront.rendering import UiState
from storefront.utils.logging import get_logger

if TYPE_CHECKING:
    from storefront.client.session import SessionContext

logger = get_logger(__name__)

CHECKOUT_CONFIRMATION_SECONDS = 5.0


class Cart:
    """Local cache of the cart item rows of the active session."""

    def __init__(self, product_ids: Iterable[str] = ()):
        self._ids = list(product_ids)

    def add(self, product_id: str):
        self._ids.append(product_id)

    def remove(self, product_id: str):
        self._ids = [current for current in self._ids if current != product_id]

    def restore(self, product_ids: Iterable[str]):
        # ids added before the restore answered are kept after the stored ones
        restored = list(product_ids)
        self._ids = restored + [i for i in self._ids if i not in restored]

    @property
    def product_ids(self) -> list[str]:
        return list(self._ids)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)


class CartSynchronizer:
    """
    Applies cart actions locally right away and mirrors them to the backend
    in the background.

    Each action returns the task running the remote call. Its result is only
    logged: failures are not retried and the local change is never rolled
    back.
    """

    def __init__(
        self,
        context: SessionContext,
        api: StorefrontApi,
        cart: Cart,
        catalog: Sequence[Course],
        ui_state: UiState,
        confirmation_seconds: float = CHECKOUT_CONFIRMATION_SECONDS,
    ):
        self.context = context
        self.api = api
        self.cart = cart
        self.catalog = list(catalog)
        self.ui_state = ui_state
        self.confirmation_seconds = confirmation_seconds
        self._pending: set[asyncio.Task] = set()
        self._dismiss_handle: asyncio.TimerHandle | None = None

    # =====================================================
    # COMMANDS
    # =====================================================
    def add_item(self, product_id: str) -> asyncio.Task | None:
        if not any(course.id == product_id for course in self.catalog):
            logger.debug(f"Ignoring product {product_id}, not on the loaded catalog page")
            return None

        self.cart.add(product_id)
        return self._dispatch(
            self.api.add_cart_item(product_id, self.context.session_id),
            201,
            "Cart item successfully saved",
            "Adding cart item",
        )

    def remove_item(self, product_id: str) -> asyncio.Task:
        self.cart.remove(product_id)
        return self._dispatch(
            self.api.remove_cart_item(product_id, self.context.session_id),
            204,
            "Cart item successfully deleted",
            "Deleting cart item",
        )

    def checkout(self) -> asyncio.Task:
        task = self._dispatch(
            self.api.create_order(self.context.session_id),
            201,
            "Order successfully created",
            "Creating order",
        )

        # shown right away, whatever the order insert returns
        self.ui_state.confirmation_visible = True
        self._arm_dismiss_timer()
        return task

    # =====================================================
    # LIFECYCLE
    # =====================================================
    async def drain(self):
        """Wait for every mutation still in flight."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def close(self):
        self._cancel_dismiss_timer()

    # =====================================================
    # INTERNALS
    # =====================================================
    def _dispatch(self, call: Awaitable[MutationResult], expected_status: int,
                  success: str, action: str) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(
            self._run(call, expected_status, success, action)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run(self, call: Awaitable[MutationResult], expected_status: int,
                   success: str, action: str) -> MutationResult:
        try:
            result = await call
        except httpx.HTTPError as e:
            result = MutationResult.failed(f"{action} failed: {e}")

        log_result(result, expected_status, success, action, logger)
        return result

    def _cancel_dismiss_timer(self):
        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
            self._dismiss_handle = None

    def _arm_dismiss_timer(self):
        self._cancel_dismiss_timer()
        loop = asyncio.get_running_loop()
        self._dismiss_handle = loop.call_later(self.confirmation_seconds, self._dismiss)

    def _dismiss(self):
        self._dismiss_handle = None
        self.ui_state.confirmation_visible = False
