# storefront/services/order_service.py
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_service import store_error
from storefront.utils.settings import ORDER_SNAPSHOT_ITEMS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Checkout for a cart session.

    An order is a marker row keyed by the session. Cart contents, prices and
    stock are not touched; with ``snapshot_items`` on, the product ids in the
    cart at checkout time are copied onto the order.
    """

    def __init__(self, db: Session, snapshot_items: bool = ORDER_SNAPSHOT_ITEMS):
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.snapshot_items = snapshot_items

    def create_order(self, session_id: str) -> OrderModel:
        try:
            product_ids = None
            if self.snapshot_items:
                product_ids = self.cart_repo.get_product_ids(session_id)

            created = self.repo.create_order(
                OrderModel(cart_session_id=session_id, product_ids=product_ids)
            )
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Creating order for cart {session_id} failed: {e}")
            raise store_error("Creating order", e) from e

        logger.info(f"Order {created.id} created for cart {session_id}")
        return created
