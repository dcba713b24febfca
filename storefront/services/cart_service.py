# storefront/services/cart_service.py
from http import HTTPStatus

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.cart_session import CartSessionModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import StoreOperationError
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def store_error(action: str, exc: SQLAlchemyError) -> StoreOperationError:
    """Map a database failure onto the status the store endpoints report."""
    if isinstance(exc, IntegrityError):
        return StoreOperationError(f"{action} failed: {exc.orig}", HTTPStatus.CONFLICT)
    return StoreOperationError(f"{action} failed: {exc}")


class CartService:
    """
    Cart store operations for anonymous cart sessions.
    Commands (create session, add, remove) write, the query (get items) only reads.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    # =====================================================
    # QUERY
    # =====================================================
    def get_cart_items(self, session_id: str) -> list[str]:
        """
        Product ids in the cart of a session.
        An unknown session is an empty cart, not an error.
        """
        try:
            cart_session = self.repo.get_session(session_id)
            if not cart_session:
                logger.info(f"Cart session {session_id} not found, returning empty cart")
                return []
            return self.repo.get_product_ids(session_id)
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Reading cart items for session {session_id} failed: {e}")
            raise store_error("Reading cart items", e) from e

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_session(self, session_id: str) -> CartSessionModel:
        try:
            created = self.repo.create_session(CartSessionModel(id=session_id))
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Creating cart session {session_id} failed: {e}")
            raise store_error("Creating cart session", e) from e

        logger.info(f"Created cart session {created.id}")
        return created

    def add_item(self, product_id: str, session_id: str) -> CartItemModel:
        # no quantity: the same product may be inserted twice, the cart is a set for the UI
        try:
            item = self.repo.add_cart_item(
                CartItemModel(product_id=product_id, cart_session_id=session_id)
            )
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Adding product {product_id} to cart {session_id} failed: {e}")
            raise store_error("Adding cart item", e) from e

        logger.info(f"Product {product_id} added to cart {session_id}")
        return item

    def remove_item(self, product_id: str, session_id: str) -> int:
        try:
            deleted = self.repo.delete_cart_items(session_id, product_id)
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Removing product {product_id} from cart {session_id} failed: {e}")
            raise store_error("Removing cart item", e) from e

        logger.info(f"Removed {deleted} row(s) of product {product_id} from cart {session_id}")
        return deleted
