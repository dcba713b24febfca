# storefront/repos/cart_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from storefront.data.models.cart_session import CartSessionModel
from storefront.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_session(self, session_id: str) -> CartSessionModel | None:
        return self.db.execute(
            select(CartSessionModel).where(CartSessionModel.id == session_id).limit(1)
        ).scalar_one_or_none()

    def create_session(self, cart_session: CartSessionModel) -> CartSessionModel:
        self.db.add(cart_session)
        self.db.commit()
        self.db.refresh(cart_session)
        return cart_session

    def get_product_ids(self, session_id: str) -> list[str]:
        return list(
            self.db.execute(
                select(CartItemModel.product_id)
                .where(CartItemModel.cart_session_id == session_id)
                .order_by(CartItemModel.id)
            ).scalars()
        )

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_cart_items(self, session_id: str, product_id: str) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.cart_session_id == session_id,
                CartItemModel.product_id == product_id,
            )
        )
        self.db.commit()
        return result.rowcount

    def rollback(self):
        self.db.rollback()
