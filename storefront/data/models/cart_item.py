from sqlalchemy import Column, Integer, ForeignKey, String
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    # CMS document id, not checked against the catalog
    product_id = Column(String, nullable=False)
    cart_session_id = Column(
        String(64),
        ForeignKey("cart_sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    cart_session = relationship("CartSessionModel", back_populates="items")
