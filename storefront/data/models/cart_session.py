#storefront/data/models/cart_session.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class CartSessionModel(Base):
    __tablename__ = "cart_sessions"

    # uuid generated by the client
    id = Column(String(64), primary_key=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    items = relationship(
        "CartItemModel",
        back_populates="cart_session",
        cascade="all, delete-orphan",
    )
