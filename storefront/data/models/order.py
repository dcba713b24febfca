from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, JSON
from datetime import datetime, timezone

from storefront.data.database import Base

class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    cart_session_id = Column(String(64), ForeignKey("cart_sessions.id"), nullable=False)

    # only filled when ORDER_SNAPSHOT_ITEMS is on
    product_ids = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
