# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, List


class CartSessionIn(BaseModel):
    """Body of /create-cart-session and /get-cart-items."""

    id: str = Field(..., min_length=1, max_length=64, description="Cart session uuid")


class CartItemIn(BaseModel):
    """Body of /add-cart-item and /remove-cart-item."""

    product_id: str = Field(..., min_length=1, description="CMS document id of the course")
    cart_session_id: str = Field(..., min_length=1, max_length=64)


class OrderIn(BaseModel):
    """Body of /create-order."""

    cart_session_id: str = Field(..., min_length=1, max_length=64)


class CartItemsOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cart_items: List[str] = Field(default_factory=list, alias="cartItems")


class StoreResult(BaseModel):
    """Outcome envelope returned by the store endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    status: int
    status_text: str = Field(..., alias="statusText")
    error: str | None = None


class Course(BaseModel):
    """A catalog document of type "course", as the CMS returns it."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str
    description: str = ""
    price: float = Field(..., ge=0)
    stock_quantity: int = Field(0, alias="stockQuantity")
    image: Any = None
    image_url: str | None = Field(None, alias="imageUrl")

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0
