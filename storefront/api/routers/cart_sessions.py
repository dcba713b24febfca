# storefront/api/routers/cart_sessions.py
from http import HTTPStatus

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.responses import store_error_response, store_response
from storefront.data.database import get_db
from storefront.domain.errors import StoreOperationError
from storefront.domain.schemas import CartSessionIn, CartItemsOut
from storefront.services.cart_service import CartService

router = APIRouter(tags=["cart sessions"])


def get_service(db: Session):
    return CartService(db)


@router.post("/create-cart-session", status_code=HTTPStatus.CREATED)
def create_cart_session(payload: CartSessionIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.create_session(payload.id)
    except StoreOperationError as e:
        return store_error_response(e)
    return store_response(HTTPStatus.CREATED)


@router.post("/get-cart-items", response_model=CartItemsOut)
def get_cart_items(payload: CartSessionIn, db: Session = Depends(get_db)):
    """
    Product ids stored for a cart session.
    Unknown sessions and store failures both come back as an empty cart.
    """
    svc = get_service(db)
    try:
        cart_items = svc.get_cart_items(payload.id)
    except StoreOperationError:
        cart_items = []
    return CartItemsOut(cart_items=cart_items)
