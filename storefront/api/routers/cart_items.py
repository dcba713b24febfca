# storefront/api/routers/cart_items.py
from http import HTTPStatus

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.responses import store_error_response, store_response
from storefront.data.database import get_db
from storefront.domain.errors import StoreOperationError
from storefront.domain.schemas import CartItemIn
from storefront.services.cart_service import CartService

router = APIRouter(tags=["cart items"])


def get_service(db: Session):
    return CartService(db)


@router.post("/add-cart-item", status_code=HTTPStatus.CREATED)
def add_cart_item(payload: CartItemIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.add_item(payload.product_id, payload.cart_session_id)
    except StoreOperationError as e:
        return store_error_response(e)
    return store_response(HTTPStatus.CREATED)


@router.post("/remove-cart-item", status_code=HTTPStatus.NO_CONTENT)
def remove_cart_item(payload: CartItemIn, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        svc.remove_item(payload.product_id, payload.cart_session_id)
    except StoreOperationError as e:
        return store_error_response(e)
    return store_response(HTTPStatus.NO_CONTENT)
