# storefront/api/routers/orders.py
from http import HTTPStatus

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.responses import store_error_response, store_response
from storefront.data.database import get_db
from storefront.domain.errors import StoreOperationError
from storefront.domain.schemas import OrderIn
from storefront.services.order_service import OrderService

router = APIRouter(tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("/create-order", status_code=HTTPStatus.CREATED)
def create_order(payload: OrderIn, db: Session = Depends(get_db)):
    """
    Marks a checkout for the cart session.
    The cart itself is left as it is.
    """
    svc = get_service(db)
    try:
        svc.create_order(payload.cart_session_id)
    except StoreOperationError as e:
        return store_error_response(e)
    return store_response(HTTPStatus.CREATED)
