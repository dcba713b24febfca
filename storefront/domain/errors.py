# storefront/domain/errors.py
from http import HTTPStatus


class StoreOperationError(RuntimeError):
    """An insert/select/delete against the cart store failed."""

    def __init__(self, message: str, status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR):
        super().__init__(message)
        self.status_code = int(status_code)
