# storefront/api/responses.py
from http import HTTPStatus

from fastapi import Response
from fastapi.responses import JSONResponse

from storefront.domain.errors import StoreOperationError
from storefront.domain.schemas import StoreResult

METHOD_NOT_ALLOWED = StoreResult(
    status=int(HTTPStatus.METHOD_NOT_ALLOWED),
    status_text=HTTPStatus.METHOD_NOT_ALLOWED.phrase,
    error="This endpoint requires a POST request.",
)


def store_response(status_code: int, error: str | None = None) -> Response:
    if status_code == HTTPStatus.NO_CONTENT:
        return Response(status_code=status_code)

    result = StoreResult(status=int(status_code), status_text=HTTPStatus(status_code).phrase, error=error)
    return JSONResponse(result.model_dump(by_alias=True), status_code=status_code)


def store_error_response(exc: StoreOperationError) -> Response:
    return store_response(exc.status_code, str(exc))


def method_not_allowed_response() -> JSONResponse:
    return JSONResponse(METHOD_NOT_ALLOWED.model_dump(by_alias=True), status_code=HTTPStatus.METHOD_NOT_ALLOWED)
