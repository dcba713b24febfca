# storefront/main.py
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from storefront.api.responses import method_not_allowed_response
from storefront.api.routers import catalog, cart_sessions, cart_items, orders
from storefront.data.database import init_db
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

logger.info("Initializing database...")
try:
    init_db()
    logger.info("Database tables ready")
except Exception as e:
    logger.error(f"Failed to create tables: {e}")
    raise


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405 and request.url.path in request.app.state.post_only_paths:
        return method_not_allowed_response()
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ninja Training for Cats",
        version="1.0.0",
    )

    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    # Include routers
    store_routers = [cart_sessions.router, cart_items.router, orders.router]
    app.state.post_only_paths = {route.path for r in store_routers for route in r.routes}

    app.include_router(catalog.router)
    for r in store_routers:
        app.include_router(r)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
