# storefront/api/routers/catalog.py
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from storefront.domain.schemas import Course
from storefront.rendering import render_storefront
from storefront.services.catalog_client import get_catalog_client
from storefront.services.catalog_service import CatalogService

router = APIRouter(tags=["catalog"])


def get_catalog_service() -> CatalogService:
    return CatalogService(get_catalog_client())


@router.get("/", response_class=HTMLResponse)
def index(
    order: str | None = Query(None),
    search: str | None = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
):
    courses = catalog.list_courses(search=search, order=order)
    # the cart lives in the client, the page starts with an empty one
    return HTMLResponse(render_storefront(courses, order=order, search=search))


@router.get("/courses", response_model=list[Course])
def list_courses(
    order: str | None = Query(None),
    search: str | None = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return catalog.list_courses(search=search, order=order)


@router.get("/health")
def health():
    return {"status": "ok"}
