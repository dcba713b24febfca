# storefront/rendering.py
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from storefront.domain.catalog_query import SortOption
from storefront.domain.schemas import Course

PAGE_TITLE = "Ninja Training for Cats"
PAGE_DESCRIPTION = (
    "Unleash your feline warrior's inner ninja! Join our whimsical e-commerce app for "
    "'Ninja Training for Cats' and watch your furry friends master the art of stealth "
    "and agility, one adorable paw at a time."
)
CONFIRMATION_MESSAGE = "Congrats, you are on your way to training your own ninja cats!"

_env = Environment(
    loader=FileSystemLoader(Path(__file__).parent / "templates"),
    autoescape=select_autoescape(["html"]),
)


def format_price(price: float) -> str:
    if float(price).is_integer():
        return str(int(price))
    return f"{price:.2f}"


_env.filters["money"] = format_price


class ProductAction(str, Enum):
    ADD_TO_CART = "Add to cart"
    VIEW_CART = "View cart"
    OUT_OF_STOCK = "Out of stock"


@dataclass
class UiState:
    cart_visible: bool = False
    confirmation_visible: bool = False


def product_action(course: Course, cart: Iterable[str]) -> ProductAction:
    if course.stock_quantity <= 0:
        return ProductAction.OUT_OF_STOCK
    if course.id in cart:
        return ProductAction.VIEW_CART
    return ProductAction.ADD_TO_CART


def cart_courses(courses: Sequence[Course], cart: Iterable[str]) -> list[Course]:
    """Courses of the loaded page for each cart entry; ids from other pages are skipped."""
    by_id = {c.id: c for c in courses}
    return [by_id[product_id] for product_id in cart if product_id in by_id]


def render_storefront(
    courses: Sequence[Course],
    cart: Sequence[str] = (),
    state: UiState | None = None,
    order: str | None = None,
    search: str | None = None,
) -> str:
    state = state or UiState()
    cart = list(cart)
    selected = SortOption.parse(order) or SortOption.TITLE_ASC

    return _env.get_template("index.html").render(
        title=PAGE_TITLE,
        description=PAGE_DESCRIPTION,
        confirmation_message=CONFIRMATION_MESSAGE,
        sort_options=list(SortOption),
        selected_order=selected,
        search=search or "",
        products=[(course, product_action(course, cart)) for course in courses],
        actions=ProductAction,
        cart=cart,
        cart_items=cart_courses(courses, cart),
        state=state,
    )
