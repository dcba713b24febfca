# storefront/domain/catalog_query.py
"""
Catalog query building.

The query is a value object, never a string assembled from request input:
the sort token has to be one of the SortOption members before it reaches
the rendered GROQ, and the search text only travels as the bound
``$search`` parameter.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


COURSE_DOCUMENT_TYPE = "course"


class SortOption(str, Enum):
    TITLE_ASC = "title asc"
    TITLE_DESC = "title desc"
    PRICE_ASC = "price asc"
    PRICE_DESC = "price desc"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]

    @property
    def field(self) -> str:
        return self.value.split(" ")[0]

    @property
    def descending(self) -> bool:
        return self.value.endswith(" desc")

    @classmethod
    def parse(cls, token: str | None) -> "SortOption | None":
        """Whitelist lookup; anything that is not an exact member is dropped."""
        if token is None:
            return None
        try:
            return cls(token)
        except ValueError:
            return None


_SORT_LABELS = {
    SortOption.TITLE_ASC: "A-Z",
    SortOption.TITLE_DESC: "Z-A",
    SortOption.PRICE_ASC: "Price Ascending",
    SortOption.PRICE_DESC: "Price Descending",
}


@dataclass(frozen=True)
class CatalogQuery:
    document_type: str = COURSE_DOCUMENT_TYPE
    search: str | None = None
    sort: SortOption | None = None

    def to_groq(self) -> str:
        predicate = f"_type == '{self.document_type}'"
        if self.search:
            predicate += " && (title match $search || description match $search)"

        query = f"*[{predicate}]"
        if self.sort is not None:
            query += f" | order({self.sort.value})"
        return query

    def params(self) -> dict[str, Any]:
        if not self.search:
            return {}
        return {"search": f"{self.search}*"}

    def matches(self, document: dict[str, Any]) -> bool:
        if document.get("_type", self.document_type) != self.document_type:
            return False
        if not self.search:
            return True

        needle = self.search.casefold()
        return any(
            needle in str(document.get(field) or "").casefold()
            for field in ("title", "description")
        )

    def apply(self, documents: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
        result = [d for d in documents if self.matches(d)]
        if self.sort is not None:
            field = self.sort.field
            if field == "title":
                key = lambda d: str(d.get("title") or "").casefold()
            else:
                key = lambda d: d.get("price") or 0
            result.sort(key=key, reverse=self.sort.descending)
        return result


def build_query(search: str | None = None, order: str | None = None) -> CatalogQuery:
    search = (search or "").strip() or None
    return CatalogQuery(search=search, sort=SortOption.parse(order))
