"""
Unit tests for the catalog query builder.
"""
import pytest

from storefront.data.seed import SEED_COURSES
from storefront.domain.catalog_query import CatalogQuery, SortOption, build_query


CORPUS = [
    {"_id": "a", "_type": "course", "title": "Stealth 101", "description": "Silent paws", "price": 29},
    {"_id": "b", "_type": "course", "title": "Wall Running", "description": "Reach the fridge", "price": 49},
    {"_id": "c", "_type": "course", "title": "Zen Nap", "description": "Sunny SPOT recovery", "price": 15},
    {"_id": "d", "_type": "author", "title": "Stealth author", "description": "not a course", "price": 0},
]


def ids(documents):
    return [d["_id"] for d in documents]


class TestSearchPredicate:
    def test_exact_title_match(self):
        query = build_query(search="Wall Running")
        assert ids(query.apply(CORPUS)) == ["b"]

    def test_case_insensitive_substring_of_title(self):
        query = build_query(search="steALTH")
        # the author document has another type and stays out
        assert ids(query.apply(CORPUS)) == ["a"]

    def test_substring_of_description(self):
        query = build_query(search="spot")
        assert ids(query.apply(CORPUS)) == ["c"]

    def test_substring_inside_a_word(self):
        query = build_query(search="idg")
        assert ids(query.apply(CORPUS)) == ["b"]

    def test_no_match(self):
        query = build_query(search="laser")
        assert query.apply(CORPUS) == []

    @pytest.mark.parametrize("search", ["", "   ", None])
    def test_empty_search_matches_every_course(self, search):
        query = build_query(search=search)
        assert query.search is None
        assert ids(query.apply(CORPUS)) == ["a", "b", "c"]

    def test_search_is_trimmed(self):
        assert build_query(search="  nap ").search == "nap"


class TestSortWhitelist:
    @pytest.mark.parametrize("token", [o.value for o in SortOption])
    def test_whitelisted_tokens_add_order_clause(self, token):
        query = build_query(order=token)
        assert query.sort == SortOption(token)
        assert query.to_groq().endswith(f" | order({token})")

    @pytest.mark.parametrize(
        "token",
        [
            "title); drop table x;--",
            "price asc) | [0]",
            "TITLE ASC",
            "title",
            "_createdAt desc",
            "",
            None,
        ],
    )
    def test_other_tokens_are_rejected_entirely(self, token):
        query = build_query(order=token)
        assert query.sort is None
        assert "order(" not in query.to_groq()
        assert query.to_groq() == "*[_type == 'course']"

    def test_labels(self):
        assert [o.label for o in SortOption] == ["A-Z", "Z-A", "Price Ascending", "Price Descending"]

    def test_sorting_by_title_and_price(self):
        courses = [d for d in CORPUS if d["_type"] == "course"]
        assert ids(build_query(order="title desc").apply(courses)) == ["c", "b", "a"]
        assert ids(build_query(order="price asc").apply(courses)) == ["c", "a", "b"]
        assert ids(build_query(order="price desc").apply(courses)) == ["b", "a", "c"]


class TestGroqRendering:
    def test_search_only_travels_as_parameter(self):
        nasty = "x') || true || ('"
        query = build_query(search=nasty, order="title asc")

        groq = query.to_groq()
        assert nasty not in groq
        assert groq == (
            "*[_type == 'course' && (title match $search || description match $search)]"
            " | order(title asc)"
        )
        assert query.params() == {"search": f"{nasty}*"}

    def test_no_params_without_search(self):
        assert build_query().params() == {}

    def test_query_is_a_value(self):
        assert build_query(search="nap", order="price asc") == CatalogQuery(
            search="nap", sort=SortOption.PRICE_ASC
        )


def test_seed_catalog_is_all_courses():
    assert len(build_query().apply(SEED_COURSES)) == len(SEED_COURSES)
