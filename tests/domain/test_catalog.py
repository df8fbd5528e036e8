"""Unit tests for the Catalog domain service.

Uses the in-memory repository: no file I/O.
"""

import pytest

from minitemu.domain.exceptions import InsufficientStock, NotFoundError, ValidationError
from minitemu.domain.model.value_objects import Money
from minitemu.domain.service.catalog import Catalog
from minitemu.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _setup() -> tuple[Catalog, InMemoryProductRepository]:
    repo = InMemoryProductRepository()
    catalog = Catalog(repo)
    catalog.add_product("Lamp", "20.00", "Home", 10, "Acme")
    catalog.add_product("Desk", "120.00", "Office", 2, "Acme")
    catalog.add_product("Desk Lamp", "35.50", "Office", 5, "Brightly")
    return catalog, repo


def _assert_invariants(catalog: Catalog) -> None:
    for product in catalog.list_all():
        assert product.quantity >= 0
        if product.on_sale:
            assert product.sale_price <= product.price
        else:
            assert product.sale_price == product.price


class TestAddProduct:

    def test_new_product_defaults(self):
        catalog, repo = _setup()
        product = catalog.add_product("Chair", "45", "Office", 0, "SitWell")
        assert product.id == 4
        assert product.price == Money.of("45")
        assert product.on_sale is False
        assert product.sale_price == product.price
        assert product.average_rating == 0.0
        assert product.reviews == []
        assert repo.list_all()[-1] is product

    @pytest.mark.parametrize("price", ["0", "-1", "0.00"])
    def test_non_positive_price_rejected(self, price):
        catalog, _ = _setup()
        with pytest.raises(ValidationError):
            catalog.add_product("Chair", price, "Office", 1, "SitWell")
        assert len(catalog.list_all()) == 3

    def test_negative_quantity_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            catalog.add_product("Chair", "45", "Office", -1, "SitWell")

    def test_duplicate_name_is_allowed_and_first_match_wins(self, caplog):
        catalog, _ = _setup()
        with caplog.at_level("WARNING", logger="minitemu"):
            second = catalog.add_product("Lamp", "99.00", "Garden", 1, "Other")
        assert "already listed" in caplog.text
        assert len(catalog.list_all()) == 4

        found = catalog.find_by_name("Lamp")
        assert found is not second
        assert found.price == Money.of("20.00")

    def test_duplicate_name_mutations_hit_first_listing(self):
        catalog, _ = _setup()
        second = catalog.add_product("Lamp", "99.00", "Garden", 1, "Other")
        catalog.reduce_quantity("Lamp", 3)
        assert catalog.find_by_name("Lamp").quantity == 7
        assert second.quantity == 1


class TestLookup:

    def test_find_by_name_is_case_sensitive(self):
        catalog, _ = _setup()
        assert catalog.find_by_name("Lamp").category == "Home"
        with pytest.raises(NotFoundError, match="Product not found"):
            catalog.find_by_name("lamp")

    def test_search_matches_name_or_category(self):
        catalog, _ = _setup()
        assert [p.name for p in catalog.search("Lamp")] == ["Lamp", "Desk Lamp"]
        assert [p.name for p in catalog.search("Office")] == ["Desk", "Desk Lamp"]

    def test_search_is_case_sensitive_and_may_be_empty(self):
        catalog, _ = _setup()
        assert catalog.search("lamp") == []
        assert catalog.search("Garden") == []

    def test_empty_query_matches_everything(self):
        catalog, _ = _setup()
        assert len(catalog.search("")) == 3


class TestReduceQuantity:

    def test_more_than_available_fails_and_leaves_stock(self):
        catalog, _ = _setup()
        with pytest.raises(InsufficientStock):
            catalog.reduce_quantity("Desk", 3)
        assert catalog.find_by_name("Desk").quantity == 2

    def test_exact_quantity_succeeds_to_zero(self):
        catalog, _ = _setup()
        catalog.reduce_quantity("Desk", 2)
        assert catalog.find_by_name("Desk").quantity == 0
        _assert_invariants(catalog)

    def test_unknown_product_is_insufficient_stock(self):
        catalog, _ = _setup()
        with pytest.raises(InsufficientStock, match="not available"):
            catalog.reduce_quantity("Sofa", 1)

    def test_non_positive_amount_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            catalog.reduce_quantity("Lamp", 0)
        assert catalog.find_by_name("Lamp").quantity == 10

    def test_restock(self):
        catalog, _ = _setup()
        catalog.reduce_quantity("Desk", 2)
        catalog.restock("Desk", 5)
        assert catalog.find_by_name("Desk").quantity == 5


class TestSales:

    def test_set_on_sale_computes_sale_price(self):
        catalog, _ = _setup()
        product = catalog.set_on_sale("Lamp", 25)
        assert product.on_sale
        assert product.sale_price == Money.of("15.00")
        _assert_invariants(catalog)

    @pytest.mark.parametrize("pct", [1, 100])
    def test_boundary_discounts_accepted(self, pct):
        catalog, _ = _setup()
        catalog.set_on_sale("Lamp", pct)
        _assert_invariants(catalog)

    @pytest.mark.parametrize("pct", [0, 101])
    def test_out_of_range_discounts_rejected(self, pct):
        catalog, _ = _setup()
        with pytest.raises(ValidationError):
            catalog.set_on_sale("Lamp", pct)
        lamp = catalog.find_by_name("Lamp")
        assert lamp.on_sale is False
        assert lamp.sale_price == lamp.price

    def test_set_on_sale_unknown_product(self):
        catalog, _ = _setup()
        with pytest.raises(NotFoundError):
            catalog.set_on_sale("Sofa", 10)

    def test_end_sale(self):
        catalog, _ = _setup()
        catalog.set_on_sale("Lamp", 25)
        product = catalog.end_sale("Lamp")
        assert product.on_sale is False
        assert product.sale_price == Money.of("20.00")

    def test_update_price(self):
        catalog, _ = _setup()
        catalog.set_on_sale("Lamp", 50)
        product = catalog.update_price("Lamp", "40")
        assert product.price == Money.of("40")
        assert product.sale_price == Money.of("20.00")
        _assert_invariants(catalog)

    def test_fraction_of_a_cent_price_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(ValidationError, match="fractions of a cent"):
            catalog.add_product("Pin", "0.009", "Misc", 1, "Acme")
        assert len(catalog.list_all()) == 3

    def test_smallest_price_stays_within_regular_price_on_sale(self):
        catalog, _ = _setup()
        catalog.add_product("Pin", "0.01", "Misc", 1, "Acme")
        product = catalog.set_on_sale("Pin", 1)
        assert product.sale_price == Money.of("0.01")
        _assert_invariants(catalog)

    def test_update_price_to_fraction_of_a_cent_during_sale_rejected(self):
        catalog, _ = _setup()
        catalog.set_on_sale("Lamp", 1)
        with pytest.raises(ValidationError, match="fractions of a cent"):
            catalog.update_price("Lamp", "0.009")
        lamp = catalog.find_by_name("Lamp")
        assert lamp.price == Money.of("20.00")
        _assert_invariants(catalog)


class TestReviews:

    def test_no_reviews_average_is_zero(self):
        catalog, _ = _setup()
        assert catalog.find_by_name("Lamp").average_rating == 0.0

    @pytest.mark.parametrize("rating", [1, 5])
    def test_boundary_ratings_accepted(self, rating):
        catalog, _ = _setup()
        review = catalog.add_review("Lamp", "alice", "fine", rating)
        assert review.rating.value == rating
        assert catalog.find_by_name("Lamp").average_rating == rating

    @pytest.mark.parametrize("rating", [0, 6])
    def test_out_of_range_ratings_rejected(self, rating):
        catalog, _ = _setup()
        with pytest.raises(ValidationError, match="between 1 and 5"):
            catalog.add_review("Lamp", "alice", "fine", rating)
        assert catalog.find_by_name("Lamp").reviews == []

    def test_average_recomputed_on_each_review(self):
        catalog, _ = _setup()
        catalog.add_review("Lamp", "a", "", 2)
        catalog.add_review("Lamp", "b", "", 5)
        catalog.add_review("Lamp", "c", "", 4)
        lamp = catalog.find_by_name("Lamp")
        assert lamp.average_rating == pytest.approx(11 / 3)
        assert f"{lamp.average_rating:.1f}" == "3.7"

    def test_review_unknown_product(self):
        catalog, _ = _setup()
        with pytest.raises(NotFoundError):
            catalog.add_review("Sofa", "alice", "?", 3)

    def test_catalog_does_not_check_purchases(self):
        catalog, _ = _setup()
        catalog.add_review("Desk", "never-bought-it", "looks nice", 4)
        assert len(catalog.find_by_name("Desk").reviews) == 1
