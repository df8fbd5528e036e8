"""Tests for the Checkout use case."""

import pytest

from minitemu.application.add_to_cart import AddToCartHandler
from minitemu.application.checkout import CheckoutHandler
from minitemu.application.view_cart import ViewCartHandler
from minitemu.domain.exceptions import AuthorizationError, EmptyCartError
from minitemu.domain.model.value_objects import ShippingInfo

SHIPPING = ShippingInfo("1 Main St", "Springfield", "12345")


class TestCheckout:

    def test_returns_names_per_line_and_clears_cart(self, customer_session, lamp_catalog):
        add = AddToCartHandler(customer_session, lamp_catalog)
        add.handle("Lamp", 3)
        add.handle("Desk", 1)

        result = CheckoutHandler(customer_session).handle(SHIPPING)
        assert result.purchased == ["Lamp", "Desk"]
        assert result.total == "$180.00"
        assert result.ship_to == "1 Main St, Springfield, 12345"
        assert ViewCartHandler(customer_session).handle().is_empty

    def test_records_ledger(self, customer_session, lamp_catalog):
        AddToCartHandler(customer_session, lamp_catalog).handle("Lamp", 1)
        CheckoutHandler(customer_session).handle(SHIPPING)
        assert customer_session.identity.purchased_products == ("Lamp",)

    def test_empty_cart_fails_without_touching_ledger(self, customer_session):
        with pytest.raises(EmptyCartError):
            CheckoutHandler(customer_session).handle(SHIPPING)
        assert customer_session.identity.purchased_products == ()

    def test_price_change_after_add_is_not_seen(self, customer_session, lamp_catalog):
        AddToCartHandler(customer_session, lamp_catalog).handle("Lamp", 2)
        lamp_catalog.update_price("Lamp", "50.00")

        result = CheckoutHandler(customer_session).handle(SHIPPING)
        assert result.total == "$40.00"

    def test_stock_is_not_rechecked(self, customer_session, lamp_catalog):
        AddToCartHandler(customer_session, lamp_catalog).handle("Desk", 2)
        assert lamp_catalog.find_by_name("Desk").quantity == 0

        result = CheckoutHandler(customer_session).handle(SHIPPING)
        assert result.purchased == ["Desk"]
        assert lamp_catalog.find_by_name("Desk").quantity == 0

    def test_seller_cannot_checkout(self, seller_session):
        with pytest.raises(AuthorizationError):
            CheckoutHandler(seller_session).handle(SHIPPING)
