"""Tests for the composition root."""

from minitemu.application.add_to_cart import AddToCartHandler
from minitemu.application.list_products import ListProductsHandler
from minitemu.application.view_cart import ViewCartHandler
from minitemu.infrastructure.bootstrap import build_application


class TestBuildApplication:

    def test_currency_reaches_catalog_and_carts(self):
        app = build_application(currency="EUR")
        app.users.register("alice", "pw", "customer")
        app.catalog.add_product("Lamp", "20.00", "Home", 10, "Acme")
        app.session.login("alice", "pw")

        assert ViewCartHandler(app.session).handle().total == "€0.00"
        line = AddToCartHandler(app.session, app.catalog).handle("Lamp", 2)
        assert line.subtotal == "€40.00"
        assert ListProductsHandler(app.session, app.catalog).handle()[0].price == "€20.00"
