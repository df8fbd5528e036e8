"""Interactive menu for a logged-in customer."""

from __future__ import annotations

import click

from minitemu.application.add_to_cart import AddToCartHandler
from minitemu.application.checkout import CheckoutHandler
from minitemu.application.list_products import ListProductsHandler
from minitemu.application.search_products import SearchProductsHandler
from minitemu.application.show_product import ShowProductHandler
from minitemu.application.view_cart import ViewCartHandler
from minitemu.application.write_review import WriteReviewHandler
from minitemu.domain.exceptions import DomainException
from minitemu.domain.model.value_objects import ShippingInfo
from minitemu.infrastructure.bootstrap import Application
from minitemu.infrastructure.cli import render


def _view_all(app: Application) -> None:
    handler = ListProductsHandler(session=app.session, catalog=app.catalog)
    render.display_products(handler.handle(), "No products available.")


def _search(app: Application) -> None:
    query = click.prompt("Enter search query")
    handler = SearchProductsHandler(session=app.session, catalog=app.catalog)
    render.display_products(handler.handle(query), "No products matched your search.")


def _view_details(app: Application) -> None:
    name = click.prompt("Enter product name to view details")
    handler = ShowProductHandler(session=app.session, catalog=app.catalog)
    render.display_product_details(handler.handle(name))


def _add_to_cart(app: Application) -> None:
    name = click.prompt("Enter product name")
    quantity = click.prompt("Enter quantity", type=int)

    handler = AddToCartHandler(session=app.session, catalog=app.catalog)
    line = handler.handle(name, quantity)
    click.echo(f"Added {quantity} of {line.product_name} to the cart.")


def _view_cart(app: Application) -> None:
    render.display_cart(ViewCartHandler(session=app.session).handle())


def _checkout(app: Application) -> None:
    # Checked before asking for an address.
    if ViewCartHandler(session=app.session).handle().is_empty:
        click.echo("Your cart is empty. Add items before checking out.")
        return

    shipping = ShippingInfo(
        address=click.prompt("Enter delivery address"),
        city=click.prompt("Enter city"),
        postal_code=click.prompt("Enter postal code"),
    )
    render.display_receipt(CheckoutHandler(session=app.session).handle(shipping))


def _write_review(app: Application) -> None:
    name = click.prompt("Enter product name to review")
    rating = click.prompt("Enter rating (1-5 stars)", type=int)
    comment = click.prompt("Enter your review comment")

    handler = WriteReviewHandler(session=app.session, catalog=app.catalog)
    handler.handle(name, rating=rating, comment=comment)
    click.echo("Review added successfully!")


_ACTIONS = {
    1: _view_all,
    2: _search,
    3: _view_details,
    4: _add_to_cart,
    5: _view_cart,
    6: _checkout,
    7: _write_review,
}


def customer_menu(app: Application) -> None:
    while True:
        click.echo("\n=== Customer Menu ===")
        click.echo("1. View All Products")
        click.echo("2. Search for a Product")
        click.echo("3. View Product Details")
        click.echo("4. Add Product to Cart")
        click.echo("5. View Cart")
        click.echo("6. Checkout")
        click.echo("7. Write a Review")
        click.echo("0. Logout")
        choice = click.prompt("Enter your choice", type=int)

        if choice == 0:
            app.session.logout()
            click.echo("Logging out...")
            return

        action = _ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice. Please try again.")
            continue

        try:
            action(app)
        except DomainException as exc:
            render.show_error(str(exc))
