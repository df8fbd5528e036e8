"""Interactive menu for a logged-in seller."""

from __future__ import annotations

import click

from minitemu.application.add_product import AddProductHandler
from minitemu.application.end_sale import EndSaleHandler
from minitemu.application.list_products import ListProductsHandler
from minitemu.application.set_on_sale import SetOnSaleHandler
from minitemu.application.show_inventory import ShowInventoryHandler
from minitemu.application.show_product import ShowProductHandler
from minitemu.domain.exceptions import DomainException
from minitemu.infrastructure.bootstrap import Application
from minitemu.infrastructure.cli import render


def _add_product(app: Application) -> None:
    name = click.prompt("Enter product name")
    price = click.prompt("Enter product price")
    category = click.prompt("Enter product category")
    quantity = click.prompt("Enter product quantity", type=int)
    seller = click.prompt("Enter seller name", default=app.session.identity.username)

    handler = AddProductHandler(session=app.session, catalog=app.catalog)
    product = handler.handle(
        name=name, price=price, category=category, quantity=quantity, seller=seller
    )
    click.echo(
        f"Product '{product.name}' added successfully with {product.quantity} units."
    )


def _view_all(app: Application) -> None:
    handler = ListProductsHandler(session=app.session, catalog=app.catalog)
    render.display_products(handler.handle(), "No products available.")


def _set_on_sale(app: Application) -> None:
    name = click.prompt("Enter product name to set on sale")
    discount = click.prompt("Enter discount percentage")

    handler = SetOnSaleHandler(session=app.session, catalog=app.catalog)
    product = handler.handle(name, discount)
    click.echo(
        f"Product '{product.name}' is now on sale at {product.sale_price} "
        f"(was {product.price})."
    )


def _end_sale(app: Application) -> None:
    name = click.prompt("Enter product name to end sale")
    handler = EndSaleHandler(session=app.session, catalog=app.catalog)
    product = handler.handle(name)
    click.echo(f"Sale ended for '{product.name}'; price is back to {product.price}.")


def _view_details(app: Application) -> None:
    name = click.prompt("Enter product name to view details")
    handler = ShowProductHandler(session=app.session, catalog=app.catalog)
    render.display_product_details(handler.handle(name))


def _view_inventory(app: Application) -> None:
    handler = ShowInventoryHandler(session=app.session, catalog=app.catalog)
    render.display_inventory(handler.handle())


_ACTIONS = {
    1: _add_product,
    2: _view_all,
    3: _set_on_sale,
    4: _view_details,
    5: _view_inventory,
    6: _end_sale,
}


def seller_menu(app: Application) -> None:
    while True:
        click.echo("\n=== Seller Menu ===")
        click.echo("1. Add Product")
        click.echo("2. View All Products")
        click.echo("3. Set Product on Sale")
        click.echo("4. View Product Details")
        click.echo("5. View Inventory")
        click.echo("6. End Sale")
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
