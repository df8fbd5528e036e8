"""Shared formatting for displaying DTOs."""

from __future__ import annotations

import click

from minitemu.application.dto import (
    CartDTO,
    CheckoutResultDTO,
    InventoryLineDTO,
    ProductDetailDTO,
    ProductSummaryDTO,
)


def show_error(message: str) -> None:
    click.echo(f"Error: {message}", err=True)


def display_products(products: list[ProductSummaryDTO], empty_message: str) -> None:
    if not products:
        click.echo(empty_message)
        return

    click.echo(f"{'Name':<20} {'Category':<14} {'Price':>10} {'Sale':>10} {'Stock':>6}")
    click.echo("-" * 64)
    for p in products:
        sale = p.sale_price if p.on_sale else "-"
        click.echo(
            f"{p.name:<20} {p.category:<14} {p.price:>10} {sale:>10} {p.quantity:>6}"
        )


def display_product_details(dto: ProductDetailDTO) -> None:
    click.echo("\n=== Product Details ===")
    click.echo(f"Name:     {dto.name}")
    click.echo(f"Category: {dto.category}")
    click.echo(f"Seller:   {dto.seller_name}")
    click.echo(f"Regular Price: {dto.price}")
    if dto.on_sale:
        click.echo(f"ON SALE: {dto.sale_price} ({dto.discount} off!)")
    click.echo(f"Quantity Available: {dto.quantity}")
    click.echo(f"Average Rating: {dto.average_rating}/5.0")

    if dto.reviews:
        click.echo("\nCustomer Reviews:")
        for review in dto.reviews:
            click.echo(f"  {'*' * review.rating} {review.username} ({review.created_at})")
            click.echo(f'  "{review.comment}"')


def display_inventory(lines: list[InventoryLineDTO]) -> None:
    if not lines:
        click.echo("No products available in inventory.")
        return

    click.echo(
        f"{'Product':<20} {'Category':<14} {'Price':>10} {'Sale':>10} "
        f"{'Stock':>6} {'Rating':>7}"
    )
    click.echo("-" * 72)
    for line in lines:
        sale = line.sale_price if line.on_sale else "-"
        click.echo(
            f"{line.name:<20} {line.category:<14} {line.price:>10} {sale:>10} "
            f"{line.quantity:>6} {line.average_rating:>7}"
        )


def display_cart(dto: CartDTO) -> None:
    if dto.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.subtotal:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Cart Total':<27} {dto.total:>20}")


def display_receipt(dto: CheckoutResultDTO) -> None:
    click.echo("Order placed successfully!")
    click.echo(f"Purchased: {', '.join(dto.purchased)}")
    click.echo(f"Total charged: {dto.total}")
    click.echo(f"Delivering to: {dto.ship_to}")
