"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the shell and application layers without
exposing domain internals. Money and ratings arrive pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass

from minitemu.domain.model.product import Product


@dataclass(frozen=True)
class ProductSummaryDTO:
    """Output: one row of a product listing or search result."""

    name: str
    price: str  # formatted, e.g. "$20.00"
    category: str
    quantity: int
    on_sale: bool
    sale_price: str


@dataclass(frozen=True)
class ReviewDTO:
    username: str
    rating: int
    comment: str
    created_at: str


@dataclass(frozen=True)
class ProductDetailDTO:
    name: str
    category: str
    seller_name: str
    price: str
    on_sale: bool
    sale_price: str
    discount: str  # e.g. "25%", empty when not on sale
    quantity: int
    average_rating: str  # one decimal, e.g. "4.5"
    reviews: list[ReviewDTO]


@dataclass(frozen=True)
class InventoryLineDTO:
    name: str
    category: str
    price: str
    on_sale: bool
    sale_price: str
    quantity: int
    average_rating: str


@dataclass(frozen=True)
class CartLineDTO:
    product_name: str
    unit_price: str
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class CheckoutResultDTO:
    """Output: what was bought, what it cost, and where it goes."""

    purchased: list[str]
    total: str
    ship_to: str


def format_rating(value: float) -> str:
    return f"{value:.1f}"


def to_summary(product: Product) -> ProductSummaryDTO:
    return ProductSummaryDTO(
        name=product.name,
        price=str(product.price),
        category=product.category,
        quantity=product.quantity,
        on_sale=product.on_sale,
        sale_price=str(product.sale_price),
    )
