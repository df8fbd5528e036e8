"""Domain service: Catalog.

The catalog is the inventory authority. It owns every Product through the
repository it is given and applies stock, pricing and review changes. It
knows nothing about roles or sessions; who may call what is decided by
the application layer.

Duplicate product names are accepted. Every name-based operation acts on
the first product added under that name.
"""

from __future__ import annotations

import logging

from minitemu.domain.exceptions import InsufficientStock, NotFoundError
from minitemu.domain.model.product import Product, Review
from minitemu.domain.model.value_objects import Discount, Money, Quantity, Rating
from minitemu.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class Catalog:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    # --- Listings -------------------------------------------------------------

    def add_product(
        self,
        name: str,
        price: str | float | int | Money,
        category: str,
        quantity: int,
        seller: str,
    ) -> Product:
        """Create a new listing: not on sale, no reviews, rating 0."""
        money = price if isinstance(price, Money) else Money.of(price, self._currency)
        product = Product.create(
            name=name,
            price=money,
            category=category,
            quantity=quantity,
            seller_name=seller,
        )

        if self._product_repo.get_by_name(name) is not None:
            logger.warning(
                "Product name %r is already listed; lookups will keep "
                "resolving to the earlier listing",
                name,
            )

        self._product_repo.save(product)
        logger.info(
            "Added product #%s %r (%s, %d units, seller %r)",
            product.id, product.name, product.price, product.quantity, seller,
        )
        return product

    def find_by_name(self, name: str) -> Product:
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise NotFoundError(f"Product not found: '{name}'")
        return product

    def list_all(self) -> list[Product]:
        return self._product_repo.list_all()

    def search(self, query: str) -> list[Product]:
        """Products whose name or category contains ``query`` (case-sensitive)."""
        return [
            product
            for product in self._product_repo.list_all()
            if query in product.name or query in product.category
        ]

    # --- Inventory ------------------------------------------------------------

    def reduce_quantity(self, name: str, amount: int) -> Product:
        """Take ``amount`` units of ``name`` out of stock.

        An unknown product is reported as ``InsufficientStock``: there is
        no stock of it to take.
        """
        qty = Quantity(amount)
        product = self._product_repo.get_by_name(name)
        if product is None:
            raise InsufficientStock(f"Product not available: '{name}'")

        product.reduce_quantity(qty)
        self._product_repo.save(product)
        logger.info(
            "Reduced stock of %r by %d (now %d)", name, qty.value, product.quantity
        )
        return product

    def restock(self, name: str, amount: int) -> Product:
        qty = Quantity(amount)
        product = self.find_by_name(name)
        product.restock(qty)
        self._product_repo.save(product)
        logger.info("Restocked %r by %d (now %d)", name, qty.value, product.quantity)
        return product

    # --- Pricing --------------------------------------------------------------

    def update_price(self, name: str, new_price: str | float | int | Money) -> Product:
        money = (
            new_price if isinstance(new_price, Money)
            else Money.of(new_price, self._currency)
        )
        product = self.find_by_name(name)
        product.update_price(money)
        self._product_repo.save(product)
        logger.info("Price of %r changed to %s", name, product.price)
        return product

    def set_on_sale(self, name: str, discount_pct: str | float | int) -> Product:
        discount = Discount.of(discount_pct)
        product = self.find_by_name(name)
        product.put_on_sale(discount)
        self._product_repo.save(product)
        logger.info(
            "Product %r is on sale with %s discount (%s)",
            name, discount, product.sale_price,
        )
        return product

    def end_sale(self, name: str) -> Product:
        product = self.find_by_name(name)
        product.end_sale()
        self._product_repo.save(product)
        logger.info("Sale ended for %r", name)
        return product

    # --- Reviews --------------------------------------------------------------

    def add_review(self, name: str, username: str, comment: str, rating: int) -> Review:
        """Attach a review and recompute the average rating.

        Whether ``username`` bought the product is not checked here.
        """
        stars = Rating(rating)
        product = self.find_by_name(name)
        review = product.add_review(username=username, comment=comment, rating=stars)
        self._product_repo.save(product)
        logger.info(
            "Review by %r on %r (%s); average now %.1f",
            username, name, stars, product.average_rating,
        )
        return review
