"""Product aggregate and the reviews it owns.

Products live in the catalog. Prices change, stock moves up and down,
sales start and end, and reviews accumulate. Carts never hold a Product
itself; they hold a ``ProductSnapshot`` taken when the item was added.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from minitemu.domain.exceptions import InsufficientStock, ValidationError
from minitemu.domain.model.value_objects import Discount, Money, Quantity, Rating


@dataclass(frozen=True)
class Review:
    """A customer's review. Immutable once created."""

    username: str
    comment: str
    rating: Rating
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ProductSnapshot:
    """Copy of a product's pricing at a point in time.

    Later catalog mutations (price change, sale, restock) do not reach
    a snapshot.
    """

    name: str
    category: str
    seller_name: str
    price: Money
    on_sale: bool
    sale_price: Money

    @property
    def unit_price(self) -> Money:
        return self.sale_price if self.on_sale else self.price


@dataclass
class Product:
    """Aggregate root for a catalog listing.

    Invariants:
    - ``quantity`` is never negative
    - on sale: ``sale_price <= price``; not on sale: ``sale_price == price``
    - ``average_rating`` is the mean of all review ratings, 0.0 with none

    Use ``Product.create()`` for new listings; it validates the input.
    """

    id: int | None
    name: str
    price: Money
    category: str
    quantity: int
    seller_name: str
    on_sale: bool = False
    sale_price: Money | None = None
    discount: Discount | None = None
    reviews: list[Review] = field(default_factory=list)
    average_rating: float = 0.0

    def __post_init__(self) -> None:
        if self.sale_price is None:
            self.sale_price = self.price

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        category: str,
        quantity: int,
        seller_name: str,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        _validate_price(price)
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Product quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise ValidationError("Product quantity cannot be negative")
        return Product(
            id=None,
            name=name,
            price=price,
            category=category,
            quantity=quantity,
            seller_name=seller_name,
        )

    # --- Inventory ------------------------------------------------------------

    def reduce_quantity(self, amount: Quantity) -> None:
        """Take ``amount`` units out of stock.

        The availability check and the decrement happen in this one call;
        on failure the stock is left untouched.
        """
        if amount.value > self.quantity:
            raise InsufficientStock(
                f"Insufficient stock for {self.name} "
                f"(need {amount.value}, have {self.quantity} available)"
            )
        self.quantity -= amount.value

    def restock(self, amount: Quantity) -> None:
        self.quantity += amount.value

    # --- Pricing --------------------------------------------------------------

    @property
    def unit_price(self) -> Money:
        """What a customer pays per unit right now."""
        return self.sale_price if self.on_sale else self.price  # type: ignore[return-value]

    def update_price(self, new_price: Money) -> None:
        """Change the regular price.

        A running sale keeps its percentage and is re-applied to the new
        price. Carts are unaffected; they hold snapshots.
        """
        _validate_price(new_price)
        self.price = new_price
        if self.on_sale and self.discount is not None:
            self.sale_price = new_price.discounted(self.discount)
        else:
            self.sale_price = new_price

    def put_on_sale(self, discount: Discount) -> None:
        self.on_sale = True
        self.discount = discount
        self.sale_price = self.price.discounted(discount)

    def end_sale(self) -> None:
        self.on_sale = False
        self.discount = None
        self.sale_price = self.price

    # --- Reviews --------------------------------------------------------------

    def add_review(self, username: str, comment: str, rating: Rating) -> Review:
        review = Review(username=username, comment=comment, rating=rating)
        self.reviews.append(review)
        self._recompute_average_rating()
        return review

    def _recompute_average_rating(self) -> None:
        if not self.reviews:
            self.average_rating = 0.0
            return
        total = sum(review.rating.value for review in self.reviews)
        self.average_rating = total / len(self.reviews)

    # --- Snapshots ------------------------------------------------------------

    def snapshot(self) -> ProductSnapshot:
        return ProductSnapshot(
            name=self.name,
            category=self.category,
            seller_name=self.seller_name,
            price=self.price,
            on_sale=self.on_sale,
            sale_price=self.sale_price,  # type: ignore[arg-type]
        )


def _validate_price(price: Money) -> None:
    if price.is_zero:
        raise ValidationError("Product price must be greater than zero")
    if not price.is_whole_cents:
        raise ValidationError(
            f"Product price cannot have fractions of a cent, got {price.amount}"
        )
