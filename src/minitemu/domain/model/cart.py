"""Cart: a customer's transient selection of product snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field

from minitemu.domain.exceptions import EmptyCartError
from minitemu.domain.model.product import ProductSnapshot
from minitemu.domain.model.value_objects import Money, Quantity, ShippingInfo


@dataclass
class CartItem:
    """A product snapshot paired with how many units were selected.

    Prices are read from the snapshot, so a line keeps the price that was
    current when it was first added.
    """

    product: ProductSnapshot
    quantity: int

    @property
    def product_name(self) -> str:
        return self.product.name

    @property
    def unit_price(self) -> Money:
        return self.product.unit_price

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    currency: str = "USD"
    items: list[CartItem] = field(default_factory=list)

    def add_item(self, product: ProductSnapshot, quantity: Quantity) -> CartItem:
        """Add units of a product, merging with an existing line of the same name.

        A merged line keeps its original snapshot; only the quantity grows.
        """
        for item in self.items:
            if item.product_name == product.name:
                item.quantity += quantity.value
                return item
        item = CartItem(product=product, quantity=quantity.value)
        self.items.append(item)
        return item

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.subtotal
        return result

    def checkout(self, shipping_info: ShippingInfo) -> list[str]:
        """Empty the cart and return the purchased product names, one per line.

        ``shipping_info`` is already validated by its own constructor;
        delivery itself is not modelled.
        """
        if self.is_empty:
            raise EmptyCartError("Your cart is empty. Add items before checking out.")
        purchased = [item.product_name for item in self.items]
        self.items.clear()
        return purchased
