"""Identities: a closed set of two variants, Customer and Seller.

Each variant carries only the state its role needs: a Customer owns a
cart and a purchase ledger, a Seller owns nothing beyond credentials.
What each role may do is declared in ``CAPABILITIES``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from minitemu.domain.exceptions import ValidationError
from minitemu.domain.model.cart import Cart
from minitemu.domain.model.value_objects import ShippingInfo


class Role(Enum):
    CUSTOMER = "customer"
    SELLER = "seller"

    @staticmethod
    def parse(raw: str | Role) -> Role:
        if isinstance(raw, Role):
            return raw
        try:
            return Role(raw.strip().lower())
        except (AttributeError, ValueError) as exc:
            raise ValidationError(
                f"Invalid role {raw!r}. Please choose 'customer' or 'seller'."
            ) from exc


class Command(Enum):
    ADD_PRODUCT = "add-product"
    VIEW_ALL_PRODUCTS = "view-all-products"
    SET_ON_SALE = "set-on-sale"
    END_SALE = "end-sale"
    VIEW_PRODUCT_DETAILS = "view-product-details"
    VIEW_INVENTORY = "view-inventory"
    SEARCH = "search"
    ADD_TO_CART = "add-to-cart"
    VIEW_CART = "view-cart"
    CHECKOUT = "checkout"
    WRITE_REVIEW = "write-review"
    LOGOUT = "logout"


CAPABILITIES: dict[Role, frozenset[Command]] = {
    Role.SELLER: frozenset({
        Command.ADD_PRODUCT,
        Command.VIEW_ALL_PRODUCTS,
        Command.SET_ON_SALE,
        Command.END_SALE,
        Command.VIEW_PRODUCT_DETAILS,
        Command.VIEW_INVENTORY,
        Command.LOGOUT,
    }),
    Role.CUSTOMER: frozenset({
        Command.VIEW_ALL_PRODUCTS,
        Command.SEARCH,
        Command.VIEW_PRODUCT_DETAILS,
        Command.ADD_TO_CART,
        Command.VIEW_CART,
        Command.CHECKOUT,
        Command.WRITE_REVIEW,
        Command.LOGOUT,
    }),
}


@dataclass
class Customer:
    role: ClassVar[Role] = Role.CUSTOMER

    username: str
    password: str
    cart: Cart = field(default_factory=Cart)
    _purchased: list[str] = field(default_factory=list, repr=False)

    def check_password(self, password: str) -> bool:
        return password == self.password

    @property
    def capabilities(self) -> frozenset[Command]:
        return CAPABILITIES[self.role]

    @property
    def purchased_products(self) -> tuple[str, ...]:
        return tuple(self._purchased)

    def has_purchased(self, product_name: str) -> bool:
        return product_name in self._purchased

    def checkout(self, shipping_info: ShippingInfo) -> list[str]:
        """Check out the cart and record every purchased name in the ledger.

        This is the only way names enter the ledger. If the cart is empty
        ``EmptyCartError`` propagates and the ledger is unchanged.
        """
        purchased = self.cart.checkout(shipping_info)
        self._purchased.extend(purchased)
        return purchased


@dataclass
class Seller:
    role: ClassVar[Role] = Role.SELLER

    username: str
    password: str

    def check_password(self, password: str) -> bool:
        return password == self.password

    @property
    def capabilities(self) -> frozenset[Command]:
        return CAPABILITIES[self.role]


Identity = Union[Customer, Seller]


def new_identity(
    username: str, password: str, role: Role, currency: str = "USD"
) -> Identity:
    if role is Role.CUSTOMER:
        return Customer(username=username, password=password, cart=Cart(currency))
    return Seller(username=username, password=password)
