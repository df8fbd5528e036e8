"""Application service: Add To Cart use case.

Stock is taken out of the catalog when the item goes into the cart,
not at checkout. The cart then holds a snapshot of the product, so
later price changes or sales do not alter the line.
"""

from __future__ import annotations

import logging

from minitemu.application.dto import CartLineDTO
from minitemu.application.session import Session
from minitemu.domain.model.user import Command
from minitemu.domain.model.value_objects import Quantity
from minitemu.domain.service.catalog import Catalog

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(self, product_name: str, quantity: int) -> CartLineDTO:
        customer = self._session.customer(Command.ADD_TO_CART)
        qty = Quantity(quantity)

        # Reserve stock first; a failure here leaves both catalog and cart as they were.
        product = self._catalog.reduce_quantity(product_name, qty.value)
        item = customer.cart.add_item(product.snapshot(), qty)

        logger.info(
            "%r added %d x %r to cart (line now %d)",
            customer.username, qty.value, product_name, item.quantity,
        )
        return CartLineDTO(
            product_name=item.product_name,
            unit_price=str(item.unit_price),
            quantity=item.quantity,
            subtotal=str(item.subtotal),
        )
