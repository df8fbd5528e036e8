"""Application service: View Cart use case (query)."""

from __future__ import annotations

from minitemu.application.dto import CartDTO, CartLineDTO
from minitemu.application.session import Session
from minitemu.domain.model.cart import Cart
from minitemu.domain.model.user import Command


class ViewCartHandler:

    def __init__(self, session: Session) -> None:
        self._session = session

    def handle(self) -> CartDTO:
        customer = self._session.customer(Command.VIEW_CART)
        return self._to_dto(customer.cart)

    @staticmethod
    def _to_dto(cart: Cart) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_name=item.product_name,
                    unit_price=str(item.unit_price),
                    quantity=item.quantity,
                    subtotal=str(item.subtotal),
                )
                for item in cart.items
            ],
            total=str(cart.total),
        )
