"""Application service: Checkout use case.

Charges the prices captured in the cart. Current catalog prices and
stock are not consulted again; stock was already taken at add-to-cart.
"""

from __future__ import annotations

import logging

from minitemu.application.dto import CheckoutResultDTO
from minitemu.application.session import Session
from minitemu.domain.model.user import Command
from minitemu.domain.model.value_objects import ShippingInfo

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, session: Session) -> None:
        self._session = session

    def handle(self, shipping_info: ShippingInfo) -> CheckoutResultDTO:
        customer = self._session.customer(Command.CHECKOUT)

        total = customer.cart.total
        purchased = customer.checkout(shipping_info)

        logger.info(
            "%r checked out %d line(s) for %s", customer.username, len(purchased), total
        )
        return CheckoutResultDTO(
            purchased=purchased,
            total=str(total),
            ship_to=str(shipping_info),
        )
