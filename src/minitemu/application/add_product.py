"""Application service: Add Product use case (sellers only)."""

from __future__ import annotations

from minitemu.application.dto import ProductSummaryDTO, to_summary
from minitemu.application.session import Session
from minitemu.domain.model.user import Command
from minitemu.domain.service.catalog import Catalog


class AddProductHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(
        self,
        name: str,
        price: str,
        category: str,
        quantity: int,
        seller: str,
    ) -> ProductSummaryDTO:
        """List a new product.

        ``seller`` is the name shown on the listing; it need not match the
        logged-in seller's username.
        """
        self._session.seller(Command.ADD_PRODUCT)
        product = self._catalog.add_product(
            name=name,
            price=price,
            category=category,
            quantity=quantity,
            seller=seller,
        )
        return to_summary(product)
