"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from minitemu.application.dto import InventoryLineDTO, format_rating
from minitemu.application.session import Session
from minitemu.domain.model.user import Command
from minitemu.domain.service.catalog import Catalog


class ShowInventoryHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(self) -> list[InventoryLineDTO]:
        self._session.seller(Command.VIEW_INVENTORY)
        return [
            InventoryLineDTO(
                name=product.name,
                category=product.category,
                price=str(product.price),
                on_sale=product.on_sale,
                sale_price=str(product.sale_price),
                quantity=product.quantity,
                average_rating=format_rating(product.average_rating),
            )
            for product in self._catalog.list_all()
        ]
