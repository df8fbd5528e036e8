"""Application service: Set Product On Sale use case."""

from __future__ import annotations

from minitemu.application.dto import ProductSummaryDTO, to_summary
from minitemu.application.session import Session
from minitemu.domain.model.user import Command
from minitemu.domain.service.catalog import Catalog


class SetOnSaleHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(self, product_name: str, discount_pct: str | float | int) -> ProductSummaryDTO:
        self._session.seller(Command.SET_ON_SALE)
        product = self._catalog.set_on_sale(product_name, discount_pct)
        return to_summary(product)
