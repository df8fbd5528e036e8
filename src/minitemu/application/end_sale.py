"""Application service: End Sale use case."""

from __future__ import annotations

from minitemu.application.dto import ProductSummaryDTO, to_summary
from minitemu.application.session import Session
from minitemu.domain.model.user import Command
from minitemu.domain.service.catalog import Catalog


class EndSaleHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(self, product_name: str) -> ProductSummaryDTO:
        self._session.seller(Command.END_SALE)
        return to_summary(self._catalog.end_sale(product_name))
