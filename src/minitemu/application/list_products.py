"""Application service: View All Products use case (query)."""

from __future__ import annotations

from minitemu.application.dto import ProductSummaryDTO, to_summary
from minitemu.application.session import Session
from minitemu.domain.model.user import Command
from minitemu.domain.service.catalog import Catalog


class ListProductsHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(self) -> list[ProductSummaryDTO]:
        self._session.authorize(Command.VIEW_ALL_PRODUCTS)
        return [to_summary(p) for p in self._catalog.list_all()]
