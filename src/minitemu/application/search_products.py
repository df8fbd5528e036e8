"""Application service: Search use case (query)."""

from __future__ import annotations

from minitemu.application.dto import ProductSummaryDTO, to_summary
from minitemu.application.session import Session
from minitemu.domain.model.user import Command
from minitemu.domain.service.catalog import Catalog


class SearchProductsHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(self, query: str) -> list[ProductSummaryDTO]:
        """Match ``query`` against names and categories; no match is an empty list."""
        self._session.authorize(Command.SEARCH)
        return [to_summary(p) for p in self._catalog.search(query)]
