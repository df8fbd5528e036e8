"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from minitemu.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return the first-added product with exactly this name, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Store a new or updated product, assigning an ID to new ones."""
