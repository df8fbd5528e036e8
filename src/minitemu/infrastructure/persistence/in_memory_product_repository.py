"""In-memory implementation of ProductRepository.

Nothing is written anywhere; the catalog lives as long as the process.
"""

from __future__ import annotations

from minitemu.domain.model.product import Product
from minitemu.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1

    # --- ProductRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Product | None:
        for product in self._store.values():
            if product.name == name:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self._next_id
            self._next_id += 1
        self._store[product.id] = product
