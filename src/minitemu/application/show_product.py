"""Application service: View Product Details use case (query)."""

from __future__ import annotations

from minitemu.application.dto import ProductDetailDTO, ReviewDTO, format_rating
from minitemu.application.session import Session
from minitemu.domain.model.product import Product
from minitemu.domain.model.user import Command
from minitemu.domain.service.catalog import Catalog


class ShowProductHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(self, product_name: str) -> ProductDetailDTO:
        self._session.authorize(Command.VIEW_PRODUCT_DETAILS)
        return self._to_dto(self._catalog.find_by_name(product_name))

    @staticmethod
    def _to_dto(product: Product) -> ProductDetailDTO:
        return ProductDetailDTO(
            name=product.name,
            category=product.category,
            seller_name=product.seller_name,
            price=str(product.price),
            on_sale=product.on_sale,
            sale_price=str(product.sale_price),
            discount=str(product.discount) if product.discount else "",
            quantity=product.quantity,
            average_rating=format_rating(product.average_rating),
            reviews=[
                ReviewDTO(
                    username=review.username,
                    rating=review.rating.value,
                    comment=review.comment,
                    created_at=review.created_at.strftime("%Y-%m-%d %H:%M UTC"),
                )
                for review in product.reviews
            ],
        )
