"""Application service: Write Review use case.

Only customers who have checked out a product may review it. The check
happens here, before the catalog is touched.
"""

from __future__ import annotations

import logging

from minitemu.application.dto import ReviewDTO
from minitemu.application.session import Session
from minitemu.domain.exceptions import AuthorizationError
from minitemu.domain.model.user import Command
from minitemu.domain.service.catalog import Catalog

logger = logging.getLogger(__name__)


class WriteReviewHandler:

    def __init__(self, session: Session, catalog: Catalog) -> None:
        self._session = session
        self._catalog = catalog

    def handle(self, product_name: str, rating: int, comment: str) -> ReviewDTO:
        customer = self._session.customer(Command.WRITE_REVIEW)

        if not customer.has_purchased(product_name):
            logger.warning(
                "%r tried to review %r without buying it", customer.username, product_name
            )
            raise AuthorizationError("You can only review products you have purchased.")

        review = self._catalog.add_review(
            product_name,
            username=customer.username,
            comment=comment,
            rating=rating,
        )
        return ReviewDTO(
            username=review.username,
            rating=review.rating.value,
            comment=review.comment,
            created_at=review.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
