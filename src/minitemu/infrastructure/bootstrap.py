"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
One Catalog and one UserManager are built per process and handed to
whoever needs them; there is no module-level catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from minitemu.application.session import Session
from minitemu.domain.service.catalog import Catalog
from minitemu.domain.service.user_manager import UserManager
from minitemu.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from minitemu.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)
from minitemu.infrastructure.settings import Settings


@dataclass
class Application:
    catalog: Catalog
    users: UserManager
    session: Session


def build_application(currency: str | None = None) -> Application:
    currency = currency or Settings.CURRENCY
    catalog = Catalog(InMemoryProductRepository(), currency=currency)
    users = UserManager(InMemoryUserRepository(), currency=currency)
    return Application(catalog=catalog, users=users, session=Session(users))
