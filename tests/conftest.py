"""Shared pytest fixtures: an in-memory marketplace wired like the shell's."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from minitemu.application.session import Session
from minitemu.domain.service.catalog import Catalog
from minitemu.domain.service.user_manager import UserManager
from minitemu.infrastructure.bootstrap import Application, build_application
from minitemu.infrastructure.logging_config import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers installed by setup_logging so streams never outlive a test."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def app() -> Application:
    return build_application(currency="USD")


@pytest.fixture
def catalog(app: Application) -> Catalog:
    return app.catalog


@pytest.fixture
def users(app: Application) -> UserManager:
    return app.users


@pytest.fixture
def session(app: Application) -> Session:
    return app.session


@pytest.fixture
def seller_session(app: Application) -> Session:
    app.users.register("acme", "s3cret", "seller")
    app.session.login("acme", "s3cret")
    return app.session


@pytest.fixture
def customer_session(app: Application) -> Session:
    app.users.register("alice", "pw", "customer")
    app.session.login("alice", "pw")
    return app.session


@pytest.fixture
def lamp_catalog(catalog: Catalog) -> Catalog:
    catalog.add_product("Lamp", "20.00", "Home", 10, "Acme")
    catalog.add_product("Desk", "120.00", "Office", 2, "Acme")
    catalog.add_product("Desk Lamp", "35.50", "Office", 5, "Brightly")
    return catalog
