"""Session: who is logged in, and what they are allowed to do.

A session is either logged out or logged in as exactly one identity.
Handlers call ``authorize()`` (or ``customer()``) before touching the
catalog or a cart, so role checks never leak into the domain services.
"""

from __future__ import annotations

import logging

from minitemu.domain.exceptions import AuthorizationError
from minitemu.domain.model.user import Command, Customer, Identity, Seller
from minitemu.domain.service.user_manager import UserManager

logger = logging.getLogger(__name__)


class Session:

    def __init__(self, user_manager: UserManager) -> None:
        self._user_manager = user_manager
        self._identity: Identity | None = None

    # --- State ----------------------------------------------------------------

    @property
    def is_logged_in(self) -> bool:
        return self._identity is not None

    @property
    def identity(self) -> Identity | None:
        return self._identity

    # --- Transitions ----------------------------------------------------------

    def login(self, username: str, password: str) -> Identity:
        """LoggedOut -> LoggedIn(identity)."""
        if self._identity is not None:
            raise AuthorizationError(
                f"Already logged in as '{self._identity.username}'. Log out first."
            )
        self._identity = self._user_manager.authenticate(username, password)
        logger.info("Session started for %r", username)
        return self._identity

    def logout(self) -> None:
        """LoggedIn -> LoggedOut."""
        identity = self.authorize(Command.LOGOUT)
        self._identity = None
        logger.info("Session ended for %r", identity.username)

    # --- Authorization --------------------------------------------------------

    def authorize(self, command: Command) -> Identity:
        """Return the current identity if its role may issue ``command``."""
        if self._identity is None:
            raise AuthorizationError("You must be logged in to do that.")
        if command not in self._identity.capabilities:
            logger.warning(
                "Rejected %s for %s %r",
                command.value, self._identity.role.value, self._identity.username,
            )
            raise AuthorizationError(
                f"A {self._identity.role.value} cannot perform '{command.value}'."
            )
        return self._identity

    def customer(self, command: Command) -> Customer:
        identity = self.authorize(command)
        if not isinstance(identity, Customer):
            raise AuthorizationError(f"Only customers can perform '{command.value}'.")
        return identity

    def seller(self, command: Command) -> Seller:
        identity = self.authorize(command)
        if not isinstance(identity, Seller):
            raise AuthorizationError(f"Only sellers can perform '{command.value}'.")
        return identity
