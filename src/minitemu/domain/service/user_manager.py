"""Domain service: UserManager, the registry of identities."""

from __future__ import annotations

import logging

from minitemu.domain.exceptions import (
    AuthenticationError,
    DuplicateUsername,
    NotFoundError,
    ValidationError,
)
from minitemu.domain.model.user import Identity, Role, new_identity
from minitemu.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserManager:

    def __init__(self, user_repo: UserRepository, currency: str = "USD") -> None:
        self._user_repo = user_repo
        self._currency = currency

    def is_username_taken(self, username: str) -> bool:
        return self._user_repo.get_by_username(username) is not None

    def register(self, username: str, password: str, role: str | Role) -> Identity:
        """Register a Customer or Seller.

        Usernames are unique across both roles.
        """
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")
        parsed_role = Role.parse(role)

        if self.is_username_taken(username):
            raise DuplicateUsername(
                f"Username '{username}' already taken. "
                f"Please choose a different username."
            )

        user = new_identity(username, password, parsed_role, self._currency)
        self._user_repo.save(user)
        logger.info("Registered %s %r", parsed_role.value, username)
        return user

    def authenticate(self, username: str, password: str) -> Identity:
        for user in self._user_repo.list_all():
            if user.username == username and user.check_password(password):
                logger.info("Authenticated %r", username)
                return user
        logger.warning("Failed login attempt for %r", username)
        raise AuthenticationError("Invalid credentials. Please try again.")

    def get(self, username: str) -> Identity:
        user = self._user_repo.get_by_username(username)
        if user is None:
            raise NotFoundError(f"User not found: '{username}'")
        return user
