"""Application service: Sign Up use case."""

from __future__ import annotations

from minitemu.domain.model.user import Identity, Role
from minitemu.domain.service.user_manager import UserManager


class SignUpHandler:

    def __init__(self, user_manager: UserManager) -> None:
        self._user_manager = user_manager

    def handle(self, username: str, password: str, role: str | Role) -> Identity:
        """Register a new customer or seller. No session is required."""
        return self._user_manager.register(username, password, role)
