"""Abstract repository for registered identities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from minitemu.domain.model.user import Identity


class UserRepository(ABC):

    @abstractmethod
    def get_by_username(self, username: str) -> Identity | None:
        """Return the identity registered under this username, or None."""

    @abstractmethod
    def list_all(self) -> list[Identity]:
        """Return every identity, in registration order."""

    @abstractmethod
    def save(self, user: Identity) -> None:
        """Store a new or updated identity."""
