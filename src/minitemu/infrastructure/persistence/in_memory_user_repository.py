"""In-memory implementation of UserRepository, keyed by username."""

from __future__ import annotations

from minitemu.domain.model.user import Identity
from minitemu.domain.repository.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):

    def __init__(self) -> None:
        self._store: dict[str, Identity] = {}

    def get_by_username(self, username: str) -> Identity | None:
        return self._store.get(username)

    def list_all(self) -> list[Identity]:
        return list(self._store.values())

    def save(self, user: Identity) -> None:
        self._store[user.username] = user
