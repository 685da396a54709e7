"""Abstract repository for staff accounts (read-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from restopos.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""
