"""JSON-store-backed implementation of UserRepository."""

from __future__ import annotations

from restopos.domain.model.user import User
from restopos.domain.repository.user_repository import UserRepository
from restopos.infrastructure.persistence.json_database import JsonDatabase


class JsonUserRepository(UserRepository):

    def __init__(self, db: JsonDatabase) -> None:
        self._db = db

    def get_by_id(self, user_id: int) -> User | None:
        for user in self._db.users:
            if user.id == user_id:
                return user
        return None

    def list_all(self) -> list[User]:
        return list(self._db.users)
