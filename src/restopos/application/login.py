"""Application service: Login use case.

Static credential lookup for the terminals; there are no tokens or
sessions behind it.
"""

from __future__ import annotations

import logging

from restopos.domain.exceptions import AuthenticationError
from restopos.domain.model.user import User
from restopos.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class LoginHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, mobile: str, pin: str) -> User:
        for user in self._user_repo.list_all():
            if user.matches(mobile, pin):
                logger.info("User #%d (%s) logged in", user.id, user.role.value)
                return user
        raise AuthenticationError("Invalid credentials")
