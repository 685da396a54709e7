"""Staff accounts used by the terminals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UserRole(Enum):
    CASHIER = "cashier"
    KITCHEN = "kitchen"
    ADMIN = "admin"


@dataclass(frozen=True)
class User:
    id: int
    mobile: str
    pin: str
    role: UserRole
    name: str

    def matches(self, mobile: str, pin: str) -> bool:
        return self.mobile == mobile and self.pin == pin
