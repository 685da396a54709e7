"""Data a fresh store starts with: the staff accounts and a starter menu."""

from __future__ import annotations

from restopos.domain.model.menu import MenuItem
from restopos.domain.model.user import User, UserRole
from restopos.domain.model.value_objects import Money


def default_users() -> list[User]:
    return [
        User(id=1, mobile="1234567890", pin="1234", role=UserRole.CASHIER, name="John Cashier"),
        User(id=2, mobile="9876543210", pin="5678", role=UserRole.KITCHEN, name="Sarah Kitchen"),
        User(id=3, mobile="5555555555", pin="9999", role=UserRole.ADMIN, name="Admin User"),
    ]


_MENU = [
    ("Butter Chicken", "Main Course", 350),
    ("Dal Makhani", "Main Course", 250),
    ("Paneer Tikka", "Starter", 280),
    ("Naan", "Breads", 40),
    ("Garlic Naan", "Breads", 50),
    ("Biryani", "Main Course", 320),
    ("Raita", "Sides", 60),
    ("Gulab Jamun", "Dessert", 80),
    ("Masala Dosa", "South Indian", 120),
    ("Filter Coffee", "Beverages", 50),
]


def default_menu() -> list[MenuItem]:
    return [
        MenuItem(id=i, name=name, category=category, price=Money.of(price))
        for i, (name, category, price) in enumerate(_MENU, start=1)
    ]
