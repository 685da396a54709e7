"""The store: every collection the POS keeps, behind one explicit object.

``JsonDatabase`` is constructed once by the composition root and handed
to each repository.  ``load()`` and ``persist()`` are the only places
that touch the disk.  With ``path=None`` the store lives in memory only.

All collections share one re-entrant lock.  Repositories hold it across
id assignment and the append that follows, so ``max + 1`` never hands
out the same id twice even when called from several threads.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path

from restopos.domain.model.bill import Bill
from restopos.domain.model.kot_log import KotLogEntry
from restopos.domain.model.menu import MenuItem
from restopos.domain.model.order import Order
from restopos.domain.model.user import User
from restopos.infrastructure.persistence import codec
from restopos.infrastructure.persistence.seed import default_menu, default_users

logger = logging.getLogger(__name__)


class JsonDatabase:

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self.lock = threading.RLock()
        self.users: list[User] = []
        self.menu: list[MenuItem] = []
        self.orders: list[Order] = []
        self.bills: list[Bill] = []
        self.kot_logs: list[KotLogEntry] = []

    @property
    def in_memory(self) -> bool:
        return self.path is None

    # --- Load / persist boundary ----------------------------------------------

    def load(self) -> JsonDatabase:
        """Read the file, or seed defaults (and write them) if there is none."""
        with self.lock:
            if self.path is not None and self.path.exists():
                raw = json.loads(self.path.read_text(encoding="utf-8"))
                self.users = [codec.user_from_dict(u) for u in raw.get("users", [])]
                self.menu = [codec.menu_item_from_dict(m) for m in raw.get("menu", [])]
                self.orders = [codec.order_from_dict(o) for o in raw.get("orders", [])]
                self.bills = [codec.bill_from_dict(b) for b in raw.get("bills", [])]
                self.kot_logs = [codec.kot_entry_from_dict(k) for k in raw.get("kotLogs", [])]
                logger.info(
                    "Database loaded from %s (%d orders, %d bills, %d KOT entries)",
                    self.path, len(self.orders), len(self.bills), len(self.kot_logs),
                )
            else:
                self.users = default_users()
                self.menu = default_menu()
                self.orders, self.bills, self.kot_logs = [], [], []
                self.persist()
                logger.info("New database initialized%s", "" if self.in_memory else f" at {self.path}")
        return self

    def persist(self) -> None:
        """Write every collection out.  A no-op for in-memory stores."""
        if self.path is None:
            return
        with self.lock:
            raw = {
                "users": [codec.user_to_dict(u, include_pin=True) for u in self.users],
                "menu": [codec.menu_item_to_dict(m) for m in self.menu],
                "orders": [codec.order_to_dict(o) for o in self.orders],
                "bills": [codec.bill_to_dict(b) for b in self.bills],
                "kotLogs": [codec.kot_entry_to_dict(k) for k in self.kot_logs],
            }
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp, self.path)
