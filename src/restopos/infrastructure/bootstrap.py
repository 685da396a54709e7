"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
One ``Services`` instance holds the store, the repositories on top of
it and the realtime hub; handlers are built from it on demand so every
component receives its collaborators explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

from restopos.application.add_menu_item import AddMenuItemHandler
from restopos.application.advance_status import AdvanceStatusHandler
from restopos.application.cancel_item import CancelItemHandler
from restopos.application.daily_report import DailyReportHandler
from restopos.application.generate_bill import GenerateBillHandler
from restopos.application.kot_log import KotLogRecorder
from restopos.application.list_orders import ListOrdersHandler
from restopos.application.login import LoginHandler
from restopos.application.reprint_kot import ReprintKotHandler
from restopos.application.show_order import ShowOrderHandler
from restopos.application.submit_order import SubmitOrderHandler
from restopos.application.update_menu_item import UpdateMenuItemHandler
from restopos.infrastructure.config import Settings
from restopos.infrastructure.persistence.json_bill_repository import JsonBillRepository
from restopos.infrastructure.persistence.json_database import JsonDatabase
from restopos.infrastructure.persistence.json_kot_log_repository import JsonKotLogRepository
from restopos.infrastructure.persistence.json_menu_repository import JsonMenuRepository
from restopos.infrastructure.persistence.json_order_repository import JsonOrderRepository
from restopos.infrastructure.persistence.json_user_repository import JsonUserRepository
from restopos.infrastructure.realtime.hub import RealtimeHub


@dataclass
class Services:
    settings: Settings
    database: JsonDatabase
    hub: RealtimeHub
    orders: JsonOrderRepository
    bills: JsonBillRepository
    kot_logs: JsonKotLogRepository
    menu: JsonMenuRepository
    users: JsonUserRepository
    kot_log: KotLogRecorder

    # --- Order lifecycle ------------------------------------------------------

    def submit_order(self) -> SubmitOrderHandler:
        return SubmitOrderHandler(
            order_repo=self.orders,
            menu_repo=self.menu,
            publisher=self.hub,
            kot_log=self.kot_log,
            user_repo=self.users,
            latency_budget_ms=self.settings.kot_latency_budget_ms,
        )

    def advance_status(self) -> AdvanceStatusHandler:
        return AdvanceStatusHandler(
            order_repo=self.orders,
            publisher=self.hub,
            enforce_transitions=self.settings.enforce_transitions,
        )

    def cancel_item(self) -> CancelItemHandler:
        return CancelItemHandler(order_repo=self.orders, publisher=self.hub)

    def list_orders(self) -> ListOrdersHandler:
        return ListOrdersHandler(order_repo=self.orders)

    def show_order(self) -> ShowOrderHandler:
        return ShowOrderHandler(order_repo=self.orders)

    def reprint_kot(self) -> ReprintKotHandler:
        return ReprintKotHandler(order_repo=self.orders, publisher=self.hub, kot_log=self.kot_log)

    # --- Billing and reports --------------------------------------------------

    def generate_bill(self) -> GenerateBillHandler:
        return GenerateBillHandler(
            order_repo=self.orders,
            bill_repo=self.bills,
            tax_rate=self.settings.tax_rate,
        )

    def daily_report(self) -> DailyReportHandler:
        return DailyReportHandler(bill_repo=self.bills)

    # --- Collaborators --------------------------------------------------------

    def add_menu_item(self) -> AddMenuItemHandler:
        return AddMenuItemHandler(menu_repo=self.menu)

    def update_menu_item(self) -> UpdateMenuItemHandler:
        return UpdateMenuItemHandler(menu_repo=self.menu)

    def login(self) -> LoginHandler:
        return LoginHandler(user_repo=self.users)


def build_services(settings: Settings, database: JsonDatabase | None = None) -> Services:
    """Load the store and wire everything on top of it."""
    if database is None:
        database = JsonDatabase(settings.database_path).load()

    kot_logs = JsonKotLogRepository(database)
    return Services(
        settings=settings,
        database=database,
        hub=RealtimeHub(),
        orders=JsonOrderRepository(database),
        bills=JsonBillRepository(database),
        kot_logs=kot_logs,
        menu=JsonMenuRepository(database),
        users=JsonUserRepository(database),
        kot_log=KotLogRecorder(kot_logs, window=settings.kot_log_window),
    )
