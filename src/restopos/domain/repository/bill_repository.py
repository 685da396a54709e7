"""Abstract repository for bills."""

from __future__ import annotations

from abc import ABC, abstractmethod

from restopos.domain.model.bill import Bill
from restopos.domain.model.order import Order


class BillRepository(ABC):

    @abstractmethod
    def add(self, bill: Bill, order: Order) -> Bill:
        """Store a new bill together with its (now completed) order.

        Returns the bill with its assigned id.  Both writes land in the
        same persist so a bill never exists without its closed order.
        """

    @abstractmethod
    def list_all(self) -> list[Bill]:
        """Return every bill in creation order."""
