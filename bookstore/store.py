"""In-memory catalog store."""

import logging
import threading
from datetime import date
from decimal import Decimal
from typing import Callable

from .exceptions import NotFound, NotPurchasable
from .model import Item
from .services import DeliveryServices

logger = logging.getLogger(__name__)


class Bookstore:
    """Holds the catalog and processes purchases.

    Items are keyed by identifier. Variant specific behaviour is left to
    the item itself; the store only checks existence and purchasability
    before delegating.
    """

    def __init__(
        self,
        services: DeliveryServices | None = None,
        clock: Callable[[], date] = date.today,
    ):
        self.services = services or DeliveryServices()
        self.clock = clock
        self._inventory: dict[str, Item] = {}
        # Held across check-then-act in buy() so stock is never oversold
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._inventory)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._inventory

    def add(self, item: Item) -> None:
        """Add an item, replacing any item with the same identifier."""
        with self._lock:
            if item.identifier in self._inventory:
                logger.debug(f"Replacing existing entry for ISBN {item.identifier}")
            self._inventory[item.identifier] = item
        logger.info(f"Added {item.category()} - {item}")

    def remove_outdated(self, years_threshold: int) -> list[Item]:
        """Remove and return items older than years_threshold years."""
        current_year = self.clock().year
        removed: list[Item] = []

        with self._lock:
            for identifier, item in list(self._inventory.items()):
                if current_year - item.year > years_threshold:
                    del self._inventory[identifier]
                    removed.append(item)
                    logger.info(f"Removed outdated book - {item}")

        logger.info(f"Removed {len(removed)} outdated books")
        return removed

    def buy(self, identifier: str, quantity: int, email: str, address: str) -> Decimal:
        """
        Buy quantity copies of the item with the given identifier.

        Returns the total amount charged.

        Raises:
            NotFound: identifier is not in the catalog
            NotPurchasable: the item cannot be bought right now
            BookstoreError: whatever the item's own purchase rules raise
        """
        with self._lock:
            item = self._inventory.get(identifier)
            if item is None:
                raise NotFound(identifier)

            if not item.is_purchasable():
                raise NotPurchasable(item.title)

            total_amount = item.purchase(quantity, email, address, self.services)

        logger.info(f"Purchase completed. Total amount: ${total_amount}")
        return total_amount

    def get(self, identifier: str) -> Item | None:
        return self._inventory.get(identifier)

    def list_all(self) -> list[Item]:
        with self._lock:
            return list(self._inventory.values())

    def display_inventory(self) -> list[str]:
        """Log the current inventory and return the listed lines."""
        lines = []
        for item in self.list_all():
            line = f"{item.category()} - {item}"
            details = item.details()
            if details:
                line += f" ({details})"
            lines.append(line)

        logger.info("Current Inventory:")
        for line in lines:
            logger.info(f"  {line}")
        return lines
