import logging
from typing import Optional

from recordkeeper.domain.exceptions import InvalidValueError, RecordKeeperException
from recordkeeper.domain.models import ElectronicItem, GroceryItem
from recordkeeper.domain.repository import TypedRepository

logger = logging.getLogger(__name__)


class WarehouseManager:
    """
    Keeps one repository per item kind and offers stock helpers that report
    domain errors instead of raising them.
    """

    def __init__(
            self,
            electronics: Optional[TypedRepository[ElectronicItem]] = None,
            groceries: Optional[TypedRepository[GroceryItem]] = None
    ):
        self.electronics = electronics if electronics is not None else TypedRepository()
        self.groceries = groceries if groceries is not None else TypedRepository()

    @staticmethod
    def increase_stock(repo: TypedRepository, entity_id: int, amount: int) -> bool:
        """Adds ``amount`` units to an item. Returns False (and logs) on a domain error."""
        try:
            if amount < 0:
                raise InvalidValueError("Quantity to add cannot be negative.", field="quantity")
            item = repo.get_by_id(entity_id)
            repo.update_quantity(entity_id, item.quantity + amount)
        except RecordKeeperException as e:
            logger.warning(f"Error increasing stock: {e}")
            return False
        return True

    @staticmethod
    def remove_item(repo: TypedRepository, entity_id: int) -> bool:
        """Removes an item. Returns False (and logs) when it does not exist."""
        try:
            repo.remove(entity_id)
        except RecordKeeperException as e:
            logger.warning(f"Error removing item: {e}")
            return False
        return True
