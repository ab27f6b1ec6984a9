import logging
from typing import List, Optional

from recordkeeper.domain.exceptions import DuplicateEntityError
from recordkeeper.domain.models import InventoryItem
from recordkeeper.domain.repository import TypedRepository
from recordkeeper.infrastructure.json_store import JsonFileStore

logger = logging.getLogger(__name__)


class InventoryLogService:
    """
    Inventory log kept in memory and persisted to a JSON file on demand.
    """

    def __init__(
            self,
            store: JsonFileStore[InventoryItem],
            repository: Optional[TypedRepository[InventoryItem]] = None
    ):
        self.store = store
        self.repository = repository if repository is not None else TypedRepository()

    def add(self, item: InventoryItem) -> None:
        self.repository.add(item)

    def items(self) -> List[InventoryItem]:
        return self.repository.get_all()

    def save(self) -> bool:
        saved = self.store.save(self.repository.get_all())
        if saved:
            logger.info(f"Saved {len(self.repository)} inventory items to {self.store.file_path}.")
        return saved

    def load(self) -> int:
        """
        Replaces the in-memory log with the file contents and returns the item count.
        A file that repeats an id is treated as malformed and loads as an empty log.
        """
        try:
            self.repository.load_all(self.store.load())
        except DuplicateEntityError as e:
            logger.error(f"Malformed data in {self.store.file_path}: {e}. Starting with an empty list.")
            self.repository.load_all([])
            return 0

        logger.info(f"Loaded {len(self.repository)} inventory items from {self.store.file_path}.")
        return len(self.repository)
