import logging
from pathlib import Path
from typing import Generic, List, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class JsonFileStore(Generic[M]):
    """
    Persists a full list of entities as a single JSON array.

    Persistence is best effort: every save overwrites the whole file, a failed
    save is logged and the caller carries on, and a load that cannot read or
    parse the file falls back to an empty list.
    """

    def __init__(self, file_path: Union[str, Path], model: Type[M]):
        self.file_path = Path(file_path)
        self.model = model
        self._adapter = TypeAdapter(List[model])

    def save(self, entities: Sequence[M]) -> bool:
        """
        Overwrites the file with ``entities``.

        Returns:
            bool: True if the file was written, False if the write failed.
        """
        payload = self._adapter.dump_json(list(entities), indent=2)
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_bytes(payload)
        except OSError as e:
            logger.error(f"Error saving {self.model.__name__} list to {self.file_path}: {e}")
            return False

        logger.debug(f"Saved {len(entities)} {self.model.__name__} entries to {self.file_path}.")
        return True

    def load(self) -> List[M]:
        """Reads the file back; returns an empty list if it is missing or unreadable."""
        try:
            raw = self.file_path.read_bytes()
        except FileNotFoundError:
            logger.info(f"{self.file_path} does not exist yet. Starting with an empty list.")
            return []
        except OSError as e:
            logger.error(f"Error loading from {self.file_path}: {e}")
            return []

        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Malformed data in {self.file_path}: {e.error_count()} validation error(s). Starting with an empty list.")
            return []
