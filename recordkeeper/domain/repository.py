import logging
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Protocol, TypeVar

from recordkeeper.domain.exceptions import DuplicateEntityError, InvalidValueError, NotFoundError

logger = logging.getLogger(__name__)


class Identifiable(Protocol):
    """Anything with a stable integer identity."""
    id: int


T = TypeVar("T", bound=Identifiable)


class TypedRepository(Generic[T]):
    """
    In-memory collection of entities keyed by their integer id.

    Entities are kept in insertion order, so enumeration and predicate
    lookups are deterministic. Every successful mutation bumps ``revision``,
    which lets projections such as DerivedIndex tell when they are out of date.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: Dict[int, T] = {}
        self._revision = 0
        for item in items:
            self.add(item)

    @property
    def revision(self) -> int:
        return self._revision

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items

    def add(self, item: T) -> None:
        """
        Stores a new entity.

        Raises:
            DuplicateEntityError: if an entity with the same id is already stored.
        """
        if item.id in self._items:
            raise DuplicateEntityError(item.id)
        self._items[item.id] = item
        self._revision += 1

    def get_by_id(self, entity_id: int) -> T:
        """
        Returns the entity stored under ``entity_id``.

        Raises:
            NotFoundError: if no such entity exists.
        """
        try:
            return self._items[entity_id]
        except KeyError:
            raise NotFoundError(entity_id) from None

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Returns the first entity (insertion order) matching ``predicate``, or None."""
        return next((item for item in self._items.values() if predicate(item)), None)

    def find_all(self, predicate: Callable[[T], bool]) -> List[T]:
        return [item for item in self._items.values() if predicate(item)]

    def remove(self, entity_id: int) -> T:
        """
        Deletes and returns the entity stored under ``entity_id``.

        Raises:
            NotFoundError: if no such entity exists.
        """
        if entity_id not in self._items:
            raise NotFoundError(entity_id)
        item = self._items.pop(entity_id)
        self._revision += 1
        return item

    def update_quantity(self, entity_id: int, quantity: int) -> T:
        """
        Sets the ``quantity`` field of a stored entity in place.

        Raises:
            InvalidValueError: if ``quantity`` is not a non-negative integer (checked before the lookup).
            NotFoundError: if no such entity exists.
        """
        return self.update_field(entity_id, "quantity", quantity)

    def update_field(self, entity_id: int, field: str, value: Any) -> T:
        """
        Assigns ``value`` to ``field`` on a stored entity in place.

        A ``quantity`` value is checked before the lookup. Every other value can
        only be checked against the stored entity's own model, so for those the
        lookup comes first. On rejection the stored value is left unchanged.

        Raises:
            InvalidValueError: if the value is rejected, or the field is not an updatable model field.
            NotFoundError: if no such entity exists.
        """
        if field == "quantity":
            _check_quantity(value)

        item = self.get_by_id(entity_id)
        if not _is_updatable(item, field):
            raise InvalidValueError(f"Field '{field}' cannot be updated.", field=field)

        try:
            setattr(item, field, value)
        except (ValueError, TypeError, AttributeError) as e:
            raise InvalidValueError(f"Invalid value for '{field}': {value!r}.", field=field) from e

        self._revision += 1
        logger.debug(f"Updated {field} of entity {entity_id} to {value!r}.")
        return item

    def get_all(self) -> List[T]:
        """Returns a snapshot of every entity in insertion order."""
        return list(self._items.values())

    def load_all(self, items: Iterable[T]) -> None:
        """
        Replaces the whole contents, e.g. with entities read back from storage.

        Raises:
            DuplicateEntityError: if ``items`` repeats an id; the previous contents are kept.
        """
        loaded: Dict[int, T] = {}
        for item in items:
            if item.id in loaded:
                raise DuplicateEntityError(item.id)
            loaded[item.id] = item
        self._items = loaded
        self._revision += 1

    def clear(self) -> None:
        self._items = {}
        self._revision += 1


def _check_quantity(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(f"Quantity must be an integer, got {value!r}.", field="quantity")
    if value < 0:
        raise InvalidValueError("Quantity cannot be negative.", field="quantity")


def _is_updatable(item: Any, field: str) -> bool:
    if field == "id" or field.startswith("_"):
        return False
    model_fields = getattr(type(item), "model_fields", None)
    if model_fields is not None:
        return field in model_fields
    return hasattr(item, field)
