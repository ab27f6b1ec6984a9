from typing import Callable, Dict, Generic, Hashable, List, TypeVar

from recordkeeper.domain.repository import T, TypedRepository

K = TypeVar("K", bound=Hashable)


class DerivedIndex(Generic[K, T]):
    """
    One-shot grouping projection over a repository, e.g. prescriptions by patient.

    The index is built by a full scan and is NOT maintained incrementally:
    after the source repository changes, ``is_stale`` turns True and the
    caller must call ``rebuild()`` to see the changes.
    """

    def __init__(self, source: TypedRepository[T], key: Callable[[T], K]):
        self._source = source
        self._key = key
        self._groups: Dict[K, List[T]] = {}
        self._built_at_revision = -1
        self.rebuild()

    def rebuild(self) -> None:
        """Rescans the source repository and replaces every group."""
        groups: Dict[K, List[T]] = {}
        for item in self._source.get_all():
            groups.setdefault(self._key(item), []).append(item)
        self._groups = groups
        self._built_at_revision = self._source.revision

    @property
    def is_stale(self) -> bool:
        return self._source.revision != self._built_at_revision

    def get_group(self, key: K) -> List[T]:
        """Returns the members grouped under ``key`` in scan order, or an empty list."""
        return list(self._groups.get(key, ()))

    def keys(self) -> List[K]:
        return list(self._groups)

    def __len__(self) -> int:
        return len(self._groups)
