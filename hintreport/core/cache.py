"""Read-through cache for case-insensitive name lookups."""

from typing import Callable, Dict, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class NameCache(Generic[T]):
    """Memoizes name lookups over one or more owned collections.

    A lookup checks the cache first; on a miss it scans the candidates and
    stores the first match. Entries are only dropped through :meth:`evict`.
    Not thread-safe.
    """

    def __init__(self, key: Callable[[T], str]):
        """Initialize the cache.

        Args:
            key: Returns the name of a candidate item
        """
        self._key = key
        self._entries: Dict[str, T] = {}

    def lookup(self, name: str, *candidates: Iterable[T]) -> Optional[T]:
        lowered = name.lower()
        item = self._entries.get(lowered)

        if item is None:
            for collection in candidates:
                item = next(
                    (c for c in collection if self._key(c).lower() == lowered),
                    None,
                )
                if item is not None:
                    self._entries[lowered] = item
                    break

        return item

    def evict(self, name: str) -> None:
        self._entries.pop(name.lower(), None)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)
