"""In-memory repositories of clients, vehicles and rents."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Optional, Protocol, TypeVar


class _Describable(Protocol):
    def info(self) -> str: ...


T = TypeVar("T", bound=_Describable)


class Repository(Generic[T]):
    """An ordered collection of items that ignores missing (None) items."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def get(self, index: int) -> Optional[T]:
        """Return the item at the index, or None if the index is out of range."""
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def add(self, item: Optional[T]) -> None:
        """Append an item; None is ignored."""
        if item is not None:
            self._items.append(item)

    def remove(self, item: Optional[T]) -> None:
        """Remove every occurrence of the very same item; None is ignored."""
        if item is not None:
            self._items = [existing for existing in self._items if existing is not item]

    def report(self) -> str:
        """Return the descriptions of all items, one per line."""
        return "".join(item.info() + "\n" for item in self._items)

    def size(self) -> int:
        return len(self._items)

    def find_by(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return the items that satisfy the predicate, in order."""
        return [item for item in self._items if predicate(item)]

    def find_all(self) -> list[T]:
        """Return a copy of all items."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))