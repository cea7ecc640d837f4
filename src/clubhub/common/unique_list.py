from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from ..core.exceptions import DuplicateEntityError, EntityNotFoundError

T = TypeVar("T")


class UniqueList(Generic[T]):
    """Insertion-ordered list that rejects identity-colliding elements.

    ``is_same`` decides identity (e.g. same name for persons). It can be weaker
    than ``==``, so lookups go through it rather than through hashing.
    """

    def __init__(self, is_same: Callable[[T, T], bool], items: Iterable[T] = (), *, label: str = "entity"):
        self._is_same = is_same
        self._label = label
        self._items: list[T] = []
        self.set_all(items)

    def contains(self, item: T) -> bool:
        return self._index_of(item) is not None

    def add(self, item: T) -> None:
        if self.contains(item):
            raise DuplicateEntityError(f"Duplicate {self._label}: {item}")
        self._items.append(item)

    def set(self, target: T, replacement: T) -> None:
        index = self._index_of(target)
        if index is None:
            raise EntityNotFoundError(f"{self._label.capitalize()} not found: {target}")

        clash = self._index_of(replacement)
        if clash is not None and clash != index:
            raise DuplicateEntityError(f"Duplicate {self._label}: {replacement}")

        self._items[index] = replacement

    def remove(self, item: T) -> None:
        index = self._index_of(item)
        if index is None:
            raise EntityNotFoundError(f"{self._label.capitalize()} not found: {item}")
        del self._items[index]

    def set_all(self, items: Iterable[T]) -> None:
        fresh: list[T] = []
        for item in items:
            if any(self._is_same(existing, item) for existing in fresh):
                raise DuplicateEntityError(f"Duplicate {self._label}: {item}")
            fresh.append(item)
        self._items = fresh

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for item in self._items:
            if predicate(item):
                return item
        return None

    def copy(self) -> "UniqueList[T]":
        clone = UniqueList(self._is_same, label=self._label)
        # Elements are immutable, so the new list can share them.
        clone._items = list(self._items)
        return clone

    def as_list(self) -> list[T]:
        return list(self._items)

    def _index_of(self, item: T) -> Optional[int]:
        for i, existing in enumerate(self._items):
            if self._is_same(existing, item):
                return i
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"UniqueList({self._items!r})"
