"""A doubly linked list that keeps the order in which items were added to its front."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Entry(Generic[T]):
    __slots__ = ("item", "left", "right")

    def __init__(self, item: T) -> None:
        self.item = item
        self.left: Optional[_Entry[T]] = None
        self.right: Optional[_Entry[T]] = None


class LinkedList(Generic[T]):
    """Doubly linked list of objects, tracked by identity.

    Items are inserted at the front. Iteration tolerates removal of the
    current item, so a list can be emptied while it is being walked.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Entry[T]] = None
        self._entries: dict[int, _Entry[T]] = {}
        for item in items:
            self.add_front(item)

    def add_front(self, item: T) -> None:
        """Insert ``item`` at the head of the list."""
        if id(item) in self._entries:
            raise ValueError("item is already in the list")
        entry = _Entry(item)
        if self._head is not None:
            entry.right = self._head
            self._head.left = entry
        self._head = entry
        self._entries[id(item)] = entry

    def remove(self, item: T) -> None:
        """Unlink ``item`` from the list."""
        entry = self._entries.pop(id(item), None)
        if entry is None:
            raise ValueError("item is not in the list")
        if self._head is entry:
            self._head = entry.right
        if entry.left is not None:
            entry.left.right = entry.right
        if entry.right is not None:
            entry.right.left = entry.left
        entry.left = None
        entry.right = None

    def __iter__(self) -> Iterator[T]:
        entry = self._head
        while entry is not None:
            following = entry.right
            yield entry.item
            entry = following

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: Any) -> bool:
        return id(item) in self._entries

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"