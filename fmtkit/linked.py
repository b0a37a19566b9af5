"""A singly linked list of arbitrary values."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps track of its tail and size."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, value: T) -> None:
        """Insert ``value`` at the start of the list."""
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Optional[T]:
        """The value of the final element, or None when the list is empty."""
        return None if self._tail is None else self._tail.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """A new list holding ``func(value)`` for every value, in order."""
        return LinkedList(func(value) for value in self)

    def clear(self, release: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element, passing each value to ``release`` if given."""
        while self._head is not None:
            node = self._head
            self._head = node.next
            self._size -= 1
            if self._head is None:
                self._tail = None
            if release is not None:
                release(node.value)