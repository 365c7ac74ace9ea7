"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CAPACITY = 100


class StackError(Exception):
    """Base class for stack errors."""


class StackEmptyError(StackError, IndexError):
    """Raised when reading from an empty stack."""


class StackFullError(StackError, OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class ArrayStack:
    """A stack with a fixed maximum number of elements."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise StackFullError(
                "Desbordamiento - Pila llena. No se puede agregar mas elementos"
            )
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise StackEmptyError(
                "Subdesbordamiento - Pila vacia. No se puede sacar elemento."
            )
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self.is_empty():
            raise StackEmptyError("Pila vacia")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayStack):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"ArrayStack({list(self)!r}, capacity={self.capacity})"


@dataclass
class _Node:
    value: Any
    below: Optional["_Node"]


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._top is None:
            raise StackEmptyError("Pila vacia, no se puede sacar elemento")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self._top is None:
            raise StackEmptyError("Pila vacia")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __contains__(self, item: object) -> bool:
        return any(value == item for value in self)

    def matches_any_position(self, other: "LinkedStack") -> bool:
        """True if both stacks hold an equal element at the same depth from the top."""
        return any(mine == theirs for mine, theirs in zip(self, other))

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"