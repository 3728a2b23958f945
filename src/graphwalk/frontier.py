"""Frontier containers driving graph traversal.

Public API:
    Frontier: Protocol shared by the traversal containers.
    FifoFrontier: Queue frontier used by breadth-first search.
    LifoFrontier: Stack frontier used by depth-first search.
"""

from __future__ import annotations

from collections import deque
from typing import Protocol, runtime_checkable

from .types import Vertex


@runtime_checkable
class Frontier(Protocol):
    """Working set of discovered-but-unprocessed vertices."""

    pushes: int
    peak_size: int

    def push(self, vertex: Vertex) -> None:
        ...

    def pop(self) -> Vertex:
        """Remove and return the next vertex.

        Raises:
            IndexError: If the frontier is empty.
        """
        ...

    def __len__(self) -> int:
        ...

    def __bool__(self) -> bool:
        """True while vertices remain to be processed."""
        ...


class FifoFrontier:
    """First-in first-out frontier backed by a deque."""

    def __init__(self) -> None:
        self._items: deque[Vertex] = deque()
        self.pushes = 0
        self.peak_size = 0

    def push(self, vertex: Vertex) -> None:
        self._items.append(vertex)
        self.pushes += 1
        self.peak_size = max(self.peak_size, len(self._items))

    def pop(self) -> Vertex:
        if not self._items:
            raise IndexError("pop from an empty frontier")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class LifoFrontier:
    """Last-in first-out frontier backed by a list.

    Pushing a vertex that is already on the stack is allowed; depth-first
    search relies on it.
    """

    def __init__(self) -> None:
        self._items: list[Vertex] = []
        self.pushes = 0
        self.peak_size = 0

    def push(self, vertex: Vertex) -> None:
        self._items.append(vertex)
        self.pushes += 1
        self.peak_size = max(self.peak_size, len(self._items))

    def pop(self) -> Vertex:
        if not self._items:
            raise IndexError("pop from an empty frontier")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


__all__ = ["Frontier", "FifoFrontier", "LifoFrontier"]
