"""Binary min-heap priority queue used for the A* open set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Entry(Generic[T]):
    element: T
    priority: float


class PriorityQueue(Generic[T]):
    """Min-priority queue backed by a list-based binary heap.

    Every entry's priority is less than or equal to the priorities of
    both of its children. Order among equal priorities is unspecified.
    """

    def __init__(self) -> None:
        self._heap: list[_Entry[T]] = []

    def __len__(self) -> int:
        return len(self._heap)

    # -- public API -----------------------------------------------------------

    def enqueue(self, element: T, priority: float) -> None:
        self._heap.append(_Entry(element, priority))
        self._bubble_up(len(self._heap) - 1)

    def dequeue(self) -> T | None:
        """Remove and return the minimum-priority element, or ``None``."""
        if self.is_empty():
            return None
        self._swap(0, len(self._heap) - 1)
        entry = self._heap.pop()
        if self._heap:
            self._sink_down(0)
        return entry.element

    def peek(self) -> T | None:
        return self._heap[0].element if self._heap else None

    def is_empty(self) -> bool:
        return not self._heap

    # -- heap maintenance -----------------------------------------------------

    def _bubble_up(self, index: int) -> None:
        heap = self._heap
        priority = heap[index].priority
        while index > 0:
            parent = (index - 1) // 2
            if priority >= heap[parent].priority:
                break
            self._swap(index, parent)
            index = parent

    def _sink_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        priority = heap[index].priority
        while True:
            left = 2 * index + 1
            right = left + 1
            target: int | None = None

            if left < size and heap[left].priority < priority:
                target = left

            # The right child wins only when strictly smaller than both the
            # current entry and the left candidate.
            if right < size:
                bound = priority if target is None else heap[target].priority
                if heap[right].priority < bound:
                    target = right

            if target is None:
                break
            self._swap(index, target)
            index = target

    def _swap(self, i: int, j: int) -> None:
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
