"""Max-priority queue backed by a binary heap stored in a Vector."""

from typing import Any, Iterable, Optional

from adtkit.common import CompareFunc, DestroyFunc, default_compare
from adtkit.vector import Vector


class PriorityQueue:
    """Queue whose :meth:`remove_max` always takes the largest value by ``compare``.

    A destroy callback, when set, is called for every value that is removed.
    ``None`` is never passed to it.
    """

    __slots__ = ("_heap", "_compare", "_destroy_value")

    def __init__(
        self,
        compare: CompareFunc = default_compare,
        destroy_value: DestroyFunc = None,
        values: Optional[Iterable[Any]] = None,
    ) -> None:
        if compare is None:
            raise ValueError("a priority queue needs a compare function")
        self._compare = compare
        self._destroy_value = destroy_value
        # The heap's own vector never destroys: swapping values would trigger it.
        self._heap = Vector()
        if values is not None:
            for value in values:
                self.insert(value)

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]

    def _bubble_up(self, pos: int) -> None:
        heap = self._heap
        while pos > 0:
            parent = (pos - 1) // 2
            if self._compare(heap[parent], heap[pos]) >= 0:
                break
            self._swap(parent, pos)
            pos = parent

    def _bubble_down(self, pos: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * pos + 1
            if left >= size:
                return
            right = left + 1
            max_child = left
            if right < size and self._compare(heap[left], heap[right]) < 0:
                max_child = right
            if self._compare(heap[pos], heap[max_child]) >= 0:
                return
            self._swap(pos, max_child)
            pos = max_child

    def max(self) -> Any:
        """Return the largest value without removing it."""
        if not len(self._heap):
            raise IndexError("max of an empty priority queue")
        return self._heap[0]

    def insert(self, value: Any) -> None:
        """Add ``value`` to the queue."""
        self._heap.append(value)
        self._bubble_up(len(self._heap) - 1)

    def remove_max(self) -> None:
        """Remove the largest value, passing it to the destroy callback."""
        size = len(self._heap)
        if size == 0:
            raise IndexError("remove_max from an empty priority queue")
        value = self._heap[0]
        self._swap(0, size - 1)
        self._heap.remove_last()
        self._bubble_down(0)
        if self._destroy_value is not None and value is not None:
            self._destroy_value(value)

    def set_destroy_value(self, destroy_value: DestroyFunc) -> DestroyFunc:
        """Replace the destroy callback and return the previous one."""
        old = self._destroy_value
        self._destroy_value = destroy_value
        return old

    def clear(self) -> None:
        """Remove every value, passing each to the destroy callback."""
        values = list(self._heap)
        self._heap.clear()
        if self._destroy_value is not None:
            for value in values:
                if value is not None:
                    self._destroy_value(value)