"""Variable-size array backed by a dynamic array with explicit capacity."""

from typing import Any, Iterator, Optional

from adtkit.common import CompareFunc, DestroyFunc, default_compare

MIN_CAPACITY = 10


class Vector:
    """Array of values with positional access and growth at the end.

    A destroy callback, when set, is called for every value that is removed
    or replaced. Empty slots hold ``None`` and are never passed to it.
    """

    __slots__ = ("_items", "_capacity", "_destroy_value")

    def __init__(self, size: int = 0, destroy_value: DestroyFunc = None) -> None:
        if size < 0:
            raise ValueError(f"vector size must not be negative, got {size}")
        self._items: list = [None] * size
        self._capacity = max(size, MIN_CAPACITY)
        self._destroy_value = destroy_value

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def _check_position(self, pos: int) -> None:
        if isinstance(pos, bool) or not isinstance(pos, int):
            raise TypeError(f"vector positions must be integers, not {type(pos).__name__}")
        if not 0 <= pos < len(self._items):
            raise IndexError(f"vector position {pos} out of range")

    def _destroy(self, value: Any) -> None:
        if self._destroy_value is not None and value is not None:
            self._destroy_value(value)

    def __getitem__(self, pos: int) -> Any:
        self._check_position(pos)
        return self._items[pos]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._check_position(pos)
        old = self._items[pos]
        if value is not old:
            self._destroy(old)
        self._items[pos] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, doubling the capacity when full."""
        if self._capacity == len(self._items):
            self._capacity *= 2
        self._items.append(value)

    def remove_last(self) -> None:
        """Remove the last value, shrinking the capacity when mostly empty."""
        if not self._items:
            raise IndexError("remove_last from an empty vector")
        value = self._items.pop()
        self._destroy(value)
        size = len(self._items)
        if self._capacity > size * 4 and self._capacity > 2 * MIN_CAPACITY:
            self._capacity //= 2

    def find(self, value: Any, compare: CompareFunc = default_compare) -> Optional[Any]:
        """Return the first stored value equivalent to ``value``, or None."""
        index = self.find_index(value, compare)
        return None if index is None else self._items[index]

    def find_index(self, value: Any, compare: CompareFunc = default_compare) -> Optional[int]:
        """Return the position of the first value equivalent to ``value``, or None."""
        return next(
            (pos for pos, item in enumerate(self._items) if compare(item, value) == 0),
            None,
        )

    def set_destroy_value(self, destroy_value: DestroyFunc) -> DestroyFunc:
        """Replace the destroy callback and return the previous one."""
        old = self._destroy_value
        self._destroy_value = destroy_value
        return old

    def clear(self) -> None:
        """Remove every value, passing each to the destroy callback."""
        items, self._items = self._items, []
        self._capacity = MIN_CAPACITY
        for value in items:
            self._destroy(value)

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity