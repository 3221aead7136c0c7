"""Vector specialised to hold integers."""

from typing import Iterator

from adtkit.vector import Vector

INT_MIN = -(2**31)
"""Returned by :meth:`IntVector.find` when the value is absent."""


def _check_int(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"IntVector holds integers, not {type(value).__name__}")
    return value


class IntVector:
    """Integer array with positional access and growth at the end."""

    __slots__ = ("_vec",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"vector size must not be negative, got {size}")
        self._vec = Vector()
        for _ in range(size):
            self._vec.append(0)

    def __len__(self) -> int:
        return len(self._vec)

    def __repr__(self) -> str:
        return f"IntVector({list(self._vec)!r})"

    def __getitem__(self, pos: int) -> int:
        return self._vec[pos]

    def __setitem__(self, pos: int, value: int) -> None:
        self._vec[pos] = _check_int(value)

    def __iter__(self) -> Iterator[int]:
        return iter(self._vec)

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        self._vec.append(_check_int(value))

    def remove_last(self) -> None:
        """Remove the last value."""
        self._vec.remove_last()

    def find(self, value: int) -> int:
        """Return the first stored value equal to ``value``, or INT_MIN if none."""
        found = self._vec.find(value)
        return INT_MIN if found is None else found