"""Callback types shared by the containers and the default ordering."""

from typing import Any, Callable, Optional

CompareFunc = Callable[[Any, Any], int]
"""Three-way comparison: negative if a < b, zero if equivalent, positive if a > b."""

DestroyFunc = Optional[Callable[[Any], None]]
"""Called with a value whenever a container removes or replaces it."""


def default_compare(a: Any, b: Any) -> int:
    """Compare two values by their natural ordering, returning -1, 0 or 1."""
    return (a > b) - (a < b)