"""Find two numbers in a sequence that add up to a target."""

from typing import Iterable, Optional, Tuple

from adtkit.hash_map import HashMap, hash_int


def pair_sum(target: int, numbers: Iterable[int]) -> Optional[Tuple[int, int]]:
    """Return ``(a, b)`` with ``a + b == target``, b occurring before a, or None."""
    seen = HashMap(hash_func=hash_int)
    for a in numbers:
        b = target - a
        if b in seen:
            return a, b
        seen.insert(a, a)
    return None