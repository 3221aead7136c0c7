"""Fibonacci numbers with a memo kept between calls."""

from adtkit.int_vector import IntVector

_memory: IntVector = IntVector()


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"fibonacci needs an integer, not {type(n).__name__}")
    if n < 0:
        raise ValueError(f"fibonacci is not defined for negative n, got {n}")
    if len(_memory) == 0:
        _memory.append(0)
        _memory.append(1)
    while len(_memory) <= n:
        size = len(_memory)
        _memory.append(_memory[size - 2] + _memory[size - 1])
    return _memory[n]


def fibonacci_reset() -> None:
    """Forget every remembered Fibonacci number."""
    global _memory
    _memory = IntVector()