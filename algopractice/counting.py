"""Counting problems solved with Fibonacci-style recurrences."""

from __future__ import annotations


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    previous, current = 1, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current