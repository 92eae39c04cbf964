"""Exercises on circles and lines: elimination orders and growing gaps."""

from __future__ import annotations

from collections.abc import Iterable

from sortedcontainers import SortedList


def josephus_order_k(n: int, k: int) -> list[int]:
    """Order in which children 1..n leave a circle when every (k+1)-th one is removed.

    Counting starts at child 1: ``k`` children are skipped, the next one leaves,
    and counting goes on from the child after it.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if k < 0:
        raise ValueError("k must not be negative")
    circle = SortedList(range(1, n + 1))
    removed: list[int] = []
    index = 0
    while circle:
        index = (index + k) % len(circle)
        removed.append(circle.pop(index))
    return removed


def josephus_order(n: int) -> list[int]:
    """Order in which children 1..n leave a circle when every second one is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return josephus_order_k(n, 1)


def longest_passages(length: int, positions: Iterable[int]) -> list[int]:
    """Longest stretch without a traffic light after each light is added.

    The street runs from 0 to ``length``; each position must lie in
    ``[0, length)``.
    """
    lights = SortedList([0, length])
    gaps = SortedList([length])
    longest: list[int] = []
    for pos in positions:
        if not 0 <= pos < length:
            raise ValueError(f"position {pos} is outside [0, {length})")
        index = lights.bisect_right(pos)
        right, left = lights[index], lights[index - 1]
        gaps.remove(right - left)
        gaps.add(right - pos)
        gaps.add(pos - left)
        if pos != left:
            lights.add(pos)
        longest.append(gaps[-1])
    return longest